"""Bridge tool installer.

Detects a host package manager able to install adb and runs its install
commands interactively so the user can answer sudo prompts.
"""

import logging
import platform
from dataclasses import dataclass

from debloatctl.utils.shell import command_exists, run_interactive

logger = logging.getLogger(__name__)

PLATFORM_TOOLS_URL = "https://developer.android.com/tools/releases/platform-tools"


@dataclass(frozen=True, slots=True)
class InstallMethod:
    """A way to install adb with a host package manager.

    Attributes:
        manager: Executable whose presence selects this method.
        label: Human-readable name of the package manager.
        commands: Commands to run in order.
        needs_sudo: Whether the commands ask for elevated privileges.
    """

    manager: str
    label: str
    commands: tuple[tuple[str, ...], ...]
    needs_sudo: bool = False

    @property
    def manual_hint(self) -> str:
        """Command line the user can run by hand."""
        return " && ".join(" ".join(cmd) for cmd in self.commands)


# Candidates per platform.system() value, in detection order.
INSTALL_METHODS: dict[str, tuple[InstallMethod, ...]] = {
    "Linux": (
        InstallMethod(
            "nix-env", "Nix", (("nix-env", "-iA", "nixpkgs.android-tools"),)
        ),
        InstallMethod(
            "pacman",
            "pacman (Arch Linux)",
            (("sudo", "pacman", "-S", "--noconfirm", "android-tools"),),
            needs_sudo=True,
        ),
        InstallMethod(
            "apt",
            "APT (Debian/Ubuntu)",
            (("sudo", "apt", "update"), ("sudo", "apt", "install", "-y", "adb")),
            needs_sudo=True,
        ),
        InstallMethod(
            "dnf",
            "DNF (Fedora)",
            (("sudo", "dnf", "install", "-y", "android-tools"),),
            needs_sudo=True,
        ),
        InstallMethod(
            "zypper",
            "Zypper (openSUSE)",
            (("sudo", "zypper", "install", "-y", "android-tools"),),
            needs_sudo=True,
        ),
    ),
    "Windows": (
        InstallMethod("winget", "winget", (("winget", "install", "Google.PlatformTools"),)),
        InstallMethod("choco", "Chocolatey", (("choco", "install", "adb", "-y"),)),
    ),
    "Darwin": (
        InstallMethod("brew", "Homebrew", (("brew", "install", "android-platform-tools"),)),
    ),
}


def get_install_methods(system: str | None = None) -> tuple[InstallMethod, ...]:
    """Get every known install method for a platform.

    Args:
        system: platform.system() value. Defaults to the current host.

    Returns:
        Methods in detection order (empty for unsupported platforms).
    """
    return INSTALL_METHODS.get(system or platform.system(), ())


def get_available_methods(system: str | None = None) -> list[InstallMethod]:
    """Get install methods whose package manager is present on this host."""
    return [m for m in get_install_methods(system) if command_exists(m.manager)]


def install_with(method: InstallMethod) -> bool:
    """Run an install method's commands, stopping at the first failure.

    Args:
        method: Method to run.

    Returns:
        True if every command exited successfully.
    """
    for command in method.commands:
        logger.info("Running installer command: %s", " ".join(command))
        try:
            returncode = run_interactive(list(command))
        except OSError as e:
            logger.warning("Installer command %s could not run: %s", command[0], e)
            return False
        if returncode != 0:
            logger.warning("Installer command exited with %d", returncode)
            return False
    return True
