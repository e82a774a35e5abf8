"""Install-adb command implementation.

Installs Android platform tools with the host's package manager.
"""

from typing import Annotated

import typer

from debloatctl.cli.prompts import confirm
from debloatctl.core.installer import (
    PLATFORM_TOOLS_URL,
    get_available_methods,
    install_with,
)
from debloatctl.utils.formatting import print_error, print_info, print_success, print_warning

app = typer.Typer(
    help="Install adb with the system package manager.",
    invoke_without_command=True,
)


def run_installer(assume_yes: bool = False) -> bool:
    """Try each available install method until one succeeds.

    Args:
        assume_yes: Do not ask before running a method.

    Returns:
        True if adb was installed.
    """
    print_info("Detecting package manager...")
    methods = get_available_methods()

    if not methods:
        print_error("Could not detect a supported package manager.")
        print_info(f"Download platform tools from: {PLATFORM_TOOLS_URL}")
        return False

    for method in methods:
        print_success(f"Detected {method.label}")
        if not assume_yes and not confirm(f"Install ADB using {method.manager}?"):
            continue
        if method.needs_sudo:
            print_warning("This requires sudo access")

        if install_with(method):
            print_success("ADB installed successfully!")
            print_info("You may need to restart your terminal for adb to be on PATH.")
            return True

        print_error(f"Installation failed. Try manually with: {method.manual_hint}")

    print_info(f"Download platform tools from: {PLATFORM_TOOLS_URL}")
    return False


@app.callback(invoke_without_command=True)
def install_adb(
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Install without asking for confirmation.",
        ),
    ] = False,
) -> None:
    """Install adb using nix, pacman, apt, dnf, zypper, winget, choco or brew.

    Examples:
        debloatctl install-adb
        debloatctl install-adb --yes
    """
    if not run_installer(assume_yes=yes):
        raise typer.Exit(code=1)
