"""Bridge command runner.

Executes the adb executable with argument lists and maps process
failures onto the bridge error taxonomy.
"""

import logging
import subprocess
from typing import Protocol

from debloatctl.bridge.errors import CommandFailedError, SpawnFailedError
from debloatctl.utils.shell import CommandResult, run_command

logger = logging.getLogger(__name__)

DEFAULT_EXECUTABLE = "adb"


class BridgeRunner(Protocol):
    """Capability to run the bridge tool.

    Implementations are injected into the session so tests can
    replace the real executable with canned output.
    """

    def invoke(self, args: list[str]) -> CommandResult:
        """Run the tool and return the raw result without checking the exit code."""
        ...

    def run(self, args: list[str]) -> str:
        """Run the tool and return stdout, raising on failure."""
        ...

    def is_available(self) -> bool:
        """Check whether the tool can be executed."""
        ...


class AdbRunner:
    """Runs adb as a blocking subprocess.

    Attributes:
        executable: Name or path of the adb binary.
        timeout: Per-command timeout in seconds (None disables it).

    Example:
        >>> runner = AdbRunner()
        >>> print(runner.run(["devices"]))
    """

    def __init__(self, executable: str = DEFAULT_EXECUTABLE, timeout: float | None = 60.0) -> None:
        self.executable = executable
        self.timeout = timeout

    def invoke(self, args: list[str]) -> CommandResult:
        """Run adb with the given arguments.

        Args:
            args: Arguments passed after the executable name.

        Returns:
            CommandResult with decoded stdout/stderr and the exit code.

        Raises:
            SpawnFailedError: If the executable cannot be started or times out.
        """
        command = [self.executable, *args]
        logger.debug("Running bridge command: %s", " ".join(command))

        try:
            result = run_command(command, timeout=self.timeout)
        except FileNotFoundError as e:
            raise SpawnFailedError(f"{self.executable} not found ({e.strerror or e})") from e
        except subprocess.TimeoutExpired as e:
            msg = f"{' '.join(command)} timed out after {e.timeout}s"
            raise SpawnFailedError(msg) from e
        except OSError as e:
            raise SpawnFailedError(str(e)) from e

        if not result.success:
            logger.debug(
                "Bridge command exited with %d: %s",
                result.returncode,
                result.stderr.strip()[:200],
            )
        return result

    def run(self, args: list[str]) -> str:
        """Run adb and return its standard output.

        Args:
            args: Arguments passed after the executable name.

        Returns:
            Captured standard output.

        Raises:
            SpawnFailedError: If the executable cannot be started.
            CommandFailedError: If adb exits with a non-zero status.
        """
        result = self.invoke(args)
        if not result.success:
            raise CommandFailedError(result.stderr, result.returncode)
        return result.stdout

    def is_available(self) -> bool:
        """Check whether adb can be executed at all."""
        try:
            return self.invoke(["version"]).success
        except SpawnFailedError:
            return False
