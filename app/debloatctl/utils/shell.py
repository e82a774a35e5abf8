"""Subprocess helpers.

Captured commands are decoded permissively; interactive commands inherit
the terminal.
"""

import os
import shutil
import subprocess
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured output and exit status of a finished process.

    Attributes:
        stdout: Decoded standard output.
        stderr: Decoded standard error.
        returncode: Process exit status.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """True when the process exited with status 0."""
        return self.returncode == 0


def _decode(data: bytes | None) -> str:
    """Decode process output, replacing invalid byte sequences."""
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def run_command(
    args: list[str],
    *,
    timeout: float | None = 60.0,
) -> CommandResult:
    """Execute a command and return the result.

    Output is captured as bytes and decoded as UTF-8 with invalid
    sequences replaced, so device-side output in any encoding never
    causes a decoding failure.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait for command.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
        OSError: If the command cannot be executed.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        check=False,
        timeout=timeout,
    )
    return CommandResult(
        stdout=_decode(result.stdout),
        stderr=_decode(result.stderr),
        returncode=result.returncode,
    )


def command_exists(name: str) -> bool:
    """Check whether an executable can be found on PATH."""
    return shutil.which(name) is not None


def run_interactive(
    args: list[str],
    *,
    env: dict[str, str] | None = None,
) -> int:
    """Execute a command interactively, inheriting the terminal.

    Unlike run_command(), this does NOT capture stdout/stderr, so
    package managers can show progress and ask for a sudo password.

    Args:
        args: Command and arguments to execute.
        env: Additional environment variables (merged with current env).

    Returns:
        Exit code of the command.

    Raises:
        FileNotFoundError: If command executable is not found.
        OSError: If command cannot be executed.
    """
    full_env = {**os.environ, **(env or {})}
    result = subprocess.run(args, check=False, env=full_env)
    return result.returncode
