"""Exceptions raised while driving the bridge tool."""

from enum import Enum


class BridgeError(RuntimeError):
    """Base class for all bridge tool failures."""


class SpawnFailedError(BridgeError):
    """The bridge executable could not be started.

    Attributes:
        reason: Human-readable cause (missing executable, permissions, timeout).
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to execute bridge tool: {reason}")


class CommandFailedError(BridgeError):
    """The bridge tool ran but exited with a non-zero status.

    Attributes:
        stderr: Diagnostic text captured from standard error.
        returncode: Exit code reported by the process.
    """

    def __init__(self, stderr: str, returncode: int = 1) -> None:
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(stderr.strip() or f"command exited with status {returncode}")


class NotConnectedError(BridgeError):
    """An operation needs a connected device but none is active."""

    def __init__(self, message: str = "No device connected") -> None:
        super().__init__(message)


class PairingStage(str, Enum):
    """Step of the pair-and-connect flow."""

    PAIR = "pair"
    CONNECT = "connect"


class PairingError(BridgeError):
    """Pair-and-connect failed at a specific stage.

    Attributes:
        stage: The step that failed.
        cause: The underlying bridge failure.
    """

    def __init__(self, stage: PairingStage, cause: BridgeError) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage.value.capitalize()} failed: {cause}")
