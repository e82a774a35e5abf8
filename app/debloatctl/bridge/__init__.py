"""Bridge tool access: command runner, output parsers and errors."""

from debloatctl.bridge.errors import (
    BridgeError,
    CommandFailedError,
    NotConnectedError,
    PairingError,
    PairingStage,
    SpawnFailedError,
)
from debloatctl.bridge.runner import AdbRunner, BridgeRunner

__all__ = [
    "AdbRunner",
    "BridgeError",
    "BridgeRunner",
    "CommandFailedError",
    "NotConnectedError",
    "PairingError",
    "PairingStage",
    "SpawnFailedError",
]
