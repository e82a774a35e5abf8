"""Data models for debloatctl.

This module exports the core data structures used throughout the application.
"""

from debloatctl.models.device import ConnectedDevice, ConnectionState, DeviceKind
from debloatctl.models.package import MutationResult, Outcome, Package

__all__ = [
    "ConnectedDevice",
    "ConnectionState",
    "DeviceKind",
    "MutationResult",
    "Outcome",
    "Package",
]
