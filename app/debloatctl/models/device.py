"""Device and connection models.

This module defines how a connected device and the session's
connection state are represented.
"""

from dataclasses import dataclass
from enum import Enum


class DeviceKind(Enum):
    """Transport a device is reachable through."""

    USB = "usb"
    WIRELESS = "wireless"


class ConnectionState(Enum):
    """Connection state tracked by the session.

    Attributes:
        DISCONNECTED: No ready device was found.
        USB: A device is attached over USB.
        WIRELESS: A device is connected over TCP/IP (serial is host:port).
    """

    DISCONNECTED = "disconnected"
    USB = "usb"
    WIRELESS = "wireless"

    @classmethod
    def for_kind(cls, kind: DeviceKind) -> "ConnectionState":
        """Map a device transport to the matching connected state."""
        return cls.WIRELESS if kind == DeviceKind.WIRELESS else cls.USB

    @property
    def label(self) -> str:
        """Human-readable status label."""
        return {
            ConnectionState.DISCONNECTED: "Not Connected",
            ConnectionState.USB: "USB Connected",
            ConnectionState.WIRELESS: "Wireless Connected",
        }[self]


@dataclass(frozen=True, slots=True)
class ConnectedDevice:
    """A ready device reported by the bridge tool.

    Attributes:
        serial: Device identifier (USB serial or host:port).
        kind: Transport inferred from the identifier.
        line: The raw listing line, kept for display.
    """

    serial: str
    kind: DeviceKind
    line: str = ""

    def __post_init__(self) -> None:
        """Validate device data after initialization."""
        if not self.serial:
            msg = "Device serial cannot be empty"
            raise ValueError(msg)

    @property
    def is_wireless(self) -> bool:
        """Check if the device is connected over the network."""
        return self.kind == DeviceKind.WIRELESS
