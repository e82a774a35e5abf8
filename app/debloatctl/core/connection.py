"""Connection state machine.

Tracks whether the session talks to a device over USB, over the
network, or not at all. State only changes through device discovery
and the explicit connect/disconnect operations below.
"""

import logging
import time

from debloatctl.bridge.errors import (
    BridgeError,
    NotConnectedError,
    PairingError,
    PairingStage,
)
from debloatctl.bridge.parsers import extract_ipv4_address, first_device, parse_devices
from debloatctl.bridge.runner import BridgeRunner
from debloatctl.core.settings import Settings
from debloatctl.models.device import ConnectedDevice, ConnectionState

logger = logging.getLogger(__name__)

WIRELESS_INTERFACE = "wlan0"


def _address(host: str, port: str | int) -> str:
    return f"{host}:{port}"


class ConnectionManager:
    """Owns the connection state and the active device identifier.

    Invariant: ``active_device`` is empty exactly when ``state`` is
    DISCONNECTED. Wireless identifiers are always ``host:port``.

    Attributes:
        state: Current connection state.
        active_device: Identifier of the tracked device ('' when disconnected).
    """

    def __init__(self, runner: BridgeRunner, settings: Settings | None = None) -> None:
        self._runner = runner
        self._settings = settings or Settings()
        self.state = ConnectionState.DISCONNECTED
        self.active_device = ""

    @property
    def is_connected(self) -> bool:
        """Check if a device is tracked."""
        return self.state != ConnectionState.DISCONNECTED

    def _set(self, state: ConnectionState, device: str) -> None:
        if state != self.state or device != self.active_device:
            logger.info("Connection %s -> %s (%s)", self.state.value, state.value, device or "-")
        self.state = state
        self.active_device = device

    def _reset(self) -> None:
        self._set(ConnectionState.DISCONNECTED, "")

    def refresh(self) -> ConnectionState:
        """Re-query connected devices and update state.

        The first ready device wins. When none is found, or the query
        itself fails, the state is reset to DISCONNECTED.

        Returns:
            The new connection state.
        """
        try:
            output = self._runner.run(["devices"])
        except BridgeError as e:
            logger.warning("Device discovery failed: %s", e)
            self._reset()
            return self.state

        device = first_device(output)
        if device is None:
            self._reset()
        else:
            self._set(ConnectionState.for_kind(device.kind), device.serial)
        return self.state

    def require_device(self) -> str:
        """Refresh state and return the active device identifier.

        Raises:
            NotConnectedError: If no device is connected.
        """
        if self.refresh() == ConnectionState.DISCONNECTED:
            msg = "No device connected. Connect a device first (USB or wireless)."
            raise NotConnectedError(msg)
        return self.active_device

    def list_devices(self) -> list[ConnectedDevice]:
        """List every ready device with its details.

        Unlike refresh(), this surfaces all devices and leaves the
        tracked state untouched.

        Raises:
            BridgeError: If the listing command fails.
        """
        return parse_devices(self._runner.run(["devices", "-l"]))

    def _device_listed(self) -> bool:
        try:
            output = self._runner.run(["devices"])
        except BridgeError as e:
            logger.warning("Device discovery failed: %s", e)
            return False
        return first_device(output) is not None

    def connect_wireless(self, ip: str, port: str | int, verify: bool = False) -> str:
        """Connect to a device over the network.

        On failure the previous state is kept. `adb connect` can exit 0
        without connecting, so with ``verify`` the device listing must
        show a ready device before the state moves to WIRELESS.

        Args:
            ip: Device IP address.
            port: adb port on the device.
            verify: Re-query the device listing after connecting.

        Returns:
            The new device identifier (``ip:port``).

        Raises:
            BridgeError: If the connect command fails.
            NotConnectedError: If ``verify`` is set and no device is listed.
        """
        address = _address(ip, port)
        self._runner.run(["connect", address])
        if self._settings.connect_settle:
            time.sleep(self._settings.connect_settle)
        if verify and not self._device_listed():
            msg = f"No device listed after connecting to {address}"
            raise NotConnectedError(msg)
        self._set(ConnectionState.WIRELESS, address)
        return address

    def pair_and_connect(
        self,
        ip: str,
        pairing_port: str | int,
        pairing_code: str,
        connect_port: str | int,
    ) -> str:
        """Pair with a device (Android 11+) and connect to it.

        State only moves to WIRELESS when both steps succeed.

        Args:
            ip: Device IP address.
            pairing_port: Port shown in the pairing dialog.
            pairing_code: Code shown in the pairing dialog.
            connect_port: Wireless debugging port.

        Returns:
            The new device identifier.

        Raises:
            PairingError: With the stage that failed.
        """
        try:
            self._runner.run(["pair", _address(ip, pairing_port), pairing_code])
        except BridgeError as e:
            raise PairingError(PairingStage.PAIR, e) from e

        try:
            return self.connect_wireless(ip, connect_port)
        except BridgeError as e:
            raise PairingError(PairingStage.CONNECT, e) from e

    def disconnect_wireless(self) -> bool:
        """Disconnect the tracked wireless device.

        The disconnect command is best-effort: the state becomes
        DISCONNECTED whatever adb reports.

        Returns:
            True if a wireless device was disconnected, False if the
            session was not wirelessly connected.
        """
        if self.state != ConnectionState.WIRELESS:
            return False

        try:
            self._runner.run(["disconnect", self.active_device])
        except BridgeError as e:
            logger.warning("Disconnect of %s reported failure: %s", self.active_device, e)

        self._reset()
        return True

    def enable_wireless_on_usb_device(self, port: str | int | None = None) -> None:
        """Switch a USB-attached device to TCP/IP mode.

        The host keeps using the USB transport; call connect_wireless()
        afterwards to switch over.

        Args:
            port: TCP port to listen on. Defaults to the configured port.

        Raises:
            NotConnectedError: If no USB device is connected.
            BridgeError: If the tcpip command fails.
        """
        if self.refresh() != ConnectionState.USB:
            msg = "Connect the device via USB first."
            raise NotConnectedError(msg)

        self._runner.run(["tcpip", str(port or self._settings.tcpip_port)])
        if self._settings.tcpip_settle:
            time.sleep(self._settings.tcpip_settle)

    def detect_device_ip(self) -> str | None:
        """Read the device's Wi-Fi IPv4 address.

        Returns:
            The address, or None if the device reports none.

        Raises:
            NotConnectedError: If no device is connected.
            BridgeError: If the interface query fails.
        """
        self.require_device()
        output = self._runner.run(["shell", "ip", "addr", "show", WIRELESS_INTERFACE])
        return extract_ipv4_address(output)
