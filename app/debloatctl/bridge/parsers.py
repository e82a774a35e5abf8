"""Parsers for adb text output.

All functions are pure: they never perform I/O and never raise on
unexpected input. Missing tokens simply produce an empty result.
"""

from debloatctl.models.device import ConnectedDevice, DeviceKind

# Marker adb prints after the serial of a ready device ("emulator-5554\tdevice").
# `adb devices -l` pads with spaces instead, so the state field is checked too.
DEVICE_STATUS_MARKER = "\tdevice"
READY_STATE = "device"
DEVICE_LIST_HEADER = "List of"

# Prefix adb prints before every name in `pm list packages` output.
PACKAGE_PREFIX = "package:"

IPV4_MARKER = "inet "
IPV6_MARKER = "inet6"
LOOPBACK_ADDRESS = "127.0.0.1"


def parse_devices(output: str) -> list[ConnectedDevice]:
    """Parse `adb devices` or `adb devices -l` output.

    The first line is the header and is skipped. Offline and
    unauthorized devices do not carry the status marker and are ignored.

    Args:
        output: Raw standard output of the device listing.

    Returns:
        Ready devices in listing order.
    """
    devices: list[ConnectedDevice] = []

    for index, line in enumerate(output.splitlines()):
        if index == 0:
            continue
        if DEVICE_LIST_HEADER in line:
            continue

        fields = line.split()
        if len(fields) < 2:
            continue
        if DEVICE_STATUS_MARKER not in line and fields[1] != READY_STATE:
            continue

        serial = fields[0]
        kind = DeviceKind.WIRELESS if ":" in serial else DeviceKind.USB
        devices.append(ConnectedDevice(serial=serial, kind=kind, line=line))

    return devices


def first_device(output: str) -> ConnectedDevice | None:
    """Return the first ready device in a listing, if any."""
    devices = parse_devices(output)
    return devices[0] if devices else None


def parse_packages(output: str) -> list[str]:
    """Extract package names from `pm list packages` output.

    Only the exact prefix is stripped; the remainder is kept verbatim.

    Args:
        output: Raw standard output of the package listing.

    Returns:
        Package names in output order.
    """
    return [
        line.removeprefix(PACKAGE_PREFIX)
        for line in output.splitlines()
        if line.startswith(PACKAGE_PREFIX)
    ]


def extract_ipv4_address(output: str) -> str | None:
    """Find the first non-loopback IPv4 address in `ip addr` output.

    Example line: ``    inet 192.168.1.42/24 brd 192.168.1.255 scope global wlan0``

    Args:
        output: Raw output of a network-interface query.

    Returns:
        The address without its mask suffix, or None if absent.
    """
    for line in output.splitlines():
        if IPV4_MARKER not in line or IPV6_MARKER in line or LOOPBACK_ADDRESS in line:
            continue

        fields = line.split()
        for index, field in enumerate(fields[:-1]):
            if field == "inet":
                return fields[index + 1].split("/")[0]

    return None
