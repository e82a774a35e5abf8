"""Unit tests for adb output parsers."""

from debloatctl.bridge.parsers import (
    extract_ipv4_address,
    first_device,
    parse_devices,
    parse_packages,
)
from debloatctl.models.device import DeviceKind


class TestParseDevices:
    """Tests for parse_devices."""

    def test_usb_device(self, usb_devices_output: str) -> None:
        """A serial without a colon is a USB device."""
        devices = parse_devices(usb_devices_output)

        assert len(devices) == 1
        assert devices[0].serial == "R58M123ABC"
        assert devices[0].kind == DeviceKind.USB

    def test_wireless_device(self, wireless_devices_output: str) -> None:
        """A host:port serial is a wireless device."""
        devices = parse_devices(wireless_devices_output)

        assert len(devices) == 1
        assert devices[0].serial == "192.168.1.42:5555"
        assert devices[0].is_wireless is True

    def test_no_devices(self, no_devices_output: str) -> None:
        """Header-only output yields no devices."""
        assert parse_devices(no_devices_output) == []

    def test_empty_output(self) -> None:
        """Empty output yields no devices."""
        assert parse_devices("") == []

    def test_long_listing_skips_unready_devices(self, mixed_devices_output: str) -> None:
        """Offline and unauthorized devices are ignored in `devices -l` output."""
        devices = parse_devices(mixed_devices_output)

        assert [d.serial for d in devices] == ["R58M123ABC", "192.168.1.42:5555"]
        assert [d.kind for d in devices] == [DeviceKind.USB, DeviceKind.WIRELESS]

    def test_keeps_raw_line(self, mixed_devices_output: str) -> None:
        """The listing line is kept for display."""
        devices = parse_devices(mixed_devices_output)
        assert "model:Pixel_4a" in devices[1].line

    def test_header_line_skipped_even_with_marker(self) -> None:
        """The first line never counts as a device."""
        output = "fake\tdevice\nR58M123ABC\tdevice\n"
        assert [d.serial for d in parse_devices(output)] == ["R58M123ABC"]

    def test_daemon_startup_noise(self) -> None:
        """Daemon startup messages are not devices."""
        output = (
            "* daemon not running; starting now at tcp:5037\n"
            "* daemon started successfully\n"
            "List of devices attached\n"
            "R58M123ABC\tdevice\n"
        )
        assert [d.serial for d in parse_devices(output)] == ["R58M123ABC"]


class TestFirstDevice:
    """Tests for first_device."""

    def test_returns_first_match(self, mixed_devices_output: str) -> None:
        """Only the first ready device is returned."""
        device = first_device(mixed_devices_output)

        assert device is not None
        assert device.serial == "R58M123ABC"

    def test_returns_none_without_devices(self, no_devices_output: str) -> None:
        """None is returned when nothing is connected."""
        assert first_device(no_devices_output) is None


class TestParsePackages:
    """Tests for parse_packages."""

    def test_strips_prefix(self, all_packages_output: str) -> None:
        """Names are the text after the prefix."""
        names = parse_packages(all_packages_output)

        assert names[0] == "com.android.systemui"
        assert "com.spotify.music" in names
        assert len(names) == 5

    def test_ignores_lines_without_prefix(self) -> None:
        """Lines that do not start with the prefix are dropped."""
        output = "WARNING: linker: something\npackage:com.example.app\n\nnot a package"
        assert parse_packages(output) == ["com.example.app"]

    def test_keeps_remainder_verbatim(self) -> None:
        """Only the exact prefix is removed; no further trimming happens."""
        output = "package:com.example.app \npackage: com.example.spaced"
        assert parse_packages(output) == ["com.example.app ", " com.example.spaced"]

    def test_reprefixing_reproduces_filtered_input(self, all_packages_output: str) -> None:
        """Re-adding the prefix gives back the package lines of the input."""
        output = "noise\n" + all_packages_output + "\nmore noise"
        names = parse_packages(output)

        rebuilt = "\n".join(f"package:{name}" for name in names)
        assert rebuilt == all_packages_output

    def test_empty_output(self) -> None:
        """Empty output yields no names."""
        assert parse_packages("") == []


class TestExtractIpv4Address:
    """Tests for extract_ipv4_address."""

    def test_extracts_address_without_mask(self, ip_addr_output: str) -> None:
        """The inet address is returned without its /mask suffix."""
        assert extract_ipv4_address(ip_addr_output) == "192.168.1.42"

    def test_ignores_ipv6_only(self) -> None:
        """An interface with only IPv6 yields None."""
        output = "    inet6 fe80::1/64 scope link"
        assert extract_ipv4_address(output) is None

    def test_ignores_loopback(self) -> None:
        """Loopback addresses are skipped in favour of later ones."""
        output = "    inet 127.0.0.1/8 scope host lo\n    inet 10.0.0.7/16 scope global wlan0"
        assert extract_ipv4_address(output) == "10.0.0.7"

    def test_returns_first_match(self) -> None:
        """Only the first address is returned."""
        output = "    inet 10.0.0.7/16 scope global\n    inet 10.0.0.8/16 scope global"
        assert extract_ipv4_address(output) == "10.0.0.7"

    def test_address_without_mask(self) -> None:
        """Addresses without a mask are returned as-is."""
        assert extract_ipv4_address("inet 192.168.0.5 brd x") == "192.168.0.5"

    def test_no_match(self) -> None:
        """Output without an inet line yields None."""
        assert extract_ipv4_address("Device \"wlan0\" does not exist.") is None
