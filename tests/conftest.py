"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules, including a
scripted stand-in for the adb executable.
"""

from collections.abc import Iterable

import pytest
from debloatctl.bridge.errors import CommandFailedError
from debloatctl.core.session import Session
from debloatctl.core.settings import Settings
from debloatctl.utils.shell import CommandResult


EMPTY_RESULT = CommandResult(stdout="", stderr="", returncode=0)


class FakeRunner:
    """Scripted bridge runner.

    Responses are keyed by the exact argument list. Commands without a
    scripted response succeed with empty output.
    """

    def __init__(self, available: bool = True) -> None:
        self.available = available
        self.calls: list[list[str]] = []
        self._responses: dict[tuple[str, ...], CommandResult | Exception] = {}

    def set(
        self, args: Iterable[str], stdout: str = "", stderr: str = "", returncode: int = 0
    ) -> None:
        result = CommandResult(stdout=stdout, stderr=stderr, returncode=returncode)
        self._responses[tuple(args)] = result

    def fail(self, args: Iterable[str], stderr: str = "Failure", returncode: int = 1) -> None:
        self.set(args, stderr=stderr, returncode=returncode)

    def raise_on(self, args: Iterable[str], error: Exception) -> None:
        self._responses[tuple(args)] = error

    def invoke(self, args: list[str]) -> CommandResult:
        self.calls.append(list(args))
        response = self._responses.get(tuple(args), EMPTY_RESULT)
        if isinstance(response, Exception):
            raise response
        return response

    def run(self, args: list[str]) -> str:
        result = self.invoke(args)
        if not result.success:
            raise CommandFailedError(result.stderr, result.returncode)
        return result.stdout

    def is_available(self) -> bool:
        return self.available

    def was_called(self, args: Iterable[str]) -> bool:
        return list(args) in self.calls


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Create a scripted runner with no responses."""
    return FakeRunner()


@pytest.fixture
def settings() -> Settings:
    """Settings without settle pauses."""
    return Settings(connect_settle=0, tcpip_settle=0)


@pytest.fixture
def session(fake_runner: FakeRunner, settings: Settings) -> Session:
    """Session driving the scripted runner."""
    return Session(fake_runner, settings)


@pytest.fixture
def usb_devices_output() -> str:
    """Sample `adb devices` output with one USB device."""
    return "List of devices attached\nR58M123ABC\tdevice\n\n"


@pytest.fixture
def wireless_devices_output() -> str:
    """Sample `adb devices` output with one wireless device."""
    return "List of devices attached\n192.168.1.42:5555\tdevice\n\n"


@pytest.fixture
def mixed_devices_output() -> str:
    """Sample `adb devices -l` output with USB, wireless and unready devices."""
    return (
        "List of devices attached\n"
        "R58M123ABC             device usb:1-1 product:beyond1 model:SM_G973F device:beyond1\n"
        "192.168.1.42:5555      device product:sunfish model:Pixel_4a device:sunfish\n"
        "emulator-5556          offline\n"
        "0123456789ABCDEF       unauthorized usb:1-2\n"
    )


@pytest.fixture
def no_devices_output() -> str:
    """Sample `adb devices` output with no device attached."""
    return "List of devices attached\n\n"


@pytest.fixture
def system_packages_output() -> str:
    """Sample `pm list packages -s` output."""
    return """package:com.android.systemui
package:com.samsung.android.bixby.agent
package:com.android.bips
package:com.facebook.system
package:android"""


@pytest.fixture
def all_packages_output() -> str:
    """Sample `pm list packages` output."""
    return """package:com.android.systemui
package:com.spotify.music
package:com.facebook.katana
package:com.google.android.youtube
package:org.mozilla.firefox"""


@pytest.fixture
def ip_addr_output() -> str:
    """Sample `ip addr show wlan0` output."""
    return """30: wlan0: <BROADCAST,MULTICAST,UP,LOWER_UP> mtu 1500 qdisc mq state UP qlen 3000
    link/ether 3a:1f:8c:5d:22:10 brd ff:ff:ff:ff:ff:ff
    inet6 fe80::381f:8cff:fe5d:2210/64 scope link
       valid_lft forever preferred_lft forever
    inet 192.168.1.42/24 brd 192.168.1.255 scope global wlan0
       valid_lft forever preferred_lft forever"""
