"""Unit tests for menu routing."""

from unittest.mock import MagicMock

import pytest
from debloatctl.bridge.errors import CommandFailedError, NotConnectedError
from debloatctl.cli.router import (
    MAIN_MENU_LABELS,
    WIRELESS_MENU_LABELS,
    MainCommand,
    Router,
    WirelessCommand,
)
from debloatctl.core.session import Session


class TestMenuCommands:
    """Tests for the menu enums."""

    def test_main_menu_numbers(self) -> None:
        """Main menu entries are numbered 1 to 11."""
        assert [int(c) for c in MainCommand] == list(range(1, 12))
        assert set(MAIN_MENU_LABELS) == set(MainCommand)

    def test_wireless_menu_numbers(self) -> None:
        """Wireless menu entries are numbered 1 to 7."""
        assert [int(c) for c in WirelessCommand] == list(range(1, 8))
        assert set(WIRELESS_MENU_LABELS) == set(WirelessCommand)


class TestRouter:
    """Tests for Router class."""

    @pytest.fixture
    def handler(self) -> MagicMock:
        """Handler recording its calls."""
        return MagicMock()

    @pytest.fixture
    def router(self, handler: MagicMock) -> Router[MainCommand]:
        """Router with a single handler."""
        return Router(MainCommand, {MainCommand.DEVICES: handler})

    @pytest.mark.parametrize(
        ("choice", "expected"), [(8, MainCommand.DEVICES), (11, MainCommand.EXIT)]
    )
    def test_resolve_valid(
        self, router: Router[MainCommand], choice: int, expected: MainCommand
    ) -> None:
        """Numbers on the menu resolve to their command."""
        assert router.resolve(choice) == expected

    @pytest.mark.parametrize("choice", [0, 12, -1, None])
    def test_resolve_invalid(self, router: Router[MainCommand], choice: int | None) -> None:
        """Numbers off the menu and non-numbers resolve to None."""
        assert router.resolve(choice) is None

    def test_dispatch_calls_handler(
        self, router: Router[MainCommand], handler: MagicMock, session: Session
    ) -> None:
        """dispatch passes the session to the handler."""
        router.dispatch(MainCommand.DEVICES, session)
        handler.assert_called_once_with(session)

    def test_dispatch_without_handler(self, router: Router[MainCommand], session: Session) -> None:
        """Commands without a handler raise KeyError."""
        with pytest.raises(KeyError):
            router.dispatch(MainCommand.EXIT, session)

    def test_dispatch_reports_not_connected(
        self,
        router: Router[MainCommand],
        handler: MagicMock,
        session: Session,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """A missing device ends the step with a hint instead of raising."""
        handler.side_effect = NotConnectedError()

        router.dispatch(MainCommand.DEVICES, session)

        captured = capsys.readouterr()
        assert "No device connected" in captured.err
        assert "connect a device first" in captured.out

    def test_dispatch_reports_bridge_failure(
        self,
        router: Router[MainCommand],
        handler: MagicMock,
        session: Session,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Bridge failures end the step without raising."""
        handler.side_effect = CommandFailedError("error: closed")

        router.dispatch(MainCommand.DEVICES, session)

        assert "error: closed" in capsys.readouterr().err
