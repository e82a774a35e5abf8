"""Menu commands and their dispatch.

Menus are explicit IntEnums whose values are the numbers the operator
types. A Router maps each command to a handler taking the session.
"""

import logging
from collections.abc import Callable, Mapping
from enum import IntEnum
from typing import Generic, TypeVar

from rich.markup import escape

from debloatctl.bridge.errors import BridgeError, NotConnectedError
from debloatctl.core.session import Session
from debloatctl.utils.formatting import print_error, print_info

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=IntEnum)

Handler = Callable[[Session], object]


class MainCommand(IntEnum):
    """Entries of the main menu."""

    WIRELESS = 1
    LIST_PACKAGES = 2
    BLOATWARE = 3
    INTERACTIVE = 4
    REMOVE = 5
    RESTORE = 6
    SEARCH = 7
    DEVICES = 8
    BACKUP = 9
    DEVICE_INFO = 10
    EXIT = 11


class WirelessCommand(IntEnum):
    """Entries of the wireless debugging menu."""

    PAIR = 1
    LEGACY_CONNECT = 2
    DETECT_IP = 3
    ENABLE_WIRELESS = 4
    DISCONNECT = 5
    DEVICES = 6
    BACK = 7


class SelectionCommand(IntEnum):
    """Actions of the interactive selection mode.

    Their menu numbers follow the package numbers, so the value is an
    offset past the last package.
    """

    SELECT_ALL = 1
    DESELECT_ALL = 2
    FILTER = 3
    REMOVE_SELECTED = 4
    BACK = 5


MAIN_MENU_LABELS: dict[MainCommand, str] = {
    MainCommand.WIRELESS: "Wireless debugging menu",
    MainCommand.LIST_PACKAGES: "List all system packages",
    MainCommand.BLOATWARE: "List common bloatware",
    MainCommand.INTERACTIVE: "Interactive removal mode",
    MainCommand.REMOVE: "Remove specific package",
    MainCommand.RESTORE: "Restore package",
    MainCommand.SEARCH: "Search packages",
    MainCommand.DEVICES: "Show connected devices",
    MainCommand.BACKUP: "Create backup",
    MainCommand.DEVICE_INFO: "Show device info",
    MainCommand.EXIT: "Exit",
}

WIRELESS_MENU_LABELS: dict[WirelessCommand, str] = {
    WirelessCommand.PAIR: "Pair & Connect (Android 11+)",
    WirelessCommand.LEGACY_CONNECT: "Legacy wireless connection",
    WirelessCommand.DETECT_IP: "Auto-detect device IP",
    WirelessCommand.ENABLE_WIRELESS: "Enable wireless on USB device",
    WirelessCommand.DISCONNECT: "Disconnect wireless",
    WirelessCommand.DEVICES: "List connected devices",
    WirelessCommand.BACK: "Back to main menu",
}


class Router(Generic[C]):
    """Maps menu numbers to handlers.

    Commands without a handler (exit/back) are resolved but never
    dispatched; the menu loop handles them.

    Example:
        >>> router = Router(MainCommand, {MainCommand.DEVICES: show_devices})
        >>> router.dispatch(router.resolve(8), session)
    """

    def __init__(self, commands: type[C], handlers: Mapping[C, Handler]) -> None:
        self._commands = commands
        self._handlers = dict(handlers)

    def resolve(self, choice: int | None) -> C | None:
        """Map a typed number to a command, or None if it is not one."""
        if choice is None:
            return None
        try:
            return self._commands(choice)
        except ValueError:
            return None

    def dispatch(self, command: C, session: Session) -> None:
        """Run the handler for a command.

        Bridge failures end the current step only: they are reported and
        the menu keeps running.

        Raises:
            KeyError: If the command has no handler.
        """
        handler = self._handlers[command]
        logger.debug("Dispatching %s", command.name)
        try:
            handler(session)
        except NotConnectedError as e:
            print_error(escape(str(e)))
            print_info("Please connect a device first (USB or Wireless)")
        except BridgeError as e:
            print_error(escape(str(e)))
