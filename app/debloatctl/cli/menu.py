"""Interactive console.

Renders the main menu, the wireless debugging menu and the interactive
selection mode, collects operator input, and hands the work to the
shared actions through the menu routers.
"""

import logging
from collections.abc import Mapping

from rich.markup import escape
from rich.panel import Panel

from debloatctl.bridge.errors import NotConnectedError
from debloatctl.cli import actions
from debloatctl.cli.display import format_connection_status, print_packages
from debloatctl.cli.prompts import ask, ask_choice
from debloatctl.cli.router import (
    MAIN_MENU_LABELS,
    WIRELESS_MENU_LABELS,
    C,
    MainCommand,
    Router,
    SelectionCommand,
    WirelessCommand,
)
from debloatctl.core.session import Session
from debloatctl.utils.formatting import console, print_error, print_success, print_warning

logger = logging.getLogger(__name__)


def _render_menu(title: str, labels: Mapping[C, str], style: str, status: str = "") -> None:
    lines = [status, ""] if status else []
    lines += [f"[{style}]{int(cmd):>3}.[/{style}] {label}" for cmd, label in labels.items()]
    console.print()
    console.print(Panel("\n".join(lines), title=title, border_style=style, expand=False))


def _invalid_choice(choice: int | None) -> None:
    if choice is None:
        print_error("Invalid input! Please enter a number.")
    else:
        print_error("Invalid choice!")


# -- Wireless menu handlers ----------------------------------------------------


def pair_flow(session: Session) -> None:
    """Prompt for pairing details and pair with the device."""
    console.print("\n[warning]On your Android device:[/warning]")
    console.print("  1. Go to: Settings -> Developer Options")
    console.print("  2. Enable 'Wireless Debugging'")
    console.print("  3. Tap 'Pair device with pairing code'")
    console.print("  4. Note the IP address, port, and pairing code\n")

    ip = ask("Enter device IP address")
    if not ip:
        print_warning("Operation cancelled.")
        return

    pairing_port = ask("Enter pairing port")
    pairing_code = ask("Enter pairing code")
    connect_port = ask("Enter connection port (shown under Wireless Debugging)", default="5555")
    actions.pair_device(session, ip, pairing_port, pairing_code, connect_port)


def legacy_connect_flow(session: Session) -> None:
    """Connect over TCP/IP, preparing a USB device first when one is attached."""
    console.print("\n[warning]Requirements:[/warning]")
    console.print("  1. Device connected via USB first (or already listening on TCP/IP)")
    console.print("  2. Device and computer on same Wi-Fi network\n")

    port = session.settings.tcpip_port
    try:
        ip = actions.prepare_usb_device(session)
        if not ip:
            ip = ask("Could not auto-detect IP. Enter device IP address")
    except NotConnectedError:
        print_warning("No USB device detected. Manual connection mode.")
        ip = ask("Enter device IP address")
        port = ask("Enter port", default=port)

    if not ip:
        print_warning("Operation cancelled.")
        return

    actions.connect_device(session, ip, port)


def detect_ip_flow(session: Session) -> None:
    """Show the connected device's IP address."""
    actions.detect_ip(session)


def enable_wireless_flow(session: Session) -> None:
    """Switch the USB device to TCP/IP mode."""
    actions.enable_wireless(session)


def disconnect_flow(session: Session) -> None:
    """Disconnect the wireless device tracked by the session."""
    actions.disconnect_device(session)


WIRELESS_ROUTER: Router[WirelessCommand] = Router(
    WirelessCommand,
    {
        WirelessCommand.PAIR: pair_flow,
        WirelessCommand.LEGACY_CONNECT: legacy_connect_flow,
        WirelessCommand.DETECT_IP: detect_ip_flow,
        WirelessCommand.ENABLE_WIRELESS: enable_wireless_flow,
        WirelessCommand.DISCONNECT: disconnect_flow,
        WirelessCommand.DEVICES: actions.show_devices,
    },
)


def wireless_menu(session: Session) -> None:
    """Run the wireless debugging menu until the operator goes back."""
    while True:
        _render_menu("Wireless Debugging Menu", WIRELESS_MENU_LABELS, "menu")
        choice = ask_choice()
        command = WIRELESS_ROUTER.resolve(choice)

        if command is None:
            _invalid_choice(choice)
        elif command == WirelessCommand.BACK:
            return
        else:
            WIRELESS_ROUTER.dispatch(command, session)


# -- Interactive selection mode ------------------------------------------------


def remove_selected(session: Session) -> None:
    """Confirm and remove the selected catalog entries."""
    names = [p.name for p in session.catalog.selected()]
    if not names:
        print_warning("No packages selected!")
        return
    if confirm_and_remove(session, names, assume_yes=False):
        print_success("Operation completed!")


def confirm_and_remove(session: Session, names: list[str], *, assume_yes: bool) -> bool:
    """Run the removal gate, then remove.

    Returns:
        True if the removal ran.
    """
    if not actions.confirm_removal(names, assume_yes=assume_yes):
        print_warning("Cancelled.")
        return False
    actions.remove_packages(session, names)
    return True


def _render_selection_help(count: int) -> None:
    console.print("[warning]Interactive Mode:[/warning]")
    console.print("Enter package number to toggle selection, or:")
    labels = {
        SelectionCommand.SELECT_ALL: "Select all",
        SelectionCommand.DESELECT_ALL: "Deselect all",
        SelectionCommand.FILTER: "Filter/Search",
        SelectionCommand.REMOVE_SELECTED: "Remove selected packages",
        SelectionCommand.BACK: "Back to main menu",
    }
    for command, label in labels.items():
        console.print(f"  [menu]{count + int(command)}[/menu] - {label}")


def resolve_selection(choice: int | None, count: int) -> int | SelectionCommand | None:
    """Interpret a number typed in selection mode.

    Args:
        choice: Number entered, or None for non-numeric input.
        count: Number of packages in the catalog.

    Returns:
        A 0-based package index, a SelectionCommand, or None if invalid.
    """
    if choice is None:
        return None
    if 1 <= choice <= count:
        return choice - 1
    try:
        return SelectionCommand(choice - count)
    except ValueError:
        return None


def interactive_mode(session: Session) -> None:
    """Toggle selections over the loaded catalog and remove the selection."""
    session.connection.require_device()
    catalog = session.catalog
    if not len(catalog):
        print_warning("Please load packages first (list system packages or bloatware)")
        return

    while True:
        print_packages(catalog.filter(None))
        _render_selection_help(len(catalog))

        choice = ask_choice()
        selection = resolve_selection(choice, len(catalog))

        if selection is None:
            _invalid_choice(choice)
        elif isinstance(selection, SelectionCommand):
            if selection == SelectionCommand.BACK:
                return
            if selection == SelectionCommand.SELECT_ALL:
                catalog.select_all()
                print_success("All packages selected")
            elif selection == SelectionCommand.DESELECT_ALL:
                catalog.deselect_all()
                print_success("All packages deselected")
            elif selection == SelectionCommand.FILTER:
                term = ask("Enter search term")
                print_packages(catalog.filter(term), title=f"Filter: {escape(term)}")
                ask("Press Enter to continue")
            else:
                remove_selected(session)
        else:
            package = catalog.toggle_selection(selection)
            status = "Selected" if package.is_selected else "Deselected"
            console.print(f"[success]{status}:[/success] {escape(package.name)}")


# -- Main menu handlers --------------------------------------------------------


def list_packages_flow(session: Session) -> None:
    """Load and show all system packages."""
    actions.list_system_packages(session)


def bloatware_flow(session: Session) -> None:
    """Scan for known bloatware."""
    actions.scan_bloatware(session)


def remove_flow(session: Session) -> None:
    """Prompt for a package name and remove it."""
    session.connection.require_device()
    name = ask("Enter package name to remove")
    if not name:
        print_warning("Operation cancelled.")
        return
    confirm_and_remove(session, [name], assume_yes=True)


def restore_flow(session: Session) -> None:
    """Prompt for a package name and restore it."""
    session.connection.require_device()
    name = ask("Enter package name to restore")
    if not name:
        print_warning("Operation cancelled.")
        return
    actions.restore_packages(session, [name])


def search_flow(session: Session) -> None:
    """Prompt for a search term and show matching packages."""
    session.connection.require_device()
    term = ask("Enter search term")
    if not term:
        return
    actions.search_packages(session, term)


def backup_flow(session: Session) -> None:
    """Write a backup of the loaded package names."""
    try:
        actions.write_backup(session)
    except OSError as e:
        print_error(f"Failed to create backup: {escape(str(e))}")


MAIN_ROUTER: Router[MainCommand] = Router(
    MainCommand,
    {
        MainCommand.WIRELESS: wireless_menu,
        MainCommand.LIST_PACKAGES: list_packages_flow,
        MainCommand.BLOATWARE: bloatware_flow,
        MainCommand.INTERACTIVE: interactive_mode,
        MainCommand.REMOVE: remove_flow,
        MainCommand.RESTORE: restore_flow,
        MainCommand.SEARCH: search_flow,
        MainCommand.DEVICES: actions.show_devices,
        MainCommand.BACKUP: backup_flow,
        MainCommand.DEVICE_INFO: actions.show_device_info,
    },
)


def run_console(session: Session) -> None:
    """Run the main menu until the operator exits."""
    console.print(
        Panel("[bold_header]Android Debloater Tool[/]", border_style="header", expand=False)
    )

    session.connection.refresh()
    while True:
        connection = session.connection
        status = format_connection_status(connection.state, connection.active_device)
        _render_menu("Main Menu", MAIN_MENU_LABELS, "header", status)

        choice = ask_choice()
        command = MAIN_ROUTER.resolve(choice)

        if command is None:
            _invalid_choice(choice)
        elif command == MainCommand.EXIT:
            console.print("[warning]Exiting... Goodbye![/warning]")
            return
        else:
            MAIN_ROUTER.dispatch(command, session)
