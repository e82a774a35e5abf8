"""Operations behind menu entries and subcommands.

Each function takes the session plus already-collected input and
renders its outcome. Bridge failures propagate to the caller, which
decides whether they end the command or just the current menu step.
"""

import logging
from pathlib import Path

from rich.markup import escape

from debloatctl.bridge.errors import (
    CommandFailedError,
    NotConnectedError,
    PairingError,
    PairingStage,
)
from debloatctl.cli.display import (
    create_devices_table,
    create_info_table,
    create_results_table,
    print_packages,
    print_results_summary,
)
from debloatctl.cli.prompts import confirm
from debloatctl.core.backup import create_backup, load_backup
from debloatctl.core.baseline import is_critical
from debloatctl.core.device_info import get_device_info
from debloatctl.core.session import Session
from debloatctl.models.device import ConnectionState
from debloatctl.models.package import MutationResult, Outcome, Package
from debloatctl.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

logger = logging.getLogger(__name__)

PAIRING_TROUBLESHOOTING = (
    "IP address and port are correct",
    "Pairing code is correct (6 digits)",
    "Wireless debugging is enabled on device",
    "Device and computer are on the same network",
)

CONNECT_TROUBLESHOOTING = (
    "Ensure device and computer are on same Wi-Fi",
    "Check if wireless debugging is enabled",
    "Verify the IP address is correct",
    "Try: adb kill-server && adb start-server",
)

IP_TROUBLESHOOTING = (
    "Device is connected to Wi-Fi",
    "Device is connected via USB",
    "USB debugging is enabled",
)


def _print_hints(title: str, hints: tuple[str, ...]) -> None:
    console.print(f"\n[warning]{title}[/warning]")
    for hint in hints:
        console.print(f"  - {hint}")


# -- Devices -----------------------------------------------------------------


def show_devices(session: Session) -> int:
    """List every ready device.

    Returns:
        Number of devices shown.
    """
    devices = session.connection.list_devices()
    if not devices:
        print_warning("No devices connected")
        return 0

    console.print(create_devices_table(devices))
    console.print(f"[info]Total:[/info] {len(devices)} device(s)")
    return len(devices)


def show_device_info(session: Session) -> None:
    """Print identifying properties of the connected device."""
    session.connection.require_device()
    info = get_device_info(session.runner)
    if not info:
        print_warning("The device did not report any properties.")
        return
    console.print(create_info_table(info))


# -- Catalog -----------------------------------------------------------------


def list_system_packages(session: Session, filter_term: str | None = None) -> int:
    """Load all system packages into the catalog and show them.

    Args:
        session: Current session.
        filter_term: Only display packages containing this text.

    Returns:
        Number of packages loaded.
    """
    session.connection.require_device()
    print_info("Fetching all packages from device...")

    count = session.catalog.load_system_packages()
    print_success(f"Found {count} system packages")
    print_packages(session.catalog.filter(filter_term), title="System Packages")
    return count


def scan_bloatware(session: Session) -> int:
    """Probe for known bloatware, load the hits into the catalog and show them.

    Returns:
        Number of bloatware packages found.
    """
    session.connection.require_device()
    print_info("Scanning for common bloatware packages...")

    with console.status("Probing device..."):
        count = session.catalog.scan_known_bloatware()

    print_success(f"Found {count} bloatware packages installed")
    if count == 0:
        print_success("Great! No common bloatware detected.")
    else:
        print_packages(session.catalog.filter(None), title="Bloatware")
    return count


def search_packages(session: Session, term: str) -> list[Package]:
    """Search all installed packages without touching the catalog.

    Returns:
        The matching packages.
    """
    session.connection.require_device()
    print_info(f"Searching for '{escape(term)}'...")

    found = session.catalog.search(term)
    if not found:
        print_warning("No packages found matching search term.")
    else:
        print_success(f"Found {len(found)} packages")
        print_packages(list(enumerate(found)), title="Search Results")
    return found


# -- Mutations ---------------------------------------------------------------


def confirm_removal(
    names: list[str],
    *,
    assume_yes: bool = False,
    force: bool = False,
) -> bool:
    """Gate a removal behind the operator's confirmation.

    Critical packages are always listed with a warning and need their
    own confirmation unless ``force`` is set. The general confirmation
    is skipped with ``assume_yes``.

    Args:
        names: Packages about to be removed.
        assume_yes: Skip the general "Remove N packages?" question.
        force: Skip the critical-package question.

    Returns:
        True if the removal may proceed.
    """
    critical = [name for name in names if is_critical(name)]
    if critical:
        console.print("[critical]WARNING: Critical system packages selected![/critical]")
        for name in critical:
            console.print(f"  - [critical]{escape(name)}[/critical]")
        if force:
            print_warning("--force given, removing critical packages without asking.")
        elif not confirm("This may cause system instability. Continue?"):
            return False

    if assume_yes:
        return True
    return confirm(f"Remove {len(names)} package(s)?")


def remove_packages(session: Session, names: list[str]) -> list[MutationResult]:
    """Remove packages in order, disabling those that cannot be uninstalled.

    No confirmation happens here; call confirm_removal() first.

    Returns:
        One result per package.
    """
    session.connection.require_device()

    with console.status(f"Removing {len(names)} package(s)..."):
        results = session.operator.remove_batch(names)

    console.print(create_results_table(results))
    print_results_summary(results)
    return results


def restore_packages(session: Session, names: list[str]) -> list[MutationResult]:
    """Reinstall previously removed packages.

    Returns:
        One result per package.
    """
    session.connection.require_device()

    results: list[MutationResult] = []
    for name in names:
        print_info(f"Restoring package: {escape(name)}")
        results.append(session.operator.restore(name))

    console.print(create_results_table(results))
    print_results_summary(results)
    if any(r.outcome == Outcome.FAILED for r in results):
        console.print("[muted]A package can only be restored if it ships with the system image.[/]")
    return results


def write_backup(session: Session, directory: Path | None = None) -> Path | None:
    """Write the loaded package names to a backup file.

    Returns:
        Path of the backup, or None if no packages are loaded.
    """
    if not len(session.catalog):
        print_warning("No packages loaded. Load packages first.")
        return None

    path = create_backup(session.catalog.names(), directory)
    print_success(f"Backup created: {escape(str(path))}")
    return path


def restore_from_backup(session: Session, path: Path) -> list[MutationResult]:
    """Restore every package recorded in a backup file."""
    backup = load_backup(path)
    timestamp = escape(backup.timestamp)
    print_info(f"Restoring {len(backup.packages)} package(s) from backup {timestamp}")
    return restore_packages(session, backup.packages)


# -- Wireless ----------------------------------------------------------------


def pair_device(
    session: Session,
    ip: str,
    pairing_port: str,
    pairing_code: str,
    connect_port: str,
) -> bool:
    """Pair with an Android 11+ device and connect to it.

    Returns:
        True if the device is now connected wirelessly.
    """
    print_info("Pairing with device...")
    try:
        address = session.connection.pair_and_connect(ip, pairing_port, pairing_code, connect_port)
    except PairingError as e:
        if e.stage == PairingStage.PAIR:
            print_error(f"Pairing failed: {escape(str(e.cause))}")
            _print_hints("Troubleshooting:", PAIRING_TROUBLESHOOTING)
        else:
            print_error(f"Connection failed: {escape(str(e.cause))}")
            _print_hints("Troubleshooting:", CONNECT_TROUBLESHOOTING)
        return False

    print_success(f"Connected wirelessly to {escape(address)}")
    return True


def connect_device(session: Session, ip: str, port: str) -> bool:
    """Connect to a device over the network.

    The connection only counts once the device shows up in the device
    listing.

    Returns:
        True if the device is now connected wirelessly.
    """
    print_info(f"Connecting to {escape(ip)}:{escape(port)}...")
    try:
        address = session.connection.connect_wireless(ip, port, verify=True)
    except (CommandFailedError, NotConnectedError) as e:
        print_error(f"Connection failed: {escape(str(e))}")
        _print_hints("Troubleshooting:", CONNECT_TROUBLESHOOTING)
        return False

    print_success(f"Connected wirelessly to {escape(address)}")
    return True


def prepare_usb_device(session: Session) -> str | None:
    """Switch a USB device to TCP/IP mode and read its Wi-Fi address.

    Returns:
        The device IP address, or None if it could not be detected.

    Raises:
        NotConnectedError: If no USB device is attached.
    """
    if session.connection.refresh() != ConnectionState.USB:
        msg = "No USB device detected."
        raise NotConnectedError(msg)

    print_success("USB device detected!")
    print_info("Enabling wireless debugging on device...")
    try:
        session.connection.enable_wireless_on_usb_device()
    except CommandFailedError as e:
        logger.warning("tcpip switch failed: %s", e)
        print_warning(f"Could not switch device to TCP/IP mode: {escape(str(e))}")

    print_info("Detecting device IP address...")
    try:
        ip = session.connection.detect_device_ip()
    except CommandFailedError as e:
        logger.warning("IP detection failed: %s", e)
        return None

    if ip:
        console.print(f"[success]Device IP:[/success] {escape(ip)}")
    return ip


def detect_ip(session: Session) -> str | None:
    """Show the Wi-Fi IP address of the connected device.

    Returns:
        The address, or None if it could not be detected.
    """
    print_info("Detecting IP address...")
    try:
        ip = session.connection.detect_device_ip()
    except CommandFailedError as e:
        logger.warning("IP detection failed: %s", e)
        ip = None

    if ip is None:
        print_error("Could not detect IP address")
        _print_hints("Make sure:", IP_TROUBLESHOOTING)
        return None

    console.print(f"[success]Device IP Address:[/success] {escape(ip)}")
    print_info("You can now use this IP to connect wirelessly.")
    return ip


def enable_wireless(session: Session, port: str | None = None) -> bool:
    """Switch the USB device to TCP/IP mode.

    Returns:
        True if the switch succeeded.
    """
    tcp_port = port or session.settings.tcpip_port
    print_info(f"Enabling TCP/IP mode on port {escape(str(tcp_port))}...")
    try:
        session.connection.enable_wireless_on_usb_device(tcp_port)
    except NotConnectedError:
        print_error("Please connect device via USB first!")
        return False
    except CommandFailedError as e:
        print_error(f"Failed to enable wireless debugging: {escape(str(e))}")
        return False

    print_success("Wireless debugging enabled!")
    console.print("\n[info]Next steps:[/info]")
    console.print("  1. Disconnect USB cable (optional)")
    console.print("  2. Detect the device IP")
    console.print("  3. Connect wirelessly to that IP")
    return True


def disconnect_device(session: Session) -> bool:
    """Disconnect the tracked wireless device.

    Returns:
        True if a wireless device was disconnected.
    """
    device = session.connection.active_device
    if not session.connection.disconnect_wireless():
        print_warning("No wireless connection active")
        return False

    print_success(f"Disconnected from {escape(device)}")
    return True
