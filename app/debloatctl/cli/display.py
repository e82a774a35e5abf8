"""Shared Rich display functions for packages, devices and results.

Provides table builders and summary printers used by both the
interactive console and the one-shot subcommands.
"""

from rich.markup import escape
from rich.table import Table

from debloatctl.models.device import ConnectedDevice, ConnectionState
from debloatctl.models.package import MutationResult, Outcome, Package
from debloatctl.utils.formatting import (
    console,
    create_package_table,
    format_package_row,
    print_success,
)

_STATE_STYLES: dict[ConnectionState, str] = {
    ConnectionState.WIRELESS: "wireless",
    ConnectionState.USB: "usb",
    ConnectionState.DISCONNECTED: "error",
}

_OUTCOME_TEXT: dict[Outcome, str] = {
    Outcome.REMOVED: "[success]removed[/success]",
    Outcome.DISABLED: "[warning]disabled[/warning]",
    Outcome.RESTORED: "[success]restored[/success]",
    Outcome.FAILED: "[error]FAIL[/error]",
}


def format_connection_status(state: ConnectionState, device: str = "") -> str:
    """Format the connection state as a one-line status.

    Args:
        state: Current connection state.
        device: Active device identifier.

    Returns:
        Rich markup string.
    """
    style = _STATE_STYLES[state]
    text = f"Status: [{style}]{state.label}[/{style}]"
    if device:
        text += f" [muted]({escape(device)})[/muted]"
    return text


def print_packages(
    entries: list[tuple[int, Package]],
    title: str = "Package List",
) -> None:
    """Print numbered packages as a table.

    Numbers shown are 1-based positions in the source list, so a
    filtered view keeps the numbers used for selection.

    Args:
        entries: ``(index, package)`` pairs with 0-based indexes.
        title: Table title.
    """
    table = create_package_table(title)
    for index, package in entries:
        table.add_row(*format_package_row(index + 1, package))

    console.print(table)
    console.print(f"[info]Displayed:[/info] {len(entries)} packages\n")


def create_devices_table(devices: list[ConnectedDevice]) -> Table:
    """Create a table listing connected devices.

    Args:
        devices: Devices to display.

    Returns:
        Rich Table with transport and listing line columns.
    """
    table = Table(
        title="Connected Devices",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Type", width=10)
    table.add_column("Serial", no_wrap=True)
    table.add_column("Details", style="muted")

    for device in devices:
        kind = "[wireless]Wireless[/]" if device.is_wireless else "[usb]USB[/]"
        details = " ".join(device.line.split()[1:])
        table.add_row(kind, escape(device.serial), escape(details))

    return table


def create_results_table(results: list[MutationResult]) -> Table:
    """Create a table of per-package mutation outcomes.

    Args:
        results: Results to display.

    Returns:
        Rich Table with outcome, package and message columns.
    """
    table = Table(
        title="Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Outcome", width=10, justify="center")
    table.add_column("Package", no_wrap=True)
    table.add_column("Message")

    for result in results:
        if result.outcome == Outcome.DISABLED:
            message = "Uninstall not permitted, disabled instead"
        else:
            message = result.error or ""
        table.add_row(
            _OUTCOME_TEXT[result.outcome],
            escape(result.package),
            f"[muted]{escape(message.strip())}[/muted]",
        )

    return table


def print_results_summary(results: list[MutationResult]) -> None:
    """Print how many mutations succeeded and failed.

    Args:
        results: Results of a batch.
    """
    success_count = sum(1 for r in results if r.success)
    fail_count = sum(1 for r in results if r.failed)

    if fail_count == 0:
        print_success(f"All {success_count} package(s) processed successfully.")
    else:
        console.print(
            f"\n[success]{success_count} succeeded[/success], [error]{fail_count} failed[/error]"
        )


def create_info_table(info: dict[str, str]) -> Table:
    """Create a two-column table of device properties."""
    table = Table(
        title="Device Information",
        show_header=False,
        border_style="border",
    )
    table.add_column("Property", style="header")
    table.add_column("Value", style="text")

    for label, value in info.items():
        table.add_row(label, escape(value))

    return table
