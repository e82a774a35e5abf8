"""Wireless command implementation.

Pairs, connects and disconnects devices over the network.
"""

from typing import Annotated

import typer

from debloatctl.cli import actions
from debloatctl.cli.context import bridge_errors, get_session
from debloatctl.utils.formatting import print_error

app = typer.Typer(
    help="Wireless debugging: pair, connect and disconnect devices.",
    no_args_is_help=True,
)


@app.command("pair")
def pair(
    ctx: typer.Context,
    ip: Annotated[str, typer.Argument(help="Device IP address.")],
    pairing_port: Annotated[str, typer.Argument(help="Port shown in the pairing dialog.")],
    pairing_code: Annotated[str, typer.Argument(help="Code shown in the pairing dialog.")],
    connect_port: Annotated[
        str,
        typer.Option(
            "--connect-port",
            "-p",
            help="Wireless debugging port to connect to after pairing.",
        ),
    ] = "5555",
) -> None:
    """Pair with an Android 11+ device and connect to it.

    On the device open Developer Options -> Wireless Debugging ->
    Pair device with pairing code.

    Examples:
        debloatctl wireless pair 192.168.1.42 37099 123456 --connect-port 41234
    """
    session = get_session(ctx)
    with bridge_errors():
        connected = actions.pair_device(session, ip, pairing_port, pairing_code, connect_port)
    if not connected:
        raise typer.Exit(code=1)


@app.command("connect")
def connect(
    ctx: typer.Context,
    ip: Annotated[
        str | None,
        typer.Argument(help="Device IP address. Omit to detect it from a USB device."),
    ] = None,
    port: Annotated[
        str | None,
        typer.Option("--port", "-p", help="Device adb port (default: 5555)."),
    ] = None,
) -> None:
    """Connect to a device over TCP/IP (legacy wireless debugging).

    Without an IP address a USB-attached device is switched to TCP/IP
    mode and its Wi-Fi address is detected automatically.

    Examples:
        debloatctl wireless connect 192.168.1.42
        debloatctl wireless connect
    """
    session = get_session(ctx)
    tcp_port = port or session.settings.tcpip_port

    with bridge_errors():
        if ip is None:
            ip = actions.prepare_usb_device(session)
            if not ip:
                print_error("Could not detect the device IP address. Pass it explicitly.")
                raise typer.Exit(code=1)
        connected = actions.connect_device(session, ip, tcp_port)

    if not connected:
        raise typer.Exit(code=1)


@app.command("ip")
def ip_address(ctx: typer.Context) -> None:
    """Show the Wi-Fi IP address of the connected device."""
    session = get_session(ctx)
    with bridge_errors():
        found = actions.detect_ip(session)
    if found is None:
        raise typer.Exit(code=1)


@app.command("enable")
def enable(
    ctx: typer.Context,
    port: Annotated[
        str | None,
        typer.Option("--port", "-p", help="TCP port the device listens on (default: 5555)."),
    ] = None,
) -> None:
    """Switch the USB-attached device to TCP/IP mode."""
    session = get_session(ctx)
    with bridge_errors():
        enabled = actions.enable_wireless(session, port)
    if not enabled:
        raise typer.Exit(code=1)


@app.command("disconnect")
def disconnect(ctx: typer.Context) -> None:
    """Disconnect the wirelessly connected device."""
    session = get_session(ctx)
    with bridge_errors():
        session.connection.refresh()
        disconnected = actions.disconnect_device(session)
    if not disconnected:
        raise typer.Exit(code=1)
