"""Devices command implementation."""

import typer

from debloatctl.cli import actions
from debloatctl.cli.context import bridge_errors, get_session

app = typer.Typer(
    help="Show connected devices.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def devices(ctx: typer.Context) -> None:
    """List every device adb reports as ready, USB and wireless."""
    session = get_session(ctx)
    with bridge_errors():
        actions.show_devices(session)
