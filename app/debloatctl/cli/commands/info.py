"""Info command implementation."""

import typer

from debloatctl.cli import actions
from debloatctl.cli.context import bridge_errors, get_session

app = typer.Typer(
    help="Show device information.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def info(ctx: typer.Context) -> None:
    """Show model, manufacturer, Android version, SDK level and serial."""
    session = get_session(ctx)
    with bridge_errors():
        actions.show_device_info(session)
