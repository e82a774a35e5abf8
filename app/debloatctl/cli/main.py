"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from debloatctl import __version__
from debloatctl.cli.commands import backup, devices, info, install, menu, packages, wireless
from debloatctl.core.settings import load_settings
from debloatctl.utils.log import configure_logging

# Create main Typer app
app = typer.Typer(
    name="debloatctl",
    help="Remove bloatware from Android devices over adb.",
    invoke_without_command=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"debloatctl version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    adb: Annotated[
        str | None,
        typer.Option(
            "--adb",
            help="adb executable to use (default: $DEBLOATCTL_ADB or adb from PATH).",
        ),
    ] = None,
) -> None:
    """debloatctl - Remove bloatware from Android devices over adb.

    Without a command the interactive console starts.
    """
    configure_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["settings"] = load_settings(adb)

    if ctx.invoked_subcommand is None:
        menu.start_console(ctx)


# Register commands
app.add_typer(menu.app, name="menu")
app.add_typer(devices.app, name="devices")
app.add_typer(packages.app, name="packages")
app.add_typer(wireless.app, name="wireless")
app.add_typer(backup.app, name="backup")
app.add_typer(info.app, name="info")
app.add_typer(install.app, name="install-adb")


if __name__ == "__main__":
    app()
