"""Backup command implementation.

Loads packages from the device and writes their names to a JSON file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from debloatctl.cli import actions
from debloatctl.cli.context import bridge_errors, get_session
from debloatctl.utils.formatting import print_error

app = typer.Typer(
    help="Back up the package list to a JSON file.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def backup(
    ctx: typer.Context,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for the backup file (default: current directory).",
            file_okay=False,
        ),
    ] = None,
    bloatware: Annotated[
        bool,
        typer.Option(
            "--bloatware",
            "-b",
            help="Back up the known bloatware found on the device instead of all system packages.",
        ),
    ] = False,
) -> None:
    """Write a backup_<timestamp>.json file with the device's package names.

    Examples:
        debloatctl backup
        debloatctl backup --bloatware -o ~/backups
    """
    session = get_session(ctx)

    with bridge_errors():
        if bloatware:
            actions.scan_bloatware(session)
        else:
            actions.list_system_packages(session)

    try:
        path = actions.write_backup(session, output_dir)
    except OSError as e:
        print_error(f"Failed to create backup: {escape(str(e))}")
        raise typer.Exit(code=1) from e

    if path is None:
        raise typer.Exit(code=1)
