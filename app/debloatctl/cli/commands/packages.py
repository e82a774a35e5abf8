"""Packages command implementation.

Lists, searches, removes and restores packages on the connected device.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape

from debloatctl.cli import actions
from debloatctl.cli.context import bridge_errors, get_session
from debloatctl.utils.formatting import print_error, print_warning

app = typer.Typer(
    help="List, search, remove and restore packages.",
    no_args_is_help=True,
)


@app.command("list")
def list_packages(
    ctx: typer.Context,
    filter_term: Annotated[
        str | None,
        typer.Option(
            "--filter",
            "-f",
            help="Only show packages whose name contains this text (case-insensitive).",
        ),
    ] = None,
) -> None:
    """List all system packages, sorted by name.

    Examples:
        debloatctl packages list
        debloatctl packages list --filter samsung
    """
    session = get_session(ctx)
    with bridge_errors():
        actions.list_system_packages(session, filter_term)


@app.command("bloat")
def list_bloatware(ctx: typer.Context) -> None:
    """Show which well-known bloatware packages are installed."""
    session = get_session(ctx)
    with bridge_errors():
        actions.scan_bloatware(session)


@app.command("search")
def search(
    ctx: typer.Context,
    term: Annotated[str, typer.Argument(help="Text to look for in package names.")],
) -> None:
    """Search every installed package by name.

    Examples:
        debloatctl packages search spotify
    """
    session = get_session(ctx)
    with bridge_errors():
        actions.search_packages(session, term)


@app.command("remove")
def remove(
    ctx: typer.Context,
    names: Annotated[list[str], typer.Argument(help="Package names to remove.")],
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip the confirmation prompt.",
        ),
    ] = False,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Also skip the extra prompt for critical system packages.",
        ),
    ] = False,
) -> None:
    """Uninstall packages for the current user, disabling them if that fails.

    Critical system packages always require an extra confirmation
    unless --force is given.

    Examples:
        debloatctl packages remove com.facebook.katana
        debloatctl packages remove com.netflix.mediaclient com.spotify.music --yes
    """
    session = get_session(ctx)

    with bridge_errors():
        session.connection.require_device()
        if not actions.confirm_removal(names, assume_yes=yes, force=force):
            print_warning("Cancelled.")
            raise typer.Exit(code=1)
        results = actions.remove_packages(session, names)

    if any(r.failed for r in results):
        raise typer.Exit(code=1)


@app.command("restore")
def restore(
    ctx: typer.Context,
    names: Annotated[
        list[str] | None,
        typer.Argument(help="Package names to restore."),
    ] = None,
    from_backup: Annotated[
        Path | None,
        typer.Option(
            "--from-backup",
            "-b",
            help="Restore every package listed in a backup file.",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """Reinstall packages that were removed for the current user.

    Examples:
        debloatctl packages restore com.facebook.katana
        debloatctl packages restore --from-backup backup_20240101_120000.json
    """
    if not names and from_backup is None:
        print_error("Give package names or --from-backup.")
        raise typer.Exit(code=1)

    session = get_session(ctx)

    with bridge_errors():
        results = actions.restore_packages(session, names) if names else []
        if from_backup is not None:
            try:
                results += actions.restore_from_backup(session, from_backup)
            except (OSError, ValidationError) as e:
                print_error(f"Invalid backup file {from_backup}: {escape(str(e))}")
                raise typer.Exit(code=1) from e

    if any(r.failed for r in results):
        raise typer.Exit(code=1)
