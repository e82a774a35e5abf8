"""Session access and error handling shared by CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.markup import escape

from debloatctl.bridge.errors import BridgeError, NotConnectedError, SpawnFailedError
from debloatctl.core.session import Session
from debloatctl.core.settings import Settings, load_settings
from debloatctl.utils.formatting import print_error, print_info


def create_session(settings: Settings) -> Session:
    """Create a session driving the configured adb executable."""
    return Session.from_settings(settings)


def get_session(ctx: typer.Context, *, check_bridge: bool = True) -> Session:
    """Get the session stored on the Typer context, creating it on first use.

    Args:
        ctx: Current Typer context.
        check_bridge: Exit with an error if adb cannot be executed.

    Returns:
        The shared Session.

    Raises:
        typer.Exit: If the bridge tool is missing and check_bridge is set.
    """
    obj = ctx.ensure_object(dict)
    session: Session | None = obj.get("session")
    if session is None:
        settings: Settings = obj.get("settings") or load_settings()
        session = create_session(settings)
        obj["session"] = session

    if check_bridge and not session.bridge_available():
        print_error(f"ADB ({escape(session.settings.adb_path)}) is not installed or not in PATH.")
        print_info("Run 'debloatctl install-adb' or install Android SDK Platform Tools manually.")
        raise typer.Exit(code=1)

    return session


@contextmanager
def bridge_errors() -> Iterator[None]:
    """Turn bridge failures into an error message and exit code 1."""
    try:
        yield
    except NotConnectedError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e
    except SpawnFailedError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e
    except BridgeError as e:
        print_error(f"ADB command failed: {escape(str(e))}")
        raise typer.Exit(code=1) from e
