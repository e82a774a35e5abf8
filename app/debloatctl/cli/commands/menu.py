"""Menu command implementation.

Starts the interactive console.
"""

import typer

from debloatctl.cli.commands.install import run_installer
from debloatctl.cli.context import get_session
from debloatctl.cli.menu import run_console
from debloatctl.cli.prompts import confirm
from debloatctl.core.installer import PLATFORM_TOOLS_URL
from debloatctl.core.session import Session
from debloatctl.utils.formatting import print_error, print_info, print_success

app = typer.Typer(
    help="Start the interactive console.",
    invoke_without_command=True,
)


def ensure_bridge(session: Session) -> bool:
    """Make sure adb runs, offering to install it when it does not.

    Returns:
        True if adb is available.
    """
    if session.bridge_available():
        print_success("ADB found")
        return True

    print_error("ADB is not installed or not in PATH")
    print_info("ADB is required to use this tool")

    if confirm("Would you like to install ADB now?"):
        run_installer()
        if session.bridge_available():
            return True
        print_error("ADB installation failed or not in PATH. Please install manually.")
    else:
        print_info("Please install Android SDK Platform Tools manually")

    print_info(f"Download from: {PLATFORM_TOOLS_URL}")
    return False


def start_console(ctx: typer.Context) -> None:
    """Run the interactive console for the context's session.

    Raises:
        typer.Exit: If adb is missing and was not installed.
    """
    session = get_session(ctx, check_bridge=False)
    if not ensure_bridge(session):
        raise typer.Exit(code=1)
    run_console(session)


@app.callback(invoke_without_command=True)
def menu(ctx: typer.Context) -> None:
    """Start the interactive console (also the default without a command)."""
    start_console(ctx)
