"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from debloatctl.core.baseline import is_critical
from debloatctl.core.theme import get_theme

if TYPE_CHECKING:
    from debloatctl.models.package import Package


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_package_table(title: str = "Package List") -> Table:
    """Create a pre-configured table for displaying packages.

    Args:
        title: Table title.

    Returns:
        Rich Table with selection, number and package columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    table.add_column("", width=3, justify="center")
    table.add_column("#", style="package.index", justify="right")
    table.add_column("Package", no_wrap=True)
    return table


def format_package_row(number: int, pkg: Package) -> tuple[str, str, str]:
    """Format a package as a table row.

    Selected packages get a checked box; critical packages are
    highlighted and tagged.

    Args:
        number: 1-based number shown to the user.
        pkg: The package to format.

    Returns:
        Tuple of (checkbox, number, name) with Rich markup.
    """
    checkbox = "[selected]\\[X][/]" if pkg.is_selected else "\\[ ]"
    name = escape(pkg.name)
    if is_critical(pkg.name):
        name = f"[critical]{name} (CRITICAL)[/]"
    else:
        name = f"[package.name]{name}[/]"
    return (checkbox, str(number), name)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
