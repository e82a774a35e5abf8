"""CLI commands for debloatctl.

This package contains all subcommand implementations.
"""

from debloatctl.cli.commands import backup, devices, info, install, menu, packages, wireless

__all__ = ["backup", "devices", "info", "install", "menu", "packages", "wireless"]
