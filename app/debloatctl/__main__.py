"""Allow running as ``python -m debloatctl``."""

from debloatctl.cli.main import app

app()
