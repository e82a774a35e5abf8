"""Session object tying the runner, connection and catalog together.

A session is the only owner of mutable state: the connection state,
the active device identifier and the package catalog.
"""

from debloatctl.bridge.runner import AdbRunner, BridgeRunner
from debloatctl.core.catalog import PackageCatalog
from debloatctl.core.connection import ConnectionManager
from debloatctl.core.settings import Settings
from debloatctl.operators.package import PackageOperator


class Session:
    """State and collaborators for one debloatctl run.

    Attributes:
        settings: Settings the session was built with.
        runner: Bridge runner shared by every component.
        connection: Connection state machine.
        catalog: Loaded packages and their selection flags.
        operator: Package mutation engine.
    """

    def __init__(self, runner: BridgeRunner, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self.runner = runner
        self.connection = ConnectionManager(runner, self.settings)
        self.catalog = PackageCatalog(runner)
        self.operator = PackageOperator(runner)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Session":
        """Create a session driving the real adb executable."""
        runner = AdbRunner(executable=settings.adb_path, timeout=settings.command_timeout)
        return cls(runner, settings)

    def bridge_available(self) -> bool:
        """Check whether the bridge tool can be executed."""
        return self.runner.is_available()
