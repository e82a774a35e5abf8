"""Package operator for the connected device.

Uninstalls, disables and restores packages for the current user
(user 0). No confirmation happens here: callers gate critical packages
before handing them to the operator.
"""

import logging

from debloatctl.bridge.errors import BridgeError
from debloatctl.bridge.runner import BridgeRunner
from debloatctl.models.package import MutationResult, Outcome

logger = logging.getLogger(__name__)

CURRENT_USER = "0"


class PackageOperator:
    """Applies uninstall/disable/restore operations through the bridge tool.

    Example:
        >>> operator = PackageOperator(runner)
        >>> result = operator.remove("com.facebook.katana")
        >>> result.outcome
        <Outcome.REMOVED: 'removed'>
    """

    def __init__(self, runner: BridgeRunner) -> None:
        self._runner = runner

    def _attempt(self, args: list[str]) -> str | None:
        """Run a command, returning the error text or None on success."""
        try:
            self._runner.run(args)
        except BridgeError as e:
            return str(e)
        return None

    def uninstall(self, package: str) -> str | None:
        """Uninstall a package for the current user."""
        return self._attempt(["shell", "pm", "uninstall", "--user", CURRENT_USER, package])

    def disable(self, package: str) -> str | None:
        """Disable a package for the current user."""
        return self._attempt(["shell", "pm", "disable-user", "--user", CURRENT_USER, package])

    def remove(self, package: str) -> MutationResult:
        """Remove a package, falling back to disabling it.

        The disable fallback runs automatically whenever the uninstall
        fails; it is never attempted after a successful uninstall.

        Args:
            package: Package name.

        Returns:
            MutationResult with REMOVED, DISABLED or FAILED.
        """
        logger.info("Removing package %s", package)

        uninstall_error = self.uninstall(package)
        if uninstall_error is None:
            return MutationResult(package=package, outcome=Outcome.REMOVED)

        logger.info("Uninstall of %s failed (%s), disabling instead", package, uninstall_error)

        disable_error = self.disable(package)
        if disable_error is None:
            return MutationResult(package=package, outcome=Outcome.DISABLED, error=uninstall_error)

        logger.warning("Disable of %s failed: %s", package, disable_error)
        return MutationResult(package=package, outcome=Outcome.FAILED, error=disable_error)

    def restore(self, package: str) -> MutationResult:
        """Reinstall a previously removed system package.

        Args:
            package: Package name.

        Returns:
            MutationResult with RESTORED or FAILED.
        """
        logger.info("Restoring package %s", package)

        error = self._attempt(["shell", "cmd", "package", "install-existing", package])
        if error is None:
            return MutationResult(package=package, outcome=Outcome.RESTORED)
        return MutationResult(package=package, outcome=Outcome.FAILED, error=error)

    def remove_batch(self, packages: list[str]) -> list[MutationResult]:
        """Remove packages one at a time, in the given order.

        Individual failures never abort the batch.

        Args:
            packages: Package names.

        Returns:
            One MutationResult per package, in order.
        """
        return [self.remove(package) for package in packages]
