"""Package catalog and selection model.

Holds the ordered list of packages loaded from the device together with
their selection flags. Every load replaces the catalog; searches return
separate lists and never touch it.
"""

import logging
from collections.abc import Iterable, Iterator

from debloatctl.bridge.errors import BridgeError
from debloatctl.bridge.parsers import parse_packages
from debloatctl.bridge.runner import BridgeRunner
from debloatctl.core.baseline import KNOWN_BLOATWARE
from debloatctl.models.package import Package

logger = logging.getLogger(__name__)

LIST_PACKAGES = ["shell", "pm", "list", "packages"]


def _sorted(packages: Iterable[Package]) -> list[Package]:
    return sorted(packages, key=lambda p: p.name)


class PackageCatalog:
    """In-memory, ordered collection of device packages.

    Indexes used by the selection methods are 0-based and must be
    validated by the caller against ``len(catalog)``.

    Example:
        >>> catalog = PackageCatalog(runner)
        >>> catalog.load_system_packages()
        >>> catalog.toggle_selection(0)
        >>> [p.name for p in catalog.selected()]
    """

    def __init__(self, runner: BridgeRunner) -> None:
        self._runner = runner
        self._packages: list[Package] = []

    def __len__(self) -> int:
        return len(self._packages)

    def __iter__(self) -> Iterator[Package]:
        return iter(self._packages)

    def __getitem__(self, index: int) -> Package:
        return self._packages[index]

    def replace(self, packages: Iterable[Package]) -> None:
        """Replace the whole catalog with the given records."""
        self._packages = _sorted(packages)

    def load_system_packages(self) -> int:
        """Load every system package from the device.

        Returns:
            Number of packages loaded.

        Raises:
            BridgeError: If the listing fails. The catalog is left unchanged.
        """
        output = self._runner.run([*LIST_PACKAGES, "-s"])
        self.replace(Package(name=name) for name in parse_packages(output))
        logger.info("Loaded %d system packages", len(self._packages))
        return len(self._packages)

    def scan_known_bloatware(self, candidates: Iterable[str] = KNOWN_BLOATWARE) -> int:
        """Probe the device for each known bloatware package.

        Names whose probe fails or that are absent from the probe output
        are skipped. Each name is added at most once.

        Args:
            candidates: Package names to probe, in order.

        Returns:
            Number of bloatware packages found.
        """
        found: list[Package] = []
        seen: set[str] = set()

        for name in candidates:
            try:
                output = self._runner.run([*LIST_PACKAGES, name])
            except BridgeError as e:
                logger.debug("Probe for %s failed: %s", name, e)
                continue

            if name in output and name not in seen:
                seen.add(name)
                found.append(Package(name=name))

        self.replace(found)
        logger.info("Found %d known bloatware packages", len(self._packages))
        return len(self._packages)

    def search(self, term: str) -> list[Package]:
        """Search all installed packages by case-insensitive substring.

        The result is a fresh list; the catalog is not modified.

        Args:
            term: Text to look for in package names.

        Returns:
            Matching packages in device listing order.

        Raises:
            BridgeError: If the listing fails.
        """
        needle = term.lower()
        output = self._runner.run(LIST_PACKAGES)
        return [Package(name=name) for name in parse_packages(output) if needle in name.lower()]

    def filter(self, term: str | None) -> list[tuple[int, Package]]:
        """View catalog entries matching a term, with their indexes.

        Args:
            term: Case-insensitive substring. None or empty matches all.

        Returns:
            ``(index, package)`` pairs in catalog order.
        """
        needle = (term or "").lower()
        return [(i, pkg) for i, pkg in enumerate(self._packages) if needle in pkg.name.lower()]

    def toggle_selection(self, index: int) -> Package:
        """Flip the selection flag of one entry.

        Raises:
            IndexError: If the index is out of range.
        """
        if not 0 <= index < len(self._packages):
            msg = f"Package index {index} out of range (0-{len(self._packages) - 1})"
            raise IndexError(msg)
        package = self._packages[index]
        package.toggle()
        return package

    def select_all(self) -> None:
        """Select every entry."""
        for package in self._packages:
            package.is_selected = True

    def deselect_all(self) -> None:
        """Clear every selection flag."""
        for package in self._packages:
            package.is_selected = False

    def selected(self) -> list[Package]:
        """Selected entries in catalog order."""
        return [p for p in self._packages if p.is_selected]

    def names(self) -> list[str]:
        """All package names in catalog order."""
        return [p.name for p in self._packages]
