"""Package models for catalog entries and mutation outcomes.

This module defines the records kept in the package catalog and the
results reported by the package operator.
"""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(slots=True)
class Package:
    """A package discovered on the device.

    Unlike most models this one is mutable: the selection flag is
    toggled in place by the interactive selection mode.

    Attributes:
        name: Reverse-domain package name (e.g., 'com.spotify.music').
        is_system: True for entries from system listings, bloatware probes or searches.
        is_selected: Ephemeral selection state, never persisted.
    """

    name: str
    is_system: bool = field(default=True)
    is_selected: bool = field(default=False)

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)

    def toggle(self) -> bool:
        """Flip the selection flag and return the new value."""
        self.is_selected = not self.is_selected
        return self.is_selected


class Outcome(Enum):
    """Result of a package mutation.

    Attributes:
        REMOVED: Uninstalled for the current user.
        DISABLED: Uninstall failed, the package was disabled instead.
        RESTORED: Reinstalled from the system image.
        FAILED: Every attempted strategy failed.
    """

    REMOVED = "removed"
    DISABLED = "disabled"
    RESTORED = "restored"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class MutationResult:
    """Outcome of a mutation on a single package.

    Attributes:
        package: Name of the package operated on.
        outcome: What finally happened.
        error: Diagnostic text from the last failed attempt, if any.
    """

    package: str
    outcome: Outcome
    error: str | None = None

    @property
    def success(self) -> bool:
        """Check if any strategy succeeded."""
        return self.outcome != Outcome.FAILED

    @property
    def failed(self) -> bool:
        """Check if every strategy failed."""
        return self.outcome == Outcome.FAILED
