"""Backup of the loaded package list.

A backup is a point-in-time JSON snapshot of every package name in the
catalog, regardless of selection state.
"""

import logging
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


class Backup(BaseModel):
    """Snapshot of package names.

    Attributes:
        timestamp: Local creation time formatted as YYYYMMDD_HHMMSS.
        packages: Package names in catalog order.
    """

    model_config = ConfigDict(extra="forbid")

    timestamp: str
    packages: list[str]

    @field_validator("packages")
    @classmethod
    def validate_packages(cls, v: list[str]) -> list[str]:
        """Require at least one package name."""
        if not v:
            msg = "Backup must contain at least one package"
            raise ValueError(msg)
        return v

    @property
    def filename(self) -> str:
        """File name the backup is written under."""
        return f"backup_{self.timestamp}.json"


def create_backup(
    packages: list[str],
    directory: Path | None = None,
    now: datetime | None = None,
) -> Path:
    """Write a backup file for the given package names.

    Args:
        packages: Package names to record.
        directory: Target directory. Defaults to the working directory.
        now: Creation time. Defaults to the current local time.

    Returns:
        Path of the written file.

    Raises:
        ValueError: If no package names are given.
        OSError: If the file cannot be written.
    """
    timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    backup = Backup(timestamp=timestamp, packages=packages)

    target_dir = directory if directory is not None else Path.cwd()
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / backup.filename

    path.write_text(backup.model_dump_json(indent=2), encoding="utf-8")
    logger.info("Wrote backup of %d packages to %s", len(packages), path)
    return path


def load_backup(path: Path) -> Backup:
    """Read a backup file.

    Raises:
        OSError: If the file cannot be read.
        pydantic.ValidationError: If the content is not a valid backup.
    """
    return Backup.model_validate_json(path.read_text(encoding="utf-8"))
