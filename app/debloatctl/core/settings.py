"""Runtime settings for a debloatctl session.

Settings are assembled from CLI options and environment variables for a
single run. Nothing here is written back to disk.
"""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from debloatctl.bridge.runner import DEFAULT_EXECUTABLE

# Environment variable overriding the adb executable.
ADB_ENV_VAR = "DEBLOATCTL_ADB"

DEFAULT_TCPIP_PORT = "5555"


class Settings(BaseModel):
    """Session settings.

    Attributes:
        adb_path: Name or path of the adb executable.
        command_timeout: Timeout in seconds for a single adb call.
        connect_settle: Pause after a successful wireless connect.
        tcpip_settle: Pause after switching a USB device to TCP/IP mode.
        tcpip_port: Port used when switching a USB device to TCP/IP mode.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    adb_path: str = DEFAULT_EXECUTABLE
    command_timeout: float | None = Field(default=60.0, gt=0)
    connect_settle: float = Field(default=0.5, ge=0)
    tcpip_settle: float = Field(default=2.0, ge=0)
    tcpip_port: str = DEFAULT_TCPIP_PORT

    @field_validator("adb_path", "tcpip_port")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject blank executable names and ports."""
        value = v.strip()
        if not value:
            msg = "value cannot be empty"
            raise ValueError(msg)
        return value


def load_settings(adb_path: str | None = None) -> Settings:
    """Build settings from an explicit option and the environment.

    Priority for the adb executable:
    1. Explicit ``--adb`` option
    2. ``DEBLOATCTL_ADB`` environment variable
    3. ``adb`` from PATH

    Args:
        adb_path: Value of the ``--adb`` option, if given.

    Returns:
        Validated Settings instance.
    """
    executable = adb_path or os.environ.get(ADB_ENV_VAR) or DEFAULT_EXECUTABLE
    return Settings(adb_path=executable)
