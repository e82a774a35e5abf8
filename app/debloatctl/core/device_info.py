"""Device property queries."""

import logging

from debloatctl.bridge.errors import BridgeError
from debloatctl.bridge.runner import BridgeRunner

logger = logging.getLogger(__name__)

# (label, system property) pairs shown by the device info view.
DEVICE_PROPERTIES: tuple[tuple[str, str], ...] = (
    ("Device Model", "ro.product.model"),
    ("Manufacturer", "ro.product.manufacturer"),
    ("Android Version", "ro.build.version.release"),
    ("SDK Version", "ro.build.version.sdk"),
    ("Serial Number", "ro.serialno"),
)


def get_device_info(runner: BridgeRunner) -> dict[str, str]:
    """Read identifying properties from the connected device.

    Properties that fail to load or come back empty are left out.

    Args:
        runner: Bridge runner to query through.

    Returns:
        Mapping of label to value, in display order.
    """
    info: dict[str, str] = {}

    for label, prop in DEVICE_PROPERTIES:
        try:
            value = runner.run(["shell", "getprop", prop]).strip()
        except BridgeError as e:
            logger.debug("getprop %s failed: %s", prop, e)
            continue
        if value:
            info[label] = value

    return info
