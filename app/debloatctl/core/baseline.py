"""Android baseline package definitions.

This module defines the packages that are critical for device stability
and the well-known bloatware probed by the bloatware scan.
"""

# Packages whose removal risks breaking the UI, telephony or account services.
# Membership is an exact, case-sensitive match.
CRITICAL_PACKAGES: frozenset[str] = frozenset(
    {
        "com.android.systemui",
        "com.android.settings",
        "com.android.phone",
        "com.android.providers.settings",
        "com.android.providers.contacts",
        "com.android.vending",
        "com.google.android.gms",
        "com.android.inputmethod.latin",
        "com.android.launcher3",
    }
)

# Pre-installed packages commonly removed. Probed one by one on the device.
KNOWN_BLOATWARE: tuple[str, ...] = (
    # Facebook
    "com.facebook.katana",
    "com.facebook.system",
    "com.facebook.appmanager",
    "com.facebook.services",
    # Third-party media and social
    "com.netflix.mediaclient",
    "com.spotify.music",
    "com.linkedin.android",
    # Microsoft
    "com.microsoft.office.excel",
    "com.microsoft.office.word",
    "com.microsoft.office.powerpoint",
    "com.microsoft.skype.raider",
    # AOSP extras
    "com.android.bips",
    "com.android.bookmarkprovider",
    "com.android.dreams.basic",
    "com.android.dreams.phototable",
    "com.android.egg",
    "com.android.printspooler",
    # Google apps
    "com.google.android.apps.docs",
    "com.google.android.apps.maps",
    "com.google.android.apps.photos",
    "com.google.android.apps.tachyon",
    "com.google.android.music",
    "com.google.android.videos",
    "com.google.android.youtube",
    # Samsung
    "com.samsung.android.game.gamehome",
    "com.samsung.android.game.gametools",
    "com.samsung.android.bixby.agent",
    "com.samsung.android.app.spage",
    "com.samsung.android.messaging",
)


def is_critical(package_name: str) -> bool:
    """Check if a package is critical for device stability.

    Args:
        package_name: Exact package name to check.

    Returns:
        True if the name is in the critical set, False otherwise.
    """
    return package_name in CRITICAL_PACKAGES
