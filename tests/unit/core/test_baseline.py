"""Unit tests for Android baseline module.

Tests for critical package membership and the known bloatware list.
"""

import pytest
from debloatctl.core.baseline import (
    CRITICAL_PACKAGES,
    KNOWN_BLOATWARE,
    is_critical,
)


class TestIsCritical:
    """Tests for is_critical function."""

    @pytest.mark.parametrize(
        "package_name",
        [
            "com.android.systemui",
            "com.android.settings",
            "com.android.phone",
            "com.android.vending",
            "com.google.android.gms",
        ],
    )
    def test_critical_packages(self, package_name: str) -> None:
        """Packages in CRITICAL_PACKAGES are critical."""
        assert is_critical(package_name) is True

    @pytest.mark.parametrize(
        "package_name",
        [
            "com.facebook.katana",
            "com.android.systemui.extra",
            "COM.ANDROID.SYSTEMUI",
            " com.android.systemui",
            "",
        ],
    )
    def test_only_exact_names_match(self, package_name: str) -> None:
        """Membership is exact and case-sensitive."""
        assert is_critical(package_name) is False


class TestBaselineLists:
    """Tests for the baseline constants."""

    def test_critical_set_size(self) -> None:
        """Nine packages are critical."""
        assert len(CRITICAL_PACKAGES) == 9
        assert isinstance(CRITICAL_PACKAGES, frozenset)

    def test_known_bloatware_size(self) -> None:
        """Twenty-nine packages are probed by the bloatware scan."""
        assert len(KNOWN_BLOATWARE) == 29
        assert len(set(KNOWN_BLOATWARE)) == 29

    def test_bloatware_is_never_critical(self) -> None:
        """No known bloatware name is critical."""
        assert not set(KNOWN_BLOATWARE) & CRITICAL_PACKAGES

    def test_probe_order_starts_with_facebook(self) -> None:
        """The probe order is stable."""
        assert KNOWN_BLOATWARE[0] == "com.facebook.katana"
        assert KNOWN_BLOATWARE[-1] == "com.samsung.android.messaging"
