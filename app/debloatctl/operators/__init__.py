"""Package operators for the connected device."""

from debloatctl.operators.package import PackageOperator

__all__ = ["PackageOperator"]
