"""Configuration derivation."""

from tsscaffold.core.derive.rules import derive, to_package_name

__all__ = ["derive", "to_package_name"]
