"""Domain helper functions."""

from .enum_helpers import EnumFamily, family_for, strip_enum_prefix, to_enum

__all__ = [
    "EnumFamily",
    "family_for",
    "strip_enum_prefix",
    "to_enum",
]
