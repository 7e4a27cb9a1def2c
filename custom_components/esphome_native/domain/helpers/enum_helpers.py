"""Enum name normalization helpers.

Protocol enum tokens carry a family prefix (``CLIMATE_MODE_HEAT``); control
points show the bare suffix (``HEAT``). These helpers convert between the
two forms. All functions are pure.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any

from ..exceptions import UnknownEnumValueError
from ..messages.climate_enums import (
    ClimateFanMode,
    ClimateMode,
    ClimatePreset,
    ClimateSwingMode,
)


class EnumFamily(Enum):
    """Known enum families with their token prefix and enumeration.

    Example:
        >>> EnumFamily.FAN_MODE.prefix
        'CLIMATE_FAN_'
        >>> EnumFamily.FAN_MODE.enum_cls
        <enum 'ClimateFanMode'>
    """

    MODE = ("CLIMATE_MODE_", ClimateMode)
    FAN_MODE = ("CLIMATE_FAN_", ClimateFanMode)
    PRESET = ("CLIMATE_PRESET_", ClimatePreset)
    SWING_MODE = ("CLIMATE_SWING_", ClimateSwingMode)

    def __init__(self, prefix: str, enum_cls: type[IntEnum]) -> None:
        """Expose the tuple members as attributes."""
        self.prefix = prefix
        self.enum_cls = enum_cls


def _token_of(value: Any) -> str:
    """Return the raw token for an enum member or token string."""
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, str):
        return value
    raise UnknownEnumValueError(f"Unsupported enum value: {value!r}")


def family_for(value: Any) -> EnumFamily:
    """Return the family whose prefix the value carries.

    Args:
        value: Enum member or raw token string

    Returns:
        Matching EnumFamily

    Raises:
        UnknownEnumValueError: If no known prefix matches

    Example:
        >>> family_for("CLIMATE_SWING_BOTH")
        <EnumFamily.SWING_MODE: ('CLIMATE_SWING_', <enum 'ClimateSwingMode'>)>
    """
    token = _token_of(value)
    for family in EnumFamily:
        if token.startswith(family.prefix):
            return family
    raise UnknownEnumValueError(f"No known enum family for token: {token}")


def strip_enum_prefix(value: Any, family: EnumFamily | None = None) -> str:
    """Remove the family prefix from an enum token.

    Args:
        value: Enum member or raw token string
        family: Expected family; inferred from the token when omitted

    Returns:
        Display value (upper-case suffix)

    Raises:
        UnknownEnumValueError: If the token does not carry the family prefix

    Example:
        >>> strip_enum_prefix(ClimateMode.CLIMATE_MODE_HEAT)
        'HEAT'
        >>> strip_enum_prefix("CLIMATE_FAN_AUTO", EnumFamily.FAN_MODE)
        'AUTO'
    """
    token = _token_of(value)
    if family is None:
        family = family_for(token)
    if not token.startswith(family.prefix):
        raise UnknownEnumValueError(
            f"Token {token} does not belong to {family.enum_cls.__name__}"
        )
    return token[len(family.prefix) :]


def to_enum(family: EnumFamily, display_value: str) -> IntEnum:
    """Rebuild the protocol enum member from a display value.

    Args:
        family: Target enum family
        display_value: Display value (``HEAT``); surrounding whitespace
            and letter case are ignored

    Returns:
        Enum member of the family's enumeration

    Raises:
        UnknownEnumValueError: If the rebuilt token is not a member
        ValueError: If family is not a known EnumFamily

    Example:
        >>> to_enum(EnumFamily.MODE, "HEAT")
        <ClimateMode.CLIMATE_MODE_HEAT: 3>
    """
    if not isinstance(family, EnumFamily):
        raise ValueError(f"Unknown enum family: {family!r}")

    token = f"{family.prefix}{str(display_value).strip().upper()}"
    try:
        return family.enum_cls[token]
    except KeyError:
        raise UnknownEnumValueError(
            f"{token} is not a {family.enum_cls.__name__}"
        ) from None
