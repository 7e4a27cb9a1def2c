"""ControlPointType value object.

Describes the shape of an addressable control point: its value domain,
display format and, for enumerations, the ordered allowed values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ValueDomain(Enum):
    """Value domains a control point can hold."""

    QUANTITY = "quantity"  # Number with unit (e.g. temperature)
    NUMBER = "number"  # Plain number
    ENUM = "enum"  # One of a fixed list of strings
    TEXT = "text"  # Free text


class TypeScope(Enum):
    """How the identity of a point type is scoped.

    DEVICE types are keyed by the entity's object id, so every device
    shape gets its own type. GLOBAL types use a constant identity shared
    by every device.
    """

    DEVICE = "device"
    GLOBAL = "global"


@dataclass(frozen=True)
class ControlPointType:
    """Immutable control point type description.

    Two types with the same uid and the same shape are interchangeable;
    the type registry hands out one shared instance per uid.

    Attributes:
        uid: Type identity (e.g. "living_room_mode" or "custom_fan_mode")
        label: Human-readable label
        value_domain: Value domain of the point
        item_type: Item type for the UI framework (e.g. "String")
        format: Display pattern (e.g. "%.1f")
        options: Allowed display values, in device order (ENUM only)
        unit: Unit symbol for QUANTITY points
        scope: Scope the uid was built with

    Example:
        >>> point_type = ControlPointType(
        ...     uid="living_room_mode",
        ...     label="Mode",
        ...     value_domain=ValueDomain.ENUM,
        ...     item_type="String",
        ...     format="%s",
        ...     options=("HEAT", "OFF"),
        ... )
        >>> point_type.is_enumerated
        True
    """

    uid: str
    label: str
    value_domain: ValueDomain
    item_type: str
    format: str
    options: tuple[str, ...] = ()
    unit: str | None = None
    scope: TypeScope = TypeScope.DEVICE

    def __post_init__(self) -> None:
        """Validate the type description.

        Raises:
            ValueError: If uid is empty or options are given for a
                non-enumerated domain
        """
        if not self.uid:
            raise ValueError("Point type uid cannot be empty")
        object.__setattr__(self, "options", tuple(self.options))
        if self.options and self.value_domain is not ValueDomain.ENUM:
            raise ValueError(
                f"Point type '{self.uid}' has options but domain "
                f"{self.value_domain.value}"
            )

    @property
    def is_enumerated(self) -> bool:
        """Return True if the point holds one of a fixed list of values."""
        return self.value_domain is ValueDomain.ENUM

    @property
    def shape(self) -> tuple:
        """Return everything that distinguishes two types with one uid."""
        return (
            self.label,
            self.value_domain,
            self.item_type,
            self.format,
            self.options,
            self.unit,
            self.scope,
        )
