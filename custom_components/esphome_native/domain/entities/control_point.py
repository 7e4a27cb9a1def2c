"""ControlPoint entity.

A ControlPoint is one addressable, stateful unit surfaced to the UI
framework. Entities with several facets (climate) expose one point per
sub-field; single-point entities (select) expose exactly one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...const import CONFIG_COMMAND_FIELD, CONFIG_GROUP, CONFIG_KEY
from ..messages.entity_kind import EntityKind
from ..value_objects import ControlPointType, PointKey


@dataclass(eq=False)
class ControlPoint:
    """Domain entity representing one control point.

    Equality is identity based: a point is created once per descriptor
    and lives until its connection is removed.

    Attributes:
        point_id: Connection-unique id (e.g. "kitchen:living_room_mode")
        key: Composite (entity key, sub-field) key
        kind: Kind of the owning entity
        point_type: Shared type description
        label: Human-readable label
        group: Grouping label clustering related sub-fields, if any

    Example:
        >>> point = ControlPoint(
        ...     point_id="kitchen:living_room_mode",
        ...     key=PointKey(3, "mode"),
        ...     kind=EntityKind.CLIMATE,
        ...     point_type=mode_type,
        ...     label="Mode",
        ...     group="Climate",
        ... )
        >>> point.configuration
        {'key': 3, 'command_field': 'mode', 'group': 'Climate'}
    """

    point_id: str
    key: PointKey
    kind: EntityKind
    point_type: ControlPointType
    label: str
    group: str | None = None

    def __post_init__(self) -> None:
        """Validate point attributes."""
        if not self.point_id:
            raise ValueError("Control point id cannot be empty")

    @property
    def entity_key(self) -> int:
        """Return the protocol key of the owning entity."""
        return self.key.entity_key

    @property
    def sub_field(self) -> str | None:
        """Return the sub-field discriminator."""
        return self.key.sub_field

    @property
    def configuration(self) -> dict[str, Any]:
        """Return the stored point configuration.

        The command path reads the sub-field discriminator back from here.
        """
        return {
            CONFIG_KEY: self.key.entity_key,
            CONFIG_COMMAND_FIELD: self.key.sub_field,
            CONFIG_GROUP: self.group,
        }

    def __repr__(self) -> str:
        """Developer representation."""
        return (
            f"ControlPoint(point_id={self.point_id!r}, key={self.key}, "
            f"type={self.point_type.uid!r})"
        )
