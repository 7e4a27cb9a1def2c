"""ControlPointRegistry for one device connection.

Maps the composite key (entity key, sub-field) to the live control point.
Written during the build phase, read by state decoding and by the command
path, which may run on another thread.
"""

from __future__ import annotations

import logging
import threading

from ...domain.entities import ControlPoint
from ...domain.exceptions import DuplicateRegistrationError
from ...domain.messages import EntityKind
from ...domain.value_objects import ControlPointType, PointKey

_LOGGER = logging.getLogger(__name__)


class ControlPointRegistry:
    """Per-connection store of control points.

    Responsibilities:
    - Create each point exactly once per (entity key, sub-field)
    - Exact lookup by composite key
    - Lookup of any point of an entity (single-point kinds)

    Example:
        >>> registry = ControlPointRegistry("kitchen")
        >>> point = registry.register(
        ...     entity_key=4,
        ...     sub_field=None,
        ...     kind=EntityKind.SELECT,
        ...     point_type=speed_type,
        ...     label="Fan speed",
        ...     group="Select",
        ...     point_id="kitchen:fan_speed",
        ... )
        >>> assert registry.lookup_any(4) is point
    """

    def __init__(self, device_id: str) -> None:
        """Initialize an empty registry.

        Args:
            device_id: Identifier of the device connection, for logging
        """
        self._device_id = device_id
        self._points: dict[PointKey, ControlPoint] = {}
        self._lock = threading.RLock()

    @property
    def device_id(self) -> str:
        """Return the device connection identifier."""
        return self._device_id

    def register(
        self,
        entity_key: int,
        sub_field: str | None,
        kind: EntityKind,
        point_type: ControlPointType,
        label: str,
        group: str | None,
        point_id: str,
    ) -> ControlPoint:
        """Create and store a new control point.

        Args:
            entity_key: Protocol key of the entity
            sub_field: Sub-field discriminator, None for single-point entities
            kind: Kind of the entity
            point_type: Shared type of the point
            label: Human-readable label
            group: Grouping label, if any
            point_id: Connection-unique point id

        Returns:
            Newly created ControlPoint

        Raises:
            DuplicateRegistrationError: If the key is already registered
        """
        key = PointKey(entity_key, sub_field)
        with self._lock:
            if key in self._points:
                raise DuplicateRegistrationError(entity_key, sub_field)
            point = ControlPoint(
                point_id=point_id,
                key=key,
                kind=kind,
                point_type=point_type,
                label=label,
                group=group,
            )
            self._points[key] = point

        _LOGGER.debug(
            "[%s] Registered %s as %s (type %s)",
            self._device_id,
            key,
            point_id,
            point_type.uid,
        )
        return point

    def lookup(self, entity_key: int, sub_field: str | None) -> ControlPoint | None:
        """Return the point registered under the exact key, if any."""
        with self._lock:
            return self._points.get(PointKey(entity_key, sub_field))

    def lookup_any(self, entity_key: int) -> ControlPoint | None:
        """Return a point of the entity regardless of sub-field, if any."""
        with self._lock:
            for key, point in self._points.items():
                if key.entity_key == entity_key:
                    return point
        return None

    def is_registered(self, entity_key: int) -> bool:
        """Return True if any point exists for the entity."""
        return self.lookup_any(entity_key) is not None

    @property
    def points(self) -> list[ControlPoint]:
        """Return a snapshot of all points, in registration order."""
        with self._lock:
            return list(self._points.values())

    def clear(self) -> None:
        """Drop every point (connection removed)."""
        with self._lock:
            count = len(self._points)
            self._points.clear()
        _LOGGER.debug("[%s] Cleared %d control points", self._device_id, count)

    def __contains__(self, key: object) -> bool:
        """Return True if a PointKey is registered."""
        with self._lock:
            return key in self._points

    def __len__(self) -> int:
        """Return the number of registered points."""
        with self._lock:
            return len(self._points)
