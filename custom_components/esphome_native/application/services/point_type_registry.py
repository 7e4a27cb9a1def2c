"""PointTypeRegistry for building and sharing control point types.

Point types are built dynamically from descriptor metadata. Points of the
same shape share one type instance, so building is idempotent: asking for
an identity that already exists returns the existing type instead of a
duplicate. A device-scoped type asked for with a new shape is replaced;
points built earlier keep the instance they were built with.

The registry lives for the runtime of the integration and is shared by
every device connection, which may run on different threads.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable

from ...const import ITEM_TYPE_STRING
from ...domain.exceptions import PointTypeConflictError
from ...domain.value_objects import ControlPointType, TypeScope, ValueDomain

_LOGGER = logging.getLogger(__name__)


class PointTypeRegistry:
    """Process-wide cache of control point types keyed by identity.

    Responsibilities:
    - Build the identity of a type from its scope
    - Create a type on first request (atomic insert-if-absent)
    - Return the shared instance on every later request with the same shape
    - Replace a device-scoped type requested with a different shape
    - Reject a global type requested with a different shape

    Example:
        >>> registry = PointTypeRegistry()
        >>> uid = registry.type_uid(TypeScope.DEVICE, "living_room", "mode")
        >>> first = registry.build_or_reuse(uid, "Mode", ValueDomain.ENUM, ("HEAT", "OFF"))
        >>> second = registry.build_or_reuse(uid, "Mode", ValueDomain.ENUM, ("HEAT", "OFF"))
        >>> assert first is second
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._types: dict[str, ControlPointType] = {}
        self._lock = threading.Lock()

    @staticmethod
    def type_uid(scope: TypeScope, object_id: str, field: str | None) -> str:
        """Return the deterministic identity of a point type.

        Args:
            scope: DEVICE to key by object id, GLOBAL for a shared constant
            object_id: Object id of the entity
            field: Sub-field name, None for single-point entities

        Returns:
            Type identity

        Example:
            >>> PointTypeRegistry.type_uid(TypeScope.DEVICE, "living_room", "mode")
            'living_room_mode'
            >>> PointTypeRegistry.type_uid(TypeScope.GLOBAL, "living_room", "custom_preset")
            'custom_preset'
            >>> PointTypeRegistry.type_uid(TypeScope.DEVICE, "fan_speed", None)
            'fan_speed'
        """
        if field is None:
            return object_id
        if scope is TypeScope.GLOBAL:
            return field
        return f"{object_id}_{field}"

    def build_or_reuse(
        self,
        uid: str,
        label: str,
        value_domain: ValueDomain,
        options: Iterable[str] = (),
        format: str = "%s",
        item_type: str = ITEM_TYPE_STRING,
        unit: str | None = None,
        scope: TypeScope = TypeScope.DEVICE,
    ) -> ControlPointType:
        """Return the type for ``uid``, building it on first use.

        Args:
            uid: Type identity (see type_uid)
            label: Human-readable label
            value_domain: Value domain of points using the type
            options: Allowed display values, in order (ENUM only)
            format: Display pattern
            item_type: Item type for the UI framework
            unit: Unit symbol for quantities
            scope: Scope the identity was built with

        Returns:
            Shared ControlPointType instance

        Raises:
            PointTypeConflictError: If uid exists with a different shape and
                either side is globally scoped
        """
        candidate = ControlPointType(
            uid=uid,
            label=label,
            value_domain=value_domain,
            item_type=item_type,
            format=format,
            options=tuple(options),
            unit=unit,
            scope=scope,
        )

        with self._lock:
            existing = self._types.get(uid)
            if existing is None:
                self._types[uid] = candidate
                _LOGGER.debug(
                    "Created point type %s (%s, %d options)",
                    uid,
                    value_domain.value,
                    len(candidate.options),
                )
                return candidate

            if existing.shape == candidate.shape:
                return existing

            # Object ids repeat across devices and change with firmware
            if existing.scope is TypeScope.DEVICE and scope is TypeScope.DEVICE:
                self._types[uid] = candidate
                _LOGGER.info(
                    "Replaced point type %s (%d options, was %d)",
                    uid,
                    len(candidate.options),
                    len(existing.options),
                )
                return candidate

        _LOGGER.debug(
            "Point type %s requested with shape %s, existing %s",
            uid,
            candidate.shape,
            existing.shape,
        )
        raise PointTypeConflictError(uid)

    def get(self, uid: str) -> ControlPointType | None:
        """Return the type with identity ``uid``, if built."""
        with self._lock:
            return self._types.get(uid)

    def clear(self) -> None:
        """Drop every type (integration unload)."""
        with self._lock:
            count = len(self._types)
            self._types.clear()
        _LOGGER.debug("Cleared %d point types", count)

    def __contains__(self, uid: object) -> bool:
        """Return True if a type with identity ``uid`` exists."""
        with self._lock:
            return uid in self._types

    def __len__(self) -> int:
        """Return the number of types built."""
        with self._lock:
            return len(self._types)
