"""Route entity messages to the adapter of their kind."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from ...domain.entities import ControlPoint
from ...domain.messages import CommandRequest, EntityInfo, EntityKind, EntityState
from .base_adapter import BaseEntityAdapter

_LOGGER = logging.getLogger(__name__)


class AdapterDispatcher:
    """Closed dispatch table from entity kind to adapter.

    Messages are routed by their ``kind`` tag; commands by the kind of the
    target point. Kinds without an adapter are ignored.

    Example:
        >>> dispatcher = AdapterDispatcher([climate_adapter, select_adapter])
        >>> dispatcher.handle_descriptor(SelectInfo(key=4, object_id="fan_speed"))
        [ControlPoint(point_id='kitchen:fan_speed', key=4, type='fan_speed')]
    """

    def __init__(self, adapters: Iterable[BaseEntityAdapter]) -> None:
        """Initialize the table.

        Args:
            adapters: One adapter per supported kind

        Raises:
            ValueError: If two adapters claim the same kind
        """
        self._adapters: dict[EntityKind, BaseEntityAdapter] = {}
        for adapter in adapters:
            if adapter.kind in self._adapters:
                raise ValueError(f"Duplicate adapter for {adapter.kind.value}")
            self._adapters[adapter.kind] = adapter

    @property
    def adapters(self) -> Mapping[EntityKind, BaseEntityAdapter]:
        """Return the dispatch table."""
        return dict(self._adapters)

    def _adapter_for(self, kind: EntityKind | None) -> BaseEntityAdapter | None:
        adapter = self._adapters.get(kind)
        if adapter is None:
            _LOGGER.debug("No adapter for entity kind %s, ignoring", kind)
        return adapter

    def handle_descriptor(self, info: EntityInfo) -> list[ControlPoint]:
        """Build the points of a descriptor.

        Returns:
            Points created, empty if the kind is not supported

        Raises:
            DuplicateRegistrationError: If the entity was already built
            PointTypeConflictError: If a point type clashes with an existing one
        """
        adapter = self._adapter_for(getattr(info, "kind", None))
        if adapter is None:
            return []
        return adapter.build_points(info)

    def handle_state(self, state: EntityState) -> None:
        """Decode a state message."""
        adapter = self._adapter_for(getattr(state, "kind", None))
        if adapter is not None:
            adapter.handle_state(state)

    async def async_handle_command(
        self, point: ControlPoint, value: Any
    ) -> CommandRequest | None:
        """Encode and send a user command.

        Returns:
            Request that was sent, or None if nothing was sent

        Raises:
            ProtocolSendFailure: If the transport fails to deliver the request
        """
        adapter = self._adapter_for(point.kind)
        if adapter is None:
            return None
        return await adapter.async_handle_command(point, value)
