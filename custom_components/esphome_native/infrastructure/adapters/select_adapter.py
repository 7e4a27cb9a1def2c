"""Select entity adapter."""

from __future__ import annotations

import logging
from typing import Any

from ...const import CHANNEL_STATE
from ...domain.entities import ControlPoint
from ...domain.messages import (
    EntityKind,
    SelectCommandRequest,
    SelectInfo,
    SelectState,
)
from .base_adapter import BaseEntityAdapter

_LOGGER = logging.getLogger(__name__)


class SelectAdapter(BaseEntityAdapter[SelectInfo, SelectState]):
    """Adapter for select entities.

    A select is a single enumerated point without sub-field. Its options
    are free strings defined by the device and are used verbatim.
    """

    kind = EntityKind.SELECT

    def build_points(self, info: SelectInfo) -> list[ControlPoint]:
        """Create the single point of a select entity."""
        spec = self._spec(CHANNEL_STATE)
        point_type = self._resolve_type(info, spec, None, info.options)
        point = self._register(info, spec, None, point_type)

        _LOGGER.info(
            "[%s] Built select %s (key %d) with %d options",
            self._device_id,
            info.object_id,
            info.key,
            len(info.options),
        )
        return [point]

    def handle_state(self, state: SelectState) -> None:
        """Push the selected option, or None when the device has none."""
        point = self._registry.lookup_any(state.key)
        if point is None:
            _LOGGER.debug(
                "[%s] State for unknown select key %d", self._device_id, state.key
            )
            return

        self._push(point, None if state.missing_state else state.state)

    def encode_command(self, point: ControlPoint, value: Any) -> SelectCommandRequest:
        """Translate a user selection into a select request."""
        return SelectCommandRequest(key=point.entity_key, state=str(value))
