"""Shared plumbing for entity adapters.

Concrete adapters only decide which sub-fields an entity exposes and how
values are converted. Type resolution, registration, sink notification
and the send path live here.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from ...application.services import ControlPointRegistry, PointTypeRegistry
from ...config_loader import PointCatalog, PointSpec
from ...domain.entities import ControlPoint
from ...domain.exceptions import UnknownEnumValueError
from ...domain.interfaces import IEntityAdapter, IMessageTransport, IPointSink
from ...domain.interfaces.i_entity_adapter import InfoT, StateT
from ...domain.messages import CommandRequest, EntityInfo
from ...domain.value_objects import ControlPointType, TypeScope
from ..decorators import handle_send_errors

_LOGGER = logging.getLogger(__name__)


class BaseEntityAdapter(IEntityAdapter[InfoT, StateT]):
    """Base class wiring an adapter to its connection collaborators.

    Args:
        device_id: Identifier of the device connection
        registry: Control point registry of the connection
        type_registry: Process-wide point type registry
        catalog: Point catalog describing each sub-field
        sink: UI framework receiving points and values
        transport: Connection delivering command requests
    """

    def __init__(
        self,
        device_id: str,
        registry: ControlPointRegistry,
        type_registry: PointTypeRegistry,
        catalog: PointCatalog,
        sink: IPointSink,
        transport: IMessageTransport,
    ) -> None:
        self._device_id = device_id
        self._registry = registry
        self._type_registry = type_registry
        self._catalog = catalog
        self._sink = sink
        self._transport = transport

    def _spec(self, field: str) -> PointSpec:
        """Return the catalog spec of a sub-field of this kind."""
        return self._catalog.spec(self.kind, field)

    def _resolve_type(
        self,
        info: EntityInfo,
        spec: PointSpec,
        sub_field: str | None,
        options: Iterable[str] = (),
    ) -> ControlPointType:
        """Build or reuse the point type of one sub-field.

        Raises:
            PointTypeConflictError: If the identity exists with another shape
        """
        uid = self._type_registry.type_uid(spec.scope, info.object_id, sub_field)
        return self._type_registry.build_or_reuse(
            uid,
            spec.label or info.name,
            spec.value_domain,
            options=options,
            format=spec.format,
            item_type=spec.item_type,
            unit=spec.unit,
            scope=spec.scope,
        )

    def _register(
        self,
        info: EntityInfo,
        spec: PointSpec,
        sub_field: str | None,
        point_type: ControlPointType,
    ) -> ControlPoint:
        """Register a point and surface it to the sink.

        Raises:
            DuplicateRegistrationError: If the point already exists
        """
        # Point ids stay device-scoped even when the type is shared
        local_id = PointTypeRegistry.type_uid(
            TypeScope.DEVICE, info.object_id, sub_field
        )
        point = self._registry.register(
            entity_key=info.key,
            sub_field=sub_field,
            kind=self.kind,
            point_type=point_type,
            label=spec.label or info.name,
            group=spec.group,
            point_id=f"{self._device_id}:{local_id}",
        )
        self._sink.point_created(point_type, point)
        return point

    def _push(self, point: ControlPoint, value: Any) -> None:
        """Push a decoded value to the sink."""
        _LOGGER.debug("[%s] %s <- %r", self._device_id, point.point_id, value)
        self._sink.update_state(point, value)

    async def async_handle_command(
        self, point: ControlPoint, value: Any
    ) -> CommandRequest | None:
        """Encode a user command and send it to the device.

        Args:
            point: Target control point
            value: QuantityValue, plain number or text

        Returns:
            Request that was sent, or None if the value could not be mapped

        Raises:
            ProtocolSendFailure: If the transport fails to deliver the request
        """
        try:
            request = self.encode_command(point, value)
        except UnknownEnumValueError as err:
            _LOGGER.warning(
                "[%s] Dropping command for %s: %s", self._device_id, point.point_id, err
            )
            return None

        await self._async_send(request)
        return request

    @handle_send_errors("Command send", logger=_LOGGER)
    async def _async_send(self, request: CommandRequest) -> None:
        await self._transport.async_send_message(request)
