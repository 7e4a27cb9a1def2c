"""Per-connection dependency container.

One DeviceConnection is created for every connected device. It owns the
connection's control point registry and wires it to the entity adapters,
the shared point type registry, the transport and the UI sink.

Messages of one connection are handled sequentially in receipt order;
only the command path may run concurrently with them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from ..application.services import ControlPointRegistry, PointTypeRegistry
from ..config_loader import PointCatalog
from ..domain.entities import ControlPoint
from ..domain.interfaces import IMessageTransport, IPointSink
from ..domain.messages import CommandRequest, EntityInfo, EntityState
from ..infrastructure.adapters import (
    AdapterDispatcher,
    BaseEntityAdapter,
    ClimateAdapter,
    SelectAdapter,
)

_LOGGER = logging.getLogger(__name__)

ADAPTER_CLASSES: tuple[type[BaseEntityAdapter], ...] = (ClimateAdapter, SelectAdapter)


@dataclass
class DeviceConnection:
    """Dependency container of one device connection.

    Attributes:
        device_id: Identifier of the device connection
        transport: Connection delivering command requests
        sink: UI framework receiving points and values
        type_registry: Process-wide point type registry
        catalog: Point catalog describing each sub-field
        registry: Control point registry of this connection
        adapters: Entity adapters, one per kind
        dispatcher: Routes messages to adapters

    Example:
        >>> connection = create_container(
        ...     "kitchen", transport, sink, type_registry, catalog
        ... )
        >>> connection.handle_message(SelectInfo(key=4, object_id="fan_speed"))
        >>> await connection.async_handle_command(connection.registry.lookup_any(4), "High")
    """

    device_id: str
    transport: IMessageTransport
    sink: IPointSink
    type_registry: PointTypeRegistry
    catalog: PointCatalog
    registry: Optional[ControlPointRegistry] = None
    adapters: list[BaseEntityAdapter] = field(default_factory=list)
    dispatcher: Optional[AdapterDispatcher] = None

    def handle_message(self, message: Any) -> list[ControlPoint]:
        """Handle one inbound message.

        Descriptors build points, states update them. Anything else is
        ignored.

        Args:
            message: Descriptor or state message

        Returns:
            Points created by a descriptor, otherwise an empty list

        Raises:
            DuplicateRegistrationError: If a descriptor is received twice
            PointTypeConflictError: If a point type clashes with an existing one
        """
        if isinstance(message, EntityInfo):
            return self.dispatcher.handle_descriptor(message)
        if isinstance(message, EntityState):
            self.dispatcher.handle_state(message)
        else:
            _LOGGER.debug(
                "[%s] Ignoring message %s", self.device_id, type(message).__name__
            )
        return []

    async def async_handle_command(
        self, point: ControlPoint, value: Any
    ) -> CommandRequest | None:
        """Send a user command for one of this connection's points.

        Raises:
            ProtocolSendFailure: If the transport fails to deliver the request
        """
        return await self.dispatcher.async_handle_command(point, value)

    def close(self) -> None:
        """Tear down the connection's control points."""
        self.registry.clear()
        _LOGGER.info("[%s] Connection closed", self.device_id)


def create_container(
    device_id: str,
    transport: IMessageTransport,
    sink: IPointSink,
    type_registry: PointTypeRegistry,
    catalog: PointCatalog,
) -> DeviceConnection:
    """Factory function to create a fully-wired connection container.

    Args:
        device_id: Identifier of the device connection
        transport: Connection delivering command requests
        sink: UI framework receiving points and values
        type_registry: Process-wide point type registry
        catalog: Point catalog describing each sub-field

    Returns:
        Fully-wired DeviceConnection
    """
    container = DeviceConnection(
        device_id=device_id,
        transport=transport,
        sink=sink,
        type_registry=type_registry,
        catalog=catalog,
    )

    container.registry = ControlPointRegistry(device_id)
    container.adapters = [
        adapter_cls(
            device_id,
            container.registry,
            type_registry,
            catalog,
            sink,
            transport,
        )
        for adapter_cls in ADAPTER_CLASSES
        if adapter_cls.kind in catalog.kinds
    ]
    container.dispatcher = AdapterDispatcher(container.adapters)

    _LOGGER.debug(
        "[%s] Created connection with adapters: %s",
        device_id,
        ", ".join(adapter.kind.value for adapter in container.adapters),
    )
    return container
