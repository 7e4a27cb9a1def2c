# Copyright (c) 2026 ESPHome Native Contributors
# Licensed under the MIT License
# See LICENSE file for full license text

"""ESPHome Native entity adapters for Home Assistant.

This integration turns the entities a device describes over the ESPHome
native API into typed control points and keeps them synchronized with the
device in both directions. The connection itself is owned by the caller,
which hands in a transport and a sink for every device it connects.
"""

from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol

from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
import homeassistant.helpers.config_validation as cv

from .application.services import PointTypeRegistry
from .config_loader import apply_scope_overrides, async_load_point_catalog
from .const import (
    CONF_TYPE_SCOPES,
    DATA_CATALOG,
    DATA_CONNECTIONS,
    DATA_TYPE_REGISTRY,
    DOMAIN,
)
from .domain.interfaces import IMessageTransport, IPointSink
from .domain.value_objects import TypeScope
from .presentation import DeviceConnection, create_container

_LOGGER = logging.getLogger(__name__)

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(DOMAIN, default={}): vol.Schema(
            {
                vol.Optional(CONF_TYPE_SCOPES, default={}): {
                    cv.string: vol.In([scope.value for scope in TypeScope])
                },
            }
        ),
    },
    extra=vol.ALLOW_EXTRA,
)


def _domain_data(hass: HomeAssistant) -> dict[str, Any]:
    if DOMAIN not in hass.data:
        hass.data[DOMAIN] = {}
    return hass.data[DOMAIN]


def async_get_point_type_registry(hass: HomeAssistant) -> PointTypeRegistry:
    """Get or create the point type registry shared by all connections.

    Args:
        hass: Home Assistant instance

    Returns:
        PointTypeRegistry instance
    """
    data = _domain_data(hass)
    if DATA_TYPE_REGISTRY not in data:
        data[DATA_TYPE_REGISTRY] = PointTypeRegistry()
    return data[DATA_TYPE_REGISTRY]


async def async_setup(hass: HomeAssistant, config: dict[str, Any]) -> bool:
    """Set up the integration from configuration.yaml."""
    domain_config = config.get(DOMAIN, {})

    try:
        catalog = await async_load_point_catalog(hass)
        catalog = apply_scope_overrides(
            catalog, domain_config.get(CONF_TYPE_SCOPES, {})
        )
    except (FileNotFoundError, ValueError) as err:
        _LOGGER.error("Failed to load point catalog: %s", err)
        return False

    data = _domain_data(hass)
    data[DATA_CATALOG] = catalog
    data.setdefault(DATA_CONNECTIONS, {})
    async_get_point_type_registry(hass)

    _LOGGER.info("ESPHome Native adapters ready (catalog %s)", catalog.version)
    return True


async def async_create_connection(
    hass: HomeAssistant,
    device_id: str,
    transport: IMessageTransport,
    sink: IPointSink,
) -> DeviceConnection:
    """Create the adapter container for a newly connected device.

    Args:
        hass: Home Assistant instance
        device_id: Identifier of the device connection
        transport: Connection delivering command requests
        sink: UI framework receiving points and values

    Returns:
        DeviceConnection to feed inbound messages and commands into

    Raises:
        HomeAssistantError: If the device is already connected
    """
    data = _domain_data(hass)
    if DATA_CATALOG not in data:
        data[DATA_CATALOG] = await async_load_point_catalog(hass)
    connections: dict[str, DeviceConnection] = data.setdefault(DATA_CONNECTIONS, {})

    if device_id in connections:
        raise HomeAssistantError(f"Device {device_id} is already connected")

    connection = create_container(
        device_id,
        transport,
        sink,
        async_get_point_type_registry(hass),
        data[DATA_CATALOG],
    )
    connections[device_id] = connection
    _LOGGER.info("Device %s connected", device_id)
    return connection


async def async_remove_connection(hass: HomeAssistant, device_id: str) -> bool:
    """Tear down the container of a disconnected device.

    Returns:
        True if a connection was removed
    """
    connections = _domain_data(hass).get(DATA_CONNECTIONS, {})
    connection = connections.pop(device_id, None)
    if connection is None:
        _LOGGER.debug("No connection for device %s", device_id)
        return False

    connection.close()
    return True


async def async_unload(hass: HomeAssistant) -> bool:
    """Tear down every connection and the shared point types."""
    _LOGGER.debug("Unloading ESPHome Native integration")

    data = hass.data.pop(DOMAIN, {})
    for connection in data.get(DATA_CONNECTIONS, {}).values():
        connection.close()

    type_registry: PointTypeRegistry | None = data.get(DATA_TYPE_REGISTRY)
    if type_registry is not None:
        type_registry.clear()

    return True
