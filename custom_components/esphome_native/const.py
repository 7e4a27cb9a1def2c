"""Constants for the ESPHome Native integration.

This file contains only essential constants needed by the integration code.
Control point labels, formats and scoping are stored in the YAML point catalog.
"""

from __future__ import annotations

from typing import Final

# Domain and basic constants
DOMAIN = "esphome_native"
DEFAULT_NAME = "ESPHome Native"

# Point catalog
CATALOG_FILENAME = "points.yaml"
CATALOG_VERSION_PREFIX = "1."

# Configuration keys
CONF_TYPE_SCOPES = "type_scopes"

# hass.data keys
DATA_TYPE_REGISTRY = "type_registry"
DATA_CATALOG = "catalog"
DATA_CONNECTIONS = "connections"

# Point configuration keys (read back when a command arrives)
CONFIG_KEY = "key"
CONFIG_COMMAND_FIELD = "command_field"
CONFIG_GROUP = "group"

# Climate sub-field discriminators
CHANNEL_TARGET_TEMPERATURE: Final = "target_temperature"
CHANNEL_CURRENT_TEMPERATURE: Final = "current_temperature"
CHANNEL_MODE: Final = "mode"
CHANNEL_FAN_MODE: Final = "fan_mode"
CHANNEL_CUSTOM_FAN_MODE: Final = "custom_fan_mode"
CHANNEL_PRESET: Final = "preset"
CHANNEL_CUSTOM_PRESET: Final = "custom_preset"
CHANNEL_SWING_MODE: Final = "swing_mode"

CLIMATE_CHANNELS: Final = (
    CHANNEL_TARGET_TEMPERATURE,
    CHANNEL_CURRENT_TEMPERATURE,
    CHANNEL_MODE,
    CHANNEL_FAN_MODE,
    CHANNEL_CUSTOM_FAN_MODE,
    CHANNEL_PRESET,
    CHANNEL_CUSTOM_PRESET,
    CHANNEL_SWING_MODE,
)

# Catalog field name for single-point kinds
CHANNEL_STATE: Final = "state"

# Grouping labels
GROUP_CLIMATE = "Climate"
GROUP_SELECT = "Select"

# Item types handed to the UI framework
ITEM_TYPE_TEMPERATURE = "Number:Temperature"
ITEM_TYPE_NUMBER = "Number"
ITEM_TYPE_STRING = "String"
