"""Climate enumerations of the ESPHome native API.

Member names are the raw protocol tokens (``CLIMATE_MODE_HEAT``), member
values are the numbers sent on the wire.
"""

from enum import IntEnum


class ClimateMode(IntEnum):
    """Climate operating modes."""

    CLIMATE_MODE_OFF = 0
    CLIMATE_MODE_HEAT_COOL = 1
    CLIMATE_MODE_COOL = 2
    CLIMATE_MODE_HEAT = 3
    CLIMATE_MODE_FAN_ONLY = 4
    CLIMATE_MODE_DRY = 5
    CLIMATE_MODE_AUTO = 6


class ClimateFanMode(IntEnum):
    """Climate fan modes."""

    CLIMATE_FAN_ON = 0
    CLIMATE_FAN_OFF = 1
    CLIMATE_FAN_AUTO = 2
    CLIMATE_FAN_LOW = 3
    CLIMATE_FAN_MEDIUM = 4
    CLIMATE_FAN_HIGH = 5
    CLIMATE_FAN_MIDDLE = 6
    CLIMATE_FAN_FOCUS = 7
    CLIMATE_FAN_DIFFUSE = 8
    CLIMATE_FAN_QUIET = 9


class ClimateSwingMode(IntEnum):
    """Climate swing modes."""

    CLIMATE_SWING_OFF = 0
    CLIMATE_SWING_BOTH = 1
    CLIMATE_SWING_VERTICAL = 2
    CLIMATE_SWING_HORIZONTAL = 3


class ClimatePreset(IntEnum):
    """Climate presets."""

    CLIMATE_PRESET_NONE = 0
    CLIMATE_PRESET_HOME = 1
    CLIMATE_PRESET_AWAY = 2
    CLIMATE_PRESET_BOOST = 3
    CLIMATE_PRESET_COMFORT = 4
    CLIMATE_PRESET_ECO = 5
    CLIMATE_PRESET_SLEEP = 6
    CLIMATE_PRESET_ACTIVITY = 7
