"""Entity messages of the ESPHome native API.

Only field-level contents matter here; framing and encoding on the wire
belong to the transport.
"""

from .base import CommandRequest, EntityInfo, EntityState
from .climate import ClimateCommandRequest, ClimateInfo, ClimateState
from .climate_enums import ClimateFanMode, ClimateMode, ClimatePreset, ClimateSwingMode
from .entity_kind import EntityKind
from .select import SelectCommandRequest, SelectInfo, SelectState

__all__ = [
    "EntityKind",
    "EntityInfo",
    "EntityState",
    "CommandRequest",
    "ClimateMode",
    "ClimateFanMode",
    "ClimatePreset",
    "ClimateSwingMode",
    "ClimateInfo",
    "ClimateState",
    "ClimateCommandRequest",
    "SelectInfo",
    "SelectState",
    "SelectCommandRequest",
]
