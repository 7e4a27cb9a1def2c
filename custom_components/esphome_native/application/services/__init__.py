"""Application services for ESPHome Native integration."""

from .control_point_registry import ControlPointRegistry
from .point_type_registry import PointTypeRegistry

__all__ = [
    "ControlPointRegistry",
    "PointTypeRegistry",
]
