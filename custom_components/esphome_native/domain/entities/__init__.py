"""Domain entities for ESPHome Native integration.

Entities are domain objects that have:
- Identity (can be distinguished by ID, even if all other attributes same)
- Lifecycle (created, used, torn down)

Key differences from value objects:
- Entities: Identity-based equality (same object = same entity)
- Value Objects: Value-based equality (same values = equal)
"""

from .control_point import ControlPoint

__all__ = [
    "ControlPoint",
]
