"""Value Objects for ESPHome Native domain.

Value Objects are immutable domain primitives that:
- Have no identity (equality based on value, not reference)
- Are immutable (cannot be changed after creation)
- Validate their invariants at construction
"""

from .point_key import PointKey
from .point_type import ControlPointType, TypeScope, ValueDomain
from .quantity_value import QuantityValue

__all__ = [
    "PointKey",
    "ControlPointType",
    "TypeScope",
    "ValueDomain",
    "QuantityValue",
]
