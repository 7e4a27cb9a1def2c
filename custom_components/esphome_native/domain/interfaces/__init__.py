"""Domain interfaces for ESPHome Native integration.

This module defines the contracts (interfaces) that infrastructure implementations
must fulfill. Using these interfaces enables:
- Dependency Inversion: Adapters don't depend on a concrete transport or UI framework
- Testability: Easy to fake implementations for testing
"""

from .i_entity_adapter import IEntityAdapter
from .i_message_transport import IMessageTransport
from .i_point_sink import IPointSink

__all__ = [
    "IEntityAdapter",
    "IMessageTransport",
    "IPointSink",
]
