"""Entity adapters for ESPHome Native integration.

One adapter per entity kind translates descriptors into control points,
state messages into point values and user commands into requests.
"""

from .adapter_dispatcher import AdapterDispatcher
from .base_adapter import BaseEntityAdapter
from .climate_adapter import ClimateAdapter
from .select_adapter import SelectAdapter

__all__ = [
    "AdapterDispatcher",
    "BaseEntityAdapter",
    "ClimateAdapter",
    "SelectAdapter",
]
