"""EntityKind tag carried by every entity message."""

from enum import Enum


class EntityKind(Enum):
    """Entity kinds handled by the adapter layer.

    The tag selects the adapter that builds, decodes and encodes messages
    for an entity. Only the kinds listed here are routed; every other kind
    the device advertises is ignored.
    """

    CLIMATE = "climate"
    SELECT = "select"
