"""Base records for entity messages.

Every message exchanged with the device concerns exactly one entity,
identified by its protocol ``key``. Subclasses carry a ``kind`` class
attribute used to route them to the matching adapter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..exceptions import MalformedDescriptorError
from .entity_kind import EntityKind


@dataclass(frozen=True)
class EntityInfo:
    """Descriptor message received once per entity after connecting.

    Attributes:
        key: Device-scoped unique entity key
        object_id: Device-scoped unique object id, used to name point types
        name: Human-readable entity name

    Raises:
        MalformedDescriptorError: If key or object_id are unusable
    """

    kind: ClassVar[EntityKind]

    key: int
    object_id: str
    name: str = ""

    def __post_init__(self) -> None:
        """Validate identity fields."""
        if not isinstance(self.key, int) or isinstance(self.key, bool):
            raise MalformedDescriptorError(
                f"Entity key must be int, got {type(self.key).__name__}"
            )
        if not self.object_id:
            raise MalformedDescriptorError(
                f"Entity {self.key} has an empty object_id"
            )


@dataclass(frozen=True)
class EntityState:
    """State message carrying the full current value set of an entity."""

    kind: ClassVar[EntityKind]

    key: int


@dataclass(frozen=True)
class CommandRequest:
    """Outbound command request addressed to one entity."""

    kind: ClassVar[EntityKind]

    key: int
