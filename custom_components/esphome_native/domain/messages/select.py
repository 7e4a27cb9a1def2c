"""Select entity messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from .base import CommandRequest, EntityInfo, EntityState
from .entity_kind import EntityKind


@dataclass(frozen=True)
class SelectInfo(EntityInfo):
    """Select descriptor (``ListEntitiesSelectResponse``).

    Options are free strings defined in the device firmware, not
    protocol enum constants.
    """

    kind: ClassVar[EntityKind] = EntityKind.SELECT

    options: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate identity and normalize options to a tuple."""
        super().__post_init__()
        object.__setattr__(self, "options", tuple(str(opt) for opt in self.options))


@dataclass(frozen=True)
class SelectState(EntityState):
    """Select state (``SelectStateResponse``).

    Attributes:
        state: Currently selected option
        missing_state: Device has no selection yet
    """

    kind: ClassVar[EntityKind] = EntityKind.SELECT

    state: str = ""
    missing_state: bool = False


@dataclass(frozen=True)
class SelectCommandRequest(CommandRequest):
    """Select command (``SelectCommandRequest``)."""

    kind: ClassVar[EntityKind] = EntityKind.SELECT

    state: str = ""

    def as_message(self) -> dict[str, Any]:
        """Flatten to protocol fields."""
        return {"key": self.key, "state": self.state}
