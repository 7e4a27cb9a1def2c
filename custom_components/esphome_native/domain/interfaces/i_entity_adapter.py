"""IEntityAdapter interface implemented once per entity kind."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from ..entities.control_point import ControlPoint
from ..messages.base import CommandRequest, EntityInfo, EntityState
from ..messages.entity_kind import EntityKind

InfoT = TypeVar("InfoT", bound=EntityInfo)
StateT = TypeVar("StateT", bound=EntityState)


class IEntityAdapter(ABC, Generic[InfoT, StateT]):
    """Build, decode and encode behavior of one entity kind.

    Lifecycle per connection:
        1. build_points(descriptor) once per entity
        2. handle_state(state) on every state message
        3. encode_command(point, value) on every user command
    """

    kind: EntityKind

    @abstractmethod
    def build_points(self, info: InfoT) -> list[ControlPoint]:
        """Create and register the control points of an entity.

        Args:
            info: Descriptor message

        Returns:
            Points registered for the entity, in creation order

        Raises:
            DuplicateRegistrationError: If the entity was already built
            PointTypeConflictError: If a point type clashes with an existing one
        """

    @abstractmethod
    def handle_state(self, state: StateT) -> None:
        """Decode a state message and push values to registered points."""

    @abstractmethod
    def encode_command(self, point: ControlPoint, value: Any) -> CommandRequest:
        """Translate a user command into a protocol request.

        Args:
            point: Target control point; its configuration names the sub-field
            value: QuantityValue, plain number or text

        Returns:
            Request ready to send

        Raises:
            UnknownEnumValueError: If an enum display value cannot be mapped
        """
