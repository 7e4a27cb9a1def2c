"""IPointSink interface towards the UI framework."""

from abc import ABC, abstractmethod
from typing import Any

from ..entities.control_point import ControlPoint
from ..value_objects import ControlPointType


class IPointSink(ABC):
    """Interface for the UI framework consuming control points.

    Build phase:
        point_created(point_type, point) for every new point
    Decode phase:
        update_state(point, value) for every decoded sub-field

    Both callbacks are invoked synchronously from the connection's
    message dispatch, in receipt order.
    """

    @abstractmethod
    def point_created(self, point_type: ControlPointType, point: ControlPoint) -> None:
        """Surface a newly built control point.

        Args:
            point_type: Shared type description of the point
            point: Newly registered point
        """

    @abstractmethod
    def update_state(self, point: ControlPoint, value: Any) -> None:
        """Push a normalized value to a control point.

        Args:
            point: Target point
            value: QuantityValue for quantities, str for enumerations and
                text, None when the device reports no value
        """
