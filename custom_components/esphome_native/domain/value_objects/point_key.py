"""PointKey value object.

Composite key addressing one control point on a connection.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PointKey:
    """Immutable (entity key, sub-field) pair.

    Attributes:
        entity_key: Protocol key of the entity
        sub_field: Sub-field discriminator, None for single-point entities

    Example:
        >>> PointKey(12, "mode")
        PointKey(entity_key=12, sub_field='mode')
        >>> str(PointKey(12, None))
        '12'
    """

    entity_key: int
    sub_field: str | None = None

    def __str__(self) -> str:
        """String representation for logging."""
        if self.sub_field is None:
            return str(self.entity_key)
        return f"{self.entity_key}/{self.sub_field}"
