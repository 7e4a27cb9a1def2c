"""Custom exceptions for the ESPHome Native integration.

This module defines domain-specific exceptions that represent expected
error conditions while translating device entities into control points.

Two families exist:
- Structural errors (DuplicateRegistrationError, PointTypeConflictError,
  MalformedDescriptorError) abort the setup of the affected entity and are
  surfaced to the caller.
- Data-plane errors (UnknownEnumValueError) are recoverable; adapters log
  them and skip the affected field.

ProtocolSendFailure sits apart: it is raised on the command path when the
transport fails to deliver a request and is never retried by this layer.
"""

from __future__ import annotations


class ControlPointError(Exception):
    """Base exception for the control point adapter layer."""


class UnknownEnumValueError(ControlPointError):
    """Enum token is not a member of the target enumeration.

    Devices may advertise values added by firmware newer than this
    integration, so callers treat this as a warning, not a failure.

    Example:
        >>> raise UnknownEnumValueError("CLIMATE_MODE_TURBO is not a ClimateMode")
    """


class DuplicateRegistrationError(ControlPointError):
    """A control point already exists for the given (entity key, sub-field).

    Raised when a device re-sends a descriptor for an entity that has
    already been built on this connection.
    """

    def __init__(self, entity_key: int, sub_field: str | None) -> None:
        """Initialize with the offending composite key."""
        self.entity_key = entity_key
        self.sub_field = sub_field
        super().__init__(
            f"Control point already registered for key={entity_key} "
            f"sub_field={sub_field!r}"
        )


class PointTypeConflictError(ControlPointError):
    """A point type with the same identity but a different shape exists."""

    def __init__(self, uid: str) -> None:
        """Initialize with the conflicting type identity."""
        self.uid = uid
        super().__init__(
            f"Point type '{uid}' already exists with a different shape"
        )


class MalformedDescriptorError(ControlPointError):
    """Descriptor message is missing data required to build control points."""


class ProtocolSendFailure(ControlPointError):
    """Transport failed to deliver an outbound command request.

    Wraps the underlying transport exception (available as ``__cause__``).
    """
