"""Infrastructure layer decorators."""

from .error_handler import handle_send_errors

__all__ = [
    "handle_send_errors",
]
