"""Error handling decorators for the command send path."""

import asyncio
import inspect
import logging
from functools import wraps
from typing import Callable

from homeassistant.exceptions import HomeAssistantError

from ...domain.exceptions import ControlPointError, ProtocolSendFailure


def handle_send_errors(
    operation_name: str,
    logger: logging.Logger = None,
):
    """Decorator for standardized send error handling.

    Domain errors pass through unchanged. Any other exception raised by the
    wrapped call is logged and re-raised as ProtocolSendFailure, chained to
    the underlying error. Nothing is retried.

    Args:
        operation_name: Human-readable operation name for logging
        logger: Logger to use (defaults to function's module logger)

    Example:
        @handle_send_errors("Climate command")
        async def _async_send(self, request: ClimateCommandRequest) -> None:
            await self._transport.async_send_message(request)
    """

    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)
            try:
                return await func(*args, **kwargs)
            except ControlPointError as err:
                log.error("%s failed: %s", operation_name, err)
                raise
            except asyncio.TimeoutError as err:
                log.error("%s timed out", operation_name)
                raise ProtocolSendFailure(f"{operation_name} timed out") from err
            except HomeAssistantError as err:
                log.error("%s connection error: %s", operation_name, err)
                raise ProtocolSendFailure(f"{operation_name} failed: {err}") from err
            except Exception as err:
                log.error(
                    "%s unexpected error: %s",
                    operation_name,
                    err,
                    exc_info=True,
                )
                raise ProtocolSendFailure(f"{operation_name} failed: {err}") from err

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)
            try:
                return func(*args, **kwargs)
            except ControlPointError as err:
                log.error("%s failed: %s", operation_name, err)
                raise
            except Exception as err:
                log.error(
                    "%s error: %s",
                    operation_name,
                    err,
                    exc_info=True,
                )
                raise ProtocolSendFailure(f"{operation_name} failed: {err}") from err

        return async_wrapper if inspect.iscoroutinefunction(func) else sync_wrapper

    return decorator
