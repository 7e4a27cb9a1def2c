"""IMessageTransport interface for the device connection."""

from abc import ABC, abstractmethod

from ..messages.base import CommandRequest


class IMessageTransport(ABC):
    """Interface for the connection that delivers requests to the device.

    The transport owns socket lifecycle, encryption and framing. This
    layer only hands it fully built command requests.

    Example:
        >>> request = SelectCommandRequest(key=4, state="Medium")
        >>> await transport.async_send_message(request)
    """

    @abstractmethod
    async def async_send_message(self, message: CommandRequest) -> None:
        """Send a command request to the device.

        Args:
            message: Request to encode and deliver

        Raises:
            Exception: Any delivery failure; the command path wraps it in
                ProtocolSendFailure
        """
