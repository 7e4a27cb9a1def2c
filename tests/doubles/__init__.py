"""Test doubles for unit testing.

Test doubles are fake implementations of interfaces used for testing.
They're faster and more reliable than mocking, and they implement the
actual interface contracts.

We primarily use Fakes because they:
- Actually implement the interface
- Can be reused across many tests
- Record what the code under test did

Example:
    >>> from tests.doubles import FakeMessageTransport, FakePointSink
    >>> transport = FakeMessageTransport()
    >>> await transport.async_send_message(request)
    >>> assert transport.last_sent is request
"""

from .fake_message_transport import FakeMessageTransport
from .fake_point_sink import FakePointSink

__all__ = [
    "FakeMessageTransport",
    "FakePointSink",
]
