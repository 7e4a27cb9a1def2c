"""Presentation layer for Home Assistant integration.

The presentation layer is the outermost layer that:
- Wires one container per device connection
- Exposes message handling and the command path to the host

This layer depends on application and domain layers but NOT vice versa.
"""

from .container import DeviceConnection, create_container

__all__ = [
    "DeviceConnection",
    "create_container",
]
