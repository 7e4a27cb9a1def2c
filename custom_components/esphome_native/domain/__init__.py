"""Domain layer for ESPHome Native integration.

This layer contains:
- Messages: Descriptor, state and command records exchanged with the device
- Value Objects: Immutable domain primitives (point keys, point types, quantities)
- Entities: Control points with identity
- Interfaces: Protocol definitions for ports and adapters
- Helpers: Enum normalization

The domain layer has ZERO dependencies on external libraries (except Python stdlib).
All external dependencies are abstracted behind interfaces.
"""
