"""Infrastructure layer for ESPHome Native integration.

The infrastructure layer contains implementations of domain interfaces:
- Entity adapters (one per entity kind) and their dispatcher
- Decorators wrapping transport calls

This layer depends on:
- Domain layer (interfaces, entities and messages)
- Application layer (registries)
- External libraries (homeassistant)

But domain layer does NOT depend on infrastructure.
"""
