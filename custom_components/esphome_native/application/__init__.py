"""Application layer for ESPHome Native integration.

The application layer holds the registries that the entity adapters build
control points into:
- PointTypeRegistry: process-wide, shared across connections
- ControlPointRegistry: one per device connection
"""
