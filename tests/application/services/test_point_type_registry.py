"""Tests for PointTypeRegistry service."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from custom_components.esphome_native.application.services import PointTypeRegistry
from custom_components.esphome_native.domain.exceptions import PointTypeConflictError
from custom_components.esphome_native.domain.value_objects import TypeScope, ValueDomain


class TestTypeUid:
    """Test type identity construction."""

    def test_device_scope(self):
        """Test device-scoped identity includes the object id."""
        assert (
            PointTypeRegistry.type_uid(TypeScope.DEVICE, "living_room", "mode")
            == "living_room_mode"
        )

    def test_global_scope(self):
        """Test global identity is the sub-field alone."""
        assert (
            PointTypeRegistry.type_uid(TypeScope.GLOBAL, "living_room", "custom_preset")
            == "custom_preset"
        )

    def test_single_point(self):
        """Test single-point identity is the object id."""
        assert PointTypeRegistry.type_uid(TypeScope.DEVICE, "fan_speed", None) == "fan_speed"


class TestBuildOrReuse:
    """Test idempotent type building."""

    def test_same_shape_returns_same_instance(self, type_registry):
        """Test building twice yields one object."""
        first = type_registry.build_or_reuse(
            "living_room_mode", "Mode", ValueDomain.ENUM, ["HEAT", "OFF"]
        )
        second = type_registry.build_or_reuse(
            "living_room_mode", "Mode", ValueDomain.ENUM, ("HEAT", "OFF")
        )

        assert first is second
        assert len(type_registry) == 1
        assert "living_room_mode" in type_registry

    def test_global_different_shape_rejected(self, type_registry):
        """Test same global identity with other options."""
        type_registry.build_or_reuse(
            "custom_fan_mode",
            "Custom Fan Mode",
            ValueDomain.ENUM,
            ["Turbo"],
            scope=TypeScope.GLOBAL,
        )

        with pytest.raises(PointTypeConflictError) as exc_info:
            type_registry.build_or_reuse(
                "custom_fan_mode",
                "Custom Fan Mode",
                ValueDomain.ENUM,
                ["Night"],
                scope=TypeScope.GLOBAL,
            )

        assert exc_info.value.uid == "custom_fan_mode"
        assert type_registry.get("custom_fan_mode").options == ("Turbo",)

    def test_device_different_shape_replaced(self, type_registry):
        """Test a device-scoped identity follows the latest shape."""
        # Arrange
        first = type_registry.build_or_reuse(
            "thermostat_mode", "Mode", ValueDomain.ENUM, ["HEAT"]
        )

        # Act
        second = type_registry.build_or_reuse(
            "thermostat_mode", "Mode", ValueDomain.ENUM, ["COOL"]
        )

        # Assert
        assert second is not first
        assert first.options == ("HEAT",)
        assert type_registry.get("thermostat_mode") is second
        assert len(type_registry) == 1

    def test_device_type_not_replaced_by_global(self, type_registry):
        """Test a global request never overwrites a device-scoped type."""
        type_registry.build_or_reuse("custom_preset", "Custom Preset", ValueDomain.ENUM, ["Eco"])

        with pytest.raises(PointTypeConflictError):
            type_registry.build_or_reuse(
                "custom_preset",
                "Custom Preset",
                ValueDomain.ENUM,
                ["Eco"],
                scope=TypeScope.GLOBAL,
            )

    def test_quantity_type(self, type_registry):
        """Test quantity attributes are kept."""
        point_type = type_registry.build_or_reuse(
            "living_room_target_temperature",
            "Target temperature",
            ValueDomain.QUANTITY,
            format="%.1f",
            item_type="Number:Temperature",
            unit="°C",
        )

        assert point_type.unit == "°C"
        assert point_type.format == "%.1f"
        assert not point_type.is_enumerated

    def test_concurrent_builds_share_one_instance(self, type_registry):
        """Test racing connections end up with the same type."""

        def build(_):
            return type_registry.build_or_reuse(
                "living_room_mode", "Mode", ValueDomain.ENUM, ("HEAT", "OFF")
            )

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(build, range(64)))

        assert all(result is results[0] for result in results)
        assert len(type_registry) == 1

    def test_clear(self, type_registry):
        """Test clearing drops every type."""
        type_registry.build_or_reuse("fan_speed", "Fan speed", ValueDomain.ENUM, ("Low",))
        type_registry.clear()

        assert len(type_registry) == 0
        assert type_registry.get("fan_speed") is None
