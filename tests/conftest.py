"""Pytest configuration and fixtures for ESPHome Native tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to Python path so we can import custom_components
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from unittest.mock import Mock

from homeassistant.core import HomeAssistant

from custom_components.esphome_native.application.services import PointTypeRegistry
from custom_components.esphome_native.config_loader import load_point_catalog
from custom_components.esphome_native.domain.messages import (
    ClimateFanMode,
    ClimateInfo,
    ClimateMode,
    ClimatePreset,
    ClimateSwingMode,
    SelectInfo,
)
from custom_components.esphome_native.presentation import create_container
from tests.doubles import FakeMessageTransport, FakePointSink


@pytest.fixture
def hass():
    """Mock Home Assistant instance."""
    hass = Mock(spec=HomeAssistant)
    hass.data = {}

    async def _run_in_executor(func, *args):
        return func(*args)

    hass.async_add_executor_job = Mock(side_effect=_run_in_executor)
    return hass


@pytest.fixture(scope="session")
def catalog():
    """Bundled point catalog."""
    return load_point_catalog()


@pytest.fixture
def type_registry():
    """Empty point type registry."""
    return PointTypeRegistry()


@pytest.fixture
def transport():
    """Fake device transport."""
    return FakeMessageTransport()


@pytest.fixture
def sink():
    """Fake UI sink."""
    return FakePointSink()


@pytest.fixture
def connection(transport, sink, type_registry, catalog):
    """Connection container for device "kitchen"."""
    return create_container("kitchen", transport, sink, type_registry, catalog)


@pytest.fixture
def heat_off_climate():
    """Climate advertising only HEAT and OFF modes."""
    return ClimateInfo(
        key=1,
        object_id="living_room",
        name="Living room",
        supported_modes=[ClimateMode.CLIMATE_MODE_HEAT, ClimateMode.CLIMATE_MODE_OFF],
    )


@pytest.fixture
def full_climate():
    """Climate advertising every capability."""
    return ClimateInfo(
        key=2,
        object_id="bedroom",
        name="Bedroom",
        supports_current_temperature=True,
        supported_modes=[
            ClimateMode.CLIMATE_MODE_OFF,
            ClimateMode.CLIMATE_MODE_COOL,
            ClimateMode.CLIMATE_MODE_HEAT,
        ],
        supported_fan_modes=[
            ClimateFanMode.CLIMATE_FAN_AUTO,
            ClimateFanMode.CLIMATE_FAN_HIGH,
        ],
        supported_custom_fan_modes=["Turbo", "Night"],
        supported_presets=[
            ClimatePreset.CLIMATE_PRESET_NONE,
            ClimatePreset.CLIMATE_PRESET_ECO,
        ],
        supported_custom_presets=["Vacation"],
        supported_swing_modes=[
            ClimateSwingMode.CLIMATE_SWING_OFF,
            ClimateSwingMode.CLIMATE_SWING_BOTH,
        ],
    )


@pytest.fixture
def fan_speed_select():
    """Select with three speed options."""
    return SelectInfo(
        key=4,
        object_id="fan_speed",
        name="Fan speed",
        options=["Low", "Medium", "High"],
    )
