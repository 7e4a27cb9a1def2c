"""Tests for enum name normalization helpers."""

import pytest

from custom_components.esphome_native.domain.exceptions import UnknownEnumValueError
from custom_components.esphome_native.domain.helpers import (
    EnumFamily,
    family_for,
    strip_enum_prefix,
    to_enum,
)
from custom_components.esphome_native.domain.messages import (
    ClimateFanMode,
    ClimateMode,
    ClimatePreset,
    ClimateSwingMode,
)


class TestStripEnumPrefix:
    """Test strip_enum_prefix function."""

    def test_strip_mode_member(self):
        """Test stripping an enum member."""
        assert strip_enum_prefix(ClimateMode.CLIMATE_MODE_HEAT) == "HEAT"
        assert strip_enum_prefix(ClimateMode.CLIMATE_MODE_HEAT_COOL) == "HEAT_COOL"

    def test_strip_raw_token(self):
        """Test stripping a raw token string."""
        assert strip_enum_prefix("CLIMATE_FAN_AUTO") == "AUTO"
        assert strip_enum_prefix("CLIMATE_SWING_BOTH") == "BOTH"

    def test_strip_with_explicit_family(self):
        """Test stripping with the family given."""
        assert strip_enum_prefix(ClimatePreset.CLIMATE_PRESET_ECO, EnumFamily.PRESET) == "ECO"

    def test_unknown_prefix_raises(self):
        """Test token without known prefix."""
        with pytest.raises(UnknownEnumValueError):
            strip_enum_prefix("LIGHT_MODE_ON")

    def test_wrong_family_raises(self):
        """Test token of another family."""
        with pytest.raises(UnknownEnumValueError):
            strip_enum_prefix(ClimateMode.CLIMATE_MODE_HEAT, EnumFamily.FAN_MODE)

    def test_raw_number_raises(self):
        """Test wire number that is not a member."""
        with pytest.raises(UnknownEnumValueError):
            strip_enum_prefix(42)


class TestToEnum:
    """Test to_enum function."""

    def test_rebuild_mode(self):
        """Test rebuilding a mode member."""
        assert to_enum(EnumFamily.MODE, "HEAT") is ClimateMode.CLIMATE_MODE_HEAT

    def test_rebuild_ignores_case_and_whitespace(self):
        """Test display values are normalized before lookup."""
        assert to_enum(EnumFamily.FAN_MODE, " high ") is ClimateFanMode.CLIMATE_FAN_HIGH

    def test_unknown_display_value_raises(self):
        """Test display value that is not a member."""
        with pytest.raises(UnknownEnumValueError, match="CLIMATE_MODE_TURBO"):
            to_enum(EnumFamily.MODE, "TURBO")

    def test_unknown_family_raises_value_error(self):
        """Test programming error for an unknown family."""
        with pytest.raises(ValueError):
            to_enum("CLIMATE_MODE_", "HEAT")


class TestRoundTrip:
    """Test to_enum(strip_enum_prefix(v)) returns v."""

    @pytest.mark.parametrize(
        ("family", "enum_cls"),
        [
            (EnumFamily.MODE, ClimateMode),
            (EnumFamily.FAN_MODE, ClimateFanMode),
            (EnumFamily.PRESET, ClimatePreset),
            (EnumFamily.SWING_MODE, ClimateSwingMode),
        ],
    )
    def test_every_member_round_trips(self, family, enum_cls):
        """Test every member of every family."""
        for member in enum_cls:
            assert to_enum(family, strip_enum_prefix(member)) is member

    def test_family_for_member(self):
        """Test inferring the family of a member."""
        assert family_for(ClimateSwingMode.CLIMATE_SWING_VERTICAL) is EnumFamily.SWING_MODE
        assert family_for("CLIMATE_PRESET_AWAY") is EnumFamily.PRESET
