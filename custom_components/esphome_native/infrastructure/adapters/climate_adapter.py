"""Climate entity adapter.

A climate controller is exposed as one control point per sub-field. Which
sub-fields exist depends on the capabilities the device advertises; the
target temperature is always present.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Iterable

from homeassistant.const import UnitOfTemperature
from homeassistant.exceptions import HomeAssistantError
from homeassistant.util.unit_conversion import TemperatureConverter

from ...const import (
    CHANNEL_CURRENT_TEMPERATURE,
    CHANNEL_CUSTOM_FAN_MODE,
    CHANNEL_CUSTOM_PRESET,
    CHANNEL_FAN_MODE,
    CHANNEL_MODE,
    CHANNEL_PRESET,
    CHANNEL_SWING_MODE,
    CHANNEL_TARGET_TEMPERATURE,
    CLIMATE_CHANNELS,
    CONFIG_COMMAND_FIELD,
)
from ...domain.entities import ControlPoint
from ...domain.exceptions import UnknownEnumValueError
from ...domain.helpers import EnumFamily, strip_enum_prefix, to_enum
from ...domain.messages import (
    ClimateCommandRequest,
    ClimateInfo,
    ClimateState,
    EntityKind,
)
from ...domain.value_objects import QuantityValue
from .base_adapter import BaseEntityAdapter

_LOGGER = logging.getLogger(__name__)

CUSTOM_CHANNELS = (CHANNEL_CUSTOM_FAN_MODE, CHANNEL_CUSTOM_PRESET)
TEMPERATURE_CHANNELS = (CHANNEL_TARGET_TEMPERATURE, CHANNEL_CURRENT_TEMPERATURE)


class ClimateAdapter(BaseEntityAdapter[ClimateInfo, ClimateState]):
    """Adapter for climate controllers.

    Sub-fields:
    - target_temperature: always built
    - current_temperature: built if supports_current_temperature
    - mode, fan_mode, preset, swing_mode: built if the device lists any
      value; options are the values without their enum prefix
    - custom_fan_mode, custom_preset: built if the device lists any
      value; options are taken verbatim

    Example:
        >>> adapter.build_points(
        ...     ClimateInfo(
        ...         key=1,
        ...         object_id="living_room",
        ...         name="Living room",
        ...         supported_modes=["CLIMATE_MODE_HEAT", "CLIMATE_MODE_OFF"],
        ...     )
        ... )
        [ControlPoint(point_id='kitchen:living_room_target_temperature', ...),
         ControlPoint(point_id='kitchen:living_room_mode', ...)]
    """

    kind = EntityKind.CLIMATE

    def build_points(self, info: ClimateInfo) -> list[ControlPoint]:
        """Create the control points a climate descriptor advertises."""
        options = self._advertised_options(info)

        # Resolve every type first so a conflict leaves the registry untouched
        planned = []
        for field, field_options in options.items():
            spec = self._spec(field)
            point_type = self._resolve_type(info, spec, field, field_options)
            planned.append((spec, field, point_type))

        points = [
            self._register(info, spec, field, point_type)
            for spec, field, point_type in planned
        ]

        _LOGGER.info(
            "[%s] Built climate %s (key %d): %s",
            self._device_id,
            info.object_id,
            info.key,
            ", ".join(options),
        )
        return points

    def _advertised_options(self, info: ClimateInfo) -> dict[str, tuple[str, ...]]:
        """Return the sub-fields to build with their display options."""
        options: dict[str, tuple[str, ...]] = {CHANNEL_TARGET_TEMPERATURE: ()}

        if info.supports_current_temperature:
            options[CHANNEL_CURRENT_TEMPERATURE] = ()

        advertised: dict[str, Iterable[Any]] = {
            CHANNEL_MODE: info.supported_modes,
            CHANNEL_FAN_MODE: info.supported_fan_modes,
            CHANNEL_CUSTOM_FAN_MODE: info.supported_custom_fan_modes,
            CHANNEL_PRESET: info.supported_presets,
            CHANNEL_CUSTOM_PRESET: info.supported_custom_presets,
            CHANNEL_SWING_MODE: info.supported_swing_modes,
        }
        for field, values in advertised.items():
            if not values:
                continue
            family = self._spec(field).enum_family
            if family is None:
                options[field] = tuple(values)
            else:
                options[field] = self._display_options(info, family, values)

        return options

    def _display_options(
        self, info: ClimateInfo, family: EnumFamily, values: Iterable[Any]
    ) -> tuple[str, ...]:
        """Strip enum prefixes, dropping values this integration cannot map."""
        display = []
        for value in values:
            try:
                display.append(strip_enum_prefix(value, family))
            except UnknownEnumValueError as err:
                _LOGGER.warning(
                    "[%s] Ignoring option of %s: %s",
                    self._device_id,
                    info.object_id,
                    err,
                )
        return tuple(display)

    def handle_state(self, state: ClimateState) -> None:
        """Push every sub-field of a climate state to its point."""
        for field in CLIMATE_CHANNELS:
            point = self._registry.lookup(state.key, field)
            if point is None:
                continue

            raw = getattr(state, field)
            spec = self._spec(field)
            if field in TEMPERATURE_CHANNELS:
                value: Any = QuantityValue(float(raw), spec.unit)
            elif spec.enum_family is not None:
                try:
                    value = strip_enum_prefix(raw, spec.enum_family)
                except UnknownEnumValueError as err:
                    _LOGGER.warning(
                        "[%s] Skipping %s of key %d: %s",
                        self._device_id,
                        field,
                        state.key,
                        err,
                    )
                    continue
            else:
                value = str(raw)

            self._push(point, value)

    def encode_command(self, point: ControlPoint, value: Any) -> ClimateCommandRequest:
        """Translate a user command into a climate request.

        Raises:
            UnknownEnumValueError: If an enum display value cannot be mapped
        """
        key = point.entity_key
        field = point.configuration[CONFIG_COMMAND_FIELD]

        if field == CHANNEL_TARGET_TEMPERATURE:
            return ClimateCommandRequest(
                key=key, target_temperature=self._target_celsius(value)
            )

        if field in CUSTOM_CHANNELS:
            return ClimateCommandRequest(key=key, **{field: str(value)})

        if field in CLIMATE_CHANNELS:
            family = self._spec(field).enum_family
            if family is not None:
                return ClimateCommandRequest(key=key, **{field: to_enum(family, value)})

        _LOGGER.debug(
            "[%s] No command mapping for sub-field %s of %s",
            self._device_id,
            field,
            point.point_id,
        )
        return ClimateCommandRequest(key=key)

    def _target_celsius(self, value: Any) -> float | None:
        """Return the target temperature in Celsius, None to leave it unset."""
        if isinstance(value, QuantityValue):
            try:
                return TemperatureConverter.convert(
                    float(value), value.unit, UnitOfTemperature.CELSIUS
                )
            except HomeAssistantError as err:
                _LOGGER.warning(
                    "[%s] Cannot convert %s to Celsius: %s", self._device_id, value, err
                )
                return None

        if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
            return float(value)

        _LOGGER.debug(
            "[%s] Unsupported target temperature %r", self._device_id, value
        )
        return None
