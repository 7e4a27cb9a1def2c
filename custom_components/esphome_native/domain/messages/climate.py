"""Climate entity messages.

ClimateInfo describes what a climate controller supports, ClimateState
carries its current values and ClimateCommandRequest changes them.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Any, ClassVar, Iterable

from .base import CommandRequest, EntityInfo, EntityState
from .climate_enums import ClimateFanMode, ClimateMode, ClimatePreset, ClimateSwingMode
from .entity_kind import EntityKind


def _coerce_members(enum_cls: type[IntEnum], values: Iterable[Any]) -> tuple:
    """Convert raw tokens or wire numbers to enum members.

    Values that are not members (e.g. added by newer firmware) are kept
    as received so the adapter can report them.
    """
    members = []
    for value in values:
        if isinstance(value, enum_cls):
            members.append(value)
            continue
        try:
            if isinstance(value, str):
                members.append(enum_cls[value])
            else:
                members.append(enum_cls(value))
        except (KeyError, ValueError):
            members.append(value)
    return tuple(members)


@dataclass(frozen=True)
class ClimateInfo(EntityInfo):
    """Climate descriptor (``ListEntitiesClimateResponse``).

    Attributes:
        supports_current_temperature: Device reports the measured temperature
        supported_modes: Operating modes, in device order
        supported_fan_modes: Fan modes, in device order
        supported_custom_fan_modes: Free-text fan modes defined by the device
        supported_presets: Presets, in device order
        supported_custom_presets: Free-text presets defined by the device
        supported_swing_modes: Swing modes, in device order

    Example:
        >>> info = ClimateInfo(
        ...     key=1,
        ...     object_id="living_room",
        ...     name="Living room",
        ...     supported_modes=["CLIMATE_MODE_HEAT", "CLIMATE_MODE_OFF"],
        ... )
        >>> info.supported_modes
        (<ClimateMode.CLIMATE_MODE_HEAT: 3>, <ClimateMode.CLIMATE_MODE_OFF: 0>)
    """

    kind: ClassVar[EntityKind] = EntityKind.CLIMATE

    supports_current_temperature: bool = False
    supported_modes: tuple[ClimateMode, ...] = ()
    supported_fan_modes: tuple[ClimateFanMode, ...] = ()
    supported_custom_fan_modes: tuple[str, ...] = ()
    supported_presets: tuple[ClimatePreset, ...] = ()
    supported_custom_presets: tuple[str, ...] = ()
    supported_swing_modes: tuple[ClimateSwingMode, ...] = ()

    def __post_init__(self) -> None:
        """Validate identity and normalize capability lists to tuples."""
        super().__post_init__()
        object.__setattr__(
            self, "supported_modes", _coerce_members(ClimateMode, self.supported_modes)
        )
        object.__setattr__(
            self,
            "supported_fan_modes",
            _coerce_members(ClimateFanMode, self.supported_fan_modes),
        )
        object.__setattr__(
            self,
            "supported_presets",
            _coerce_members(ClimatePreset, self.supported_presets),
        )
        object.__setattr__(
            self,
            "supported_swing_modes",
            _coerce_members(ClimateSwingMode, self.supported_swing_modes),
        )
        object.__setattr__(
            self,
            "supported_custom_fan_modes",
            tuple(str(mode) for mode in self.supported_custom_fan_modes),
        )
        object.__setattr__(
            self,
            "supported_custom_presets",
            tuple(str(preset) for preset in self.supported_custom_presets),
        )


@dataclass(frozen=True)
class ClimateState(EntityState):
    """Climate state (``ClimateStateResponse``).

    Always carries every field; fields the device does not use hold the
    protocol defaults.
    """

    kind: ClassVar[EntityKind] = EntityKind.CLIMATE

    mode: ClimateMode | int = ClimateMode.CLIMATE_MODE_OFF
    current_temperature: float = 0.0
    target_temperature: float = 0.0
    fan_mode: ClimateFanMode | int = ClimateFanMode.CLIMATE_FAN_ON
    custom_fan_mode: str = ""
    preset: ClimatePreset | int = ClimatePreset.CLIMATE_PRESET_NONE
    custom_preset: str = ""
    swing_mode: ClimateSwingMode | int = ClimateSwingMode.CLIMATE_SWING_OFF

    def __post_init__(self) -> None:
        """Convert wire numbers and raw tokens of the enum fields to members."""
        for name, enum_cls in (
            ("mode", ClimateMode),
            ("fan_mode", ClimateFanMode),
            ("preset", ClimatePreset),
            ("swing_mode", ClimateSwingMode),
        ):
            (member,) = _coerce_members(enum_cls, (getattr(self, name),))
            object.__setattr__(self, name, member)


@dataclass(frozen=True)
class ClimateCommandRequest(CommandRequest):
    """Climate command (``ClimateCommandRequest``).

    A field left as ``None`` is unset and the device keeps its current
    value; any other value is applied. The protocol's ``has_*`` markers
    are derived from that, so an unset field can never carry a value.

    Example:
        >>> request = ClimateCommandRequest(key=1, mode=ClimateMode.CLIMATE_MODE_HEAT)
        >>> request.has_mode, request.has_target_temperature
        (True, False)
    """

    kind: ClassVar[EntityKind] = EntityKind.CLIMATE

    mode: ClimateMode | None = None
    target_temperature: float | None = None
    fan_mode: ClimateFanMode | None = None
    custom_fan_mode: str | None = None
    preset: ClimatePreset | None = None
    custom_preset: str | None = None
    swing_mode: ClimateSwingMode | None = None

    @property
    def has_mode(self) -> bool:
        """Return True if the mode is set."""
        return self.mode is not None

    @property
    def has_target_temperature(self) -> bool:
        """Return True if the target temperature is set."""
        return self.target_temperature is not None

    @property
    def has_fan_mode(self) -> bool:
        """Return True if the fan mode is set."""
        return self.fan_mode is not None

    @property
    def has_custom_fan_mode(self) -> bool:
        """Return True if the custom fan mode is set."""
        return self.custom_fan_mode is not None

    @property
    def has_preset(self) -> bool:
        """Return True if the preset is set."""
        return self.preset is not None

    @property
    def has_custom_preset(self) -> bool:
        """Return True if the custom preset is set."""
        return self.custom_preset is not None

    @property
    def has_swing_mode(self) -> bool:
        """Return True if the swing mode is set."""
        return self.swing_mode is not None

    def as_message(self) -> dict[str, Any]:
        """Flatten to protocol fields with explicit ``has_*`` markers.

        Unset fields carry the protocol default (0 / 0.0 / ""), as they
        would on the wire.

        Returns:
            Field name to value mapping

        Example:
            >>> ClimateCommandRequest(key=7, target_temperature=21.5).as_message()[
            ...     "has_target_temperature"
            ... ]
            True
        """
        message: dict[str, Any] = {"key": self.key}
        for field in fields(self):
            if field.name == "key":
                continue
            value = getattr(self, field.name)
            message[f"has_{field.name}"] = value is not None
            if value is None:
                if field.name.startswith("custom_"):
                    value = ""
                elif field.name == "target_temperature":
                    value = 0.0
                else:
                    value = 0
            elif isinstance(value, IntEnum):
                value = int(value)
            message[field.name] = value
        return message
