"""Configuration loader for the control point catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import voluptuous as vol
import yaml

from homeassistant.core import HomeAssistant

from .const import (
    CATALOG_FILENAME,
    CATALOG_VERSION_PREFIX,
    CHANNEL_STATE,
    CLIMATE_CHANNELS,
    ITEM_TYPE_STRING,
)
from .domain.helpers import EnumFamily
from .domain.messages import EntityKind
from .domain.value_objects import TypeScope, ValueDomain

_LOGGER = logging.getLogger(__name__)

# Sub-fields each adapter relies on
REQUIRED_FIELDS: dict[EntityKind, tuple[str, ...]] = {
    EntityKind.CLIMATE: CLIMATE_CHANNELS,
    EntityKind.SELECT: (CHANNEL_STATE,),
}

POINT_SCHEMA = vol.Schema(
    {
        vol.Optional("label"): str,
        vol.Required("domain"): vol.In([domain.value for domain in ValueDomain]),
        vol.Optional("item_type", default=ITEM_TYPE_STRING): str,
        vol.Optional("format", default="%s"): str,
        vol.Optional("unit"): str,
        vol.Optional("scope", default=TypeScope.DEVICE.value): vol.In(
            [scope.value for scope in TypeScope]
        ),
        vol.Optional("enum_family"): vol.In(
            [family.name.lower() for family in EnumFamily]
        ),
        vol.Optional("ungrouped", default=False): bool,
    }
)

KIND_SCHEMA = vol.Schema(
    {
        vol.Optional("group"): str,
        vol.Required("points"): vol.Schema({str: POINT_SCHEMA}),
    }
)

CATALOG_SCHEMA = vol.Schema(
    {
        vol.Required("version"): vol.Coerce(str),
        **{vol.Optional(kind.value): KIND_SCHEMA for kind in EntityKind},
    }
)


@dataclass(frozen=True)
class PointSpec:
    """How one sub-field of an entity kind is exposed.

    Attributes:
        field: Sub-field name (catalog key)
        label: Point label, None to use the entity name
        value_domain: Value domain of the point
        item_type: Item type handed to the UI framework
        format: Display pattern
        unit: Unit symbol for quantities
        group: Grouping label, None when ungrouped
        scope: Identity scope of the point type
        enum_family: Family to strip/rebuild enum tokens with, if any
    """

    field: str
    label: str | None
    value_domain: ValueDomain
    item_type: str = ITEM_TYPE_STRING
    format: str = "%s"
    unit: str | None = None
    group: str | None = None
    scope: TypeScope = TypeScope.DEVICE
    enum_family: EnumFamily | None = None


class PointCatalog:
    """Validated point catalog, indexed by entity kind and sub-field.

    Example:
        >>> catalog = load_point_catalog()
        >>> catalog.spec(EntityKind.CLIMATE, "mode").enum_family
        <EnumFamily.MODE: ('CLIMATE_MODE_', <enum 'ClimateMode'>)>
    """

    def __init__(
        self,
        version: str,
        specs: Mapping[EntityKind, Mapping[str, PointSpec]],
    ) -> None:
        """Initialize the catalog.

        Args:
            version: Catalog version string
            specs: Point specs per kind and sub-field
        """
        self.version = version
        self._specs = MappingProxyType(
            {kind: MappingProxyType(dict(points)) for kind, points in specs.items()}
        )

    def spec(self, kind: EntityKind, field: str) -> PointSpec:
        """Return the spec of a sub-field.

        Raises:
            KeyError: If the kind or sub-field is not in the catalog
        """
        return self._specs[kind][field]

    def specs(self, kind: EntityKind) -> Mapping[str, PointSpec]:
        """Return all specs of a kind (empty when the kind is absent)."""
        return self._specs.get(kind, MappingProxyType({}))

    @property
    def kinds(self) -> tuple[EntityKind, ...]:
        """Return the kinds described by the catalog."""
        return tuple(self._specs)


def _parse_catalog(raw: Any) -> PointCatalog:
    """Validate raw YAML data and build the catalog.

    Raises:
        ValueError: If the data is not a valid catalog
    """
    if not raw:
        raise ValueError("Point catalog is empty")

    try:
        config = CATALOG_SCHEMA(raw)
    except vol.Invalid as err:
        raise ValueError(f"Invalid point catalog: {err}") from err

    version = config["version"]
    if not version.startswith(CATALOG_VERSION_PREFIX):
        raise ValueError(
            f"Point catalog version {version} not supported. "
            f"Only version {CATALOG_VERSION_PREFIX}x is supported."
        )

    specs: dict[EntityKind, dict[str, PointSpec]] = {}
    for kind in EntityKind:
        kind_config = config.get(kind.value)
        if kind_config is None:
            continue

        group = kind_config.get("group")
        points: dict[str, PointSpec] = {}
        for field, point in kind_config["points"].items():
            family = point.get("enum_family")
            points[field] = PointSpec(
                field=field,
                label=point.get("label"),
                value_domain=ValueDomain(point["domain"]),
                item_type=point["item_type"],
                format=point["format"],
                unit=point.get("unit"),
                group=None if point["ungrouped"] else group,
                scope=TypeScope(point["scope"]),
                enum_family=EnumFamily[family.upper()] if family else None,
            )

        missing = [field for field in REQUIRED_FIELDS[kind] if field not in points]
        if missing:
            raise ValueError(
                f"Point catalog section '{kind.value}' is missing sub-fields: "
                f"{', '.join(missing)}"
            )
        specs[kind] = points

    return PointCatalog(version, specs)


def load_point_catalog(path: str | Path | None = None) -> PointCatalog:
    """Load and validate the point catalog from YAML.

    Blocking: reads the file. Use async_load_point_catalog from the event loop.

    Args:
        path: Catalog file (default: bundled config/points.yaml)

    Returns:
        Validated PointCatalog

    Raises:
        FileNotFoundError: If the catalog file does not exist
        ValueError: If the catalog is invalid
    """
    if path is None:
        path = Path(__file__).parent / "config" / CATALOG_FILENAME
    catalog_file = Path(path)

    if not catalog_file.exists():
        raise FileNotFoundError(f"Point catalog not found: {catalog_file}")

    try:
        raw = yaml.safe_load(catalog_file.read_text(encoding="utf-8"))
    except yaml.YAMLError as err:
        raise ValueError(f"Invalid YAML: {err}") from err

    catalog = _parse_catalog(raw)

    _LOGGER.info(
        "Loaded point catalog %s: %s",
        catalog.version,
        ", ".join(
            f"{kind.value} ({len(catalog.specs(kind))} points)"
            for kind in catalog.kinds
        ),
    )
    return catalog


async def async_load_point_catalog(
    hass: HomeAssistant,
    path: str | Path | None = None,
) -> PointCatalog:
    """Load the point catalog in the executor.

    Args:
        hass: Home Assistant instance
        path: Catalog file (default: bundled config/points.yaml)

    Returns:
        Validated PointCatalog
    """
    return await hass.async_add_executor_job(load_point_catalog, path)


def apply_scope_overrides(
    catalog: PointCatalog,
    overrides: Mapping[str, str],
) -> PointCatalog:
    """Return a catalog with point type scopes replaced.

    Args:
        catalog: Catalog to start from
        overrides: "<kind>.<field>" to "device" | "global"

    Returns:
        New PointCatalog (the input is left unchanged)

    Raises:
        ValueError: If an override names an unknown point or scope

    Example:
        >>> catalog = apply_scope_overrides(
        ...     load_point_catalog(), {"climate.custom_fan_mode": "device"}
        ... )
        >>> catalog.spec(EntityKind.CLIMATE, "custom_fan_mode").scope
        <TypeScope.DEVICE: 'device'>
    """
    if not overrides:
        return catalog

    specs = {kind: dict(catalog.specs(kind)) for kind in catalog.kinds}
    for name, scope_value in overrides.items():
        kind_name, _, field = name.partition(".")
        try:
            kind = EntityKind(kind_name)
            spec = specs[kind][field]
            scope = TypeScope(scope_value)
        except (KeyError, ValueError) as err:
            raise ValueError(f"Invalid type scope override {name}={scope_value}") from err

        specs[kind][field] = replace(spec, scope=scope)
        _LOGGER.debug("Type scope of %s set to %s", name, scope.value)

    return PointCatalog(catalog.version, specs)
