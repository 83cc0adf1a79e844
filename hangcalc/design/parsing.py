"""Design parsing — convert raw dicts/JSON into a HangDesign.

Input format (lengths are numbers or measurement strings in ``unit``):

    {
      "unit": "in",
      "wall": {"width": "118", "height": "96"},
      "paintings": [
        {"name": "Mona Lisa", "width": "8", "height": "10 1/2",
         "mount": {"type": "wire", "offset_from_top": "4"}},
        {"name": "Print", "width": 12, "height": 16,
         "mount": {"type": "d_ring", "offset_from_top": 3, "offset_from_edge": 2}}
      ],
      "spacing": {"mode": "manual", "value": "20", "policy": "equal_margin"}
    }

Everything is converted to centimetres on the way in.
"""

from __future__ import annotations

from hangcalc.config import LAYOUT_RULES
from hangcalc.units import MeasurementUnit, parse_measurement, to_cm

from .models import (
    DRing, DesignError, HangDesign, MountType, Painting,
    SpacingMode, SpacingPolicy, Wall, Wire,
)

DEFAULT_PAINTING_NAME = "Untitled"


def _parse_unit(raw: str | None) -> MeasurementUnit:
    if raw is None:
        return MeasurementUnit.CENTIMETERS
    try:
        return MeasurementUnit(raw)
    except ValueError:
        raise DesignError("unit", f"unknown unit '{raw}', expected 'cm' or 'in'") from None


def _object(value: object, field: str) -> dict:
    if not isinstance(value, dict):
        raise DesignError(field, f"expected an object, got {type(value).__name__}")
    return value


def _section(data: dict, key: str, field: str, *, required: bool = True) -> dict:
    """Read the sub-object *key*; an optional absent section reads as {}."""
    if key not in data:
        if required:
            raise DesignError(field, "missing")
        return {}
    return _object(data[key], field)


def _length(data: dict, key: str, unit: MeasurementUnit, field: str) -> float:
    """Read one length from *data* and convert it to centimetres."""
    if key not in data:
        raise DesignError(field, "missing")
    raw = data[key]
    if isinstance(raw, bool):
        raise DesignError(field, f"not a measurement: {raw!r}")
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        value = parse_measurement(raw, unit)
        if value is None:
            raise DesignError(field, f"cannot parse '{raw}' as {unit.display_name.lower()}")
    else:
        raise DesignError(field, f"not a measurement: {raw!r}")
    return to_cm(value, unit)


def parse_mount(
    data: dict,
    unit: MeasurementUnit = MeasurementUnit.CENTIMETERS,
    field: str = "mount",
) -> MountType:
    """Parse a mount dict (``type`` is ``"wire"`` or ``"d_ring"``)."""
    data = _object(data, field)
    kind = data.get("type")
    if kind == "wire":
        return Wire(offset_from_top=_length(
            data, "offset_from_top", unit, f"{field}.offset_from_top"))
    if kind == "d_ring":
        return DRing(
            offset_from_top=_length(
                data, "offset_from_top", unit, f"{field}.offset_from_top"),
            offset_from_edge=_length(
                data, "offset_from_edge", unit, f"{field}.offset_from_edge"),
        )
    raise DesignError(f"{field}.type", f"unknown mount type {kind!r}, expected 'wire' or 'd_ring'")


def parse_painting(
    data: dict,
    unit: MeasurementUnit = MeasurementUnit.CENTIMETERS,
    field: str = "painting",
) -> Painting:
    """Parse one painting dict.  A blank name becomes "Untitled"."""
    data = _object(data, field)
    mount = _section(data, "mount", f"{field}.mount")
    name = str(data.get("name") or "").strip()
    return Painting(
        name=name or DEFAULT_PAINTING_NAME,
        width=_length(data, "width", unit, f"{field}.width"),
        height=_length(data, "height", unit, f"{field}.height"),
        mount=parse_mount(mount, unit, f"{field}.mount"),
    )


def _parse_spacing(data: dict, unit: MeasurementUnit) -> tuple[SpacingMode, float, SpacingPolicy]:
    try:
        mode = SpacingMode(data.get("mode", SpacingMode.AUTO.value))
    except ValueError:
        raise DesignError("spacing.mode", f"unknown mode {data.get('mode')!r}") from None
    try:
        policy = SpacingPolicy(data.get("policy", SpacingPolicy.EQUAL_MARGIN.value))
    except ValueError:
        raise DesignError("spacing.policy", f"unknown policy {data.get('policy')!r}") from None

    if "value" in data:
        value = _length(data, "value", unit, "spacing.value")
    elif mode is SpacingMode.MANUAL:
        raise DesignError("spacing.value", "required for manual spacing")
    else:
        value = LAYOUT_RULES.default_spacing
    return mode, value, policy


def parse_design(data: dict) -> HangDesign:
    """Parse a raw dict (from JSON / form input) into a HangDesign."""
    data = _object(data, "design")
    unit = _parse_unit(data.get("unit"))

    wall_data = _section(data, "wall", "wall")
    wall = Wall(
        width=_length(wall_data, "width", unit, "wall.width"),
        height=_length(wall_data, "height", unit, "wall.height"),
    )

    raw_paintings = data.get("paintings", [])
    if not isinstance(raw_paintings, list):
        raise DesignError("paintings", f"expected a list, got {type(raw_paintings).__name__}")
    paintings = [
        parse_painting(p, unit, f"paintings[{i}]")
        for i, p in enumerate(raw_paintings)
    ]

    spacing_data = _section(data, "spacing", "spacing", required=False)
    mode, value, policy = _parse_spacing(spacing_data, unit)

    return HangDesign(
        wall=wall,
        paintings=paintings,
        spacing_mode=mode,
        manual_spacing=value,
        policy=policy,
    )
