"""Measurement report — what the user actually marks on the wall."""

from __future__ import annotations

from collections.abc import Sequence

from hangcalc.design.models import Wall
from hangcalc.layout import LayoutWarning, PaintingLayout
from hangcalc.units import MeasurementUnit, format_measurement, from_cm


def _fmt(value_cm: float, unit: MeasurementUnit) -> str:
    return f"{format_measurement(from_cm(value_cm, unit), unit)} {unit.short_name}"


def layout_report(
    wall: Wall,
    layouts: Sequence[PaintingLayout],
    unit: MeasurementUnit = MeasurementUnit.CENTIMETERS,
    *,
    spacing: float | None = None,
    warnings: Sequence[LayoutWarning] = (),
) -> str:
    """Render *layouts* as markdown.

    Positions are measured from the wall's left edge and from the floor
    line (the wall's bottom edge).
    """
    lines = []
    lines.append("# Hanging plan")
    lines.append("")
    lines.append(f"- Wall: {_fmt(wall.width, unit)} wide, {_fmt(wall.height, unit)} high")
    if spacing is not None and len(layouts) > 1:
        lines.append(f"- Spacing: {_fmt(spacing, unit)}")
    lines.append("")

    if not layouts:
        lines.append("No paintings to hang.")
        lines.append("")

    for i, layout in enumerate(layouts, start=1):
        p = layout.painting
        lines.append(f"## {i}. {p.name}")
        lines.append(f"- Size: {_fmt(p.width, unit)} x {_fmt(p.height, unit)}")
        lines.append(f"- Left edge: {_fmt(layout.origin.x, unit)} from the left of the wall")
        lines.append(f"- Bottom edge: {_fmt(layout.origin.y, unit)} above the floor line")
        for label, pt in zip(_hanger_labels(len(layout.mounting_points)), layout.mounting_points):
            lines.append(
                f"- {label}: {_fmt(pt.x, unit)} from left, {_fmt(pt.y, unit)} from floor"
            )
        lines.append("")

    lines.append("## Warnings")
    if warnings:
        for w in warnings:
            lines.append(f"- {w.message}")
    else:
        lines.append("- None.")
    lines.append("")
    return "\n".join(lines)


def _hanger_labels(count: int) -> list[str]:
    if count == 1:
        return ["Hanger"]
    if count == 2:
        return ["Left hanger", "Right hanger"]
    return [f"Hanger {i}" for i in range(1, count + 1)]
