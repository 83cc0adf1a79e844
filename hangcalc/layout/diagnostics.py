"""Layout diagnostics — warnings a caller should surface to the user.

The engine accepts degenerate input (paintings wider than the wall,
crossed D-rings, hangers below the frame) and returns a well-defined
layout anyway.  This module inspects the result and reports what is
wrong with it; it never moves a painting.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from hangcalc.design.models import DRing, Painting, SpacingPolicy, Wall

from .engine import max_fitting_spacing
from .geometry import layout_inside_wall, overlap_area, point_on_wall
from .models import PaintingLayout

log = logging.getLogger(__name__)

# Overlaps smaller than this are float noise from touching paintings.
_AREA_EPS = 1e-9


@dataclass
class LayoutWarning:
    code: str
    message: str
    painting: Painting | None = None

    def __str__(self) -> str:
        return self.message


def _mount_warnings(painting: Painting) -> list[LayoutWarning]:
    warnings: list[LayoutWarning] = []
    mount = painting.mount
    if mount.offset_from_top > painting.height:
        warnings.append(LayoutWarning(
            "hanger_below_painting",
            f"'{painting.name}': mount offset {mount.offset_from_top:.1f} is "
            f"larger than the painting height {painting.height:.1f}",
            painting,
        ))
    if isinstance(mount, DRing) and mount.offset_from_edge > painting.width / 2:
        warnings.append(LayoutWarning(
            "dring_crossed",
            f"'{painting.name}': D-ring edge offset {mount.offset_from_edge:.1f} "
            f"is more than half the painting width {painting.width:.1f}",
            painting,
        ))
    return warnings


def _spacing_warnings(
    wall: Wall,
    paintings: Sequence[Painting],
    spacing: float,
    policy: SpacingPolicy,
) -> list[LayoutWarning]:
    if spacing < 0:
        return [LayoutWarning("spacing_negative", "Spacing must not be negative")]
    limit = max_fitting_spacing(wall, paintings, policy=policy)
    if limit is not None and spacing > limit:
        return [LayoutWarning(
            "spacing_too_large",
            f"Spacing {spacing:.1f} is too large for the wall width "
            f"(at most {max(limit, 0.0):.1f} fits)",
        )]
    return []


def check_layouts(
    wall: Wall,
    layouts: Sequence[PaintingLayout],
    *,
    spacing: float | None = None,
    policy: SpacingPolicy = SpacingPolicy.EQUAL_MARGIN,
) -> list[LayoutWarning]:
    """Inspect computed layouts.  Returns warnings (empty = clean).

    Pass the *spacing* the layouts were computed with to also check that
    it is non-negative and fits the wall.
    """
    warnings: list[LayoutWarning] = []

    for layout in layouts:
        p = layout.painting
        warnings.extend(_mount_warnings(p))

        if not layout_inside_wall(layout, wall):
            warnings.append(LayoutWarning(
                "outside_wall",
                f"'{p.name}' extends past the edge of the wall",
                p,
            ))
        if not all(point_on_wall(pt, wall) for pt in layout.mounting_points):
            warnings.append(LayoutWarning(
                "hanger_outside_wall",
                f"'{p.name}' has a hanger point off the wall",
                p,
            ))

    # ── Pairwise overlap ──
    for i, a in enumerate(layouts):
        for b in layouts[i + 1:]:
            if overlap_area(a, b) > _AREA_EPS:
                warnings.append(LayoutWarning(
                    "overlap",
                    f"'{a.painting.name}' overlaps '{b.painting.name}'",
                    b.painting,
                ))

    if spacing is not None and len(layouts) > 1:
        warnings.extend(_spacing_warnings(
            wall, [l.painting for l in layouts], spacing, policy,
        ))

    for w in warnings:
        log.warning("%s: %s", w.code, w.message)
    return warnings
