"""Layout engine — positions paintings on the wall and resolves their hangers."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from hangcalc.design.models import Painting, SpacingPolicy, Wall

from .models import DEFAULT_SPACING, MIN_SPACING, PaintingLayout, Point
from .mounts import resolve_mounting_points

log = logging.getLogger(__name__)


def _gap_count(count: int, policy: SpacingPolicy) -> int:
    """Number of spacing intervals a row of *count* paintings uses."""
    if policy is SpacingPolicy.CENTER_BLOCK:
        return count - 1
    return count + 1


def _layout_at(painting: Painting, x: float, wall: Wall) -> PaintingLayout:
    """Place *painting* with its left edge at *x*, vertically centred."""
    origin = Point(x, wall.height / 2 - painting.height / 2)
    points = resolve_mounting_points(
        painting.mount, origin, painting.width, painting.height,
    )
    log.debug("Placed %r at (%.1f, %.1f) with %d hanger(s)",
              painting.name, origin.x, origin.y, len(points))
    return PaintingLayout(painting=painting, origin=origin, mounting_points=points)


# ── Public API ─────────────────────────────────────────────────────


def compute_layouts(
    wall: Wall,
    paintings: Sequence[Painting],
    spacing: float,
    *,
    policy: SpacingPolicy = SpacingPolicy.EQUAL_MARGIN,
) -> list[PaintingLayout]:
    """Lay out *paintings* left to right in input order.

    A single painting is centred on the wall and *spacing* is ignored.
    Two or more share one row, each vertically centred on the wall.
    With EQUAL_MARGIN the row starts at ``x = spacing`` so the outer
    margins equal the gaps.  With CENTER_BLOCK the row (paintings plus
    ``n - 1`` gaps) is centred horizontally.

    Parameters
    ----------
    wall : Wall
        Wall dimensions.
    paintings : sequence of Painting
        Paintings in placement order.
    spacing : float
        Gap between neighbouring paintings (and the outer margin under
        EQUAL_MARGIN).  Not validated; negative values overlap paintings.
    policy : SpacingPolicy
        Row placement policy.

    Returns
    -------
    list[PaintingLayout]
        One layout per painting, in input order.
    """
    if not paintings:
        return []

    if len(paintings) == 1:
        painting = paintings[0]
        layouts = [_layout_at(painting, (wall.width - painting.width) / 2, wall)]
        log.info("Centred single painting %r on %.1f x %.1f wall",
                 painting.name, wall.width, wall.height)
        return layouts

    if policy is SpacingPolicy.CENTER_BLOCK:
        block_width = sum(p.width for p in paintings) + spacing * (len(paintings) - 1)
        x = (wall.width - block_width) / 2
    else:
        x = spacing

    layouts: list[PaintingLayout] = []
    for painting in paintings:
        layouts.append(_layout_at(painting, x, wall))
        x += painting.width + spacing

    log.info("Laid out %d paintings with spacing %.1f (%s)",
             len(layouts), spacing, policy.value)
    return layouts


def compute_auto_spacing(
    wall: Wall,
    paintings: Sequence[Painting],
    *,
    policy: SpacingPolicy = SpacingPolicy.EQUAL_MARGIN,
    minimum_spacing: float = MIN_SPACING,
) -> float:
    """Spacing that spreads *paintings* evenly across the wall width.

    Returns DEFAULT_SPACING for fewer than two paintings.  Otherwise the
    free wall width is divided over ``n + 1`` gaps (EQUAL_MARGIN) or
    ``n - 1`` gaps (CENTER_BLOCK) and floored at *minimum_spacing*.
    Paintings wider than the wall get the floor value and overflow.
    """
    if len(paintings) <= 1:
        return DEFAULT_SPACING

    available = wall.width - sum(p.width for p in paintings)
    spacing = available / _gap_count(len(paintings), policy)
    return max(spacing, minimum_spacing)


def max_fitting_spacing(
    wall: Wall,
    paintings: Sequence[Painting],
    *,
    policy: SpacingPolicy = SpacingPolicy.EQUAL_MARGIN,
) -> float | None:
    """Largest spacing at which the row still fits on the wall.

    None for fewer than two paintings, where spacing does not apply.
    Negative when the paintings alone are wider than the wall.
    """
    if len(paintings) <= 1:
        return None
    available = wall.width - sum(p.width for p in paintings)
    return available / _gap_count(len(paintings), policy)
