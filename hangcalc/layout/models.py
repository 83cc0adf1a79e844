"""Layout output dataclasses and configuration constants."""

from __future__ import annotations

from dataclasses import dataclass

from hangcalc.design.models import Painting


# ── Output dataclasses ─────────────────────────────────────────────


@dataclass(frozen=True)
class Point:
    """Wall-local coordinate; y is measured up from the wall's bottom."""

    x: float
    y: float


@dataclass
class PaintingLayout:
    """A painting with a resolved position and its hanger points."""

    painting: Painting
    origin: Point                   # bottom-left corner of the painting
    mounting_points: list[Point]    # [hanger] for wire, [left, right] for D-ring

    @property
    def top(self) -> float:
        return self.origin.y + self.painting.height

    @property
    def right(self) -> float:
        return self.origin.x + self.painting.width

    @property
    def center(self) -> Point:
        return Point(
            self.origin.x + self.painting.width / 2,
            self.origin.y + self.painting.height / 2,
        )


# ── Configuration ──────────────────────────────────────────────────

from hangcalc.config import LAYOUT_RULES

# ── Derived from shared LayoutRules (hangcalc.config) ──────────────
# Changing LAYOUT_RULES automatically updates these.
MIN_SPACING = LAYOUT_RULES.minimum_spacing
DEFAULT_SPACING = LAYOUT_RULES.default_spacing
