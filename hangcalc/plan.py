"""
Hang plan — the editable state behind the calculator.

A HangPlan holds the wall, the ordered paintings and the spacing settings,
all in centimetres.  Nothing is cached: every call to ``layouts()`` or
``warnings()`` recomputes from the current state, so a caller simply asks
again after each edit.

Usage:
    plan = HangPlan(Wall(300, 244))
    plan.add_painting(Painting("Mona Lisa", 20, 25, Wire(10)))
    for layout in plan.layouts():
        ...
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from hangcalc.config import LAYOUT_RULES
from hangcalc.design.models import (
    HangDesign, Painting, SpacingMode, SpacingPolicy, Wall,
)
from hangcalc.design.validation import validate_painting, validate_wall
from hangcalc.layout import (
    LayoutWarning, PaintingLayout, check_layouts,
    compute_auto_spacing, compute_layouts,
)

log = logging.getLogger(__name__)

DEFAULT_WALL = Wall(width=300.0, height=244.0)


class PlanError(Exception):
    """Raised when an edit cannot be applied to a HangPlan."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


@dataclass
class HangPlan:
    wall: Wall | None = DEFAULT_WALL
    paintings: list[Painting] = field(default_factory=list)
    spacing_mode: SpacingMode = SpacingMode.AUTO
    manual_spacing: float = LAYOUT_RULES.default_spacing
    policy: SpacingPolicy = SpacingPolicy.EQUAL_MARGIN

    @classmethod
    def from_design(cls, design: HangDesign) -> HangPlan:
        return cls(
            wall=design.wall,
            paintings=list(design.paintings),
            spacing_mode=design.spacing_mode,
            manual_spacing=design.manual_spacing,
            policy=design.policy,
        )

    # ── Derived values ─────────────────────────────────────────────

    def spacing(self) -> float:
        """Spacing the layout uses right now."""
        if self.wall is None or len(self.paintings) <= 1:
            return LAYOUT_RULES.default_spacing
        if self.spacing_mode is SpacingMode.MANUAL:
            return self.manual_spacing
        return compute_auto_spacing(self.wall, self.paintings, policy=self.policy)

    def layouts(self) -> list[PaintingLayout]:
        """Recompute the layout.  Empty while the wall is unset."""
        if self.wall is None:
            return []
        return compute_layouts(
            self.wall, self.paintings, self.spacing(), policy=self.policy,
        )

    def warnings(self) -> list[LayoutWarning]:
        """Layout warnings.  Spacing is only checked when the user typed it."""
        if self.wall is None:
            return []
        spacing = None
        if self.spacing_mode is SpacingMode.MANUAL and len(self.paintings) > 1:
            spacing = self.manual_spacing
        return check_layouts(
            self.wall, self.layouts(),
            spacing=spacing, policy=self.policy,
        )

    # ── Edits ──────────────────────────────────────────────────────

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.paintings):
            raise PlanError(
                f"No painting at index {index} (have {len(self.paintings)})")

    def set_wall(self, wall: Wall) -> None:
        errors = validate_wall(wall)
        if errors:
            raise PlanError("; ".join(errors))
        self.wall = wall
        log.info("Wall set to %.1f x %.1f", wall.width, wall.height)

    def add_painting(self, painting: Painting) -> None:
        errors = validate_painting(painting)
        if errors:
            raise PlanError("; ".join(errors))
        self.paintings.append(painting)
        log.info("Added painting %r (%d on wall)", painting.name, len(self.paintings))

    def replace_painting(self, index: int, painting: Painting) -> None:
        self._check_index(index)
        errors = validate_painting(painting)
        if errors:
            raise PlanError("; ".join(errors))
        self.paintings[index] = painting
        log.info("Updated painting %d to %r", index, painting.name)

    def duplicate_painting(self, index: int) -> Painting:
        """Insert a copy of painting *index* right after it."""
        self._check_index(index)
        original = self.paintings[index]
        copy = replace(original, name=f"{original.name} (Copy)")
        self.paintings.insert(index + 1, copy)
        log.info("Duplicated painting %r", original.name)
        return copy

    def remove_painting(self, index: int) -> Painting:
        self._check_index(index)
        removed = self.paintings.pop(index)
        # Back to a single painting: spacing no longer applies
        if len(self.paintings) <= 1:
            self.spacing_mode = SpacingMode.AUTO
        log.info("Removed painting %r", removed.name)
        return removed

    def clear_paintings(self) -> None:
        self.paintings.clear()
        self.spacing_mode = SpacingMode.AUTO
        log.info("Cleared all paintings")

    def set_manual_spacing(self, spacing: float) -> None:
        """Switch to manual spacing.  Negative values are rejected."""
        if not spacing >= 0:
            raise PlanError(f"Spacing must not be negative (got {spacing})")
        self.spacing_mode = SpacingMode.MANUAL
        self.manual_spacing = spacing

    def use_auto_spacing(self) -> None:
        self.spacing_mode = SpacingMode.AUTO
