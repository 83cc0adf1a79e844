"""Spacing and measurement constants for the hanging calculator.

The auto-spacing floor of 20 cm and the 200 cm fallback for a lone
painting are read by ``hangcalc.layout.models``.  The inch factor and the
1/8 inch display step are read by ``hangcalc.units``.  Plans and parsed
designs start from the same default spacing.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutRules:
    """Spacing and measurement rules.

    All distances are in centimetres unless stated otherwise.
    """

    minimum_spacing: float = 20.0
    """Floor applied to computed auto spacing.  Absolute, not adaptive to
    the display unit."""

    default_spacing: float = 200.0
    """Spacing returned when fewer than two paintings are on the wall."""

    cm_per_inch: float = 2.54
    """Conversion factor between the display unit and the layout unit."""

    inch_denominator: int = 8
    """Fractional-inch display resolution (1/8 inch)."""

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def inch_per_cm(self) -> float:
        return 1.0 / self.cm_per_inch


# Module-level singleton, importable everywhere.
LAYOUT_RULES = LayoutRules()
