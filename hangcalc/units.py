"""Measurement units — cm/inch conversion and fractional-inch text.

The layout engine works in centimetres only.  This module sits between the
user's text fields and the engine: it parses what the user typed in their
chosen unit and formats computed centimetre values back for display.

Usage:
    cm = to_cm(parse_measurement("12 3/8", MeasurementUnit.INCHES), MeasurementUnit.INCHES)
    text = format_measurement(from_cm(cm, MeasurementUnit.INCHES), MeasurementUnit.INCHES)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from hangcalc.config import LAYOUT_RULES


class MeasurementUnit(Enum):
    CENTIMETERS = "cm"
    INCHES = "in"

    @property
    def display_name(self) -> str:
        return "Centimeters" if self is MeasurementUnit.CENTIMETERS else "Inches"

    @property
    def short_name(self) -> str:
        return self.value


# ── Conversion ─────────────────────────────────────────────────────


def cm_to_inches(cm: float) -> float:
    return cm * LAYOUT_RULES.inch_per_cm


def inches_to_cm(inches: float) -> float:
    return inches * LAYOUT_RULES.cm_per_inch


def to_cm(value: float, unit: MeasurementUnit) -> float:
    """Convert *value* expressed in *unit* to centimetres."""
    return inches_to_cm(value) if unit is MeasurementUnit.INCHES else value


def from_cm(value: float, unit: MeasurementUnit) -> float:
    """Convert a centimetre *value* to *unit*."""
    return cm_to_inches(value) if unit is MeasurementUnit.INCHES else value


# ── Fractional inches ──────────────────────────────────────────────


def _round_half_away(x: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 → 3, -2.5 → -3)."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


@dataclass(frozen=True)
class FractionalInch:
    """A whole number of inches plus a reduced fraction (1/8 resolution)."""

    whole: int
    numerator: int
    denominator: int

    @classmethod
    def from_decimal(cls, value: float) -> FractionalInch:
        """Round *value* to the nearest eighth and reduce the fraction.

        Eighths that round up to a full inch carry into the whole part.
        """
        denom = LAYOUT_RULES.inch_denominator
        whole = int(value)
        parts = _round_half_away((value - whole) * denom)
        if parts == 0:
            return cls(whole, 0, 1)
        if abs(parts) == denom:
            return cls(whole + (1 if parts > 0 else -1), 0, 1)
        # Reduce 2/8 → 1/4, 4/8 → 1/2, 6/8 → 3/4
        num, den = parts, denom
        while num % 2 == 0 and den % 2 == 0:
            num //= 2
            den //= 2
        return cls(whole, num, den)

    @property
    def decimal_value(self) -> float:
        return self.whole + self.numerator / self.denominator

    @property
    def display(self) -> str:
        if self.numerator == 0:
            return f"{self.whole}"
        if self.whole == 0:
            return f"{self.numerator}/{self.denominator}"
        return f"{self.whole} {abs(self.numerator)}/{self.denominator}"


# ── Text ───────────────────────────────────────────────────────────


def format_measurement(value: float, unit: MeasurementUnit) -> str:
    """Format *value* (already in *unit*) for display."""
    if unit is MeasurementUnit.INCHES:
        return FractionalInch.from_decimal(value).display
    return f"{value:.1f}"


def _parse_float(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None


def _parse_fraction(text: str) -> float | None:
    parts = text.split("/")
    if len(parts) != 2:
        return None
    num = _parse_float(parts[0])
    den = _parse_float(parts[1])
    if num is None or den is None or den == 0:
        return None
    return num / den


def parse_fractional_inch(text: str) -> float | None:
    """Parse ``"12.375"``, ``"3/8"`` or ``"12 3/8"`` into decimal inches."""
    text = text.strip()

    decimal = _parse_float(text)
    if decimal is not None:
        return decimal

    if "/" not in text:
        return None

    # Plain fraction like "3/4"
    if " " not in text:
        return _parse_fraction(text)

    # Mixed number like "12 3/8"
    parts = text.split()
    if len(parts) != 2:
        return None
    whole = _parse_float(parts[0])
    frac = _parse_fraction(parts[1])
    if whole is None or frac is None:
        return None
    return whole + frac


def parse_measurement(text: str, unit: MeasurementUnit) -> float | None:
    """Parse user input in *unit*.  Returns None if it is not a number."""
    if unit is MeasurementUnit.INCHES:
        return parse_fractional_inch(text)
    return _parse_float(text.strip())
