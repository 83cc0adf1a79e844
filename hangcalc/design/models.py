"""Design dataclasses — the wall, the paintings and their mount hardware."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from hangcalc.config import LAYOUT_RULES


@dataclass(frozen=True)
class Wall:
    width: float
    height: float


# ── Mount hardware ─────────────────────────────────────────────────


@dataclass(frozen=True)
class Wire:
    """A single hanger centred horizontally, *offset_from_top* below the
    painting's top edge."""
    offset_from_top: float


@dataclass(frozen=True)
class DRing:
    """Two hangers at the same height, each inset *offset_from_edge* from
    its side of the painting."""
    offset_from_top: float
    offset_from_edge: float


MountType = Union[Wire, DRing]


@dataclass
class Painting:
    name: str
    width: float
    height: float
    mount: MountType


# ── Spacing settings ───────────────────────────────────────────────


class SpacingMode(Enum):
    AUTO = "auto"
    MANUAL = "manual"


class SpacingPolicy(Enum):
    """How a row of two or more paintings is spread across the wall.

    EQUAL_MARGIN: left margin, gaps and right margin all equal the spacing.
    CENTER_BLOCK: paintings separated by the spacing, the row centred as a
                  block with no fixed outer margins.
    """
    EQUAL_MARGIN = "equal_margin"
    CENTER_BLOCK = "center_block"


@dataclass
class HangDesign:
    """Everything the user entered, converted to centimetres."""
    wall: Wall
    paintings: list[Painting] = field(default_factory=list)
    spacing_mode: SpacingMode = SpacingMode.AUTO
    manual_spacing: float = LAYOUT_RULES.default_spacing
    policy: SpacingPolicy = SpacingPolicy.EQUAL_MARGIN


class DesignError(Exception):
    """Raised when raw design input cannot be turned into a HangDesign."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid '{field}': {reason}")
