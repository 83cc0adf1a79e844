"""Design validation — check a HangDesign before it reaches the layout engine."""

from __future__ import annotations

from .models import DRing, HangDesign, Painting, SpacingMode, Wall


def _positive(value: float) -> bool:
    # Written this way so NaN fails too
    return value > 0


def _non_negative(value: float) -> bool:
    return value >= 0


def validate_wall(wall: Wall) -> list[str]:
    """Return error messages for *wall* (empty = valid)."""
    errors: list[str] = []
    if not _positive(wall.width):
        errors.append(f"Wall: width must be > 0 (got {wall.width})")
    if not _positive(wall.height):
        errors.append(f"Wall: height must be > 0 (got {wall.height})")
    return errors


def validate_painting(painting: Painting) -> list[str]:
    """Return error messages for *painting* (empty = valid)."""
    errors: list[str] = []
    label = f"Painting '{painting.name}'"

    if not _positive(painting.width):
        errors.append(f"{label}: width must be > 0 (got {painting.width})")
    if not _positive(painting.height):
        errors.append(f"{label}: height must be > 0 (got {painting.height})")

    mount = painting.mount
    if not _non_negative(mount.offset_from_top):
        errors.append(f"{label}: offset_from_top must be >= 0 (got {mount.offset_from_top})")
    if isinstance(mount, DRing) and not _non_negative(mount.offset_from_edge):
        errors.append(f"{label}: offset_from_edge must be >= 0 (got {mount.offset_from_edge})")
    return errors


def validate_design(design: HangDesign) -> list[str]:
    """Validate a HangDesign. Returns error messages (empty = valid)."""
    errors = validate_wall(design.wall)

    for painting in design.paintings:
        errors.extend(validate_painting(painting))

    # ── Manual spacing only matters for a row ──
    if design.spacing_mode is SpacingMode.MANUAL and not _non_negative(design.manual_spacing):
        errors.append(f"Spacing must not be negative (got {design.manual_spacing})")

    return errors
