"""Design — dataclasses, parsing, validation, and serialization."""

from .models import (
    Wall, Wire, DRing, MountType, Painting,
    SpacingMode, SpacingPolicy, HangDesign, DesignError,
)
from .parsing import parse_design, parse_painting, parse_mount
from .validation import validate_design, validate_painting, validate_wall
from .serialization import design_to_dict, painting_to_dict, mount_to_dict

__all__ = [
    # Models
    "Wall", "Wire", "DRing", "MountType", "Painting",
    "SpacingMode", "SpacingPolicy", "HangDesign", "DesignError",
    # Parsing / Validation / Serialization
    "parse_design", "parse_painting", "parse_mount",
    "validate_design", "validate_painting", "validate_wall",
    "design_to_dict", "painting_to_dict", "mount_to_dict",
]
