"""Layout — positions paintings on the wall and resolves their hangers.

Submodules:
  models        Output dataclasses and configuration constants.
  mounts        Hanger points for wire and D-ring mounts.
  engine        Row placement and auto-spacing.
  geometry      Shapely helpers (wall box, painting boxes, containment).
  diagnostics   Warnings for layouts that do not fit or hang badly.
  serialization JSON conversion (layout_to_dict, layouts_to_dict).
"""

from .models import Point, PaintingLayout, MIN_SPACING, DEFAULT_SPACING
from .mounts import resolve_mounting_points
from .engine import compute_layouts, compute_auto_spacing, max_fitting_spacing
from .diagnostics import LayoutWarning, check_layouts
from .serialization import layout_to_dict, layouts_to_dict

__all__ = [
    # Models
    "Point", "PaintingLayout", "MIN_SPACING", "DEFAULT_SPACING",
    # Mounts
    "resolve_mounting_points",
    # Engine
    "compute_layouts", "compute_auto_spacing", "max_fitting_spacing",
    # Diagnostics
    "LayoutWarning", "check_layouts",
    # Serialization
    "layout_to_dict", "layouts_to_dict",
]
