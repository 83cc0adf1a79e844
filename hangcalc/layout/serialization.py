"""Layout serialization — JSON conversion for a rendering layer."""

from __future__ import annotations

from collections.abc import Sequence

from hangcalc.design.serialization import painting_to_dict

from .models import PaintingLayout


def layout_to_dict(layout: PaintingLayout) -> dict:
    """Serialize a PaintingLayout to a JSON-safe dict."""
    return {
        "painting": painting_to_dict(layout.painting),
        "origin": {"x": layout.origin.x, "y": layout.origin.y},
        "mounting_points": [
            {"x": p.x, "y": p.y}
            for p in layout.mounting_points
        ],
    }


def layouts_to_dict(layouts: Sequence[PaintingLayout]) -> dict:
    """Serialize a full layout set."""
    return {"layouts": [layout_to_dict(l) for l in layouts]}
