"""Low-level geometry helpers for layout checks."""

from __future__ import annotations

from shapely.geometry import Point as ShapelyPoint, Polygon, box as shapely_box

from hangcalc.design.models import Wall

from .models import PaintingLayout, Point


def wall_polygon(wall: Wall) -> Polygon:
    """The wall as a Shapely rectangle anchored at (0, 0)."""
    return shapely_box(0.0, 0.0, wall.width, wall.height)


def painting_box(layout: PaintingLayout) -> Polygon:
    """Bounding box of a placed painting."""
    return shapely_box(
        layout.origin.x, layout.origin.y,
        layout.right, layout.top,
    )


def layout_inside_wall(layout: PaintingLayout, wall: Wall) -> bool:
    """Check if a painting lies on the wall.

    Uses ``covers`` rather than ``contains`` so a painting flush with a
    wall edge still counts as inside.
    """
    return wall_polygon(wall).covers(painting_box(layout))


def point_on_wall(point: Point, wall: Wall) -> bool:
    """Check if a hanger point is on the wall (edges included)."""
    return wall_polygon(wall).covers(ShapelyPoint(point.x, point.y))


def overlap_area(a: PaintingLayout, b: PaintingLayout) -> float:
    """Area shared by two placed paintings.  Zero when they only touch."""
    return painting_box(a).intersection(painting_box(b)).area
