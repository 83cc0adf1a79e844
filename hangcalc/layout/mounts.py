"""Mount geometry — where the hangers of a placed painting fall."""

from __future__ import annotations

from hangcalc.design.models import DRing, MountType, Wire

from .models import Point


def resolve_mounting_points(
    mount: MountType,
    origin: Point,
    width: float,
    height: float,
) -> list[Point]:
    """Return the hanger point(s) of a painting whose bottom-left is *origin*.

    Wire:   one point, horizontally centred.
    D-ring: two points, always ordered [left, right].

    Offsets are taken as given.  A wire offset larger than the painting
    puts the hanger below the painting, and a D-ring edge offset beyond
    half the width makes the points cross; both are returned unchanged.
    """
    match mount:
        case Wire(offset_from_top=top):
            return [Point(origin.x + width / 2, origin.y + height - top)]
        case DRing(offset_from_top=top, offset_from_edge=edge):
            y = origin.y + height - top
            return [
                Point(origin.x + edge, y),
                Point(origin.x + width - edge, y),
            ]
        case _:
            raise TypeError(f"Unknown mount type: {mount!r}")
