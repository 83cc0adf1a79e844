"""Design serialization — convert designs to JSON-safe dicts (centimetres)."""

from __future__ import annotations

from .models import DRing, HangDesign, MountType, Painting, Wire


def mount_to_dict(mount: MountType) -> dict:
    match mount:
        case Wire(offset_from_top=top):
            return {"type": "wire", "offset_from_top": top}
        case DRing(offset_from_top=top, offset_from_edge=edge):
            return {"type": "d_ring", "offset_from_top": top, "offset_from_edge": edge}
        case _:
            raise TypeError(f"Unknown mount type: {mount!r}")


def painting_to_dict(painting: Painting) -> dict:
    return {
        "name": painting.name,
        "width": painting.width,
        "height": painting.height,
        "mount": mount_to_dict(painting.mount),
    }


def design_to_dict(design: HangDesign) -> dict:
    """Convert a HangDesign to a JSON-serializable dict.

    The result parses back with ``parse_design``.
    """
    return {
        "unit": "cm",
        "wall": {"width": design.wall.width, "height": design.wall.height},
        "paintings": [painting_to_dict(p) for p in design.paintings],
        "spacing": {
            "mode": design.spacing_mode.value,
            "value": design.manual_spacing,
            "policy": design.policy.value,
        },
    }
