"""Tests for layout geometry helpers and diagnostics."""

from __future__ import annotations

import unittest

from hangcalc.design.models import DRing, Painting, SpacingPolicy, Wall, Wire
from hangcalc.layout import (
    Point, check_layouts, compute_auto_spacing, compute_layouts,
    layout_to_dict, layouts_to_dict,
)
from hangcalc.layout.geometry import (
    layout_inside_wall, overlap_area, painting_box, point_on_wall, wall_polygon,
)
from tests.gallery_fixture import (
    make_gallery_paintings, make_gallery_wall, make_mona_lisa,
)


def _codes(warnings):
    return [w.code for w in warnings]


class TestLayoutGeometry(unittest.TestCase):

    def test_wall_polygon_bounds(self):
        self.assertEqual(wall_polygon(Wall(300, 244)).bounds, (0.0, 0.0, 300.0, 244.0))

    def test_painting_box_bounds(self):
        layout = compute_layouts(Wall(300, 244), [make_mona_lisa()], 20)[0]
        self.assertEqual(painting_box(layout).bounds, (140.0, 109.5, 160.0, 134.5))

    def test_flush_painting_counts_as_inside(self):
        wall = make_gallery_wall()
        paintings = make_gallery_paintings()
        policy = SpacingPolicy.CENTER_BLOCK
        spacing = compute_auto_spacing(wall, paintings, policy=policy)
        for layout in compute_layouts(wall, paintings, spacing, policy=policy):
            self.assertTrue(layout_inside_wall(layout, wall))

    def test_point_on_wall(self):
        wall = Wall(100, 50)
        self.assertTrue(point_on_wall(Point(0, 0), wall))
        self.assertTrue(point_on_wall(Point(100, 50), wall))
        self.assertFalse(point_on_wall(Point(100.1, 10), wall))
        self.assertFalse(point_on_wall(Point(10, -1), wall))

    def test_touching_paintings_do_not_overlap(self):
        layouts = compute_layouts(make_gallery_wall(), make_gallery_paintings(), 0)
        self.assertEqual(overlap_area(layouts[0], layouts[1]), 0.0)


class TestCheckLayouts(unittest.TestCase):

    def test_gallery_is_clean(self):
        wall = make_gallery_wall()
        paintings = make_gallery_paintings()
        spacing = compute_auto_spacing(wall, paintings)
        layouts = compute_layouts(wall, paintings, spacing)
        self.assertEqual(check_layouts(wall, layouts, spacing=spacing), [])

    def test_typical_coordinates_within_wall(self):
        wall = make_gallery_wall()
        layouts = compute_layouts(wall, make_gallery_paintings(), 30)
        for layout in layouts:
            for pt in [layout.origin, *layout.mounting_points]:
                self.assertTrue(0 <= pt.x <= wall.width)
                self.assertTrue(0 <= pt.y <= wall.height)

    def test_outside_wall(self):
        wall = Wall(100, 100)
        paintings = [Painting("A", 80, 50, Wire(5)), Painting("B", 80, 50, Wire(5))]
        spacing = compute_auto_spacing(wall, paintings)
        warnings = check_layouts(wall, compute_layouts(wall, paintings, spacing))
        self.assertIn("outside_wall", _codes(warnings))
        self.assertIn("hanger_outside_wall", _codes(warnings))

    def test_hanger_below_painting(self):
        wall = Wall(300, 244)
        layouts = compute_layouts(wall, [Painting("Low", 20, 25, Wire(30))], 0)
        warnings = check_layouts(wall, layouts)
        self.assertEqual(_codes(warnings), ["hanger_below_painting"])
        self.assertEqual(warnings[0].painting.name, "Low")

    def test_dring_crossed(self):
        wall = Wall(300, 244)
        layouts = compute_layouts(wall, [Painting("Narrow", 20, 30, DRing(5, 12))], 0)
        self.assertEqual(_codes(check_layouts(wall, layouts)), ["dring_crossed"])

    def test_overlap(self):
        wall = make_gallery_wall()
        layouts = compute_layouts(wall, make_gallery_paintings(), -10)
        self.assertIn("overlap", _codes(check_layouts(wall, layouts)))

    def test_negative_spacing(self):
        wall = make_gallery_wall()
        layouts = compute_layouts(wall, make_gallery_paintings(), -10)
        warnings = check_layouts(wall, layouts, spacing=-10)
        self.assertIn("spacing_negative", _codes(warnings))
        negative = [w for w in warnings if w.code == "spacing_negative"][0]
        self.assertIn("must not be negative", negative.message)

    def test_zero_spacing_is_not_negative(self):
        wall = make_gallery_wall()
        layouts = compute_layouts(wall, make_gallery_paintings(), 0)
        self.assertNotIn("spacing_negative", _codes(check_layouts(wall, layouts, spacing=0)))

    def test_spacing_too_large(self):
        wall = make_gallery_wall()
        layouts = compute_layouts(wall, make_gallery_paintings(), 100)
        codes = _codes(check_layouts(wall, layouts, spacing=100))
        self.assertIn("spacing_too_large", codes)
        self.assertIn("outside_wall", codes)

    def test_spacing_ignored_for_single_painting(self):
        wall = Wall(300, 244)
        layouts = compute_layouts(wall, [make_mona_lisa()], 5000)
        self.assertEqual(check_layouts(wall, layouts, spacing=5000), [])

    def test_spacing_limit_follows_policy(self):
        """90cm fits under center-block (limit 125) but not equal margins (62.5)."""
        wall = make_gallery_wall()
        paintings = make_gallery_paintings()
        policy = SpacingPolicy.CENTER_BLOCK
        layouts = compute_layouts(wall, paintings, 90, policy=policy)
        self.assertEqual(check_layouts(wall, layouts, spacing=90, policy=policy), [])
        layouts = compute_layouts(wall, paintings, 90)
        self.assertIn("spacing_too_large", _codes(check_layouts(wall, layouts, spacing=90)))

    def test_warnings_are_logged(self):
        wall = Wall(300, 244)
        layouts = compute_layouts(wall, [Painting("Low", 20, 25, Wire(30))], 0)
        with self.assertLogs("hangcalc.layout.diagnostics", level="WARNING") as cm:
            check_layouts(wall, layouts)
        self.assertIn("hanger_below_painting", cm.output[0])


class TestLayoutSerialization(unittest.TestCase):

    def test_layout_to_dict(self):
        layout = compute_layouts(Wall(300, 244), [make_mona_lisa()], 20)[0]
        self.assertEqual(layout_to_dict(layout), {
            "painting": {
                "name": "Mona Lisa",
                "width": 20.0,
                "height": 25.0,
                "mount": {"type": "wire", "offset_from_top": 10.0},
            },
            "origin": {"x": 140.0, "y": 109.5},
            "mounting_points": [{"x": 150.0, "y": 124.5}],
        })

    def test_layouts_to_dict_dring(self):
        d = layouts_to_dict(compute_layouts(make_gallery_wall(), make_gallery_paintings(), 62.5))
        self.assertEqual(len(d["layouts"]), 3)
        orchard = d["layouts"][1]
        self.assertEqual(orchard["painting"]["mount"]["type"], "d_ring")
        self.assertEqual(len(orchard["mounting_points"]), 2)


if __name__ == "__main__":
    unittest.main()
