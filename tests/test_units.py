"""Tests for unit conversion and fractional-inch text."""

from __future__ import annotations

import unittest

from hangcalc.units import (
    FractionalInch,
    MeasurementUnit,
    cm_to_inches,
    format_measurement,
    from_cm,
    inches_to_cm,
    parse_fractional_inch,
    parse_measurement,
    to_cm,
)


class TestConversion(unittest.TestCase):

    def test_inches_to_cm(self):
        self.assertAlmostEqual(inches_to_cm(10), 25.4)

    def test_cm_to_inches(self):
        self.assertAlmostEqual(cm_to_inches(2.54), 1.0)

    def test_to_and_from_cm(self):
        self.assertEqual(to_cm(12.5, MeasurementUnit.CENTIMETERS), 12.5)
        self.assertAlmostEqual(to_cm(1, MeasurementUnit.INCHES), 2.54)
        self.assertAlmostEqual(from_cm(25.4, MeasurementUnit.INCHES), 10.0)

    def test_unit_names(self):
        self.assertEqual(MeasurementUnit.INCHES.short_name, "in")
        self.assertEqual(MeasurementUnit.CENTIMETERS.display_name, "Centimeters")
        self.assertEqual(MeasurementUnit("cm"), MeasurementUnit.CENTIMETERS)


class TestFractionalInch(unittest.TestCase):

    def test_whole(self):
        self.assertEqual(FractionalInch.from_decimal(12.0), FractionalInch(12, 0, 1))

    def test_reduced_fractions(self):
        self.assertEqual(FractionalInch.from_decimal(5.5), FractionalInch(5, 1, 2))
        self.assertEqual(FractionalInch.from_decimal(5.25), FractionalInch(5, 1, 4))
        self.assertEqual(FractionalInch.from_decimal(5.75), FractionalInch(5, 3, 4))

    def test_eighths(self):
        self.assertEqual(FractionalInch.from_decimal(12.375), FractionalInch(12, 3, 8))
        self.assertEqual(FractionalInch.from_decimal(0.13), FractionalInch(0, 1, 8))

    def test_halves_round_away_from_zero(self):
        self.assertEqual(FractionalInch.from_decimal(2.3125).display, "2 3/8")
        self.assertEqual(FractionalInch.from_decimal(0.0625), FractionalInch(0, 1, 8))
        self.assertEqual(FractionalInch.from_decimal(0.0625).display, "1/8")
        self.assertEqual(FractionalInch.from_decimal(-0.0625).display, "-1/8")

    def test_rounds_up_into_next_inch(self):
        self.assertEqual(FractionalInch.from_decimal(3.97), FractionalInch(4, 0, 1))

    def test_display(self):
        self.assertEqual(FractionalInch(12, 0, 1).display, "12")
        self.assertEqual(FractionalInch(0, 3, 8).display, "3/8")
        self.assertEqual(FractionalInch(12, 3, 8).display, "12 3/8")

    def test_decimal_value(self):
        self.assertAlmostEqual(FractionalInch(2, 3, 4).decimal_value, 2.75)


class TestFormatMeasurement(unittest.TestCase):

    def test_centimeters_one_decimal(self):
        self.assertEqual(format_measurement(109.5, MeasurementUnit.CENTIMETERS), "109.5")
        self.assertEqual(format_measurement(140, MeasurementUnit.CENTIMETERS), "140.0")

    def test_inches_fractional(self):
        self.assertEqual(format_measurement(7.875, MeasurementUnit.INCHES), "7 7/8")


class TestParseMeasurement(unittest.TestCase):

    def test_centimeters(self):
        self.assertEqual(parse_measurement(" 300 ", MeasurementUnit.CENTIMETERS), 300.0)
        self.assertIsNone(parse_measurement("3/4", MeasurementUnit.CENTIMETERS))
        self.assertIsNone(parse_measurement("abc", MeasurementUnit.CENTIMETERS))

    def test_inch_decimal(self):
        self.assertEqual(parse_fractional_inch("12.5"), 12.5)

    def test_inch_fraction(self):
        self.assertEqual(parse_fractional_inch("3/4"), 0.75)

    def test_inch_mixed_number(self):
        self.assertEqual(parse_measurement("12 3/8", MeasurementUnit.INCHES), 12.375)

    def test_zero_denominator(self):
        self.assertIsNone(parse_fractional_inch("1/0"))
        self.assertIsNone(parse_fractional_inch("5 1/0"))

    def test_garbage(self):
        for text in ("", "abc", "1/2/3", "1 2 3/4", "a 1/2", "1 x/2"):
            self.assertIsNone(parse_fractional_inch(text), text)


if __name__ == "__main__":
    unittest.main()
