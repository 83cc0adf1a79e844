"""HangCalc — plan where paintings and their hangers go on a wall.

Packages and modules, leaf first:

  config     — shared spacing and measurement constants
  units      — cm/inch conversion and fractional-inch text
  design     — wall, painting and mount dataclasses; parsing and validation
  layout     — placement engine, hanger geometry, diagnostics
  plan       — editable state that recomputes layouts on demand
  reporting  — measurement report for the user
"""
