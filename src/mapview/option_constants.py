"""Bounds and defaults for view options."""

from __future__ import annotations

OPTION_SIGIL = "@"

ZOOM_DEFAULT = 1.0
ZOOM_MAX = 3.0

CELL_SIZE_DEFAULT = 40
CELL_SIZE_MIN = 20
CELL_SIZE_MAX = 200

GRID_OPACITY_DEFAULT = 0.5
GRID_OPACITY_FAINT = 0.25  # "H" without a percentage
# The grid colour token stores a percent-scale value here, unlike every other
# opacity. Pending product clarification; do not normalise to 1.0.
GRID_OPACITY_USER_COLOUR = 100
EDGE_OPACITY_DEFAULT = 0.6
EDGE_OPACITY_FULL = 1.0

FONT_DEFAULT = "AzoSans"
FONT_ALTERNATE = "FleischWurst"
SCALE_DEFAULT = "5ft"

VIEW_EXTENT_PERCENT = 100
VIEW_DEFAULT_WIDTH = 10
VIEW_DEFAULT_HEIGHT = 10

__all__ = [
    "OPTION_SIGIL",
    "ZOOM_DEFAULT",
    "ZOOM_MAX",
    "CELL_SIZE_DEFAULT",
    "CELL_SIZE_MIN",
    "CELL_SIZE_MAX",
    "GRID_OPACITY_DEFAULT",
    "GRID_OPACITY_FAINT",
    "GRID_OPACITY_USER_COLOUR",
    "EDGE_OPACITY_DEFAULT",
    "EDGE_OPACITY_FULL",
    "FONT_DEFAULT",
    "FONT_ALTERNATE",
    "SCALE_DEFAULT",
    "VIEW_EXTENT_PERCENT",
    "VIEW_DEFAULT_WIDTH",
    "VIEW_DEFAULT_HEIGHT",
]
