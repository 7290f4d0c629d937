"""Terrain classification and text rendering: water, lowland, hill."""

from enum import Enum
from typing import Mapping

import numpy as np
from numpy.typing import NDArray


class TerrainClass(str, Enum):
    """Terrain classes a cell can be rendered as."""

    WATER = "water"
    LOWLAND = "lowland"
    HILL = "hill"

    @property
    def glyph(self) -> str:
        """Default two-character glyph for this terrain class."""
        return DEFAULT_GLYPHS[self]


DEFAULT_GLYPHS: dict[TerrainClass, str] = {
    TerrainClass.WATER: "  ",
    TerrainClass.LOWLAND: "##",
    TerrainClass.HILL: "ɅɅ",
}

# Compact uint8 codes for classified arrays
_CLASS_CODES: dict[TerrainClass, int] = {
    TerrainClass.WATER: 0,
    TerrainClass.LOWLAND: 1,
    TerrainClass.HILL: 2,
}
_CODE_CLASSES: dict[int, TerrainClass] = {v: k for k, v in _CLASS_CODES.items()}


def class_value(terrain: TerrainClass) -> int:
    """Convert TerrainClass to its uint8 code."""
    return _CLASS_CODES[terrain]


def class_from_value(value: int) -> TerrainClass:
    """Convert a uint8 code back to TerrainClass."""
    return _CODE_CLASSES[value]


def classify_elevations(
    elevations: NDArray[np.integer],
    beach_level: int,
    hills_level: int,
) -> NDArray[np.uint8]:
    """Classify each cell by comparing its elevation with two thresholds.

    Hill takes precedence over water, so when ``hills_level <= beach_level``
    the lowland band is empty and cells are either water or hill.

    Args:
        elevations: 2D elevation array.
        beach_level: Elevations below this are water.
        hills_level: Elevations at or above this are hills.

    Returns:
        2D array of terrain class codes as uint8.
    """
    # Widen so negative or huge thresholds compare exactly
    levels = np.asarray(elevations).astype(np.int64)

    classes = np.full(levels.shape, class_value(TerrainClass.LOWLAND), dtype=np.uint8)
    classes[levels < beach_level] = class_value(TerrainClass.WATER)
    classes[levels >= hills_level] = class_value(TerrainClass.HILL)
    return classes


def border_line(width: int) -> str:
    """Top/bottom border for a map of the given width, 2 * width + 4 chars."""
    return " " + "-" * (2 * width + 2) + " "


def render_elevations(
    elevations: NDArray[np.integer],
    beach_level: int,
    hills_level: int,
    glyphs: Mapping[TerrainClass, str] | None = None,
) -> str:
    """Render an elevation array as a bordered block of terrain glyphs.

    Args:
        elevations: 2D elevation array of shape (height, width).
        beach_level: Elevations below this are water.
        hills_level: Elevations at or above this are hills.
        glyphs: Optional glyph overrides; each glyph is two characters.

    Returns:
        The map text, one line per row plus top and bottom borders,
        terminated by a newline.
    """
    table = dict(DEFAULT_GLYPHS)
    if glyphs:
        table.update(glyphs)
    by_code = [table[class_from_value(code)] for code in sorted(_CODE_CLASSES)]

    classes = classify_elevations(elevations, beach_level, hills_level)
    width = classes.shape[1]

    top_bottom = border_line(width)
    lines = [top_bottom]
    for row in classes:
        lines.append("| " + "".join(by_code[code] for code in row) + " |")
    lines.append(top_bottom)

    return "\n".join(lines) + "\n"
