"""Fault-line terrain generator with text rendering."""

from .budget import MutationBudget
from .config import (
    Config,
    GeneratorConfig,
    GlyphConfig,
    LimitsConfig,
    find_config,
    load_config,
)
from .exceptions import (
    InputError,
    InvalidDimensionsError,
    MapGenError,
    MutationLimitError,
)
from .faults import SLOPES, FaultLine, draw_fault_line
from .grid import MAX_MUTATIONS, TerrainGrid, TerrainStats
from .rendering import (
    DEFAULT_GLYPHS,
    TerrainClass,
    classify_elevations,
    render_elevations,
)
from .shell import MapSession

__all__ = [
    # Grid
    "TerrainGrid",
    "TerrainStats",
    "MAX_MUTATIONS",
    # Fault lines
    "FaultLine",
    "SLOPES",
    "draw_fault_line",
    # Rendering
    "TerrainClass",
    "DEFAULT_GLYPHS",
    "classify_elevations",
    "render_elevations",
    # Session
    "MutationBudget",
    "MapSession",
    # Config
    "Config",
    "LimitsConfig",
    "GeneratorConfig",
    "GlyphConfig",
    "load_config",
    "find_config",
    # Exceptions
    "MapGenError",
    "InvalidDimensionsError",
    "MutationLimitError",
    "InputError",
]
