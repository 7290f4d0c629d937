"""Map generator configuration loading from TOML files."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

from .grid import MAX_MUTATIONS
from .rendering import TerrainClass

CONFIGS_DIR = Path(__file__).parent / "configs"


class LimitsConfig(BaseModel):
    """Bounds the console session enforces on user input."""

    max_height: int = Field(default=150, ge=1, description="Maximum grid rows")
    max_width: int = Field(default=75, ge=1, description="Maximum grid columns")
    max_mutations: int = Field(
        default=MAX_MUTATIONS,
        ge=0,
        le=MAX_MUTATIONS,
        description="Lifetime mutation budget per session",
    )


class GeneratorConfig(BaseModel):
    """Random source settings."""

    seed: int | None = Field(
        default=None, description="Random seed (None = OS entropy)"
    )


class GlyphConfig(BaseModel):
    """Two-character glyphs for each terrain class."""

    water: str = Field(default="  ", min_length=2, max_length=2)
    lowland: str = Field(default="##", min_length=2, max_length=2)
    hill: str = Field(default="ɅɅ", min_length=2, max_length=2)

    def as_mapping(self) -> dict[TerrainClass, str]:
        """Glyph table keyed by terrain class."""
        return {
            TerrainClass.WATER: self.water,
            TerrainClass.LOWLAND: self.lowland,
            TerrainClass.HILL: self.hill,
        }


class Config(BaseModel):
    """Complete configuration for a map generator session."""

    limits: LimitsConfig = Field(default_factory=LimitsConfig)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    glyphs: GlyphConfig = Field(default_factory=GlyphConfig)


def load_config(config_path: Path) -> Config:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed Config object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If values are out of range.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return Config.model_validate(data)


def find_config(name: str) -> Path:
    """Resolve ``--config`` to a file.

    An existing file path is used as given. A bare name, with or without
    the .toml suffix, selects one of the configs shipped in mapgen/configs.

    Raises:
        FileNotFoundError: If ``name`` is neither.
    """
    path = Path(name)
    if path.is_file():
        return path

    if path.parent == Path("."):
        packaged = CONFIGS_DIR / path.with_suffix(".toml").name
        if packaged.is_file():
            return packaged

    raise FileNotFoundError(
        f"Config '{name}' not found; packaged configs: {', '.join(list_configs())}"
    )


def list_configs() -> list[str]:
    """Names of the configs shipped with the package."""
    return sorted(p.stem for p in CONFIGS_DIR.glob("*.toml"))
