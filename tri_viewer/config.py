"""Viewer settings loaded from an INI file."""
from __future__ import annotations

from configparser import ConfigParser, Error
from dataclasses import dataclass, field
import logging
import math
import os
from pathlib import Path
import sys
from typing import Optional

from tri_viewer.errors import InvalidConfigurationError
from tri_viewer.geometry.barycentric import validate_spacing
from tri_viewer.geometry.mapping import DEFAULT_OFFSET, DEFAULT_SCALE
from tri_viewer.geometry.picking import DEFAULT_PICK_RADIUS, validate_radius
from tri_viewer.geometry.primitives import is_finite_point
from tri_viewer.rendering.colors import parse_color
from tri_viewer.rendering.triangle_painter import DEFAULT_GRID_COLOR, DEFAULT_GRID_SPACING

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "tri_viewer.ini"
CONFIG_ENV_VAR = "TRI_VIEWER_CONFIG"
_CANVAS_SECTION = "canvas"
_INTERACTION_SECTION = "interaction"
_GRID_SECTION = "grid"
_TRIANGLE_SECTION = "triangle"

Point = tuple[float, float]


@dataclass(frozen=True)
class ViewerConfig:
    width: int = 400
    height: int = 300
    scale: float = DEFAULT_SCALE
    offset: Point = (DEFAULT_OFFSET.x, DEFAULT_OFFSET.y)
    background: str = "white"
    pick_radius: float = DEFAULT_PICK_RADIUS
    grid_enabled: bool = True
    grid_spacing: float = DEFAULT_GRID_SPACING
    grid_color: str = DEFAULT_GRID_COLOR
    triangle: tuple[Point, Point, Point] = field(
        default=((0.0, 0.0), (1.0, 0.0), (0.0, 1.0))
    )

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidConfigurationError(
                f"Canvas size must be positive, got {self.width}x{self.height}."
            )
        if not math.isfinite(self.scale) or self.scale <= 0:
            raise InvalidConfigurationError(
                f"Canvas scale must be a positive finite number, got {self.scale!r}."
            )
        validate_radius(self.pick_radius)
        validate_spacing(self.grid_spacing)
        if not is_finite_point(self.offset):
            raise InvalidConfigurationError(
                f"Canvas offset must be finite, got {self.offset!r}."
            )
        for name, vertex in zip(("a", "b", "c"), self.triangle):
            if not is_finite_point(vertex):
                raise InvalidConfigurationError(
                    f"Triangle vertex {name} must be finite, got {vertex!r}."
                )
        parse_color(self.background)
        parse_color(self.grid_color)


def config_path(main_script_path: Optional[Path]) -> Path:
    """Return the INI path: $TRI_VIEWER_CONFIG, else beside the executable or script."""

    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    if getattr(sys, "frozen", False):
        base = Path(sys.executable).parent
    elif main_script_path is not None:
        base = main_script_path.resolve().parent
    else:
        base = Path.cwd()
    return base / CONFIG_FILENAME


def _parse_point(text: str) -> Point:
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 2:
        raise ValueError(f"expected 'x, y', got {text!r}")
    return (float(parts[0]), float(parts[1]))


def _read_parser(ini_path: Path) -> ConfigParser | None:
    parser = ConfigParser()
    try:
        with ini_path.open("r", encoding="utf-8") as handle:
            parser.read_file(handle)
    except (OSError, Error):
        logger.warning("Could not read viewer config %s; using defaults", ini_path, exc_info=True)
        return None
    return parser


def config_from_parser(parser: ConfigParser) -> ViewerConfig:
    """Build a ``ViewerConfig`` from parsed INI sections, defaults for gaps."""

    defaults = ViewerConfig()
    try:
        width = parser.getint(_CANVAS_SECTION, "width", fallback=defaults.width)
        height = parser.getint(_CANVAS_SECTION, "height", fallback=defaults.height)
        scale = parser.getfloat(_CANVAS_SECTION, "scale", fallback=defaults.scale)
        offset = (
            parser.getfloat(_CANVAS_SECTION, "offset_x", fallback=defaults.offset[0]),
            parser.getfloat(_CANVAS_SECTION, "offset_y", fallback=defaults.offset[1]),
        )
        background = parser.get(_CANVAS_SECTION, "background", fallback=defaults.background)
        pick_radius = parser.getfloat(
            _INTERACTION_SECTION, "pick_radius", fallback=defaults.pick_radius
        )
        grid_enabled = parser.getboolean(_GRID_SECTION, "enabled", fallback=defaults.grid_enabled)
        grid_spacing = parser.getfloat(_GRID_SECTION, "spacing", fallback=defaults.grid_spacing)
        grid_color = parser.get(_GRID_SECTION, "color", fallback=defaults.grid_color)
        triangle = tuple(
            _parse_point(parser.get(_TRIANGLE_SECTION, name))
            if parser.has_option(_TRIANGLE_SECTION, name)
            else default
            for name, default in zip(("a", "b", "c"), defaults.triangle)
        )
    except ValueError as exc:
        raise InvalidConfigurationError(f"Invalid viewer configuration: {exc}") from exc

    return ViewerConfig(
        width=width,
        height=height,
        scale=scale,
        offset=offset,
        background=background,
        pick_radius=pick_radius,
        grid_enabled=grid_enabled,
        grid_spacing=grid_spacing,
        grid_color=grid_color,
        triangle=triangle,  # type: ignore[arg-type]
    )


def load_viewer_config_file(ini_path: Path) -> ViewerConfig:
    if not ini_path.exists():
        logger.debug("No viewer config at %s; using defaults", ini_path)
        return ViewerConfig()
    parser = _read_parser(ini_path)
    if parser is None:
        return ViewerConfig()
    config = config_from_parser(parser)
    logger.info("Loaded viewer config from %s", ini_path)
    return config


def load_viewer_config(main_script_path: Optional[Path]) -> ViewerConfig:
    return load_viewer_config_file(config_path(main_script_path))

