"""Load render settings from YAML configuration files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .core.module import Evaluable
from .maps import (
    GradientColor,
    ImageRenderer,
    NoiseMapBuilder,
    NoiseMapBuilderCylinder,
    NoiseMapBuilderPlane,
    NoiseMapBuilderSphere,
)

logger = logging.getLogger(__name__)

PROJECTIONS = ("plane", "cylinder", "sphere")

GRADIENTS = {
    "grayscale": GradientColor.grayscale,
    "terrain": GradientColor.terrain,
}


@dataclass
class RenderSettings:
    """How a module is sampled and rendered.

    YAML format:
    ```yaml
    preset: terrain
    seed: 42
    size: [512, 256]
    projection: sphere
    bounds: [-90, 90, -180, 180]
    gradient: terrain
    light:
      enabled: true
      azimuth: 45
      elevation: 30
      contrast: 2.0
    ```

    ``bounds`` is (x_lower, x_upper, z_lower, z_upper) for the plane,
    (angle_lower, angle_upper, height_lower, height_upper) for the cylinder
    and (south, north, west, east) for the sphere. ``gradient`` is either a
    named gradient or a list of ``[position, [r, g, b]]`` points.
    """

    preset: str = "terrain"
    seed: int = 0
    size: tuple[int, int] = (256, 256)
    projection: str = "plane"
    bounds: tuple[float, float, float, float] | None = None
    seamless: bool = False
    gradient: str | list = "grayscale"
    light_enabled: bool = False
    light_azimuth: float = 45.0
    light_elevation: float = 45.0
    light_contrast: float = 1.0
    light_brightness: float = 1.0

    def __post_init__(self) -> None:
        if self.projection not in PROJECTIONS:
            raise ValueError(f"Unknown projection: {self.projection} (expected one of {PROJECTIONS})")
        self.size = tuple(int(v) for v in self.size)
        if len(self.size) != 2:
            raise ValueError(f"size must be [width, height], got {self.size}")
        if self.bounds is not None:
            self.bounds = tuple(float(v) for v in self.bounds)
            if len(self.bounds) != 4:
                raise ValueError(f"bounds must have 4 values, got {self.bounds}")

    def make_builder(self, module: Evaluable) -> NoiseMapBuilder:
        """Create the noise map builder for these settings."""
        width, height = self.size
        if self.projection == "plane":
            bounds = self.bounds or (-1.0, 1.0, -1.0, 1.0)
            return NoiseMapBuilderPlane(module, width, height, bounds=bounds, seamless=self.seamless)
        if self.projection == "cylinder":
            bounds = self.bounds or (-180.0, 180.0, -1.0, 1.0)
            return NoiseMapBuilderCylinder(
                module, width, height, angle_bounds=bounds[:2], height_bounds=bounds[2:]
            )
        bounds = self.bounds or (-90.0, 90.0, -180.0, 180.0)
        return NoiseMapBuilderSphere(
            module, width, height, latitude_bounds=bounds[:2], longitude_bounds=bounds[2:]
        )

    def make_renderer(self) -> ImageRenderer:
        """Create the image renderer for these settings."""
        return ImageRenderer(
            gradient=parse_gradient(self.gradient),
            light_enabled=self.light_enabled,
            light_azimuth=self.light_azimuth,
            light_elevation=self.light_elevation,
            light_contrast=self.light_contrast,
            light_brightness=self.light_brightness,
        )


def parse_gradient(data: str | list) -> GradientColor:
    """Build a GradientColor from a gradient name or a list of points."""
    if isinstance(data, str):
        factory = GRADIENTS.get(data)
        if factory is None:
            raise ValueError(f"Unknown gradient: {data}")
        return factory()
    return GradientColor([(position, tuple(color)) for position, color in data])


def load_render_settings(path: str | Path) -> RenderSettings:
    """Load render settings from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        RenderSettings instance

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML format is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Render settings not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    settings = parse_render_settings(data or {})
    logger.debug("Loaded render settings from %s: %s", path, settings)
    return settings


def parse_render_settings(data: dict[str, Any]) -> RenderSettings:
    """Parse render settings from YAML data."""
    if not isinstance(data, dict):
        raise ValueError(f"Render settings must be a mapping, got {type(data).__name__}")

    converted = dict(data)

    # Flatten the light section into light_* fields
    light = converted.pop("light", None) or {}
    if not isinstance(light, dict):
        raise ValueError("light must be a mapping")
    for key, value in light.items():
        converted[f"light_{key}"] = value

    known = {f.name for f in fields(RenderSettings)}
    unknown = sorted(set(converted) - known)
    if unknown:
        raise ValueError(f"Unknown render settings: {', '.join(unknown)}")

    return RenderSettings(**converted)


def dump_render_settings(settings: RenderSettings) -> str:
    """Serialize render settings to YAML."""
    gradient = settings.gradient
    if not isinstance(gradient, str):
        gradient = [[float(position), list(color)] for position, color in gradient]

    data: dict[str, Any] = {
        "preset": settings.preset,
        "seed": settings.seed,
        "size": list(settings.size),
        "projection": settings.projection,
        "seamless": settings.seamless,
        "gradient": gradient,
        "light": {
            "enabled": settings.light_enabled,
            "azimuth": settings.light_azimuth,
            "elevation": settings.light_elevation,
            "contrast": settings.light_contrast,
            "brightness": settings.light_brightness,
        },
    }
    if settings.bounds is not None:
        data["bounds"] = list(settings.bounds)
    return yaml.safe_dump(data, sort_keys=False)
