"""Render noise maps to images."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from .noise_map import NoiseMap

logger = logging.getLogger(__name__)

Color = tuple[int, int, int]


@dataclass
class GradientColor:
    """Color gradient over noise values.

    Attributes:
        points: (position, (r, g, b)) pairs, kept sorted by position. Colors
            are 0-255 per channel.
    """

    points: list[tuple[float, Color]] = field(default_factory=list)

    def __post_init__(self) -> None:
        points = list(self.points)
        self.points = []
        for position, color in points:
            self.add_point(position, color)

    def add_point(self, position: float, color: Color) -> None:
        """Add a gradient point.

        Raises:
            ValueError: If a point already exists at this position
        """
        if any(existing == position for existing, _ in self.points):
            raise ValueError(f"Gradient point at position {position} already exists")
        self.points.append((float(position), tuple(int(c) for c in color)))
        self.points.sort(key=lambda point: point[0])

    def clear(self) -> None:
        self.points.clear()

    def map(self, values: NDArray[np.float64]) -> NDArray[np.uint8]:
        """Map an array of values to RGB colors.

        Values outside the gradient take the color of the nearest end point.

        Returns:
            Array of shape values.shape + (3,)
        """
        if len(self.points) < 2:
            raise ValueError("A color gradient needs at least 2 points")

        positions = np.array([p for p, _ in self.points], dtype=np.float64)
        colors = np.array([c for _, c in self.points], dtype=np.float64)
        rgb = np.stack(
            [np.interp(values, positions, colors[:, i]) for i in range(3)],
            axis=-1,
        )
        return np.clip(rgb, 0, 255).astype(np.uint8)

    @classmethod
    def grayscale(cls) -> GradientColor:
        """Black at -1.0 to white at +1.0."""
        return cls([(-1.0, (0, 0, 0)), (1.0, (255, 255, 255))])

    @classmethod
    def terrain(cls) -> GradientColor:
        """Deep water through sand and grass to snow, sea level at 0.0."""
        return cls([
            (-1.00, (0, 0, 128)),
            (-0.20, (32, 64, 128)),
            (-0.04, (64, 96, 192)),
            (-0.02, (192, 192, 128)),
            (0.00, (0, 192, 0)),
            (0.25, (192, 192, 0)),
            (0.50, (160, 96, 64)),
            (0.75, (128, 255, 255)),
            (1.00, (255, 255, 255)),
        ])


@dataclass
class ImageRenderer:
    """Renders noise maps as RGB images with optional hill shading.

    Attributes:
        gradient: Color gradient applied to the noise values
        light_enabled: Shade the image as if the values were a height field
        light_azimuth: Direction of the light, in degrees (0 = east, 90 = north)
        light_elevation: Angle of the light above the horizon, in degrees
        light_contrast: Height exaggeration used when shading
        light_brightness: Multiplier applied to the light intensity
    """

    gradient: GradientColor = field(default_factory=GradientColor.grayscale)
    light_enabled: bool = False
    light_azimuth: float = 45.0
    light_elevation: float = 45.0
    light_contrast: float = 1.0
    light_brightness: float = 1.0

    def render(self, noise_map: NoiseMap) -> Image.Image:
        """Render the noise map.

        Returns:
            PIL Image in RGB mode, noise_map.width x noise_map.height
        """
        logger.debug("Rendering %dx%d noise map", noise_map.width, noise_map.height)
        rgb = self.gradient.map(noise_map.values).astype(np.float64)

        if self.light_enabled:
            intensity = self._light_intensity(noise_map.values)
            rgb *= intensity[..., np.newaxis]

        return Image.fromarray(np.clip(rgb, 0, 255).astype(np.uint8))

    def render_normal_map(self, noise_map: NoiseMap) -> Image.Image:
        """Render a tangent-space normal map of the noise map."""
        nx, ny, nz = self._normals(noise_map.values, self.light_contrast)

        # Convert from [-1, 1] to [0, 255]
        normal_rgb = np.stack([
            ((nx + 1.0) * 0.5 * 255).astype(np.uint8),
            ((ny + 1.0) * 0.5 * 255).astype(np.uint8),
            ((nz + 1.0) * 0.5 * 255).astype(np.uint8),
        ], axis=-1)

        return Image.fromarray(normal_rgb)

    def save(self, noise_map: NoiseMap, path: str | Path) -> None:
        """Render the noise map and save it to file.

        Args:
            noise_map: Noise map to render
            path: Output file path (e.g., 'terrain.png')
        """
        self.render(noise_map).save(str(path))
        logger.info("Saved %dx%d image to %s", noise_map.width, noise_map.height, path)

    def _light_intensity(self, height: NDArray[np.float64]) -> NDArray[np.float64]:
        nx, ny, nz = self._normals(height, self.light_contrast)

        azimuth = np.radians(self.light_azimuth)
        elevation = np.radians(self.light_elevation)
        lx = np.cos(azimuth) * np.cos(elevation)
        ly = np.sin(azimuth) * np.cos(elevation)
        lz = np.sin(elevation)

        intensity = np.clip(nx * lx + ny * ly + nz * lz, 0.0, 1.0)
        return intensity * self.light_brightness

    @staticmethod
    def _normals(
        height: NDArray[np.float64],
        strength: float,
    ) -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
        """Surface normals of a height field from Sobel-like central differences."""
        padded = np.pad(height, 1, mode='edge')

        dx = (
            padded[:-2, 2:] - padded[:-2, :-2] +
            2 * (padded[1:-1, 2:] - padded[1:-1, :-2]) +
            padded[2:, 2:] - padded[2:, :-2]
        ) / 8.0

        dy = (
            padded[2:, :-2] - padded[:-2, :-2] +
            2 * (padded[2:, 1:-1] - padded[:-2, 1:-1]) +
            padded[2:, 2:] - padded[:-2, 2:]
        ) / 8.0

        dx = dx * strength
        dy = dy * strength

        # Normal = normalize([-dx, -dy, 1])
        dz = np.ones_like(dx)
        length = np.sqrt(dx * dx + dy * dy + dz * dz)
        return -dx / length, -dy / length, dz / length
