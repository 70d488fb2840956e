"""Noise map building and rendering."""

from .noise_map import (
    NoiseMap,
    NoiseMapBuilder,
    NoiseMapBuilderCylinder,
    NoiseMapBuilderPlane,
    NoiseMapBuilderSphere,
    lat_lon_to_xyz,
)
from .renderer import GradientColor, ImageRenderer

__all__ = [
    "NoiseMap",
    "NoiseMapBuilder",
    "NoiseMapBuilderPlane",
    "NoiseMapBuilderCylinder",
    "NoiseMapBuilderSphere",
    "lat_lon_to_xyz",
    "GradientColor",
    "ImageRenderer",
]
