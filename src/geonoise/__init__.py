"""Geonoise - coherent noise modules for procedural terrain and textures."""

from .core import Evaluable, Module, NoiseQuality, make_i32_range
from .modules import (
    Abs,
    Add,
    Billow,
    Blend,
    Cache,
    Checkerboard,
    Clamp,
    Constant,
    ControlPoint,
    Curve,
    Cylinders,
    Displace,
    Exponent,
    Invert,
    Max,
    Min,
    Multiply,
    Perlin,
    Power,
    RidgedMulti,
    RotatePoint,
    ScaleBias,
    ScalePoint,
    Select,
    Spheres,
    Terrace,
    TranslatePoint,
    Turbulence,
    Voronoi,
)

__version__ = "0.1.0"

__all__ = [
    "Evaluable",
    "Module",
    "NoiseQuality",
    "make_i32_range",
    "Abs",
    "Add",
    "Billow",
    "Blend",
    "Cache",
    "Checkerboard",
    "Clamp",
    "Constant",
    "ControlPoint",
    "Curve",
    "Cylinders",
    "Displace",
    "Exponent",
    "Invert",
    "Max",
    "Min",
    "Multiply",
    "Perlin",
    "Power",
    "RidgedMulti",
    "RotatePoint",
    "ScaleBias",
    "ScalePoint",
    "Select",
    "Spheres",
    "Terrace",
    "TranslatePoint",
    "Turbulence",
    "Voronoi",
]
