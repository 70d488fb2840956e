"""Noise modules."""

from .cache import Cache
from .combiners import Add, Blend, Max, Min, Multiply, Power, Select
from .curve import ControlPoint, Curve, Terrace
from .displace import Displace, Turbulence
from .fractal import MAX_OCTAVE, Billow, Perlin, RidgedMulti
from .generators import Checkerboard, Constant, Cylinders, Spheres
from .modifiers import Abs, Clamp, Exponent, Invert, ScaleBias
from .transformers import RotatePoint, ScalePoint, TranslatePoint
from .voronoi import Voronoi

__all__ = [
    "MAX_OCTAVE",
    # Generators
    "Constant",
    "Checkerboard",
    "Cylinders",
    "Spheres",
    "Perlin",
    "Billow",
    "RidgedMulti",
    "Voronoi",
    # Modifiers
    "Abs",
    "Invert",
    "Clamp",
    "Exponent",
    "ScaleBias",
    "ControlPoint",
    "Curve",
    "Terrace",
    # Transformers
    "RotatePoint",
    "ScalePoint",
    "TranslatePoint",
    "Displace",
    "Turbulence",
    # Combiners and selectors
    "Add",
    "Multiply",
    "Min",
    "Max",
    "Power",
    "Blend",
    "Select",
    "Cache",
]
