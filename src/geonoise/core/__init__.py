"""Noise primitives and the module base class."""

from .module import Evaluable, Module
from .noisegen import NoiseQuality, make_i32_range
from . import interp, noisegen

__all__ = ["Evaluable", "Module", "NoiseQuality", "make_i32_range", "interp", "noisegen"]
