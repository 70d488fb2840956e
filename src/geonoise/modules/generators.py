"""Generator modules that need no noise: constant values and simple shapes."""

import math
from dataclasses import dataclass

from ..core.module import Module
from ..core.noisegen import make_i32_range

DEFAULT_CONSTANT_VALUE = 0.0
DEFAULT_CYLINDERS_FREQUENCY = 1.0
DEFAULT_SPHERES_FREQUENCY = 1.0


@dataclass
class Constant(Module):
    """Outputs the same value everywhere.

    Mostly useful as a source for combiners and selectors.
    """

    value: float = DEFAULT_CONSTANT_VALUE

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.value


@dataclass
class Checkerboard(Module):
    """Outputs a checkerboard of unit cubes alternating between -1.0 and +1.0."""

    def evaluate(self, x: float, y: float, z: float) -> float:
        ix = math.floor(make_i32_range(x))
        iy = math.floor(make_i32_range(y))
        iz = math.floor(make_i32_range(z))
        if (ix & 1) ^ (iy & 1) ^ (iz & 1):
            return -1.0
        return 1.0


def _ring_value(dist_from_center: float) -> float:
    dist_from_smaller = dist_from_center - math.floor(dist_from_center)
    dist_from_larger = 1.0 - dist_from_smaller
    nearest_dist = min(dist_from_smaller, dist_from_larger)
    return 1.0 - (nearest_dist * 4.0)


@dataclass
class Cylinders(Module):
    """Outputs concentric cylinders centered on the y axis.

    The value is +1.0 on each cylinder surface and falls to -1.0 halfway
    between two neighbouring cylinders. The y coordinate is ignored.

    Attributes:
        frequency: Number of cylinders per unit of distance
    """

    frequency: float = DEFAULT_CYLINDERS_FREQUENCY

    def evaluate(self, x: float, y: float, z: float) -> float:
        x *= self.frequency
        z *= self.frequency
        return _ring_value(math.sqrt(x * x + z * z))


@dataclass
class Spheres(Module):
    """Outputs concentric spheres centered on the origin.

    Attributes:
        frequency: Number of spheres per unit of distance
    """

    frequency: float = DEFAULT_SPHERES_FREQUENCY

    def evaluate(self, x: float, y: float, z: float) -> float:
        x *= self.frequency
        y *= self.frequency
        z *= self.frequency
        return _ring_value(math.sqrt(x * x + y * y + z * z))
