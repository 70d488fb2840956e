"""Domain-warping modules: Displace and Turbulence."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.module import Evaluable, Module
from .fractal import DEFAULT_FREQUENCY, DEFAULT_SEED, Perlin

DEFAULT_TURBULENCE_FREQUENCY = DEFAULT_FREQUENCY
DEFAULT_TURBULENCE_POWER = 1.0
DEFAULT_TURBULENCE_ROUGHNESS = 3
DEFAULT_TURBULENCE_SEED = DEFAULT_SEED

# Gradient noise is zero on integer lattice points. Sampling each distortion
# field at its own fractional offset keeps the three axes from hitting zero
# together.
X_DISTORT_OFFSET = (12414.0 / 65536.0, 65124.0 / 65536.0, 31337.0 / 65536.0)
Y_DISTORT_OFFSET = (26519.0 / 65536.0, 18128.0 / 65536.0, 60493.0 / 65536.0)
Z_DISTORT_OFFSET = (53820.0 / 65536.0, 11213.0 / 65536.0, 44845.0 / 65536.0)


@dataclass
class Displace(Module):
    """Samples the source at a coordinate displaced by three other modules.

    Each displacement module is evaluated at the original coordinate and its
    output is added to the matching axis before the source is sampled.

    Attributes:
        source: Module sampled at the displaced coordinate
        x_displace: Offset for the x coordinate
        y_displace: Offset for the y coordinate
        z_displace: Offset for the z coordinate
    """

    source: Evaluable
    x_displace: Evaluable
    y_displace: Evaluable
    z_displace: Evaluable

    def sources(self) -> list[Evaluable]:
        return [self.source, self.x_displace, self.y_displace, self.z_displace]

    def evaluate(self, x: float, y: float, z: float) -> float:
        x_displaced = x + self.x_displace.evaluate(x, y, z)
        y_displaced = y + self.y_displace.evaluate(x, y, z)
        z_displaced = z + self.z_displace.evaluate(x, y, z)
        return self.source.evaluate(x_displaced, y_displaced, z_displaced)


class Turbulence(Module):
    """Randomly displaces the input coordinate before sampling the source.

    The displacement comes from three internal Perlin modules, one per axis,
    seeded with ``seed``, ``seed + 1`` and ``seed + 2``.

    Attributes:
        source: Module sampled at the distorted coordinate
        power: Scale of the displacement
        frequency: Frequency of the distortion fields
        roughness: Octave count of the distortion fields, 1 to 30
        seed: Seed of the x distortion field
    """

    def __init__(
        self,
        source: Evaluable,
        frequency: float = DEFAULT_TURBULENCE_FREQUENCY,
        power: float = DEFAULT_TURBULENCE_POWER,
        roughness: int = DEFAULT_TURBULENCE_ROUGHNESS,
        seed: int = DEFAULT_TURBULENCE_SEED,
    ) -> None:
        self.source = source
        self.power = power
        self._x_distort = Perlin()
        self._y_distort = Perlin()
        self._z_distort = Perlin()
        self.frequency = frequency
        self.roughness = roughness
        self.seed = seed

    @property
    def distortion_modules(self) -> tuple[Perlin, Perlin, Perlin]:
        """The internal x, y and z distortion fields."""
        return self._x_distort, self._y_distort, self._z_distort

    @property
    def frequency(self) -> float:
        return self._x_distort.frequency

    @frequency.setter
    def frequency(self, frequency: float) -> None:
        for distort in self.distortion_modules:
            distort.frequency = frequency

    @property
    def roughness(self) -> int:
        return self._x_distort.octave_count

    @roughness.setter
    def roughness(self, roughness: int) -> None:
        for distort in self.distortion_modules:
            distort.octave_count = roughness

    @property
    def seed(self) -> int:
        return self._x_distort.seed

    @seed.setter
    def seed(self, seed: int) -> None:
        self._x_distort.seed = seed
        self._y_distort.seed = seed + 1
        self._z_distort.seed = seed + 2

    def sources(self) -> list[Evaluable]:
        return [self.source]

    def evaluate(self, x: float, y: float, z: float) -> float:
        x0, y0, z0 = X_DISTORT_OFFSET
        x1, y1, z1 = Y_DISTORT_OFFSET
        x2, y2, z2 = Z_DISTORT_OFFSET

        x_distorted = x + self._x_distort.evaluate(x + x0, y + y0, z + z0) * self.power
        y_distorted = y + self._y_distort.evaluate(x + x1, y + y1, z + z1) * self.power
        z_distorted = z + self._z_distort.evaluate(x + x2, y + y2, z + z2) * self.power

        return self.source.evaluate(x_distorted, y_distorted, z_distorted)

    def __repr__(self) -> str:
        return (
            f"Turbulence(frequency={self.frequency!r}, power={self.power!r}, "
            f"roughness={self.roughness!r}, seed={self.seed!r})"
        )
