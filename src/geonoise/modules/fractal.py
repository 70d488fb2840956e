"""Fractal generator modules built from octaves of gradient coherent noise.

Each octave samples gradient_coherent_noise3d() at a frequency that grows by
``lacunarity`` per octave, with the seed offset by the octave index so the
octaves are uncorrelated.
"""

from __future__ import annotations

import logging
import numbers

from ..core.interp import powf
from ..core.module import Module
from ..core.noisegen import NoiseQuality, gradient_coherent_noise3d, make_i32_range

logger = logging.getLogger(__name__)

DEFAULT_FREQUENCY = 1.0
DEFAULT_LACUNARITY = 2.0
DEFAULT_OCTAVE_COUNT = 6
DEFAULT_PERSISTENCE = 0.5
DEFAULT_QUALITY = NoiseQuality.STANDARD
DEFAULT_SEED = 0

MAX_OCTAVE = 30

# Ridged multifractal shaping; fixed rather than user-adjustable.
RIDGED_OFFSET = 1.0
RIDGED_GAIN = 2.0
RIDGED_EXPONENT = 1.0


def check_octave_count(octave_count: int, name: str = "octave_count") -> int:
    """Validate an octave count.

    Raises:
        ValueError: If octave_count is not an integer or is outside
            [1, MAX_OCTAVE]
    """
    if isinstance(octave_count, bool) or not isinstance(octave_count, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {octave_count!r}")
    if octave_count < 1 or octave_count > MAX_OCTAVE:
        raise ValueError(f"{name} must be in the range [1, {MAX_OCTAVE}], got {octave_count}")
    return int(octave_count)


class FractalModule(Module):
    """Shared parameters of the octave-summing generators.

    Attributes:
        frequency: Frequency of the first octave
        lacunarity: Frequency multiplier between successive octaves. For best
            results use a value between 1.5 and 3.5.
        octave_count: Number of octaves, 1 to 30. More octaves add detail at
            the cost of evaluation time.
        quality: Interpolation kernel of the underlying coherent noise
        seed: Seed of the first octave
    """

    def __init__(
        self,
        frequency: float = DEFAULT_FREQUENCY,
        lacunarity: float = DEFAULT_LACUNARITY,
        octave_count: int = DEFAULT_OCTAVE_COUNT,
        quality: NoiseQuality = DEFAULT_QUALITY,
        seed: int = DEFAULT_SEED,
    ) -> None:
        self.frequency = frequency
        self.lacunarity = lacunarity
        self.octave_count = octave_count
        self.quality = quality
        self.seed = seed

    @property
    def octave_count(self) -> int:
        return self._octave_count

    @octave_count.setter
    def octave_count(self, octave_count: int) -> None:
        self._octave_count = check_octave_count(octave_count)

    def _octave_coordinates(self, x: float, y: float, z: float):
        """Yield (octave, nx, ny, nz) with coordinates folded for hashing."""
        x *= self.frequency
        y *= self.frequency
        z *= self.frequency
        for octave in range(self._octave_count):
            yield octave, make_i32_range(x), make_i32_range(y), make_i32_range(z)
            x *= self.lacunarity
            y *= self.lacunarity
            z *= self.lacunarity

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(frequency={self.frequency!r}, lacunarity={self.lacunarity!r}, "
            f"octave_count={self._octave_count!r}, seed={self.seed!r})"
        )


class Perlin(FractalModule):
    """Outputs 3D Perlin noise.

    Perlin noise is the sum of several coherent-noise functions of
    ever-increasing frequency and ever-decreasing amplitude. A small change
    in the input produces a small change in the output, while a large change
    produces a random one.

    Output usually lies in [-1, 1], but this is not guaranteed.

    Attributes:
        persistence: Amplitude multiplier between successive octaves. The
            first octave has amplitude 1.0; larger values give rougher noise.
    """

    def __init__(
        self,
        frequency: float = DEFAULT_FREQUENCY,
        lacunarity: float = DEFAULT_LACUNARITY,
        octave_count: int = DEFAULT_OCTAVE_COUNT,
        persistence: float = DEFAULT_PERSISTENCE,
        quality: NoiseQuality = DEFAULT_QUALITY,
        seed: int = DEFAULT_SEED,
    ) -> None:
        super().__init__(frequency, lacunarity, octave_count, quality, seed)
        self.persistence = persistence

    def evaluate(self, x: float, y: float, z: float) -> float:
        value = 0.0
        amplitude = 1.0
        for octave, nx, ny, nz in self._octave_coordinates(x, y, z):
            signal = gradient_coherent_noise3d(nx, ny, nz, self.seed + octave, self.quality)
            value += signal * amplitude
            amplitude *= self.persistence
        return value


class Billow(Perlin):
    """Outputs "billowy" noise suitable for clouds and rocks.

    Same as Perlin except that each octave's signal is folded with
    ``2 * |signal| - 1`` before weighting, and 0.5 is added to the sum.
    """

    def evaluate(self, x: float, y: float, z: float) -> float:
        value = 0.0
        amplitude = 1.0
        for octave, nx, ny, nz in self._octave_coordinates(x, y, z):
            signal = gradient_coherent_noise3d(nx, ny, nz, self.seed + octave, self.quality)
            signal = 2.0 * abs(signal) - 1.0
            value += signal * amplitude
            amplitude *= self.persistence
        return value + 0.5


class RidgedMulti(FractalModule):
    """Outputs ridged-multifractal noise, suited to mountain ranges.

    Each octave is the absolute value of the coherent noise inverted around
    an offset and squared, so zero crossings become sharp ridges. The signal
    of one octave weights the next, which concentrates detail on the ridges.
    Octave amplitudes come from a spectral weight table derived from the
    lacunarity.

    Output usually lies in [-1, 1].
    """

    @property
    def lacunarity(self) -> float:
        return self._lacunarity

    @lacunarity.setter
    def lacunarity(self, lacunarity: float) -> None:
        self._lacunarity = lacunarity
        self._spectral_weights = calc_spectral_weights(lacunarity)
        logger.debug("Recomputed ridged spectral weights for lacunarity %s", lacunarity)

    @property
    def spectral_weights(self) -> tuple[float, ...]:
        """Per-octave amplitudes, ``frequency_i ** -1`` for each octave i."""
        return self._spectral_weights

    def evaluate(self, x: float, y: float, z: float) -> float:
        value = 0.0
        weight = 1.0
        for octave, nx, ny, nz in self._octave_coordinates(x, y, z):
            seed = (self.seed + octave) & 0x7FFFFFFF
            signal = gradient_coherent_noise3d(nx, ny, nz, seed, self.quality)

            signal = RIDGED_OFFSET - abs(signal)
            signal *= signal
            signal *= weight

            weight = signal * RIDGED_GAIN
            if weight > 1.0:
                weight = 1.0
            elif weight < 0.0:
                weight = 0.0

            value += signal * self._spectral_weights[octave]

        return (value * 1.25) - 1.0


def calc_spectral_weights(lacunarity: float, exponent: float = RIDGED_EXPONENT) -> tuple[float, ...]:
    """Spectral weights for MAX_OCTAVE octaves of ridged noise."""
    weights = []
    frequency = 1.0
    for _ in range(MAX_OCTAVE):
        weights.append(powf(frequency, -exponent))
        frequency *= lacunarity
    return tuple(weights)
