"""Lattice noise primitives.

Every generator module draws its randomness from the functions in this
file. They operate on a 3D integer lattice: gradient noise dots a
pseudo-random unit vector at each lattice point with the offset to the
sample, value noise assigns a pseudo-random scalar to each lattice point.
The coherent variants interpolate the eight corners of the lattice cube
around the sample.

All functions are pure. The same inputs always produce bit-identical output,
which the fractal modules rely on when offsetting the seed per octave.
"""

import math
from enum import Enum

from .interp import linear_interp, scurve3, scurve5
from .vector_table import RANDOM_VECTORS

# Hashing constants for the lattice coordinates and the seed.
X_NOISE_GEN = 1619
Y_NOISE_GEN = 31337
Z_NOISE_GEN = 6971
SEED_NOISE_GEN = 1013
SHIFT_NOISE_GEN = 8

# Half of the 32-bit signed integer range; inputs are folded into +/- this.
I32_FOLD = 1073741824.0


class NoiseQuality(Enum):
    """Interpolation kernel used between lattice points.

    FAST interpolates the raw fractional offset linearly, STANDARD smooths
    it with a cubic S-curve and BEST with a quintic S-curve (continuous
    second derivative).
    """

    FAST = "fast"
    STANDARD = "standard"
    BEST = "best"


def _wrap_i32(n: int) -> int:
    """Wrap an arbitrary integer to a 32-bit signed integer."""
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def _lattice_floor(n: float) -> int:
    # Matches the truncating conversion used by the lattice hashing: 0.0 and
    # negative values both land in the cell below.
    return int(n) if n > 0.0 else int(n) - 1


def _smoothing(quality: NoiseQuality):
    if quality is NoiseQuality.FAST:
        return lambda a: a
    if quality is NoiseQuality.STANDARD:
        return scurve3
    if quality is NoiseQuality.BEST:
        return scurve5
    raise ValueError(f"Unknown noise quality: {quality!r}")


def make_i32_range(n: float) -> float:
    """Fold a float into the range usable as a 32-bit lattice coordinate.

    Values beyond +/- 2^30 are reflected back in so that lattice hashing
    never sees coordinates that would overflow. Values already in range are
    returned unchanged, which makes the function idempotent.

    Returns:
        The folded value, or NaN for NaN and infinite input
    """
    if math.isnan(n) or math.isinf(n):
        return math.nan
    if n > I32_FOLD:
        return (2.0 * math.fmod(n, I32_FOLD)) - I32_FOLD
    if n < -I32_FOLD:
        return (2.0 * math.fmod(n, I32_FOLD)) + I32_FOLD
    return n


def gradient_noise3d(fx: float, fy: float, fz: float, ix: int, iy: int, iz: int, seed: int) -> float:
    """Gradient noise contribution of a single lattice point.

    Args:
        fx, fy, fz: The sample coordinate
        ix, iy, iz: The lattice point
        seed: Noise seed

    Returns:
        Value roughly in [-1, 1]; exactly 0.0 when the sample is the lattice
        point itself
    """
    index = _wrap_i32(
        X_NOISE_GEN * ix + Y_NOISE_GEN * iy + Z_NOISE_GEN * iz + SEED_NOISE_GEN * seed
    )
    index ^= index >> SHIFT_NOISE_GEN
    index &= 0xFF

    gx, gy, gz = RANDOM_VECTORS[index]
    return ((gx * (fx - ix)) + (gy * (fy - iy)) + (gz * (fz - iz))) * 2.12


def gradient_coherent_noise3d(
    x: float,
    y: float,
    z: float,
    seed: int = 0,
    quality: NoiseQuality = NoiseQuality.STANDARD,
) -> float:
    """Gradient coherent noise at a point.

    The coordinates must already be folded with make_i32_range().
    """
    x0 = _lattice_floor(x)
    x1 = x0 + 1
    y0 = _lattice_floor(y)
    y1 = y0 + 1
    z0 = _lattice_floor(z)
    z1 = z0 + 1

    smooth = _smoothing(quality)
    xs = smooth(x - x0)
    ys = smooth(y - y0)
    zs = smooth(z - z0)

    n0 = gradient_noise3d(x, y, z, x0, y0, z0, seed)
    n1 = gradient_noise3d(x, y, z, x1, y0, z0, seed)
    ix0 = linear_interp(n0, n1, xs)
    n0 = gradient_noise3d(x, y, z, x0, y1, z0, seed)
    n1 = gradient_noise3d(x, y, z, x1, y1, z0, seed)
    ix1 = linear_interp(n0, n1, xs)
    iy0 = linear_interp(ix0, ix1, ys)

    n0 = gradient_noise3d(x, y, z, x0, y0, z1, seed)
    n1 = gradient_noise3d(x, y, z, x1, y0, z1, seed)
    ix0 = linear_interp(n0, n1, xs)
    n0 = gradient_noise3d(x, y, z, x0, y1, z1, seed)
    n1 = gradient_noise3d(x, y, z, x1, y1, z1, seed)
    ix1 = linear_interp(n0, n1, xs)
    iy1 = linear_interp(ix0, ix1, ys)

    return linear_interp(iy0, iy1, zs)


def int_value_noise3d(x: int, y: int, z: int, seed: int = 0) -> int:
    """Integer hash of a lattice point, in [0, 2^31)."""
    n = (X_NOISE_GEN * x + Y_NOISE_GEN * y + Z_NOISE_GEN * z + SEED_NOISE_GEN * seed) & 0x7FFFFFFF
    n = (n >> 13) ^ n
    return (n * (n * n * 60493 + 19990303) + 1376312589) & 0x7FFFFFFF


def value_noise3d(x: int, y: int, z: int, seed: int = 0) -> float:
    """Pseudo-random scalar for a lattice point, in (-1, 1]."""
    return 1.0 - (int_value_noise3d(x, y, z, seed) / I32_FOLD)


def value_coherent_noise3d(
    x: float,
    y: float,
    z: float,
    seed: int = 0,
    quality: NoiseQuality = NoiseQuality.STANDARD,
) -> float:
    """Value coherent noise at a point.

    Interpolates value_noise3d() between the corners of the lattice cube.
    """
    x0 = _lattice_floor(x)
    x1 = x0 + 1
    y0 = _lattice_floor(y)
    y1 = y0 + 1
    z0 = _lattice_floor(z)
    z1 = z0 + 1

    smooth = _smoothing(quality)
    xs = smooth(x - x0)
    ys = smooth(y - y0)
    zs = smooth(z - z0)

    n0 = value_noise3d(x0, y0, z0, seed)
    n1 = value_noise3d(x1, y0, z0, seed)
    ix0 = linear_interp(n0, n1, xs)
    n0 = value_noise3d(x0, y1, z0, seed)
    n1 = value_noise3d(x1, y1, z0, seed)
    ix1 = linear_interp(n0, n1, xs)
    iy0 = linear_interp(ix0, ix1, ys)

    n0 = value_noise3d(x0, y0, z1, seed)
    n1 = value_noise3d(x1, y0, z1, seed)
    ix0 = linear_interp(n0, n1, xs)
    n0 = value_noise3d(x0, y1, z1, seed)
    n1 = value_noise3d(x1, y1, z1, seed)
    ix1 = linear_interp(n0, n1, xs)
    iy1 = linear_interp(ix0, ix1, ys)

    return linear_interp(iy0, iy1, zs)
