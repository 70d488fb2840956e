"""Interpolation kernels shared by the noise primitives and modules."""

import numpy as np


def linear_interp(n0: float, n1: float, a: float) -> float:
    """Linear interpolation.

    Returns n0 when a is 0.0 and n1 when a is 1.0.
    """
    return ((1.0 - a) * n0) + (a * n1)


def cubic_interp(n0: float, n1: float, n2: float, n3: float, a: float) -> float:
    """Cubic interpolation between n1 and n2, shaped by n0 and n3.

    Args:
        n0: The value before n1
        n1: The first value
        n2: The second value
        n3: The value after n2
        a: Alpha value, 0.0 returns n1 and 1.0 returns n2

    Returns:
        The interpolated value
    """
    p = (n3 - n2) - (n0 - n1)
    q = (n0 - n1) - p
    r = n2 - n0
    s = n1
    return p * a * a * a + q * a * a + r * a + s


def scurve3(a: float) -> float:
    """Cubic S-curve: 3a^2 - 2a^3"""
    return a * a * (3.0 - 2.0 * a)


def scurve5(a: float) -> float:
    """Quintic S-curve: 6a^5 - 15a^4 + 10a^3"""
    a3 = a * a * a
    a4 = a3 * a
    a5 = a4 * a
    return (6.0 * a5) - (15.0 * a4) + (10.0 * a3)


def clamp(value, lower_bound, upper_bound):
    """Clamp a value to [lower_bound, upper_bound]."""
    if value < lower_bound:
        return lower_bound
    if value > upper_bound:
        return upper_bound
    return value


def powf(base: float, exponent: float) -> float:
    """Raise base to exponent with IEEE-754 semantics.

    Negative bases with fractional exponents give NaN and zero raised to a
    negative power gives infinity, where Python's ``**`` would return a
    complex number or raise.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.power(np.float64(base), np.float64(exponent)))
