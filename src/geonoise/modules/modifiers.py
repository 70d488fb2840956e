"""Modifier modules: reshape the output value of a single source module."""

from dataclasses import dataclass

from ..core.interp import powf
from ..core.module import Evaluable, Module

DEFAULT_CLAMP_LOWER_BOUND = -1.0
DEFAULT_CLAMP_UPPER_BOUND = 1.0
DEFAULT_EXPONENT = 1.0
DEFAULT_SCALE = 1.0
DEFAULT_BIAS = 0.0


def check_bounds(lower_bound: float, upper_bound: float) -> None:
    """Raise ValueError if lower_bound is larger than upper_bound."""
    if lower_bound > upper_bound:
        raise ValueError(
            f"Lower bound {lower_bound} is larger than upper bound {upper_bound}"
        )


@dataclass
class Abs(Module):
    """Outputs the absolute value of the source module."""

    source: Evaluable

    def sources(self) -> list[Evaluable]:
        return [self.source]

    def evaluate(self, x: float, y: float, z: float) -> float:
        return abs(self.source.evaluate(x, y, z))


@dataclass
class Invert(Module):
    """Outputs the negated value of the source module."""

    source: Evaluable

    def sources(self) -> list[Evaluable]:
        return [self.source]

    def evaluate(self, x: float, y: float, z: float) -> float:
        return -self.source.evaluate(x, y, z)


class Clamp(Module):
    """Clamps the output of the source module to [lower_bound, upper_bound].

    Values below the lower bound become the lower bound, values above the
    upper bound become the upper bound.
    """

    def __init__(
        self,
        source: Evaluable,
        lower_bound: float = DEFAULT_CLAMP_LOWER_BOUND,
        upper_bound: float = DEFAULT_CLAMP_UPPER_BOUND,
    ) -> None:
        self.source = source
        self.set_bounds(lower_bound, upper_bound)

    @property
    def lower_bound(self) -> float:
        return self._lower_bound

    @property
    def upper_bound(self) -> float:
        return self._upper_bound

    def set_bounds(self, lower_bound: float, upper_bound: float) -> None:
        """Set both clamping bounds.

        Raises:
            ValueError: If lower_bound is larger than upper_bound
        """
        check_bounds(lower_bound, upper_bound)
        self._lower_bound = lower_bound
        self._upper_bound = upper_bound

    def sources(self) -> list[Evaluable]:
        return [self.source]

    def evaluate(self, x: float, y: float, z: float) -> float:
        value = self.source.evaluate(x, y, z)
        if value < self._lower_bound:
            return self._lower_bound
        if value > self._upper_bound:
            return self._upper_bound
        return value

    def __repr__(self) -> str:
        return f"Clamp(lower_bound={self._lower_bound!r}, upper_bound={self._upper_bound!r})"


@dataclass
class Exponent(Module):
    """Maps the output of the source module onto an exponential curve.

    The source value is assumed to lie in [-1, 1]. It is normalized to
    [0, 1], raised to ``exponent`` and mapped back to [-1, 1], so the range
    ends stay fixed while the middle bends.

    Attributes:
        source: Source module
        exponent: Exponent applied to the normalized value
    """

    source: Evaluable
    exponent: float = DEFAULT_EXPONENT

    def sources(self) -> list[Evaluable]:
        return [self.source]

    def evaluate(self, x: float, y: float, z: float) -> float:
        value = self.source.evaluate(x, y, z)
        return powf(abs((value + 1.0) / 2.0), self.exponent) * 2.0 - 1.0


@dataclass
class ScaleBias(Module):
    """Outputs ``source * scale + bias``.

    Attributes:
        source: Source module
        scale: Multiplier applied to the source value
        bias: Offset added after scaling
    """

    source: Evaluable
    scale: float = DEFAULT_SCALE
    bias: float = DEFAULT_BIAS

    def sources(self) -> list[Evaluable]:
        return [self.source]

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.source.evaluate(x, y, z) * self.scale + self.bias
