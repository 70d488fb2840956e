"""Combiner and selector modules: merge the outputs of several source modules."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.interp import linear_interp, powf, scurve3
from ..core.module import Evaluable, Module
from .modifiers import check_bounds

DEFAULT_SELECT_EDGE_FALLOFF = 0.0
DEFAULT_SELECT_LOWER_BOUND = -1.0
DEFAULT_SELECT_UPPER_BOUND = 1.0


@dataclass
class _BinaryModule(Module):
    module1: Evaluable
    module2: Evaluable

    def sources(self) -> list[Evaluable]:
        return [self.module1, self.module2]


class Add(_BinaryModule):
    """Outputs the sum of the two source modules."""

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.module1.evaluate(x, y, z) + self.module2.evaluate(x, y, z)


class Multiply(_BinaryModule):
    """Outputs the product of the two source modules."""

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.module1.evaluate(x, y, z) * self.module2.evaluate(x, y, z)


class Min(_BinaryModule):
    """Outputs the smaller of the two source values."""

    def evaluate(self, x: float, y: float, z: float) -> float:
        return min(self.module1.evaluate(x, y, z), self.module2.evaluate(x, y, z))


class Max(_BinaryModule):
    """Outputs the larger of the two source values."""

    def evaluate(self, x: float, y: float, z: float) -> float:
        return max(self.module1.evaluate(x, y, z), self.module2.evaluate(x, y, z))


class Power(_BinaryModule):
    """Raises the value of module1 to the power of the value of module2."""

    def evaluate(self, x: float, y: float, z: float) -> float:
        return powf(self.module1.evaluate(x, y, z), self.module2.evaluate(x, y, z))


@dataclass
class Blend(Module):
    """Blends module1 and module2, weighted by a control module.

    A control value of -1.0 gives module1, +1.0 gives module2, values in
    between interpolate linearly.
    """

    module1: Evaluable
    module2: Evaluable
    control: Evaluable

    def sources(self) -> list[Evaluable]:
        return [self.module1, self.module2, self.control]

    def evaluate(self, x: float, y: float, z: float) -> float:
        v0 = self.module1.evaluate(x, y, z)
        v1 = self.module2.evaluate(x, y, z)
        alpha = (self.control.evaluate(x, y, z) + 1.0) / 2.0
        return linear_interp(v0, v1, alpha)


class Select(Module):
    """Chooses between module1 and module2 using a control module.

    Where the control value lies within [lower_bound, upper_bound] the
    output of module2 is used, elsewhere the output of module1.

    A positive edge_falloff smooths the transitions: within
    ``edge_falloff`` of either bound the two sources are blended with an
    S-curve instead of switching abruptly. The falloff is limited to half the
    distance between the bounds so the two transition bands never overlap.
    """

    def __init__(
        self,
        module1: Evaluable,
        module2: Evaluable,
        control: Evaluable,
        lower_bound: float = DEFAULT_SELECT_LOWER_BOUND,
        upper_bound: float = DEFAULT_SELECT_UPPER_BOUND,
        edge_falloff: float = DEFAULT_SELECT_EDGE_FALLOFF,
    ) -> None:
        self.module1 = module1
        self.module2 = module2
        self.control = control
        self._edge_falloff = 0.0
        self.set_bounds(lower_bound, upper_bound)
        self.edge_falloff = edge_falloff

    @property
    def lower_bound(self) -> float:
        return self._lower_bound

    @property
    def upper_bound(self) -> float:
        return self._upper_bound

    @property
    def edge_falloff(self) -> float:
        return self._edge_falloff

    @edge_falloff.setter
    def edge_falloff(self, edge_falloff: float) -> None:
        self._edge_falloff = edge_falloff
        self._clamp_falloff()

    def set_bounds(self, lower_bound: float, upper_bound: float) -> None:
        """Set the selection range.

        Raises:
            ValueError: If lower_bound is larger than upper_bound
        """
        check_bounds(lower_bound, upper_bound)
        self._lower_bound = lower_bound
        self._upper_bound = upper_bound
        self._clamp_falloff()

    def _clamp_falloff(self) -> None:
        half_size = (self._upper_bound - self._lower_bound) / 2.0
        if half_size < self._edge_falloff:
            self._edge_falloff = half_size

    def sources(self) -> list[Evaluable]:
        return [self.module1, self.module2, self.control]

    def evaluate(self, x: float, y: float, z: float) -> float:
        control_value = self.control.evaluate(x, y, z)
        lower = self._lower_bound
        upper = self._upper_bound
        falloff = self._edge_falloff

        if falloff <= 0.0:
            if control_value < lower or control_value > upper:
                return self.module1.evaluate(x, y, z)
            return self.module2.evaluate(x, y, z)

        if control_value < lower - falloff:
            return self.module1.evaluate(x, y, z)

        if control_value < lower + falloff:
            # Lower transition band: module1 fading into module2.
            lower_curve = lower - falloff
            upper_curve = lower + falloff
            alpha = scurve3((control_value - lower_curve) / (upper_curve - lower_curve))
            return linear_interp(self.module1.evaluate(x, y, z), self.module2.evaluate(x, y, z), alpha)

        if control_value < upper - falloff:
            return self.module2.evaluate(x, y, z)

        if control_value < upper + falloff:
            # Upper transition band: module2 fading into module1.
            lower_curve = upper - falloff
            upper_curve = upper + falloff
            alpha = scurve3((control_value - lower_curve) / (upper_curve - lower_curve))
            return linear_interp(self.module2.evaluate(x, y, z), self.module1.evaluate(x, y, z), alpha)

        return self.module1.evaluate(x, y, z)

    def __repr__(self) -> str:
        return (
            f"Select(lower_bound={self._lower_bound!r}, upper_bound={self._upper_bound!r}, "
            f"edge_falloff={self._edge_falloff!r})"
        )
