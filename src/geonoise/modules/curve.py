"""Remapping modules driven by control points: Curve and Terrace."""

from __future__ import annotations

import bisect
import logging
import math
from typing import NamedTuple

from ..core.interp import clamp, cubic_interp, linear_interp
from ..core.module import Evaluable, Module

logger = logging.getLogger(__name__)

CURVE_MIN_CONTROL_POINTS = 4
TERRACE_MIN_CONTROL_POINTS = 2


class ControlPoint(NamedTuple):
    """Maps an input value of the source module onto an output value."""

    input_value: float
    output_value: float


class Curve(Module):
    """Maps the output of the source module onto a cubic spline.

    The spline passes through the control points added with
    add_control_point(). Between control points the value is interpolated
    with cubic_interp(); outside the range of control points the output of
    the nearest end point is returned.

    At least four control points are needed before the curve is evaluated.

    Example:
        curve = Curve(Perlin())
        curve.add_control_point(-1.0, -1.0)
        curve.add_control_point(-0.2, 0.1)
        curve.add_control_point(0.4, 0.3)
        curve.add_control_point(1.0, 1.0)
    """

    def __init__(self, source: Evaluable, control_points: list[tuple[float, float]] | None = None) -> None:
        self.source = source
        self._control_points: list[ControlPoint] = []
        for input_value, output_value in control_points or ():
            self.add_control_point(input_value, output_value)

    @property
    def control_points(self) -> tuple[ControlPoint, ...]:
        """Control points sorted by input value."""
        return tuple(self._control_points)

    def add_control_point(self, input_value: float, output_value: float) -> None:
        """Add a control point, keeping the points sorted by input value.

        Raises:
            ValueError: If either value is NaN, or a control point with the
                same input value already exists
        """
        if math.isnan(input_value) or math.isnan(output_value):
            raise ValueError("Control point input_value and output_value must not be NaN")

        index = bisect.bisect_left(self._control_points, input_value, key=lambda p: p.input_value)
        if index < len(self._control_points) and self._control_points[index].input_value == input_value:
            raise ValueError(f"Control point with input value {input_value} already exists")
        self._control_points.insert(index, ControlPoint(input_value, output_value))

    def clear_control_points(self) -> None:
        self._control_points.clear()

    def sources(self) -> list[Evaluable]:
        return [self.source]

    def evaluate(self, x: float, y: float, z: float) -> float:
        points = self._control_points
        if len(points) < CURVE_MIN_CONTROL_POINTS:
            raise RuntimeError(
                f"Curve needs at least {CURVE_MIN_CONTROL_POINTS} control points, has {len(points)}"
            )

        source_value = self.source.evaluate(x, y, z)
        if math.isnan(source_value):
            return math.nan

        # Index of the first control point with an input value larger than
        # the source value.
        index_pos = bisect.bisect_right(points, source_value, key=lambda p: p.input_value)

        last = len(points) - 1
        index0 = clamp(index_pos - 2, 0, last)
        index1 = clamp(index_pos - 1, 0, last)
        index2 = clamp(index_pos, 0, last)
        index3 = clamp(index_pos + 1, 0, last)

        # Outside the control point range: use the nearest end point.
        if index1 == index2:
            return points[index1].output_value

        input0 = points[index1].input_value
        input1 = points[index2].input_value
        alpha = (source_value - input0) / (input1 - input0)

        return cubic_interp(
            points[index0].output_value,
            points[index1].output_value,
            points[index2].output_value,
            points[index3].output_value,
            alpha,
        )

    def __repr__(self) -> str:
        return f"Curve(control_points={len(self._control_points)})"


class Terrace(Module):
    """Maps the output of the source module onto a terrace-forming curve.

    Between two neighbouring control points the output rises slowly at first
    and steeply just before the upper point, which gives flat terraces with
    cliffs between them. With invert_terraces the shape is flipped: steep
    first, then flat.

    At least two control points are needed before the terrace is evaluated.
    make_control_points() creates evenly spaced points over [-1, 1].
    """

    def __init__(
        self,
        source: Evaluable,
        control_points: list[float] | None = None,
        invert_terraces: bool = False,
    ) -> None:
        self.source = source
        self.invert_terraces = invert_terraces
        self._control_points: list[float] = []
        for value in control_points or ():
            self.add_control_point(value)

    @property
    def control_points(self) -> tuple[float, ...]:
        """Control points in ascending order."""
        return tuple(self._control_points)

    def add_control_point(self, value: float) -> None:
        """Add a control point, keeping the points sorted.

        Raises:
            ValueError: If value is NaN or already a control point
        """
        if math.isnan(value):
            raise ValueError("Terrace control point must not be NaN")

        index = bisect.bisect_left(self._control_points, value)
        if index < len(self._control_points) and self._control_points[index] == value:
            raise ValueError(f"Control point with value {value} already exists")
        self._control_points.insert(index, value)

    def clear_control_points(self) -> None:
        self._control_points.clear()

    def make_control_points(self, count: int) -> None:
        """Replace the control points with ``count`` equally spaced terraces.

        The points span [-1, 1].

        Raises:
            ValueError: If count is less than 2
        """
        if count < 2:
            raise ValueError(f"The number of control points must be at least 2, got {count}")

        self._control_points.clear()
        terrace_step = 2.0 / (count - 1.0)
        value = -1.0
        for _ in range(count):
            self._control_points.append(value)
            value += terrace_step
        logger.debug("Generated %d terrace control points", count)

    def sources(self) -> list[Evaluable]:
        return [self.source]

    def evaluate(self, x: float, y: float, z: float) -> float:
        points = self._control_points
        if len(points) < TERRACE_MIN_CONTROL_POINTS:
            raise RuntimeError(
                f"Terrace needs at least {TERRACE_MIN_CONTROL_POINTS} control points, has {len(points)}"
            )

        source_value = self.source.evaluate(x, y, z)
        if math.isnan(source_value):
            return math.nan

        index_pos = bisect.bisect_right(points, source_value)

        last = len(points) - 1
        index0 = clamp(index_pos - 1, 0, last)
        index1 = clamp(index_pos, 0, last)

        if index0 == index1:
            return points[index1]

        value0 = points[index0]
        value1 = points[index1]
        alpha = (source_value - value0) / (value1 - value0)
        if self.invert_terraces:
            value0, value1 = value1, value0
            alpha = 1.0 - alpha

        # Squaring alpha flattens the start of each step.
        alpha *= alpha

        return linear_interp(value0, value1, alpha)

    def __repr__(self) -> str:
        return (
            f"Terrace(control_points={len(self._control_points)}, "
            f"invert_terraces={self.invert_terraces!r})"
        )
