"""Transformer modules: move, scale or rotate the input coordinate."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..core.module import Evaluable, Module

DEFAULT_ROTATE_X = 0.0
DEFAULT_ROTATE_Y = 0.0
DEFAULT_ROTATE_Z = 0.0

DEFAULT_SCALE_POINT = 1.0
DEFAULT_TRANSLATE_POINT = 0.0


def rotation_matrix(x_angle: float, y_angle: float, z_angle: float) -> tuple[tuple[float, ...], ...]:
    """Build the 3x3 rotation matrix for angles given in degrees.

    Returns:
        Row-major matrix as nested tuples of floats
    """
    x_sin, x_cos = np.sin(np.radians(x_angle)), np.cos(np.radians(x_angle))
    y_sin, y_cos = np.sin(np.radians(y_angle)), np.cos(np.radians(y_angle))
    z_sin, z_cos = np.sin(np.radians(z_angle)), np.cos(np.radians(z_angle))

    matrix = np.array([
        [y_sin * x_sin * z_sin + y_cos * z_cos, x_cos * z_sin, y_sin * z_cos - y_cos * x_sin * z_sin],
        [y_sin * x_sin * z_cos - y_cos * z_sin, x_cos * z_cos, -y_cos * x_sin * z_cos - y_sin * z_sin],
        [-y_sin * x_cos, x_sin, y_cos * x_cos],
    ], dtype=np.float64)

    return tuple(tuple(row) for row in matrix.tolist())


class RotatePoint(Module):
    """Rotates the input coordinate around the origin before sampling the source.

    The rotation is given as three angles in degrees. The rotation matrix is
    rebuilt whenever an angle changes, and only the matrix is used during
    evaluation.
    """

    def __init__(
        self,
        source: Evaluable,
        x_angle: float = DEFAULT_ROTATE_X,
        y_angle: float = DEFAULT_ROTATE_Y,
        z_angle: float = DEFAULT_ROTATE_Z,
    ) -> None:
        self.source = source
        self.set_angles(x_angle, y_angle, z_angle)

    @property
    def angles(self) -> tuple[float, float, float]:
        return self._angles

    @property
    def matrix(self) -> tuple[tuple[float, ...], ...]:
        """Derived rotation matrix; read-only."""
        return self._matrix

    @property
    def x_angle(self) -> float:
        return self._angles[0]

    @x_angle.setter
    def x_angle(self, x_angle: float) -> None:
        self.set_angles(x_angle, self._angles[1], self._angles[2])

    @property
    def y_angle(self) -> float:
        return self._angles[1]

    @y_angle.setter
    def y_angle(self, y_angle: float) -> None:
        self.set_angles(self._angles[0], y_angle, self._angles[2])

    @property
    def z_angle(self) -> float:
        return self._angles[2]

    @z_angle.setter
    def z_angle(self, z_angle: float) -> None:
        self.set_angles(self._angles[0], self._angles[1], z_angle)

    def set_angles(self, x_angle: float, y_angle: float, z_angle: float) -> None:
        """Set all three rotation angles, in degrees."""
        self._angles = (x_angle, y_angle, z_angle)
        self._matrix = rotation_matrix(x_angle, y_angle, z_angle)

    def sources(self) -> list[Evaluable]:
        return [self.source]

    def evaluate(self, x: float, y: float, z: float) -> float:
        (m00, m01, m02), (m10, m11, m12), (m20, m21, m22) = self._matrix
        nx = m00 * x + m01 * y + m02 * z
        ny = m10 * x + m11 * y + m12 * z
        nz = m20 * x + m21 * y + m22 * z
        return self.source.evaluate(nx, ny, nz)

    def __repr__(self) -> str:
        return f"RotatePoint(angles={self._angles!r})"


@dataclass
class ScalePoint(Module):
    """Scales the input coordinate per axis before sampling the source.

    Attributes:
        source: Source module
        x_scale: Multiplier for the x coordinate
        y_scale: Multiplier for the y coordinate
        z_scale: Multiplier for the z coordinate
    """

    source: Evaluable
    x_scale: float = DEFAULT_SCALE_POINT
    y_scale: float = DEFAULT_SCALE_POINT
    z_scale: float = DEFAULT_SCALE_POINT

    def set_scale(self, scale: float) -> None:
        """Apply the same scale to all three axes."""
        self.x_scale = self.y_scale = self.z_scale = scale

    def set_xyz_scale(self, x_scale: float, y_scale: float, z_scale: float) -> None:
        self.x_scale = x_scale
        self.y_scale = y_scale
        self.z_scale = z_scale

    def sources(self) -> list[Evaluable]:
        return [self.source]

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.source.evaluate(x * self.x_scale, y * self.y_scale, z * self.z_scale)


@dataclass
class TranslatePoint(Module):
    """Moves the input coordinate before sampling the source.

    Attributes:
        source: Source module
        x_translation: Offset added to the x coordinate
        y_translation: Offset added to the y coordinate
        z_translation: Offset added to the z coordinate
    """

    source: Evaluable
    x_translation: float = DEFAULT_TRANSLATE_POINT
    y_translation: float = DEFAULT_TRANSLATE_POINT
    z_translation: float = DEFAULT_TRANSLATE_POINT

    def set_translation(self, translation: float) -> None:
        """Apply the same offset to all three axes."""
        self.x_translation = self.y_translation = self.z_translation = translation

    def set_xyz_translation(self, x_translation: float, y_translation: float, z_translation: float) -> None:
        self.x_translation = x_translation
        self.y_translation = y_translation
        self.z_translation = z_translation

    def sources(self) -> list[Evaluable]:
        return [self.source]

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.source.evaluate(x + self.x_translation, y + self.y_translation, z + self.z_translation)
