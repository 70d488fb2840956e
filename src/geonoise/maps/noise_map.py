"""Noise maps: sample a module over a surface into a 2D array."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from ..core.interp import linear_interp
from ..core.module import Evaluable

logger = logging.getLogger(__name__)


@dataclass
class NoiseMap:
    """A 2D grid of noise values, indexed [row, column].

    Attributes:
        values: HxW float64 array of module outputs
    """

    values: NDArray[np.float64]

    @property
    def width(self) -> int:
        return int(self.values.shape[1])

    @property
    def height(self) -> int:
        return int(self.values.shape[0])

    @property
    def min(self) -> float:
        return float(self.values.min())

    @property
    def max(self) -> float:
        return float(self.values.max())

    def normalized(self, lower: float = -1.0, upper: float = 1.0) -> NDArray[np.float64]:
        """Map the values from [lower, upper] onto [0, 1], clipping the rest."""
        return np.clip((self.values - lower) / (upper - lower), 0.0, 1.0)


def _check_range(name: str, lower: float, upper: float) -> None:
    if lower >= upper:
        raise ValueError(f"{name} lower bound {lower} must be less than upper bound {upper}")


@dataclass
class NoiseMapBuilder(ABC):
    """Abstract base class for noise map builders.

    Subclasses map each cell of a width x height grid to a 3D coordinate on
    some surface and sample the module there.
    """

    module: Evaluable
    width: int = 256
    height: int = 256

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Noise map size must be positive, got {self.width}x{self.height}")

    @abstractmethod
    def sample(self, column: int, row: int) -> float:
        """Return the module value for one grid cell."""
        pass

    def build(self) -> NoiseMap:
        """Sample every cell of the grid.

        Returns:
            NoiseMap of shape (height, width)
        """
        logger.info("Building %s noise map %dx%d", type(self).__name__, self.width, self.height)
        values = np.empty((self.height, self.width), dtype=np.float64)
        for row in range(self.height):
            for column in range(self.width):
                values[row, column] = self.sample(column, row)
        noise_map = NoiseMap(values)
        logger.debug("Noise map range [%f, %f]", noise_map.min, noise_map.max)
        return noise_map


@dataclass
class NoiseMapBuilderPlane(NoiseMapBuilder):
    """Samples the module on the y = 0 plane.

    Attributes:
        bounds: (x_lower, x_upper, z_lower, z_upper) of the sampled area
        seamless: Blend opposite edges so the map tiles without seams
    """

    bounds: tuple[float, float, float, float] = (-1.0, 1.0, -1.0, 1.0)
    seamless: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        x_lower, x_upper, z_lower, z_upper = self.bounds
        _check_range("x", x_lower, x_upper)
        _check_range("z", z_lower, z_upper)

    def sample(self, column: int, row: int) -> float:
        x_lower, x_upper, z_lower, z_upper = self.bounds
        x_extent = x_upper - x_lower
        z_extent = z_upper - z_lower
        x = x_lower + column * (x_extent / self.width)
        z = z_lower + row * (z_extent / self.height)

        if not self.seamless:
            return self.module.evaluate(x, 0.0, z)

        sw = self.module.evaluate(x, 0.0, z)
        se = self.module.evaluate(x + x_extent, 0.0, z)
        nw = self.module.evaluate(x, 0.0, z + z_extent)
        ne = self.module.evaluate(x + x_extent, 0.0, z + z_extent)
        x_blend = 1.0 - ((x - x_lower) / x_extent)
        z_blend = 1.0 - ((z - z_lower) / z_extent)
        z0 = linear_interp(sw, se, x_blend)
        z1 = linear_interp(nw, ne, x_blend)
        return linear_interp(z0, z1, z_blend)


@dataclass
class NoiseMapBuilderCylinder(NoiseMapBuilder):
    """Samples the module on the surface of a unit cylinder around the y axis.

    Attributes:
        angle_bounds: (lower, upper) angle around the cylinder, in degrees
        height_bounds: (lower, upper) height along the y axis
    """

    angle_bounds: tuple[float, float] = (-180.0, 180.0)
    height_bounds: tuple[float, float] = (-1.0, 1.0)

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_range("angle", *self.angle_bounds)
        _check_range("height", *self.height_bounds)

    def sample(self, column: int, row: int) -> float:
        angle_lower, angle_upper = self.angle_bounds
        height_lower, height_upper = self.height_bounds
        angle = angle_lower + column * ((angle_upper - angle_lower) / self.width)
        height = height_lower + row * ((height_upper - height_lower) / self.height)

        radians = math.radians(angle)
        return self.module.evaluate(math.cos(radians), height, math.sin(radians))


@dataclass
class NoiseMapBuilderSphere(NoiseMapBuilder):
    """Samples the module on the surface of a unit sphere.

    Columns run west to east in longitude, rows south to north in latitude.

    Attributes:
        latitude_bounds: (south, north) in degrees
        longitude_bounds: (west, east) in degrees
    """

    latitude_bounds: tuple[float, float] = (-90.0, 90.0)
    longitude_bounds: tuple[float, float] = (-180.0, 180.0)

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_range("latitude", *self.latitude_bounds)
        _check_range("longitude", *self.longitude_bounds)

    def sample(self, column: int, row: int) -> float:
        south, north = self.latitude_bounds
        west, east = self.longitude_bounds
        lat = south + row * ((north - south) / self.height)
        lon = west + column * ((east - west) / self.width)
        x, y, z = lat_lon_to_xyz(lat, lon)
        return self.module.evaluate(x, y, z)


def lat_lon_to_xyz(lat: float, lon: float) -> tuple[float, float, float]:
    """Convert latitude/longitude in degrees to a point on the unit sphere."""
    r = math.cos(math.radians(lat))
    x = r * math.cos(math.radians(lon))
    y = math.sin(math.radians(lat))
    z = r * math.sin(math.radians(lon))
    return x, y, z
