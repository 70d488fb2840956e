"""Voronoi cell generator module."""

import math
from dataclasses import dataclass

from ..core.module import Module
from ..core.noisegen import value_noise3d

DEFAULT_VORONOI_DISPLACEMENT = 1.0
DEFAULT_VORONOI_FREQUENCY = 1.0
DEFAULT_VORONOI_SEED = 0

SQRT_3 = math.sqrt(3.0)

# Seed points are one per unit cell, so the nearest one is always within two
# cells of the sample.
_SEARCH_RADIUS = 2


def _cell_index(n: float) -> int:
    return int(n) if n > 0.0 else int(n - 1.0)


@dataclass
class Voronoi(Module):
    """Outputs Voronoi cells.

    Every unit cube of the (frequency-scaled) space holds one seed point at
    a pseudo-random position. Each sample takes the value of the cell whose
    seed point is nearest, so the output is made of flat-colored polygonal
    regions, like cracked mud or stone tiles.

    Attributes:
        displacement: Scale of the random value assigned to each cell. The
            cell values lie in [-displacement, +displacement].
        enable_distance: If True, add the distance from the nearest seed point
            to the output, which shades each cell from its center outwards.
        frequency: Number of seed points per unit length (roughly)
        seed: Seed of the seed-point positions
    """

    displacement: float = DEFAULT_VORONOI_DISPLACEMENT
    enable_distance: bool = False
    frequency: float = DEFAULT_VORONOI_FREQUENCY
    seed: int = DEFAULT_VORONOI_SEED

    def evaluate(self, x: float, y: float, z: float) -> float:
        x *= self.frequency
        y *= self.frequency
        z *= self.frequency

        x_int = _cell_index(x)
        y_int = _cell_index(y)
        z_int = _cell_index(z)

        min_dist = 2147483647.0
        x_candidate = 0.0
        y_candidate = 0.0
        z_candidate = 0.0

        # Brute-force search of the 5x5x5 block of cells around the sample.
        for z_cur in range(z_int - _SEARCH_RADIUS, z_int + _SEARCH_RADIUS + 1):
            for y_cur in range(y_int - _SEARCH_RADIUS, y_int + _SEARCH_RADIUS + 1):
                for x_cur in range(x_int - _SEARCH_RADIUS, x_int + _SEARCH_RADIUS + 1):
                    x_pos = x_cur + value_noise3d(x_cur, y_cur, z_cur, self.seed)
                    y_pos = y_cur + value_noise3d(x_cur, y_cur, z_cur, self.seed + 1)
                    z_pos = z_cur + value_noise3d(x_cur, y_cur, z_cur, self.seed + 2)
                    x_dist = x_pos - x
                    y_dist = y_pos - y
                    z_dist = z_pos - z
                    dist = x_dist * x_dist + y_dist * y_dist + z_dist * z_dist

                    if dist < min_dist:
                        min_dist = dist
                        x_candidate = x_pos
                        y_candidate = y_pos
                        z_candidate = z_pos

        if self.enable_distance:
            value = math.sqrt(min_dist) * SQRT_3 - 1.0
        else:
            value = 0.0

        return value + self.displacement * value_noise3d(
            math.floor(x_candidate),
            math.floor(y_candidate),
            math.floor(z_candidate),
            0,
        )
