"""Terrain preset: mountains and plains chosen by a low-frequency mask."""

from ..core.module import Module
from ..modules import Billow, Perlin, RidgedMulti, ScaleBias, Select, Turbulence


def create_terrain_preset(seed: int = 0) -> Module:
    """Create a terrain height field.

    Ridged mountains are selected where a slow Perlin mask is positive,
    flattened billow noise fills the lowlands, and a turbulence pass breaks
    up the border between the two.

    Args:
        seed: Base seed

    Returns:
        Root module of the preset, roughly in [-1, 1]
    """
    mountain_terrain = RidgedMulti(seed=seed)

    base_flat_terrain = Billow(frequency=2.0, seed=seed + 1)
    flat_terrain = ScaleBias(base_flat_terrain, scale=0.125, bias=-0.75)

    terrain_type = Perlin(frequency=0.5, persistence=0.25, seed=seed + 2)

    terrain_selector = Select(
        flat_terrain,
        mountain_terrain,
        terrain_type,
        lower_bound=0.0,
        upper_bound=1000.0,
        edge_falloff=0.125,
    )

    return Turbulence(terrain_selector, frequency=4.0, power=0.125, seed=seed + 3)
