"""Granite preset: billowy noise over Voronoi grains."""

from ..core.module import Module
from ..core.noisegen import NoiseQuality
from ..modules import Add, Billow, ScaleBias, Turbulence, Voronoi


def create_granite_preset(seed: int = 0) -> Module:
    """Create a speckled granite texture.

    Args:
        seed: Base seed

    Returns:
        Root module of the preset
    """
    primary_granite = Billow(
        frequency=8.0,
        persistence=0.625,
        lacunarity=2.18359375,
        octave_count=6,
        quality=NoiseQuality.BEST,
        seed=seed,
    )

    # Distance shading makes each grain darker towards its edge.
    base_grains = Voronoi(frequency=16.0, enable_distance=True, seed=seed + 1)
    scaled_grains = ScaleBias(base_grains, scale=-0.5, bias=0.0)

    combined_granite = Add(primary_granite, scaled_grains)

    return Turbulence(
        combined_granite,
        frequency=4.0,
        power=1.0 / 8.0,
        roughness=6,
        seed=seed + 2,
    )
