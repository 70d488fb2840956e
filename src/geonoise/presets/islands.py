"""Islands preset: terraced land rising out of a shallow sea."""

from ..core.module import Module
from ..modules import Cache, Clamp, Curve, Perlin, ScaleBias, Select, Terrace


def create_islands_preset(seed: int = 0) -> Module:
    """Create terraced islands.

    One Perlin field drives both the land shape and the coastline, so it is
    wrapped in a Cache: the selector and the land curve sample it at the
    same coordinate.

    Args:
        seed: Base seed

    Returns:
        Root module of the preset, within [-1, 1]
    """
    base = Cache(Perlin(frequency=1.5, octave_count=5, seed=seed))

    land_curve = Curve(base, control_points=[
        (-1.0, -1.0),
        (-0.2, -0.4),
        (0.0, 0.05),
        (0.4, 0.3),
        (1.0, 1.0),
    ])
    land = Terrace(land_curve, control_points=[-1.0, 0.05, 0.2, 0.4, 0.7, 1.0])

    sea = ScaleBias(base, scale=0.2, bias=-0.5)

    coastline = Select(sea, land, base, lower_bound=0.0, upper_bound=1000.0, edge_falloff=0.05)

    return Clamp(coastline, lower_bound=-1.0, upper_bound=1.0)
