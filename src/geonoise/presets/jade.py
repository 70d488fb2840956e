"""Jade preset: ridged noise with swirling veins."""

from ..core.module import Module
from ..modules import Add, Cylinders, RidgedMulti, RotatePoint, ScaleBias, Turbulence


def create_jade_preset(seed: int = 0) -> Module:
    """Create a veined jade texture.

    Args:
        seed: Base seed

    Returns:
        Root module of the preset
    """
    primary_jade = RidgedMulti(
        frequency=2.0,
        lacunarity=2.20703125,
        octave_count=6,
        seed=seed,
    )

    base_secondary_jade = Cylinders(frequency=2.0)
    rotated_secondary_jade = RotatePoint(base_secondary_jade, x_angle=90.0, y_angle=25.0, z_angle=5.0)
    perturbed_secondary_jade = Turbulence(
        rotated_secondary_jade,
        frequency=4.0,
        power=1.0 / 4.0,
        roughness=4,
        seed=seed + 1,
    )
    secondary_jade = ScaleBias(perturbed_secondary_jade, scale=0.25, bias=0.0)

    combined_jade = Add(primary_jade, secondary_jade)

    return Turbulence(
        combined_jade,
        frequency=4.0,
        power=1.0 / 16.0,
        roughness=2,
        seed=seed + 2,
    )
