"""Wood preset: cylinder rings distorted into grain."""

from ..core.module import Module
from ..modules import Add, Cylinders, Perlin, RotatePoint, ScaleBias, ScalePoint, TranslatePoint, Turbulence


def create_wood_preset(seed: int = 0) -> Module:
    """Create a wood grain texture.

    Concentric cylinders form the growth rings, stretched Perlin noise adds
    the grain, and two turbulence passes keep the rings from looking
    machined. The block is rotated so the rings are cut at an angle.

    Args:
        seed: Base seed; the turbulence passes use seed + 1 and seed + 2

    Returns:
        Root module of the preset
    """
    base_wood = Cylinders(frequency=16.0)

    wood_grain_noise = Perlin(
        frequency=48.0,
        persistence=0.5,
        lacunarity=2.20703125,
        octave_count=3,
        seed=seed,
    )
    # Stretch the grain along the y axis.
    scaled_grain = ScalePoint(wood_grain_noise, y_scale=0.25)
    wood_grain = ScaleBias(scaled_grain, scale=0.25, bias=0.125)

    combined_wood = Add(base_wood, wood_grain)

    perturbed_wood = Turbulence(
        combined_wood,
        frequency=4.0,
        power=1.0 / 256.0,
        roughness=4,
        seed=seed + 1,
    )
    translated_wood = TranslatePoint(perturbed_wood, z_translation=1.48)
    rotated_wood = RotatePoint(translated_wood, x_angle=84.0)

    return Turbulence(
        rotated_wood,
        frequency=2.0,
        power=1.0 / 64.0,
        roughness=4,
        seed=seed + 2,
    )
