"""Tests for the lattice noise primitives and interpolation kernels."""

import math

import pytest

from geonoise.core.interp import clamp, cubic_interp, linear_interp, powf, scurve3, scurve5
from geonoise.core.noisegen import (
    I32_FOLD,
    NoiseQuality,
    gradient_coherent_noise3d,
    gradient_noise3d,
    int_value_noise3d,
    make_i32_range,
    value_coherent_noise3d,
    value_noise3d,
)
from geonoise.core.vector_table import RANDOM_VECTORS

SAMPLE_POINTS = [
    (0.3, 0.7, 0.1),
    (-1.25, 2.5, 3.75),
    (10.1, -4.9, 0.33),
    (123.456, 7.89, -0.001),
]


@pytest.mark.parametrize("value", [
    0.0, 1.5, -3.2, I32_FOLD, -I32_FOLD, 2.0 ** 31 + 5.0, -1e12, 1e20,
])
def test_make_i32_range_idempotent(value):
    folded = make_i32_range(value)
    assert make_i32_range(folded) == folded
    assert -I32_FOLD <= folded <= I32_FOLD


def test_make_i32_range_keeps_values_in_range():
    assert make_i32_range(12345.678) == 12345.678
    assert make_i32_range(-0.5) == -0.5


def test_make_i32_range_folds_large_values():
    assert make_i32_range(2.0 ** 31 + 5.0) == 10.0 - I32_FOLD
    assert make_i32_range(-(2.0 ** 31 + 5.0)) == I32_FOLD - 10.0


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_make_i32_range_non_finite_is_nan(value):
    assert math.isnan(make_i32_range(value))


def test_gradient_noise_zero_at_lattice_point():
    for seed in (0, 1, 42):
        assert gradient_noise3d(3.0, -2.0, 5.0, 3, -2, 5, seed) == 0.0


@pytest.mark.parametrize("quality", list(NoiseQuality))
def test_gradient_coherent_noise_zero_on_lattice(quality):
    assert gradient_coherent_noise3d(0.0, 0.0, 0.0, 0, quality) == 0.0
    assert gradient_coherent_noise3d(1.0, -2.0, 3.0, 7, quality) == 0.0


@pytest.mark.parametrize("quality", list(NoiseQuality))
def test_gradient_coherent_noise_deterministic(quality):
    for x, y, z in SAMPLE_POINTS:
        a = gradient_coherent_noise3d(x, y, z, 5, quality)
        b = gradient_coherent_noise3d(x, y, z, 5, quality)
        assert a == b


def test_gradient_coherent_noise_depends_on_seed():
    a = [gradient_coherent_noise3d(x, y, z, 0) for x, y, z in SAMPLE_POINTS]
    b = [gradient_coherent_noise3d(x, y, z, 1) for x, y, z in SAMPLE_POINTS]
    assert a != b


def test_quality_changes_interpolation():
    x, y, z = SAMPLE_POINTS[1]
    values = {q: gradient_coherent_noise3d(x, y, z, 0, q) for q in NoiseQuality}
    assert len(set(values.values())) > 1


# Reference values computed independently from the libnoise vector table.
GRADIENT_REFERENCE = [
    (0.3, 0.7, 0.1, 0, NoiseQuality.FAST, -0.33143373249239994),
    (-1.25, 2.5, 3.75, 5, NoiseQuality.FAST, -0.45257980115625007),
    (0.3, 0.7, 0.1, 0, NoiseQuality.STANDARD, -0.1562959385738078),
    (-1.25, 2.5, 3.75, 5, NoiseQuality.STANDARD, -0.36635991327392592),
    (0.3, 0.7, 0.1, 0, NoiseQuality.BEST, -0.011691353603895961),
    (-1.25, 2.5, 3.75, 5, NoiseQuality.BEST, -0.29072074655233959),
]


@pytest.mark.parametrize("x,y,z,seed,quality,expected", GRADIENT_REFERENCE)
def test_gradient_coherent_noise_reference_values(x, y, z, seed, quality, expected):
    value = gradient_coherent_noise3d(x, y, z, seed, quality)
    assert value == pytest.approx(expected, rel=1e-12, abs=1e-15)


def test_gradient_noise_reference_value():
    # Lattice point (0, 0, 0) with seed 0 hashes to the first table entry
    expected = ((-0.763874 * 0.5) + (-0.596439 * 0.25) + (-0.246489 * 0.75)) * 2.12
    assert gradient_noise3d(0.5, 0.25, 0.75, 0, 0, 0, 0) == expected
    assert expected == pytest.approx(-1.5177366200000002, rel=1e-12)


def test_random_vector_table():
    assert len(RANDOM_VECTORS) == 256
    assert RANDOM_VECTORS[0] == (-0.763874, -0.596439, -0.246489)
    assert RANDOM_VECTORS[255] == (0.0337884, -0.979891, -0.196654)
    for vector in RANDOM_VECTORS:
        assert math.sqrt(sum(c * c for c in vector)) == pytest.approx(1.0, abs=1e-4)


@pytest.mark.parametrize("x,y,z,seed,expected", [
    (1, 2, 3, 0, 448794225),
    (-4, 7, -11, 42, 39142185),
])
def test_int_value_noise_reference_values(x, y, z, seed, expected):
    assert int_value_noise3d(x, y, z, seed) == expected
    assert value_noise3d(x, y, z, seed) == 1.0 - expected / 1073741824.0


def test_value_noise_reference_values():
    assert value_noise3d(1, 2, 3, 0) == pytest.approx(0.58202780690044165, rel=1e-15)
    assert value_noise3d(-4, 7, -11, 42) == pytest.approx(0.96354599948972464, rel=1e-15)


def test_smoothing_rejects_unknown_quality():
    with pytest.raises(ValueError):
        gradient_coherent_noise3d(0.5, 0.5, 0.5, 0, "standard")


def test_int_value_noise_range():
    for x in range(-5, 6):
        for y in range(-5, 6):
            n = int_value_noise3d(x, y, 3, seed=11)
            assert 0 <= n < 2 ** 31


def test_value_noise_range():
    for x in range(-10, 11):
        for z in range(-10, 11):
            value = value_noise3d(x, 2, z, seed=3)
            assert -1.0 < value <= 1.0


def test_value_coherent_noise_matches_lattice_values():
    # At a positive integer coordinate the cube corner is the point itself.
    assert value_coherent_noise3d(2.0, 3.0, 4.0, 9) == value_noise3d(2, 3, 4, 9)


def test_value_coherent_noise_bounded():
    for x, y, z in SAMPLE_POINTS:
        for quality in NoiseQuality:
            value = value_coherent_noise3d(x, y, z, 1, quality)
            assert -1.0 - 1e-9 <= value <= 1.0 + 1e-9


def test_linear_interp_endpoints():
    assert linear_interp(2.0, 6.0, 0.0) == 2.0
    assert linear_interp(2.0, 6.0, 1.0) == 6.0
    assert linear_interp(2.0, 6.0, 0.5) == 4.0


def test_cubic_interp_endpoints():
    assert cubic_interp(0.0, 1.0, 2.0, 3.0, 0.0) == 1.0
    assert cubic_interp(0.0, 1.0, 2.0, 3.0, 1.0) == 2.0


@pytest.mark.parametrize("curve", [scurve3, scurve5])
def test_scurves_fixed_points(curve):
    assert curve(0.0) == 0.0
    assert curve(1.0) == 1.0
    assert curve(0.5) == 0.5


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


def test_powf_ieee_semantics():
    assert powf(2.0, 3.0) == 8.0
    assert math.isnan(powf(-8.0, 0.5))
    assert powf(0.0, -1.0) == math.inf
