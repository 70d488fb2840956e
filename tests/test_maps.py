"""Tests for noise map builders and the image renderer."""

import tempfile
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from geonoise import Constant, Perlin, Spheres
from geonoise.maps import (
    GradientColor,
    ImageRenderer,
    NoiseMap,
    NoiseMapBuilderCylinder,
    NoiseMapBuilderPlane,
    NoiseMapBuilderSphere,
    lat_lon_to_xyz,
)

BUILDERS = {
    "plane": NoiseMapBuilderPlane,
    "cylinder": NoiseMapBuilderCylinder,
    "sphere": NoiseMapBuilderSphere,
}


@pytest.mark.parametrize("name,builder_cls", list(BUILDERS.items()))
def test_builder_shape(name, builder_cls):
    noise_map = builder_cls(Perlin(octave_count=2), width=12, height=7).build()
    assert noise_map.values.shape == (7, 12)
    assert (noise_map.width, noise_map.height) == (12, 7)
    assert noise_map.values.dtype == np.float64


@pytest.mark.parametrize("name,builder_cls", list(BUILDERS.items()))
def test_builder_rejects_empty_size(name, builder_cls):
    with pytest.raises(ValueError):
        builder_cls(Constant(0.0), width=0, height=4)


def test_constant_map():
    noise_map = NoiseMapBuilderPlane(Constant(0.25), width=4, height=3).build()
    assert np.all(noise_map.values == 0.25)
    assert noise_map.min == 0.25
    assert noise_map.max == 0.25


def test_plane_samples_bounds(recorder):
    builder = NoiseMapBuilderPlane(Constant(0.0), width=4, height=2, bounds=(0.0, 2.0, -1.0, 1.0))
    assert builder.sample(0, 0) == 0.0

    builder.module = recorder
    builder.build()
    values = recorder.calls
    assert values[0] == (0.0, 0.0, -1.0)
    assert values[1] == (0.5, 0.0, -1.0)
    assert values[4] == (0.0, 0.0, 0.0)


def test_plane_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        NoiseMapBuilderPlane(Constant(0.0), bounds=(1.0, -1.0, -1.0, 1.0))
    with pytest.raises(ValueError):
        NoiseMapBuilderPlane(Constant(0.0), bounds=(-1.0, 1.0, 0.5, 0.5))


def test_plane_seamless_constant():
    noise_map = NoiseMapBuilderPlane(Constant(0.5), width=5, height=5, seamless=True).build()
    assert np.allclose(noise_map.values, 0.5)


def test_sphere_on_unit_sphere():
    # Spheres is 1.0 on every integer radius, the unit sphere included
    noise_map = NoiseMapBuilderSphere(Spheres(), width=8, height=4).build()
    assert np.allclose(noise_map.values, 1.0)


def test_cylinder_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        NoiseMapBuilderCylinder(Constant(0.0), angle_bounds=(90.0, -90.0))
    with pytest.raises(ValueError):
        NoiseMapBuilderSphere(Constant(0.0), latitude_bounds=(10.0, 10.0))


@pytest.mark.parametrize("lat,lon,expected", [
    (0.0, 0.0, (1.0, 0.0, 0.0)),
    (90.0, 0.0, (0.0, 1.0, 0.0)),
    (0.0, 90.0, (0.0, 0.0, 1.0)),
])
def test_lat_lon_to_xyz(lat, lon, expected):
    assert lat_lon_to_xyz(lat, lon) == pytest.approx(expected, abs=1e-12)


def test_noise_map_normalized():
    noise_map = NoiseMap(np.array([[-1.0, 0.0], [1.0, 3.0]]))
    assert noise_map.normalized().tolist() == [[0.0, 0.5], [1.0, 1.0]]


def test_gradient_map_end_points():
    gradient = GradientColor.grayscale()
    rgb = gradient.map(np.array([[-2.0, -1.0, 1.0, 5.0]]))
    assert rgb.shape == (1, 4, 3)
    assert rgb.dtype == np.uint8
    assert rgb[0, 0].tolist() == [0, 0, 0]
    assert rgb[0, 1].tolist() == [0, 0, 0]
    assert rgb[0, 2].tolist() == [255, 255, 255]
    assert rgb[0, 3].tolist() == [255, 255, 255]


def test_gradient_points_sorted_and_unique():
    gradient = GradientColor([(1.0, (255, 0, 0)), (-1.0, (0, 0, 255))])
    gradient.add_point(0.0, (0, 255, 0))
    assert [p for p, _ in gradient.points] == [-1.0, 0.0, 1.0]
    assert gradient.map(np.array([0.0])).tolist() == [[0, 255, 0]]

    with pytest.raises(ValueError):
        gradient.add_point(0.0, (1, 2, 3))


def test_gradient_needs_two_points():
    gradient = GradientColor([(0.0, (0, 0, 0))])
    with pytest.raises(ValueError):
        gradient.map(np.zeros((2, 2)))
    gradient.clear()
    assert gradient.points == []


@pytest.mark.parametrize("light_enabled", [False, True])
def test_render_size_and_mode(light_enabled):
    noise_map = NoiseMapBuilderPlane(Perlin(octave_count=3), width=16, height=8).build()
    renderer = ImageRenderer(gradient=GradientColor.terrain(), light_enabled=light_enabled)
    image = renderer.render(noise_map)
    assert image.mode == "RGB"
    assert image.size == (16, 8)


def test_render_light_on_flat_map():
    noise_map = NoiseMap(np.full((4, 4), 1.0))
    renderer = ImageRenderer(light_enabled=True, light_elevation=90.0)
    pixels = np.asarray(renderer.render(noise_map))
    assert np.all(pixels == 255)


def test_render_normal_map():
    noise_map = NoiseMap(np.zeros((6, 5)))
    image = ImageRenderer().render_normal_map(noise_map)
    assert image.size == (5, 6)
    pixels = np.asarray(image)
    # Flat surface: normal (0, 0, 1)
    assert pixels[0, 0].tolist() == [127, 127, 255]


def test_save_to_file():
    noise_map = NoiseMapBuilderPlane(Perlin(octave_count=2), width=10, height=10).build()

    with tempfile.TemporaryDirectory() as tmpdir:
        output_path = Path(tmpdir) / "perlin.png"
        ImageRenderer().save(noise_map, output_path)

        assert output_path.exists()
        assert output_path.stat().st_size > 0

        loaded = Image.open(output_path)
        assert loaded.size == (10, 10)
