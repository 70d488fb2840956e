"""Tests for the combiner and selector modules."""

import math

import pytest

from geonoise import Add, Blend, Constant, Max, Min, Multiply, Perlin, Power, Select

POINTS = [(0.3, 0.7, 0.1), (-1.25, 2.5, 3.75), (10.1, -4.9, 0.33)]


def test_add_is_sum_of_sources():
    a = Perlin(seed=1)
    b = Perlin(seed=2, frequency=3.0)
    add = Add(a, b)
    for x, y, z in POINTS:
        assert add.evaluate(x, y, z) == a.evaluate(x, y, z) + b.evaluate(x, y, z)


@pytest.mark.parametrize("cls,expected", [
    (Add, 2.5),
    (Multiply, -1.5),
    (Min, -0.5),
    (Max, 3.0),
    (Power, -0.125),
])
def test_binary_combiners(cls, expected):
    assert cls(Constant(-0.5), Constant(3.0)).evaluate(1.0, 2.0, 3.0) == expected


def test_power():
    assert Power(Constant(2.0), Constant(3.0)).evaluate(0.0, 0.0, 0.0) == 8.0
    assert math.isnan(Power(Constant(-8.0), Constant(0.5)).evaluate(0.0, 0.0, 0.0))


def test_binary_sources_order():
    a, b = Constant(1.0), Constant(2.0)
    assert Add(a, b).sources() == [a, b]


@pytest.mark.parametrize("control,expected", [(-1.0, 2.0), (1.0, 4.0), (0.0, 3.0)])
def test_blend(control, expected):
    blend = Blend(Constant(2.0), Constant(4.0), Constant(control))
    assert blend.evaluate(0.0, 0.0, 0.0) == expected


def test_blend_sources():
    a, b, c = Constant(1.0), Constant(2.0), Constant(0.0)
    assert Blend(a, b, c).sources() == [a, b, c]


def test_select_inside_range_uses_module2():
    select = Select(Constant(-1.0), Constant(1.0), Constant(0.0), -1.0, 1.0, 0.0)
    assert select.evaluate(0.0, 0.0, 0.0) == 1.0


@pytest.mark.parametrize("control", [-1.5, 1.5])
def test_select_outside_range_uses_module1(control):
    select = Select(Constant(-1.0), Constant(1.0), Constant(control))
    assert select.evaluate(0.0, 0.0, 0.0) == -1.0


def make_select(control):
    return Select(
        Constant(2.0), Constant(4.0), Constant(control),
        lower_bound=0.0, upper_bound=1.0, edge_falloff=0.25,
    )


@pytest.mark.parametrize("control,expected", [
    (-1.0, 2.0),
    (-0.25, 2.0),
    (0.0, 3.0),
    (0.25, 4.0),
    (0.5, 4.0),
    (1.0, 3.0),
    (1.25, 2.0),
    (3.0, 2.0),
])
def test_select_edge_falloff(control, expected):
    assert make_select(control).evaluate(0.0, 0.0, 0.0) == expected


def test_select_falloff_limited_to_half_range():
    select = Select(Constant(0.0), Constant(1.0), Constant(0.0), 0.0, 1.0, edge_falloff=2.0)
    assert select.edge_falloff == 0.5

    select.set_bounds(0.0, 0.5)
    assert select.edge_falloff == 0.25

    select.edge_falloff = 0.1
    assert select.edge_falloff == 0.1


def test_select_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        Select(Constant(0.0), Constant(1.0), Constant(0.0), 1.0, -1.0)

    select = Select(Constant(0.0), Constant(1.0), Constant(0.0))
    with pytest.raises(ValueError):
        select.set_bounds(2.0, 1.0)
    assert (select.lower_bound, select.upper_bound) == (-1.0, 1.0)
