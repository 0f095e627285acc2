import math

import pytest

from firefly2d.geometry import Vec2
from firefly2d.light import (
    LightInstance,
    LightObject,
    LightType,
    parabola_coefficients,
)

COLOR = (200, 200, 200, 200)


def evaluate(coeffs, x):
    a, b, c = coeffs
    return a * x * x + b * x + c


@pytest.mark.parametrize(
    "points",
    [
        ((0, 1), (1, 0), (2, 1)),
        ((-1, 3), (2, 5), (4, -2)),
        ((0, 10), (3, 0), (6, 10)),
    ],
)
def test_parabola_passes_through_points(points):
    (x1, y1), (x2, y2), (x3, y3) = points
    coeffs = parabola_coefficients(x1, y1, x2, y2, x3, y3)
    for x, y in points:
        assert evaluate(coeffs, x) == pytest.approx(y, abs=1e-9)


def test_parabola_worked_example():
    assert parabola_coefficients(0, 1, 1, 0, 2, 1) == pytest.approx((1.0, -2.0, 1.0))


def test_parabola_rejects_repeated_x():
    with pytest.raises(ValueError):
        parabola_coefficients(1, 0, 1, 2, 3, 4)


def test_point_light_decay_reaches_zero_at_radius():
    light = LightObject(1, (0, 0), 0, 1.0, 360, COLOR, LightType.POINT_LIGHT)
    data = light.light_data()
    coeffs = (data.parab_a, data.parab_b, data.parab_c)
    assert data.light_radius > 0
    assert evaluate(coeffs, 0) == pytest.approx(1.0)
    assert evaluate(coeffs, data.light_radius) == pytest.approx(0.0, abs=1e-9)
    spread = 0.05 * (1 + 2 * math.radians(360))
    assert data.power / spread == pytest.approx(data.light_radius**2)


def test_global_light_has_no_radius():
    light = LightObject(1, (0, 0), 0, 0.1, 360, COLOR, LightType.GLOBAL_LIGHT)
    data = light.light_data()
    assert data.light_radius == 0.0
    assert data.kind is LightType.GLOBAL_LIGHT


def test_baker_called_on_shape_changes():
    baked = []
    light = LightObject(1, (0, 0), 0, 1.0, 90, COLOR, LightType.POINT_LIGHT, baker=baked.append)
    light.set_power(4.0)
    light.set_angle(45)
    assert len(baked) == 3
    assert baked[1].power == 4.0
    assert baked[2].light_angle == 45
    assert baked[1].light_radius > baked[0].light_radius


def test_color_rebake_flag():
    light = LightObject(1, (0, 0), 0, 1.0, 90, COLOR, LightType.POINT_LIGHT)
    assert not light.color_rebake
    light.set_color((1, 2, 3, 4))
    assert light.color_rebake
    assert light.light_data().color == (1, 2, 3, 4)
    light.reset_changed()
    assert not light.light_data().color_rebake


def test_instance_copies_original_at_own_place():
    light = LightObject(1, (0, 0), 0, 2.0, 90, COLOR, LightType.POINT_LIGHT, texture_name=7)
    light.set_color(COLOR)
    instance = LightInstance(2, (3, 4), 30, light)
    data = instance.light_data()
    assert data.position == Vec2(3, 4)
    assert data.rotation == 30
    assert data.power == 2.0
    assert data.texture_name == 7
    assert data.light_radius == light.radius
    assert data.color_rebake is False
    assert light.instances == (instance,)


def test_instance_detach_and_destroy():
    light = LightObject(1, (0, 0), 0, 1.0, 90, COLOR, LightType.POINT_LIGHT)
    first = LightInstance(2, (1, 1), 0, light)
    second = LightInstance(3, (2, 2), 0, light)
    first.detach()
    assert first.light_data() is None
    assert light.instances == (second,)
    light.destroy()
    assert second.original is None
    assert second.light_data() is None
    assert light.instances == ()


def test_instance_without_original():
    instance = LightInstance(2, (0, 0), 0, None)
    assert instance.light_data() is None