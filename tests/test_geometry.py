import math

import pytest

from firefly2d.geometry import Mesh, Projection, RGBAColor, TransformState, Vec2


def square(size=1.0):
    return Mesh(
        [Vec2(-size, -size), Vec2(size, -size), Vec2(size, size), Vec2(-size, size)],
        Vec2(0.0, 0.0),
    )


def test_magnitude_of_three_four():
    assert Vec2(3.0, 4.0).magnitude() == 5.0


def test_dot_of_normal_is_zero():
    v = Vec2(2.5, -1.5)
    assert v.dot(v.normal()) == 0.0


def test_cross_with_self_is_zero():
    v = Vec2(1.25, 7.0)
    assert v.cross(v) == 0.0


def test_cross_is_antisymmetric():
    a, b = Vec2(1.0, 2.0), Vec2(-3.0, 0.5)
    assert a.cross(b) == -b.cross(a)


def test_normalize_gives_unit_length():
    assert Vec2(6.0, -8.0).normalize().magnitude() == pytest.approx(1.0)


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        Vec2(0.0, 0.0).normalize()


def test_invert_cancels():
    v = Vec2(3.0, -2.0)
    assert v + v.invert() == Vec2(0.0, 0.0)
    assert -v == v.invert()


def test_arithmetic_round_trip():
    a, b = Vec2(1.5, 2.5), Vec2(-4.0, 0.25)
    assert (a + b) - b == a
    assert (a * 4.0) / 4.0 == a


def test_of_accepts_pairs_and_unpacks():
    v = Vec2.of((1, 2))
    assert tuple(v) == (1.0, 2.0)
    assert Vec2.of(v) is v


def test_color_range_checked():
    assert RGBAColor(0, 128, 255, 255).g == 128
    with pytest.raises(ValueError):
        RGBAColor(0, 0, 256, 0)
    with pytest.raises(ValueError):
        RGBAColor(-1, 0, 0, 0)


def test_transform_state_defaults():
    state = TransformState()
    assert state.position == Vec2() and state.scale == Vec2() and state.rotation == 0.0


def test_projection_overlap_value():
    assert Projection(0.0, 2.0).overlap(Projection(1.0, 3.0)) == 3.0


def test_projection_disjoint_is_none():
    assert Projection(0.0, 1.0).overlap(Projection(2.0, 3.0)) is None


def test_projection_touching_counts_as_overlap():
    assert Projection(0.0, 1.0).overlap(Projection(1.0, 2.0)) is not None
    assert Projection(0.0, 1.0).overlap(Projection(1.0, 2.0)) == 2.0


def test_projection_contains():
    outer, inner = Projection(-5.0, 5.0), Projection(-1.0, 1.0)
    assert outer.contains(inner)
    assert not inner.contains(outer)


def test_mesh_project_square():
    projection = square(2.0).project(Vec2(1.0, 0.0))
    assert projection == Projection(-2.0, 2.0)


def test_mesh_project_empty_raises():
    with pytest.raises(ValueError):
        Mesh().project(Vec2(1.0, 0.0))


def test_mesh_translate_round_trip():
    mesh = square()
    original = mesh.copy()
    mesh.translate(Vec2(3.0, -1.0))
    assert mesh.center_of_mass == Vec2(3.0, -1.0)
    assert mesh.vertices != original.vertices
    mesh.translate(Vec2(-3.0, 1.0))
    assert mesh.vertices == original.vertices
    assert mesh.center_of_mass == original.center_of_mass


def test_mesh_copy_is_independent():
    mesh = square()
    clone = mesh.copy()
    clone.translate(Vec2(1.0, 1.0))
    assert mesh.vertices == square().vertices


def test_mesh_axes_are_unit_edge_normals():
    mesh = Mesh([Vec2(0.0, 0.0), Vec2(4.0, 0.0), Vec2(1.0, 3.0)])
    axes = mesh.axes()
    assert len(axes) == len(mesh.vertices)
    following = mesh.vertices[1:] + mesh.vertices[:1]
    for axis, a, b in zip(axes, mesh.vertices, following):
        assert axis.magnitude() == pytest.approx(1.0)
        assert axis.dot(b - a) == pytest.approx(0.0)


def test_projection_of_axis_aligned_square_on_its_axes():
    mesh = square(1.5)
    for axis in mesh.axes():
        projection = mesh.project(axis)
        assert math.isclose(projection.max - projection.min, 3.0)