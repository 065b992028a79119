from dataclasses import astuple

import pytest

from solarsystem2d.mathhelper import Vector2F
from solarsystem2d.tmhelper import (
    Matrix3x2,
    Rect,
    decompose_matrix,
    is_point_in_rect,
    make_render_matrix,
    make_rotation_matrix,
    make_rotation_matrix_origin,
    make_scale_matrix,
    make_scale_matrix_origin,
    make_translation_matrix,
    matrix_to_string,
    remove_pivot,
)


def test_identity_leaves_points_unchanged():
    p = Vector2F(3.5, -2.0)
    assert Matrix3x2.identity().transform_point(p) == p
    assert Matrix3x2.identity() == Matrix3x2()


def test_translation_moves_point():
    assert tuple(Matrix3x2.translation(4.0, -6.0).transform_point((1.0, 2.0))) == pytest.approx((5.0, -4.0))


def test_product_applies_left_matrix_first():
    t = Matrix3x2.translation(1.0, 2.0)
    s = Matrix3x2.scale(3.0, 5.0)
    p = (2.0, 7.0)
    assert tuple((t @ s).transform_point(p)) == pytest.approx(tuple(s.transform_point(t.transform_point(p))))


def test_scale_about_center_keeps_center_fixed():
    center = (10.0, 20.0)
    m = Matrix3x2.scale(2.0, 3.0, center)
    assert tuple(m.transform_point(center)) == pytest.approx(center)


def test_rotation_about_center_keeps_center_fixed():
    center = (-4.0, 9.0)
    m = Matrix3x2.rotation(37.0, center)
    assert tuple(m.transform_point(center)) == pytest.approx(center)


def test_rotation_composes_additively():
    combined = Matrix3x2.rotation(20.0) @ Matrix3x2.rotation(70.0)
    assert astuple(combined) == pytest.approx(astuple(Matrix3x2.rotation(90.0)))


def test_determinant_of_scale():
    assert Matrix3x2.scale(2.0, 3.0).determinant() == pytest.approx(2.0 * 3.0)
    assert Matrix3x2.rotation(33.0).determinant() == pytest.approx(1.0)


def test_inverse_round_trip():
    m = Matrix3x2.scale(2.0, 0.5) @ Matrix3x2.rotation(25.0) @ Matrix3x2.translation(7.0, -3.0)
    assert m.is_invertible()
    identity = astuple(Matrix3x2.identity())
    assert astuple(m @ m.inverted()) == pytest.approx(identity)
    assert astuple(m.inverted() @ m) == pytest.approx(identity)


def test_singular_matrix_cannot_be_inverted():
    m = Matrix3x2.scale(0.0, 1.0)
    assert not m.is_invertible()
    with pytest.raises(ValueError):
        m.inverted()


def test_manual_translation_matches_builtin():
    assert make_translation_matrix((3.0, -8.0)) == Matrix3x2.translation(3.0, -8.0)


@pytest.mark.parametrize("angle", [0.0, 30.0, 90.0, -135.0])
def test_manual_rotation_matches_builtin(angle):
    assert astuple(make_rotation_matrix_origin(angle)) == pytest.approx(astuple(Matrix3x2.rotation(angle)))
    center = (12.0, -5.0)
    assert astuple(make_rotation_matrix(angle, center)) == pytest.approx(
        astuple(Matrix3x2.rotation(angle, center))
    )


def test_manual_scale_matches_builtin():
    assert astuple(make_scale_matrix_origin((2.0, 4.0))) == pytest.approx(astuple(Matrix3x2.scale(2.0, 4.0)))
    center = (3.0, 6.0)
    assert astuple(make_scale_matrix((2.0, 4.0), center)) == pytest.approx(
        astuple(Matrix3x2.scale(2.0, 4.0, center))
    )


def test_default_centers_are_origin():
    assert astuple(make_rotation_matrix(45.0)) == pytest.approx(astuple(make_rotation_matrix_origin(45.0)))
    assert astuple(make_scale_matrix((2.0, 3.0))) == pytest.approx(astuple(make_scale_matrix_origin((2.0, 3.0))))


def test_render_matrix_defaults_to_identity():
    assert make_render_matrix() == Matrix3x2.identity()


def test_render_matrix_unity_flips_y():
    assert make_render_matrix(True) == Matrix3x2.scale(1.0, -1.0)


def test_render_matrix_offsets():
    m = make_render_matrix(False, True, 10.0, 20.0)
    assert tuple(m.transform_point((0.0, 0.0))) == pytest.approx((10.0, -20.0))
    u = make_render_matrix(True, False, 10.0, 20.0)
    assert tuple(u.transform_point((0.0, 0.0))) == pytest.approx((-10.0, 20.0))


def test_matrix_to_string_identity():
    assert matrix_to_string(Matrix3x2.identity()) == "1.00, 0.00\n0.00, 1.00\n0.00, 0.00\n"


def test_decompose_recovers_components():
    m = Matrix3x2.scale(2.0, 3.0) @ Matrix3x2.rotation(30.0) @ Matrix3x2.translation(5.0, 7.0)
    translation, rotation, scale = decompose_matrix(m)
    assert tuple(translation) == pytest.approx((5.0, 7.0))
    assert rotation == pytest.approx(30.0)
    assert tuple(scale) == pytest.approx((2.0, 3.0))


def test_remove_pivot_strips_pivot_correction():
    pivot = (50.0, -50.0)
    core = Matrix3x2.scale(1.5, 1.5) @ Matrix3x2.rotation(40.0) @ Matrix3x2.translation(3.0, 4.0)
    with_pivot = Matrix3x2.translation(-50.0, 50.0) @ core @ Matrix3x2.translation(50.0, -50.0)
    assert astuple(remove_pivot(with_pivot, pivot)) == pytest.approx(astuple(core))


def test_remove_pivot_with_zero_pivot_is_noop():
    m = Matrix3x2.rotation(12.0) @ Matrix3x2.translation(1.0, 2.0)
    assert astuple(remove_pivot(m, (0.0, 0.0))) == pytest.approx(astuple(m))


def test_point_in_rect_inclusive_edges():
    rect = Rect(0.0, 0.0, 100.0, 50.0)
    assert is_point_in_rect((0.0, 0.0), rect)
    assert is_point_in_rect((100.0, 50.0), rect)
    assert is_point_in_rect((40.0, 20.0), rect)
    assert not is_point_in_rect((100.5, 20.0), rect)
    assert not is_point_in_rect((40.0, -0.5), rect)


def test_point_in_rect_with_reversed_edges():
    rect = Rect(100.0, 50.0, 0.0, 0.0)
    assert is_point_in_rect((40.0, 20.0), rect)
    assert not is_point_in_rect((-1.0, 20.0), rect)


def test_rect_dimensions():
    rect = Rect(10.0, 20.0, 110.0, 70.0)
    assert (rect.width, rect.height) == (110.0 - 10.0, 70.0 - 20.0)