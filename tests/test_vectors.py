import pytest

from celestegame.vectors import IVec2, Vec2


def test_vec2_defaults_are_zero():
    assert Vec2() == Vec2(0.0, 0.0)
    assert IVec2() == IVec2(0, 0)


def test_vec2_mul_div_round_trip():
    v = Vec2(3.5, -2.0)
    assert (v * 4.0) / 4.0 == v


def test_vec2_sub_self_is_zero():
    v = Vec2(1.25, 9.5)
    assert v - v == Vec2()


def test_vec2_sub_values():
    assert Vec2(5.0, 3.0) - Vec2(2.0, 1.0) == Vec2(3.0, 2.0)


def test_vec2_truthiness_needs_both():
    vectors = [Vec2(1.0, 1.0), Vec2(1.0, 0.0), Vec2(0.0, 1.0), Vec2()]
    assert [bool(v) for v in vectors] == [True, False, False, False]


def test_vec2_iterates_components():
    assert tuple(Vec2(2.0, 4.0)) == (2.0, 4.0)


def test_ivec2_subtract_vector():
    assert IVec2(10, 4) - IVec2(3, 4) == IVec2(7, 0)


def test_ivec2_scalar_add_and_sub_inverse():
    assert IVec2(16, 0) + 5 == IVec2(21, 5)
    assert (IVec2(16, 0) + 5) - 5 == IVec2(16, 0)


def test_ivec2_division_truncates_toward_zero():
    assert IVec2(-7, 7) / 2 == IVec2(-3, 3)


def test_ivec2_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        IVec2(1, 1) / 0


def test_ivec2_sub_rejects_other_types():
    with pytest.raises(TypeError):
        IVec2(1, 1) - "x"