import math

import pytest

from hexkernel import HexCoord, HexCoordFraction, HexVertex, NonFiniteCoordinateError


def test_round_exact_cells():
    for q in range(-3, 4):
        for r in range(-3, 4):
            assert HexCoordFraction(float(q), float(r)).round() == HexCoord(q, r)


def test_round_nearby_points():
    assert HexCoordFraction(0.1, -0.2).round() == HexCoord(0, 0)
    assert HexCoordFraction(0.9, 0.05).round() == HexCoord(1, 0)
    assert HexCoordFraction(-2.2, 1.1).round() == HexCoord(-2, 1)


def test_round_fixes_largest_error_axis():
    # q=0.45 r=0.2 s=-0.65 rounds to (0, 0, -1); q moved most and is rebuilt
    assert HexCoordFraction(0.45, 0.2).round() == HexCoord(1, 0)
    # q=0.6 r=0.3 s=-0.9 rounds to (1, 0, -1), already consistent
    assert HexCoordFraction(0.6, 0.3).round() == HexCoord(1, 0)
    assert HexCoordFraction(0.3, 0.6).round() == HexCoord(0, 1)


def test_round_r_axis_rebuilt():
    # q=0.2 r=0.45 s=-0.65 rounds to (0, 0, -1); r moved further than s
    assert HexCoordFraction(0.2, 0.45).round() == HexCoord(0, 1)


def test_round_tie_between_q_and_r_rebuilds_r():
    # q and r are equally far off, so q is not strictly worst
    assert HexCoordFraction(0.4, 0.4).round() == HexCoord(0, 1)


def test_round_keeps_q_and_r_when_s_is_worst():
    # q=-0.3 r=0.7 s=-0.4 rounds to (0, 1, 0); s errs most and is dropped
    assert HexCoordFraction(-0.3, 0.7).round() == HexCoord(0, 1)


def test_round_ties_round_away_from_zero():
    assert HexCoordFraction(0.5, -0.5).round() == HexCoord(1, -1)
    assert HexCoordFraction(-0.5, 0.5).round() == HexCoord(-1, 1)
    assert HexCoordFraction(2.5, -2.5).round() == HexCoord(3, -3)


def test_round_result_satisfies_invariant():
    steps = [i / 7.0 - 3.0 for i in range(43)]
    for q in steps:
        for r in steps:
            c = HexCoordFraction(q, r).round()
            assert isinstance(c.q, int) and isinstance(c.r, int)
            assert c.q + c.r + c.s == 0
            # nearest cell is never more than one step from the truncated point
            assert HexCoordFraction.hex_distance(HexCoordFraction.from_coord(c), HexCoordFraction(q, r)) <= 1.0


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_round_rejects_non_finite(bad):
    with pytest.raises(NonFiniteCoordinateError):
        HexCoordFraction(bad, 0.0).round()
    with pytest.raises(ValueError):
        HexCoordFraction(0.0, bad).round()


def test_round_rejects_overflowing_s():
    # q and r are finite but s = -(q + r) overflows to -inf
    with pytest.raises(NonFiniteCoordinateError):
        HexCoordFraction(1.7e308, 1.7e308).round()


def test_from_coord_and_vertex():
    assert HexCoordFraction.from_coord(HexCoord(2, -3)) == HexCoordFraction(2.0, -3.0)
    f = HexCoordFraction.from_vertex(HexVertex(2, -1))
    assert f.q == pytest.approx(2.0 / 3.0)
    assert f.r == pytest.approx(-1.0 / 3.0)
    assert f.s == pytest.approx(-1.0 / 3.0)


def test_arithmetic_and_scaling():
    a = HexCoordFraction(0.5, 1.5)
    b = HexCoordFraction(1.0, -1.0)
    assert a + b == HexCoordFraction(1.5, 0.5)
    assert a - b == HexCoordFraction(-0.5, 2.5)
    assert -a == HexCoordFraction(-0.5, -1.5)
    assert a * 2 == HexCoordFraction(1.0, 3.0)
    assert 0.5 * a == HexCoordFraction(0.25, 0.75)


def test_unit_coords_match_integer_units():
    for i in range(-6, 12):
        u = HexCoord.get_unit_coord(i)
        assert HexCoordFraction.get_unit_coord(i) == HexCoordFraction.from_coord(u)


def test_rotate_around_matches_integer_rotation():
    c = HexCoord(3, -1)
    pivot = HexCoord(1, 1)
    for k in range(6):
        expected = HexCoordFraction.from_coord(c.rotate_around(pivot, k))
        got = HexCoordFraction.from_coord(c).rotate_around(HexCoordFraction.from_coord(pivot), k)
        assert got == expected


def test_fractional_distance():
    a = HexCoordFraction(0.0, 0.0)
    b = HexCoordFraction(1.5, 0.0)
    assert HexCoordFraction.hex_distance(a, b) == pytest.approx(1.5)
