"""Fractional cell coordinates and cube rounding."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar

from .coord import UNIT_DIRECTIONS, HexCoord, rotate_qr
from .errors import NonFiniteCoordinateError
from .vertex import HexVertex


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Python's :func:`round` rounds ties to even, which would move points lying
    exactly on a cell boundary into a different cell than expected.
    """
    floor = math.floor(value)
    diff = value - floor
    if diff > 0.5 or (diff == 0.5 and value > 0):
        return floor + 1
    return floor


@dataclass(frozen=True)
class HexCoordFraction:
    """Continuous position in cell space."""

    q: float
    r: float

    ZERO: ClassVar["HexCoordFraction"]

    @property
    def s(self) -> float:
        return -(self.q + self.r)

    @classmethod
    def from_coord(cls, coord: HexCoord) -> HexCoordFraction:
        return cls(float(coord.q), float(coord.r))

    @classmethod
    def from_vertex(cls, vertex: HexVertex) -> HexCoordFraction:
        return cls(vertex.three_q / 3.0, vertex.three_r / 3.0)

    @staticmethod
    def get_unit_coord(i: int) -> HexCoordFraction:
        q, r = UNIT_DIRECTIONS[i % 6]
        return HexCoordFraction(float(q), float(r))

    def __add__(self, other: HexCoordFraction) -> HexCoordFraction:
        if not isinstance(other, HexCoordFraction):
            return NotImplemented
        return HexCoordFraction(self.q + other.q, self.r + other.r)

    def __sub__(self, other: HexCoordFraction) -> HexCoordFraction:
        if not isinstance(other, HexCoordFraction):
            return NotImplemented
        return HexCoordFraction(self.q - other.q, self.r - other.r)

    def __neg__(self) -> HexCoordFraction:
        return HexCoordFraction(-self.q, -self.r)

    def __mul__(self, factor: float) -> HexCoordFraction:
        if not isinstance(factor, Real):
            return NotImplemented
        return HexCoordFraction(self.q * factor, self.r * factor)

    __rmul__ = __mul__

    def rotate_around(self, pivot: HexCoordFraction, rotation: int) -> HexCoordFraction:
        relative = self - pivot
        q, r = rotate_qr(relative.q, relative.r, rotation)
        return pivot + HexCoordFraction(q, r)

    @staticmethod
    def hex_distance(a: HexCoordFraction, b: HexCoordFraction) -> float:
        return (abs(a.q - b.q) + abs(a.r - b.r) + abs(a.s - b.s)) / 2.0

    def round(self) -> HexCoord:
        """Return the cell containing this position.

        Each cube component is rounded on its own; the component that moved
        furthest is then rebuilt from the other two so the result satisfies
        ``q + r + s == 0``. On ties ``q`` and ``r`` are kept as rounded.
        """
        if not (math.isfinite(self.q) and math.isfinite(self.r) and math.isfinite(self.s)):
            raise NonFiniteCoordinateError(f"cannot round non-finite coordinate {self!r}")

        q_round = _round_half_away(self.q)
        r_round = _round_half_away(self.r)
        s_round = _round_half_away(self.s)

        q_delta = abs(q_round - self.q)
        r_delta = abs(r_round - self.r)
        s_delta = abs(s_round - self.s)

        if q_delta > r_delta and q_delta > s_delta:
            q_round = -(r_round + s_round)
        elif r_delta > s_delta:
            r_round = -(q_round + s_round)
        # s is derived, so fixing it needs no work

        return HexCoord(q_round, r_round)


HexCoordFraction.ZERO = HexCoordFraction(0.0, 0.0)
