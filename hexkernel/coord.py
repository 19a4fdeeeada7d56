"""Integer axial/cubic cell coordinates.

A cell is addressed by ``(q, r)``; the third cube component ``s`` is always
derived as ``-q - r`` so the ``q + r + s = 0`` invariant cannot be broken.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterator, List, Tuple

from .vertex import HexVertex

if TYPE_CHECKING:
    from .half_edge import HexHalfEdge

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

UNIT_DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, -1),
    (0, 1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (1, -1),
)
"""Axial offsets of the six neighbouring cells, indexed 0..5."""


def rotate_qr(q, r, rotation: int):
    """Rotate ``(q, r)`` about the origin by ``rotation`` sixth-turns CCW.

    Works for ints and floats alike. The table holds the powers of the
    matrix ``[[0, -1], [1, 1]]``.
    """
    k = rotation % 6
    if k == 0:
        return q, r
    if k == 1:
        return -r, q + r
    if k == 2:
        return -q - r, q
    if k == 3:
        return -q, -r
    if k == 4:
        return r, -q - r
    return q + r, -q


# ---------------------------------------------------------------------------
# Cell coordinate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HexCoord:
    """Integer address of a hex cell."""

    q: int
    r: int

    ZERO: ClassVar["HexCoord"]

    @property
    def s(self) -> int:
        return -(self.q + self.r)

    # --- arithmetic -------------------------------------------------------

    def __add__(self, other: HexCoord) -> HexCoord:
        if not isinstance(other, HexCoord):
            return NotImplemented
        return HexCoord(self.q + other.q, self.r + other.r)

    def __sub__(self, other: HexCoord) -> HexCoord:
        if not isinstance(other, HexCoord):
            return NotImplemented
        return HexCoord(self.q - other.q, self.r - other.r)

    def __neg__(self) -> HexCoord:
        return HexCoord(-self.q, -self.r)

    def __mul__(self, factor: int) -> HexCoord:
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented
        return HexCoord(self.q * factor, self.r * factor)

    __rmul__ = __mul__

    def add(self, other: HexCoord) -> HexCoord:
        return self + other

    def subtract(self, other: HexCoord) -> HexCoord:
        return self - other

    def scale(self, factor: int) -> HexCoord:
        return self * factor

    # --- directions and neighbours ---------------------------------------

    @staticmethod
    def get_unit_coord(i: int) -> HexCoord:
        """Return unit direction ``i``; any integer is wrapped modulo 6."""
        q, r = UNIT_DIRECTIONS[i % 6]
        return HexCoord(q, r)

    def neighbor(self, i: int) -> HexCoord:
        return self + HexCoord.get_unit_coord(i)

    def neighbors(self) -> List[HexCoord]:
        """Return the six adjacent cells in direction-index order."""
        return [self.neighbor(i) for i in range(6)]

    # --- rotation ---------------------------------------------------------

    def rotate_forward(self) -> HexCoord:
        """One sixth-turn counter-clockwise about the origin."""
        return HexCoord(-self.r, -self.s)

    def rotate_back(self) -> HexCoord:
        """One sixth-turn clockwise about the origin."""
        return HexCoord(-self.s, -self.q)

    def rotate_around(self, pivot: HexCoord, rotation: int) -> HexCoord:
        """Rotate by ``rotation`` sixth-turns counter-clockwise about ``pivot``."""
        relative = self - pivot
        q, r = rotate_qr(relative.q, relative.r, rotation)
        return pivot + HexCoord(q, r)

    # --- distance ---------------------------------------------------------

    @staticmethod
    def hex_distance(a: HexCoord, b: HexCoord) -> int:
        """Number of unit steps between ``a`` and ``b``."""
        return (abs(a.q - b.q) + abs(a.r - b.r) + abs(a.s - b.s)) // 2

    def distance_to(self, other: HexCoord) -> int:
        return HexCoord.hex_distance(self, other)

    # --- topology ---------------------------------------------------------

    def get_vertex(self, i: int) -> HexVertex:
        return HexVertex.get_unit_coord(i).translate(self)

    def vertices(self) -> Iterator[HexVertex]:
        from .iterators import hex_vertices

        return hex_vertices(self)

    def get_half_edge(self, i: int) -> HexHalfEdge:
        """Boundary edge ``i``, running from vertex ``i`` to vertex ``i + 1``."""
        from .half_edge import HexHalfEdge

        return HexHalfEdge(self.get_vertex(i), self.get_vertex(i + 1))

    def edges(self) -> Iterator[HexHalfEdge]:
        from .iterators import hex_edges

        return hex_edges(self)


HexCoord.ZERO = HexCoord(0, 0)
