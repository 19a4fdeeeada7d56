"""Vertex coordinates on the hex grid.

Vertices sit a third of the way between cell centres, so they are stored
scaled by three to stay on an integer lattice. Every valid vertex lies on
exactly one of two interleaved sub-lattices, the *positive* and the
*negative* basis, and only three of the six vertex directions lead from it
to another vertex.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from .errors import HexAlignmentError

if TYPE_CHECKING:
    from .coord import HexCoord
    from .half_edge import HexHalfEdge

VERTEX_DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (2, -1),
    (1, 1),
    (-1, 2),
    (-2, 1),
    (-1, -1),
    (1, -2),
)
"""Offsets (scaled by three) from a cell centre to its six vertices."""


@dataclass(frozen=True)
class HexVertex:
    """Vertex address in thirds of a cell step."""

    three_q: int
    three_r: int

    @property
    def three_s(self) -> int:
        return -(self.three_q + self.three_r)

    @staticmethod
    def get_unit_coord(i: int) -> HexVertex:
        three_q, three_r = VERTEX_DIRECTIONS[i % 6]
        return HexVertex(three_q, three_r)

    def on_positive_basis(self) -> bool:
        return (self.three_q + 1) % 3 == 0 and (self.three_r + 1) % 3 == 0

    def on_negative_basis(self) -> bool:
        return (self.three_q - 1) % 3 == 0 and (self.three_r - 1) % 3 == 0

    def get_outgoing_edge(self, i: int) -> HexHalfEdge:
        """Return outgoing edge ``i`` (of three, wrapped) leaving this vertex.

        Positive-basis vertices leave along the even vertex directions and
        negative-basis vertices along the odd ones.
        """
        from .half_edge import HexHalfEdge

        if self.on_positive_basis():
            direction = HexVertex.get_unit_coord(2 * i)
        elif self.on_negative_basis():
            direction = HexVertex.get_unit_coord(2 * i + 1)
        else:
            raise HexAlignmentError(f"{self!r} is not on a vertex lattice")
        return HexHalfEdge(
            self,
            HexVertex(self.three_q + direction.three_q, self.three_r + direction.three_r),
        )

    def get_incoming_edge(self, i: int) -> HexHalfEdge:
        return self.get_outgoing_edge(i).twin()

    def translate(self, translation: HexCoord) -> HexVertex:
        """Shift by a whole cell offset."""
        return HexVertex(
            self.three_q + 3 * translation.q,
            self.three_r + 3 * translation.r,
        )
