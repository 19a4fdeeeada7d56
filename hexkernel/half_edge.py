"""Directed boundary edges between hex vertices.

Each cell boundary edge is represented twice, once per bordering cell, as in
a doubly-connected edge list. Navigation only needs vertex arithmetic: the
edge displacement rotated by a sixth-turn gives both the direction to the
cell centre and the displacement of the following edge.
"""

from __future__ import annotations

from dataclasses import dataclass

from .coord import HexCoord
from .errors import HexAlignmentError
from .vertex import VERTEX_DIRECTIONS, HexVertex


def _displacement(source: HexVertex, destination: HexVertex) -> HexVertex:
    return HexVertex(
        destination.three_q - source.three_q,
        destination.three_r - source.three_r,
    )


@dataclass(frozen=True)
class HexHalfEdge:
    """Edge from ``source`` to ``destination``, bordering the cell on its left."""

    source: HexVertex
    destination: HexVertex

    def __post_init__(self) -> None:
        if self.source == self.destination:
            raise ValueError("half-edge source and destination must differ")
        d = _displacement(self.source, self.destination)
        step = (d.three_q, d.three_r)
        if self.source.on_positive_basis():
            allowed = VERTEX_DIRECTIONS[0::2]
        elif self.source.on_negative_basis():
            allowed = VERTEX_DIRECTIONS[1::2]
        else:
            allowed = ()
        if step not in allowed:
            raise HexAlignmentError(
                f"{self.source!r} and {self.destination!r} are not adjacent vertices"
            )

    def hex(self) -> HexCoord:
        """Return the cell this edge belongs to."""
        d = _displacement(self.source, self.destination)
        # rotated so it points from the source to the cell centre
        center_q = self.source.three_q - d.three_r
        center_r = self.source.three_r - d.three_s
        return HexCoord(center_q // 3, center_r // 3)

    def twin(self) -> HexHalfEdge:
        """The same edge seen from the neighbouring cell."""
        return HexHalfEdge(self.destination, self.source)

    def next(self) -> HexHalfEdge:
        d = _displacement(self.source, self.destination)
        return HexHalfEdge(
            self.destination,
            HexVertex(
                self.destination.three_q - d.three_r,
                self.destination.three_r - d.three_s,
            ),
        )

    def prev(self) -> HexHalfEdge:
        d = _displacement(self.source, self.destination)
        return HexHalfEdge(
            HexVertex(
                self.source.three_q + d.three_s,
                self.source.three_r + d.three_q,
            ),
            self.source,
        )

    def translate(self, translation: HexCoord) -> HexHalfEdge:
        return HexHalfEdge(
            self.source.translate(translation),
            self.destination.translate(translation),
        )
