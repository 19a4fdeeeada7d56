"""Lazy enumerations over hex cells, vertices and edges.

Each function returns a fresh generator; iterate again by calling again.
"""

from __future__ import annotations

from typing import Iterator, Optional

from .coord import HexCoord
from .half_edge import HexHalfEdge
from .transform import HexTransform
from .vertex import HexVertex


def hex_range(radius: int, transform: Optional[HexTransform] = None) -> Iterator[HexCoord]:
    """Yield every cell within ``radius`` steps of the origin.

    Cells come in increasing ``q`` and, within one ``q``, increasing ``r``.
    Each cell is mapped through ``transform`` before it is yielded, so a
    translation recentres the range and a rotation permutes its order.
    """
    if radius < 0:
        raise ValueError("radius must be >= 0")
    if transform is None:
        transform = HexTransform.IDENTITY
    for q in range(-radius, radius + 1):
        for r in range(max(-radius, -q - radius), min(radius, -q + radius) + 1):
            yield transform.apply_to(HexCoord(q, r))


def hex_vertices(face: HexCoord) -> Iterator[HexVertex]:
    for i in range(6):
        yield face.get_vertex(i)


def hex_edges(face: HexCoord) -> Iterator[HexHalfEdge]:
    for i in range(6):
        yield face.get_half_edge(i)
