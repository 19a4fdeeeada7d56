"""Tiling of the infinite hex grid with hexagonal chunks.

Chunks are hexagons of ``chunk_radius`` cells around a centre cell and are
addressed by their own hex coordinate. Chunk centres form a coarser hex
grid, rotated against the cell grid so that neighbouring chunks interlock
without gaps or overlaps.

The containing-chunk computation follows Sander Evers' "hexagon tiling of
a hexagonal grid" (https://observablehq.com/@sanderevers/hexagon-tiling-of-an-hexagonal-grid).
"""

from __future__ import annotations

import logging
from typing import Iterator

from .config import DEFAULT_CHUNK_RADIUS
from .coord import HexCoord
from .iterators import hex_range
from .transform import HexTransform

logger = logging.getLogger(__name__)


class HexChunker:
    """Maps between cell coordinates and chunk coordinates."""

    def __init__(self, chunk_radius: int = DEFAULT_CHUNK_RADIUS) -> None:
        if chunk_radius < 0:
            raise ValueError("chunk_radius must be >= 0")
        self.chunk_radius = chunk_radius
        self.area = 3 * chunk_radius * chunk_radius + 3 * chunk_radius + 1
        self.shift = 3 * chunk_radius + 2
        logger.debug("HexChunker: radius=%d area=%d shift=%d", chunk_radius, self.area, self.shift)

    def __repr__(self) -> str:
        return f"HexChunker(chunk_radius={self.chunk_radius})"

    def get_chunk_center(self, chunk_coord: HexCoord) -> HexCoord:
        """Cell coordinate at the centre of chunk ``chunk_coord``."""
        n = self.chunk_radius
        return HexCoord(
            (2 * n + 1) * chunk_coord.q + n * chunk_coord.r,
            -n * chunk_coord.q + (n + 1) * chunk_coord.r,
        )

    def get_containing_chunk(self, coord: HexCoord) -> HexCoord:
        """Chunk coordinate of the chunk holding cell ``coord``."""
        # floor division throughout; coordinates may be negative
        xh = (coord.r + self.shift * coord.q) // self.area
        yh = (coord.s + self.shift * coord.r) // self.area
        zh = (coord.q + self.shift * coord.s) // self.area
        return HexCoord(
            (1 + xh - yh) // 3,
            (1 + yh - zh) // 3,
        )

    def chunk_cells(self, chunk_coord: HexCoord) -> Iterator[HexCoord]:
        """Yield every cell of chunk ``chunk_coord``."""
        center = self.get_chunk_center(chunk_coord)
        return hex_range(self.chunk_radius, HexTransform.from_translation(center))
