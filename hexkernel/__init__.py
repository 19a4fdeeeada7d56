# hexkernel/__init__.py
# Hex grid coordinates, topology, transforms, worldspace mapping and chunking

from .coord import HexCoord
from .vertex import HexVertex
from .half_edge import HexHalfEdge
from .fraction import HexCoordFraction
from .transform import HexTransform
from .iterators import hex_range, hex_vertices, hex_edges
from .shape import HexShape, HexShapeView
from .data import HexData, HashMapHexData, RangeHexData
from .field import HexField
from .chunker import HexChunker
from .errors import HexAlignmentError, NonFiniteCoordinateError

__all__ = [
    "HexCoord", "HexVertex", "HexHalfEdge", "HexCoordFraction",
    "HexTransform",
    "hex_range", "hex_vertices", "hex_edges",
    "HexShape", "HexShapeView",
    "HexData", "HashMapHexData", "RangeHexData",
    "HexField",
    "HexChunker",
    "HexAlignmentError", "NonFiniteCoordinateError",
]
