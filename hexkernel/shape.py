"""Ordered cell collections and zero-copy transformed views of them.

A :class:`HexShapeView` keeps a reference to its shape and re-applies its
transform on every read. Mutating the shape while a view is in use changes
what the view reports; nothing is cached.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from .coord import HexCoord
from .transform import HexTransform


class HexShape:
    """An ordered sequence of cells.

    Duplicate cells are kept as pushed; ``len`` counts every entry.
    """

    def __init__(self, hexes: Iterable[HexCoord] = ()) -> None:
        self._hexes: List[HexCoord] = list(hexes)

    def __repr__(self) -> str:
        return f"HexShape({self._hexes!r})"

    def push(self, coord: HexCoord) -> None:
        self._hexes.append(coord)

    def contains(self, coord: HexCoord) -> bool:
        return coord in self._hexes

    def __contains__(self, coord: object) -> bool:
        return isinstance(coord, HexCoord) and self.contains(coord)

    def __len__(self) -> int:
        return len(self._hexes)

    def __iter__(self) -> Iterator[HexCoord]:
        return iter(self._hexes)

    def get(self, index: int) -> Optional[HexCoord]:
        """Return cell ``index``, or ``None`` past either end."""
        if 0 <= index < len(self._hexes):
            return self._hexes[index]
        return None

    def transformed(self, transform: HexTransform) -> HexShapeView:
        return HexShapeView(self, transform)

    def translated(self, translation: HexCoord) -> HexShapeView:
        return HexShapeView(self, HexTransform.from_translation(translation))

    def rotated(self, rotation: int) -> HexShapeView:
        return HexShapeView(self, HexTransform.from_rotation(rotation))


class HexShapeView:
    """A shape seen through a transform."""

    def __init__(self, shape: HexShape, transform: HexTransform) -> None:
        self._shape = shape
        self._transform = transform

    def __repr__(self) -> str:
        return f"HexShapeView({self._shape!r}, {self._transform!r})"

    @property
    def shape(self) -> HexShape:
        return self._shape

    @property
    def transform(self) -> HexTransform:
        return self._transform

    def contains(self, coord: HexCoord) -> bool:
        return self._shape.contains(self._transform.inverse().apply_to(coord))

    def __contains__(self, coord: object) -> bool:
        return isinstance(coord, HexCoord) and self.contains(coord)

    def __len__(self) -> int:
        return len(self._shape)

    def __iter__(self) -> Iterator[HexCoord]:
        for coord in self._shape:
            yield self._transform.apply_to(coord)

    def get(self, index: int) -> Optional[HexCoord]:
        coord = self._shape.get(index)
        if coord is None:
            return None
        return self._transform.apply_to(coord)

    def transformed(self, transform: HexTransform) -> HexShapeView:
        return HexShapeView(self._shape, transform * self._transform)

    def translated(self, translation: HexCoord) -> HexShapeView:
        return HexShapeView(self._shape, HexTransform.from_translation(translation) * self._transform)

    def rotated(self, rotation: int) -> HexShapeView:
        return HexShapeView(self._shape, HexTransform.from_rotation(rotation) * self._transform)
