"""Per-cell value storage.

:class:`HexData` is the capability every backing store offers: a domain
test plus get/insert/remove. A miss is reported as ``None``; no method
raises for an absent cell. Stores do no locking, so callers serialise
mutation themselves.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Generic, Iterator, Optional, Tuple, TypeVar

from .coord import HexCoord

T = TypeVar("T")


class HexData(ABC, Generic[T]):
    """Abstract mapping from cell coordinate to value."""

    @abstractmethod
    def hex_in_domain(self, hex: HexCoord) -> bool:
        """Return True if this store can hold a value for ``hex``."""

    @abstractmethod
    def get(self, hex: HexCoord) -> Optional[T]:
        ...

    @abstractmethod
    def insert(self, hex: HexCoord, value: T) -> Optional[T]:
        """Store ``value`` at ``hex`` and return the value it replaced."""

    @abstractmethod
    def remove(self, hex: HexCoord) -> Optional[T]:
        """Drop the value at ``hex`` and return it."""

    def contains_hex(self, hex: HexCoord) -> bool:
        return self.get(hex) is not None


class HashMapHexData(HexData[T]):
    """Sparse store over the whole infinite grid."""

    def __init__(self) -> None:
        self._data: Dict[HexCoord, T] = {}

    def hex_in_domain(self, hex: HexCoord) -> bool:
        return True

    def get(self, hex: HexCoord) -> Optional[T]:
        return self._data.get(hex)

    def insert(self, hex: HexCoord, value: T) -> Optional[T]:
        previous = self._data.get(hex)
        self._data[hex] = value
        return previous

    def remove(self, hex: HexCoord) -> Optional[T]:
        return self._data.pop(hex, None)

    def contains_hex(self, hex: HexCoord) -> bool:
        # stored None values still count as present
        return hex in self._data

    def __contains__(self, hex: object) -> bool:
        return hex in self._data

    def __len__(self) -> int:
        return len(self._data)

    def items(self) -> Iterator[Tuple[HexCoord, T]]:
        return iter(self._data.items())


class RangeHexData(HashMapHexData[T]):
    """Sparse store limited to the cells within ``radius`` of ``center``."""

    def __init__(self, radius: int, center: HexCoord = HexCoord.ZERO) -> None:
        if radius < 0:
            raise ValueError("radius must be >= 0")
        super().__init__()
        self.radius = radius
        self.center = center

    def hex_in_domain(self, hex: HexCoord) -> bool:
        return HexCoord.hex_distance(self.center, hex) <= self.radius

    def get(self, hex: HexCoord) -> Optional[T]:
        if not self.hex_in_domain(hex):
            return None
        return super().get(hex)

    def insert(self, hex: HexCoord, value: T) -> Optional[T]:
        if not self.hex_in_domain(hex):
            raise ValueError(f"{hex!r} is outside the storage domain")
        return super().insert(hex, value)

    def remove(self, hex: HexCoord) -> Optional[T]:
        if not self.hex_in_domain(hex):
            return None
        return super().remove(hex)
