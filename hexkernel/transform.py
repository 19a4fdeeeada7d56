"""Rigid transforms of the hex grid: translation plus six-fold rotation.

Transforms form the symmetry group of the grid. ``a * b`` composes them so
that applying the product equals applying ``b`` first and then ``a``;
``t * coord`` applies a transform to a cell coordinate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .coord import HexCoord


@dataclass(frozen=True)
class HexTransform:
    """Rotate about the origin by ``rotation`` sixth-turns, then translate."""

    translation: HexCoord = field(default_factory=lambda: HexCoord.ZERO)
    rotation: int = 0

    IDENTITY: ClassVar["HexTransform"]

    def __post_init__(self) -> None:
        # keep equal transforms equal (and hashing alike)
        object.__setattr__(self, "rotation", self.rotation % 6)

    @classmethod
    def from_translation(cls, translation: HexCoord) -> HexTransform:
        return cls(translation, 0)

    @classmethod
    def from_rotation(cls, rotation: int) -> HexTransform:
        return cls(HexCoord.ZERO, rotation)

    def apply_to(self, coord: HexCoord) -> HexCoord:
        return self.translation + coord.rotate_around(HexCoord.ZERO, self.rotation)

    def compose(self, other: HexTransform) -> HexTransform:
        """Return the transform that applies ``other`` and then ``self``."""
        return HexTransform(
            self.translation + other.translation.rotate_around(HexCoord.ZERO, self.rotation),
            self.rotation + other.rotation,
        )

    def inverse(self) -> HexTransform:
        rotation = -self.rotation
        return HexTransform((-self.translation).rotate_around(HexCoord.ZERO, rotation), rotation)

    def __mul__(self, other):
        if isinstance(other, HexTransform):
            return self.compose(other)
        if isinstance(other, HexCoord):
            return self.apply_to(other)
        return NotImplemented

    def transformed(self, transform: HexTransform) -> HexTransform:
        """Follow this transform with ``transform``."""
        return transform * self

    def translated(self, translation: HexCoord) -> HexTransform:
        return HexTransform.from_translation(translation) * self

    def rotated(self, rotation: int) -> HexTransform:
        return HexTransform.from_rotation(rotation) * self


HexTransform.IDENTITY = HexTransform(HexCoord.ZERO, 0)
