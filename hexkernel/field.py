"""Mapping between worldspace and hex coordinates.

A :class:`HexField` is a plane carrying a hex grid, placed anywhere in 3D
space at any orientation and scale. It answers which cell contains a
worldspace point (after projecting the point onto the plane) and where cell
centres and vertices lie in worldspace.
"""

from __future__ import annotations

import logging
import math
from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .config import DEGENERATE_EPS, HORIZONTAL_BASIS_COEFF
from .coord import HexCoord
from .fraction import HexCoordFraction
from .half_edge import HexHalfEdge
from .vertex import HexVertex

logger = logging.getLogger(__name__)

Vector3 = NDArray[np.float64]
AnyCoord = Union[HexCoord, HexCoordFraction, HexVertex]

TAU = 2.0 * math.pi


def _as_vector(value: ArrayLike, name: str) -> Vector3:
    vec = np.asarray(value, dtype=np.float64)
    if vec.shape != (3,):
        raise ValueError(f"{name} must be a 3-vector")
    if not np.isfinite(vec).all():
        raise ValueError(f"{name} contains NaN or Inf")
    return vec


def _as_fraction(coord: AnyCoord) -> HexCoordFraction:
    if isinstance(coord, HexCoordFraction):
        return coord
    if isinstance(coord, HexCoord):
        return HexCoordFraction.from_coord(coord)
    if isinstance(coord, HexVertex):
        return HexCoordFraction.from_vertex(coord)
    raise TypeError(f"expected a hex coordinate, got {type(coord).__name__}")


def project_onto_basis(point: Vector3, basis_0: Vector3, basis_1: Vector3, basis_2: Vector3) -> Vector3:
    """Solve ``point = a*basis_0 + b*basis_1 + c*basis_2`` for ``(a, b, c)``.

    Uses Cramer's rule: each coefficient is the determinant of the basis
    matrix with that basis column replaced by ``point``, over the
    determinant of the basis matrix itself.
    """
    matrix = np.column_stack((basis_0, basis_1, basis_2))
    denominator = np.linalg.det(matrix)
    result = np.empty(3, dtype=np.float64)
    for i in range(3):
        replaced = matrix.copy()
        replaced[:, i] = point
        result[i] = np.linalg.det(replaced) / denominator
    return result


class HexField:
    """A hex grid laid on an oriented plane in worldspace.

    Parameters
    ----------
    origin:
        Worldspace position of the centre of cell ``(0, 0)``.
    up:
        Worldspace direction normal to the grid plane. Only the part
        perpendicular to ``neighbor_displacement`` is used.
    neighbor_displacement:
        Vector from ``origin`` to the centre of cell ``(0, 1)``. Its length
        sets the cell size and its direction the grid's rotation about
        ``up``.
    """

    def __init__(self, origin: ArrayLike, up: ArrayLike, neighbor_displacement: ArrayLike) -> None:
        origin_v = _as_vector(origin, "origin")
        up_v = _as_vector(up, "up")
        displacement = _as_vector(neighbor_displacement, "neighbor_displacement")

        length = float(np.linalg.norm(displacement))
        if length < DEGENERATE_EPS:
            logger.warning("HexField: degenerate neighbor displacement %r", displacement)
            raise ValueError("neighbor_displacement must be non-zero")
        y_basis = displacement / length

        # orthonormalise up against y
        z_raw = up_v - np.dot(up_v, y_basis) * y_basis
        z_length = float(np.linalg.norm(z_raw))
        if z_length < DEGENERATE_EPS:
            logger.warning("HexField: up %r is parallel to displacement %r", up_v, displacement)
            raise ValueError("up must not be parallel to neighbor_displacement")
        z_basis = z_raw / z_length
        x_basis = np.cross(y_basis, z_basis)

        self._origin = origin_v
        self._x_basis = x_basis
        self._y_basis = y_basis
        self._z_basis = z_basis

        # cell axes, 120 degrees apart in the plane
        self._q_basis = x_basis
        self._r_basis = math.cos(TAU / 3.0) * x_basis + math.sin(TAU / 3.0) * y_basis
        self._s_basis = math.cos(2.0 * TAU / 3.0) * x_basis + math.sin(2.0 * TAU / 3.0) * y_basis

        self._inner_radius = length / 2.0
        self._outer_radius = self._inner_radius * 2.0 / math.sqrt(3.0)

        logger.debug(
            "HexField: origin=%s normal=%s outer_radius=%.6g",
            origin_v, z_basis, self._outer_radius,
        )

    # ------------------------------------------------------------------
    # Read-only geometry
    # ------------------------------------------------------------------

    @property
    def origin(self) -> Vector3:
        return self._origin.copy()

    @property
    def x_basis(self) -> Vector3:
        """Worldspace direction of the plane's x-axis."""
        return self._x_basis.copy()

    @property
    def y_basis(self) -> Vector3:
        """Worldspace direction of the plane's y-axis (towards cell ``(0, 1)``)."""
        return self._y_basis.copy()

    @property
    def z_basis(self) -> Vector3:
        """Worldspace normal of the plane."""
        return self._z_basis.copy()

    @property
    def q_basis(self) -> Vector3:
        return self._q_basis.copy()

    @property
    def r_basis(self) -> Vector3:
        return self._r_basis.copy()

    @property
    def s_basis(self) -> Vector3:
        return self._s_basis.copy()

    @property
    def inner_radius(self) -> float:
        """Distance from a cell centre to the middle of an edge."""
        return self._inner_radius

    @property
    def outer_radius(self) -> float:
        """Distance from a cell centre to a vertex."""
        return self._outer_radius

    # ------------------------------------------------------------------
    # Worldspace -> hex
    # ------------------------------------------------------------------

    def project_onto_plane(self, position: ArrayLike) -> Vector3:
        """Return ``position`` in the plane's local ``(x, y, z)`` coordinates."""
        relative = np.asarray(position, dtype=np.float64) - self._origin
        return project_onto_basis(relative, self._x_basis, self._y_basis, self._z_basis)

    def get_hex_coord_fraction(self, position: ArrayLike) -> HexCoordFraction:
        """Exact fractional cell coordinates of ``position`` projected onto the grid."""
        relative = (np.asarray(position, dtype=np.float64) - self._origin) / self._outer_radius
        qr = project_onto_basis(relative, self._q_basis, self._r_basis, self._z_basis)

        # q and r with s = 0 break the zero-sum invariant; keep the position
        # and solve for the pair that satisfies it
        q = float(qr[0])
        r = float(qr[1])
        a = HORIZONTAL_BASIS_COEFF

        qp = (q + a * r) / (1.0 - a)
        rp = (q + r * (2.0 * a - 1.0)) / (2.0 * a - 2.0)
        return HexCoordFraction(qp, rp)

    def get_hex_coord(self, position: ArrayLike) -> HexCoord:
        """The cell containing ``position`` projected onto the grid."""
        return self.get_hex_coord_fraction(position).round()

    # ------------------------------------------------------------------
    # Hex -> worldspace
    # ------------------------------------------------------------------

    def get_position(self, coord: AnyCoord) -> Vector3:
        """Worldspace position of a cell centre, fractional position or vertex.

        The result includes ``origin``, so cell ``(0, 0)`` sits at ``origin``
        and :meth:`get_hex_coord` inverts this for any field placement.
        """
        frac = _as_fraction(coord)
        return self._origin + self._outer_radius * (
            frac.q * self._q_basis + frac.r * self._r_basis + frac.s * self._s_basis
        )

    def get_position_with_height(self, coord: AnyCoord, height: float) -> Vector3:
        return self.get_position(coord) + height * self._z_basis

    def _lerp_to(self, center: AnyCoord, outer: AnyCoord, scale: float, height: float) -> Vector3:
        c = self.get_position_with_height(center, height)
        o = self.get_position_with_height(outer, height)
        return c + scale * (o - c)

    def get_face_vertex_position(self, face: HexCoord, scale: float, height: float, i: int) -> Vector3:
        """Position of vertex ``i`` of ``face``, pulled towards the centre by ``scale``.

        ``scale=1`` gives the true vertex and ``scale=0`` the cell centre;
        both are lifted ``height`` along the plane normal.
        """
        return self._lerp_to(face, face.get_vertex(i), scale, height)

    def get_source_vertex_position(self, edge: HexHalfEdge, scale: float, height: float) -> Vector3:
        return self._lerp_to(edge.hex(), edge.source, scale, height)

    def get_destination_vertex_position(self, edge: HexHalfEdge, scale: float, height: float) -> Vector3:
        return self._lerp_to(edge.hex(), edge.destination, scale, height)
