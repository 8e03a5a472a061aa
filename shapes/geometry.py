from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union
import logging
import math
import numpy as np

from .errors import ShapeError, ShapeErrorKind, check_scale_factor


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


PointLike = Union[Point, Tuple[float, float], Sequence[float], np.ndarray]


def as_point(p: PointLike) -> Point:
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(float(x), float(y))


@dataclass(frozen=True)
class FrameRect:
    """
    Axis-aligned bounding box given by its size and center.
    """
    width: float
    height: float
    pos: Point

    @property
    def left(self) -> float:
        return self.pos.x - self.width / 2.0

    @property
    def right(self) -> float:
        return self.pos.x + self.width / 2.0

    @property
    def down(self) -> float:
        return self.pos.y - self.height / 2.0

    @property
    def up(self) -> float:
        return self.pos.y + self.height / 2.0

    @staticmethod
    def from_extents(left: float, right: float, down: float, up: float) -> "FrameRect":
        return FrameRect(
            width=right - left,
            height=up - down,
            pos=Point((left + right) / 2.0, (down + up) / 2.0),
        )


class Shape:
    """
    Capability shared by every shape kind: area, frame rectangle,
    translation and uniform scaling about the shape's own center.
    Shapes are mutated in place.
    """
    def area(self) -> float:
        raise NotImplementedError

    def frame_rect(self) -> FrameRect:
        raise NotImplementedError

    def center(self) -> Point:
        """
        Reference position used by move_to() and as the pivot of scale().
        """
        raise NotImplementedError

    def move_to(self, point: PointLike) -> None:
        p = as_point(point)
        c = self.center()
        self.move_by(p.x - c.x, p.y - c.y)

    def move_by(self, dx: float, dy: float) -> None:
        raise NotImplementedError

    def scale(self, k: float) -> None:
        raise NotImplementedError

    def copy(self) -> "Shape":
        raise NotImplementedError

    # ---- copy protocol ----
    def __copy__(self) -> "Shape":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Shape":
        return self.copy()


class Rectangle(Shape):
    """
    Axis-aligned rectangle centered at `pos`.
    """
    def __init__(self, width: float, height: float, pos: PointLike):
        if not (width > 0.0 and height > 0.0):
            raise ShapeError(
                ShapeErrorKind.INVALID_DIMENSION,
                f"Rectangle requires positive width and height, got {width}x{height}",
            )
        self.width = float(width)
        self.height = float(height)
        self.pos = as_point(pos)

    def area(self) -> float:
        return self.width * self.height

    def frame_rect(self) -> FrameRect:
        return FrameRect(self.width, self.height, self.pos)

    def center(self) -> Point:
        return self.pos

    def move_to(self, point: PointLike) -> None:
        self.pos = as_point(point)

    def move_by(self, dx: float, dy: float) -> None:
        self.pos = Point(self.pos.x + dx, self.pos.y + dy)

    def scale(self, k: float) -> None:
        check_scale_factor(k)
        self.width *= k
        self.height *= k

    def copy(self) -> "Rectangle":
        return Rectangle(self.width, self.height, self.pos)

    def __repr__(self) -> str:
        return f"Rectangle(width={self.width}, height={self.height}, pos={self.pos})"


class Rubber(Shape):
    """
    Annulus between an outer circle (r1, pos1) and an inner circle (r2, pos2).
    The inner circle must lie inside the outer one; touching is allowed.
    The inner center is the reference point: move_to() places it and
    scale() keeps it fixed.
    """
    def __init__(self, r1: float, pos1: PointLike, r2: float, pos2: PointLike):
        pos1 = as_point(pos1)
        pos2 = as_point(pos2)
        if not (r1 > 0.0 and r2 > 0.0):
            raise ShapeError(
                ShapeErrorKind.INVALID_DIMENSION,
                f"Rubber requires positive radii, got r1={r1}, r2={r2}",
            )
        if pos1 == pos2:
            raise ShapeError(ShapeErrorKind.DEGENERATE_CENTER, "Rubber circle centers must differ")
        if not pos1.distance_to(pos2) + r2 <= r1:
            raise ShapeError(ShapeErrorKind.NOT_NESTED, "Rubber inner circle must lie inside the outer circle")
        self.r1 = float(r1)
        self.r2 = float(r2)
        self.pos1 = pos1
        self.pos2 = pos2

    def area(self) -> float:
        return math.pi * (self.r1 * self.r1 - self.r2 * self.r2)

    def frame_rect(self) -> FrameRect:
        side = 2.0 * self.r1
        return FrameRect(side, side, self.pos1)

    def center(self) -> Point:
        return self.pos2

    def move_to(self, point: PointLike) -> None:
        p = as_point(point)
        offset = self.pos1 - self.pos2
        self.pos2 = p
        self.pos1 = p + offset

    def move_by(self, dx: float, dy: float) -> None:
        delta = Point(dx, dy)
        self.pos1 = self.pos1 + delta
        self.pos2 = self.pos2 + delta

    def scale(self, k: float) -> None:
        check_scale_factor(k)
        self.r1 *= k
        self.r2 *= k
        self.pos1 = self.pos2 + k * (self.pos1 - self.pos2)

    def copy(self) -> "Rubber":
        return Rubber(self.r1, self.pos1, self.r2, self.pos2)

    def __repr__(self) -> str:
        return f"Rubber(r1={self.r1}, pos1={self.pos1}, r2={self.r2}, pos2={self.pos2})"


def _shoelace_terms(verts: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    x = verts[:, 0]
    y = verts[:, 1]
    xn = np.roll(x, -1)
    yn = np.roll(y, -1)
    cross = x * yn - xn * y
    return cross, x, y, xn, yn


def polygon_centroid(verts: np.ndarray) -> Point:
    """
    Area-weighted centroid of a simple polygon (shoelace formula).
    Undefined when the signed area is zero.
    """
    cross, x, y, xn, yn = _shoelace_terms(verts)
    signed_area = 0.5 * float(np.sum(cross))
    cx = float(np.sum((x + xn) * cross)) / (6.0 * signed_area)
    cy = float(np.sum((y + yn) * cross)) / (6.0 * signed_area)
    return Point(cx, cy)


class Polygon(Shape):
    """
    Simple polygon defined by an ordered list of vertices (2D points).
    Orientation can be CW or CCW. Self-intersection and collinear
    (zero-area) input are not checked.

    The vertex buffer is owned by the instance: copy() duplicates it and
    transfer() hands it to a new Polygon, leaving this one empty.
    """
    def __init__(self, vertices: Sequence[PointLike] | np.ndarray):
        try:
            verts = np.array([[p.x, p.y] if isinstance(p, Point) else p for p in vertices], dtype=float)
        except (TypeError, ValueError):
            raise ShapeError(
                ShapeErrorKind.TOO_FEW_VERTICES,
                "Polygon vertices must all be (x, y) pairs",
            ) from None
        if verts.ndim != 2 or verts.shape[0] < 3 or verts.shape[1] != 2:
            raise ShapeError(
                ShapeErrorKind.TOO_FEW_VERTICES,
                "Polygon requires an array/list of N>=3 vertices of shape (N,2)",
            )
        self._vertices = verts
        self._centroid = polygon_centroid(verts)

    def _require_vertices(self) -> np.ndarray:
        if self._vertices.shape[0] == 0:
            raise ShapeError(ShapeErrorKind.EMPTY_POLYGON, "Polygon vertices were transferred away")
        return self._vertices

    @property
    def vertices(self) -> np.ndarray:
        return self._vertices.copy()

    def __len__(self) -> int:
        return int(self._vertices.shape[0])

    def is_empty(self) -> bool:
        return self._vertices.shape[0] == 0

    def area(self) -> float:
        cross, *_ = _shoelace_terms(self._require_vertices())
        return abs(0.5 * float(np.sum(cross)))

    def frame_rect(self) -> FrameRect:
        verts = self._require_vertices()
        xmin, ymin = verts.min(axis=0)
        xmax, ymax = verts.max(axis=0)
        return FrameRect.from_extents(float(xmin), float(xmax), float(ymin), float(ymax))

    def center(self) -> Point:
        self._require_vertices()
        return self._centroid

    def move_by(self, dx: float, dy: float) -> None:
        verts = self._require_vertices()
        verts += np.array([dx, dy], dtype=float)
        self._centroid = Point(self._centroid.x + dx, self._centroid.y + dy)

    def scale(self, k: float) -> None:
        check_scale_factor(k)
        verts = self._require_vertices()
        c = np.array([self._centroid.x, self._centroid.y], dtype=float)
        self._vertices = c + (verts - c) * k

    @classmethod
    def _adopt(cls, verts: np.ndarray, centroid: Point) -> "Polygon":
        # Takes `verts` as-is; the centroid is not recomputed.
        poly = cls.__new__(cls)
        poly._vertices = verts
        poly._centroid = centroid
        return poly

    def copy(self) -> "Polygon":
        return Polygon._adopt(self._require_vertices().copy(), self._centroid)

    def transfer(self) -> "Polygon":
        verts = self._require_vertices()
        moved = Polygon._adopt(verts, self._centroid)
        self._vertices = np.empty((0, 2), dtype=float)
        logger.debug("Transferred %d polygon vertices", verts.shape[0])
        return moved

    def __repr__(self) -> str:
        return f"Polygon(vertices={self._vertices.tolist()})"
