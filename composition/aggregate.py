from __future__ import annotations

from typing import Iterable, Sequence
import logging

from shapes import FrameRect, Shape, as_point
from shapes.errors import check_scale_factor
from shapes.geometry import PointLike


logger = logging.getLogger(__name__)


def total_area(shapes: Iterable[Shape]) -> float:
    # Left-to-right float sum so results are reproducible for a given order.
    total = 0.0
    for s in shapes:
        total += s.area()
    return total


def frame_union(shapes: Iterable[Shape]) -> FrameRect:
    """
    Bounding box of the frame rectangles of all shapes.
    Folds left/right/down/up extents, starting from the first shape's frame.
    """
    it = iter(shapes)
    try:
        first = next(it).frame_rect()
    except StopIteration:
        raise ValueError("frame_union requires at least one shape") from None
    left, right, down, up = first.left, first.right, first.down, first.up
    for s in it:
        fr = s.frame_rect()
        left = min(left, fr.left)
        right = max(right, fr.right)
        down = min(down, fr.down)
        up = max(up, fr.up)
    return FrameRect.from_extents(left, right, down, up)


def scale_about(shape: Shape, point: PointLike, k: float) -> None:
    """
    Scale `shape` by `k` as if its center were at `point`:
    move to the pivot, scale in place, then push the center back out
    by k times its original offset from the pivot.
    """
    check_scale_factor(k)
    p = as_point(point)
    p1 = shape.center()
    shape.move_to(p)
    shape.scale(k)
    p2 = shape.center()
    delta = k * (p1 - p2)
    shape.move_by(delta.x, delta.y)


def scale_all_about(shapes: Sequence[Shape], point: PointLike, k: float) -> None:
    check_scale_factor(k)
    p = as_point(point)
    # Every shape must answer center() before any of them is moved.
    for s in shapes:
        s.center()
    for s in shapes:
        scale_about(s, p, k)
    logger.debug("Scaled %d shapes by %s about (%s, %s)", len(shapes), k, p.x, p.y)
