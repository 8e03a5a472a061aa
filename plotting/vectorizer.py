import numpy as np
import matplotlib.pyplot as plt
from shapely.geometry import Polygon as ShapelyPolygon, Point as ShapelyPoint, box
from typing import Any, Iterable, List, Optional, Tuple
import io
import logging
from PIL import Image

from shapes import FrameRect, Polygon, Rectangle, Rubber, Shape
from composition.aggregate import frame_union
from composition.config import FRAME_COLOR, SHAPE_COLORS, UNION_FRAME_COLOR

logger = logging.getLogger(__name__)

CIRCLE_RESOLUTION = 64


def shape_to_shapely(shape: Shape) -> Any:
    if isinstance(shape, Rectangle):
        fr = shape.frame_rect()
        return box(fr.left, fr.down, fr.right, fr.up)
    if isinstance(shape, Rubber):
        outer = ShapelyPoint(shape.pos1.x, shape.pos1.y).buffer(shape.r1, quad_segs=CIRCLE_RESOLUTION)
        inner = ShapelyPoint(shape.pos2.x, shape.pos2.y).buffer(shape.r2, quad_segs=CIRCLE_RESOLUTION)
        return outer.difference(inner)
    if isinstance(shape, Polygon):
        geom = ShapelyPolygon(shape.vertices)
        if not geom.is_valid:
            logger.debug("Repairing invalid polygon with buffer(0)")
            geom = geom.buffer(0)
        return geom
    raise ValueError(f"Unknown shape kind {type(shape).__name__}")


def _frame_outline(fr: FrameRect) -> Tuple[List[float], List[float]]:
    xs = [fr.left, fr.right, fr.right, fr.left, fr.left]
    ys = [fr.down, fr.down, fr.up, fr.up, fr.down]
    return xs, ys


def _fill_geom(ax: plt.Axes, geom: Any, rgb: Tuple[float, float, float]) -> None:
    rgba = np.append(np.array(rgb, dtype=float), 0.75)
    parts = geom.geoms if hasattr(geom, 'geoms') else [geom]
    for part in parts:
        if not isinstance(part, ShapelyPolygon) or part.is_empty:
            continue
        x, y = part.exterior.xy
        ax.fill(x, y, fc=rgba, ec=rgba, linewidth=0.5, joinstyle='round')
        for interior in part.interiors:
            xi, yi = interior.xy
            ax.fill(xi, yi, fc='white', ec=rgba, linewidth=0.5)


def draw_scene_on_axis(
    ax: plt.Axes,
    shapes: Iterable[Shape],
    draw_frames: bool = True,
    margin: float = 0.1,
) -> None:
    """
    Draws the shapes filled, optionally with each frame rectangle dashed
    and the frame of the whole collection solid.
    Axis limits are a square around the union frame.
    """
    shapes = list(shapes)
    if not shapes:
        ax.set_aspect('equal')
        ax.axis('off')
        return

    union = frame_union(shapes)
    half_side = max(union.width, union.height) / 2 + margin

    ax.set_aspect('equal')
    ax.set_xlim(union.pos.x - half_side, union.pos.x + half_side)
    ax.set_ylim(union.pos.y - half_side, union.pos.y + half_side)
    ax.axis('off')

    for s in shapes:
        rgb = SHAPE_COLORS.get(type(s).__name__, (0.6, 0.6, 0.6))
        _fill_geom(ax, shape_to_shapely(s), rgb)
        if draw_frames:
            xs, ys = _frame_outline(s.frame_rect())
            ax.plot(xs, ys, color=FRAME_COLOR, linestyle='--', linewidth=0.8)

    if draw_frames:
        xs, ys = _frame_outline(union)
        ax.plot(xs, ys, color=UNION_FRAME_COLOR, linewidth=1.2)


def save_scene_as_svg(
    shapes: Iterable[Shape],
    filename: str,
    draw_frames: bool = True,
) -> None:
    fig, ax = plt.subplots(figsize=(6, 6))

    draw_scene_on_axis(ax, shapes, draw_frames=draw_frames)

    fig.savefig(
        filename,
        format='svg',
        bbox_inches='tight',
        pad_inches=0
    )
    plt.close(fig)


def save_scene_as_png(
    shapes: Iterable[Shape],
    filename: Optional[str] = None,
    resolution: int = 128,
    draw_frames: bool = True,
) -> Optional[Image.Image]:
    """
    Saves the shapes as a PNG of roughly `resolution` pixels per side,
    or returns the PIL Image object if filename is None (in-memory rendering).
    """
    dpi = resolution / 3.0

    fig, ax = plt.subplots(figsize=(3, 3))

    draw_scene_on_axis(ax, shapes, draw_frames=draw_frames)

    if filename is None:
        buffer = io.BytesIO()
        fig.savefig(
            buffer,
            format='png',
            dpi=dpi,
            bbox_inches='tight',
            pad_inches=0,
            transparent=False,
            facecolor='white'
        )
        plt.close(fig)
        buffer.seek(0)
        return Image.open(buffer)

    fig.savefig(
        filename,
        format='png',
        dpi=dpi,
        bbox_inches='tight',
        pad_inches=0,
        transparent=False,
        facecolor='white'
    )
    plt.close(fig)
    return None
