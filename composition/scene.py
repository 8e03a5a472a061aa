from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from shapes import FrameRect, Polygon, Rectangle, Rubber, Shape
from shapes.geometry import PointLike

from .aggregate import frame_union, scale_all_about, total_area
from .config import ReportConfig


@dataclass
class Scene:
    """
    Ordered collection of shapes transformed together.
    """
    shapes: List[Shape] = field(default_factory=list)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.shapes)

    def __len__(self) -> int:
        return len(self.shapes)

    def add(self, shape: Shape) -> None:
        self.shapes.append(shape)

    def total_area(self) -> float:
        return total_area(self.shapes)

    def frame_rect(self) -> FrameRect:
        return frame_union(self.shapes)

    def scale_about(self, point: PointLike, k: float) -> None:
        scale_all_about(self.shapes, point, k)

    def snapshot(self) -> "Scene":
        return Scene([s.copy() for s in self.shapes])


def default_scene() -> Scene:
    """
    Rectangle, polygon and rubber ring used by the console driver.
    """
    return Scene([
        Rectangle(1.0, 5.0, (2.0, 3.0)),
        Polygon([(0.0, 0.0), (1.0, 0.0), (2.0, 2.0), (2.0, 3.0), (1.0, 4.0)]),
        Rubber(4.4, (1.0, 1.0), 1.1, (1.1, 1.1)),
    ])


def _format_frame(fr: FrameRect, precision: int) -> str:
    return " ".join(f"{v:.{precision}f}" for v in (fr.left, fr.down, fr.right, fr.up))


def format_report(scene: Scene, cfg: ReportConfig = ReportConfig()) -> str:
    """
    Two lines: total area, then `left down right up` of every shape's
    frame followed by the frame of the whole scene.
    """
    p = cfg.precision
    frames = [s.frame_rect() for s in scene]
    frames.append(scene.frame_rect())
    return "\n".join([
        f"{scene.total_area():.{p}f}",
        " ".join(_format_frame(fr, p) for fr in frames),
    ])
