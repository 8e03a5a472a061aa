# Re-export core geometry API for convenience
from .errors import ShapeError, ShapeErrorKind
from .geometry import (
    Point,
    FrameRect,
    Shape,
    Rectangle,
    Rubber,
    Polygon,
    as_point,
    polygon_centroid,
)
