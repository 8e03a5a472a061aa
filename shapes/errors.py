from __future__ import annotations

from enum import Enum


class ShapeErrorKind(Enum):
    INVALID_DIMENSION = "invalid_dimension"
    DEGENERATE_CENTER = "degenerate_center"
    NOT_NESTED = "not_nested"
    TOO_FEW_VERTICES = "too_few_vertices"
    NON_POSITIVE_SCALE = "non_positive_scale"
    EMPTY_POLYGON = "empty_polygon"


class ShapeError(ValueError):
    """
    Invalid argument for a shape constructor or transform.
    The offending condition is available as `kind`.
    """
    def __init__(self, kind: ShapeErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


def check_scale_factor(k: float) -> None:
    if not k > 0.0:
        raise ShapeError(ShapeErrorKind.NON_POSITIVE_SCALE, f"scale factor must be positive, got {k}")
