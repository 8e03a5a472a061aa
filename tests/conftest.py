import matplotlib

matplotlib.use("Agg")

import pytest

from shapes import Polygon, Rectangle, Rubber


def make_rectangle() -> Rectangle:
    return Rectangle(1.0, 5.0, (2.0, 3.0))


def make_rubber() -> Rubber:
    return Rubber(4.4, (1.0, 1.0), 1.1, (1.1, 1.1))


def make_polygon() -> Polygon:
    return Polygon([(0.0, 0.0), (1.0, 0.0), (2.0, 2.0), (2.0, 3.0), (1.0, 4.0)])


@pytest.fixture(params=["rectangle", "rubber", "polygon"])
def any_shape(request):
    return {
        "rectangle": make_rectangle,
        "rubber": make_rubber,
        "polygon": make_polygon,
    }[request.param]()
