"""
Plane points and their pre-processing.
"""
from typing import *

from qspline.exceptions import ParamError


class Point(NamedTuple):
    """
    Immutable point in the plane, y axis pointing up.
    """
    x: float
    y: float

    @classmethod
    def create(cls, xy) -> 'Point':
        """
        Make a Point from any pair of reals, e.g. a tuple, a list or a row of numpy array.
        """
        if isinstance(xy, cls):
            return xy
        try:
            x, y = xy
            return cls(float(x), float(y))
        except (TypeError, ValueError) as e:
            raise ParamError(f"Can not make a point from {xy!r}: {e}")


def make_points(coords: Iterable) -> List[Point]:
    return [Point.create(xy) for xy in coords]


def scale_points(points: Iterable, sx: float = 1.0, sy: float = 1.0) -> List[Point]:
    """
    Return new points with x multiplied by `sx` and y by `sy`.
    """
    return [Point(p.x * sx, p.y * sy) for p in make_points(points)]


def is_strictly_increasing(points: Sequence[Point]) -> bool:
    return all(a.x < b.x for a, b in zip(points[:-1], points[1:]))
