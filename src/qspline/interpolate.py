"""
Piecewise linear resampling of a polyline.
"""
from typing import *
import numpy as np

from qspline.exceptions import ParamError
from qspline.geometry import Point, make_points


def densify(points: Iterable, step: float = 0.1) -> List[Point]:
    """
    Insert points along every segment of the polyline using linear interpolation.

    For consecutive points P, Q (P.x < Q.x) the samples x = P.x + k * step,
    P.x < x < Q.x are added between them. All input points are kept.
    Pairs with Q.x <= P.x get no inserted points.

    :param points: sequence of points (x, y)
    :param step: positive distance of the inserted points in x
    :return: new list of points
    """
    if not step > 0:
        raise ParamError(f"Step must be positive, got: {step}")
    points = make_points(points)
    if len(points) < 2:
        return list(points)

    new_points = []
    for current, next_pt in zip(points[:-1], points[1:]):
        new_points.append(current)
        if next_pt.x <= current.x:
            continue
        n_inner = int(np.ceil((next_pt.x - current.x) / step))
        x = current.x + step * np.arange(1, n_inner)
        x = x[x < next_pt.x]
        y = np.interp(x, [current.x, next_pt.x], [current.y, next_pt.y])
        new_points.extend(Point(float(xx), float(yy)) for xx, yy in zip(x, y))
    new_points.append(points[-1])
    return new_points
