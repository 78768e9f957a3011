"""
Piecewise quadratic interpolation of a sequence of plane points.

Given points P_0 .. P_n-1 with increasing x, the curve consists of n-1 segments
    y = a_i x^2 + b_i x + c_i,  x in [x_i, x_i+1]
determined by the conditions:
- every segment passes through both its end points,
- neighbouring segments have equal first derivative at the shared point,
- the first segment is a straight line (a_0 = 0).
The conditions form a square linear system for the 3(n-1) coefficients,
unknown with index 3 i + j is the j-th coefficient of the segment i.
"""
import bisect
import logging
from dataclasses import dataclass
from typing import *
import numpy as np

from qspline.exceptions import ParamError, SolverError
from qspline.geometry import Point, make_points, is_strictly_increasing
from qspline.linear_solver import solve
from qspline.matrix import Matrix

N_COEFS = 3


@dataclass(frozen=True)
class Segment:
    """
    Single polynomial piece a x^2 + b x + c on the closed interval [x_min, x_max].
    """
    x_min: float
    x_max: float
    coefficients: Tuple[float, float, float]

    def eval(self, x: float) -> float:
        a, b, c = self.coefficients
        return a * x * x + b * x + c

    def derivative(self, x: float) -> float:
        a, b, _ = self.coefficients
        return 2 * a * x + b

    def contains(self, x: float) -> bool:
        return self.x_min <= x <= self.x_max


class QuadraticSpline:
    """
    Sequence of segments sharing the end points.

    A breakpoint x_i (0 < i < n-1) belongs to both neighbouring segments,
    lookup prefers the left one: the segment 0 owns [x_0, x_1], the segment
    i > 0 owns (x_i, x_i+1].
    """

    def __init__(self, segments: Sequence[Segment]):
        if len(segments) == 0:
            raise ParamError("Spline needs at least one segment.")
        self.segments = tuple(segments)
        self._x_max = [s.x_max for s in self.segments]
        self._ordered = all(s.x_min < s.x_max for s in self.segments) \
            and all(s.x_max == s_next.x_min for s, s_next in zip(self.segments[:-1], self.segments[1:]))

    @property
    def breakpoints(self) -> List[float]:
        return [s.x_min for s in self.segments] + [self.segments[-1].x_max]

    @property
    def domain(self) -> Tuple[float, float]:
        return self.segments[0].x_min, self.segments[-1].x_max

    def segment_index(self, x: float) -> int:
        """
        Index of the segment evaluated at `x`.
        :raises ValueError: `x` out of every segment.
        """
        if self._ordered:
            i = bisect.bisect_left(self._x_max, x)
            if i < len(self.segments) and self.segments[i].contains(x):
                return i
        else:
            for i, segment in enumerate(self.segments):
                if segment.contains(x):
                    return i
        raise ValueError(f"x = {x} out of the spline domain {self.domain}.")

    def segment_at(self, x: float) -> Segment:
        return self.segments[self.segment_index(x)]

    def __call__(self, x: float) -> float:
        return self.segment_at(x).eval(x)

    def derivative(self, x: float) -> float:
        return self.segment_at(x).derivative(x)

    def sample(self, step: float = 1.0) -> List[Point]:
        """
        Evaluate the spline on the grid x_min + k * step of every segment.

        Samples not greater than the previous one are dropped, so a breakpoint
        hit by the grids of both neighbouring segments appears only once
        and the x coordinates of the result are strictly increasing.
        Every sample is evaluated by the segment owning its x, see segment_index.
        :param step: positive distance of samples in x.
        :return: list of points
        """
        if not step > 0:
            raise ParamError(f"Sampling step must be positive, got: {step}")
        new_points = []
        for segment in self.segments:
            k = 0
            x = segment.x_min
            while x <= segment.x_max:
                if not new_points or x > new_points[-1].x:
                    new_points.append(Point(x, self(x)))
                k += 1
                x = segment.x_min + k * step
        return new_points


class SplineBuilder:
    """
    Assembles and solves the linear system for the quadratic spline through given points.

    Usage:
        builder = SplineBuilder([(1, 5), (3, 3), (5, 9), (8, 10)])
        spline = builder.make_spline()
        curve = spline.sample(step=1.0)
    """

    def __init__(self, points: Iterable):
        """
        :param points: sequence of at least two points (x, y), x should be strictly increasing.
        """
        self.points = tuple(make_points(points))
        if len(self.points) < 2:
            raise ParamError(f"At least 2 points needed, got: {len(self.points)}")
        if not is_strictly_increasing(self.points):
            logging.warning("Point x coordinates are not strictly increasing, the spline is not a function graph.")
        self.n_segments = len(self.points) - 1
        self.size = N_COEFS * self.n_segments

    def _row(self, segment: int, coefs: Sequence[float], row: np.ndarray = None) -> np.ndarray:
        if row is None:
            row = np.zeros(self.size)
        row[N_COEFS * segment: N_COEFS * (segment + 1)] = coefs
        return row

    def interpolation_equations(self):
        """
        Every segment passes through its end points: a x^2 + b x + c = y.
        """
        for i_seg in range(self.n_segments):
            for point in self.points[i_seg: i_seg + 2]:
                yield self._row(i_seg, [point.x * point.x, point.x, 1.0]), point.y

    def derivative_equations(self):
        """
        Equal derivatives at internal points: 2 a_l x + b_l - 2 a_r x - b_r = 0.
        """
        for i_pt in range(1, len(self.points) - 1):
            x = self.points[i_pt].x
            row = self._row(i_pt - 1, [2 * x, 1.0, 0.0])
            yield self._row(i_pt, [-2 * x, -1.0, 0.0], row), 0.0

    def boundary_equations(self):
        """
        Zero second derivative of the first segment: 2 a_0 = 0.
        """
        yield self._row(0, [2.0, 0.0, 0.0]), 0.0

    def build_system(self) -> Tuple[Matrix, Matrix]:
        """
        :return: (matrix, constants), square matrix of size 3 * n_segments and the column of right hand sides.
        """
        rows, constants = [], []
        for equations in (self.interpolation_equations(), self.derivative_equations(), self.boundary_equations()):
            for row, const in equations:
                rows.append(row)
                constants.append(const)
        if len(rows) != self.size:
            raise SolverError(f"Spline system has {len(rows)} equations for {self.size} unknowns.")
        return Matrix(np.array(rows)), Matrix.column(constants)

    def make_spline(self) -> QuadraticSpline:
        matrix, constants = self.build_system()
        coefs = solve(matrix, constants)
        segments = [
            Segment(p_min.x, p_max.x, tuple(coefs[N_COEFS * i: N_COEFS * (i + 1)]))
            for i, (p_min, p_max) in enumerate(zip(self.points[:-1], self.points[1:]))]
        return QuadraticSpline(segments)

    def fit(self, step: float = 1.0) -> List[Point]:
        """
        Make the spline and sample it.
        :param step: distance of the samples in x.
        :return: dense list of points on the curve.
        """
        logging.info(f"Quadratic spline, n points: {len(self.points)}, n segments: {self.n_segments}")
        return self.make_spline().sample(step)


def fit(points: Iterable, step: float = 1.0) -> List[Point]:
    """
    Sample the quadratic spline interpolating the `points`.
    :param points: at least two points (x, y) with strictly increasing x.
    :param step: distance of the samples in x.
    :return: list of points
    """
    return SplineBuilder(points).fit(step)
