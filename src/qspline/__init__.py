"""
Quadratic spline through plane points.

- linear_solver: Gaussian elimination with partial pivoting
- spline: piecewise quadratic interpolation and its sampling
- interpolate: piecewise linear resampling
- drawing: matplotlib and plotly drawing sinks
"""
from .exceptions import ParamError, SolverError, ShapeError, SingularMatrixError, NoUniqueSolutionError
from .matrix import Matrix
from .geometry import Point, make_points, scale_points
from .linear_solver import solve
from .spline import Segment, QuadraticSpline, SplineBuilder, fit
from .interpolate import densify

__version__ = '0.1.0'
