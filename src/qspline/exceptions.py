"""
Exceptions raised by the solver and the spline builder.
"""


class ParamError(Exception):
    pass


class SolverError(Exception):
    pass


class ShapeError(SolverError):
    pass


class SingularMatrixError(SolverError):
    pass


class NoUniqueSolutionError(SolverError):
    pass
