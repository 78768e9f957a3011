"""
Direct solver of dense linear systems A x = b.

Gaussian elimination with partial pivoting followed by back-substitution.
Inputs are never modified: the solver clones the coefficient matrix and
appends the constants into a separate augmented working matrix.
"""
import logging
from typing import *
import numpy as np

from qspline.matrix import Matrix
from qspline.exceptions import ShapeError, SingularMatrixError, NoUniqueSolutionError

ZERO_TOL = 1e-10
# Absolute tolerance of all comparisons with zero.


def is_zero(val: float) -> bool:
    return abs(val) < ZERO_TOL


MatrixLike = Union[Matrix, Sequence[Sequence[float]]]


def solve(matrix: MatrixLike, constants: MatrixLike) -> List[float]:
    """
    Solve the system `matrix @ x = constants`.
    :param matrix: N x N coefficient matrix.
    :param constants: N x 1 matrix of right hand sides.
    :return: list of N unknowns, x[i] corresponds to the i-th column of `matrix`.
    :raises ShapeError: `matrix` is not square or `constants` is not N x 1.
    :raises SingularMatrixError: elimination meets a zero pivot.
    :raises NoUniqueSolutionError: back-substitution meets a zero diagonal with a nonzero residual.
    """
    matrix = Matrix.create(matrix)
    constants = Matrix.create(constants)
    size = matrix.ensure_square()
    constants.ensure_shape(size, 1)

    # Explicit working copy, the caller's matrices stay untouched.
    augmented = matrix.clone().augment(constants).to_array()
    logging.debug(f"Gauss elimination, size: {size}")
    _eliminate(augmented, size)
    return _back_substitute(augmented, size)


def _eliminate(aug: np.ndarray, size: int):
    """
    Reduce the augmented matrix to the upper triangular form in place.
    """
    for col in range(size - 1):
        for j in range(col + 1, size):
            if abs(aug[col, col]) < abs(aug[j, col]):
                aug[[col, j]] = aug[[j, col]]
                logging.debug(f"pivot swap: rows {col} <-> {j}")

        pivot_row = aug[col]
        for row in range(col + 1, size):
            if is_zero(aug[row, col]):
                continue
            if is_zero(pivot_row[col]):
                raise SingularMatrixError(f"Matrix is singular, zero pivot in column {col}.")
            factor = aug[row, col] / pivot_row[col]
            aug[row, col:] -= factor * pivot_row[col:]


def _back_substitute(aug: np.ndarray, size: int) -> List[float]:
    result = [0.0] * size
    for i in range(size - 1, -1, -1):
        value = aug[i, size]
        for j in range(size - 1, i, -1):
            value -= result[j] * aug[i, j]
        if is_zero(value):
            result[i] = 0.0
        elif is_zero(aug[i, i]):
            raise NoUniqueSolutionError(f"The system has no unique solution, zero diagonal in row {i}.")
        else:
            result[i] = float(value / aug[i, i])
    return result
