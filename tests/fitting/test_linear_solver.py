import pytest
import numpy as np
import scipy.linalg as la

from qspline import solve, Matrix, ShapeError, SolverError, SingularMatrixError, NoUniqueSolutionError
from qspline.linear_solver import is_zero


class TestSolve:

    def test_identity(self):
        assert solve([[1, 0], [0, 1]], [[5], [7]]) == [5, 7]

    def test_small_system(self):
        matrix = [[2, 4, 1], [3, 2, 1], [0, 1, 2]]
        constants = [[1], [2], [4]]
        x = solve(matrix, constants)
        assert np.allclose(np.array(matrix) @ x, np.array(constants).ravel(), atol=1e-9)
        assert np.allclose(x, la.solve(matrix, np.array(constants).ravel()))

    def test_pivoting(self):
        # zero on the diagonal, solvable only with row exchange
        x = solve([[0, 1], [1, 0]], [[2], [3]])
        assert x == [3, 2]

        eps = 1e-14
        x = solve([[eps, 1], [1, 1]], [[1], [2]])
        assert np.allclose(x, [1, 1])

    def test_random_systems(self):
        rng = np.random.default_rng(1234)
        for size in [1, 2, 5, 10, 30]:
            for _ in range(5):
                a = rng.uniform(-10, 10, size=(size, size)) + size * np.eye(size)
                b = rng.uniform(-10, 10, size=(size, 1))
                x = solve(a, b)
                assert len(x) == size
                assert np.allclose(a @ x, b.ravel(), atol=1e-9)
                assert np.allclose(x, la.solve(a, b).ravel())

    def test_inputs_not_modified(self):
        a = Matrix([[0, 2, 1], [1, 1, 1], [4, 0, 1]])
        b = Matrix.column([1, 2, 3])
        a_copy, b_copy = a.clone(), b.clone()
        solve(a, b)
        assert a == a_copy
        assert b == b_copy

        rows = [[0.0, 1.0], [1.0, 0.0]]
        solve(rows, [[1], [2]])
        assert rows == [[0.0, 1.0], [1.0, 0.0]]

    def test_shape_errors(self):
        with pytest.raises(ShapeError):
            solve([[1, 2, 3], [4, 5, 6]], [[1], [2]])
        with pytest.raises(ShapeError):
            solve([[1, 2, 3], [4, 5, 6]], [[1, 2]])
        with pytest.raises(ShapeError):
            solve([[1, 0], [0, 1]], [[1], [2], [3]])
        with pytest.raises(ShapeError):
            solve([[1, 0], [0, 1]], [[1, 1], [2, 2]])
        with pytest.raises(ShapeError):
            solve([[1, 0], [0]], [[1], [2]])

    def test_singular(self):
        # first column zero
        with pytest.raises(SolverError):
            solve([[0, 1], [0, 1]], [[1], [2]])
        # zero row
        with pytest.raises((SingularMatrixError, NoUniqueSolutionError)):
            solve([[1, 2], [0, 0]], [[3], [1]])
        # dependent rows, inconsistent right hand side
        with pytest.raises((SingularMatrixError, NoUniqueSolutionError)):
            solve([[1, 2], [2, 4]], [[9], [19]])
        with pytest.raises(SolverError):
            solve([[1, 2, 3], [4, 5, 6], [5, 7, 9]], [[1], [1], [1]])

    def test_underdetermined_consistent(self):
        # Free unknowns are set to zero.
        assert solve([[1, 2], [2, 4]], [[9], [18]]) == [9, 0]
        assert solve([[0, 0], [0, 0]], [[0], [0]]) == [0, 0]

    def test_is_zero(self):
        assert is_zero(0.0)
        assert is_zero(-9e-11)
        assert not is_zero(1e-10)
        assert not is_zero(-1e-9)
