"""
Dense matrix with the shape fixed at construction.

Rows are stored in a float numpy array; the shape is validated once by the
constructor so the solver does not have to re-check ragged input.
"""
from typing import *
import numpy as np

from qspline.exceptions import ParamError, ShapeError

scalar_types = (int, float, np.integer, np.floating)


def check_matrix(mat, shape, values, idx=()):
    '''
    Check shape and type of scalar, vector or matrix.
    :param mat: Scalar, vector, or vector of vectors (i.e. matrix). Vector may be list or other iterable.
    :param shape: List of dimensions: [] for scalar, [ n ] for vector, [n_rows, n_cols] for matrix.
    If a value in this list is None, the dimension can be arbitrary. The shape list is set to actual dimensions
    of the matrix.
    :param values: Type or tuple of allowed types of elements of the matrix. E.g. ( int, float )
    :param idx: Internal. Used to pass actual index in the matrix for possible error messages.
    :return: the shape list
    '''
    if len(shape) == 0:
        if isinstance(mat, bool) or not isinstance(mat, values):
            raise ParamError("Element at index {} of type {}, expected instance of {}.".format(idx, type(mat), values))
        return shape

    if not hasattr(mat, '__len__'):
        raise ShapeError("Element at index {} is not a sequence.".format(idx))
    if shape[0] is None:
        shape[0] = len(mat)
    if len(mat) != shape[0]:
        raise ShapeError("Wrong len {} of element {}, should be {}.".format(len(mat), idx, shape[0]))
    for i, item in enumerate(mat):
        sub_shape = shape[1:]
        check_matrix(item, sub_shape, values, idx=(*idx, i))
        shape[1:] = sub_shape
    return shape


class Matrix:
    """
    Rectangular matrix of reals, row-major.

    Every row has the same length; the number of rows and columns can not
    change after construction. Operations producing a different matrix
    (clone, augment) always return a new instance.
    """

    @classmethod
    def create(cls, mat: Union['Matrix', Sequence[Sequence[float]]]) -> 'Matrix':
        """
        Return `mat` if it is already a Matrix, otherwise build one from nested sequences.
        """
        if isinstance(mat, cls):
            return mat
        return cls(mat)

    @classmethod
    def column(cls, values: Sequence[float]) -> 'Matrix':
        """
        Make N x 1 matrix from a flat sequence of values.
        """
        return cls([[v] for v in values])

    @classmethod
    def zeros(cls, n_rows: int, n_cols: int) -> 'Matrix':
        return cls._from_array(np.zeros((n_rows, n_cols)))

    @classmethod
    def _from_array(cls, array: np.ndarray) -> 'Matrix':
        # Trusted path for arrays produced internally.
        obj = cls.__new__(cls)
        obj._data = array
        return obj

    def __init__(self, rows: Sequence[Sequence[float]]):
        """
        :param rows: sequence of rows, each a sequence of numbers; at least one row and one column.
        """
        if isinstance(rows, np.ndarray):
            if rows.ndim != 2:
                raise ShapeError("Expected 2d array, got shape {}.".format(rows.shape))
            rows = rows.tolist()
        shape = check_matrix(rows, [None, None], scalar_types)
        if shape[0] == 0 or shape[1] is None or shape[1] == 0:
            raise ShapeError("Matrix must have at least one row and one column.")
        self._data = np.array(rows, dtype=float)

    @property
    def n_rows(self) -> int:
        return self._data.shape[0]

    @property
    def n_cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    def is_square(self) -> bool:
        return self.n_rows == self.n_cols

    def ensure_square(self) -> int:
        """
        Raise ShapeError if the matrix is not square.
        :return: size of the matrix
        """
        if not self.is_square():
            raise ShapeError("Matrix is not square: {} rows, {} columns.".format(*self.shape))
        return self.n_rows

    def ensure_shape(self, n_rows: int, n_cols: int):
        if self.shape != (n_rows, n_cols):
            raise ShapeError("Matrix has wrong shape {}, expected {}.".format(self.shape, (n_rows, n_cols)))

    def clone(self) -> 'Matrix':
        return Matrix._from_array(self._data.copy())

    def augment(self, column: 'Matrix') -> 'Matrix':
        """
        Return a new matrix with the columns of `column` appended to the right.
        Neither `self` nor `column` is modified.
        """
        if column.n_rows != self.n_rows:
            raise ShapeError("Can not augment {} matrix by {} matrix.".format(self.shape, column.shape))
        return Matrix._from_array(np.concatenate([self._data, column._data], axis=1))

    def to_array(self) -> np.ndarray:
        """
        Copy of the data as a 2d numpy array.
        """
        return self._data.copy()

    def to_list(self) -> List[List[float]]:
        return self._data.tolist()

    def __getitem__(self, idx):
        return self._data[idx]

    def __matmul__(self, other) -> 'Matrix':
        other = Matrix.create(other)
        if self.n_cols != other.n_rows:
            raise ShapeError("Can not multiply {} matrix by {} matrix.".format(self.shape, other.shape))
        return Matrix._from_array(self._data @ other._data)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.all(self._data == other._data))

    def __repr__(self):
        return "Matrix({})".format(self.to_list())
