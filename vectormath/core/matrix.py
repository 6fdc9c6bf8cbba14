# -*- coding: utf-8 -*-
# vectormath/core/matrix.py

"""
Project: vectormath
Date: 3/3/2026

Purpose:
--------
Small dense matrix made of Vector rows: shape validation, determinant, trace,
transpose, Gaussian forward elimination, Cramer's-rule solve and products.

Main Tasks:
-----------
   1. Own an ordered list of equally sized Vector rows; revalidate lazily on `shape`.
   2. In-place operations returning `self`: identity, transpose, diagonalize,
      zeros, ones, random.
   3. Value-returning operations: determinant, trace, extract, solve, dot.

Notes:
------
   - Determinant uses cofactor expansion along row 0 (O(n!)); meant for matrices
     up to roughly 10x10.
   - diagonalize() performs no pivoting; a zero pivot yields inf/NaN entries.
   - solve() returns None for singular systems instead of raising.
"""

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union
import logging
import numbers
import numpy as np

from ..errors import RaggedMatrixError, RangeError, ShapeMismatchError, TypeMismatchError
from .vector import Vector, is_real

logger = logging.getLogger(__name__)

__all__ = ["Matrix"]


def _to_row(row) -> Vector:
    if isinstance(row, Vector):
        return row.copy()
    return Vector.from_sequence(row)


def _determinant(a: np.ndarray) -> float:
    """
    Recursive cofactor expansion along the first row.

    Base cases: 0x0 -> 1.0 (empty product), 1x1 -> the entry, 2x2 -> ad - bc.
    """
    n = a.shape[0]
    if n == 0:
        return 1.0
    if n == 1:
        return float(a[0, 0])
    if n == 2:
        return float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])
    det = 0.0
    for i in range(n):
        minor = np.delete(a[1:], i, axis=1)
        sign = 1.0 if i % 2 == 0 else -1.0
        det += sign * float(a[0, i]) * _determinant(minor)
    return det


def _valid_range(rng: Sequence[int], size: int) -> bool:
    lo, hi = rng
    return 0 <= lo < size and lo <= hi < size


class Matrix:
    """
    Dense matrix of Vector rows.

    Examples
    --------
    >>> Matrix()                 # empty, shape (0, 0)
    >>> Matrix(2, 3)             # 2x3 zeros
    >>> Matrix.from_rows([[1, 2], [3, 4]]).determinant
    -2.0
    """

    __slots__ = ("_rows",)
    __hash__ = None

    def __init__(self, rows: Optional[int] = None, cols: Optional[int] = None):
        self._rows: List[Vector] = []
        if rows is None or cols is None:
            return
        if isinstance(rows, bool) or isinstance(cols, bool) \
                or not isinstance(rows, numbers.Integral) or not isinstance(cols, numbers.Integral):
            raise TypeMismatchError("Matrix dimensions must be integers",
                                    {"rows": rows, "cols": cols})
        if rows < 0 or cols < 0:
            raise RangeError("Matrix dimensions must be >= 0", {"rows": rows, "cols": cols})
        self._rows = [Vector.of_size(cols) for _ in range(int(rows))]

    # --------------------
    # Construction
    # --------------------
    @classmethod
    def from_rows(cls, rows: Iterable) -> "Matrix":
        """
        Build a matrix by copying rows (Vectors, sequences, or a 2D ndarray).

        Raises
        ------
        RaggedMatrixError
            If the rows have different lengths.
        """
        matrix = cls()
        matrix.load(rows)
        return matrix

    def load(self, rows: Iterable) -> "Matrix":
        """Replace the contents in place with copies of `rows` and validate."""
        if isinstance(rows, Matrix):
            rows = list(rows._rows)
        self._rows = [_to_row(r) for r in rows]
        self._validate()
        return self

    def copy(self) -> "Matrix":
        out = Matrix()
        out._rows = [r.copy() for r in self._rows]
        return out

    # --------------------
    # Container protocol
    # --------------------
    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: int) -> Vector:
        # live row: m[i][j] = x writes through
        return self._rows[index]

    def __setitem__(self, index: int, row) -> None:
        # may leave the matrix ragged; `shape` will report it
        self._rows[index] = _to_row(row)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._rows)

    def __eq__(self, other) -> bool:
        if isinstance(other, Matrix):
            return self.tolist() == other.tolist()
        if isinstance(other, (list, tuple)):
            return self.tolist() == [list(r) for r in other]
        return NotImplemented

    def __repr__(self) -> str:
        return "Matrix({})".format(self.tolist())

    def tolist(self) -> List[List[float]]:
        return [r.tolist() for r in self._rows]

    def to_array(self) -> np.ndarray:
        """(rows, cols) float64 copy; raises on ragged rows."""
        n_rows, n_cols = self.shape
        if n_rows == 0:
            return np.zeros((0, 0), dtype=np.float64)
        return np.array([r.to_array() for r in self._rows], dtype=np.float64).reshape(n_rows, n_cols)

    # --------------------
    # Shape
    # --------------------
    @property
    def shape(self) -> Tuple[int, int]:
        """(row count, column count). Revalidates row lengths on every access."""
        if not self._rows:
            return (0, 0)
        self._validate()
        return (len(self._rows), len(self._rows[0]))

    def _validate(self) -> None:
        if not self._rows:
            return
        expected = len(self._rows[0])
        for row in self._rows:
            if len(row) != expected:
                raise RaggedMatrixError(
                    "Your matrix is broken, it contains rows with different dimensions: "
                    "{} and {}".format(expected, len(row))
                )

    @property
    def is_square(self) -> bool:
        n_rows, n_cols = self.shape
        return n_rows == n_cols

    # --------------------
    # In-place operations
    # --------------------
    def identity(self, size: Optional[int] = None) -> "Matrix":
        """
        Turn this matrix into an identity matrix.

        With `size`, contents are replaced by a size x size identity. Without it,
        the matrix must already be square and is reset in place.
        """
        if size is not None:
            if not is_real(size) or size < 0 or not float(size).is_integer():
                raise RangeError("Size must be a non-negative integer value", {"size": size})
            n = int(size)
            self._rows = [Vector.from_sequence(row) for row in np.eye(n)]
            return self
        if not self.is_square:
            raise ShapeMismatchError("Matrix has to be NxN shaped", {"shape": self.shape})
        for i, row in enumerate(self._rows):
            row.zeros()
            row[i] = 1.0
        return self

    def zeros(self) -> "Matrix":
        for row in self._rows:
            row.zeros()
        return self

    def ones(self) -> "Matrix":
        for row in self._rows:
            row.ones()
        return self

    def random(self, rng: Optional[np.random.Generator] = None) -> "Matrix":
        rng = rng if rng is not None else np.random.default_rng()
        for row in self._rows:
            row.random(rng)
        return self

    def transpose(self) -> "Matrix":
        """
        Swap rows and columns in place.

        A matrix with no rows has shape (0, 0), so an n x 0 matrix transposes to (0, 0)
        rather than (0, n).
        """
        data = self.to_array()
        n_rows, n_cols = data.shape
        self._rows = [Vector.from_sequence(data[:, j]) for j in range(n_cols)] if n_rows else []
        return self

    def diagonalize(self) -> "Matrix":
        """
        Forward Gaussian elimination towards upper-triangular form, in place.

        For each row i and each row j below it, subtracts (M[j][i] / M[i][i]) * row_i
        from row_j. No pivoting.
        """
        a = self.to_array()
        n_rows, n_cols = a.shape
        with np.errstate(divide="ignore", invalid="ignore"):
            for i in range(min(n_rows, n_cols)):
                for j in range(i + 1, n_rows):
                    factor = a[j, i] / a[i, i]
                    a[j] = a[j] - factor * a[i]
        self._rows = [Vector.from_sequence(row) for row in a]
        return self

    # --------------------
    # Scalars
    # --------------------
    @property
    def determinant(self) -> float:
        """Determinant of an NxN matrix (cofactor expansion)."""
        if not self.is_square:
            raise ShapeMismatchError("Determinants require matrices having shape NxN",
                                     {"shape": self.shape})
        return _determinant(self.to_array())

    @property
    def trace(self) -> float:
        if not self.is_square:
            raise ShapeMismatchError("Trace requires a NxN matrix", {"shape": self.shape})
        return float(sum(self._rows[i][i] for i in range(len(self._rows))))

    # --------------------
    # Value-returning operations
    # --------------------
    def extract(self, row_range: Sequence[int], col_range: Sequence[int]) -> "Matrix":
        """
        Sub-matrix bounded by inclusive [min, max] row and column ranges.

        Raises
        ------
        RangeError
            If either range is out of bounds or inverted.
        """
        shape = self.shape
        if not (_valid_range(row_range, shape[0]) and _valid_range(col_range, shape[1])):
            raise RangeError("Invalid range: {} {} for shape {}".format(
                list(row_range), list(col_range), list(shape)))
        (r0, r1), (c0, c1) = row_range, col_range
        return Matrix.from_rows(self.to_array()[r0:r1 + 1, c0:c1 + 1])

    def solve(self, vector: Union[Vector, Sequence[float]]) -> Optional[Vector]:
        """
        Solve M x = vector with Cramer's rule.

        Returns
        -------
        Vector or None
            The solution, or None if the determinant is zero (singular system).
            A zero solution component is a valid result.

        Raises
        ------
        ShapeMismatchError
            If len(vector) differs from the column count, or M is not square.
        """
        rhs = vector if isinstance(vector, Vector) else Vector.from_sequence(vector)
        n_cols = self.shape[1]
        if len(rhs) != n_cols:
            raise ShapeMismatchError("Vector has to be of size {} but is {}".format(n_cols, len(rhs)))

        det = self.determinant
        if det == 0:
            logger.debug("solve(): singular %s matrix, no solution.", self.shape)
            return None

        numerators = Vector.of_size(len(rhs))
        for i in range(len(rhs)):
            replaced = self.copy().transpose()
            replaced[i] = rhs
            replaced.transpose()
            numerators[i] = replaced.determinant
        return numerators.dot(1.0 / det)

    def dot(self, other: Union[Vector, "Matrix", float]) -> Union[Vector, "Matrix"]:
        """
        Matrix product with a Vector, a Matrix, or a real scalar.

        - Vector (len == cols)     -> Vector
        - Matrix (rows == my cols) -> Matrix; `other` is not modified
        - real number              -> new, element-wise scaled Matrix
        """
        if isinstance(other, Vector):
            return self._vector_multiplication(other)
        if isinstance(other, Matrix):
            return self._matrix_multiplication(other)
        if is_real(other):
            return Matrix.from_rows(self.to_array() * float(other))
        raise TypeMismatchError("Multiplication requires a Vector, a Matrix or a number as parameter",
                                {"type": type(other).__name__})

    def _vector_multiplication(self, vector: Vector) -> Vector:
        n_rows, n_cols = self.shape
        if len(vector) != n_cols:
            raise ShapeMismatchError(
                "Matrix-vector multiplication requires the dimensions to be (MxN) and N",
                {"shape": (n_rows, n_cols), "vector": len(vector)},
            )
        return Vector.from_sequence(self.to_array().reshape(n_rows, n_cols) @ vector.to_array())

    def _matrix_multiplication(self, other: "Matrix") -> "Matrix":
        left, right = self.shape, other.shape
        if left[1] != right[0]:
            raise ShapeMismatchError(
                "Matrix shapes invalid. Matrices have to be [NxM] and [MxP] shaped",
                {"left": left, "right": right},
            )
        return Matrix.from_rows(self.to_array() @ other.to_array())
