# -*- coding: utf-8 -*-
# vectormath/core/vector.py

"""
Project: vectormath
Date: 3/2/2026

Purpose:
--------
Fixed-length vector of reals with algebraic operations. Storage is an owned
NumPy float64 array; the class exposes indexed access and algebra methods only,
so nothing outside this module can resize a vector behind its back.

Main Tasks:
-----------
   1. Binary algebra that allocates a new Vector: add, subtract, dot, cross,
      element-wise multiply/divide.
   2. Chainable in-place operations that return `self`: normalize, invert,
      rotate2d, zeros, ones, random.
   3. Planar and n-dimensional angles: signed_angle (2D only), angle.

Notes:
------
   - Accepted operands for add/subtract/dot: Vector, 1D numeric sequence
     (list/tuple/ndarray), or a real number. A length-1 sequence broadcasts.
   - NaN propagates through arithmetic. Division by zero (normalize of a zero
     vector, element-wise division) is not guarded and yields inf/NaN.
"""

from collections.abc import Iterable
from typing import Iterator, Optional, Sequence, Union
import math
import numbers
import numpy as np

from ..errors import ShapeMismatchError, TypeMismatchError

__all__ = ["Vector", "is_real"]

Operand = Union["Vector", Sequence[float], np.ndarray, float]


def is_real(value) -> bool:
    """True for real, non-NaN numbers. Booleans are not numbers here."""
    if isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, numbers.Real):
        return False
    return not math.isnan(value)


def _as_array(value) -> Optional[np.ndarray]:
    """
    Return `value` as a 1D float64 array if it is a vector-like operand, else None.

    Raises
    ------
    TypeMismatchError
        If `value` is a sequence that is not a flat sequence of numbers.
    """
    if isinstance(value, Vector):
        return value._data
    if isinstance(value, (list, tuple, np.ndarray)):
        try:
            arr = np.asarray(value, dtype=np.float64)
        except (TypeError, ValueError):
            raise TypeMismatchError("Sequence operands must contain numbers only",
                                    {"type": type(value).__name__})
        if arr.ndim != 1:
            raise TypeMismatchError("Sequence operands must be one-dimensional",
                                    {"ndim": arr.ndim})
        return arr
    return None


class Vector:
    """
    Real vector of any (fixed) dimension.

    Examples
    --------
    >>> v = Vector(4, -1, 9)
    >>> w = Vector.from_sequence([4, 5, 6])
    >>> v.add(w)
    Vector(8.0, 4.0, 15.0)
    >>> Vector(1, 0).rotate2d(math.pi / 2).invert()   # chained, in place
    """

    __slots__ = ("_data",)
    __hash__ = None  # mutable

    def __init__(self, *values: float):
        self._data = np.array(values, dtype=np.float64)

    # --------------------
    # Construction
    # --------------------
    @classmethod
    def from_sequence(cls, values: Iterable[float]) -> "Vector":
        """Copy the numbers of any iterable into a new Vector."""
        if isinstance(values, Vector):
            return values.copy()
        if not isinstance(values, (list, tuple, np.ndarray)):
            if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
                raise TypeMismatchError("Vector requires an iterable of numbers",
                                        {"type": type(values).__name__})
            values = list(values)
        arr = _as_array(values)
        return cls._wrap(arr.copy())

    @classmethod
    def of_size(cls, size: int) -> "Vector":
        """Zero vector of the given dimension."""
        return cls._wrap(np.zeros(int(size), dtype=np.float64))

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "Vector":
        # takes ownership of `arr`; callers pass freshly allocated arrays
        vec = cls.__new__(cls)
        vec._data = arr
        return vec

    def copy(self) -> "Vector":
        return Vector._wrap(self._data.copy())

    # --------------------
    # Sequence protocol
    # --------------------
    def __len__(self) -> int:
        return int(self._data.shape[0])

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector._wrap(self._data[index].copy())
        return float(self._data[index])

    def __setitem__(self, index: int, value: float) -> None:
        if not isinstance(value, numbers.Real) or isinstance(value, (bool, np.bool_)):
            raise TypeMismatchError("Vector elements must be real numbers",
                                    {"type": type(value).__name__})
        self._data[index] = value

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def __eq__(self, other) -> bool:
        if isinstance(other, Vector):
            return np.array_equal(self._data, other._data)
        if isinstance(other, (list, tuple, np.ndarray)):
            try:
                arr = np.asarray(other, dtype=np.float64)
            except (TypeError, ValueError):
                return False
            return arr.shape == self._data.shape and np.array_equal(self._data, arr)
        return NotImplemented

    def __repr__(self) -> str:
        return "Vector({})".format(", ".join(repr(x) for x in self._data.tolist()))

    def tolist(self) -> list:
        return self._data.tolist()

    def to_array(self) -> np.ndarray:
        """Copy of the underlying float64 array."""
        return self._data.copy()

    # --------------------
    # In-place fills
    # --------------------
    def zeros(self) -> "Vector":
        self._data.fill(0.0)
        return self

    def ones(self) -> "Vector":
        self._data.fill(1.0)
        return self

    def random(self, rng: Optional[np.random.Generator] = None) -> "Vector":
        """Fill with uniform samples in [0, 1). Combine with normalize() for a random direction."""
        rng = rng if rng is not None else np.random.default_rng()
        self._data[:] = rng.random(self._data.shape[0])
        return self

    # --------------------
    # Algebra (new vector)
    # --------------------
    def add(self, other: Operand) -> "Vector":
        """
        Add a vector, a length-1 sequence (broadcast) or a scalar.

        Returns
        -------
        Vector
            New vector; `self` is untouched.

        Raises
        ------
        ShapeMismatchError
            If `other` is a sequence whose length is neither len(self) nor 1.
        TypeMismatchError
            If `other` is not a vector, numeric sequence or real number.
        """
        arr = _as_array(other)
        if arr is not None:
            if arr.shape[0] != len(self) and arr.shape[0] != 1:
                raise ShapeMismatchError(
                    "Can't add vectors having unequal dimensions or dimension not equal to 1",
                    {"left": len(self), "right": int(arr.shape[0])},
                )
            return Vector._wrap(self._data + arr)
        if is_real(other):
            return Vector._wrap(self._data + float(other))
        raise TypeMismatchError("Parameter must be of type Vector, sequence of numbers or number",
                                {"type": type(other).__name__})

    def subtract(self, other: Operand) -> "Vector":
        """self - other, computed as self + (-other). Same operand rules as add()."""
        if is_real(other):
            return self.add(-float(other))
        negated = Vector.from_sequence(other) if _as_array(other) is not None else other
        if isinstance(negated, Vector):
            negated.invert()
        return self.add(negated)

    def dot(self, other: Operand) -> Union["Vector", float]:
        """
        Scalar product or scalar multiplication.

        - length-n vector/sequence -> inner product (float)
        - length-1 vector/sequence -> scalar multiplication (Vector)
        - real number              -> scalar multiplication (Vector)
        """
        arr = _as_array(other)
        if arr is not None:
            if arr.shape[0] == 1:
                return self._product(float(arr[0]))
            return self._scalar_product(arr)
        if is_real(other):
            return self._product(float(other))
        raise TypeMismatchError("Multiplication requires a vector, sequence or a number as input",
                                {"type": type(other).__name__})

    def cross(self, other: Operand) -> "Vector":
        """Vector product; both operands must be 3-dimensional."""
        if len(self) != 3:
            raise ShapeMismatchError(
                "Cross product not available for vectors with dimension not equal to 3",
                {"dimension": len(self)},
            )
        arr = _as_array(other)
        if arr is None:
            raise TypeMismatchError("Cross product requires a vector or sequence",
                                    {"type": type(other).__name__})
        if arr.shape[0] != 3:
            raise ShapeMismatchError("Can't build the vector-product of unequally sized vectors",
                                     {"left": 3, "right": int(arr.shape[0])})
        a, b = self._data, arr
        return Vector(
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        )

    def multiply_element_wise(self, other: Operand) -> "Vector":
        """Hadamard product."""
        arr = self._same_length(other, "Can't multiply unequal sized vectors element-wise")
        return Vector._wrap(self._data * arr)

    def divide_element_wise(self, other: Operand) -> "Vector":
        arr = self._same_length(other, "Can't divide unequal sized vectors element-wise")
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vector._wrap(self._data / arr)

    # --------------------
    # Metrics & angles
    # --------------------
    @property
    def distance(self) -> float:
        """Euclidean norm."""
        return float(np.sqrt(np.dot(self._data, self._data)))

    def signed_angle(self, other: "Vector") -> float:
        """
        Signed angle in (-pi, pi] that rotates `self` onto `other`.

        Looking along `self`, a positive angle means `other` points to the left,
        a negative one that it points to the right.

        Raises
        ------
        ShapeMismatchError
            If either vector is not 2-dimensional.
        """
        arr = _as_array(other)
        if arr is None:
            raise TypeMismatchError("Signed angle requires a vector or sequence",
                                    {"type": type(other).__name__})
        if len(self) != 2 or arr.shape[0] != 2:
            raise ShapeMismatchError("Vector dimensions must be 2",
                                     {"left": len(self), "right": int(arr.shape[0])})
        angle = math.atan2(arr[1], arr[0]) - math.atan2(self._data[1], self._data[0])
        if angle > math.pi:
            angle -= 2.0 * math.pi
        elif angle <= -math.pi:
            angle += 2.0 * math.pi
        return angle

    def angle(self, other: "Vector") -> float:
        """Unsigned angle [radians] in n dimensions; lengths must match."""
        arr = _as_array(other)
        if arr is None:
            raise TypeMismatchError("Angle requires a vector or sequence",
                                    {"type": type(other).__name__})
        product = self._scalar_product(arr)
        norms = np.float64(self.distance) * np.sqrt(np.dot(arr, arr))
        with np.errstate(divide="ignore", invalid="ignore"):
            cosine = np.float64(product) / norms
        # rounding can push parallel vectors just past +-1
        return float(np.arccos(np.clip(cosine, -1.0, 1.0)))

    # --------------------
    # In-place transforms (chainable)
    # --------------------
    def normalize(self) -> "Vector":
        """Scale to unit length in place. A zero vector turns into NaNs."""
        norm = self.distance
        with np.errstate(divide="ignore", invalid="ignore"):
            self._data /= norm
        return self

    def invert(self) -> "Vector":
        """Negate every element in place; invert().invert() is the identity."""
        np.negative(self._data, out=self._data)
        return self

    def rotate2d(self, angle: float) -> "Vector":
        """
        Rotate a 2D vector in place by `angle` [radians] (counter-clockwise positive).

            R = | cos(a)  -sin(a) |
                | sin(a)   cos(a) |
        """
        if len(self) != 2:
            raise ShapeMismatchError("Rotation in two dimensions requires a two dimensional vector",
                                     {"dimension": len(self)})
        c, s = math.cos(angle), math.sin(angle)
        x, y = float(self._data[0]), float(self._data[1])
        self._data[0] = c * x - s * y
        self._data[1] = s * x + c * y
        return self

    # --------------------
    # Internals
    # --------------------
    def _scalar_product(self, arr: np.ndarray) -> float:
        if arr.shape[0] != len(self):
            raise ShapeMismatchError("Can't multiply vectors having unequal dimensions",
                                     {"left": len(self), "right": int(arr.shape[0])})
        return float(np.dot(self._data, arr))

    def _product(self, scalar: float) -> "Vector":
        return Vector._wrap(self._data * scalar)

    def _same_length(self, other, message: str) -> np.ndarray:
        arr = _as_array(other)
        if arr is None:
            raise TypeMismatchError("Element-wise operations require a vector or sequence",
                                    {"type": type(other).__name__})
        if arr.shape[0] != len(self):
            raise ShapeMismatchError(message, {"left": len(self), "right": int(arr.shape[0])})
        return arr
