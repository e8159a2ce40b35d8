"""
Helpers shared by the functional calculus: shape validation, and moving between the containers accepted as input
(Matrix, numpy arrays, nested lists) and the numpy arrays that the numerical work is done on.
"""
from __future__ import annotations

from typing import Any, Tuple

import numpy as np
import numpy.typing as npt

from .matrix import Matrix


class NotSquareError(ValueError):
    """Raised when an operation which needs a square matrix is given a non-square one."""

    def __init__(self, where: str, shape: Tuple[int, ...]):
        self.where = where
        self.shape = tuple(shape)
        super().__init__(f"{where}: Matrix must be square, got shape {self.shape}")


def shape_of(A: Any) -> Tuple[int, ...]:
    return A.shape if isinstance(A, Matrix) else np.shape(A)


def check_square_mat(A: Any) -> bool:
    """
    Return True if A is a 2D matrix with as many rows as columns. The empty 0 x 0 matrix is square.

    >>> check_square_mat([[1, 2], [3, 4]]), check_square_mat([[1, 2, 3]]), check_square_mat([1, 2])
    (True, False, False)
    """
    shape = shape_of(A)
    return len(shape) == 2 and shape[0] == shape[1]


def require_square(A: Any, where: str):
    if not check_square_mat(A):
        raise NotSquareError(where, shape_of(A))


def as_array(A: Any) -> Tuple[npt.NDArray, bool]:
    """
    (A) ↦ (array, was_matrix). The array is a view onto A where numpy allows it, so callers must not write into it.
    """
    if isinstance(A, Matrix):
        return A.to_array(), True

    arr = np.asarray(A)
    if len(arr.shape) != 2:
        raise ValueError(f"Expected a 2D matrix, was given an array of shape {arr.shape}.")
    return arr, False


def as_complex(A: npt.NDArray) -> npt.NDArray:
    """Promote to complex128. The result never aliases the input."""
    return np.array(A, dtype=np.complex128, copy=True)


def wrap(result: npt.NDArray, was_matrix: bool):
    """Hand back a result in the same kind of container the input arrived in."""
    return Matrix.from_array(result) if was_matrix else result
