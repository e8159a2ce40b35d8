"""
functional: matrix functional calculus.

For a diagonalisable square matrix A = V diag(λ_1, ..., λ_n) V^-1 and a scalar function f, the generalised matrix
function is f(A) = V diag(f(λ_1), ..., f(λ_n)) V^-1. This is what funm() computes, and the named functions expm(),
logm(), sqrtm(), sinm(), cosm() and absm() are instances of it. The element-wise map fun() instead applies f to each
entry on its own, and makes sense for matrices of any shape.

Every function accepts a Matrix, a 2D numpy array, or anything numpy.asarray() turns into one, never modifies its
input, and returns a Matrix if it was given a Matrix and a numpy array otherwise.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Tuple

import numpy as np
import numpy.typing as npt

from .internal import as_array, as_complex, require_square, wrap
from .matrix import Matrix

log = logging.getLogger(__name__)

# Eigenvector bases with a condition number above this still get used, but a warning is logged: the matrix is close to
# defective, and the inversion in funm() is losing most of its accuracy.
COND_WARNING = 1e12

Eigendecomposition = Tuple[npt.NDArray, npt.NDArray]


def eigendecompose(A: Any) -> Eigendecomposition:
    """
    (n, n) ↦ (n), (n, n). Return the eigenvalues Λ and a matrix V whose columns are the corresponding eigenvectors,
    both complex, so that A = V diag(Λ) V^-1 whenever V is invertible. The eigenvalues come in no particular order.
    """
    require_square(A, 'eigendecompose')
    arr, _ = as_array(A)
    arr = as_complex(arr)
    if arr.shape[0] == 0:
        return np.zeros(0, dtype=np.complex128), np.zeros((0, 0), dtype=np.complex128)

    evals, evects = np.linalg.eig(arr)
    log.debug("Eigendecomposition of a %d x %d matrix", *arr.shape)
    return evals, evects


def _apply(
    A: Any,
    f: Callable[[complex], complex],
    where: str,
    eig: Callable[[npt.NDArray], Eigendecomposition] = eigendecompose,
    cond_warning: float = COND_WARNING,
):
    require_square(A, where)
    arr, was_matrix = as_array(A)
    arr = as_complex(arr)
    if arr.shape[0] == 0:
        return wrap(np.zeros((0, 0), dtype=np.complex128), was_matrix)

    evals, evects = eig(arr)
    evects = np.asarray(evects, dtype=np.complex128)

    cond = np.linalg.cond(evects)
    if not cond <= cond_warning:
        log.warning(
            "%s: eigenvector basis of a %d x %d matrix has condition number %.3g, the result may be inaccurate.",
            where, arr.shape[0], arr.shape[1], cond,
        )

    images = np.array([f(x) for x in evals], dtype=np.complex128)
    return wrap(evects @ np.diag(images) @ np.linalg.inv(evects), was_matrix)


def funm(
    A: Any,
    f: Callable[[complex], complex],
    eig: Callable[[npt.NDArray], Eigendecomposition] = eigendecompose,
    cond_warning: float = COND_WARNING,
):
    """
    Compute the generalised matrix function f(A) = V diag(f(λ_1), ..., f(λ_n)) V^-1 of a square matrix A, where f
    is a function of one complex number. A is promoted to complex before it is decomposed, since the eigenvalues of a
    real matrix need not be real, so the result is always a complex matrix.

    The eigendecomposition is done by eig, which should take a square complex array to a pair (eigenvalues,
    eigenvectors) in the same form as eigendecompose(). No attempt is made to detect defective matrices: if the
    eigenvector basis is singular, numpy.linalg.LinAlgError is raised by the inversion, and if it is merely
    ill-conditioned (condition number above cond_warning) a warning is logged and the result is returned anyway.

    Raises NotSquareError before doing any numerical work if A is not square.

    >>> funm([[2, 0], [0, 3]], lambda x: x**2).real.tolist()
    [[4.0, 0.0], [0.0, 9.0]]
    """
    return _apply(A, f, 'funm', eig=eig, cond_warning=cond_warning)


def fun(A: Any, f: Callable[[Any], Any], dtype: npt.DTypeLike = None):
    """
    Apply f to every entry of A independently, returning a matrix of the same shape. A need not be square. The entries
    of the result have whatever type f returns: for array input numpy infers the dtype from the returned values,
    unless dtype is given. If f returns sequences such as tuples, each one becomes a single entry of an object array.
    An empty array keeps its shape, and its dtype if dtype is not given.

    >>> fun([[1, -2, 3]], abs).tolist()
    [[1, 2, 3]]
    >>> fun(Matrix.from_rows([[1, 4], [9, 16]]), lambda x: x > 4)
    Matrix([
        [False, False],
        [True, True],
    ])
    """
    if isinstance(A, Matrix):
        return A.map(f)

    arr, _ = as_array(A)
    values = [f(x) for x in arr.flat]
    if not values:
        return np.empty(arr.shape, dtype=arr.dtype if dtype is None else dtype)

    # Sequences returned by f are kept whole as entries of an object array, rather than becoming a new axis.
    if any(np.ndim(v) != 0 for v in values):
        if dtype is not None and np.dtype(dtype) != np.dtype(object):
            raise ValueError(f"fun: f returned a non-scalar value, which cannot be stored with dtype {np.dtype(dtype)}.")
        result = np.empty(arr.shape, dtype=object)
        for index, v in zip(np.ndindex(arr.shape), values):
            result[index] = v
        return result

    return np.array(values, dtype=dtype).reshape(arr.shape)


def absm(A: Any):
    """
    The matrix absolute value |A| = (A^H A)^(1/2), the positive semidefinite square root of the Gram matrix A^H A.
    Since A^H A is Hermitian positive semidefinite its eigenvalues are real and non-negative, and so is the result.
    """
    require_square(A, 'absm')
    arr, was_matrix = as_array(A)
    arr = as_complex(arr)
    return wrap(_apply(arr.conj().T @ arr, np.sqrt, 'absm'), was_matrix)


def expm(A: Any):
    """
    The matrix exponential.

    >>> expm([[0, 0], [0, 0]]).real.tolist()
    [[1.0, 0.0], [0.0, 1.0]]
    """
    return _apply(A, np.exp, 'expm')


def logm(A: Any):
    """The matrix logarithm, taking the principal branch of log on each eigenvalue."""
    return _apply(A, np.log, 'logm')


def sqrtm(A: Any):
    """The matrix square root, taking the principal square root of each eigenvalue."""
    return _apply(A, np.sqrt, 'sqrtm')


def sinm(A: Any):
    return _apply(A, np.sin, 'sinm')


def cosm(A: Any):
    return _apply(A, np.cos, 'cosm')
