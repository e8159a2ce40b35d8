"""
Diagnostics for the eigendecompositions behind funm(), returned as DataFrames for inspection in a notebook.
"""
from __future__ import annotations

from typing import Any, Callable, Optional

import numpy as np
import numpy.typing as npt
import pandas as pd

from .functional import Eigendecomposition, eigendecompose
from .internal import as_array, as_complex, require_square


def spectrum(
    A: Any,
    f: Optional[Callable[[complex], complex]] = None,
    eig: Callable[[npt.NDArray], Eigendecomposition] = eigendecompose,
) -> pd.DataFrame:
    """
    Retrieve a DataFrame with one row per eigenvalue of the square matrix A. The columns are

        eigenvalue: the eigenvalue λ.
        image:      f(λ), the value funm(A, f) puts on that eigenvector. Only present if f is given.
        residual:   |Av - λv| for the eigenvector v scaled to unit length. Large residuals mean the
                    decomposition, and anything funm() builds from it, is unreliable.
    """
    require_square(A, 'spectrum')
    arr, _ = as_array(A)
    arr = as_complex(arr)
    evals, evects = eig(arr)
    evals = np.asarray(evals, dtype=np.complex128)
    evects = np.asarray(evects, dtype=np.complex128)

    columns = {'eigenvalue': evals}
    if f is not None:
        columns['image'] = np.array([f(x) for x in evals], dtype=np.complex128)

    residuals = []
    for i in range(len(evals)):
        v = evects[:, i] / np.linalg.norm(evects[:, i])
        residuals.append(float(np.linalg.norm(arr @ v - evals[i] * v)))
    columns['residual'] = np.array(residuals, dtype=float)

    return pd.DataFrame.from_dict(columns)


def eigenbasis_condition(A: Any, eig: Callable[[npt.NDArray], Eigendecomposition] = eigendecompose) -> float:
    """
    The 2-norm condition number of the eigenvector matrix of A: 1 for normal matrices, and infinite when A is
    defective. The empty matrix has condition number 1.
    """
    require_square(A, 'eigenbasis_condition')
    arr, _ = as_array(A)
    if arr.shape[0] == 0:
        return 1.0

    _, evects = eig(as_complex(arr))
    cond = float(np.linalg.cond(np.asarray(evects, dtype=np.complex128)))
    return cond if np.isfinite(cond) else float('inf')
