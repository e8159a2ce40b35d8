from __future__ import annotations

import dataclasses
from typing import Any, Callable, Sequence

import numpy as np
import numpy.typing as npt


@dataclasses.dataclass(frozen=True)
class Matrix:
    """
    An immutable dense matrix of scalars (ints, floats, complex numbers, ...), suitable for use as a dictionary key.
    The functional calculus accepts a Matrix wherever it accepts an array, and hands a Matrix back. Matrices may be
    constructed in the following ways, for example direct construction::

    >>> Matrix(2, 3, (1, 2, 3, 4, 5, 6))
    Matrix([
        [1, 2, 3],
        [4, 5, 6],
    ])

    Construction from a list of rows::

    >>> Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    Matrix([
        [1, 2, 3],
        [4, 5, 6],
    ])

    Construction of special matrices::

    >>> Matrix.identity(2)
    Matrix([
        [1, 0],
        [0, 1],
    ])
    >>> Matrix.diagonal([1, 2])
    Matrix([
        [1, 0],
        [0, 2],
    ])

    Conversion to and from numpy arrays::

    >>> Matrix.from_array(np.array([[1.5, 2.0]]))
    Matrix([[1.5, 2.0]])
    >>> Matrix.identity(2).to_array().tolist()
    [[1, 0], [0, 1]]

    """
    nrows: int
    ncols: int
    data: tuple[Any, ...]

    def __post_init__(self):
        if not (self.nrows >= 0 and self.ncols >= 0):
            raise ValueError("Cannot have a negative number of rows or columns.")
        if not isinstance(self.data, tuple):
            raise ValueError("Data should be a tuple")
        if not self.nrows * self.ncols == len(self.data):
            raise ValueError("Length of data incompatible")

    @property
    def shape(self) -> tuple[int, int]:
        return (self.nrows, self.ncols)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]):
        """
        Construct a matrix from a list of lists of rows, which must have uniform dimensions.

        >>> Matrix.from_rows([[1, 2, 3], [4, 5, 6]]).rows()
        [[1, 2, 3], [4, 5, 6]]
        >>> Matrix.from_rows([])
        Matrix(0, 0, [])
        """
        nrows = len(rows)
        ncols = len(rows[0]) if nrows else 0
        if not all(len(row) == ncols for row in rows):
            raise ValueError("All rows must have the same length.")
        return cls(nrows, ncols, tuple(x for row in rows for x in row))

    @classmethod
    def from_array(cls, A: npt.ArrayLike):
        """
        Construct a matrix from a 2D array. Numpy scalars are converted to the corresponding Python scalars.

        >>> Matrix.from_array(np.array([[1, 2], [3, 4]]))[1, 0]
        3
        >>> Matrix.from_array(np.zeros((0, 3))).shape
        (0, 3)
        """
        A = np.asarray(A)
        if len(A.shape) != 2:
            raise ValueError(f"Expected a 2D array, was given an array of shape {A.shape}.")
        nrows, ncols = A.shape
        return cls(nrows, ncols, tuple(A.reshape(-1).tolist()))

    def to_array(self, dtype: npt.DTypeLike = None) -> npt.NDArray:
        """
        Return the matrix as a freshly allocated 2D numpy array. The dtype is inferred from the entries if not given.

        >>> Matrix.from_rows([[1, 2j]]).to_array().dtype
        dtype('complex128')
        """
        return np.array(self.data, dtype=dtype).reshape(self.nrows, self.ncols)

    @classmethod
    def identity(cls, size: int):
        return cls.diagonal([1] * size)

    @classmethod
    def zero(cls, nrows: int, ncols: int):
        return cls(nrows, ncols, tuple(0 for _ in range(nrows * ncols)))

    @classmethod
    def diagonal(cls, elems: Sequence[Any]):
        """
        Create the square diagonal matrix with the given diagonal entries.

        >>> Matrix.diagonal([1, 2, 3]).rows()
        [[1, 0, 0], [0, 2, 0], [0, 0, 3]]
        """
        n = len(elems)
        return cls(n, n, tuple(elems[i] if i == j else 0 for i in range(n) for j in range(n)))

    def rows(self) -> list[list[Any]]:
        """Return the matrix as a list of lists of rows."""
        return [list(self.data[self.ncols * i:self.ncols * (i + 1)]) for i in range(self.nrows)]

    def __getitem__(self, key):
        """
        For a matrix M, M[i, j] returns the zero-indexed (i, j)th entry.

        >>> M = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        >>> M[0, 0], M[1, 2]
        (1, 6)
        """
        if not isinstance(key, tuple) or len(key) != 2:
            raise KeyError(f"Supplied key {key!r} should be a tuple of length 2.")

        i, j = key
        if not (0 <= i < self.nrows and 0 <= j < self.ncols):
            raise IndexError(f"Index ({i}, {j}) out of range for matrix with dimensions ({self.nrows}, {self.ncols})")
        return self.data[self.ncols * i + j]

    def __repr__(self):
        """
        >>> Matrix(5, 0, ())
        Matrix(5, 0, [])
        >>> Matrix.from_rows([[1], [2], [3], [4]])
        Matrix([[1], [2], [3], [4]])
        """
        if self.nrows == 0 or self.ncols == 0:
            return f'Matrix({self.nrows}, {self.ncols}, [])'
        if self.nrows == 1:
            return 'Matrix([[' + ', '.join(repr(c) for c in self.data) + ']])'
        if self.ncols == 1:
            return 'Matrix([' + ', '.join(f'[{c!r}]' for c in self.data) + '])'
        return '\n'.join([
            'Matrix([',
            *('    [' + ', '.join(repr(c) for c in row) + '],' for row in self.rows()),
            '])'
        ])

    def transpose(self):
        return Matrix(self.ncols, self.nrows, tuple(self[j, i] for i in range(self.ncols) for j in range(self.nrows)))

    def conjugate(self):
        """Complex conjugate of every entry."""
        return self.map(lambda c: c.conjugate())

    def adjoint(self):
        """
        The conjugate transpose, also written A^H or A^*.

        >>> Matrix.from_rows([[1, 2j], [3, 4]]).adjoint().rows()
        [[1, 3], [-2j, 4]]
        """
        return self.transpose().conjugate()

    def is_hermitian(self):
        """
        >>> Matrix.from_rows([[1, 1j], [-1j, 2]]).is_hermitian()
        True
        >>> Matrix.from_rows([[1, 1j], [1j, 2]]).is_hermitian()
        False
        """
        return self.nrows == self.ncols and self == self.adjoint()

    def map(self, f: Callable[[Any], Any]):
        """
        Map a function over the entries of the matrix. The result has the same shape, and its entries may be of a
        different type to the entries of this matrix.

        >>> Matrix.from_rows([[1, -2], [3, -4]]).map(abs).rows()
        [[1, 2], [3, 4]]
        """
        return Matrix(self.nrows, self.ncols, tuple(f(c) for c in self.data))

    def allclose(self, other, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Entrywise comparison up to a tolerance, as in numpy.allclose. Matrices of different shapes are never close."""
        other = other.to_array() if isinstance(other, Matrix) else np.asarray(other)
        if other.shape != self.shape:
            return False
        return bool(np.allclose(self.to_array(), other, rtol=rtol, atol=atol))
