import numpy as np
import pandas as pd
import pandas.testing as pd_test
import pytest

from matfun import Matrix, NotSquareError, eigenbasis_condition, funm, spectrum


def test_single_entry():
    pd_test.assert_frame_equal(
        spectrum([[5.0]], lambda x: x**2),
        pd.DataFrame.from_dict(dict(
            eigenvalue=np.array([5 + 0j]),
            image=np.array([25 + 0j]),
            residual=np.array([0.0]),
        )),
    )


def test_columns():
    A = np.array([[2.0, 1.0], [0.0, -1.0]])
    assert list(spectrum(A).columns) == ['eigenvalue', 'residual']
    assert list(spectrum(A, np.exp).columns) == ['eigenvalue', 'image', 'residual']
    assert len(spectrum(Matrix.identity(3))) == 3


def test_diagonal():
    df = spectrum(np.diag([1.0, 2.0, 3.0]), np.sqrt)
    np.testing.assert_allclose(np.sort_complex(df['eigenvalue'].to_numpy()), [1, 2, 3], atol=1e-12)
    np.testing.assert_allclose(df['image'].to_numpy(), np.sqrt(df['eigenvalue'].to_numpy()))
    np.testing.assert_allclose(df['residual'].to_numpy(), 0, atol=1e-12)


def test_images_agree_with_funm():
    """The trace of funm(A, f) is the sum of the images of the eigenvalues."""
    A = np.array([[1.0, 2.0, 0.0], [0.5, 3.0, 1.0], [0.0, 1.0, 2.0]])
    df = spectrum(A, np.exp)
    np.testing.assert_allclose(np.trace(funm(A, np.exp)), df['image'].sum(), rtol=1e-10)
    assert (df['residual'] < 1e-10).all()


def test_custom_eig():
    def bad_eig(M):
        return np.array([1, 1], dtype=complex), np.identity(2, dtype=complex)

    df = spectrum(np.array([[1.0, 0.0], [0.0, 2.0]]), eig=bad_eig)
    np.testing.assert_allclose(df['residual'].to_numpy(), [0.0, 1.0])


def test_condition():
    assert eigenbasis_condition(np.identity(3)) == pytest.approx(1.0)
    assert eigenbasis_condition(np.array([[2.0, 1.0], [1.0, 2.0]])) == pytest.approx(1.0)
    assert eigenbasis_condition(np.zeros((0, 0))) == 1.0
    assert eigenbasis_condition(np.array([[1.0, 1.0], [0.0, 1.0]])) > 1e12


def test_not_square():
    with pytest.raises(NotSquareError):
        spectrum(np.ones((2, 3)))
    with pytest.raises(NotSquareError):
        eigenbasis_condition(Matrix.zero(1, 2))
