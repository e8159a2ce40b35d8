from .functional import absm, cosm, eigendecompose, expm, fun, funm, logm, sinm, sqrtm
from .internal import NotSquareError
from .matrix import Matrix
from .spectrum import eigenbasis_condition, spectrum

__all__ = [
    "Matrix",
    "NotSquareError",
    "absm",
    "cosm",
    "eigenbasis_condition",
    "eigendecompose",
    "expm",
    "fun",
    "funm",
    "logm",
    "sinm",
    "spectrum",
    "sqrtm",
]
