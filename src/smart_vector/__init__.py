"""
Dense and sparse floating-point vectors sharing vector space and inner product space contracts.

Both representations support +, unary -, scalar multiplication and the dot product,
and convert into one another.
"""

__version__ = "0.1.0"

from .dense_vector import DenseVector
from .sparse_vector import SparseVector
from .vector_space import VectorSpace, InnerProductSpace, subtract, scale_right
from .merge import merged
from .config import VectorConfig
from .vector_errors import (
    VectorConfigError,
    VectorRuntimeError,
    LengthMismatchError,
    InvalidShapeError,
    IndexOutOfRangeError,
    InvalidScalarTypeError,
    InvalidToleranceError,
)

__all__ = [
    "DenseVector",
    "SparseVector",
    "VectorSpace",
    "InnerProductSpace",
    "subtract",
    "scale_right",
    "merged",
    "VectorConfig",
    "VectorConfigError",
    "VectorRuntimeError",
    "LengthMismatchError",
    "InvalidShapeError",
    "IndexOutOfRangeError",
    "InvalidScalarTypeError",
    "InvalidToleranceError",
]
