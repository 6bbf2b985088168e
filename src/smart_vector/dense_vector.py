import logging
import operator
from typing import Iterable, Iterator, TYPE_CHECKING

import numpy as np

from .config import VectorConfig
from .constants import Rendering
from .vector_errors import LengthMismatchError, InvalidShapeError, IndexOutOfRangeError
from .vector_space import InnerProductSpace

if TYPE_CHECKING:
    from .sparse_vector import SparseVector

logger = logging.getLogger(__name__)


class DenseVector(InnerProductSpace):
    """
    Fixed-length vector storing every element in a one-dimensional numpy array.

    Elements can be overwritten in place, but the length never changes after
    construction. Operators always return new vectors.
    """

    def __init__(self, elements: Iterable[float], config: VectorConfig = VectorConfig()):
        """
        Initialize a DenseVector.

        Args:
            elements: Ordered scalars, e.g. a list or a 1-D numpy array. The data is copied.
            config: VectorConfig defining the scalar type and comparison tolerances.
        """
        config.validate()
        self.config = config
        if not isinstance(elements, np.ndarray) and not isinstance(elements, (list, tuple)):
            elements = list(elements)
        self._elements = np.array(elements, dtype=config.dtype)
        if self._elements.ndim != 1:
            raise InvalidShapeError(self._elements.shape)

    @classmethod
    def from_values(cls, *values: float, config: VectorConfig = VectorConfig()) -> 'DenseVector':
        """Build a vector from variadic scalars: DenseVector.from_values(1, 2, 3)."""
        return cls(values, config=config)

    @classmethod
    def from_sparse(cls, vector: 'SparseVector') -> 'DenseVector':
        """Materialize a SparseVector, filling absent positions with zero."""
        logger.debug("Materializing sparse vector with %d stored entries over %d positions", vector.nnz, vector.count)
        return cls(vector.elements, config=vector.config)

    def to_sparse(self) -> 'SparseVector':
        """Convert to a SparseVector keeping only the non-zero elements."""
        from .sparse_vector import SparseVector
        return SparseVector.from_dense(self)

    @property
    def elements(self) -> np.ndarray:
        """Copy of the backing array."""
        return self._elements.copy()

    @property
    def count(self) -> int:
        return len(self._elements)

    @property
    def dtype(self) -> np.dtype:
        return self._elements.dtype

    def _check_index(self, index) -> int:
        try:
            position = operator.index(index)
        except TypeError:
            raise TypeError(f"DenseVector indices must be integers, not {type(index).__name__}")
        if position < 0 or position >= self.count:
            raise IndexOutOfRangeError(index, self.count)
        return position

    def __len__(self) -> int:
        return self.count

    def __getitem__(self, index) -> float:
        """Returns the element at position index, which must lie in [0, len(self))."""
        return self._elements[self._check_index(index)]

    def __setitem__(self, index, value: float) -> None:
        """Replaces the element at position index in place."""
        self._elements[self._check_index(index)] = value

    def __iter__(self) -> Iterator[float]:
        return iter(self._elements)

    def _check_length(self, other: 'DenseVector', operation: str) -> None:
        if self.count != other.count:
            raise LengthMismatchError(operation, self.count, other.count)

    def add(self, other: 'DenseVector') -> 'DenseVector':
        self._check_length(other, "add")
        return DenseVector(self._elements + other._elements, config=self.config)

    def negate(self) -> 'DenseVector':
        return DenseVector(-self._elements, config=self.config)

    def scale(self, scalar: float) -> 'DenseVector':
        return DenseVector(self.config.scalar_type(scalar) * self._elements, config=self.config)

    def dot(self, other: 'DenseVector') -> float:
        """Sum of the pairwise products of the elements of self and other."""
        self._check_length(other, "take the dot product of")
        return self.config.scalar_type(np.dot(self._elements, other._elements))

    def __eq__(self, other) -> bool:
        if not isinstance(other, DenseVector):
            return NotImplemented
        return bool(np.array_equal(self._elements, other._elements))

    def is_close(self, other: 'DenseVector') -> bool:
        """Element-wise comparison within the tolerances of this vector's config."""
        if not isinstance(other, DenseVector):
            return False
        if self.count != other.count:
            return False
        return bool(np.allclose(self._elements, other._elements, rtol=self.config.rtol, atol=self.config.atol))

    def __str__(self) -> str:
        return Rendering.OPEN + Rendering.SEPARATOR.join(str(x) for x in self._elements) + Rendering.CLOSE

    def __repr__(self) -> str:
        return f"DenseVector({self._elements.tolist()})"
