import logging
import operator
from typing import Iterable, Iterator, Mapping

import numpy as np
import scipy.sparse

from .config import VectorConfig
from .constants import Rendering
from .dense_vector import DenseVector
from .merge import merged
from .vector_errors import LengthMismatchError, InvalidShapeError, IndexOutOfRangeError
from .vector_space import InnerProductSpace

logger = logging.getLogger(__name__)


class SparseVector(InnerProductSpace):
    """
    Vector storing only its non-zero entries in a dict keyed by position, plus its length.

    Positions missing from the dict are implicit zeros. The length (count) is tracked
    separately from the number of stored entries (nnz).
    """

    def __init__(self, dictionary: Mapping[int, float], count: int, config: VectorConfig = VectorConfig()):
        """
        Initialize a SparseVector from an explicit mapping.

        The mapping is copied as given: zero values are not filtered out. Use
        from_elements or compacted() to drop them.

        Args:
            dictionary: Map from position to value. Every key must lie in [0, count).
            count: Logical length of the vector.
            config: VectorConfig defining the scalar type and comparison tolerances.
        """
        config.validate()
        self.config = config
        count = operator.index(count)
        if count < 0:
            raise InvalidShapeError((count,))
        self._count = count

        scalar_type = config.scalar_type
        self._dictionary: dict[int, float] = {}
        for key, value in dictionary.items():
            self._dictionary[self._check_index(key)] = scalar_type(value)

    @classmethod
    def from_elements(cls, elements: Iterable[float], config: VectorConfig = VectorConfig()) -> 'SparseVector':
        """Build a sparse vector from dense data, keeping only the non-zero positions."""
        array = DenseVector(elements, config=config).elements
        nonzero = np.flatnonzero(array)
        return cls({int(i): array[i] for i in nonzero}, count=len(array), config=config)

    @classmethod
    def from_values(cls, *values: float, config: VectorConfig = VectorConfig()) -> 'SparseVector':
        """Build a sparse vector from variadic scalars: SparseVector.from_values(1, 0, 3)."""
        return cls.from_elements(values, config=config)

    @classmethod
    def from_dense(cls, vector: DenseVector) -> 'SparseVector':
        """Convert a DenseVector, keeping only its non-zero elements."""
        logger.debug("Converting dense vector of length %d to sparse", vector.count)
        return cls.from_elements(vector.elements, config=vector.config)

    @classmethod
    def from_scipy(cls, matrix, config: VectorConfig = VectorConfig()) -> 'SparseVector':
        """
        Build a sparse vector from a scipy sparse matrix or array.

        Args:
            matrix: A scipy sparse matrix or array with a single row.
            config: VectorConfig for the new vector.

        Returns:
            SparseVector of length equal to the number of columns, holding the non-zero entries.
        """
        if len(matrix.shape) != 2 or matrix.shape[0] != 1:
            raise InvalidShapeError(matrix.shape)
        coo = scipy.sparse.coo_matrix(matrix, copy=True)
        coo.sum_duplicates()
        dictionary = {int(col): value for col, value in zip(coo.col, coo.data) if value != 0}
        return cls(dictionary, count=matrix.shape[1], config=config)

    def to_scipy(self) -> scipy.sparse.csr_matrix:
        """Returns the vector as a scipy csr_matrix of shape (1, count).

        scipy.sparse has no float16 support, so narrower dtypes are widened to float32.
        """
        cols = np.fromiter(self._dictionary.keys(), dtype=np.int64, count=self.nnz)
        data = np.fromiter(self._dictionary.values(), dtype=np.promote_types(self.config.dtype, np.float32), count=self.nnz)
        rows = np.zeros(self.nnz, dtype=np.int64)
        return scipy.sparse.csr_matrix((data, (rows, cols)), shape=(1, self._count))

    def to_dense(self) -> DenseVector:
        return DenseVector.from_sparse(self)

    @property
    def dictionary(self) -> dict[int, float]:
        """Copy of the stored position -> value entries."""
        return dict(self._dictionary)

    @property
    def count(self) -> int:
        return self._count

    @property
    def nnz(self) -> int:
        """Number of stored entries."""
        return len(self._dictionary)

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.config.dtype)

    @property
    def elements(self) -> np.ndarray:
        """Materialized dense array, rebuilt on every access."""
        array = np.zeros(self._count, dtype=self.config.dtype)
        for index, value in self._dictionary.items():
            array[index] = value
        return array

    def compacted(self) -> 'SparseVector':
        """Returns a copy without explicitly stored zero entries."""
        return SparseVector({k: v for k, v in self._dictionary.items() if v != 0}, self._count, config=self.config)

    def _check_index(self, index) -> int:
        try:
            position = operator.index(index)
        except TypeError:
            raise TypeError(f"SparseVector indices must be integers, not {type(index).__name__}")
        if position < 0 or position >= self._count:
            raise IndexOutOfRangeError(index, self._count)
        return position

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, index) -> float:
        """Returns the value at position index, or zero if nothing is stored there."""
        position = self._check_index(index)
        return self._dictionary.get(position, self.config.scalar_type(0))

    def __setitem__(self, index, value: float) -> None:
        """Stores value at position index.

        Writing zero removes the entry unless config.purge_zero_writes is False.
        """
        position = self._check_index(index)
        value = self.config.scalar_type(value)
        if value == 0:
            if self.config.purge_zero_writes:
                self._dictionary.pop(position, None)
                return
            logger.debug("Storing explicit zero at position %d", position)
        self._dictionary[position] = value

    def __iter__(self) -> Iterator[float]:
        """Yields the value at every position in [0, count), zeros included."""
        zero = self.config.scalar_type(0)
        for index in range(self._count):
            yield self._dictionary.get(index, zero)

    def items(self) -> list[tuple[int, float]]:
        """Returns the stored (position, value) pairs sorted by position."""
        return sorted(self._dictionary.items())

    def _check_length(self, other: 'SparseVector', operation: str) -> None:
        if self._count != other._count:
            raise LengthMismatchError(operation, self._count, other._count)

    def add(self, other: 'SparseVector') -> 'SparseVector':
        self._check_length(other, "add")
        return SparseVector(merged(self._dictionary, other._dictionary, operator.add), self._count, config=self.config)

    def negate(self) -> 'SparseVector':
        return SparseVector({k: -v for k, v in self._dictionary.items()}, self._count, config=self.config)

    def scale(self, scalar: float) -> 'SparseVector':
        """scalar * self. Scaling by zero returns an empty vector of the same length."""
        if scalar == 0:
            return SparseVector({}, self._count, config=self.config)
        scalar = self.config.scalar_type(scalar)
        return SparseVector({k: scalar * v for k, v in self._dictionary.items()}, self._count, config=self.config)

    def dot(self, other: 'SparseVector') -> float:
        """Sum of products over the positions stored in both vectors.

        A position stored in only one operand is multiplied by an implicit zero, so it
        is left out of the merge entirely.
        """
        self._check_length(other, "take the dot product of")
        products = merged(self._dictionary, other._dictionary, operator.mul, keep_unmatched=False)
        total = self.config.scalar_type(0)
        for value in products.values():
            total += value
        return total

    def __eq__(self, other) -> bool:
        if not isinstance(other, SparseVector):
            return NotImplemented
        return self._count == other._count and bool(np.array_equal(self.elements, other.elements))

    def is_close(self, other: 'SparseVector') -> bool:
        """Element-wise comparison within the tolerances of this vector's config."""
        if not isinstance(other, SparseVector):
            return False
        if self._count != other._count:
            return False
        return bool(np.allclose(self.elements, other.elements, rtol=self.config.rtol, atol=self.config.atol))

    def __str__(self) -> str:
        return Rendering.OPEN + Rendering.SEPARATOR.join(str(x) for x in self) + Rendering.CLOSE

    def __repr__(self) -> str:
        items_str = ", ".join(f"{k}: {float(v)}" for k, v in self.items())
        return f"SparseVector({{{items_str}}}, count={self._count})"
