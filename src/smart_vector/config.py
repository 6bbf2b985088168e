import numpy as np
from dataclasses import dataclass

from .constants import DEFAULT_RTOL, DEFAULT_ATOL
from .vector_errors import InvalidScalarTypeError, InvalidToleranceError


@dataclass(frozen=True)
class VectorConfig:
    """
    Configuration shared by dense and sparse vectors.

    Every vector carries the config it was built with, and the result of a
    binary operation takes the config of its left operand.
    Configs are immutable; derive variants with dataclasses.replace.
    """

    dtype: type = np.float64
    """Floating-point scalar type backing the vector (any numpy floating type)."""

    rtol: float = DEFAULT_RTOL
    """Relative tolerance used by is_close."""

    atol: float = DEFAULT_ATOL
    """Absolute tolerance used by is_close."""

    purge_zero_writes: bool = True
    """Whether writing zero into a SparseVector position removes the stored entry.
    When False the explicit zero is kept, and the vector only holds non-zero
    entries right after construction."""

    def validate(self) -> None:
        """Validate configuration parameters."""
        try:
            dtype = np.dtype(self.dtype)
        except TypeError:
            raise InvalidScalarTypeError(self.dtype)
        if not np.issubdtype(dtype, np.floating):
            raise InvalidScalarTypeError(self.dtype)
        if self.rtol < 0 or self.atol < 0:
            raise InvalidToleranceError(self.rtol, self.atol)

    @property
    def scalar_type(self) -> type:
        """The numpy scalar type matching dtype, e.g. np.float64."""
        return np.dtype(self.dtype).type
