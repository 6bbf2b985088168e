class VectorConfigError(ValueError):
    """Base class for vector configuration errors."""
    pass

class VectorRuntimeError(ValueError):
    """Base class for errors raised by vector operations."""
    pass



class InvalidScalarTypeError(VectorConfigError):
    """Raised when the configured scalar type is not a floating-point type."""

    def __init__(self, dtype):
        self.dtype = dtype
        message = f"Invalid scalar type '{dtype}'. Must be a numpy floating type, e.g. np.float32 or np.float64"
        super().__init__(message)


class InvalidToleranceError(VectorConfigError):
    """Raised when a comparison tolerance is negative."""

    def __init__(self, rtol: float, atol: float):
        self.rtol = rtol
        self.atol = atol
        message = f"Tolerances must be non-negative, got rtol={rtol} atol={atol}"
        super().__init__(message)


class LengthMismatchError(VectorRuntimeError):
    """Raised when a binary operation is applied to vectors of different lengths."""

    def __init__(self, operation: str, lhs_length: int, rhs_length: int):
        self.operation = operation
        self.lhs_length = lhs_length
        self.rhs_length = rhs_length

        message = f"Cannot {operation} vectors of different lengths: {lhs_length} != {rhs_length}"
        super().__init__(message)


class InvalidShapeError(VectorRuntimeError):
    """Raised when the data a vector is built from is not one-dimensional."""

    def __init__(self, shape):
        self.shape = shape
        message = f"Vectors must be built from one-dimensional data, got shape {shape}"
        super().__init__(message)


class IndexOutOfRangeError(VectorRuntimeError, IndexError):
    """Raised when an element position lies outside [0, length)."""

    def __init__(self, index, length: int):
        self.index = index
        self.length = length
        message = f"Index {index} is out of range for a vector of length {length}"
        super().__init__(message)
