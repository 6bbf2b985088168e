"""
Algebraic contracts shared by every vector type.

A concrete type supplies the primitive operations (add, negate, scale and, for
inner product spaces, dot). The operators and the derived operations,
subtraction and scalar-on-the-right multiplication, come from here.
"""

import numbers
from abc import ABC, abstractmethod


def subtract(lhs: 'VectorSpace', rhs: 'VectorSpace') -> 'VectorSpace':
    """lhs - rhs, computed as lhs + (-rhs)."""
    return lhs.add(rhs.negate())


def scale_right(vector: 'VectorSpace', scalar) -> 'VectorSpace':
    """vector * scalar, computed as scalar * vector."""
    return vector.scale(scalar)


def is_scalar(value) -> bool:
    """Whether value can be used as a scalar multiplier (python or numpy real number)."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class VectorSpace(ABC):
    """Addition, negation and scalar multiplication."""

    # numpy scalars defer to the operators below instead of broadcasting over the vector
    __array_ufunc__ = None

    @abstractmethod
    def add(self, other):
        """Element-wise sum of self and other."""

    @abstractmethod
    def negate(self):
        """Additive inverse of self."""

    @abstractmethod
    def scale(self, scalar):
        """scalar * self."""

    def _same_space(self, other) -> bool:
        return type(other) is type(self)

    def __add__(self, other):
        if not self._same_space(other):
            return NotImplemented
        return self.add(other)

    def __neg__(self):
        return self.negate()

    def __sub__(self, other):
        if not self._same_space(other):
            return NotImplemented
        return subtract(self, other)

    def __rmul__(self, scalar):
        if not is_scalar(scalar):
            return NotImplemented
        return self.scale(scalar)

    def __mul__(self, scalar):
        if not is_scalar(scalar):
            return NotImplemented
        return scale_right(self, scalar)


class InnerProductSpace(VectorSpace):
    """A vector space with a dot product returning a scalar."""

    @abstractmethod
    def dot(self, other):
        """Inner product of self and other."""

    def __mul__(self, other):
        if self._same_space(other):
            return self.dot(other)
        return super().__mul__(other)
