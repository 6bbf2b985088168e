import os
import sys

import pytest

# Add the src directory to Python path to import local smart_vector
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from smart_vector import VectorSpace, InnerProductSpace, DenseVector, SparseVector, subtract, scale_right


class Pair(InnerProductSpace):
    """Minimal inner product space implementing only the primitive operations."""

    def __init__(self, x, y):
        self.x = x
        self.y = y

    def add(self, other):
        return Pair(self.x + other.x, self.y + other.y)

    def negate(self):
        return Pair(-self.x, -self.y)

    def scale(self, scalar):
        return Pair(scalar * self.x, scalar * self.y)

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def __eq__(self, other):
        return isinstance(other, Pair) and (self.x, self.y) == (other.x, other.y)


class Magnitude(VectorSpace):
    """Vector space without a dot product."""

    def __init__(self, value):
        self.value = value

    def add(self, other):
        return Magnitude(self.value + other.value)

    def negate(self):
        return Magnitude(-self.value)

    def scale(self, scalar):
        return Magnitude(scalar * self.value)


class TestDerivedOperations:

    def test_subtraction_is_derived(self):
        assert Pair(5, 7) - Pair(1, 2) == Pair(4, 5)
        assert subtract(Pair(5, 7), Pair(1, 2)) == Pair(4, 5)

    def test_right_scalar_multiplication_is_derived(self):
        assert Pair(1, 2) * 3 == Pair(3, 6)
        assert scale_right(Pair(1, 2), 3) == 3 * Pair(1, 2)

    def test_vector_product_is_dot(self):
        assert Pair(1, 2) * Pair(3, 4) == 11

    def test_vector_space_without_dot(self):
        assert (Magnitude(3) - Magnitude(1)).value == 2
        assert (Magnitude(3) * 2).value == 6
        with pytest.raises(TypeError):
            Magnitude(3) * Magnitude(1)

    def test_different_spaces_do_not_mix(self):
        with pytest.raises(TypeError):
            Pair(1, 2) + Magnitude(1)
        with pytest.raises(TypeError):
            Pair(1, 2) - Magnitude(1)

    def test_abstract_methods_required(self):
        class Incomplete(VectorSpace):
            def add(self, other):
                return self

        with pytest.raises(TypeError):
            Incomplete()


class TestConcreteTypes:

    @pytest.mark.parametrize("cls", [DenseVector, SparseVector])
    def test_implement_inner_product_space(self, cls):
        assert issubclass(cls, InnerProductSpace)
        assert issubclass(cls, VectorSpace)

    def test_subtract_free_function_on_vectors(self):
        assert subtract(DenseVector([3, 3]), DenseVector([1, 2])) == DenseVector([2, 1])
        assert subtract(SparseVector.from_elements([3, 0]), SparseVector.from_elements([1, 0])) == SparseVector.from_elements([2, 0])
