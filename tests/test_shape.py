"""
Tests for the shape term model.
"""

import unittest
from collections import Counter

from shapeunits.shape import (
    SCALAR,
    Atomic,
    Product,
    Quotient,
    Scalar,
    depth,
    equals,
    equivalent,
    exponents,
    render,
    size,
)

M = Atomic("m")
S = Atomic("s")
KG = Atomic("kg")


class TestShapeEquality(unittest.TestCase):
    """Test structural equality of shapes."""

    def test_atomic_equal_by_name(self):
        """Atomics with the same name are equal."""
        self.assertEqual(Atomic("m"), M)
        self.assertNotEqual(M, S)

    def test_scalar_instances_equal(self):
        """Every Scalar instance is the same shape."""
        self.assertEqual(Scalar(), SCALAR)
        self.assertNotEqual(SCALAR, M)

    def test_product_is_order_sensitive(self):
        """m*s and s*m are different shapes."""
        self.assertTrue(equals(Product(M, S), Product(M, S)))
        self.assertFalse(equals(Product(M, S), Product(S, M)))

    def test_product_differs_from_quotient(self):
        """Same operands under different nodes are not equal."""
        self.assertNotEqual(Product(M, S), Quotient(M, S))

    def test_operators_build_nodes(self):
        """* and / build Product and Quotient."""
        self.assertEqual(M * S, Product(M, S))
        self.assertEqual(M / S / S, Quotient(Quotient(M, S), S))

    def test_shapes_are_hashable(self):
        """Equal shapes hash equally."""
        shapes = {Product(M, S), Product(M, S), Quotient(M, S)}
        self.assertEqual(len(shapes), 2)


class TestShapeConstruction(unittest.TestCase):
    """Test validation of shape constructors."""

    def test_empty_atomic_name(self):
        """An atomic unit needs a name."""
        with self.assertRaises(ValueError):
            Atomic("")

    def test_non_shape_operand(self):
        """Products and quotients only accept shapes."""
        with self.assertRaises(TypeError):
            Product(M, "s")
        with self.assertRaises(TypeError):
            Quotient(1.0, M)


class TestShapeMeasures(unittest.TestCase):
    """Test size, depth and rendering."""

    def test_size(self):
        """Size counts every node."""
        self.assertEqual(size(M), 1)
        self.assertEqual(size(SCALAR), 1)
        self.assertEqual(size(Product(Quotient(M, S), S)), 5)

    def test_depth(self):
        """Depth is the tree height."""
        self.assertEqual(depth(M), 1)
        self.assertEqual(depth(Product(Quotient(M, S), S)), 3)

    def test_render(self):
        """Products concatenate, quotients join with a slash."""
        self.assertEqual(render(Product(Quotient(M, S), S)), "m/ss")
        self.assertEqual(render(Quotient(Quotient(M, S), S)), "m/s/s")
        self.assertEqual(render(Quotient(M, Product(S, KG))), "m/skg")
        self.assertEqual(render(SCALAR), "")
        self.assertEqual(str(Product(S, M)), "sm")

    def test_repr(self):
        """Repr shows the tree."""
        self.assertEqual(repr(Quotient(M, SCALAR)), "Quotient(Atomic('m'), Scalar())")


class TestExponents(unittest.TestCase):
    """Test exponent analysis and algebraic equivalence."""

    def test_exponents_of_acceleration(self):
        """m/s/s has m^1 s^-2."""
        self.assertEqual(exponents(Quotient(Quotient(M, S), S)), Counter({"m": 1, "s": -2}))

    def test_cancelled_names_dropped(self):
        """Fully cancelled names disappear."""
        self.assertEqual(exponents(Quotient(Product(M, S), S)), Counter({"m": 1}))
        self.assertEqual(exponents(Quotient(M, M)), Counter())

    def test_equivalent_ignores_order_and_grouping(self):
        """Equivalence holds up to commutativity, associativity and cancellation."""
        self.assertTrue(equivalent(Product(S, Quotient(M, S)), M))
        self.assertTrue(equivalent(Product(Product(M, S), KG), Product(KG, Product(S, M))))
        self.assertTrue(equivalent(Quotient(M, M), SCALAR))
        self.assertFalse(equivalent(Quotient(M, S), Product(M, S)))


if __name__ == '__main__':
    unittest.main()
