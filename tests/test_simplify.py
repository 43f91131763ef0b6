"""
Tests for the shape simplifier.
"""

import random
import unittest

from shapeunits import UnitValue
from shapeunits.shape import (
    ASSOCIATIVE,
    COMMUTATIVE,
    REDUCTION,
    REDUCTION_LEFT,
    REDUCTION_RIGHT,
    SCALAR,
    SCALAR_OP,
    Atomic,
    Op,
    OpName,
    Product,
    Quotient,
    equivalent,
    execute,
    format_script,
    inner_left,
    inner_right,
    rewrite,
    simplify,
    size,
)

M = Atomic("m")
S = Atomic("s")
KG = Atomic("kg")


def random_shape(rng: random.Random, max_depth: int):
    """Generate a random shape over a few atomics and Scalar."""
    if max_depth <= 1 or rng.random() < 0.3:
        return rng.choice([M, S, KG, SCALAR])
    node = rng.choice([Product, Quotient])
    return node(random_shape(rng, max_depth - 1), random_shape(rng, max_depth - 1))


def cancelling_shape(rng: random.Random, max_depth: int):
    """Generate a shape multiplied and divided by the same random factor."""
    base = random_shape(rng, max_depth)
    factor = random_shape(rng, 2)
    if rng.random() < 0.5:
        return Quotient(Product(base, factor), factor)
    return Product(Quotient(base, factor), factor)


class TestScenarios(unittest.TestCase):
    """Test the documented simplification scenarios."""

    def test_quotient_times_denominator(self):
        """(m/s)*s -> m by reduction."""
        shape, script = simplify(Product(Quotient(M, S), S))
        self.assertEqual(shape, M)
        self.assertEqual(script, (REDUCTION,))

    def test_denominator_times_quotient(self):
        """s*(m/s) -> m by commutative then reduction."""
        shape, script = simplify(Product(S, Quotient(M, S)))
        self.assertEqual(shape, M)
        self.assertEqual(script, (COMMUTATIVE, REDUCTION))

    def test_self_quotient(self):
        """m/m -> Scalar by reduction."""
        shape, script = simplify(Quotient(M, M))
        self.assertEqual(shape, SCALAR)
        self.assertEqual(script, (REDUCTION,))

    def test_reduction_right(self):
        """(s*m)/m -> s cancels the right factor."""
        shape, script = simplify(Quotient(Product(S, M), M))
        self.assertEqual(shape, S)
        self.assertEqual(script, (REDUCTION_RIGHT,))

    def test_reduction_left(self):
        """(m*s)/m -> s cancels the left factor."""
        shape, script = simplify(Quotient(Product(M, S), M))
        self.assertEqual(shape, S)
        self.assertEqual(script, (REDUCTION_LEFT,))


class TestScalarRules(unittest.TestCase):
    """Test elimination of Scalar operands."""

    def test_product_with_scalar_right(self):
        """A * Scalar -> A."""
        shape, script = simplify(Product(Quotient(M, S), SCALAR))
        self.assertEqual(shape, Quotient(M, S))
        self.assertEqual(script, (SCALAR_OP,))

    def test_product_with_scalar_left(self):
        """Scalar * A -> A via commutative."""
        shape, script = simplify(Product(SCALAR, Quotient(M, S)))
        self.assertEqual(shape, Quotient(M, S))
        self.assertEqual(script, (COMMUTATIVE, SCALAR_OP))

    def test_quotient_by_scalar(self):
        """A / Scalar -> A."""
        shape, script = simplify(Quotient(M, SCALAR))
        self.assertEqual(shape, M)
        self.assertEqual(script, (SCALAR_OP,))

    def test_scalar_over_scalar(self):
        """Scalar / Scalar is a plain self-quotient."""
        shape, script = simplify(Quotient(SCALAR, SCALAR))
        self.assertEqual(shape, SCALAR)
        self.assertEqual(script, (REDUCTION,))


class TestInnerRules(unittest.TestCase):
    """Test simplification of nested operands."""

    def test_product_inner_right(self):
        """s * ((s*m)/s) -> s*m, rewriting the right operand."""
        shape, script = simplify(Product(S, Quotient(Product(S, M), S)))
        self.assertEqual(shape, Product(S, M))
        self.assertEqual(script, (inner_right((REDUCTION_LEFT,)),))

    def test_product_inner_left(self):
        """((s*m)/s) * s -> m*s, rewriting the left operand."""
        shape, script = simplify(Product(Quotient(Product(S, M), S), S))
        self.assertEqual(shape, Product(M, S))
        self.assertEqual(script, (inner_left((REDUCTION_LEFT,)),))

    def test_quotient_inner_right(self):
        """s / ((s*m)/s) -> s/m."""
        shape, script = simplify(Quotient(S, Quotient(Product(S, M), S)))
        self.assertEqual(shape, Quotient(S, M))
        self.assertEqual(script, (inner_right((REDUCTION_LEFT,)),))

    def test_quotient_inner_left(self):
        """((s*m)/s) / s -> m/s."""
        shape, script = simplify(Quotient(Quotient(Product(S, M), S), S))
        self.assertEqual(shape, Quotient(M, S))
        self.assertEqual(script, (inner_left((REDUCTION_LEFT,)),))

    def test_quotient_rules_fire_after_inner_simplification(self):
        """((m/s)*s) / m reduces the numerator to m, then m/m to Scalar."""
        shape, script = simplify(Quotient(Product(Quotient(M, S), S), M))
        self.assertEqual(shape, SCALAR)
        self.assertEqual(script, (inner_left((REDUCTION,)), REDUCTION))


class TestRegroupRules(unittest.TestCase):
    """Test associative regrouping of products against quotients."""

    def test_associative(self):
        """(kg*s) * (m/s) -> kg*m."""
        shape, script = simplify(Product(Product(KG, S), Quotient(M, S)))
        self.assertEqual(shape, Product(KG, M))
        self.assertEqual(script, (ASSOCIATIVE, inner_right((COMMUTATIVE, REDUCTION))))

    def test_commute_then_associative(self):
        """(s*kg) * (m/s) -> kg*m."""
        shape, script = simplify(Product(Product(S, KG), Quotient(M, S)))
        self.assertEqual(shape, Product(KG, M))
        self.assertEqual(
            script,
            (inner_left((COMMUTATIVE,)), ASSOCIATIVE, inner_right((COMMUTATIVE, REDUCTION))),
        )

    def test_quotient_before_product(self):
        """(m/s) * (kg*s) swaps operands first, then regroups."""
        shape, script = simplify(Product(Quotient(M, S), Product(KG, S)))
        self.assertEqual(shape, Product(KG, M))
        self.assertEqual(
            script, (COMMUTATIVE, ASSOCIATIVE, inner_right((COMMUTATIVE, REDUCTION)))
        )

    def test_stable_product(self):
        """A product with nothing to cancel is already canonical."""
        shape, script = simplify(Product(M, Quotient(KG, S)))
        self.assertEqual(shape, Product(M, Quotient(KG, S)))
        self.assertEqual(script, ())


class TestLeaves(unittest.TestCase):
    """Test leaf shapes."""

    def test_atomic_and_scalar_are_canonical(self):
        """Leaves simplify to themselves with an empty script."""
        self.assertEqual(simplify(M), (M, ()))
        self.assertEqual(simplify(SCALAR), (SCALAR, ()))

    def test_result_fields(self):
        """The result exposes shape and script by name."""
        result = simplify(Quotient(M, M))
        self.assertEqual(result.shape, SCALAR)
        self.assertEqual(result.script, (REDUCTION,))


class TestScriptFormatting(unittest.TestCase):
    """Test op construction and formatting."""

    def test_format_nested_script(self):
        """Nested scripts render inside parentheses."""
        script = (inner_left((COMMUTATIVE,)), ASSOCIATIVE, inner_right((COMMUTATIVE, REDUCTION)))
        self.assertEqual(
            format_script(script),
            "inner_left(commutative), associative, inner_right(commutative, reduction)",
        )

    def test_only_inner_ops_take_scripts(self):
        """Flat ops reject sub-scripts."""
        with self.assertRaises(ValueError):
            Op(OpName.REDUCTION, (COMMUTATIVE,))


class TestSimplifierProperties(unittest.TestCase):
    """Property checks over randomly generated shapes."""

    def setUp(self):
        """Generate a fixed sample of shapes."""
        rng = random.Random(42)
        self.shapes = [random_shape(rng, 5) for _ in range(300)]
        self.shapes += [cancelling_shape(rng, 4) for _ in range(200)]

    def test_idempotent(self):
        """Simplifying a canonical shape changes nothing."""
        for shape in self.shapes:
            canonical = simplify(shape).shape
            again = simplify(canonical)
            self.assertEqual(again.shape, canonical, shape)
            self.assertEqual(again.script, (), shape)

    def test_equivalent_to_input(self):
        """The canonical shape has the same net exponents as the input."""
        for shape in self.shapes:
            self.assertTrue(equivalent(simplify(shape).shape, shape), shape)

    def test_script_reaches_canonical_shape(self):
        """Executing the script on the input yields the canonical shape."""
        for shape in self.shapes:
            canonical, script = simplify(shape)
            self.assertEqual(rewrite(shape, script), canonical, shape)

    def test_execute_preserves_payload(self):
        """Retagging a value with its canonical shape keeps the same number."""
        for index, shape in enumerate(self.shapes):
            value = UnitValue(float(index) + 0.5, shape)
            canonical, script = simplify(shape)
            result = execute(value, script)
            self.assertIs(result.value, value.value)
            self.assertEqual(result.shape, canonical)

    def test_never_grows(self):
        """Simplification never produces a larger tree."""
        for shape in self.shapes:
            self.assertLessEqual(size(simplify(shape).shape), size(shape), shape)

    def test_direct_cancellations_found(self):
        """Multiplying and dividing by the same factor simplifies back down."""
        rng = random.Random(7)
        fresh = Atomic("d")
        for _ in range(200):
            base = random_shape(rng, 4)
            factor = random_shape(rng, 2)
            canonical = simplify(base).shape
            self.assertEqual(simplify(Quotient(Product(base, factor), factor)).shape, canonical)
            self.assertEqual(simplify(Product(Quotient(base, fresh), fresh)).shape, canonical)


if __name__ == '__main__':
    unittest.main()
