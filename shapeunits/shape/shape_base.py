"""Shape term model describing how a unit is composed.

A shape is a small immutable expression tree built from four node types:

- Scalar: the dimensionless identity of multiplication
- Atomic: a primitive named unit such as ``m`` or ``s``
- Product: an ordered pair ``left * right``
- Quotient: an ordered pair ``numerator / denominator``

Product and Quotient are strictly binary. Equality is structural and
order-sensitive, so ``m*s`` and ``s*m`` are different shapes even though they
are algebraically equivalent; the simplifier relies on this primitive alone to
spot cancellations. ``equivalent`` answers the algebraic question instead by
comparing the net exponent of every atomic name.

Example:
    >>> m, s = Atomic("m"), Atomic("s")
    >>> speed = m / s
    >>> render(speed * s)
    'm/ss'
    >>> equivalent(speed * s, m)
    True
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass


@dataclass(frozen=True, repr=False)
class Shape:
    """Base class for every shape node.

    Shapes support ``*`` and ``/`` to build Product and Quotient nodes, which
    keeps test and declaration code close to the notation used for units.
    """

    def __mul__(self, other: Shape) -> Product:
        return Product(self, other)

    def __truediv__(self, other: Shape) -> Quotient:
        return Quotient(self, other)

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, repr=False)
class Scalar(Shape):
    """The dimensionless shape. All instances compare equal."""

    def __repr__(self) -> str:
        return "Scalar()"


@dataclass(frozen=True, repr=False)
class Atomic(Shape):
    """A primitive unit identified by its name token."""

    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            msg = f"Atomic unit name must be a non-empty string, got {self.name!r}"
            raise ValueError(msg)

    def __repr__(self) -> str:
        return f"Atomic({self.name!r})"


@dataclass(frozen=True, repr=False)
class Product(Shape):
    """Ordered product ``left * right`` of two shapes."""

    left: Shape
    right: Shape

    def __post_init__(self):
        _check_operands(self, self.left, self.right)

    def __repr__(self) -> str:
        return f"Product({self.left!r}, {self.right!r})"


@dataclass(frozen=True, repr=False)
class Quotient(Shape):
    """Ordered quotient ``numerator / denominator`` of two shapes."""

    numerator: Shape
    denominator: Shape

    def __post_init__(self):
        _check_operands(self, self.numerator, self.denominator)

    def __repr__(self) -> str:
        return f"Quotient({self.numerator!r}, {self.denominator!r})"


SCALAR = Scalar()


def _check_operands(node: Shape, *operands) -> None:
    for operand in operands:
        if not isinstance(operand, Shape):
            msg = f"{type(node).__name__} operands must be shapes, got {operand!r}"
            raise TypeError(msg)


def equals(a: Shape, b: Shape) -> bool:
    """Structural, order-sensitive equality of two shapes."""
    return a == b


def size(shape: Shape) -> int:
    """Count the nodes of a shape tree."""
    if isinstance(shape, Product):
        return 1 + size(shape.left) + size(shape.right)
    if isinstance(shape, Quotient):
        return 1 + size(shape.numerator) + size(shape.denominator)
    return 1


def depth(shape: Shape) -> int:
    """Height of a shape tree; leaves have depth 1."""
    if isinstance(shape, Product):
        return 1 + max(depth(shape.left), depth(shape.right))
    if isinstance(shape, Quotient):
        return 1 + max(depth(shape.numerator), depth(shape.denominator))
    return 1


def render(shape: Shape) -> str:
    """Render a shape as a unit string.

    Product operands are concatenated and Quotient operands joined with
    ``/``, recursively and without parentheses. Scalar renders as the empty
    string, so ``render(Quotient(m, Scalar()))`` is ``"m/"``.

    Args:
        shape: Shape to render.

    Returns:
        str: Display form such as ``"m/ss"``.
    """
    if isinstance(shape, Atomic):
        return shape.name
    if isinstance(shape, Product):
        return f"{render(shape.left)}{render(shape.right)}"
    if isinstance(shape, Quotient):
        return f"{render(shape.numerator)}/{render(shape.denominator)}"
    return ""


def exponents(shape: Shape) -> Counter:
    """Net exponent of each atomic name in a shape.

    Names in a numerator count +1, names in a denominator -1. Names whose
    exponents cancel out are dropped, so a dimensionless shape maps to an
    empty counter.

    Args:
        shape: Shape to analyse.

    Returns:
        Counter: Mapping of atomic name to non-zero integer exponent.
    """
    counts: Counter = Counter()
    _accumulate(shape, 1, counts)
    return Counter({name: power for name, power in counts.items() if power})


def _accumulate(shape: Shape, sign: int, counts: Counter) -> None:
    if isinstance(shape, Atomic):
        counts[shape.name] += sign
    elif isinstance(shape, Product):
        _accumulate(shape.left, sign, counts)
        _accumulate(shape.right, sign, counts)
    elif isinstance(shape, Quotient):
        _accumulate(shape.numerator, sign, counts)
        _accumulate(shape.denominator, -sign, counts)


def equivalent(a: Shape, b: Shape) -> bool:
    """Algebraic equality up to commutativity, associativity and cancellation."""
    return exponents(a) == exponents(b)
