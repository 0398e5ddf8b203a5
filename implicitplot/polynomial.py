"""Bivariate polynomials and sampling of their zero set into a quadtree."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Tuple

from .point import Point
from .quadtree import Quadtree

_SUBDIVISION = 4


def power(x: float, n: int) -> float:
    """``x`` raised to the non-negative integer ``n`` by repeated squaring."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    if n == 0:
        return 1.0
    half = power(x * x, n // 2)
    return half if n % 2 == 0 else x * half


@dataclass(frozen=True)
class Term:
    """A monomial ``coeff * X^pow_x * Y^pow_y``."""

    pow_x: int
    pow_y: int
    coeff: float

    def derivative_x(self) -> "Term":
        """Partial derivative with respect to X."""
        if self.pow_x == 0:
            return Term(0, 0, 0.0)
        return Term(self.pow_x - 1, self.pow_y, self.coeff * self.pow_x)

    def derivative_y(self) -> "Term":
        """Partial derivative with respect to Y."""
        if self.pow_y == 0:
            return Term(0, 0, 0.0)
        return Term(self.pow_x, self.pow_y - 1, self.coeff * self.pow_y)


def _newton(
    f: Callable[[float], float],
    df: Callable[[float], float],
    iterations: int,
    start: float,
    precision: float,
) -> float:
    """Run a fixed number of Newton steps; NaN unless the last step converged."""
    current = start
    following = start
    for _ in range(iterations):
        current = following
        slope = df(current)
        if slope == 0:
            return math.nan
        following = current - f(current) / slope
    if abs(current - following) < precision:
        return following
    return math.nan


def _sample(low: float, high: float, samples: int) -> Tuple[float, List[float]]:
    """Step and start values from ``low`` to ``high`` inclusive, ``samples`` steps apart."""
    if samples <= 0:
        raise ValueError("the number of samples must be positive")
    step = (high - low) / samples
    if high < low:
        return step, []
    values = []
    value = low
    while value <= high:
        values.append(value)
        following = value + step
        if not following > value:
            raise ValueError("the sampling interval is too narrow to advance")
        value = following
    return step, values


class Polynomial:
    """A sum of terms in X and Y; terms with a zero coefficient are dropped."""

    def __init__(self, terms: Iterable[Term] = ()) -> None:
        self.terms: List[Term] = []
        for term in terms:
            self.add_term(term)

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def __repr__(self) -> str:
        return f"Polynomial({self.terms!r})"

    def add_term(self, term: Term) -> None:
        """Append ``term`` unless its coefficient is zero."""
        if term.coeff != 0:
            self.terms.append(term)

    def derivative_x(self) -> "Polynomial":
        """Partial derivative with respect to X."""
        return Polynomial(term.derivative_x() for term in self.terms)

    def derivative_y(self) -> "Polynomial":
        """Partial derivative with respect to Y."""
        return Polynomial(term.derivative_y() for term in self.terms)

    def substitute_x(self, x: float) -> "Polynomial":
        """Polynomial in Y alone obtained by fixing X to ``x``."""
        return Polynomial(
            Term(0, term.pow_y, term.coeff * power(x, term.pow_x)) for term in self.terms
        )

    def substitute_y(self, y: float) -> "Polynomial":
        """Polynomial in X alone obtained by fixing Y to ``y``."""
        return Polynomial(
            Term(term.pow_x, 0, term.coeff * power(y, term.pow_y)) for term in self.terms
        )

    def evaluate(self, x: float, y: float) -> float:
        """Value at the point (x, y)."""
        return sum(
            (term.coeff * power(y, term.pow_y) * power(x, term.pow_x) for term in self.terms),
            0.0,
        )

    def evaluate_x(self, x: float) -> float:
        """Value at X = ``x``, ignoring any powers of Y."""
        return sum((term.coeff * power(x, term.pow_x) for term in self.terms), 0.0)

    def evaluate_y(self, y: float) -> float:
        """Value at Y = ``y``, ignoring any powers of X."""
        return sum((term.coeff * power(y, term.pow_y) for term in self.terms), 0.0)

    def format(self, name: str) -> str:
        """Human-readable listing of the terms under ``name``."""
        body = "".join(
            "%f X^%d Y^%d + " % (term.coeff, term.pow_x, term.pow_y) for term in self.terms
        )
        return f"{name} = {body}"

    def newton_root_x(
        self, iterations: int, x0: float, derivative: "Polynomial", precision: float
    ) -> float:
        """Newton root in X from ``x0``, or NaN when it did not converge."""
        return _newton(self.evaluate_x, derivative.evaluate_x, iterations, x0, precision)

    def newton_root_y(
        self, iterations: int, y0: float, derivative: "Polynomial", precision: float
    ) -> float:
        """Newton root in Y from ``y0``, or NaN when it did not converge."""
        return _newton(self.evaluate_y, derivative.evaluate_y, iterations, y0, precision)

    def roots_x(
        self,
        y: float,
        x_min: float,
        x_max: float,
        iterations: int,
        samples: int,
        precision: float,
        scale: float,
    ) -> List[Point]:
        """Points of the zero set on the line Y = ``y`` strictly inside (x_min, x_max).

        Newton's method is started from ``samples + 1`` evenly spaced values;
        every converged root is kept, so the same root may appear several times.
        Coordinates are multiplied by ``scale``.
        """
        restricted = self.substitute_y(y)
        derivative = restricted.derivative_x()
        _, starts = _sample(x_min, x_max, samples)
        roots = []
        for start in starts:
            root = restricted.newton_root_x(iterations, start, derivative, precision)
            if x_min < root < x_max:
                roots.append(Point(root * scale, y * scale))
        return roots

    def roots_y(
        self,
        x: float,
        y_min: float,
        y_max: float,
        iterations: int,
        samples: int,
        precision: float,
        scale: float,
    ) -> List[Point]:
        """Points of the zero set on the line X = ``x`` strictly inside (y_min, y_max).

        Newton's method is started from ``samples + 1`` evenly spaced values;
        every converged root is kept, so the same root may appear several times.
        Coordinates are multiplied by ``scale``.
        """
        restricted = self.substitute_x(x)
        derivative = restricted.derivative_y()
        _, starts = _sample(y_min, y_max, samples)
        roots = []
        for start in starts:
            root = restricted.newton_root_y(iterations, start, derivative, precision)
            if y_min < root < y_max:
                roots.append(Point(x * scale, root * scale))
        return roots

    def build_quadtree(
        self,
        x_max: float,
        x_min: float,
        y_max: float,
        y_min: float,
        iterations: int,
        samples: int,
        points_per_node: int,
        precision: float,
        scale: float,
    ) -> Quadtree:
        """Sample the zero set on a grid, deduplicate, subdivide and link into curves."""
        quadtree = Quadtree(_SUBDIVISION, points_per_node)

        step_y, ys = _sample(y_min, y_max, samples)
        for y in ys:
            quadtree.extend(
                self.roots_x(y, x_min, x_max, iterations, samples, precision, scale)
            )

        step_x, xs = _sample(x_min, x_max, samples)
        for x in xs:
            quadtree.extend(
                self.roots_y(x, y_min, y_max, iterations, samples, precision, scale)
            )

        quadtree.remove_duplicates(precision * scale)
        quadtree.divide_space()

        max_step = 1.5 * (step_y + step_x)
        quadtree.link_points([], max_step * scale)
        self.attach_curvature(quadtree)
        return quadtree

    def attach_curvature(self, quadtree: Quadtree) -> None:
        """Store P_y, P_x, P_yy, P_xx and P_xy on ``quadtree`` for curvature queries."""
        py = self.derivative_y()
        px = self.derivative_x()
        quadtree.curvature = (py, px, py.derivative_y(), px.derivative_x(), px.derivative_y())

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(
            Term(a.pow_x + b.pow_x, a.pow_y + b.pow_y, a.coeff * b.coeff)
            for a in self.terms
            for b in other.terms
        )

    def __add__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial([*self.terms, *other.terms])