"""
Membership functions, and constructors for the common shapes of membership functions.

A membership function is any callable that maps an element of the universe of discourse to a
FuzzyElement, i.e., a (value, weight) pair. The value it returns need not be the element it
received; this is what allows the union or intersection of two membership functions to choose
which operand's value survives.
"""

from typing import Any, Callable, List, Tuple, Union

import numpy as np
import sympy

from fuzzy_algebra.sets.element import FuzzyElement

MembershipFunction = Callable[[Any], FuzzyElement]


def fuzzify(degree: Callable[[Any], float]) -> MembershipFunction:
    """
    Lift a function that only grades an element into a membership function that keeps the
    element as its value.

    Args:
        degree: A function that returns the degree of membership of an element.

    Returns:
        The membership function x -> (x, degree(x)).
    """

    def membership(element) -> FuzzyElement:
        return FuzzyElement(element, float(degree(element)))

    return membership


def triangular(left: float, center: float, right: float) -> MembershipFunction:
    """
    Triangular membership function that uses the 'left' and 'right' feet and the 'center'
    peak to determine a degree of membership for an element.

    https://www.mathworks.com/help/fuzzy/trimf.html
    Args:
        left: The element where membership starts to rise from zero.
        center: The element with full membership.
        right: The element where membership has fallen back to zero.

    Returns:
        The membership function.
    """
    if not left <= center <= right:
        raise ValueError(
            f"The triangle must satisfy left <= center <= right, but got "
            f"({left}, {center}, {right})."
        )

    def degree(element) -> float:
        if element < left or element > right:
            return 0.0
        if element < center:
            return (element - left) / (center - left)
        if element > center:
            return (right - element) / (right - center)
        return 1.0  # the peak, including degenerate (vertical) sides

    return fuzzify(degree)


def gaussian(center: float, sigma: float) -> MembershipFunction:
    """
    Gaussian membership function, exp(-(x - center)^2 / sigma^2).

    Args:
        center: The element with full membership.
        sigma: The width of the bell curve; must be positive.

    Returns:
        The membership function.
    """
    if sigma <= 0:
        raise ValueError(f"The sigma of a Gaussian must be positive, but got {sigma}.")

    def degree(element) -> float:
        return np.exp(-1.0 * (np.power(element - center, 2) / np.power(sigma, 2)))

    return fuzzify(degree)


def piecewise(
    formulas: List[Tuple[Union[sympy.Expr, float], sympy.Interval]],
    symbol: sympy.Symbol = sympy.Symbol("x"),
) -> MembershipFunction:
    """
    A membership function defined piece by piece with sympy.

    Args:
        formulas: A list of 2-tuples. The first element in the tuple at index 0 is the formula
            equal to f(x) and the second element in the tuple at index 1 is the Interval where
            the formula in the tuple is valid. The first Interval that contains the element
            decides which formula is used; elements outside every Interval have no membership.
        symbol: The free symbol used within the formulas.

    Returns:
        The membership function.
    """

    def degree(element) -> float:
        for formula, interval in formulas:
            if interval.contains(element):
                if isinstance(formula, sympy.Expr):
                    return float(formula.subs(symbol, element))
                return float(formula)
        return 0.0

    return fuzzify(degree)
