"""
Implements the s-norm fuzzy relations.
"""

from functools import reduce

from fuzzy_algebra.membership import MembershipFunction
from fuzzy_algebra.sets.element import FuzzyElement, as_element


def standard_union(first: MembershipFunction, second: MembershipFunction):
    """
    The standard (maximum) union of exactly two membership functions.

    Whichever result has the greater weight is returned; when the weights are equal, the
    result of the second membership function is returned.

    Args:
        first: The first membership function.
        second: The second membership function.

    Returns:
        The membership function x -> max(first(x), second(x)) by weight.
    """

    def membership(element) -> FuzzyElement:
        left, right = as_element(first(element)), as_element(second(element))
        return left if left.weight > right.weight else right

    return membership


def union(
    first: MembershipFunction, second: MembershipFunction, *others: MembershipFunction
) -> MembershipFunction:
    """
    A standard union of two or more membership functions, folded from left to right;
    on ties, the later operand's result wins.

    Args:
        first: The first membership function.
        second: The second membership function.
        *others: Any further membership functions.

    Returns:
        The membership function of the union.
    """
    return reduce(standard_union, others, standard_union(first, second))
