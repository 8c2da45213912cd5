"""
Implements the standard complement of a membership function.
"""

from fuzzy_algebra.membership import MembershipFunction
from fuzzy_algebra.sets.element import FuzzyElement, as_element


def complement(mu: MembershipFunction) -> MembershipFunction:
    """
    Obtains the standard complement of a membership function as defined by Lotfi A. Zadeh.

    Args:
        mu: The membership function to complement.

    Returns:
        The membership function x -> (value, 1 - weight), where (value, weight) = mu(x).
    """

    def membership(element) -> FuzzyElement:
        value, weight = as_element(mu(element))
        return FuzzyElement(value, 1 - weight)

    return membership
