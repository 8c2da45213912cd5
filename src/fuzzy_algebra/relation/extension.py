"""
Implementation of the alpha cut operation, and the operations derived from it (e.g., support or
the special fuzzy set), for discrete fuzzy sets.
"""

from typing import FrozenSet, Iterable

from fuzzy_algebra.membership import MembershipFunction
from fuzzy_algebra.sets.discrete import CrispSet, FuzzySet, members


def alpha_cut(fuzzy_set: FuzzySet, alpha: float) -> FuzzySet:
    """
    The alpha cut of a fuzzy set keeps the elements whose degree of membership is greater
    than or equal to alpha.

    Args:
        fuzzy_set: The fuzzy set to cut.
        alpha: The alpha value that elements' membership degree must exceed or be equal to.

    Returns:
        The subset of the fuzzy set with weight >= alpha.
    """
    return fuzzy_set.filter(lambda element: element.weight >= alpha)


def strong_alpha_cut(fuzzy_set: FuzzySet, alpha: float) -> FuzzySet:
    """
    The strong alpha cut of a fuzzy set keeps the elements whose degree of membership is
    strictly greater than alpha.

    Args:
        fuzzy_set: The fuzzy set to cut.
        alpha: The alpha value that elements' membership degree must exceed.

    Returns:
        The subset of the fuzzy set with weight > alpha.
    """
    return fuzzy_set.filter(lambda element: element.weight > alpha)


def support(fuzzy_set: FuzzySet) -> CrispSet:
    """
    The support of a fuzzy set is the crisp set of values in its strong alpha cut at zero,
    i.e., every value with any positive membership.

    Args:
        fuzzy_set: The fuzzy set.

    Returns:
        The crisp set of supported values.
    """
    return strong_alpha_cut(fuzzy_set, 0.0).values()


def crisp_members(mu: MembershipFunction, domain: Iterable) -> CrispSet:
    """
    The crisp set of values that have any membership at all under 'mu' within the domain.
    """
    return support(members(mu, domain))


def level_set(fuzzy_set: FuzzySet) -> FrozenSet[float]:
    """
    The level set of a fuzzy set is the set of distinct degrees of membership it contains.
    """
    return frozenset(fuzzy_set.weights())


def special_fuzzy_set(fuzzy_set: FuzzySet, alpha: float) -> FuzzySet:
    """
    The special fuzzy set's membership for a given value is defined as the alpha value
    multiplied by the value's (crisp) membership within the fuzzy set's alpha cut.

    Args:
        fuzzy_set: The fuzzy set to retrieve the special fuzzy set from, given the alpha.
        alpha: The alpha value that elements' membership degree must exceed or be equal to.

    Returns:
        The alpha cut of the fuzzy set, with every weight replaced by alpha.
    """
    return alpha_cut(fuzzy_set, alpha).map(lambda element: (element.value, alpha))
