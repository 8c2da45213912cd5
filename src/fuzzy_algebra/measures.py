"""
Measures of discrete fuzzy sets, such as their height, cardinality, or subsethood.
"""

from typing import Iterable

import numpy as np

from fuzzy_algebra.exceptions import DivisionByZeroError, EmptyInputError
from fuzzy_algebra.membership import MembershipFunction
from fuzzy_algebra.relation.extension import alpha_cut
from fuzzy_algebra.relation.tnorm import intersection
from fuzzy_algebra.sets.discrete import FuzzySet, members
from fuzzy_algebra.sets.element import as_element
from fuzzy_algebra.utils.domain import distinct_count


def height(fuzzy_set: FuzzySet) -> float:
    """
    Calculates the height of the fuzzy set.

    Args:
        fuzzy_set: The fuzzy set.

    Returns:
        The height, or supremum, of the fuzzy set.
    """
    if len(fuzzy_set) == 0:
        raise EmptyInputError("The height of an empty fuzzy set is undefined.")
    return max(fuzzy_set.weights())


def scalar_cardinality(fuzzy_set: FuzzySet) -> float:
    """
    Calculates the scalar cardinality (i.e., sigma count) of the fuzzy set, the sum of its
    degrees of membership; an empty fuzzy set has a scalar cardinality of zero.

    Args:
        fuzzy_set: The fuzzy set.

    Returns:
        The sum of the weights.
    """
    return float(np.sum(fuzzy_set.weights(), dtype=np.float64))


def relative_cardinality(fuzzy_set: FuzzySet, domain: Iterable) -> float:
    """
    Calculates the scalar cardinality of the fuzzy set relative to the number of distinct
    elements in the domain.

    Args:
        fuzzy_set: The fuzzy set.
        domain: The universe of discourse the fuzzy set was defined over.

    Returns:
        The scalar cardinality divided by the number of distinct elements in the domain.
    """
    domain_size = distinct_count(domain)
    if domain_size == 0:
        raise DivisionByZeroError(
            "The relative cardinality over a domain without elements is undefined."
        )
    return scalar_cardinality(fuzzy_set) / domain_size


def fuzzy_cardinality(fuzzy_set: FuzzySet) -> FuzzySet:
    """
    Calculates the fuzzy cardinality of the fuzzy set, a distribution over its possible
    cardinalities. For every element of the fuzzy set, the scalar cardinality of the alpha cut
    at the element's weight is paired with that weight.

    Args:
        fuzzy_set: The fuzzy set.

    Returns:
        A fuzzy set whose values are cardinalities.
    """
    return FuzzySet(
        (scalar_cardinality(alpha_cut(fuzzy_set, element.weight)), element.weight)
        for element in fuzzy_set
    )


def subsethood(mu_1: MembershipFunction, mu_2: MembershipFunction, domain: Iterable) -> bool:
    """
    Determine if the fuzzy set described by 'mu_1' is a subset of the fuzzy set described by
    'mu_2' over the domain; i.e., whether 'mu_1' never grades an element higher than 'mu_2'.

    Args:
        mu_1: The membership function of the candidate subset.
        mu_2: The membership function of the candidate superset.
        domain: The elements to compare the membership functions on.

    Returns:
        True or False
    """
    return all(
        as_element(mu_1(element)).weight <= as_element(mu_2(element)).weight
        for element in domain
    )


def subsethood_degree(
    mu_1: MembershipFunction, mu_2: MembershipFunction, domain: Iterable
) -> float:
    """
    Kosko's degree of subsethood, the share of the first fuzzy set's scalar cardinality that
    is also contained in the second fuzzy set.
    """
    domain = tuple(domain)
    denominator = scalar_cardinality(members(mu_1, domain))
    if denominator == 0:
        raise DivisionByZeroError(
            "The degree of subsethood of a fuzzy set without membership is undefined."
        )
    return scalar_cardinality(members(intersection(mu_1, mu_2), domain)) / denominator
