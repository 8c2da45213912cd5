"""
Implements the FuzzyElement, the atomic value of a fuzzy set.
"""

import numbers
from collections import namedtuple

from fuzzy_algebra.exceptions import MalformedElementError


class FuzzyElement(namedtuple(typename="FuzzyElement", field_names=("value", "weight"))):
    """
    The FuzzyElement pairs an element of the universe of discourse, its *value*, with the
    *weight* (i.e., degree of membership) it holds in some fuzzy set.

    The weight is conventionally within [0, 1], but this is not enforced here; membership
    functions that produce raw scores before normalization are permitted. Being a tuple, two
    fuzzy elements are equal if and only if both their values and weights are equal, and they
    hash alike whenever their values do. This is what allows a FuzzySet to remain free of
    duplicates.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"({self.value!r}, {self.weight!r})"


def as_element(item) -> FuzzyElement:
    """
    Coerce a (value, weight) pair into a FuzzyElement.

    Args:
        item: A FuzzyElement, or any 2-item sequence whose second item is a real number.

    Returns:
        The item as a FuzzyElement.
    """
    try:
        value, weight = item
    except (TypeError, ValueError) as error:
        raise MalformedElementError(
            f"Expected a (value, weight) pair, but received {item!r}."
        ) from error
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise MalformedElementError(
            f"The weight of {item!r} must be a real number, not {type(weight).__name__}."
        )
    if isinstance(item, FuzzyElement):
        return item
    return FuzzyElement(value, weight)
