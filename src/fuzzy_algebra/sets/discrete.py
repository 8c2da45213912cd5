"""
Implements the discrete fuzzy set, a finite collection of fuzzy elements, and the functions that
build and sanity check fuzzy sets.
"""

from typing import Any, Callable, FrozenSet, Iterable, Tuple

import matplotlib.pyplot as plt
from yacs.config import CfgNode

from fuzzy_algebra.exceptions import MalformedElementError
from fuzzy_algebra.sets.element import FuzzyElement, as_element
from fuzzy_algebra.utils.configuration import default_configuration

CrispSet = FrozenSet[Any]


class FuzzySet:
    """
    An immutable, duplicate-free collection of FuzzyElement objects.

    Duplicates are detected by hashing, so the values of one fuzzy set may be of unrelated
    types (e.g., 1 and "low"). Iteration follows the order in which the elements were first
    given; a fuzzy set is still unordered by contract, and two fuzzy sets with the same
    elements are equal whatever their order. Every operation returns a new FuzzySet rather
    than modifying this one.
    """

    __slots__ = ("_elements", "_index", "_name")

    def __init__(self, elements: Iterable = (), name: str = None):
        """
        Args:
            elements: The (value, weight) pairs of the fuzzy set; duplicates are removed.
            name: Allows the user to specify the name of the fuzzy set. This feature is
                useful when visualizing the fuzzy set.
        """
        self._elements: Tuple[FuzzyElement, ...] = tuple(
            dict.fromkeys(as_element(item) for item in elements)
        )
        self._index: FrozenSet[FuzzyElement] = frozenset(self._elements)
        self._name = name

    @property
    def name(self) -> str:
        """
        The name of the fuzzy set, or None; it is fixed at construction.
        """
        return self._name

    def __iter__(self):
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, item) -> bool:
        try:
            element = as_element(item)
        except MalformedElementError:
            return False  # anything without the (value, weight) shape cannot be a member
        try:
            return element in self._index
        except TypeError:  # an unhashable value cannot be a member either
            return False

    def __eq__(self, other) -> bool:
        if not isinstance(other, FuzzySet):
            return NotImplemented
        return self._index == other._index

    def __hash__(self) -> int:
        return hash(self._index)

    def __repr__(self) -> str:
        elements = ", ".join(repr(element) for element in self._elements)
        if self.name is None:
            return f"FuzzySet({{{elements}}})"
        return f"FuzzySet({{{elements}}}, name={self.name!r})"

    def values(self) -> CrispSet:
        """
        The crisp set of every value in the fuzzy set, regardless of its weight.

        Returns:
            A frozenset of values.
        """
        return frozenset(element.value for element in self._elements)

    def weights(self) -> Tuple[float, ...]:
        """
        The weights of the fuzzy set's elements, in iteration order.

        Returns:
            A tuple of weights.
        """
        return tuple(element.weight for element in self._elements)

    def degree(self, value: Any) -> float:
        """
        Calculates the degree of membership for the provided value.

        Args:
            value: The element from the universe of discourse.

        Returns:
            The largest weight paired with the value, or 0.0 if the value is absent.
        """
        weights = [element.weight for element in self._elements if element.value == value]
        if not weights:
            return 0.0
        return max(weights)

    def filter(self, predicate: Callable[[FuzzyElement], bool]) -> "FuzzySet":
        """
        Keep only the elements that satisfy the predicate.

        Args:
            predicate: A function that receives a FuzzyElement and returns True to keep it.

        Returns:
            A new FuzzySet.
        """
        return FuzzySet(
            (element for element in self._elements if predicate(element)), name=self.name
        )

    def map(self, function: Callable[[FuzzyElement], Any]) -> "FuzzySet":
        """
        Transform every element; elements that become identical are merged.

        Args:
            function: A function that receives a FuzzyElement and returns a (value, weight) pair.

        Returns:
            A new FuzzySet.
        """
        return FuzzySet((function(element) for element in self._elements), name=self.name)

    def plot(self, configuration: CfgNode = None):
        """
        Plot the degree of membership of each element in the fuzzy set. The figure is returned
        and not shown.

        Args:
            configuration: The configuration whose 'plot' settings style the figure; if None,
                the default configuration is used.

        Returns:
            The matplotlib figure and axes.
        """
        config = configuration or default_configuration()
        figure, axes = plt.subplots()
        x_values = [element.value for element in self._elements]
        y_values = [element.weight for element in self._elements]
        axes.vlines(x_values, 0, y_values, color=config.plot.color)
        axes.scatter(x_values, y_values, color=config.plot.color, label="mu")
        if self.name is not None:
            axes.set_title(f"{self.name} Fuzzy Set")
        else:
            axes.set_title("Unnamed Fuzzy Set")
        axes.set_ylim([0, config.plot.y_limit])
        axes.set_xlabel(config.plot.x_label)
        axes.set_ylabel(config.plot.y_label)
        axes.legend()
        return figure, axes


def members(
    mu: Callable,
    domain: Iterable,
    name: str = None,
    strict: bool = None,
    configuration: CfgNode = None,
) -> FuzzySet:
    """
    Evaluate a membership function over every element of a domain.

    Args:
        mu: The membership function; it maps an element to a (value, weight) pair.
        domain: The elements of the universe of discourse to evaluate.
        name: An optional name for the resulting fuzzy set.
        strict: Whether weights outside the configured range are rejected; if None, the
            'weights.strict' setting of the configuration is used.
        configuration: The configuration that provides the 'weights' settings; if None, the
            default configuration is used.

    Returns:
        The fuzzy set {mu(x) | x in domain}.
    """
    config = configuration or default_configuration()
    fuzzy_set = FuzzySet((mu(element) for element in domain), name=name)
    if strict is None:
        strict = config.weights.strict
    if strict:
        check_well_formed(fuzzy_set, strict=True, configuration=config)
    return fuzzy_set


def check_well_formed(
    collection: Iterable, strict: bool = None, configuration: CfgNode = None
) -> None:
    """
    Raise a MalformedElementError for the first member of the collection that lacks the
    (value, weight) shape. In strict mode, weights outside of the configured range
    [weights.lower, weights.upper] are rejected as well.

    Args:
        collection: The collection that should represent a fuzzy set.
        strict: Whether to check the range of the weights; if None, the 'weights.strict'
            setting of the configuration is used.
        configuration: The configuration that provides the 'weights' settings; if None, the
            default configuration is used.

    Returns:
        None
    """
    config = configuration or default_configuration()
    if strict is None:
        strict = config.weights.strict
    for item in collection:
        element = as_element(item)
        if strict and not config.weights.lower <= element.weight <= config.weights.upper:
            raise MalformedElementError(
                f"The weight of {element!r} is outside of "
                f"[{config.weights.lower}, {config.weights.upper}]."
            )


def is_well_formed(collection: Iterable) -> bool:
    """
    Determine if every member of the collection has the (value, weight) shape.

    Returns:
        True or False
    """
    try:
        check_well_formed(collection, strict=False)
    except MalformedElementError:
        return False
    return True
