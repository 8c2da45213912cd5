"""
Test the FuzzySet class, and the construction and sanity checks of fuzzy sets.
"""
import tempfile
import unittest
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from fuzzy_algebra.exceptions import MalformedElementError  # noqa: E402
from fuzzy_algebra.relation.snorm import union  # noqa: E402
from fuzzy_algebra.sets.discrete import (  # noqa: E402
    FuzzySet,
    check_well_formed,
    is_well_formed,
    members,
)
from fuzzy_algebra.sets.element import FuzzyElement  # noqa: E402
from fuzzy_algebra.utils.configuration import (  # noqa: E402
    load_and_override_default_configuration,
)
from fuzzy_algebra.utils.domain import span  # noqa: E402


def proportion(element):
    return element, element / 5.0


def custom_configuration(text):
    with tempfile.TemporaryDirectory() as directory:
        path = Path(directory) / "custom.yaml"
        path.write_text(text, encoding="utf-8")
        return load_and_override_default_configuration(path)


class TestFuzzySet(unittest.TestCase):
    def test_empty_fuzzy_set(self) -> None:
        """
        Test that an empty FuzzySet object can be created.

        Returns:
            None
        """
        fuzzy_set = FuzzySet()
        assert len(fuzzy_set) == 0
        assert list(fuzzy_set) == []
        assert fuzzy_set.values() == frozenset()
        assert fuzzy_set.degree(0) == 0.0

    def test_duplicates_are_removed(self) -> None:
        fuzzy_set = FuzzySet([(1, 0.5), (1, 0.5), FuzzyElement(1, 0.5), (2, 0.1)])
        assert len(fuzzy_set) == 2
        assert list(fuzzy_set) == [FuzzyElement(1, 0.5), FuzzyElement(2, 0.1)]

    def test_same_value_with_different_weights(self) -> None:
        fuzzy_set = FuzzySet([(1, 0.5), (1, 0.2)])
        assert len(fuzzy_set) == 2
        assert fuzzy_set.degree(1) == 0.5
        assert fuzzy_set.values() == frozenset({1})

    def test_contains(self) -> None:
        fuzzy_set = FuzzySet([(1, 0.5), (2, 0.1)])
        assert (1, 0.5) in fuzzy_set
        assert FuzzyElement(2, 0.1) in fuzzy_set
        assert (1, 0.4) not in fuzzy_set
        assert 1 not in fuzzy_set
        assert "not an element" not in fuzzy_set

    def test_equality_ignores_name_and_order(self) -> None:
        first = FuzzySet([(2, 0.1), (1, 0.5)], name="First")
        second = FuzzySet([(1, 0.5), (2, 0.1)], name="Second")
        assert first == second
        assert hash(first) == hash(second)
        assert first != FuzzySet([(1, 0.5)])
        assert set(first) == {(1, 0.5), (2, 0.1)}

    def test_filter_and_map_return_new_sets(self) -> None:
        fuzzy_set = FuzzySet([(1, 0.2), (2, 0.4), (3, 0.6)], name="Original")
        filtered = fuzzy_set.filter(lambda element: element.weight > 0.3)
        mapped = fuzzy_set.map(lambda element: (element.value * 10, element.weight))
        assert filtered == FuzzySet([(2, 0.4), (3, 0.6)])
        assert mapped == FuzzySet([(10, 0.2), (20, 0.4), (30, 0.6)])
        assert filtered.name == mapped.name == "Original"
        assert len(fuzzy_set) == 3  # the original is untouched

    def test_map_merges_identical_elements(self) -> None:
        fuzzy_set = FuzzySet([(1, 0.5), (2, 0.5)])
        assert len(fuzzy_set.map(lambda element: (0, element.weight))) == 1

    def test_weights(self) -> None:
        fuzzy_set = FuzzySet([(2, 0.4), (1, 0.2), (2, 0.4)])
        assert fuzzy_set.weights() == (0.4, 0.2)

    def test_values_of_unrelated_types(self) -> None:
        """
        Test that a fuzzy set may hold values that cannot be compared with each other.

        Returns:
            None
        """
        fuzzy_set = FuzzySet([(1, 0.5), ("low", 0.5), (None, 0.1), ("low", 0.5)])
        assert len(fuzzy_set) == 3
        assert list(fuzzy_set) == [(1, 0.5), ("low", 0.5), (None, 0.1)]
        assert fuzzy_set.values() == frozenset({1, "low", None})
        assert fuzzy_set == FuzzySet([(None, 0.1), ("low", 0.5), (1, 0.5)])
        assert ("low", 0.5) in fuzzy_set
        assert ("a", 0.5) not in FuzzySet([(1, 0.5)])
        assert (1, 0.5) not in FuzzySet([("a", 0.5)])
        assert ([1], 0.5) not in fuzzy_set

    def test_name_is_read_only(self) -> None:
        fuzzy_set = FuzzySet([(1, 0.5)], name="A")
        with self.assertRaises(AttributeError):
            fuzzy_set.name = "B"
        assert fuzzy_set.name == "A"

    def test_repr(self) -> None:
        assert repr(FuzzySet([(1, 0.5)])) == "FuzzySet({(1, 0.5)})"
        assert repr(FuzzySet([(1, 0.5)], name="A")) == "FuzzySet({(1, 0.5)}, name='A')"

    def test_fuzzy_set_plot(self) -> None:
        fuzzy_set = members(proportion, span(1, 5), name="Proportion")
        figure, axes = fuzzy_set.plot()
        assert axes.get_title() == "Proportion Fuzzy Set"
        assert axes.get_xlabel() == "Elements of Universe"
        assert axes.get_ylabel() == "Degree of Membership"
        assert axes.get_ylim() == (0, 1.1)
        plt.close(figure)

        # a fuzzy set without a name is an "Unnamed" FuzzySet
        figure, axes = FuzzySet(fuzzy_set).plot()
        assert axes.get_title() == "Unnamed Fuzzy Set"
        plt.close(figure)

    def test_fuzzy_set_plot_with_custom_configuration(self) -> None:
        config = custom_configuration("plot:\n  y_label: Grade\n  y_limit: 2.0\n")
        figure, axes = members(proportion, span(1, 5)).plot(configuration=config)
        assert axes.get_ylabel() == "Grade"
        assert axes.get_ylim() == (0, 2.0)
        assert axes.get_xlabel() == "Elements of Universe"
        plt.close(figure)


class TestMembers(unittest.TestCase):
    def test_members(self) -> None:
        fuzzy_set = members(proportion, [1, 2, 3, 4, 5])
        assert fuzzy_set == FuzzySet([(1, 0.2), (2, 0.4), (3, 0.6), (4, 0.8), (5, 1.0)])

    def test_members_of_empty_domain(self) -> None:
        assert len(members(proportion, [])) == 0

    def test_members_accepts_any_iterable(self) -> None:
        generator = (element for element in [1, 2, 2, 3])
        assert members(proportion, generator) == members(proportion, [3, 2, 1])

    def test_members_may_transform_values(self) -> None:
        fuzzy_set = members(lambda element: (element % 2, 1.0), span(1, 6), name="Parity")
        assert fuzzy_set == FuzzySet([(0, 1.0), (1, 1.0)])
        assert fuzzy_set.name == "Parity"

    def test_out_of_range_weights(self) -> None:
        """
        Test that weights outside [0, 1] are permitted unless strict mode is requested.

        Returns:
            None
        """
        def raw_score(element):
            return element, element * 1.5

        assert members(raw_score, [1]).degree(1) == 1.5
        with self.assertRaises(MalformedElementError):
            members(raw_score, [1], strict=True)

    def test_malformed_membership_function(self) -> None:
        with self.assertRaises(MalformedElementError):
            members(lambda element: element, [1, 2])

    def test_members_with_custom_configuration(self) -> None:
        """
        Test that a configuration given to members decides the strictness and the range of
        the weights.

        Returns:
            None
        """
        def raw_score(element):
            return element, element * 1.5

        strict = custom_configuration("weights:\n  strict: True\n")
        with self.assertRaises(MalformedElementError):
            members(raw_score, [1], configuration=strict)
        assert members(raw_score, [1], strict=False, configuration=strict).degree(1) == 1.5

        wide = custom_configuration("weights:\n  strict: True\n  upper: 100.0\n")
        assert members(raw_score, [1, 2], configuration=wide).degree(2) == 3.0
        with self.assertRaises(MalformedElementError):
            check_well_formed([(1, 150.0)], configuration=wide)
        check_well_formed([(1, 150.0)])  # the default configuration is not strict

    def test_union_of_values_with_unrelated_types(self) -> None:
        def label(element):
            return "low", 0.5 if element == 1 else 0.1

        def identity(element):
            return element, 0.3

        fuzzy_set = members(union(label, identity), [1, 2])
        assert fuzzy_set == FuzzySet([("low", 0.5), (2, 0.3)])
        assert ("low", 0.5) in fuzzy_set
        assert (1, 0.3) not in fuzzy_set


class TestWellFormed(unittest.TestCase):
    def test_is_well_formed(self) -> None:
        assert is_well_formed([])
        assert is_well_formed([(1, 0.5), FuzzyElement(2, 0.1)])
        assert is_well_formed(FuzzySet([(1, 0.5)]))
        assert is_well_formed([(1, 1.5)])  # the range is only checked in strict mode
        assert not is_well_formed([(1, 0.5), (2,)])
        assert not is_well_formed([(1, "0.5")])

    def test_check_well_formed(self) -> None:
        check_well_formed([(1, 0.0), (2, 1.0)], strict=True)
        with self.assertRaises(MalformedElementError):
            check_well_formed([(1, 0.5), 3])
        with self.assertRaises(MalformedElementError):
            check_well_formed([(1, -0.1)], strict=True)
        check_well_formed([(1, -0.1)], strict=False)
