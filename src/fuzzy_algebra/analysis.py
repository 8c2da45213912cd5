"""
Builds the AnalysisReport, a summary of a fuzzy set over its domain that gathers its measures
and its support in one read-only mapping.
"""

import logging
from collections.abc import Collection, Mapping
from typing import Any, Iterable

from fuzzy_algebra.measures import (
    fuzzy_cardinality,
    height,
    relative_cardinality,
    scalar_cardinality,
)
from fuzzy_algebra.membership import MembershipFunction
from fuzzy_algebra.relation.extension import support
from fuzzy_algebra.sets.discrete import members
from fuzzy_algebra.utils.domain import distinct_count

LOGGER = logging.getLogger(__name__)


class AnalysisReport(Mapping):
    """
    A read-only mapping with the fixed keys listed in AnalysisReport.KEYS. Every value is also
    available as an attribute, where the key's dashes are replaced by underscores
    (e.g., report["domain-size"] is report.domain_size).
    """

    KEYS = (
        "elements",
        "size",
        "domain-size",
        "relative-size",
        "fuzzy-size",
        "height",
        "support",
        "domain",
        "mu",
    )

    __slots__ = ("_entries",)

    def __init__(self, **entries: Any):
        keys = {key.replace("_", "-") for key in entries}
        if keys != set(self.KEYS):
            raise ValueError(
                f"An AnalysisReport requires exactly the keys {self.KEYS}, "
                f"but received {tuple(sorted(keys))}."
            )
        object.__setattr__(
            self,
            "_entries",
            {key: entries[key.replace("-", "_")] for key in self.KEYS},
        )

    def __getitem__(self, key: str) -> Any:
        return self._entries[key]

    def __iter__(self):
        return iter(self.KEYS)

    def __len__(self) -> int:
        return len(self.KEYS)

    def __getattr__(self, item: str) -> Any:
        if item.startswith("_"):
            raise AttributeError(item)
        try:
            return self._entries[item.replace("_", "-")]
        except KeyError as error:
            raise AttributeError(item) from error

    def __setattr__(self, key, value):
        raise AttributeError("An AnalysisReport is read-only.")

    def __repr__(self) -> str:
        return f"AnalysisReport({self._entries!r})"


def analyze(mu: MembershipFunction, domain: Iterable) -> AnalysisReport:
    """
    Summarize the fuzzy set that the membership function describes over the domain.

    Errors from the measures (e.g., an empty domain) are not caught here.

    Args:
        mu: The membership function.
        domain: The elements of the universe of discourse. A collection is reported as given;
            any other iterable (e.g., a generator) is consumed once into a tuple.

    Returns:
        The AnalysisReport.
    """
    if not isinstance(domain, Collection):
        domain = tuple(domain)
    elements = members(mu, domain)
    size = scalar_cardinality(elements)
    domain_size = distinct_count(domain)
    relative_size = relative_cardinality(elements, domain)
    fuzzy_size = fuzzy_cardinality(elements)
    maximum = height(elements)
    supported = support(elements)
    LOGGER.debug(
        "Analyzed %d elements over a domain of %d distinct values (size=%s, height=%s).",
        len(elements),
        domain_size,
        size,
        maximum,
    )
    return AnalysisReport(
        elements=elements,
        size=size,
        domain_size=domain_size,
        relative_size=relative_size,
        fuzzy_size=fuzzy_size,
        height=maximum,
        support=supported,
        domain=domain,
        mu=mu,
    )
