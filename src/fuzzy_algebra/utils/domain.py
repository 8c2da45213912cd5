"""
Helpers for building and measuring domains (universes of discourse).
"""

from typing import Any, FrozenSet, Iterable, List, Union

Number = Union[int, float]


def span(start: Number, stop: Number = None, step: Number = None) -> List[Number]:
    """
    An inclusive range of numbers. With a single argument, the range is 0..start; with two,
    the range is start..stop, ascending or descending depending on which one is larger. The
    step (default 1) is a magnitude, and is oriented toward 'stop'.

    Args:
        start: The first element, or the last element if 'stop' is omitted.
        stop: The last element (inclusive).
        step: The distance between consecutive elements.

    Returns:
        The list of numbers from start to stop.
    """
    if stop is None:
        start, stop = 0, start
    if step is None:
        step = 1
    if step == 0:
        raise ValueError("The step of a span cannot be zero.")
    step = abs(step) if stop >= start else -abs(step)
    count = int((stop - start) / step + 1e-9) + 1
    return [start + index * step for index in range(count)]


def as_crisp(domain: Iterable[Any]) -> FrozenSet[Any]:
    """
    Normalize a domain into a crisp set; duplicate values collapse.
    """
    return frozenset(domain)


def distinct_count(domain: Iterable[Any]) -> int:
    """
    The number of distinct values in the domain.
    """
    return len(as_crisp(domain))
