"""
Exceptions raised by the fuzzy set algebra. Each one also derives from the built-in exception
with the closest meaning, so callers may catch either.
"""


class FuzzyAlgebraError(Exception):
    """
    Base class of all errors raised by this library.
    """


class EmptyInputError(FuzzyAlgebraError, ValueError):
    """
    An operation that requires a non-empty collection (e.g., the height of a fuzzy set)
    was given an empty one; no meaningful answer exists.
    """


EmptySetError = EmptyInputError


class DivisionByZeroError(FuzzyAlgebraError, ZeroDivisionError):
    """
    A relative measure was requested over a denominator of zero (e.g., a domain with no
    distinct elements).
    """


class MalformedElementError(FuzzyAlgebraError, ValueError):
    """
    A member of a collection does not have the (value, weight) shape of a fuzzy element, or
    its weight is outside the permitted range while strict mode is enabled.
    """
