from fuzzy_algebra.sets.element import FuzzyElement, as_element
from fuzzy_algebra.sets.discrete import FuzzySet, CrispSet, members
