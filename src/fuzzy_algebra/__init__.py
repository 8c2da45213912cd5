"""
A library for discrete fuzzy sets: membership evaluation, the standard set algebra (complement,
intersection, union), alpha cuts, cardinality, subsethood, and an aggregate analysis report.
"""

import logging

from fuzzy_algebra.analysis import AnalysisReport, analyze
from fuzzy_algebra.exceptions import (
    DivisionByZeroError,
    EmptyInputError,
    EmptySetError,
    FuzzyAlgebraError,
    MalformedElementError,
)
from fuzzy_algebra.measures import (
    fuzzy_cardinality,
    height,
    relative_cardinality,
    scalar_cardinality,
    subsethood,
    subsethood_degree,
)
from fuzzy_algebra.membership import (
    MembershipFunction,
    fuzzify,
    gaussian,
    piecewise,
    triangular,
)
from fuzzy_algebra.relation.complement import complement
from fuzzy_algebra.relation.extension import (
    alpha_cut,
    crisp_members,
    level_set,
    special_fuzzy_set,
    strong_alpha_cut,
    support,
)
from fuzzy_algebra.relation.snorm import union
from fuzzy_algebra.relation.tnorm import intersection
from fuzzy_algebra.sets.discrete import (
    CrispSet,
    FuzzySet,
    check_well_formed,
    is_well_formed,
    members,
)
from fuzzy_algebra.sets.element import FuzzyElement, as_element
from fuzzy_algebra.utils.domain import as_crisp, distinct_count, span

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
