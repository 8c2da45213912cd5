from fuzzy_algebra.relation.complement import complement
from fuzzy_algebra.relation.tnorm import intersection
from fuzzy_algebra.relation.snorm import union
