"""
Demo of working with discrete fuzzy sets for a toy task regarding age.
"""
from sympy import Symbol, Interval, oo  # oo is infinity

from fuzzy_algebra import (
    complement,
    height,
    intersection,
    members,
    piecewise,
    span,
    subsethood,
    union,
)


def a_1():
    """
    A sample construction of a membership function called 'A1' (young).
    """
    element = Symbol('x')
    return piecewise([
        (1, Interval.Lopen(-oo, 20)),
        ((35 - element) / 15, Interval.open(20, 35)),
        (0, Interval.Ropen(35, oo)),
    ])


def a_2():
    """
    A sample construction of a membership function called 'A2' (middle-aged).
    """
    element = Symbol('x')
    return piecewise([
        (0, Interval.Lopen(-oo, 20)),
        ((element - 20) / 15, Interval.open(20, 35)),
        (1, Interval(35, 45)),
        ((60 - element) / 15, Interval.open(45, 60)),
        (0, Interval.Ropen(60, oo)),
    ])


def a_3():
    """
    A sample construction of a membership function called 'A3' (old).
    """
    element = Symbol('x')
    return piecewise([
        (0, Interval.Lopen(-oo, 45)),
        ((element - 45) / 15, Interval.open(45, 60)),
        (1, Interval.Ropen(60, oo)),
    ])


if __name__ == "__main__":
    ages = span(0, 80)
    a1, a2, a3 = a_1(), a_2(), a_3()

    b = intersection(a1, a2)
    c = intersection(a2, a3)
    for name, mu in (
        ('B', b),
        ('C', c),
        ('B Union C', union(b, c)),
        ('Not(A1) Intersection Not(A3)', intersection(complement(a1), complement(a3))),
    ):
        fuzzy_set = members(mu, ages, name=name)
        figure, axes = fuzzy_set.plot()
        figure.savefig(f"{name}.png")
        print(f"{name}: height={height(fuzzy_set)}")

    # B is contained within A1, but A1 is not contained within B
    print(subsethood(b, a1, ages), subsethood(a1, b, ages))
