"""
Demo of working with discrete fuzzy sets for a toy task regarding knowledge of material.
"""
from sympy import Symbol, Interval, oo  # oo is infinity

from fuzzy_algebra import (
    alpha_cut,
    analyze,
    intersection,
    members,
    piecewise,
    span,
    special_fuzzy_set,
)


# https://www-sciencedirect-com.prox.lib.ncsu.edu/science/article/pii/S0957417412008056

def unknown():
    """
    Create a membership function for the linguistic term 'unknown'.

    Returns:
        MembershipFunction
    """
    element = Symbol('x')
    return piecewise([
        (1, Interval.Lopen(-oo, 55)),
        (1 - (element - 55) / 5, Interval.open(55, 60)),
        (0, Interval.Ropen(60, oo)),
    ])


def known():
    """
    Create a membership function for the linguistic term 'known'.

    Returns:
        MembershipFunction
    """
    element = Symbol('x')
    return piecewise([
        ((element - 70) / 5, Interval.open(70, 75)),
        (1, Interval(75, 85)),
        (1 - (element - 85) / 5, Interval.open(85, 90)),
        (0, Interval.Lopen(-oo, 70)),
        (0, Interval.Ropen(90, oo)),
    ])


def unsatisfactory_unknown():
    """
    Create a membership function for the linguistic term 'unsatisfactory unknown'.

    Returns:
        MembershipFunction
    """
    element = Symbol('x')
    return piecewise([
        ((element - 55) / 5, Interval.open(55, 60)),
        (1, Interval(60, 70)),
        (1 - (element - 70) / 5, Interval.open(70, 75)),
        (0, Interval.Lopen(-oo, 55)),
        (0, Interval.Ropen(75, oo)),
    ])


def learned():
    """
    Create a membership function for the linguistic term 'learned'.

    Returns:
        MembershipFunction
    """
    element = Symbol('x')
    return piecewise([
        ((element - 85) / 5, Interval.open(85, 90)),
        (1, Interval(90, 100)),
        (0, Interval.Lopen(-oo, 85)),
    ])


if __name__ == "__main__":
    grades = span(0, 100)
    terms = {
        'unknown': unknown(),
        'known': known(),
        'unsatisfactory unknown': unsatisfactory_unknown(),
        'learned': learned(),
    }

    # --- DEMO --- Classify a grade of 73 by the maximum membership principle
    memberships = {name: mu(73).weight for name, mu in terms.items()}
    print(f"Maximum Membership Principle: {max(memberships, key=memberships.get)}")

    known_grades = members(terms['known'], grades, name='Known')
    print(alpha_cut(known_grades, 0.6))
    print(special_fuzzy_set(known_grades, 0.5))

    confluence = members(intersection(terms['known'], terms['learned']), grades, name='Confluence')
    figure, axes = confluence.plot()
    figure.savefig('confluence.png')

    report = analyze(terms['known'], grades)
    for key, value in report.items():
        if key not in ('elements', 'fuzzy-size', 'domain', 'mu'):
            print(f"{key}: {value}")
