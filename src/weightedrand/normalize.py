"""Conversion of raw weights into an exact integer basis.

The alias table construction works entirely in integers so that the mean
weight is exact. Integer weights only need multiplying by the number of
categories. Float weights are first scaled to fixed precision, rounded, and
reduced by their common divisor so that the integers stay small.
"""

from functools import reduce
from numbers import Integral
import math

from sympy import igcd

# Float weights are resolved to this many parts per unit.
PRECISION = 10000


def gcd_of_nonzero(values):
    """Greatest common divisor of the nonzero elements of values.

    Zeros are skipped. If there are no nonzero elements at all (including
    the empty case) this returns 0, which callers must not divide by.
    """
    nonzero = [v for v in values if v != 0]
    if not nonzero:
        return 0
    return int(reduce(igcd, nonzero))


def _scale(weight):
    weight = float(weight)
    # NaN fails this comparison too, so it is clamped along with negatives.
    if not weight > 0:
        return 0
    scaled = weight * PRECISION
    if math.isinf(scaled):
        raise ValueError("Weight %r cannot be scaled to a finite basis" % (
            weight,))
    return int(math.floor(scaled + 0.5))


def normalize_integers(weights):
    n = len(weights)
    return tuple(max(int(w), 0) * n for w in weights)


def normalize_floats(weights):
    scaled = [_scale(w) for w in weights]
    g = gcd_of_nonzero(scaled)
    if g > 1:
        scaled = [s // g for s in scaled]
    return normalize_integers(scaled)


def normalize(weights):
    """Returns the integer weight basis for weights as a tuple.

    If every weight is an integer they are used as they are, otherwise all of
    them are treated as floats. Negative weights count as zero. In both cases
    the result is multiplied by the number of weights, so its sum is always
    divisible by its length.
    """
    weights = list(weights)
    if all(isinstance(w, Integral) for w in weights):
        return normalize_integers(weights)
    return normalize_floats(weights)
