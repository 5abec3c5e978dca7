"""Construction of WalkerTables from weights.

Weights are first put on an integer basis by weightedrand.normalize, so the
mean weight is an exact integer and the whole construction is done without
floating point error. Only the final acceptance probabilities are floats.
"""

import logging

from weightedrand.normalize import normalize
from weightedrand.table import EmptyWeights, WalkerTable

logger = logging.getLogger(__name__)


def inverse(weights):
    """Remaps weights so that favoured indices become disfavoured and vice
    versa.

    The largest and smallest values swap places and every other value x
    becomes max - x.
    """
    weights = tuple(weights)
    if not weights:
        return weights
    lo = min(weights)
    hi = max(weights)
    result = []
    for w in weights:
        if w == hi:
            result.append(lo)
        elif w == lo:
            result.append(hi)
        else:
            result.append(hi - w)
    return tuple(result)


def calc_table(weights):
    """Returns the aliases and probs for a sequence of normalized weights
    whose sum is at least their count.

    Slots whose weight is at most the mean are filled up to the mean from
    slots above it, last in first out. Normalized weights have an exact
    integer mean. For other weights the mean is rounded down and whatever
    mass is left over stays with the slots that hold it.
    """
    n = len(weights)
    mean = sum(weights) // n
    if mean <= 0:
        raise ValueError(
            "Weights must sum to at least their count, got %r" % (weights,))

    below = []
    above = []
    for i, w in enumerate(weights):
        if w <= mean:
            below.append((i, w))
        else:
            above.append((i, w))

    aliases = [0] * n
    probs = [0.0] * n

    while below:
        i, w = below.pop()
        if above:
            j, v = above.pop()
            diff = mean - w
            aliases[i] = j
            probs[i] = diff / mean
            v -= diff
            if v <= mean:
                below.append((j, v))
            else:
                above.append((j, v))
        else:
            # Whatever rounding left over stays with the slot itself.
            aliases[i] = i
            probs[i] = w / mean

    while above:
        i, _ = above.pop()
        aliases[i] = i
        probs[i] = 1.0

    return aliases, probs


def uniform_table(n):
    return WalkerTable(aliases=range(n), probs=[0.0] * n)


def build(weights):
    """Builds a WalkerTable sampling each index in proportion to its weight.

    weights may be integers or floats. Negative weights are treated as zero
    and zero weight indices are never sampled, except that if every weight
    is zero the table samples all indices uniformly. Raises EmptyWeights if
    there are no weights at all.
    """
    return WalkerTableBuilder(weights).build()


class WalkerTableBuilder(object):
    """Holds the normalized weights for a table that is yet to be built.

    The index_weights are the normalized integer weights, which may be scaled
    relative to the weights passed in but keep their ratios.
    """

    def __init__(self, weights):
        index_weights = normalize(weights)
        if not index_weights:
            raise EmptyWeights("Cannot build a table without any weights")
        self.__index_weights = index_weights

    @property
    def index_weights(self):
        return self.__index_weights

    def inverted(self):
        """Returns a builder for the inverse of these weights."""
        return WalkerTableBuilder(inverse(self.__index_weights))

    def build(self):
        n = len(self.__index_weights)
        total = sum(self.__index_weights)
        if total == 0:
            logger.debug(
                "All %d weights are zero, sampling uniformly instead", n)
            return uniform_table(n)
        aliases, probs = calc_table(self.__index_weights)
        logger.debug(
            "Built alias table for %d indices with mean weight %d",
            n, total // n)
        return WalkerTable(aliases=aliases, probs=probs)

    def __repr__(self):
        return "WalkerTableBuilder(%r)" % (list(self.__index_weights),)
