"""Weighted random index generation by Walker's Alias Method.

A WalkerTable holds two parallel vectors. Drawing from it goes:

1. Pick an index i uniformly at random.
2. Pick a float r uniformly from [0, 1).
3. If r < probs[i] return aliases[i], otherwise return i.

Indices with more weight appear more often in aliases. Tables are immutable
once created, so a single table can be sampled from any number of threads.
"""

from random import Random
import threading

from pyrsistent import PClass, pvector_field

_local = threading.local()


def ambient_random():
    """Returns a Random instance belonging to the calling thread, so that
    threads sampling without an explicit rng never share generator state."""
    try:
        return _local.random
    except AttributeError:
        _local.random = Random()
        return _local.random


class EmptyWeights(ValueError):
    pass


def _well_formed(table):
    n = len(table.probs)
    if len(table.aliases) != n:
        return False, "aliases and probs must have the same length"
    if any(not 0 <= a < n for a in table.aliases):
        return False, "aliases must be indices into the table"
    if any(not 0.0 <= p <= 1.0 for p in table.probs):
        return False, "probs must lie in [0, 1]"
    return True, None


class WalkerTable(PClass):
    # Alias to another index for each slot.
    aliases = pvector_field(int)
    # Probability of answering with the alias rather than the slot itself.
    probs = pvector_field(float)

    __invariant__ = _well_formed

    def __len__(self):
        return len(self.probs)

    def next(self):
        """Returns an index at random using the thread's own generator."""
        return self.next_with(ambient_random())

    def next_with(self, rng):
        """Returns an index at random using rng, which must provide
        randrange() and random() the way random.Random does.

        Prefer this over next() when drawing many values in a loop."""
        n = len(self.probs)
        if n == 0:
            raise EmptyWeights("Cannot sample from an empty table")
        i = rng.randrange(n)
        r = rng.random()
        if r < self.probs[i]:
            return self.aliases[i]
        return i

    def choice(self, options, rng=None):
        if len(options) != len(self):
            raise ValueError("Expected %d options but got %d" % (
                len(self), len(options)))
        if rng is None:
            rng = ambient_random()
        return options[self.next_with(rng)]
