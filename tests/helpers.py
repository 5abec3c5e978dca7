import hypothesis.strategies as st

integer_weights = st.lists(st.integers(0, 1000), min_size=1)

float_weights = st.lists(st.floats(-1, 1), min_size=1)

weights = integer_weights | float_weights


def table_distribution(table):
    """Exact probability of each index under the sampling procedure."""
    n = len(table)
    result = [0.0] * n
    for i, (a, p) in enumerate(zip(table.aliases, table.probs)):
        result[i] += (1 - p) / n
        result[a] += p / n
    return result


def expected_distribution(index_weights):
    total = sum(index_weights)
    return [w / total for w in index_weights]


def frequencies(table, rnd, draws):
    counts = [0] * len(table)
    for _ in range(draws):
        counts[table.next_with(rnd)] += 1
    return counts
