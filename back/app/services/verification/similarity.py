def bigrams(text: str) -> list[str]:
    """Consecutive two-character slices, in order and with repeats."""
    return [text[i : i + 2] for i in range(len(text) - 1)]


def similarity(a: str, b: str) -> float:
    """
    Dice-style similarity of two short strings over character bigrams, in [0, 1].

    Every bigram occurrence of ``a`` that also appears anywhere in ``b`` counts
    towards the overlap, so repeated bigrams of ``a`` are not matched one-to-one
    and the measure is not symmetric. Duplicate detection thresholds were set
    against this exact behaviour.
    """
    bigrams_a = bigrams(a.lower())
    bigrams_b = bigrams(b.lower())

    total = len(bigrams_a) + len(bigrams_b)
    if total == 0:
        return 0.0

    present_in_b = set(bigrams_b)
    overlap = sum(1 for bigram in bigrams_a if bigram in present_in_b)

    # Repeats in a can overshoot 1 (e.g. "aaa" vs "aa")
    return min(1.0, 2 * overlap / total)
