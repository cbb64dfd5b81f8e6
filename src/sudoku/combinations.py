"""Subset enumeration over the symbol alphabet."""

from typing import List, Sequence, Tuple

from .model import SYMBOLS

Combination = Tuple[str, ...]


def make_combinations(elems: Sequence[str], minimum: int) -> List[Combination]:
    """
    Enumerate every subset of `elems` with at least `minimum` members.

    Each number in 0 .. 2**n - 1 is read as a bitmask: element i belongs to the
    subset iff bit i is set. Subsets come out in ascending mask order and keep
    the ordering of `elems` inside each subset.
    """
    n = len(elems)
    result: List[Combination] = []
    for mask in range(1 << n):
        combination = tuple(elems[i] for i in range(n) if mask & (1 << i))
        if len(combination) >= minimum:
            result.append(combination)
    return result


# Shared by every naked/hidden subset scan.
COMBINATIONS: List[Combination] = make_combinations(SYMBOLS, 2)
