"""
Checks for sort results.

Stability is not checked: equal integers are indistinguishable, so only
ordering and multiset equality can be verified from values alone.
"""

from collections import Counter
from collections.abc import Sequence
from typing import Optional


def first_descending_violation(sequence: Sequence) -> Optional[int]:
    """Return the first index i where sequence[i] < sequence[i + 1], or None."""
    for i in range(len(sequence) - 1):
        if sequence[i] < sequence[i + 1]:
            return i
    return None


def is_descending(sequence: Sequence) -> bool:
    """Verify that a sequence is in non-increasing order."""
    return first_descending_violation(sequence) is None


def is_permutation(a: Sequence, b: Sequence) -> bool:
    """True iff a and b hold the same values with the same multiplicities."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)
