"""In-place descending sort by repeated pairwise swaps."""

import logging
from collections.abc import MutableSequence
from typing import Optional

from .sort_trace import SortTrace

logger = logging.getLogger(__name__)


def random_sort(sequence: MutableSequence, trace: Optional[SortTrace] = None) -> None:
    """Sort ``sequence`` into descending order, in place.

    For each outer index ``j`` (ascending) every index ``i`` of the sequence
    is visited, including ``j`` itself and positions already handled by
    earlier passes, and the two values are swapped whenever
    ``sequence[j] > sequence[i]``. This always takes exactly
    ``len(sequence) ** 2`` comparisons. Not stable.

    Args:
        sequence: Mutable sequence of integers. Empty and single-element
            sequences are left unchanged.
        trace: Optional SortTrace that receives comparison and swap counts.

    Raises:
        TypeError: If ``sequence`` does not support item assignment.
    """
    if not isinstance(sequence, MutableSequence):
        raise TypeError(
            f"random_sort needs a mutable sequence, got {type(sequence).__name__}"
        )

    size = len(sequence)
    logger.debug("Sorting sequence of %d element(s)", size)

    if trace is not None:
        trace.size = size
        trace.comparisons = 0
        trace.swaps = 0
        trace.swaps_per_pass = []

    for j in range(size):
        pass_comparisons = 0
        pass_swaps = 0
        # After this pass sequence[:j + 1] is descending and sequence[j]
        # holds the minimum of the whole sequence.
        for i in range(size):
            pass_comparisons += 1
            if sequence[j] > sequence[i]:
                sequence[j], sequence[i] = sequence[i], sequence[j]
                pass_swaps += 1

        if trace is not None:
            trace.comparisons += pass_comparisons
            trace.swaps += pass_swaps
            trace.swaps_per_pass.append(pass_swaps)

    if trace is not None:
        logger.debug(
            "Sorted %d element(s): %d comparisons, %d swaps",
            size, trace.comparisons, trace.swaps
        )
