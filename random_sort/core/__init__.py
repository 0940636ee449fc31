"""Core components: generator, sort routine, printer and checks."""

from random_sort.core.generator import (
    IntegerSource,
    UniformIntSource,
    generate_sequence,
)
from random_sort.core.printer import format_sequence, print_report
from random_sort.core.sort_routine import random_sort
from random_sort.core.sort_trace import SortTrace
from random_sort.core.verification import (
    first_descending_violation,
    is_descending,
    is_permutation,
)

__all__ = [
    "IntegerSource",
    "UniformIntSource",
    "generate_sequence",
    "format_sequence",
    "print_report",
    "random_sort",
    "SortTrace",
    "first_descending_violation",
    "is_descending",
    "is_permutation",
]
