"""Random sort demo: generate integers, sort them descending, print both."""

from random_sort.config import RunConfig
from random_sort.core import (
    SortTrace,
    UniformIntSource,
    generate_sequence,
    print_report,
    random_sort,
)
from random_sort.driver import RunResult, SortRunner, SortVerificationError, run

__all__ = [
    "RunConfig",
    "RunResult",
    "SortRunner",
    "SortTrace",
    "SortVerificationError",
    "UniformIntSource",
    "generate_sequence",
    "print_report",
    "random_sort",
    "run",
]
