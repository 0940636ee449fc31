"""Console rendering of before/after snapshots."""

import sys
from collections.abc import Sequence
from typing import Optional, TextIO

BEFORE_HEADER = "Before sorting: "
AFTER_HEADER = "After sorting: "


def format_sequence(sequence: Sequence) -> str:
    """Render values one after another, each followed by a single space."""
    return "".join(f"{value} " for value in sequence)


def print_report(before: Sequence, after: Sequence, stream: Optional[TextIO] = None) -> None:
    """Write the before/after report.

    Both header lines and both value lines keep their trailing space.
    """
    if stream is None:
        stream = sys.stdout

    stream.write(f"{BEFORE_HEADER}\n")
    stream.write(f"{format_sequence(before)}\n")
    stream.write(f"{AFTER_HEADER}\n")
    stream.write(f"{format_sequence(after)}\n")
    stream.flush()
