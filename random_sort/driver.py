"""Sort Runner for the random sort demo.

Ties the pieces together for one run: generate the data, keep a snapshot,
sort it in place with a trace, print the report and check the result.
"""

import logging
from dataclasses import dataclass
from typing import Optional, TextIO

from .config import RunConfig
from .core import (
    IntegerSource,
    SortTrace,
    UniformIntSource,
    first_descending_violation,
    generate_sequence,
    is_permutation,
    print_report,
    random_sort,
)

logger = logging.getLogger(__name__)


class SortVerificationError(RuntimeError):
    """Raised when a sorted sequence fails its postconditions."""


@dataclass
class RunResult:
    before: list[int]
    after: list[int]
    trace: SortTrace


class SortRunner:
    """Runs the generate -> sort -> print workflow once per ``run()`` call."""

    def __init__(
        self,
        config: Optional[RunConfig] = None,
        source: Optional[IntegerSource] = None,
        stream: Optional[TextIO] = None,
    ):
        """Initialize the runner.

        Args:
            config: Run settings. Defaults to RunConfig().
            source: Integer source. Defaults to a UniformIntSource seeded
                with ``config.seed``.
            stream: Output stream for the report. Defaults to stdout.
        """
        self.config = config if config is not None else RunConfig()
        self.source = source if source is not None else UniformIntSource(self.config.seed)
        self.stream = stream

        logger.info(
            "Initialized SortRunner: size=%d, range=[%d, %d), seed=%s",
            self.config.size,
            self.config.low,
            self.config.high,
            self.config.seed,
        )

    def run(self) -> RunResult:
        """Execute one run and return its snapshots and trace.

        Raises:
            SortVerificationError: If the sorted data is not in descending
                order or is not a permutation of the input.
        """
        data = generate_sequence(
            self.config.size, self.config.low, self.config.high, self.source
        )
        before = list(data)

        trace = SortTrace()
        random_sort(data, trace)

        print_report(before, data, self.stream)

        self._verify(before, data, trace)

        logger.info(
            "Sorted %d value(s) with %d comparisons and %d swaps",
            trace.size, trace.comparisons, trace.swaps
        )
        return RunResult(before=before, after=data, trace=trace)

    def _verify(self, before: list[int], after: list[int], trace: SortTrace) -> None:
        violation = first_descending_violation(after)
        if violation is not None:
            logger.error("Result not descending at index %d", violation)
            raise SortVerificationError(
                f"not descending at index {violation}: "
                f"{after[violation]} < {after[violation + 1]}"
            )

        if not is_permutation(before, after):
            logger.error("Result is not a permutation of the input")
            raise SortVerificationError("sorted values differ from the input values")

        if not trace.is_complete:
            logger.error(
                "Trace incomplete: %d of %d comparisons",
                trace.comparisons, trace.expected_comparisons
            )
            raise SortVerificationError(
                f"expected {trace.expected_comparisons} comparisons, "
                f"got {trace.comparisons}"
            )

        logger.debug("Result verified: descending permutation of the input")


def run(
    config: Optional[RunConfig] = None,
    source: Optional[IntegerSource] = None,
    stream: Optional[TextIO] = None,
) -> RunResult:
    """Convenience wrapper around ``SortRunner(...).run()``."""
    return SortRunner(config, source, stream).run()
