from dataclasses import dataclass, field


@dataclass
class SortTrace:
    """Counters recorded while sorting one sequence.

    Attributes:
        size: Length of the sequence that was sorted.
        comparisons: Number of pairwise comparisons performed.
        swaps: Number of swaps performed.
        swaps_per_pass: Swap count for each outer index, in order.
    """
    size: int = 0
    comparisons: int = 0
    swaps: int = 0
    swaps_per_pass: list[int] = field(default_factory=list)

    def __post_init__(self):
        """Validate counters."""
        if self.size < 0:
            raise ValueError("size must be non-negative")

        if self.comparisons < 0 or self.swaps < 0:
            raise ValueError("counters must be non-negative")

        if any(count < 0 for count in self.swaps_per_pass):
            raise ValueError("swaps_per_pass entries must be non-negative")

    @property
    def expected_comparisons(self) -> int:
        return self.size * self.size

    @property
    def is_complete(self) -> bool:
        """True once every outer pass has run."""
        return (
            len(self.swaps_per_pass) == self.size
            and self.comparisons == self.expected_comparisons
        )
