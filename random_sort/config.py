from dataclasses import dataclass
from typing import Optional

from .core.generator import DEFAULT_HIGH, DEFAULT_LOW

DEFAULT_SIZE = 100


@dataclass
class RunConfig:
    """Settings for one generate/sort/print run.

    Attributes:
        size: Number of values to generate.
        low: Inclusive lower bound of generated values.
        high: Exclusive upper bound of generated values.
        seed: Seed for the default integer source, None for unseeded.
    """
    size: int = DEFAULT_SIZE
    low: int = DEFAULT_LOW
    high: int = DEFAULT_HIGH
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate settings."""
        if self.size < 0:
            raise ValueError("size must be non-negative")

        if self.low >= self.high:
            raise ValueError("low must be < high")
