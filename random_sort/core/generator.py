"""Random input generation behind a pluggable integer source."""

import logging
import random
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

DEFAULT_LOW = 0
DEFAULT_HIGH = 100


class IntegerSource(Protocol):
    """Anything that can draw a uniform integer from ``[low, high)``."""

    def randint_below(self, low: int, high: int) -> int:
        ...


class UniformIntSource:
    """Default IntegerSource backed by a private ``random.Random``.

    Seeding one source never touches the module-level random state, so a
    seeded source can be handed to the generator in tests.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def randint_below(self, low: int, high: int) -> int:
        return self._rng.randrange(low, high)


def generate_sequence(
    size: int,
    low: int = DEFAULT_LOW,
    high: int = DEFAULT_HIGH,
    source: Optional[IntegerSource] = None,
) -> list[int]:
    """Generate ``size`` independent uniform draws from ``[low, high)``.

    Args:
        size: Number of values, must be >= 0.
        low: Inclusive lower bound.
        high: Exclusive upper bound.
        source: Integer source. Defaults to an unseeded UniformIntSource.

    Returns:
        A new list of integers.

    Raises:
        ValueError: If size is negative or the range is empty.
    """
    if size < 0:
        logger.error("Invalid sequence size: %d (must be >= 0)", size)
        raise ValueError("size must be >= 0")

    if low >= high:
        logger.error("Invalid range: [%d, %d)", low, high)
        raise ValueError(f"empty range: low ({low}) must be < high ({high})")

    if source is None:
        source = UniformIntSource()

    values = [source.randint_below(low, high) for _ in range(size)]
    logger.debug("Generated %d value(s) in [%d, %d)", size, low, high)
    return values
