"""
Seeded randomness for examples.

Examples that simulate random choices (server selection, falling money) take
an EntropySource instead of reaching for the module-level random functions,
so the same seed always reproduces the same trace.
"""

import random
import zlib
from typing import Any, List, MutableSequence, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_SEED = 42


class EntropySource:
    """A seedable provider of pseudo-random values.

    Usage:
        entropy = EntropySource(42)
        server = entropy.choice(servers)
    """

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        """Initialize the source.

        Args:
            seed: Seed for the underlying generator
        """
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> int:
        """The seed this source was created with."""
        return self._seed

    def randrange(self, stop: int) -> int:
        """Return a random integer in [0, stop)."""
        return self._random.randrange(stop)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer in [a, b]."""
        return self._random.randint(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        """Return a random element of a non-empty sequence."""
        return seq[self._random.randrange(len(seq))]

    def shuffle(self, seq: MutableSequence[Any]) -> None:
        """Shuffle a sequence in place."""
        self._random.shuffle(seq)

    def sample(self, population: Sequence[T], k: int) -> List[T]:
        """Return k unique elements chosen from the population."""
        return self._random.sample(list(population), k)

    def fork(self, label: str) -> "EntropySource":
        """Derive an independent child source.

        The child seed depends only on this source's seed and the label, so
        forking does not consume values from the parent.

        Args:
            label: Name distinguishing the child stream

        Returns:
            A new EntropySource
        """
        return EntropySource(zlib.crc32(f"{self._seed}:{label}".encode("utf-8")))

    def __repr__(self) -> str:
        return f"EntropySource(seed={self._seed})"
