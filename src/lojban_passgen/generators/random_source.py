"""
Random Source - Uniform secure integer sampling.

Every random decision made while building a password goes through a
RandomSource. The default implementation draws from the operating
system CSPRNG via ``secrets.SystemRandom``, whose ``randbelow`` uses
rejection sampling and so has no modulo bias.
"""

import secrets
from collections.abc import Sequence
from typing import TypeVar

from lojban_passgen.exceptions import EntropyError

T = TypeVar("T")


class RandomSource:
    """
    Cryptographically secure uniform integer source.

    Usage:
        rng = RandomSource()
        rng.intn(10)          # 0..9
        rng.choice(["a", "b"])
    """

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def intn(self, bound: int) -> int:
        """
        Return a uniform integer in [0, bound).

        Args:
            bound: Exclusive upper bound

        Returns:
            The drawn value, or 0 when ``bound`` is not positive

        Raises:
            EntropyError: If the system entropy source fails
        """
        if bound <= 0:
            return 0
        try:
            return self._rng.randrange(bound)
        except (OSError, NotImplementedError) as e:
            raise EntropyError(f"failed to get secure random number: {e}") from e

    def choice(self, items: Sequence[T]) -> T:
        """Return a uniformly drawn element of a non-empty sequence."""
        if not items:
            raise IndexError("Cannot choose from empty sequence")
        return items[self.intn(len(items))]

    def one_in(self, n: int) -> bool:
        """Return True with probability 1/n."""
        return self.intn(n) == 0
