"""
Randomness and primality collaborators.

Defines the interfaces the prime search depends on and their
pycryptodome-backed defaults.
"""
from typing import Callable, Optional, Protocol, runtime_checkable

from Crypto.Random.random import StrongRandom
from Crypto.Util.number import isPrime


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for uniform random integer sampling."""

    def randint(self, low: int, high: int) -> int:
        """
        Draw an integer uniformly from the closed range [low, high].

        Args:
            low: Inclusive lower bound
            high: Inclusive upper bound

        Returns:
            Random integer
        """
        ...


@runtime_checkable
class PrimalityTest(Protocol):
    """Protocol for probabilistic primality tests."""

    def is_probable_prime(self, candidate: int) -> bool:
        """
        Check whether a candidate is prime with high confidence.

        Args:
            candidate: Odd integer to test

        Returns:
            True if the candidate is probably prime
        """
        ...


class StrongRandomSource:
    """Cryptographically strong random source (pycryptodome StrongRandom)."""

    def __init__(self, randfunc: Optional[Callable[[int], bytes]] = None):
        """Initializes the source; randfunc defaults to the OS RNG."""
        self._random = StrongRandom(randfunc=randfunc)

    def randint(self, low: int, high: int) -> int:
        """Returns a random integer N such that low <= N <= high."""
        return self._random.randint(low, high)


class MillerRabinTest:
    """Miller-Rabin + Lucas test from pycryptodome's isPrime."""

    def __init__(self, false_positive_prob: float = 2.0 ** -128,
                 randfunc: Optional[Callable[[int], bytes]] = None):
        """Initializes the test with an upper bound on false positives."""
        self.false_positive_prob = false_positive_prob
        self.randfunc = randfunc

    def is_probable_prime(self, candidate: int) -> bool:
        """Tests candidate for primality."""
        return isPrime(
            candidate,
            false_positive_prob=self.false_positive_prob,
            randfunc=self.randfunc
        )
