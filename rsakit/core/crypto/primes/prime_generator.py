"""Probable prime generation by rejection sampling."""
import asyncio
from dataclasses import dataclass
from typing import Optional, Tuple

from ...config import PrimeSearchConfig
from ...exceptions import (
    PreconditionViolation,
    PrimalityTestError,
    PrimeSearchExhausted,
    RandomSourceError,
    RSAException,
)
from ...logging import get_logger
from .sources import MillerRabinTest, PrimalityTest, RandomSource, StrongRandomSource

logger = get_logger('primes')

MIN_BIT_LENGTH = 2


@dataclass(frozen=True)
class PrimeSearchResult:
    """
    Outcome of one prime search.

    Attributes:
        prime: The probable prime found
        iterations: Number of candidates drawn, including the accepted one
    """
    prime: int
    iterations: int


class PrimeGenerator:
    """
    Generates probable primes of an exact bit length.

    Every call is an independent search; nothing is carried over
    between calls except the injected collaborators.

    Example:
        >>> generator = PrimeGenerator()
        >>> p = generator.generate(512)
        >>> p.bit_length()
        512
    """

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        primality_test: Optional[PrimalityTest] = None,
        config: Optional[PrimeSearchConfig] = None
    ):
        """
        Initializes the generator.

        Args:
            random_source: Uniform integer sampler (default: StrongRandomSource)
            primality_test: Probabilistic test (default: MillerRabinTest)
            config: Search configuration
        """
        self.config = config or PrimeSearchConfig()
        self.random_source = random_source or StrongRandomSource()
        self.primality_test = primality_test or MillerRabinTest(
            false_positive_prob=self.config.false_positive_prob
        )

    @staticmethod
    def bounds(bit_length: int) -> Tuple[int, int]:
        """Returns the inclusive range (2^(b-1), 2^b - 1) of b-bit integers."""
        return 1 << (bit_length - 1), (1 << bit_length) - 1

    def _draw_candidate(self, low: int, high: int) -> int:
        try:
            candidate = self.random_source.randint(low, high)
        except RSAException:
            raise
        except Exception as e:
            raise RandomSourceError(f"Random source failed: {e}") from e

        # Bump even draws instead of resampling; high is odd so this stays in range
        if candidate % 2 == 0:
            candidate += 1
        return candidate

    def _test_candidate(self, candidate: int) -> bool:
        try:
            return bool(self.primality_test.is_probable_prime(candidate))
        except RSAException:
            raise
        except Exception as e:
            raise PrimalityTestError(f"Primality test failed: {e}") from e

    def search(self, bit_length: int) -> PrimeSearchResult:
        """
        Searches for a probable prime and reports how many draws it took.

        Args:
            bit_length: Exact bit length of the prime (>= 2)

        Returns:
            PrimeSearchResult with the prime and the iteration count

        Raises:
            PreconditionViolation: If bit_length < 2
            RandomSourceError: If the random source fails
            PrimalityTestError: If the primality test fails
            PrimeSearchExhausted: If config.max_iterations is reached
        """
        if not isinstance(bit_length, int) or bit_length < MIN_BIT_LENGTH:
            raise PreconditionViolation(
                f"bit_length must be an integer >= {MIN_BIT_LENGTH}, got {bit_length!r}"
            )

        low, high = self.bounds(bit_length)
        max_iterations = self.config.max_iterations
        iterations = 0

        logger.debug(f"Searching for a {bit_length}-bit prime")
        while True:
            if max_iterations is not None and iterations >= max_iterations:
                raise PrimeSearchExhausted(
                    f"No {bit_length}-bit prime found after {iterations} candidates; "
                    f"max_iterations={max_iterations} is too low",
                    bit_length=bit_length,
                    iterations=iterations
                )

            iterations += 1
            candidate = self._draw_candidate(low, high)
            if self._test_candidate(candidate):
                logger.debug(f"Found {bit_length}-bit prime after {iterations} candidates")
                return PrimeSearchResult(prime=candidate, iterations=iterations)

    def generate(self, bit_length: int) -> int:
        """
        Generates a probable prime of exactly bit_length bits.

        Args:
            bit_length: Exact bit length of the prime (>= 2)

        Returns:
            Odd probable prime in [2^(bit_length-1), 2^bit_length - 1]
        """
        return self.search(bit_length).prime

    async def generate_async(self, bit_length: int) -> int:
        """Generates a prime in the default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.generate, bit_length)
