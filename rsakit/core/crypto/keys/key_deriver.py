"""Key parameter derivation from two generated primes."""
import asyncio
from typing import Optional

from Crypto.Util.number import GCD, inverse

from ...config import KeyConfig
from ...exceptions import NoModularInverse, PreconditionViolation
from ...logging import get_logger
from ..primes import PrimeGenerator
from .models import KeyParameters

logger = get_logger('keys')


def modular_inverse(value: int, modulus: int) -> int:
    """
    Computes value^-1 mod modulus.

    Raises:
        NoModularInverse: If value and modulus are not coprime
    """
    if modulus < 2 or GCD(value, modulus) != 1:
        raise NoModularInverse(
            f"{value} has no inverse modulo {modulus}",
            exponent=value,
            modulus=modulus
        )
    return inverse(value, modulus)


class KeyParameterDeriver:
    """
    Derives a full key parameter set from two fresh primes.

    A NoModularInverse failure is reported, never retried; call derive()
    again for a new pair of primes.
    """

    def __init__(
        self,
        prime_generator: Optional[PrimeGenerator] = None,
        config: Optional[KeyConfig] = None
    ):
        """
        Initializes the deriver.

        Args:
            prime_generator: Source of primes (default: PrimeGenerator())
            config: Key configuration holding the default public exponent
        """
        self.prime_generator = prime_generator or PrimeGenerator()
        self.config = config or KeyConfig()

    def _resolve_exponent(self, public_exponent: Optional[int]) -> int:
        e = self.config.public_exponent if public_exponent is None else public_exponent
        if not isinstance(e, int) or e < 3 or e % 2 == 0:
            raise PreconditionViolation(f"Public exponent must be an odd integer >= 3, got {e!r}")
        return e

    def from_primes(self, p: int, q: int, public_exponent: Optional[int] = None) -> KeyParameters:
        """
        Derives key parameters from caller-supplied primes.

        Args:
            p: First prime
            q: Second prime
            public_exponent: Overrides the configured exponent

        Returns:
            KeyParameters

        Raises:
            PreconditionViolation: If a prime is < 2 or the exponent is invalid
            NoModularInverse: If gcd(e, phi_n) != 1
        """
        if p < 2 or q < 2:
            raise PreconditionViolation(f"Primes must be >= 2, got p={p}, q={q}")
        e = self._resolve_exponent(public_exponent)

        if p == q:
            logger.warning("Both primes are equal; n is a perfect square")

        n = p * q
        phi_n = (p - 1) * (q - 1)
        d = modular_inverse(e, phi_n)

        logger.debug(f"Derived {n.bit_length()}-bit modulus with e={e}")
        return KeyParameters(p=p, q=q, n=n, phi_n=phi_n, e=e, d=d)

    def derive(self, prime_bit_length: Optional[int] = None,
               public_exponent: Optional[int] = None) -> KeyParameters:
        """
        Generates two independent primes and derives the key parameters.

        Args:
            prime_bit_length: Bits per prime (default: config.prime_bit_length)
            public_exponent: Overrides the configured exponent

        Returns:
            KeyParameters

        Raises:
            NoModularInverse: If gcd(e, phi_n) != 1 for the drawn primes
        """
        bits = self.config.prime_bit_length if prime_bit_length is None else prime_bit_length
        e = self._resolve_exponent(public_exponent)

        p = self.prime_generator.generate(bits)
        q = self.prime_generator.generate(bits)
        return self.from_primes(p, q, e)

    def derive_for_key_size(self, key_size: int,
                            public_exponent: Optional[int] = None) -> KeyParameters:
        """
        Derives key parameters for a modulus of roughly key_size bits.

        Each prime gets key_size // 2 bits.
        """
        if not isinstance(key_size, int) or key_size < 4 or key_size % 2:
            raise PreconditionViolation(f"key_size must be an even integer >= 4, got {key_size!r}")
        return self.derive(key_size // 2, public_exponent)

    async def derive_async(self, prime_bit_length: Optional[int] = None,
                           public_exponent: Optional[int] = None) -> KeyParameters:
        """Derives key parameters in the default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.derive, prime_bit_length, public_exponent)
