"""Crypto module - prime search, key derivation and textbook RSA signing."""
from typing import Optional

from ..config import DEFAULT_PUBLIC_EXPONENT, KeyConfig
from .hashing import MessageDigester
from .primes import (
    PrimeGenerator,
    PrimeSearchResult,
    RandomSource,
    PrimalityTest,
    StrongRandomSource,
    MillerRabinTest,
)
from .keys import KeyParameters, PublicKey, KeyParameterDeriver, modular_inverse
from .signing import Signer

# Function-based API over shared default instances
_digester = MessageDigester()
_prime_generator = PrimeGenerator()
_signer = Signer(_digester)


def generate_prime(bit_length: int) -> int:
    """Generates a probable prime of exactly bit_length bits."""
    return _prime_generator.generate(bit_length)


def derive_key_parameters(prime_bit_length: int,
                          public_exponent: int = DEFAULT_PUBLIC_EXPONENT) -> KeyParameters:
    """Generates two primes of prime_bit_length bits and derives (n, e, d)."""
    deriver = KeyParameterDeriver(_prime_generator, KeyConfig(public_exponent=public_exponent))
    return deriver.derive(prime_bit_length)


def generate_rsa_params(key_size: int,
                        public_exponent: Optional[int] = None) -> KeyParameters:
    """Derives key parameters with two primes of key_size // 2 bits each."""
    return KeyParameterDeriver(_prime_generator).derive_for_key_size(key_size, public_exponent)


def sign(digest: int, d: int, n: int) -> int:
    """Signs a digest: digest^d mod n."""
    return _signer.sign(digest, d, n)


def verify(signature: int, e: int, n: int) -> int:
    """Recovers the digest from a signature: signature^e mod n."""
    return _signer.verify(signature, e, n)


def generate_digest(message: str | bytes) -> int:
    """SHA-256 digest of a message as an integer."""
    return _digester.digest(message)


__all__ = [
    # Classes
    'MessageDigester',
    'PrimeGenerator',
    'PrimeSearchResult',
    'RandomSource',
    'PrimalityTest',
    'StrongRandomSource',
    'MillerRabinTest',
    'KeyParameters',
    'PublicKey',
    'KeyParameterDeriver',
    'Signer',
    # Functions
    'modular_inverse',
    'generate_prime',
    'derive_key_parameters',
    'generate_rsa_params',
    'sign',
    'verify',
    'generate_digest',
]
