"""
Configuration module.

Provides dataclass configuration for prime search and key derivation.
"""
from dataclasses import dataclass, field
from typing import Optional

from .exceptions import RSAConfigurationError

DEFAULT_PUBLIC_EXPONENT = 65537


@dataclass
class PrimeSearchConfig:
    """
    Prime search configuration.

    The search is unbounded unless max_iterations is set; the cap is
    only a deadlock guard and should be far above the expected
    ln(2^bits) candidates.
    """
    false_positive_prob: float = 2.0 ** -128
    max_iterations: Optional[int] = None

    def __post_init__(self):
        if not 0 < self.false_positive_prob < 1:
            raise RSAConfigurationError("false_positive_prob must be in (0, 1)")
        if self.max_iterations is not None and self.max_iterations < 1:
            raise RSAConfigurationError("max_iterations must be positive")


@dataclass
class KeyConfig:
    """Key derivation configuration."""
    public_exponent: int = DEFAULT_PUBLIC_EXPONENT
    prime_bit_length: int = 1024


@dataclass
class RSAConfig:
    """
    Complete configuration.

    Groups the prime search and key sub-configurations.
    """
    prime_search: PrimeSearchConfig = field(default_factory=PrimeSearchConfig)
    key: KeyConfig = field(default_factory=KeyConfig)

    @classmethod
    def default(cls) -> 'RSAConfig':
        """Create default configuration."""
        return cls()

    def create_prime_generator(self):
        """Build a PrimeGenerator from this configuration."""
        from .crypto.primes import PrimeGenerator
        return PrimeGenerator(config=self.prime_search)

    def create_deriver(self):
        """Build a KeyParameterDeriver from this configuration."""
        from .crypto.keys import KeyParameterDeriver
        return KeyParameterDeriver(self.create_prime_generator(), self.key)

    @classmethod
    def for_testing(cls, prime_bit_length: int = 64, **kwargs) -> 'RSAConfig':
        """Create configuration with small primes for fast tests."""
        return cls(
            key=KeyConfig(prime_bit_length=prime_bit_length),
            **kwargs
        )
