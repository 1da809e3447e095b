"""
rsakit - Textbook RSA key generation and signing.

Usage:
    >>> from rsakit import derive_key_parameters, generate_digest, sign, verify
    >>>
    >>> params = derive_key_parameters(1024)
    >>> digest = generate_digest("hello")
    >>> signature = sign(digest, params.d, params.n)
    >>> verify(signature, params.e, params.n) == digest
    True

Unpadded RSA is for study only; it offers no security on its own.
"""
from .core.crypto import (
    MessageDigester,
    PrimeGenerator,
    PrimeSearchResult,
    StrongRandomSource,
    MillerRabinTest,
    KeyParameters,
    PublicKey,
    KeyParameterDeriver,
    Signer,
    generate_prime,
    derive_key_parameters,
    generate_rsa_params,
    sign,
    verify,
    generate_digest,
)

# Configuration
from .core.config import RSAConfig, PrimeSearchConfig, KeyConfig, DEFAULT_PUBLIC_EXPONENT

# Errors
from .core.exceptions import (
    RSAException,
    RandomSourceError,
    PrimalityTestError,
    NoModularInverse,
    PreconditionViolation,
    RSAConfigurationError,
    PrimeSearchExhausted,
)

from .core.logging import LogLevel, configure_logging, get_logger

__version__ = '1.0.0'


def setup_logging(level: LogLevel = LogLevel.INFO):
    """
    Configure console logging for rsakit modules.

    Args:
        level: Logging level (default: LogLevel.INFO)
    """
    return configure_logging(level=level)


__all__ = [
    'MessageDigester',
    'PrimeGenerator',
    'PrimeSearchResult',
    'StrongRandomSource',
    'MillerRabinTest',
    'KeyParameters',
    'PublicKey',
    'KeyParameterDeriver',
    'Signer',
    'generate_prime',
    'derive_key_parameters',
    'generate_rsa_params',
    'sign',
    'verify',
    'generate_digest',
    'RSAConfig',
    'PrimeSearchConfig',
    'KeyConfig',
    'DEFAULT_PUBLIC_EXPONENT',
    'RSAException',
    'RandomSourceError',
    'PrimalityTestError',
    'NoModularInverse',
    'PreconditionViolation',
    'RSAConfigurationError',
    'PrimeSearchExhausted',
    'LogLevel',
    'configure_logging',
    'get_logger',
    'setup_logging',
]
