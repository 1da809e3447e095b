"""
Custom exceptions for RSA key generation and signing.

This module defines exception classes raised by the prime search,
key derivation and signing components.
"""
from typing import Optional


class RSAException(Exception):
    """Base exception for all rsakit errors."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class RandomSourceError(RSAException):
    """Exception raised when the entropy source is unavailable or fails."""
    pass


class PrimalityTestError(RSAException):
    """Exception raised when the primality oracle itself fails.

    A composite candidate is not an error; it is a rejected sample.
    """
    pass


class NoModularInverse(RSAException):
    """Exception raised when the public exponent shares a factor with phi(n)."""

    def __init__(
        self,
        message: str,
        exponent: Optional[int] = None,
        modulus: Optional[int] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            exponent: Value whose inverse was requested
            modulus: Modulus of the inversion (phi(n))
            error_code: Numeric error code (if available)
        """
        self.exponent = exponent
        self.modulus = modulus
        super().__init__(message, error_code)


class PreconditionViolation(RSAException, ValueError):
    """Exception raised when a caller passes arguments outside the contract."""
    pass


class RSAConfigurationError(RSAException):
    """Exception raised for invalid or exhausted configuration."""
    pass


class PrimeSearchExhausted(RSAConfigurationError):
    """Exception raised when the prime search hits its iteration guard."""

    def __init__(
        self,
        message: str,
        bit_length: Optional[int] = None,
        iterations: Optional[int] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            bit_length: Requested prime size in bits
            iterations: Candidates drawn before giving up
            error_code: Numeric error code (if available)
        """
        self.bit_length = bit_length
        self.iterations = iterations
        super().__init__(message, error_code)
