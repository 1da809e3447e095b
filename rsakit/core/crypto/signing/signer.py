"""Textbook RSA signing and signature opening."""
import asyncio
from typing import Optional

from ...exceptions import PreconditionViolation
from ..hashing import MessageDigester
from ..keys import KeyParameters, PublicKey


def _check_operand(value: int, modulus: int, name: str) -> None:
    if not isinstance(modulus, int) or modulus < 2:
        raise PreconditionViolation(f"Modulus must be an integer >= 2, got {modulus!r}")
    if not isinstance(value, int) or not 0 <= value < modulus:
        raise PreconditionViolation(f"{name} must satisfy 0 <= {name} < n")


def _check_exponent(exponent: int, name: str) -> None:
    if not isinstance(exponent, int) or exponent < 1:
        raise PreconditionViolation(f"{name} must be a positive integer, got {exponent!r}")


class Signer:
    """
    Stateless textbook RSA signer.

    Operands are never reduced modulo n; out-of-range values are
    rejected with PreconditionViolation.
    """

    def __init__(self, digester: Optional[MessageDigester] = None):
        """Initializes the signer; digester is used by the message helpers."""
        self.digester = digester or MessageDigester()

    @staticmethod
    def sign(digest: int, d: int, n: int) -> int:
        """
        Signs a digest: digest^d mod n.

        Args:
            digest: Integer in [0, n)
            d: Private exponent
            n: Modulus

        Returns:
            Signature in [0, n)
        """
        _check_operand(digest, n, 'digest')
        _check_exponent(d, 'd')
        return pow(digest, d, n)

    @staticmethod
    def verify(signature: int, e: int, n: int) -> int:
        """
        Opens a signature: signature^e mod n.

        Args:
            signature: Integer in [0, n)
            e: Public exponent
            n: Modulus

        Returns:
            The recovered digest
        """
        _check_operand(signature, n, 'signature')
        _check_exponent(e, 'e')
        return pow(signature, e, n)

    @classmethod
    def is_valid(cls, digest: int, signature: int, e: int, n: int) -> bool:
        """Checks that signature opens to digest under (n, e)."""
        if not (0 <= digest < n and 0 <= signature < n):
            return False
        return cls.verify(signature, e, n) == digest

    def sign_message(self, message: str | bytes, params: KeyParameters) -> int:
        """Signs the digest of a message; the digest must be smaller than n."""
        return self.sign(self.digester.digest(message), params.d, params.n)

    def verify_message(self, message: str | bytes, signature: int, public_key: PublicKey) -> bool:
        """Checks a signature against the digest of a message."""
        return self.is_valid(self.digester.digest(message), signature, public_key.e, public_key.n)

    async def sign_async(self, digest: int, d: int, n: int) -> int:
        """Signs in the default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.sign, digest, d, n)

    async def verify_async(self, signature: int, e: int, n: int) -> int:
        """Opens a signature in the default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.verify, signature, e, n)
