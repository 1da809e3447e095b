"""
Key parameter models.

Contains frozen data classes for the derived RSA parameters and the
public key view, plus conversion to ``cryptography`` key objects.
"""
from dataclasses import dataclass, field
from typing import Any, Dict
import json

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from ...exceptions import PreconditionViolation


def _int_to_hex(value: int) -> str:
    return format(value, 'x')


def _hex_to_int(data: Dict[str, Any], name: str) -> int:
    try:
        return int(data[name], 16)
    except KeyError as e:
        raise PreconditionViolation(f"Missing key field: {name}") from e
    except (TypeError, ValueError) as e:
        raise PreconditionViolation(f"Key field {name} is not a hex integer") from e


@dataclass(frozen=True)
class PublicKey:
    """
    Public half of a key: modulus and public exponent.

    Attributes:
        n: Modulus
        e: Public exponent
    """
    n: int
    e: int

    @property
    def bit_length(self) -> int:
        """Size of the modulus in bits."""
        return self.n.bit_length()

    def to_dict(self) -> Dict[str, str]:
        """Convert to a dictionary of hex strings."""
        return {'n': _int_to_hex(self.n), 'e': _int_to_hex(self.e)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PublicKey':
        """Create from a dictionary of hex strings."""
        return cls(n=_hex_to_int(data, 'n'), e=_hex_to_int(data, 'e'))

    def to_public_key(self) -> rsa.RSAPublicKey:
        """Build a ``cryptography`` RSA public key."""
        try:
            return rsa.RSAPublicNumbers(e=self.e, n=self.n).public_key()
        except ValueError as e:
            raise PreconditionViolation(f"Key rejected by cryptography backend: {e}") from e

    def to_pem(self) -> bytes:
        """Export as SubjectPublicKeyInfo PEM."""
        return self.to_public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo
        )


@dataclass(frozen=True)
class KeyParameters:
    """
    Complete textbook RSA parameter set.

    The secret fields are kept out of repr().

    Attributes:
        p: First prime
        q: Second prime
        n: Modulus p * q
        phi_n: Euler's totient (p - 1) * (q - 1)
        e: Public exponent
        d: Private exponent, e^-1 mod phi_n
    """
    p: int = field(repr=False)
    q: int = field(repr=False)
    n: int
    phi_n: int = field(repr=False)
    e: int
    d: int = field(repr=False)

    @property
    def public_key(self) -> PublicKey:
        """Public (n, e) pair."""
        return PublicKey(n=self.n, e=self.e)

    @property
    def bit_length(self) -> int:
        """Size of the modulus in bits."""
        return self.n.bit_length()

    def is_consistent(self) -> bool:
        """
        Check the arithmetic relations between the fields.

        Returns:
            True if n, phi_n and d agree with p, q and e, and both
            exponents lie strictly between 0 and phi_n
        """
        return (
            self.p > 1 and self.q > 1 and
            self.n == self.p * self.q and
            self.phi_n == (self.p - 1) * (self.q - 1) and
            1 < self.e < self.phi_n and
            0 < self.d < self.phi_n and
            (self.e * self.d) % self.phi_n == 1
        )

    def to_dict(self) -> Dict[str, str]:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary of hex strings
        """
        return {
            'p': _int_to_hex(self.p),
            'q': _int_to_hex(self.q),
            'n': _int_to_hex(self.n),
            'phi_n': _int_to_hex(self.phi_n),
            'e': _int_to_hex(self.e),
            'd': _int_to_hex(self.d),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'KeyParameters':
        """
        Create from dictionary.

        Args:
            data: Dictionary with hex-encoded fields

        Returns:
            KeyParameters instance

        Raises:
            PreconditionViolation: If a field is missing or the fields disagree
        """
        params = cls(**{name: _hex_to_int(data, name)
                        for name in ('p', 'q', 'n', 'phi_n', 'e', 'd')})
        if not params.is_consistent():
            raise PreconditionViolation("Key parameters are inconsistent")
        return params

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> 'KeyParameters':
        """Create from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise PreconditionViolation(f"Invalid key JSON: {e}") from e
        if not isinstance(data, dict):
            raise PreconditionViolation("Key JSON must be an object")
        return cls.from_dict(data)

    def to_private_key(self) -> rsa.RSAPrivateKey:
        """
        Build a ``cryptography`` RSA private key.

        Raises:
            PreconditionViolation: If p == q (no CRT coefficient exists)
        """
        if self.p == self.q:
            raise PreconditionViolation("Cannot export a key whose primes are equal")
        numbers = rsa.RSAPrivateNumbers(
            p=self.p,
            q=self.q,
            d=self.d,
            dmp1=rsa.rsa_crt_dmp1(self.d, self.p),
            dmq1=rsa.rsa_crt_dmq1(self.d, self.q),
            iqmp=rsa.rsa_crt_iqmp(self.p, self.q),
            public_numbers=rsa.RSAPublicNumbers(e=self.e, n=self.n)
        )
        try:
            return numbers.private_key()
        except ValueError as e:
            raise PreconditionViolation(f"Key rejected by cryptography backend: {e}") from e

    def to_pem(self) -> bytes:
        """Export as unencrypted PKCS#8 PEM."""
        return self.to_private_key().private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption()
        )

    @classmethod
    def from_private_key(cls, key: rsa.RSAPrivateKey) -> 'KeyParameters':
        """
        Create from a ``cryptography`` RSA private key.

        d is recomputed as e^-1 mod phi_n, since keys generated elsewhere
        usually carry the Carmichael-based exponent instead.

        Raises:
            NoModularInverse: If e shares a factor with phi_n
        """
        from .key_deriver import modular_inverse

        numbers = key.private_numbers()
        p, q = numbers.p, numbers.q
        e = numbers.public_numbers.e
        phi_n = (p - 1) * (q - 1)
        return cls(
            p=p,
            q=q,
            n=numbers.public_numbers.n,
            phi_n=phi_n,
            e=e,
            d=modular_inverse(e, phi_n)
        )

    @classmethod
    def from_pem(cls, data: bytes) -> 'KeyParameters':
        """Create from an unencrypted PEM private key."""
        try:
            key = serialization.load_pem_private_key(data, password=None)
        except (TypeError, ValueError) as e:
            raise PreconditionViolation(f"Invalid PEM private key: {e}") from e
        if not isinstance(key, rsa.RSAPrivateKey):
            raise PreconditionViolation("PEM key is not an RSA private key")
        return cls.from_private_key(key)
