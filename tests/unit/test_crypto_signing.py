"""Tests for textbook RSA signing."""
import math
import secrets

import pytest

from rsakit.core.crypto.hashing import MessageDigester
from rsakit.core.crypto.signing import Signer
from rsakit.core.exceptions import PreconditionViolation


class TestSigner:
    """Test suite for Signer."""

    def test_textbook_open(self, toy_params):
        """Test 65^17 mod 3233 is 2790."""
        assert Signer.verify(65, toy_params.e, toy_params.n) == 2790

    def test_textbook_sign(self, toy_params):
        """Test 2790^2753 mod 3233 is 65."""
        assert Signer.sign(2790, toy_params.d, toy_params.n) == 65

    def test_textbook_roundtrip(self, toy_params):
        """Test signing 65 and opening the signature recovers 65."""
        signature = Signer.sign(65, toy_params.d, toy_params.n)

        assert 0 <= signature < toy_params.n
        assert Signer.verify(signature, toy_params.e, toy_params.n) == 65

    def test_roundtrip_random_digests(self, small_params):
        """Test (m^d)^e = m for random digests coprime with n."""
        n, e, d = small_params.n, small_params.e, small_params.d

        for _ in range(50):
            m = secrets.randbelow(n)
            if math.gcd(m, n) != 1:
                continue
            assert Signer.verify(Signer.sign(m, d, n), e, n) == m

    def test_sign_is_deterministic(self, small_params):
        """Test identical inputs give identical signatures."""
        m = 123456789

        first = Signer.sign(m, small_params.d, small_params.n)
        second = Signer.sign(m, small_params.d, small_params.n)

        assert first == second

    def test_zero_digest(self, toy_params):
        """Test the lower bound of the digest range is accepted."""
        assert Signer.sign(0, toy_params.d, toy_params.n) == 0

    @pytest.mark.parametrize("digest", [3233, 5000, -1])
    def test_digest_out_of_range(self, toy_params, digest):
        """Test digests outside [0, n) are rejected, not reduced."""
        with pytest.raises(PreconditionViolation):
            Signer.sign(digest, toy_params.d, toy_params.n)

    def test_signature_out_of_range(self, toy_params):
        """Test opening a signature >= n is rejected."""
        with pytest.raises(PreconditionViolation):
            Signer.verify(3233, toy_params.e, toy_params.n)

    @pytest.mark.parametrize("n", [1, 0, -7])
    def test_degenerate_modulus(self, n):
        """Test a modulus below 2 is rejected."""
        with pytest.raises(PreconditionViolation):
            Signer.sign(0, 1, n)

    def test_is_valid(self, toy_params):
        """Test is_valid accepts the matching pair only."""
        e, n = toy_params.e, toy_params.n

        assert Signer.is_valid(2790, 65, e, n)
        assert not Signer.is_valid(2791, 65, e, n)
        assert not Signer.is_valid(2790, 66, e, n)

    def test_is_valid_out_of_range(self, toy_params):
        """Test out-of-range operands are simply invalid."""
        e, n = toy_params.e, toy_params.n

        assert not Signer.is_valid(n + 2790, 65, e, n)
        assert not Signer.is_valid(2790, n + 65, e, n)

    @pytest.mark.asyncio
    async def test_async_roundtrip(self, toy_params):
        """Test async sign and verify."""
        signer = Signer()

        signature = await signer.sign_async(2790, toy_params.d, toy_params.n)
        recovered = await signer.verify_async(65, toy_params.e, toy_params.n)

        assert signature == 65
        assert recovered == 2790


class TestMessageSigning:
    """Tests for the message-level helpers."""

    def test_sign_and_verify_message(self, digest_sized_params):
        """Test a message signature verifies with the public key."""
        signer = Signer()

        signature = signer.sign_message("hello world", digest_sized_params)

        assert signer.verify_message("hello world", signature, digest_sized_params.public_key)

    def test_tampered_message(self, digest_sized_params):
        """Test a different message does not verify."""
        signer = Signer()
        signature = signer.sign_message("hello world", digest_sized_params)

        assert not signer.verify_message("hello world!", signature, digest_sized_params.public_key)

    def test_signature_is_digest_power(self, digest_sized_params):
        """Test sign_message signs the SHA-256 digest integer."""
        digest = MessageDigester().digest(b"payload")

        signature = Signer().sign_message(b"payload", digest_sized_params)

        assert signature == pow(digest, digest_sized_params.d, digest_sized_params.n)

    def test_digest_larger_than_modulus(self, toy_params):
        """Test a 256-bit digest cannot be signed with a 12-bit modulus."""
        with pytest.raises(PreconditionViolation):
            Signer().sign_message("hello", toy_params)


class TestMessageDigester:
    """Test suite for MessageDigester."""

    def test_sha256_known_vector(self):
        """Test the FIPS 180-2 'abc' vector."""
        expected = int('ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad', 16)

        assert MessageDigester().digest("abc") == expected

    def test_str_and_bytes_agree(self):
        """Test str messages are UTF-8 encoded."""
        digester = MessageDigester()

        assert digester.digest("héllo") == digester.digest("héllo".encode('utf-8'))

    def test_digest_bits(self):
        """Test the default digest is 256 bits."""
        digester = MessageDigester()

        assert digester.digest_bits == 256
        assert digester.digest("x").bit_length() <= 256
        assert len(digester.digest_bytes("x")) == 32

    def test_custom_hash_module(self):
        """Test another pycryptodome hash can be plugged in."""
        from Crypto.Hash import SHA512

        digester = MessageDigester(SHA512)

        assert digester.digest_bits == 512
        assert len(digester.digest_bytes(b"x")) == 64


class TestExponentPreconditions:
    """Tests for exponent validation in sign and verify."""

    @pytest.mark.parametrize("d", [0, -367, -1])
    def test_sign_rejects_non_positive_exponent(self, toy_params, d):
        """Test d below 1 is a contract violation, not a modular-inverse power."""
        with pytest.raises(PreconditionViolation):
            Signer.sign(0, d, toy_params.n)

    @pytest.mark.parametrize("e", [0, -17])
    def test_verify_rejects_non_positive_exponent(self, toy_params, e):
        """Test e below 1 is a contract violation."""
        with pytest.raises(PreconditionViolation):
            Signer.verify(2790, e, toy_params.n)

    def test_non_integer_exponent(self, toy_params):
        """Test a float exponent is rejected."""
        with pytest.raises(PreconditionViolation):
            Signer.sign(65, 2753.0, toy_params.n)
