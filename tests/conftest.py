"""Pytest fixtures for rsakit tests."""
import logging

import pytest

from rsakit.core.crypto import KeyParameterDeriver, KeyParameters, PrimeGenerator
from rsakit.core.exceptions import NoModularInverse
from rsakit.core.logging import RSALogger


class ScriptedRandomSource:
    """Random source that replays a fixed list of draws."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, low, high):
        self.calls.append((low, high))
        return self.values.pop(0)


class SetPrimalityTest:
    """Primality test that accepts only the given values."""

    def __init__(self, accepted):
        self.accepted = set(accepted)
        self.tested = []

    def is_probable_prime(self, candidate):
        self.tested.append(candidate)
        return candidate in self.accepted


class ScriptedPrimeGenerator:
    """Prime generator stub that returns fixed values in order."""

    def __init__(self, values):
        self.values = list(values)
        self.requested = []

    def generate(self, bit_length):
        self.requested.append(bit_length)
        return self.values.pop(0)


def is_prime_trial_division(n):
    """Exact primality check for small integers."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    divisor = 3
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


def derive_with_retry(prime_bit_length, attempts=5):
    """Derive a key, drawing fresh primes if e divides phi(n)."""
    for _ in range(attempts - 1):
        try:
            return KeyParameterDeriver().derive(prime_bit_length)
        except NoModularInverse:
            continue
    return KeyParameterDeriver().derive(prime_bit_length)


@pytest.fixture(autouse=True)
def reset_rsakit_logger():
    """Remove handlers and level overrides left by other tests."""
    logger = RSALogger()
    logger.disable_all()
    logger.logger.setLevel(logging.NOTSET)
    yield
    logger.disable_all()
    logger.logger.setLevel(logging.NOTSET)


@pytest.fixture
def toy_params():
    """Classic textbook key: p=61, q=53, e=17."""
    return KeyParameterDeriver().from_primes(61, 53, public_exponent=17)


@pytest.fixture
def prime_generator():
    """Default generator backed by pycryptodome."""
    return PrimeGenerator()


@pytest.fixture
def small_params() -> KeyParameters:
    """Key with two 64-bit primes and e=65537."""
    return derive_with_retry(64)


@pytest.fixture
def digest_sized_params() -> KeyParameters:
    """Key whose modulus is larger than any SHA-256 digest."""
    return derive_with_retry(160)


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandomSource."""
    return ScriptedRandomSource


@pytest.fixture
def set_primality():
    """Factory for SetPrimalityTest."""
    return SetPrimalityTest


@pytest.fixture
def scripted_primes():
    """Factory for ScriptedPrimeGenerator."""
    return ScriptedPrimeGenerator


@pytest.fixture
def trial_division():
    """Exact primality check for small integers."""
    return is_prime_trial_division
