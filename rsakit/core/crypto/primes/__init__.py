"""
Probable prime generation.
"""
from .prime_generator import PrimeGenerator, PrimeSearchResult
from .sources import RandomSource, PrimalityTest, StrongRandomSource, MillerRabinTest

__all__ = [
    'PrimeGenerator',
    'PrimeSearchResult',
    'RandomSource',
    'PrimalityTest',
    'StrongRandomSource',
    'MillerRabinTest',
]
