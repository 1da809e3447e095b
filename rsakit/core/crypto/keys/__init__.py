"""
Key parameter derivation and models.
"""
from .models import KeyParameters, PublicKey
from .key_deriver import KeyParameterDeriver, modular_inverse

__all__ = [
    'KeyParameters',
    'PublicKey',
    'KeyParameterDeriver',
    'modular_inverse',
]
