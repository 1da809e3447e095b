"""
Message digest utilities.
"""
from .digest import MessageDigester

__all__ = [
    'MessageDigester',
]
