"""Message to integer digests."""
from Crypto.Hash import SHA256
from Crypto.Util.number import bytes_to_long


class MessageDigester:
    """Hashes a message and reads the digest as a big-endian integer."""

    def __init__(self, hash_module=SHA256):
        """Initializes the digester with a pycryptodome hash module."""
        self.hash_module = hash_module

    @property
    def digest_bits(self) -> int:
        """Size of the produced digest in bits."""
        return self.hash_module.digest_size * 8

    def digest_bytes(self, message: str | bytes) -> bytes:
        """Returns the raw digest; str messages are UTF-8 encoded."""
        if isinstance(message, str):
            message = message.encode('utf-8')
        return self.hash_module.new(message).digest()

    def digest(self, message: str | bytes) -> int:
        """Returns the digest as a non-negative integer."""
        return bytes_to_long(self.digest_bytes(message))
