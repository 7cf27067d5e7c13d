"""
Ed25519 key pairs backed by the cryptography package.

XRP ledger Ed25519 public keys are written as the 32 raw key bytes prefixed
with 0xED so that they can be told apart from 33-byte secp256k1 keys.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey as CryptoEd25519PrivateKey,
    Ed25519PublicKey as CryptoEd25519PublicKey,
)

from ..runtime.errors import InvalidKeyError

ED25519_PREFIX = b"\xed"
KEY_LENGTH = 32
SIGNATURE_LENGTH = 64


class Ed25519PublicKey:
    """Ed25519 public key."""

    def __init__(self, public_key_bytes: bytes):
        """
        Initialize from a 32-byte public key.

        Args:
            public_key_bytes: 32-byte key, optionally prefixed with 0xED

        Raises:
            InvalidKeyError: If the key is malformed
        """
        if len(public_key_bytes) == KEY_LENGTH + 1 and public_key_bytes[:1] == ED25519_PREFIX:
            public_key_bytes = public_key_bytes[1:]
        if len(public_key_bytes) != KEY_LENGTH:
            raise InvalidKeyError(
                f"Ed25519 public key must be {KEY_LENGTH} bytes, got {len(public_key_bytes)}"
            )

        self._key_bytes = public_key_bytes
        try:
            self._crypto_key = CryptoEd25519PublicKey.from_public_bytes(public_key_bytes)
        except ValueError as e:
            raise InvalidKeyError(f"Invalid Ed25519 public key: {e}", cause=e) from e

    def to_bytes(self) -> bytes:
        """Get the raw 32-byte public key."""
        return self._key_bytes

    def to_ledger_bytes(self) -> bytes:
        """Get the 33-byte 0xED-prefixed form used on the ledger."""
        return ED25519_PREFIX + self._key_bytes

    def verify(self, signature: bytes, message: bytes) -> bool:
        """
        Verify a signature against a message.

        Args:
            signature: 64-byte Ed25519 signature
            message: Message that was signed

        Returns:
            True if signature is valid
        """
        if len(signature) != SIGNATURE_LENGTH:
            return False
        try:
            self._crypto_key.verify(signature, message)
        except InvalidSignature:
            return False
        return True

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ed25519PublicKey):
            return False
        return self._key_bytes == other._key_bytes

    def __hash__(self) -> int:
        return hash(self._key_bytes)

    def __repr__(self) -> str:
        return f"Ed25519PublicKey('{self._key_bytes.hex().upper()}')"


class Ed25519PrivateKey:
    """Ed25519 private key."""

    def __init__(self, private_key_bytes: bytes):
        """
        Initialize from a 32-byte private key seed.

        Raises:
            InvalidKeyError: If the key is not 32 bytes
        """
        if len(private_key_bytes) != KEY_LENGTH:
            raise InvalidKeyError(
                f"Ed25519 private key must be {KEY_LENGTH} bytes, got {len(private_key_bytes)}"
            )

        self._key_bytes = private_key_bytes
        self._crypto_key = CryptoEd25519PrivateKey.from_private_bytes(private_key_bytes)
        self._public_key = Ed25519PublicKey(
            self._crypto_key.public_key().public_bytes(
                encoding=serialization.Encoding.Raw,
                format=serialization.PublicFormat.Raw,
            )
        )

    @classmethod
    def generate(cls) -> Ed25519PrivateKey:
        """Generate a new random Ed25519 private key."""
        crypto_key = CryptoEd25519PrivateKey.generate()
        private_bytes = crypto_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption(),
        )
        return cls(private_bytes)

    def to_bytes(self) -> bytes:
        """Get the 32-byte private key seed."""
        return self._key_bytes

    def public_key(self) -> Ed25519PublicKey:
        """Get the corresponding public key."""
        return self._public_key

    def sign(self, message: bytes) -> bytes:
        """
        Sign a message.

        Ed25519 signs the message itself; no pre-hash is applied.

        Returns:
            64-byte signature
        """
        return self._crypto_key.sign(message)

    def __repr__(self) -> str:
        return f"Ed25519PrivateKey(public={self._public_key.to_bytes().hex().upper()})"


__all__ = ["ED25519_PREFIX", "Ed25519PublicKey", "Ed25519PrivateKey"]
