"""
SECP256K1 key pairs backed by the ecdsa package.

The ledger signs the SHA-512Half digest of the message with a deterministic
(RFC 6979) nonce and requires canonical low-S DER signatures. Public keys are
33-byte compressed points.
"""

from __future__ import annotations
import hashlib

from ecdsa import BadSignatureError, SECP256k1, SigningKey, VerifyingKey
from ecdsa.der import UnexpectedDER
from ecdsa.errors import MalformedPointError
from ecdsa.util import sigdecode_der, sigencode_der_canonize

from ..codec.hashes import sha512_half
from ..runtime.errors import InvalidKeyError

KEY_LENGTH = 32


class Secp256k1PublicKey:
    """SECP256K1 public key for verification."""

    def __init__(self, public_key_bytes: bytes):
        """
        Initialize public key.

        Args:
            public_key_bytes: Compressed (33) or uncompressed (65) point

        Raises:
            InvalidKeyError: If the bytes are not a point on the curve
        """
        try:
            self._verifying_key = VerifyingKey.from_string(public_key_bytes, curve=SECP256k1)
        except MalformedPointError as e:
            raise InvalidKeyError(f"Invalid secp256k1 public key: {e}", cause=e) from e

    def to_bytes(self) -> bytes:
        """Get the 33-byte compressed public key."""
        return self._verifying_key.to_string("compressed")

    def verify(self, signature: bytes, message: bytes) -> bool:
        """
        Verify a DER signature over the SHA-512Half digest of message.

        Returns:
            True if signature is valid
        """
        try:
            return self._verifying_key.verify_digest(
                signature, sha512_half(message), sigdecode=sigdecode_der
            )
        except (BadSignatureError, UnexpectedDER):
            return False

    def __eq__(self, other) -> bool:
        if not isinstance(other, Secp256k1PublicKey):
            return False
        return self.to_bytes() == other.to_bytes()

    def __hash__(self) -> int:
        return hash(self.to_bytes())


class Secp256k1PrivateKey:
    """SECP256K1 private key."""

    def __init__(self, private_key_bytes: bytes):
        """
        Initialize from a 32-byte scalar.

        A 33-byte key with a leading zero byte, as written by ledger tools,
        is accepted as well.

        Raises:
            InvalidKeyError: If the key has the wrong size or is out of range
        """
        if len(private_key_bytes) == KEY_LENGTH + 1 and private_key_bytes[0] == 0:
            private_key_bytes = private_key_bytes[1:]
        if len(private_key_bytes) != KEY_LENGTH:
            raise InvalidKeyError(
                f"secp256k1 private key must be {KEY_LENGTH} bytes, got {len(private_key_bytes)}"
            )

        try:
            self._signing_key = SigningKey.from_string(private_key_bytes, curve=SECP256k1)
        except MalformedPointError as e:
            raise InvalidKeyError(f"Invalid secp256k1 private key: {e}", cause=e) from e

        self._key_bytes = private_key_bytes
        self._public_key = Secp256k1PublicKey(
            self._signing_key.get_verifying_key().to_string("compressed")
        )

    def to_bytes(self) -> bytes:
        """Get the 32-byte private scalar."""
        return self._key_bytes

    def public_key(self) -> Secp256k1PublicKey:
        return self._public_key

    def sign(self, message: bytes) -> bytes:
        """
        Sign the SHA-512Half digest of message.

        Returns:
            Canonical DER-encoded signature
        """
        return self._signing_key.sign_digest_deterministic(
            sha512_half(message),
            hashfunc=hashlib.sha256,
            sigencode=sigencode_der_canonize,
        )

    def __repr__(self) -> str:
        return f"Secp256k1PrivateKey(public={self._public_key.to_bytes().hex().upper()})"


__all__ = ["Secp256k1PublicKey", "Secp256k1PrivateKey"]
