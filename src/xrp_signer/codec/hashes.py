"""
Hash Functions

SHA-256, SHA-512Half and RIPEMD-160 helpers used by the address codec,
wallets and transaction hashing.
"""

import hashlib
from typing import Optional, Union

from ..utils import is_hex, to_hex

# Prefix the ledger prepends to a signed blob before hashing it into a transaction ID ("TXN\0").
TRANSACTION_ID_PREFIX = bytes.fromhex("54584E00")


def sha256_bytes(input_bytes: bytes) -> bytes:
    """
    Compute SHA-256 hash of input bytes.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        SHA-256 hash as bytes (32 bytes)
    """
    return hashlib.sha256(input_bytes).digest()


def sha512_half(input_bytes: bytes) -> bytes:
    """
    Compute the first 32 bytes of SHA-512.

    This is the digest the ledger uses for signing and for transaction IDs.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        32-byte digest
    """
    return hashlib.sha512(input_bytes).digest()[:32]


def ripemd160_sha256(input_bytes: bytes) -> bytes:
    """
    Compute RIPEMD-160(SHA-256(input)).

    Args:
        input_bytes: Input bytes, typically a public key

    Returns:
        20-byte hash
    """
    sha256_hash = sha256_bytes(input_bytes)
    ripemd = hashlib.new('ripemd160')
    ripemd.update(sha256_hash)
    return ripemd.digest()


def transaction_hash(signed_transaction: Union[bytes, str]) -> Optional[str]:
    """
    Compute the transaction ID of a signed transaction blob.

    Args:
        signed_transaction: Signed blob as bytes or as a hex string

    Returns:
        Uppercase 64 character hex hash, or None if a str input is not hex
    """
    if isinstance(signed_transaction, str):
        if not is_hex(signed_transaction):
            return None
        signed_transaction = bytes.fromhex(signed_transaction)

    return to_hex(sha512_half(TRANSACTION_ID_PREFIX + signed_transaction))


__all__ = [
    "TRANSACTION_ID_PREFIX",
    "sha256_bytes",
    "sha512_half",
    "ripemd160_sha256",
    "transaction_hash",
]
