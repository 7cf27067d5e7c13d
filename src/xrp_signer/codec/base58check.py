"""
Base58Check encoding over the XRP ledger alphabet.

A payload is suffixed with the first four bytes of SHA-256(SHA-256(payload))
and the result is base-58 encoded, with each leading zero byte written as the
alphabet's first character ("r").
"""

import base58

from ..runtime.errors import BadCharacterError, BadChecksumError

ALPHABET = b"rpshnaf39wBUDNEGHJKLM4PQRST7VWXYZ2bcdeCg65jkm8oFqi1tuvAxyz"

_ALPHABET_CHARS = frozenset(ALPHABET.decode("ascii"))


def encode(payload: bytes) -> str:
    """
    Encode a payload with a 4-byte double SHA-256 checksum.

    Args:
        payload: Bytes to encode

    Returns:
        Base58Check string
    """
    return base58.b58encode_check(bytes(payload), alphabet=ALPHABET).decode("ascii")


def decode(text: str) -> bytes:
    """
    Decode a Base58Check string and verify its checksum.

    Args:
        text: Base58Check string

    Returns:
        Payload bytes with the checksum removed

    Raises:
        BadCharacterError: If text contains a character outside the alphabet
        BadChecksumError: If the checksum does not match the payload
    """
    for position, char in enumerate(text):
        if char not in _ALPHABET_CHARS:
            raise BadCharacterError(
                f"Invalid base58 character {char!r}",
                details={"position": position},
            )

    try:
        return base58.b58decode_check(text, alphabet=ALPHABET)
    except ValueError as e:
        raise BadChecksumError(cause=e) from e


__all__ = ["ALPHABET", "encode", "decode"]
