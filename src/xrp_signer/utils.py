"""
Hex and byte helpers shared by the codec, wallets and signer.
"""

import re
from typing import Any

_HEX_RE = re.compile(r"^[0-9a-fA-F]*$")


def is_hex(value: Any) -> bool:
    """
    Check whether a value is a well-formed hex string.

    An even number of hex digits is required so that the string maps to
    whole bytes. The empty string is accepted.

    Args:
        value: Value to check

    Returns:
        True if value is a str of hex digit pairs
    """
    if not isinstance(value, str):
        return False
    return len(value) % 2 == 0 and _HEX_RE.match(value) is not None


def to_bytes(hex_string: str) -> bytes:
    """
    Convert a hex string to bytes.

    Raises:
        ValueError: If hex_string is not valid hex
    """
    if not is_hex(hex_string):
        raise ValueError(f"Not a hex string: {hex_string!r}")
    return bytes.fromhex(hex_string)


def to_hex(data: bytes) -> str:
    """Convert bytes to an uppercase hex string."""
    return data.hex().upper()


__all__ = ["is_hex", "to_bytes", "to_hex"]
