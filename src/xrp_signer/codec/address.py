"""
Classic and X-address codec.

A classic address is Base58Check(0x00 ++ account_id). An X-address packs the
account id together with an optional 64-bit tag and a network flag:

    prefix (2) ++ account_id (20) ++ flag (1) ++ tag (8, little-endian)

The flag byte is 0x01 when a tag is present and 0x00 otherwise, in which case
the tag bytes must all be zero. The two-byte prefix is what makes mainnet
addresses start with "X" and test network addresses start with "T".

Decoding never raises on malformed input: a string that is not a valid
address of the requested form decodes to ``None``.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from . import base58check
from .hashes import ripemd160_sha256
from ..runtime.errors import EncodingError

ACCOUNT_ID_LENGTH = 20
CLASSIC_VERSION = b"\x00"
CLASSIC_PAYLOAD_LENGTH = len(CLASSIC_VERSION) + ACCOUNT_ID_LENGTH
EXTENDED_PREFIX_LENGTH = 2
TAG_LENGTH = 8
EXTENDED_PAYLOAD_LENGTH = EXTENDED_PREFIX_LENGTH + ACCOUNT_ID_LENGTH + 1 + TAG_LENGTH
MAX_TAG = 2 ** 64 - 1

_FLAG_NO_TAG = 0x00
_FLAG_HAS_TAG = 0x01


@dataclass(frozen=True)
class AccountId:
    """Opaque 20-byte account identifier."""

    value: bytes

    def __post_init__(self):
        if not isinstance(self.value, bytes) or len(self.value) != ACCOUNT_ID_LENGTH:
            raise ValueError(f"Account id must be {ACCOUNT_ID_LENGTH} bytes")

    @classmethod
    def from_public_key(cls, public_key: bytes) -> AccountId:
        """Derive the account id of a public key: RIPEMD-160(SHA-256(key))."""
        return cls(ripemd160_sha256(public_key))

    def hex(self) -> str:
        return self.value.hex().upper()

    def __repr__(self) -> str:
        return f"AccountId('{self.hex()}')"


@dataclass(frozen=True)
class ClassicAddress:
    """A bare account id, encoded as an "r..." address."""

    account_id: AccountId

    @property
    def address(self) -> str:
        return encode_classic(self.account_id)

    @property
    def classic_address(self) -> str:
        return self.address

    @property
    def tag(self) -> None:
        """Classic addresses never carry a tag."""
        return None

    def __str__(self) -> str:
        return self.address


@dataclass(frozen=True)
class ExtendedAddress:
    """An account id with an optional tag and a network flag."""

    account_id: AccountId
    tag: Optional[int] = None
    is_test: bool = False

    @property
    def address(self) -> str:
        return encode_extended(self.account_id, self.tag, self.is_test)

    @property
    def classic_address(self) -> str:
        return encode_classic(self.account_id)

    def __str__(self) -> str:
        return self.address


class ExtendedAddressType(Enum):
    """Every (tag present, test network) combination an X-address can encode."""

    MAIN_WITHOUT_TAG = (False, False)
    MAIN_WITH_TAG = (True, False)
    TEST_WITHOUT_TAG = (False, True)
    TEST_WITH_TAG = (True, True)

    @property
    def has_tag(self) -> bool:
        return self.value[0]

    @property
    def is_test(self) -> bool:
        return self.value[1]

    @property
    def prefix(self) -> bytes:
        return _TYPE_PREFIXES[self]

    @classmethod
    def of(cls, has_tag: bool, is_test: bool) -> ExtendedAddressType:
        return cls((bool(has_tag), bool(is_test)))


_TYPE_PREFIXES: Dict[ExtendedAddressType, bytes] = {
    ExtendedAddressType.MAIN_WITHOUT_TAG: bytes([0x05, 0x44]),
    ExtendedAddressType.MAIN_WITH_TAG: bytes([0x05, 0x44]),
    ExtendedAddressType.TEST_WITHOUT_TAG: bytes([0x04, 0x93]),
    ExtendedAddressType.TEST_WITH_TAG: bytes([0x04, 0x93]),
}

_TYPES_BY_PREFIX: Dict[Tuple[bytes, bool], ExtendedAddressType] = {
    (prefix, address_type.has_tag): address_type
    for address_type, prefix in _TYPE_PREFIXES.items()
}


def _decode_payload(text: Any) -> Optional[bytes]:
    if not isinstance(text, str) or not text:
        return None
    try:
        return base58check.decode(text)
    except EncodingError:
        return None


def encode_classic(account_id: AccountId) -> str:
    """
    Encode an account id as a classic address.

    Args:
        account_id: Account to encode

    Returns:
        Classic "r..." address
    """
    return base58check.encode(CLASSIC_VERSION + account_id.value)


def decode_classic(text: Any) -> Optional[AccountId]:
    """
    Decode a classic address.

    Args:
        text: Candidate classic address

    Returns:
        The account id, or None if text is not a valid classic address
    """
    payload = _decode_payload(text)
    if payload is None or len(payload) != CLASSIC_PAYLOAD_LENGTH:
        return None
    if payload[:len(CLASSIC_VERSION)] != CLASSIC_VERSION:
        return None
    return AccountId(payload[len(CLASSIC_VERSION):])


def encode_extended(account_id: AccountId, tag: Optional[int] = None, is_test: bool = False) -> str:
    """
    Encode an account id, optional tag and network flag as an X-address.

    Args:
        account_id: Account to encode
        tag: Optional unsigned 64-bit tag
        is_test: Whether the address is for a test network

    Returns:
        X-address string

    Raises:
        ValueError: If tag is outside the unsigned 64-bit range
    """
    if tag is not None and not 0 <= tag <= MAX_TAG:
        raise ValueError(f"Tag must be between 0 and {MAX_TAG}, got {tag}")

    address_type = ExtendedAddressType.of(tag is not None, is_test)
    flag = _FLAG_HAS_TAG if address_type.has_tag else _FLAG_NO_TAG
    tag_bytes = (tag or 0).to_bytes(TAG_LENGTH, "little")

    payload = address_type.prefix + account_id.value + bytes([flag]) + tag_bytes
    return base58check.encode(payload)


def decode_extended(text: Any) -> Optional[ExtendedAddress]:
    """
    Decode an X-address.

    Args:
        text: Candidate X-address

    Returns:
        The decoded address, or None if text is not a valid X-address
    """
    payload = _decode_payload(text)
    if payload is None or len(payload) != EXTENDED_PAYLOAD_LENGTH:
        return None

    prefix = payload[:EXTENDED_PREFIX_LENGTH]
    account_end = EXTENDED_PREFIX_LENGTH + ACCOUNT_ID_LENGTH
    flag = payload[account_end]
    tag_bytes = payload[account_end + 1:]

    if flag not in (_FLAG_NO_TAG, _FLAG_HAS_TAG):
        return None

    address_type = _TYPES_BY_PREFIX.get((prefix, flag == _FLAG_HAS_TAG))
    if address_type is None:
        return None

    if not address_type.has_tag and any(tag_bytes):
        return None

    tag = int.from_bytes(tag_bytes, "little") if address_type.has_tag else None
    return ExtendedAddress(
        account_id=AccountId(payload[EXTENDED_PREFIX_LENGTH:account_end]),
        tag=tag,
        is_test=address_type.is_test,
    )


def decode_any(text: Any) -> Optional[Union[ClassicAddress, ExtendedAddress]]:
    """
    Decode either address form, trying the X-address form first.

    Args:
        text: Candidate address

    Returns:
        ExtendedAddress, ClassicAddress, or None if neither form decodes
    """
    extended = decode_extended(text)
    if extended is not None:
        return extended

    account_id = decode_classic(text)
    if account_id is not None:
        return ClassicAddress(account_id)

    return None


def is_valid_address(text: Any) -> bool:
    """Check whether text is a valid classic address or X-address."""
    return decode_any(text) is not None


def is_valid_classic_address(text: Any) -> bool:
    """Check whether text is a valid classic address."""
    return decode_classic(text) is not None


def is_valid_extended_address(text: Any) -> bool:
    """Check whether text is a valid X-address."""
    return decode_extended(text) is not None


def classic_to_extended(classic_address: str, tag: Optional[int] = None,
                        is_test: bool = False) -> Optional[str]:
    """
    Convert a classic address and optional tag to an X-address.

    Args:
        classic_address: Classic "r..." address
        tag: Optional tag to embed
        is_test: Whether the address is for a test network

    Returns:
        X-address, or None if classic_address is not a valid classic address
    """
    account_id = decode_classic(classic_address)
    if account_id is None:
        return None
    return encode_extended(account_id, tag, is_test)


def account_id_from_public_key(public_key: bytes) -> AccountId:
    """Derive the account id owned by a public key."""
    return AccountId.from_public_key(public_key)


def extended_to_classic(x_address: str) -> Optional[ExtendedAddress]:
    """
    Decode an X-address into its classic address, tag and network flag.

    The classic address string is available as ``classic_address`` on the
    result.
    """
    return decode_extended(x_address)


__all__ = [
    "ACCOUNT_ID_LENGTH",
    "MAX_TAG",
    "AccountId",
    "ClassicAddress",
    "ExtendedAddress",
    "ExtendedAddressType",
    "encode_classic",
    "decode_classic",
    "encode_extended",
    "decode_extended",
    "decode_any",
    "is_valid_address",
    "is_valid_classic_address",
    "is_valid_extended_address",
    "classic_to_extended",
    "extended_to_classic",
    "account_id_from_public_key",
]
