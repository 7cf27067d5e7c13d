"""
XRP ledger codec module.

Key components:
- base58check.py: Base58Check over the ledger alphabet
- address.py: classic and X-address encoding/decoding
- hashes.py: SHA-256, SHA-512Half, RIPEMD-160 and transaction IDs
- binary.py: canonical transaction encoding interface and xrpl-py adapter
"""

from . import base58check
from .address import (
    AccountId,
    ClassicAddress,
    ExtendedAddress,
    ExtendedAddressType,
    MAX_TAG,
    account_id_from_public_key,
    classic_to_extended,
    decode_any,
    decode_classic,
    decode_extended,
    encode_classic,
    encode_extended,
    extended_to_classic,
    is_valid_address,
    is_valid_classic_address,
    is_valid_extended_address,
)
from .binary import TransactionCodec, XrplBinaryCodec
from .hashes import sha256_bytes, sha512_half, ripemd160_sha256, transaction_hash

__all__ = [
    "base58check",
    "AccountId",
    "ClassicAddress",
    "ExtendedAddress",
    "ExtendedAddressType",
    "MAX_TAG",
    "account_id_from_public_key",
    "classic_to_extended",
    "decode_any",
    "decode_classic",
    "decode_extended",
    "encode_classic",
    "encode_extended",
    "extended_to_classic",
    "is_valid_address",
    "is_valid_classic_address",
    "is_valid_extended_address",
    "TransactionCodec",
    "XrplBinaryCodec",
    "sha256_bytes",
    "sha512_half",
    "ripemd160_sha256",
    "transaction_hash",
]
