"""
Signing key primitives.

Ed25519 comes from the cryptography package and secp256k1 from ecdsa.
Mnemonic based derivation uses mnemonic and bip_utils.
"""

from .ed25519 import ED25519_PREFIX, Ed25519PrivateKey, Ed25519PublicKey
from .hd import (
    DEFAULT_DERIVATION_PATH,
    derive_private_key,
    entropy_to_mnemonic,
    generate_mnemonic,
    is_valid_mnemonic,
)
from .secp256k1 import Secp256k1PrivateKey, Secp256k1PublicKey

__all__ = [
    "ED25519_PREFIX",
    "Ed25519PrivateKey",
    "Ed25519PublicKey",
    "Secp256k1PrivateKey",
    "Secp256k1PublicKey",
    "DEFAULT_DERIVATION_PATH",
    "derive_private_key",
    "entropy_to_mnemonic",
    "generate_mnemonic",
    "is_valid_mnemonic",
]
