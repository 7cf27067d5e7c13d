"""
Hierarchical deterministic key derivation.

Entropy maps to a BIP-39 English mnemonic, the mnemonic to a seed, and the
seed to a secp256k1 key along a BIP-32 path. The ledger's registered BIP-44
coin type is 144.
"""

import logging
from typing import Any

from bip_utils import Bip32KeyError, Bip32PathError, Bip32Slip10Secp256k1
from mnemonic import Mnemonic

from ..runtime.errors import InvalidKeyError

logger = logging.getLogger(__name__)

DEFAULT_DERIVATION_PATH = "m/44'/144'/0'/0/0"
MNEMONIC_LANGUAGE = "english"

_mnemonic = Mnemonic(MNEMONIC_LANGUAGE)


def generate_mnemonic(strength: int = 128) -> str:
    """Generate a random mnemonic with the given entropy strength in bits."""
    return _mnemonic.generate(strength=strength)


def entropy_to_mnemonic(entropy: bytes) -> str:
    """
    Convert raw entropy to its BIP-39 mnemonic.

    Args:
        entropy: 16, 20, 24, 28 or 32 bytes

    Returns:
        Space separated mnemonic

    Raises:
        InvalidKeyError: If the entropy has an unsupported length
    """
    try:
        return _mnemonic.to_mnemonic(entropy)
    except ValueError as e:
        raise InvalidKeyError(f"Unusable entropy: {e}", details={"length": len(entropy)}, cause=e) from e


def is_valid_mnemonic(phrase: Any) -> bool:
    """Check the words and checksum of a mnemonic."""
    if not isinstance(phrase, str) or not phrase:
        return False
    return _mnemonic.check(phrase)


def derive_private_key(phrase: str, derivation_path: str = DEFAULT_DERIVATION_PATH,
                       passphrase: str = "") -> bytes:
    """
    Derive the secp256k1 private key of a mnemonic at a BIP-32 path.

    The mnemonic is not validated here; see ``is_valid_mnemonic``.

    Args:
        phrase: BIP-39 mnemonic
        derivation_path: BIP-32 path such as ``m/44'/144'/0'/0/0``
        passphrase: Optional BIP-39 passphrase

    Returns:
        32-byte private scalar

    Raises:
        InvalidKeyError: If the path cannot be parsed or derived
    """
    seed = Mnemonic.to_seed(phrase, passphrase)
    try:
        node = Bip32Slip10Secp256k1.FromSeedAndPath(seed, derivation_path)
    except (Bip32PathError, Bip32KeyError) as e:
        raise InvalidKeyError(
            f"Cannot derive key at {derivation_path}: {e}",
            details={"derivation_path": derivation_path},
            cause=e,
        ) from e

    logger.debug(f"Derived secp256k1 key at {derivation_path}")
    return node.PrivateKey().Raw().ToBytes()


__all__ = [
    "DEFAULT_DERIVATION_PATH",
    "generate_mnemonic",
    "entropy_to_mnemonic",
    "is_valid_mnemonic",
    "derive_private_key",
]
