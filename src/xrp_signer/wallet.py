"""
Wallets for the XRP signer.

A wallet owns a key pair and signs hex-encoded messages on behalf of the
Signer. Wallets never raise for a malformed message: ``sign`` returns
``None`` and ``verify`` returns ``False``.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Optional, Union

from .codec.address import AccountId, encode_classic, encode_extended
from .crypto.ed25519 import ED25519_PREFIX, Ed25519PrivateKey
from .crypto.hd import (
    DEFAULT_DERIVATION_PATH,
    derive_private_key,
    entropy_to_mnemonic,
    generate_mnemonic,
    is_valid_mnemonic,
)
from .crypto.secp256k1 import Secp256k1PrivateKey
from .runtime.errors import InvalidKeyError
from .runtime.network import XrplNetwork, is_test_network
from .utils import is_hex, to_bytes, to_hex

logger = logging.getLogger(__name__)


class Wallet(ABC):
    """
    Base wallet interface.

    Subclasses supply the key material and the signature scheme; address
    derivation is shared.
    """

    def __init__(self, network: XrplNetwork = XrplNetwork.MAIN):
        self.network = XrplNetwork(network)

    @property
    @abstractmethod
    def public_key(self) -> str:
        """Public key as uppercase hex."""
        pass

    @property
    @abstractmethod
    def private_key(self) -> str:
        """Private key as uppercase hex."""
        pass

    @abstractmethod
    def sign(self, message_hex: str) -> Optional[str]:
        """
        Sign a hex-encoded message.

        Args:
            message_hex: Message to sign, as hex

        Returns:
            Signature as uppercase hex, or None if message_hex is not hex
        """
        pass

    @abstractmethod
    def verify(self, message_hex: str, signature_hex: str) -> bool:
        """
        Verify a signature over a hex-encoded message.

        Returns:
            True if signature_hex is a valid signature of message_hex
        """
        pass

    @property
    def is_test(self) -> bool:
        return is_test_network(self.network)

    @property
    def account_id(self) -> AccountId:
        return AccountId.from_public_key(to_bytes(self.public_key))

    @property
    def classic_address(self) -> str:
        return encode_classic(self.account_id)

    def get_address(self, tag: Optional[int] = None) -> str:
        """
        Get the wallet's X-address on its network.

        Args:
            tag: Optional tag to embed

        Returns:
            X-address string
        """
        return encode_extended(self.account_id, tag, self.is_test)


class _KeyPairWallet(Wallet):
    """Wallet backed by a private key object from ``xrp_signer.crypto``."""

    def __init__(self, private_key: Union[Ed25519PrivateKey, Secp256k1PrivateKey],
                 network: XrplNetwork = XrplNetwork.MAIN):
        super().__init__(network)
        self._key = private_key

    def sign(self, message_hex: str) -> Optional[str]:
        if not is_hex(message_hex):
            logger.debug("Refusing to sign a message that is not hex")
            return None
        return to_hex(self._key.sign(bytes.fromhex(message_hex)))

    def verify(self, message_hex: str, signature_hex: str) -> bool:
        if not is_hex(message_hex) or not is_hex(signature_hex):
            return False
        return self._key.public_key().verify(bytes.fromhex(signature_hex), bytes.fromhex(message_hex))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(address={self.classic_address}, network={self.network.value})"


class Ed25519Wallet(_KeyPairWallet):
    """
    Ed25519 wallet.

    Keys are written in the ledger's form: the raw 32 bytes prefixed with
    ``ED``.
    """

    def __init__(self, private_key: Ed25519PrivateKey, network: XrplNetwork = XrplNetwork.MAIN):
        super().__init__(private_key, network)

    @classmethod
    def generate(cls, network: XrplNetwork = XrplNetwork.MAIN) -> Ed25519Wallet:
        """Create a wallet with a fresh random key."""
        return cls(Ed25519PrivateKey.generate(), network)

    @classmethod
    def from_private_key(cls, private_key_hex: str,
                         network: XrplNetwork = XrplNetwork.MAIN) -> Ed25519Wallet:
        """
        Load a wallet from a hex private key, with or without the ED prefix.

        Raises:
            InvalidKeyError: If the key is not hex or has the wrong size
        """
        if not is_hex(private_key_hex):
            raise InvalidKeyError("Private key is not a hex string")
        key_bytes = bytes.fromhex(private_key_hex)
        if len(key_bytes) == 33 and key_bytes[:1] == ED25519_PREFIX:
            key_bytes = key_bytes[1:]
        return cls(Ed25519PrivateKey(key_bytes), network)

    @property
    def public_key(self) -> str:
        return to_hex(self._key.public_key().to_ledger_bytes())

    @property
    def private_key(self) -> str:
        return to_hex(ED25519_PREFIX + self._key.to_bytes())


class Secp256k1Wallet(_KeyPairWallet):
    """
    secp256k1 wallet.

    The private key is written with a leading ``00`` byte and the public key
    as a 33-byte compressed point. Wallets derived from a mnemonic remember
    the mnemonic and the derivation path they came from.
    """

    def __init__(self, private_key: Secp256k1PrivateKey, network: XrplNetwork = XrplNetwork.MAIN,
                 mnemonic: Optional[str] = None, derivation_path: Optional[str] = None):
        super().__init__(private_key, network)
        self.mnemonic = mnemonic
        self.derivation_path = derivation_path

    @classmethod
    def generate(cls, network: XrplNetwork = XrplNetwork.MAIN) -> Secp256k1Wallet:
        """Create a wallet from a fresh random mnemonic at the default derivation path."""
        return cls.from_mnemonic(generate_mnemonic(), network=network)

    @classmethod
    def from_mnemonic(cls, mnemonic: str, derivation_path: str = DEFAULT_DERIVATION_PATH,
                      network: XrplNetwork = XrplNetwork.MAIN) -> Optional[Secp256k1Wallet]:
        """
        Derive a wallet from a BIP-39 mnemonic along a BIP-32 path.

        Args:
            mnemonic: English BIP-39 mnemonic
            derivation_path: BIP-32 path, defaults to ``m/44'/144'/0'/0/0``
            network: Network for the wallet's X-address

        Returns:
            The wallet, or None if the mnemonic fails validation

        Raises:
            InvalidKeyError: If the derivation path is malformed
        """
        if not is_valid_mnemonic(mnemonic):
            logger.debug("Mnemonic failed validation")
            return None
        private_key = Secp256k1PrivateKey(derive_private_key(mnemonic, derivation_path))
        return cls(private_key, network, mnemonic=mnemonic, derivation_path=derivation_path)

    @classmethod
    def from_entropy(cls, entropy_hex: str,
                     network: XrplNetwork = XrplNetwork.MAIN) -> Optional[Secp256k1Wallet]:
        """
        Derive a wallet from entropy at the default derivation path.

        The entropy is turned into its BIP-39 mnemonic first, so the result
        matches any BIP-44 wallet for the same mnemonic.

        Args:
            entropy_hex: 16, 20, 24, 28 or 32 bytes of entropy as hex
            network: Network for the wallet's X-address

        Returns:
            The wallet, or None if entropy_hex is empty or not hex

        Raises:
            InvalidKeyError: If the entropy has an unsupported length
        """
        if not is_hex(entropy_hex) or not entropy_hex:
            logger.debug("Entropy is not a hex string")
            return None
        return cls.from_mnemonic(entropy_to_mnemonic(bytes.fromhex(entropy_hex)), network=network)

    @classmethod
    def from_private_key(cls, private_key_hex: str,
                         network: XrplNetwork = XrplNetwork.MAIN) -> Secp256k1Wallet:
        """
        Load a wallet from a hex private key, with or without the 00 prefix.

        Raises:
            InvalidKeyError: If the key is not hex or is not a valid scalar
        """
        if not is_hex(private_key_hex):
            raise InvalidKeyError("Private key is not a hex string")
        return cls(Secp256k1PrivateKey(bytes.fromhex(private_key_hex)), network)

    @property
    def public_key(self) -> str:
        return to_hex(self._key.public_key().to_bytes())

    @property
    def private_key(self) -> str:
        return "00" + to_hex(self._key.to_bytes())


__all__ = ["Wallet", "Ed25519Wallet", "Secp256k1Wallet"]
