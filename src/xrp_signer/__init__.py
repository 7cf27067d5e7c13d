"""
XRP Signer

Address codec and transaction signing for the XRP ledger: classic and
X-address encoding, normalization of structured transactions into canonical
field maps, and signing with Ed25519 or secp256k1 wallets.
"""

# Address codec and hashing
from .codec import *

# Errors and network selection
from .runtime import *

# Transactions, wallets and signing
from .tx import *
from .wallet import Wallet, Ed25519Wallet, Secp256k1Wallet
from .crypto.hd import DEFAULT_DERIVATION_PATH
from .signers import SIGNATURE_FIELD, Signer
from .utils import is_hex, to_bytes, to_hex

__version__ = "0.1.0"
__all__ = [
    # Address codec
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

    # Hashing and encoding
    "base58check",
    "sha256_bytes",
    "sha512_half",
    "ripemd160_sha256",
    "transaction_hash",
    "TransactionCodec",
    "XrplBinaryCodec",

    # Errors
    "ErrorCode",
    "XrpSignerError",
    "EncodingError",
    "BadChecksumError",
    "BadCharacterError",
    "InvalidAddressError",
    "TagConflictError",
    "InvalidTransactionError",
    "SigningError",
    "InvalidKeyError",

    # Network
    "XrplNetwork",
    "is_test_network",

    # Transactions
    "AccountSet",
    "Currency",
    "CurrencyAmount",
    "IssuedCurrencyAmount",
    "Memo",
    "OfferCancel",
    "OfferCreate",
    "Path",
    "PathElement",
    "Payment",
    "Transaction",
    "TrustSet",
    "XrpDropsAmount",
    "missing_mandatory_fields",
    "normalize_transaction",

    # Wallets and signing
    "DEFAULT_DERIVATION_PATH",
    "Wallet",
    "Ed25519Wallet",
    "Secp256k1Wallet",
    "SIGNATURE_FIELD",
    "Signer",

    # Hex utilities
    "is_hex",
    "to_bytes",
    "to_hex",

    "__version__",
]
