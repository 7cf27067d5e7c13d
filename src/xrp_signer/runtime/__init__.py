"""Runtime helpers for the XRP signer SDK"""

from .errors import (
    ErrorCode,
    XrpSignerError,
    EncodingError,
    BadChecksumError,
    BadCharacterError,
    InvalidAddressError,
    TagConflictError,
    InvalidTransactionError,
    SigningError,
    InvalidKeyError,
)
from .network import XrplNetwork, is_test_network

__all__ = [
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
    "XrplNetwork",
    "is_test_network",
]
