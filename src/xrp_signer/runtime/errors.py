"""
XRP Signer Error Model

This module provides the error handling framework for the signer SDK.

Errors raised here are the "hard failure" channel: a value was present but
corrupt or internally inconsistent. Incomplete input is reported by
returning ``None`` instead and never reaches this module.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for signer failures."""

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    BAD_CHECKSUM = 101
    BAD_CHARACTER = 102

    # Address errors (200-299)
    INVALID_ADDRESS = 200
    TAG_CONFLICT = 201

    # Transaction errors (300-399)
    INVALID_TRANSACTION = 300

    # Signing errors (400-499)
    SIGNING_FAILED = 400
    INVALID_KEY = 401


class XrpSignerError(Exception):
    """
    Base class for all signer errors.

    Provides structured error information: a code, a message, optional
    details and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a signer error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class EncodingError(XrpSignerError):
    """Data encoding/decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class BadChecksumError(EncodingError):
    """Base58Check checksum did not match the payload."""

    def __init__(self, message: str = "Bad checksum",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.BAD_CHECKSUM, details, cause)


class BadCharacterError(EncodingError):
    """Input contained a character outside the base58 alphabet."""

    def __init__(self, message: str = "Bad character",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.BAD_CHARACTER, details, cause)


class InvalidAddressError(XrpSignerError):
    """An address field was set but could not be decoded."""

    def __init__(self, message: str = "Invalid address",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ADDRESS, details, cause)


class TagConflictError(XrpSignerError):
    """An X-address tag disagrees with the explicit tag field."""

    def __init__(self, message: str = "Tag conflict",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.TAG_CONFLICT, details, cause)


class InvalidTransactionError(XrpSignerError):
    """Transaction contents are internally inconsistent."""

    def __init__(self, message: str = "Invalid transaction",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_TRANSACTION, details, cause)


class SigningError(XrpSignerError):
    """The wallet did not produce a signature."""

    def __init__(self, message: str = "Unable to produce a signature",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.SIGNING_FAILED, details, cause)


class InvalidKeyError(XrpSignerError):
    """Key material has the wrong size or cannot be loaded."""

    def __init__(self, message: str = "Invalid key",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_KEY, details, cause)


# Re-export key error types for convenience
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
]
