"""
Transaction models and normalization.
"""

from .normalizer import missing_mandatory_fields, normalize_transaction
from .types import (
    AccountSet,
    Currency,
    CurrencyAmount,
    IssuedCurrencyAmount,
    Memo,
    OfferCancel,
    OfferCreate,
    Path,
    PathElement,
    Payment,
    Transaction,
    TrustSet,
    XrpDropsAmount,
)

__all__ = [
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
]
