# Structured transaction types for the XRP ledger
# Each transaction body is a tagged variant selected by `transaction_type`;
# unset optional fields are None rather than sentinel values.

from __future__ import annotations
from decimal import Decimal, InvalidOperation
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

UINT32_MAX = 0xFFFFFFFF
CURRENCY_CODE_LENGTH = 20


# =============================================================================
# Amounts
# =============================================================================

class XrpDropsAmount(BaseModel):
    """Native amount in drops."""
    drops: int = Field(..., ge=0)

    model_config = {"frozen": True}


class Currency(BaseModel):
    """Issued currency, identified by a three-letter name or a raw code."""
    name: Optional[str] = None
    code: Optional[bytes] = None

    model_config = {"frozen": True}

    @field_validator("code")
    @classmethod
    def code_is_160_bits(cls, v: Optional[bytes]) -> Optional[bytes]:
        if v is not None and len(v) != CURRENCY_CODE_LENGTH:
            raise ValueError(f"Currency code must be {CURRENCY_CODE_LENGTH} bytes, got {len(v)}")
        return v

    @model_validator(mode="after")
    def require_name_or_code(self) -> Currency:
        if not self.name and not self.code:
            raise ValueError("Currency needs a name or a code")
        return self


class IssuedCurrencyAmount(BaseModel):
    """Amount of an issued currency, with its value as a decimal string."""
    currency: Currency
    issuer: str
    value: str

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_decimal(cls, v: str) -> str:
        try:
            parsed = Decimal(v)
        except InvalidOperation:
            raise ValueError(f"Not a decimal value: {v!r}")
        if not parsed.is_finite():
            raise ValueError(f"Not a finite decimal value: {v!r}")
        return v


class CurrencyAmount(BaseModel):
    """Either a native amount or an issued currency amount."""
    xrp_amount: Optional[XrpDropsAmount] = None
    issued_currency_amount: Optional[IssuedCurrencyAmount] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def at_most_one_variant(self) -> CurrencyAmount:
        if self.xrp_amount is not None and self.issued_currency_amount is not None:
            raise ValueError("CurrencyAmount holds either an XRP amount or an issued currency amount")
        return self

    @classmethod
    def of_drops(cls, drops: int) -> CurrencyAmount:
        return cls(xrp_amount=XrpDropsAmount(drops=drops))

    @classmethod
    def of_issued(cls, currency: Currency, issuer: str, value: str) -> CurrencyAmount:
        return cls(issued_currency_amount=IssuedCurrencyAmount(currency=currency, issuer=issuer, value=value))


# =============================================================================
# Paths and memos
# =============================================================================

class PathElement(BaseModel):
    """One hop of a payment path."""
    account: Optional[str] = None
    currency: Optional[Currency] = None
    issuer: Optional[str] = None

    model_config = {"frozen": True}


class Path(BaseModel):
    """Ordered list of path elements."""
    elements: List[PathElement] = Field(default_factory=list)

    model_config = {"frozen": True}


class Memo(BaseModel):
    """Arbitrary data attached to a transaction."""
    memo_data: Optional[bytes] = None
    memo_format: Optional[bytes] = None
    memo_type: Optional[bytes] = None

    model_config = {"frozen": True}


# =============================================================================
# Transaction bodies
# =============================================================================

class Payment(BaseModel):
    """Send value from the account to a destination."""
    transaction_type: Literal["Payment"] = "Payment"
    amount: Optional[CurrencyAmount] = None
    destination: Optional[str] = None
    destination_tag: Optional[int] = Field(None, ge=0, le=UINT32_MAX)
    deliver_min: Optional[CurrencyAmount] = None
    invoice_id: Optional[bytes] = None
    paths: List[Path] = Field(default_factory=list)
    send_max: Optional[CurrencyAmount] = None

    model_config = {"frozen": True}


class AccountSet(BaseModel):
    """Modify the properties of the account."""
    transaction_type: Literal["AccountSet"] = "AccountSet"
    clear_flag: Optional[int] = Field(None, ge=0, le=UINT32_MAX)
    domain: Optional[str] = None
    email_hash: Optional[bytes] = None
    message_key: Optional[bytes] = None
    set_flag: Optional[int] = Field(None, ge=0, le=UINT32_MAX)
    transfer_rate: Optional[int] = Field(None, ge=0, le=UINT32_MAX)
    tick_size: Optional[int] = Field(None, ge=0, le=15)

    model_config = {"frozen": True}

    @field_validator("domain")
    @classmethod
    def domain_is_ascii(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.isascii():
            raise ValueError("Domain must be ASCII")
        return v


class TrustSet(BaseModel):
    """Create or modify a trust line."""
    transaction_type: Literal["TrustSet"] = "TrustSet"
    limit_amount: Optional[CurrencyAmount] = None
    quality_in: Optional[int] = Field(None, ge=0, le=UINT32_MAX)
    quality_out: Optional[int] = Field(None, ge=0, le=UINT32_MAX)

    model_config = {"frozen": True}


class OfferCreate(BaseModel):
    """Place an offer on the decentralized exchange."""
    transaction_type: Literal["OfferCreate"] = "OfferCreate"
    taker_gets: Optional[CurrencyAmount] = None
    taker_pays: Optional[CurrencyAmount] = None
    expiration: Optional[int] = Field(None, ge=0, le=UINT32_MAX)
    offer_sequence: Optional[int] = Field(None, ge=0, le=UINT32_MAX)

    model_config = {"frozen": True}


class OfferCancel(BaseModel):
    """Remove an offer from the decentralized exchange."""
    transaction_type: Literal["OfferCancel"] = "OfferCancel"
    offer_sequence: Optional[int] = Field(None, ge=0, le=UINT32_MAX)

    model_config = {"frozen": True}


TransactionBody = Annotated[
    Union[Payment, AccountSet, TrustSet, OfferCreate, OfferCancel],
    Field(discriminator="transaction_type"),
]


# =============================================================================
# Transaction
# =============================================================================

class Transaction(BaseModel):
    """
    A transaction before normalization.

    Address fields accept either a classic address or an X-address. Any of
    the fields may be left unset; the normalizer decides whether the result
    is complete enough to sign.
    """
    account: Optional[str] = None
    fee: Optional[XrpDropsAmount] = None
    sequence: Optional[int] = Field(None, ge=0, le=UINT32_MAX)
    signing_public_key: Optional[bytes] = None
    last_ledger_sequence: Optional[int] = Field(None, ge=0, le=UINT32_MAX)
    source_tag: Optional[int] = Field(None, ge=0, le=UINT32_MAX)
    flags: Optional[int] = Field(None, ge=0, le=UINT32_MAX)
    account_transaction_id: Optional[bytes] = None
    memos: List[Memo] = Field(default_factory=list)
    body: Optional[TransactionBody] = None

    model_config = {"frozen": True}

    @property
    def transaction_type(self) -> Optional[str]:
        return self.body.transaction_type if self.body is not None else None


__all__ = [
    "XrpDropsAmount",
    "Currency",
    "IssuedCurrencyAmount",
    "CurrencyAmount",
    "PathElement",
    "Path",
    "Memo",
    "Payment",
    "AccountSet",
    "TrustSet",
    "OfferCreate",
    "OfferCancel",
    "TransactionBody",
    "Transaction",
]
