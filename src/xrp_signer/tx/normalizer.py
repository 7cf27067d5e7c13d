"""
Transaction normalization.

Turns a structured ``Transaction`` into the canonical field map consumed by
the binary codec. Address fields may hold classic addresses or X-addresses;
X-addresses are replaced by their classic form and any embedded tag is moved
into the sibling tag field.

Two outcomes besides success:

- ``None`` when a mandatory field is not set at all;
- an ``XrpSignerError`` when a value is set but unusable (an undecodable
  address, a tag that disagrees with the explicit tag field, a tagged
  X-address where no tag can be carried).
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from ..codec.address import ClassicAddress, ExtendedAddress, decode_any
from ..runtime.errors import InvalidAddressError, InvalidTransactionError, TagConflictError
from ..utils import to_hex
from .types import (
    AccountSet,
    Currency,
    CurrencyAmount,
    Memo,
    OfferCancel,
    OfferCreate,
    Path,
    Payment,
    Transaction,
    TrustSet,
    UINT32_MAX,
)

logger = logging.getLogger(__name__)

COMMON_MANDATORY_FIELDS = ("Account", "Fee", "Sequence", "TransactionType", "SigningPubKey")

MANDATORY_FIELDS_BY_TYPE = {
    "Payment": ("Destination", "Amount"),
    "AccountSet": (),
    "TrustSet": ("LimitAmount",),
    "OfferCreate": ("TakerGets", "TakerPays"),
    "OfferCancel": ("OfferSequence",),
}

Fields = Dict[str, Any]


# =============================================================================
# Addresses and tags
# =============================================================================

def _resolve_address(value: Optional[str], field: str) -> Optional[Union[ClassicAddress, ExtendedAddress]]:
    if not value:
        return None
    decoded = decode_any(value)
    if decoded is None:
        raise InvalidAddressError(
            f"{field} is not a valid address",
            details={"field": field, "address": value},
        )
    return decoded


def _merge_tags(embedded: Optional[int], explicit: Optional[int], address_field: str,
                tag_field: str) -> Optional[int]:
    if embedded is None:
        return explicit
    if explicit is not None and explicit != embedded:
        raise TagConflictError(
            f"{address_field} embeds tag {embedded} but {tag_field} is {explicit}",
            details={"field": tag_field, "embedded": embedded, "explicit": explicit},
        )
    if embedded > UINT32_MAX:
        raise InvalidTransactionError(
            f"Tag {embedded} in {address_field} does not fit in {tag_field}",
            details={"field": tag_field, "tag": embedded},
        )
    return embedded


def _put_tagged_address(fields: Fields, address_field: str, tag_field: str,
                        address: Optional[str], explicit_tag: Optional[int]) -> None:
    decoded = _resolve_address(address, address_field)
    if decoded is not None:
        fields[address_field] = decoded.classic_address
        tag = _merge_tags(decoded.tag, explicit_tag, address_field, tag_field)
    else:
        tag = explicit_tag
    if tag is not None:
        fields[tag_field] = tag


def _untagged_address(address: Optional[str], field: str) -> Optional[str]:
    decoded = _resolve_address(address, field)
    if decoded is None:
        return None
    if decoded.tag is not None:
        raise InvalidTransactionError(
            f"{field} cannot carry a tag",
            details={"field": field, "address": address},
        )
    return decoded.classic_address


# =============================================================================
# Amounts, paths and memos
# =============================================================================

def _currency(currency: Currency) -> str:
    if currency.name:
        return currency.name
    return to_hex(currency.code)


def _amount(amount: Optional[CurrencyAmount], field: str) -> Optional[Union[str, Fields]]:
    if amount is None:
        return None

    if amount.xrp_amount is not None:
        return str(amount.xrp_amount.drops)

    issued = amount.issued_currency_amount
    if issued is None:
        return None

    issuer = _untagged_address(issued.issuer, f"{field}.issuer")
    if issuer is None:
        return None

    return {
        "currency": _currency(issued.currency),
        "issuer": issuer,
        "value": issued.value,
    }


def _paths(paths: List[Path]) -> List[List[Fields]]:
    result = []
    for path in paths:
        elements = []
        for element in path.elements:
            entry: Fields = {}
            account = _untagged_address(element.account, "Paths.account")
            if account is not None:
                entry["account"] = account
            if element.currency is not None:
                entry["currency"] = _currency(element.currency)
            issuer = _untagged_address(element.issuer, "Paths.issuer")
            if issuer is not None:
                entry["issuer"] = issuer
            elements.append(entry)
        result.append(elements)
    return result


def _memos(memos: List[Memo]) -> List[Fields]:
    result = []
    for memo in memos:
        entry: Fields = {}
        if memo.memo_data is not None:
            entry["MemoData"] = to_hex(memo.memo_data)
        if memo.memo_format is not None:
            entry["MemoFormat"] = to_hex(memo.memo_format)
        if memo.memo_type is not None:
            entry["MemoType"] = to_hex(memo.memo_type)
        result.append({"Memo": entry})
    return result


def _put(fields: Fields, key: str, value: Any) -> None:
    if value is not None:
        fields[key] = value


# =============================================================================
# Transaction bodies
# =============================================================================

def _payment_fields(payment: Payment, fields: Fields) -> None:
    _put_tagged_address(fields, "Destination", "DestinationTag",
                        payment.destination, payment.destination_tag)
    _put(fields, "Amount", _amount(payment.amount, "Amount"))
    _put(fields, "DeliverMin", _amount(payment.deliver_min, "DeliverMin"))
    _put(fields, "SendMax", _amount(payment.send_max, "SendMax"))
    if payment.invoice_id is not None:
        fields["InvoiceID"] = to_hex(payment.invoice_id)
    if payment.paths:
        fields["Paths"] = _paths(payment.paths)


def _account_set_fields(account_set: AccountSet, fields: Fields) -> None:
    _put(fields, "ClearFlag", account_set.clear_flag)
    if account_set.domain is not None:
        fields["Domain"] = to_hex(account_set.domain.encode("ascii"))
    if account_set.email_hash is not None:
        fields["EmailHash"] = to_hex(account_set.email_hash)
    if account_set.message_key is not None:
        fields["MessageKey"] = to_hex(account_set.message_key)
    _put(fields, "SetFlag", account_set.set_flag)
    _put(fields, "TransferRate", account_set.transfer_rate)
    _put(fields, "TickSize", account_set.tick_size)


def _trust_set_fields(trust_set: TrustSet, fields: Fields) -> None:
    _put(fields, "LimitAmount", _amount(trust_set.limit_amount, "LimitAmount"))
    _put(fields, "QualityIn", trust_set.quality_in)
    _put(fields, "QualityOut", trust_set.quality_out)


def _offer_create_fields(offer_create: OfferCreate, fields: Fields) -> None:
    _put(fields, "TakerGets", _amount(offer_create.taker_gets, "TakerGets"))
    _put(fields, "TakerPays", _amount(offer_create.taker_pays, "TakerPays"))
    _put(fields, "Expiration", offer_create.expiration)
    _put(fields, "OfferSequence", offer_create.offer_sequence)


def _offer_cancel_fields(offer_cancel: OfferCancel, fields: Fields) -> None:
    _put(fields, "OfferSequence", offer_cancel.offer_sequence)


_BODY_HANDLERS: Dict[str, Callable[[Any, Fields], None]] = {
    "Payment": _payment_fields,
    "AccountSet": _account_set_fields,
    "TrustSet": _trust_set_fields,
    "OfferCreate": _offer_create_fields,
    "OfferCancel": _offer_cancel_fields,
}


# =============================================================================
# Entry point
# =============================================================================

def missing_mandatory_fields(fields: Fields) -> List[str]:
    """
    List the mandatory keys absent from a canonical field map.

    Args:
        fields: Canonical field map

    Returns:
        Missing keys, empty when the map is complete
    """
    required = COMMON_MANDATORY_FIELDS + MANDATORY_FIELDS_BY_TYPE.get(fields.get("TransactionType"), ())
    return [key for key in required if key not in fields]


def normalize_transaction(transaction: Transaction) -> Optional[Fields]:
    """
    Convert a structured transaction into its canonical field map.

    Args:
        transaction: Transaction to normalize

    Returns:
        Canonical field map, or None if a mandatory field is not set

    Raises:
        InvalidAddressError: If an address field is set but cannot be decoded
        TagConflictError: If an X-address tag disagrees with its tag field
        InvalidTransactionError: If a tag appears where none can be carried
    """
    fields: Fields = {}

    _put_tagged_address(fields, "Account", "SourceTag", transaction.account, transaction.source_tag)
    if transaction.fee is not None:
        fields["Fee"] = str(transaction.fee.drops)
    _put(fields, "Sequence", transaction.sequence)
    if transaction.signing_public_key is not None:
        fields["SigningPubKey"] = to_hex(transaction.signing_public_key)
    _put(fields, "LastLedgerSequence", transaction.last_ledger_sequence)
    _put(fields, "Flags", transaction.flags)
    if transaction.account_transaction_id is not None:
        fields["AccountTxnID"] = to_hex(transaction.account_transaction_id)
    if transaction.memos:
        fields["Memos"] = _memos(transaction.memos)

    body = transaction.body
    if body is not None:
        fields["TransactionType"] = body.transaction_type
        _BODY_HANDLERS[body.transaction_type](body, fields)

    missing = missing_mandatory_fields(fields)
    if missing:
        logger.debug(f"Transaction is missing mandatory fields: {', '.join(missing)}")
        return None

    return fields


__all__ = [
    "COMMON_MANDATORY_FIELDS",
    "MANDATORY_FIELDS_BY_TYPE",
    "missing_mandatory_fields",
    "normalize_transaction",
]
