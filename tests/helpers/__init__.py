from .fakes import FAKE_SIGNATURE, SIGNING_PREFIX, FakeTransactionCodec, FakeWallet
from .factories import (
    ACCOUNT_CLASSIC_ADDRESS,
    ACCOUNT_X_ADDRESS,
    DESTINATION_CLASSIC_ADDRESS,
    DESTINATION_TAG,
    DESTINATION_X_ADDRESS,
    DESTINATION_X_ADDRESS_WITH_TAG,
    ISSUER_ADDRESS,
    PATH_ADDRESSES,
    PUBLIC_KEY_HEX,
    mk_account_set_all_fields,
    mk_issued_amount,
    mk_memo,
    mk_offer_cancel,
    mk_offer_create,
    mk_payment,
    mk_payment_all_fields,
    mk_transaction,
    mk_trust_set,
    mk_xrp_amount,
)

__all__ = [
    "FAKE_SIGNATURE",
    "SIGNING_PREFIX",
    "FakeTransactionCodec",
    "FakeWallet",
    "ACCOUNT_CLASSIC_ADDRESS",
    "ACCOUNT_X_ADDRESS",
    "DESTINATION_CLASSIC_ADDRESS",
    "DESTINATION_TAG",
    "DESTINATION_X_ADDRESS",
    "DESTINATION_X_ADDRESS_WITH_TAG",
    "ISSUER_ADDRESS",
    "PATH_ADDRESSES",
    "PUBLIC_KEY_HEX",
    "mk_account_set_all_fields",
    "mk_issued_amount",
    "mk_memo",
    "mk_offer_cancel",
    "mk_offer_create",
    "mk_payment",
    "mk_payment_all_fields",
    "mk_transaction",
    "mk_trust_set",
    "mk_xrp_amount",
]
