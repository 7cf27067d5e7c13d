"""
Transaction signer.

Runs a transaction through the signing pipeline:

    normalize -> encode for signing -> wallet.sign -> add TxnSignature -> encode

The codec and the wallet are injected so that the pipeline can be exercised
with deterministic fakes.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from ..codec.binary import TransactionCodec, XrplBinaryCodec
from ..runtime.errors import SigningError
from ..tx.normalizer import normalize_transaction
from ..tx.types import Transaction
from ..utils import to_bytes
from ..wallet import Wallet

logger = logging.getLogger(__name__)

SIGNATURE_FIELD = "TxnSignature"


class Signer:
    """
    Signs transactions with a wallet.

    Stateless apart from the codec it was given; one instance can be shared
    across threads.
    """

    def __init__(self, codec: Optional[TransactionCodec] = None):
        """
        Initialize the signer.

        Args:
            codec: Canonical transaction codec, defaults to the xrpl-py codec
        """
        self.codec = codec if codec is not None else XrplBinaryCodec()

    def sign_from_canonical_fields(self, fields: Dict[str, Any], wallet: Wallet) -> bytes:
        """
        Sign an already normalized field map.

        Args:
            fields: Canonical field map, left unmodified
            wallet: Wallet that produces the signature

        Returns:
            Serialized signed transaction

        Raises:
            SigningError: If the wallet returns no signature
            EncodingError: If the codec rejects the field map
        """
        signing_hex = self.codec.encode_for_signing(fields)
        logger.debug(f"Encoded {fields.get('TransactionType')} for signing ({len(signing_hex) // 2} bytes)")

        signature = wallet.sign(signing_hex)
        if not signature:
            logger.warning("Wallet returned no signature")
            raise SigningError(details={"transaction_type": fields.get("TransactionType")})

        signed_fields = {**fields, SIGNATURE_FIELD: signature}
        signed_hex = self.codec.encode(signed_fields)
        logger.debug(f"Encoded signed transaction ({len(signed_hex) // 2} bytes)")

        return to_bytes(signed_hex)

    def sign_structured(self, transaction: Optional[Transaction],
                        wallet: Optional[Wallet]) -> Optional[bytes]:
        """
        Normalize and sign a structured transaction.

        Args:
            transaction: Transaction to sign
            wallet: Wallet that produces the signature

        Returns:
            Serialized signed transaction, or None if either argument is
            missing or the transaction lacks a mandatory field

        Raises:
            InvalidAddressError: If an address field cannot be decoded
            TagConflictError: If an X-address tag disagrees with its tag field
            InvalidTransactionError: If the transaction is inconsistent
            SigningError: If the wallet returns no signature
        """
        if transaction is None or wallet is None:
            logger.debug("Nothing to sign: transaction or wallet not supplied")
            return None

        fields = normalize_transaction(transaction)
        if fields is None:
            return None

        return self.sign_from_canonical_fields(fields, wallet)


__all__ = ["SIGNATURE_FIELD", "Signer"]
