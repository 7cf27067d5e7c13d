"""
Signer tests.

Most cases use the fake codec, whose output is the hex of sorted JSON, so
expected bytes can be computed directly from the expected field map. One
end-to-end case runs the real xrpl-py codec with a real secp256k1 wallet.
"""

import json

import pytest
from xrpl.core import binarycodec

from helpers import (
    ACCOUNT_CLASSIC_ADDRESS,
    DESTINATION_CLASSIC_ADDRESS,
    DESTINATION_X_ADDRESS_WITH_TAG,
    FAKE_SIGNATURE,
    SIGNING_PREFIX,
    FakeWallet,
    mk_account_set_all_fields,
    mk_offer_cancel,
    mk_offer_create,
    mk_payment,
    mk_payment_all_fields,
    mk_transaction,
    mk_trust_set,
)
from xrp_signer.codec.binary import XrplBinaryCodec
from xrp_signer.codec.hashes import transaction_hash
from xrp_signer.runtime.errors import InvalidAddressError, SigningError, TagConflictError
from xrp_signer.signers import SIGNATURE_FIELD, Signer
from xrp_signer.tx.normalizer import normalize_transaction
from xrp_signer.tx.types import Payment


def _expected_bytes(fields) -> bytes:
    signed = {**fields, SIGNATURE_FIELD: FAKE_SIGNATURE}
    return json.dumps(signed, sort_keys=True).encode("utf-8")


class TestSignStructured:
    """Test signing structured transactions."""

    @pytest.mark.unit
    @pytest.mark.parametrize("body_factory", [
        mk_payment,
        mk_payment_all_fields,
        mk_account_set_all_fields,
        mk_trust_set,
        mk_offer_create,
        mk_offer_cancel,
    ])
    def test_signed_bytes(self, signer, fake_wallet, body_factory):
        """Output is the full encoding of the normalized fields plus the signature."""
        transaction = mk_transaction(body_factory())

        signed = signer.sign_structured(transaction, fake_wallet)

        assert signed == _expected_bytes(normalize_transaction(transaction))

    @pytest.mark.unit
    def test_wallet_signs_signing_payload(self, signer, fake_wallet, fake_codec):
        """The wallet receives the codec's signing encoding of the fields."""
        transaction = mk_transaction(mk_payment())
        signer.sign_structured(transaction, fake_wallet)

        assert len(fake_wallet.signed_messages) == 1
        assert fake_wallet.signed_messages[0].startswith(SIGNING_PREFIX)
        assert fake_codec.encoded_for_signing == [normalize_transaction(transaction)]
        assert SIGNATURE_FIELD not in fake_codec.encoded_for_signing[0]

    @pytest.mark.unit
    def test_projected_tag_is_signed(self, signer, fake_wallet, fake_codec):
        """An X-address tag is part of what gets signed."""
        signer.sign_structured(mk_transaction(mk_payment(destination=DESTINATION_X_ADDRESS_WITH_TAG)), fake_wallet)

        signed_fields = fake_codec.encoded[0]
        assert signed_fields["Destination"] == DESTINATION_CLASSIC_ADDRESS
        assert signed_fields["DestinationTag"] == 12345

    @pytest.mark.unit
    def test_missing_transaction(self, signer, fake_wallet):
        """No transaction means nothing to sign."""
        assert signer.sign_structured(None, fake_wallet) is None

    @pytest.mark.unit
    def test_missing_wallet(self, signer):
        """No wallet means nothing to sign."""
        assert signer.sign_structured(mk_transaction(mk_payment()), None) is None

    @pytest.mark.unit
    @pytest.mark.parametrize("transaction", [
        mk_transaction(Payment(destination=DESTINATION_CLASSIC_ADDRESS)),
        mk_transaction(mk_payment(destination=None)),
        mk_transaction(mk_payment(), account=None),
        mk_transaction(mk_payment(), fee=None),
        mk_transaction(None),
    ])
    def test_incomplete_transaction(self, signer, fake_wallet, fake_codec, transaction):
        """Incomplete transactions are not signed and nothing is encoded."""
        assert signer.sign_structured(transaction, fake_wallet) is None
        assert fake_codec.encoded_for_signing == []
        assert fake_wallet.signed_messages == []

    @pytest.mark.unit
    def test_bad_destination_raises(self, signer, fake_wallet):
        """A corrupt destination propagates as InvalidAddressError."""
        with pytest.raises(InvalidAddressError):
            signer.sign_structured(mk_transaction(mk_payment(destination="badAddress")), fake_wallet)

    @pytest.mark.unit
    def test_tag_conflict_raises(self, signer, fake_wallet):
        """A tag conflict propagates as TagConflictError."""
        payment = mk_payment(destination=DESTINATION_X_ADDRESS_WITH_TAG, destination_tag=1)

        with pytest.raises(TagConflictError):
            signer.sign_structured(mk_transaction(payment), fake_wallet)


class TestSignFromCanonicalFields:
    """Test signing already normalized field maps."""

    FIELDS = {
        "Account": ACCOUNT_CLASSIC_ADDRESS,
        "Fee": "10",
        "Sequence": 1,
        "LastLedgerSequence": 0,
        "SigningPubKey": "BEEFDEAD",
        "Amount": "1000",
        "Destination": DESTINATION_CLASSIC_ADDRESS,
        "TransactionType": "Payment",
    }

    @pytest.mark.unit
    def test_signed_bytes(self, signer, fake_wallet):
        """The signature is merged under TxnSignature before full encoding."""
        assert signer.sign_from_canonical_fields(self.FIELDS, fake_wallet) == _expected_bytes(self.FIELDS)

    @pytest.mark.unit
    def test_input_not_mutated(self, signer, fake_wallet):
        """The caller's field map is left as it was."""
        fields = dict(self.FIELDS)
        signer.sign_from_canonical_fields(fields, fake_wallet)

        assert fields == self.FIELDS

    @pytest.mark.unit
    @pytest.mark.parametrize("signature", [None, ""])
    def test_no_signature_raises(self, signer, signature):
        """A wallet that produces no signature aborts signing."""
        with pytest.raises(SigningError):
            signer.sign_from_canonical_fields(self.FIELDS, FakeWallet(signature=signature))

    @pytest.mark.unit
    def test_default_codec(self):
        """Without a codec argument the xrpl-py codec is used."""
        assert isinstance(Signer().codec, XrplBinaryCodec)


class TestEndToEnd:
    """Sign with the real codec and a real key."""

    @pytest.mark.unit
    def test_secp256k1_payment(self, secp256k1_wallet):
        """The signed blob decodes and its signature verifies over the signing payload."""
        transaction = mk_transaction(
            mk_payment(destination=DESTINATION_X_ADDRESS_WITH_TAG),
            signing_public_key=bytes.fromhex(secp256k1_wallet.public_key),
            last_ledger_sequence=20,
        )

        signed = Signer().sign_structured(transaction, secp256k1_wallet)

        decoded = binarycodec.decode(signed.hex().upper())
        signature = decoded.pop(SIGNATURE_FIELD)
        assert decoded == normalize_transaction(transaction)
        assert secp256k1_wallet.verify(binarycodec.encode_for_signing(decoded), signature)
        assert transaction_hash(signed) is not None
