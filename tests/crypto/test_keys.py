"""
Ed25519 and secp256k1 key tests.
"""

import pytest

from xrp_signer.crypto import (
    ED25519_PREFIX,
    Ed25519PrivateKey,
    Ed25519PublicKey,
    Secp256k1PrivateKey,
    Secp256k1PublicKey,
)
from xrp_signer.runtime.errors import InvalidKeyError

SECP256K1_PRIVATE_KEY = bytes.fromhex("90802A50AA84EFB6CDB225F17C27616EA94048C179142FECF03F4712A07EA7A4")
SECP256K1_PUBLIC_KEY = bytes.fromhex("031D68BC1A142E6766B2BDFB006CCFE135EF2E0E2E94ABB5CF5C9AB6104776FBAE")


class TestEd25519:
    """Test Ed25519 keys."""

    @pytest.mark.unit
    def test_random_keys_differ(self):
        """Generated keys are random."""
        assert Ed25519PrivateKey.generate().to_bytes() != Ed25519PrivateKey.generate().to_bytes()

    @pytest.mark.unit
    def test_sign_and_verify(self):
        """Signatures verify with the matching public key only."""
        private_key = Ed25519PrivateKey(bytes(range(32)))
        signature = private_key.sign(b"message")

        assert len(signature) == 64
        assert private_key.public_key().verify(signature, b"message")
        assert not private_key.public_key().verify(signature, b"other message")
        assert not Ed25519PrivateKey.generate().public_key().verify(signature, b"message")

    @pytest.mark.unit
    def test_ledger_form(self):
        """The ledger form of a public key is ED followed by the raw key."""
        public_key = Ed25519PrivateKey(bytes(range(32))).public_key()
        ledger_bytes = public_key.to_ledger_bytes()

        assert ledger_bytes[:1] == ED25519_PREFIX
        assert Ed25519PublicKey(ledger_bytes) == public_key

    @pytest.mark.unit
    @pytest.mark.parametrize("length", [0, 31, 33, 64])
    def test_private_key_length(self, length):
        """Private keys must be 32 bytes."""
        with pytest.raises(InvalidKeyError):
            Ed25519PrivateKey(bytes(length))

    @pytest.mark.unit
    def test_short_signature_rejected(self):
        """Signatures of the wrong size never verify."""
        public_key = Ed25519PrivateKey(bytes(range(32))).public_key()
        assert not public_key.verify(b"\xde\xad\xbe\xef", b"message")


class TestSecp256k1:
    """Test secp256k1 keys."""

    @pytest.mark.unit
    def test_public_key_vector(self):
        """A known private key derives its published compressed public key."""
        private_key = Secp256k1PrivateKey(SECP256K1_PRIVATE_KEY)
        assert private_key.public_key().to_bytes() == SECP256K1_PUBLIC_KEY

    @pytest.mark.unit
    def test_zero_prefixed_key_accepted(self):
        """A 33-byte key with a leading zero byte loads the same scalar."""
        private_key = Secp256k1PrivateKey(b"\x00" + SECP256K1_PRIVATE_KEY)
        assert private_key.to_bytes() == SECP256K1_PRIVATE_KEY

    @pytest.mark.unit
    def test_signatures_are_deterministic(self):
        """The same message always gets the same signature."""
        private_key = Secp256k1PrivateKey(SECP256K1_PRIVATE_KEY)
        assert private_key.sign(b"message") == private_key.sign(b"message")

    @pytest.mark.unit
    def test_sign_and_verify(self):
        """Signatures verify with the matching public key only."""
        private_key = Secp256k1PrivateKey(SECP256K1_PRIVATE_KEY)
        signature = private_key.sign(b"message")

        assert signature[0] == 0x30
        assert private_key.public_key().verify(signature, b"message")
        assert not private_key.public_key().verify(signature, b"other message")

    @pytest.mark.unit
    def test_malformed_signature(self):
        """Bytes that are not DER never verify."""
        public_key = Secp256k1PublicKey(SECP256K1_PUBLIC_KEY)
        assert not public_key.verify(b"\xde\xad\xbe\xef", b"message")

    @pytest.mark.unit
    @pytest.mark.parametrize("key", [bytes(31), b"\x01" + bytes(32), bytes(32)])
    def test_invalid_private_key(self, key):
        """Keys of the wrong size or the zero scalar are rejected."""
        with pytest.raises(InvalidKeyError):
            Secp256k1PrivateKey(key)

    @pytest.mark.unit
    def test_invalid_public_key(self):
        """Bytes that are not a curve point are rejected."""
        with pytest.raises(InvalidKeyError):
            Secp256k1PublicKey(b"\x05" + bytes(32))
