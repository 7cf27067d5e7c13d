"""
Shared fixtures: deterministic fakes for the codec and the wallet, plus a
real secp256k1 wallet built from a known key.
"""

import pytest

from helpers import FakeTransactionCodec, FakeWallet
from xrp_signer.signers import Signer
from xrp_signer.wallet import Secp256k1Wallet

SECP256K1_PRIVATE_KEY = "0090802A50AA84EFB6CDB225F17C27616EA94048C179142FECF03F4712A07EA7A4"


@pytest.fixture
def fake_wallet():
    """Wallet that always signs with DEADBEEF."""
    return FakeWallet()


@pytest.fixture
def fake_codec():
    """Codec whose output is hex of sorted JSON."""
    return FakeTransactionCodec()


@pytest.fixture
def signer(fake_codec):
    """Signer wired to the fake codec."""
    return Signer(codec=fake_codec)


@pytest.fixture
def secp256k1_wallet():
    """secp256k1 wallet for a published key vector."""
    return Secp256k1Wallet.from_private_key(SECP256K1_PRIVATE_KEY)
