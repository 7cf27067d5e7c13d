"""
Network selection.

The network only influences which X-address prefix a wallet reports; the
signing pipeline itself is network agnostic.
"""

from enum import Enum


class XrplNetwork(str, Enum):
    """Ledger networks a wallet can be bound to."""
    MAIN = "main"
    TEST = "test"
    DEV = "dev"


def is_test_network(network: XrplNetwork) -> bool:
    """Return True for any network whose X-addresses use the test prefix."""
    return network in (XrplNetwork.TEST, XrplNetwork.DEV)


__all__ = ["XrplNetwork", "is_test_network"]
