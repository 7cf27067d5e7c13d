"""
Transaction signing.
"""

from .signer import SIGNATURE_FIELD, Signer

__all__ = ["SIGNATURE_FIELD", "Signer"]
