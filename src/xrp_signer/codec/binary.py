"""
Canonical transaction encoding.

The signer only depends on the ``TransactionCodec`` interface. The default
implementation delegates to the ledger's reference binary codec shipped with
xrpl-py.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict

from xrpl.core import binarycodec

from ..runtime.errors import EncodingError

logger = logging.getLogger(__name__)


class TransactionCodec(ABC):
    """Interface for the canonical transaction serializer."""

    @abstractmethod
    def encode_for_signing(self, fields: Dict[str, Any]) -> str:
        """
        Encode a field map into the hex payload a wallet signs.

        Args:
            fields: Canonical field map

        Returns:
            Hex string
        """
        pass

    @abstractmethod
    def encode(self, fields: Dict[str, Any]) -> str:
        """
        Encode a field map, including its signature, into a hex blob.

        Args:
            fields: Canonical field map

        Returns:
            Hex string
        """
        pass


class XrplBinaryCodec(TransactionCodec):
    """TransactionCodec backed by ``xrpl.core.binarycodec``."""

    def encode_for_signing(self, fields: Dict[str, Any]) -> str:
        try:
            return binarycodec.encode_for_signing(dict(fields))
        except Exception as e:
            logger.debug(f"encode_for_signing failed: {e}")
            raise EncodingError(f"Cannot encode transaction for signing: {e}", cause=e) from e

    def encode(self, fields: Dict[str, Any]) -> str:
        try:
            return binarycodec.encode(dict(fields))
        except Exception as e:
            logger.debug(f"encode failed: {e}")
            raise EncodingError(f"Cannot encode transaction: {e}", cause=e) from e


__all__ = ["TransactionCodec", "XrplBinaryCodec"]
