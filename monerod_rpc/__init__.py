"""Async Python client for the Monero daemon (monerod) RPC interface.

Public API:
    MonerodClient - Client exposing every daemon operation as a coroutine
    CallingConvention - STRUCTURED (/json_rpc) or DIRECT (/<method>)
    BanEntry, BanList, BlockTemplateRequest - Argument models

Internal (not for direct use):
    _internal.rpc - Request building, dispatch and the method table
"""

from monerod_rpc._internal.rpc import CallingConvention
from monerod_rpc._version import __version__
from monerod_rpc.client import MonerodClient, get_monerod_client
from monerod_rpc.config import ClientConfig
from monerod_rpc.exceptions import (
    MonerodConfigError,
    MonerodDecodeError,
    MonerodError,
    MonerodSerializationError,
    MonerodTransportError,
    MonerodValidationError,
)
from monerod_rpc.models import BanEntry, BanList, BlockTemplateRequest

__all__ = [
    "__version__",
    "MonerodClient",
    "get_monerod_client",
    "ClientConfig",
    "CallingConvention",
    "BanEntry",
    "BanList",
    "BlockTemplateRequest",
    "MonerodError",
    "MonerodConfigError",
    "MonerodValidationError",
    "MonerodSerializationError",
    "MonerodTransportError",
    "MonerodDecodeError",
]
