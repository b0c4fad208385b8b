"""Request building, dispatch and the method table for monerod calls."""

from monerod_rpc._internal.rpc.dispatcher import Dispatcher
from monerod_rpc._internal.rpc.methods import METHODS, MethodSpec, get_method
from monerod_rpc._internal.rpc.request import (
    CallingConvention,
    RpcRequest,
    build_direct_request,
    build_request,
    build_structured_request,
    serialize,
)
from monerod_rpc._internal.rpc.validation import coerce_ban_list, validate_block_template

__all__ = [
    "Dispatcher",
    "METHODS",
    "MethodSpec",
    "get_method",
    "CallingConvention",
    "RpcRequest",
    "build_request",
    "build_structured_request",
    "build_direct_request",
    "serialize",
    "coerce_ban_list",
    "validate_block_template",
]
