"""Request building for the two monerod calling conventions."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

from monerod_rpc.exceptions import MonerodSerializationError, MonerodValidationError

JSONRPC_VERSION = "2.0"
JSONRPC_ID = "0"
JSONRPC_PATH = "json_rpc"


class CallingConvention(str, Enum):
    """How a method is exposed by the daemon.

    STRUCTURED: JSON-RPC 2.0 envelope posted to /json_rpc.
    DIRECT: bare params (or nothing) posted to /<method>.
    """

    STRUCTURED = "structured"
    DIRECT = "direct"


@dataclass(frozen=True)
class RpcRequest:
    """A ready-to-send POST: target URL and serialized body (None for empty)."""

    url: str
    body: str | None = None


def _json_default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def serialize(value: Any) -> str:
    """Serialize a value to compact JSON.

    Raises:
        MonerodSerializationError: On cyclic references, unsupported types
            or non-finite floats.
    """
    try:
        return json.dumps(
            value,
            default=_json_default,
            separators=(",", ":"),
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise MonerodSerializationError(f"Cannot serialize params: {e}") from e


def build_structured_request(base_url: str, method: str, params: Any = None) -> RpcRequest:
    """Wrap params in a JSON-RPC 2.0 envelope addressed to /json_rpc.

    params is always present in the envelope, as null when not given.
    """
    body = serialize(
        {
            "jsonrpc": JSONRPC_VERSION,
            "id": JSONRPC_ID,
            "method": method,
            "params": params,
        }
    )
    return RpcRequest(url=f"{base_url}/{JSONRPC_PATH}", body=body)


def build_direct_request(base_url: str, method: str, params: Any = None) -> RpcRequest:
    """Address /<method> with the params as the whole body, or no body."""
    url = f"{base_url}/{method}"
    if params is None:
        return RpcRequest(url=url)
    return RpcRequest(url=url, body=serialize(params))


def build_request(
    base_url: str,
    method: str,
    params: Any = None,
    convention: CallingConvention = CallingConvention.STRUCTURED,
) -> RpcRequest:
    """Build the request for one call. Performs no I/O.

    Args:
        base_url: Daemon address without trailing slash.
        method: RPC method name on the wire.
        params: Any JSON-serializable value, or None.
        convention: Which calling convention the method uses.

    Returns:
        The RpcRequest to hand to the dispatcher.
    """
    if not isinstance(method, str) or not method:
        raise MonerodValidationError("method must be a non-empty string")

    try:
        convention = CallingConvention(convention)
    except ValueError as e:
        raise MonerodValidationError(f"Unknown calling convention: {convention!r}") from e

    if convention is CallingConvention.STRUCTURED:
        return build_structured_request(base_url, method, params)
    return build_direct_request(base_url, method, params)
