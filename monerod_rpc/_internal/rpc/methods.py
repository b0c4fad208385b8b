"""Declarative table of the daemon operations exposed by the client.

Each row names the wire method, its calling convention and a shaping
function that turns the caller's arguments into the params value.
"""

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from monerod_rpc._internal.rpc.request import CallingConvention
from monerod_rpc._internal.rpc.validation import coerce_ban_list, validate_block_template
from monerod_rpc.exceptions import MonerodValidationError

STRUCTURED = CallingConvention.STRUCTURED
DIRECT = CallingConvention.DIRECT

# =============================================================================
# Parameter Shapes
# =============================================================================


def no_params() -> None:
    return None


def identity(value: Any) -> Any:
    return value


def wrap(value: Any) -> list[Any]:
    return [value]


def block_header_by_hash(hash: str) -> dict[str, Any]:
    return {"hash": hash}


def block_header_by_height(height: int) -> dict[str, Any]:
    return {"height": height}


def block(height: int | None = None, hash: str | None = None) -> dict[str, Any]:
    """Exactly one of height or hash selects the block."""
    if (height is None) == (hash is None):
        raise MonerodValidationError("get_block expects exactly one of `height` or `hash`")
    if height is not None:
        return {"height": height}
    return {"hash": hash}


def bans(bans: Any) -> dict[str, Any]:
    return {"bans": coerce_ban_list(bans).model_dump(mode="json")}


def transactions(txs_hashes: list[str], decode_as_json: bool = True) -> dict[str, Any]:
    return {"txs_hashes": txs_hashes, "decode_as_json": decode_as_json}


def key_images(key_images: list[str]) -> dict[str, Any]:
    return {"key_images": key_images}


def raw_transaction(tx_as_hex: str) -> dict[str, Any]:
    return {"tx_as_hex": tx_as_hex}


# =============================================================================
# Method Table
# =============================================================================


@dataclass(frozen=True)
class MethodSpec:
    """One daemon operation: wire name, calling convention, params shape."""

    rpc_method: str
    convention: CallingConvention
    shape: Callable[..., Any] = no_params
    summary: str = ""

    def build_params(self, *args: Any, **kwargs: Any) -> Any:
        """Apply the shape to the caller's arguments.

        Raises:
            MonerodValidationError: If the arguments do not fit the shape.
        """
        try:
            inspect.signature(self.shape).bind(*args, **kwargs)
        except TypeError as e:
            raise MonerodValidationError(f"{self.rpc_method}: {e}") from e
        return self.shape(*args, **kwargs)


METHODS: dict[str, MethodSpec] = {
    "get_block_count": MethodSpec(
        "getblockcount", STRUCTURED, summary="Number of blocks in the longest chain."
    ),
    "on_get_block_hash": MethodSpec(
        "on_getblockhash", STRUCTURED, wrap, summary="Block hash at the given height."
    ),
    "get_block_template": MethodSpec(
        "getblocktemplate",
        STRUCTURED,
        validate_block_template,
        summary="Block template to mine on, for a wallet address and reserve size.",
    ),
    "submit_block": MethodSpec(
        "submitblock", STRUCTURED, identity, summary="Submit a mined block blob."
    ),
    "get_last_block_header": MethodSpec(
        "getlastblockheader", STRUCTURED, summary="Header of the most recent block."
    ),
    "get_block_header_by_hash": MethodSpec(
        "getblockheaderbyhash",
        STRUCTURED,
        block_header_by_hash,
        summary="Block header for a block hash.",
    ),
    "get_block_header_by_height": MethodSpec(
        "getblockheaderbyheight",
        STRUCTURED,
        block_header_by_height,
        summary="Block header for a block height.",
    ),
    "get_block": MethodSpec(
        "getblock", STRUCTURED, block, summary="Full block by height or hash."
    ),
    "get_connections": MethodSpec(
        "get_connections", STRUCTURED, summary="Peers currently connected to the daemon."
    ),
    "get_info": MethodSpec("get_info", STRUCTURED, summary="General daemon information."),
    "hard_fork_info": MethodSpec(
        "hard_fork_info", STRUCTURED, summary="Hard fork voting and version status."
    ),
    "set_bans": MethodSpec("setbans", STRUCTURED, bans, summary="Ban or unban peers."),
    "get_bans": MethodSpec("getbans", STRUCTURED, summary="Currently banned peers."),
    "get_height": MethodSpec("getheight", DIRECT, summary="Current chain height."),
    "get_transactions": MethodSpec(
        "gettransactions", DIRECT, transactions, summary="Look up transactions by hash."
    ),
    "is_key_image_spent": MethodSpec(
        "is_key_image_spent", DIRECT, key_images, summary="Spent status of key images."
    ),
    "send_raw_transaction": MethodSpec(
        "sendrawtransaction",
        DIRECT,
        raw_transaction,
        summary="Broadcast a raw transaction given as hex.",
    ),
    "get_transaction_pool": MethodSpec(
        "get_transaction_pool", DIRECT, summary="Transactions and key images in the pool."
    ),
    "stop_daemon": MethodSpec("stop_daemon", DIRECT, summary="Ask the daemon to shut down."),
}


def get_method(operation: str) -> MethodSpec:
    """Look up an operation by name.

    Raises:
        MonerodValidationError: If the operation is not in the table.
    """
    try:
        return METHODS[operation]
    except KeyError:
        raise MonerodValidationError(f"Unknown operation: {operation!r}") from None
