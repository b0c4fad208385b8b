"""Async client for a Monero daemon's RPC interface.

Example usage:
    from monerod_rpc import MonerodClient

    client = MonerodClient("http://node.example:18089")

    count = await client.get_block_count()
    block_hash = await client.on_get_block_hash(1000)
    height = await client.get_height()

    # Any operation by name
    info = await client.invoke("get_info")
"""

import os
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import ValidationError

from monerod_rpc._internal.rpc import (
    METHODS,
    CallingConvention,
    Dispatcher,
    build_request,
    get_method,
)
from monerod_rpc.config import DEFAULT_TIMEOUT, ClientConfig
from monerod_rpc.exceptions import MonerodConfigError


def _operation(name: str) -> Callable[..., Awaitable[Any]]:
    """Bind a method table row as a client coroutine method."""
    spec = METHODS[name]

    async def operation(self: "MonerodClient", *args: Any, **kwargs: Any) -> Any:
        return await self.invoke(name, *args, **kwargs)

    operation.__name__ = name
    operation.__qualname__ = f"MonerodClient.{name}"
    operation.__doc__ = f"{spec.summary}\n\nWire method `{spec.rpc_method}` ({spec.convention.value})."
    return operation


class MonerodClient:
    """Async client for monerod JSON-RPC and direct HTTP endpoints.

    All operations are coroutines. Any failure, including argument
    validation, is raised when the coroutine is awaited:
    MonerodValidationError, MonerodSerializationError,
    MonerodTransportError or MonerodDecodeError.

    Use `MonerodClient.from_env()` to create a client from environment variables.
    """

    def __init__(
        self,
        base_url: str,
        decode_json: bool = True,
        *,
        timeout: float | None = DEFAULT_TIMEOUT,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Full daemon address, e.g. "http://node.example:18089".
            decode_json: Decode responses as JSON. When False every call
                returns the raw response text.
            timeout: Request timeout in seconds. None disables it.
            debug: Enable debug logging to stderr.
        """
        try:
            self._config = ClientConfig(
                base_url=base_url,
                decode_json=decode_json,
                timeout=timeout,
                debug=debug,
            )
        except ValidationError as e:
            raise MonerodConfigError(f"Invalid client configuration: {e}") from e
        self._dispatcher = Dispatcher(self._config)

    @classmethod
    def from_env(cls) -> "MonerodClient":
        """Create a client from environment variables.

        Required environment variables:
            MONEROD_RPC_URL: The daemon address.

        Optional environment variables:
            MONEROD_RPC_DECODE_JSON: Set to "0" to return raw response text.
            MONEROD_RPC_TIMEOUT_MS: Request timeout in milliseconds.
            MONEROD_RPC_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured MonerodClient.

        Raises:
            MonerodConfigError: If MONEROD_RPC_URL is not set.
            ValueError: If MONEROD_RPC_TIMEOUT_MS is not an integer.
        """
        base_url = os.environ.get("MONEROD_RPC_URL")
        if not base_url:
            raise MonerodConfigError("MONEROD_RPC_URL is not set")

        decode_json = os.environ.get("MONEROD_RPC_DECODE_JSON", "1") != "0"
        debug = os.environ.get("MONEROD_RPC_DEBUG", "") == "1"

        timeout = DEFAULT_TIMEOUT
        timeout_ms = os.environ.get("MONEROD_RPC_TIMEOUT_MS")
        if timeout_ms is not None:
            timeout = int(timeout_ms) / 1000

        return cls(base_url, decode_json, timeout=timeout, debug=debug)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def decode_json(self) -> bool:
        return self._config.decode_json

    async def call(
        self,
        method: str,
        params: Any = None,
        convention: CallingConvention = CallingConvention.STRUCTURED,
    ) -> Any:
        """Send any RPC method, including ones missing from the method table.

        Args:
            method: RPC method name on the wire.
            params: JSON-serializable params, or None.
            convention: STRUCTURED for /json_rpc methods, DIRECT otherwise.

        Returns:
            The decoded response, or raw text when decode_json is off.
        """
        request = build_request(self._config.base_url, method, params, convention)
        return await self._dispatcher.send(request)

    async def invoke(self, operation: str, *args: Any, **kwargs: Any) -> Any:
        """Run a named operation from the method table.

        Args:
            operation: Operation name, e.g. "get_block_count".
            *args: Positional arguments for the operation's params shape.
            **kwargs: Keyword arguments for the operation's params shape.

        Returns:
            The decoded response, or raw text when decode_json is off.
        """
        spec = get_method(operation)
        params = spec.build_params(*args, **kwargs)
        return await self.call(spec.rpc_method, params, spec.convention)

    # =========================================================================
    # Operations
    # =========================================================================

    get_block_count = _operation("get_block_count")
    on_get_block_hash = _operation("on_get_block_hash")
    get_block_template = _operation("get_block_template")
    submit_block = _operation("submit_block")
    get_last_block_header = _operation("get_last_block_header")
    get_block_header_by_hash = _operation("get_block_header_by_hash")
    get_block_header_by_height = _operation("get_block_header_by_height")
    get_block = _operation("get_block")
    get_connections = _operation("get_connections")
    get_info = _operation("get_info")
    hard_fork_info = _operation("hard_fork_info")
    set_bans = _operation("set_bans")
    get_bans = _operation("get_bans")
    get_height = _operation("get_height")
    get_transactions = _operation("get_transactions")
    is_key_image_spent = _operation("is_key_image_spent")
    send_raw_transaction = _operation("send_raw_transaction")
    get_transaction_pool = _operation("get_transaction_pool")
    stop_daemon = _operation("stop_daemon")


def get_monerod_client() -> MonerodClient:
    """Get a client configured from environment variables.

    Returns:
        A configured MonerodClient instance.
    """
    return MonerodClient.from_env()
