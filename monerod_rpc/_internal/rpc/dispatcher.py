"""Dispatcher: performs the POST and turns the response into a result."""

import json
import sys
from typing import Any

import httpx

from monerod_rpc._internal.http import create_http_client
from monerod_rpc._internal.rpc.request import RpcRequest
from monerod_rpc.config import ClientConfig
from monerod_rpc.exceptions import MonerodDecodeError, MonerodTransportError


class Dispatcher:
    """Sends built requests to the daemon, one POST per call.

    Every failure is raised from the awaited `send` call: transport problems
    as MonerodTransportError, undecodable bodies as MonerodDecodeError.
    No retries and no state shared between calls besides the config.
    """

    def __init__(self, config: ClientConfig) -> None:
        self._config = config

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._config.debug:
            print(f"[monerod-rpc] {message}", file=sys.stderr)

    async def send(self, request: RpcRequest) -> Any:
        """POST the request and return the decoded (or raw) response body.

        Args:
            request: Request produced by build_request.

        Returns:
            The JSON-decoded body, or the raw text when decode_json is off.

        Raises:
            MonerodTransportError: Connection, DNS or timeout failure, or a
                non-2xx status.
            MonerodDecodeError: Body is not valid JSON while decode_json is on.
        """
        self._log_debug(f"POST {request.url}")
        try:
            async with create_http_client(timeout=self._config.timeout) as client:
                response = await client.post(request.url, content=request.body)
        except httpx.TimeoutException as e:
            self._log_debug(f"Request to {request.url} timed out")
            raise MonerodTransportError(f"Request to {request.url} timed out", cause=e) from e
        except httpx.HTTPError as e:
            self._log_debug(f"Request to {request.url} failed: {e}")
            raise MonerodTransportError(f"Request to {request.url} failed: {e}", cause=e) from e

        if not response.is_success:
            self._log_debug(f"Request failed with status {response.status_code}")
            raise MonerodTransportError(
                f"Daemon returned HTTP {response.status_code} for {request.url}",
                status_code=response.status_code,
            )

        body = response.text
        if not self._config.decode_json:
            return body

        try:
            return json.loads(body)
        except ValueError as e:
            self._log_debug(f"Could not decode response: {e}")
            raise MonerodDecodeError(f"Response is not valid JSON: {e}", body=body) from e
