"""Shared HTTP client configuration."""

import httpx

from monerod_rpc._version import __version__
from monerod_rpc.config import DEFAULT_TIMEOUT


def create_http_client(
    *,
    timeout: float | None = DEFAULT_TIMEOUT,
    base_url: str | None = None,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        timeout: Request timeout in seconds. None disables the timeout.
        base_url: Optional base URL for all requests.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        base_url=base_url or "",
        headers={
            "User-Agent": f"monerod-rpc/{__version__}",
            "Content-Type": "application/json",
        },
    )
