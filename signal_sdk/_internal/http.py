"""Shared HTTP client configuration."""

import httpx

from signal_sdk._version import __version__

DEFAULT_TIMEOUT_MS = 30_000


def create_http_client(
    *,
    base_url: str,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        base_url: Base URL of the Signal REST API (e.g. "http://localhost:8080").
        timeout_ms: Request timeout in milliseconds, applied to every request.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout_ms / 1000,
        base_url=base_url.rstrip("/"),
        headers={
            "User-Agent": f"signal-sdk/{__version__}",
            "Accept": "application/json",
        },
    )
