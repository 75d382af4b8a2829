"""Shared HTTP transport configuration."""

import httpx

from sinch_sdk._version import __version__

DEFAULT_TIMEOUT = 30.0
JSON_CONTENT_TYPE = "application/json"


def create_http_client(
    *,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    follow_redirects: bool = False,
) -> httpx.Client:
    """Create the pooled HTTP client shared by resource clients.

    Resource clients build absolute URLs themselves, so no base URL is set
    here. ``httpx.Client`` is safe to share between threads.

    Args:
        timeout: Request timeout in seconds, or a full ``httpx.Timeout``.
        follow_redirects: Whether redirects are followed transparently.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        follow_redirects=follow_redirects,
        headers={"User-Agent": f"sinch-sdk/{__version__}"},
    )
