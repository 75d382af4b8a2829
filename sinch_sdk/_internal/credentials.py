"""Credential providers that attach authentication to an outgoing request."""

from typing import Protocol

import httpx


class CredentialProvider(Protocol):
    """Attaches one authentication scheme to an outgoing request."""

    def apply(self, request: httpx.Request) -> httpx.Request:
        """Add credentials to ``request`` and return it."""
        ...


class BearerTokenAuth:
    """``Authorization: Bearer <token>``, used by the SMS API."""

    def __init__(self, token: str) -> None:
        self._token = token

    def apply(self, request: httpx.Request) -> httpx.Request:
        request.headers["Authorization"] = f"Bearer {self._token}"
        return request


class BasicKeyAuth:
    """HTTP Basic auth with an access key ID and secret, used by the Numbers API."""

    def __init__(self, key_id: str, key_secret: str) -> None:
        self._auth = httpx.BasicAuth(key_id, key_secret)

    def apply(self, request: httpx.Request) -> httpx.Request:
        # BasicAuth.auth_flow sets the header on its first yield.
        flow = self._auth.auth_flow(request)
        return next(flow)
