"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y User-Agent para el API y la descarga de
  `boards.toml`.
- Facilita testeo: se puede sustituir el transport por un mock.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con defaults seguros."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def build_api_client(
    settings: AppSettings,
    *,
    api_access_token: str,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Client for the GraphQL API: auth header on every request, optional version pin."""

    headers = {
        "Authorization": api_access_token,
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    if settings.api_version:
        headers["API-Version"] = settings.api_version
    return build_client(settings, extra_headers=headers, transport=transport)
