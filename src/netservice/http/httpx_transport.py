# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpTransport implementation."""

from __future__ import annotations

import asyncio

import httpx

from ..config import ClientSettings, load_client_settings
from ..errors import ClientClosedError
from .client import HttpTransport
from .models import HttpRequest, HttpResponse


def build_timeout(settings: ClientSettings) -> httpx.Timeout:
    """Connect and socket budgets for httpx; the overall budget is enforced around each send."""
    return httpx.Timeout(
        connect=settings.connect_timeout,
        read=settings.socket_timeout,
        write=settings.socket_timeout,
        pool=settings.request_timeout,
    )


class HttpxTransport(HttpTransport):
    """Asynchronous httpx client wrapper, safe to share between concurrent requests."""

    def __init__(self, settings: ClientSettings | None = None, client: httpx.AsyncClient | None = None):
        self.settings = settings or load_client_settings()
        self._client = client or httpx.AsyncClient(
            base_url=self.settings.base_url,
            follow_redirects=self.settings.follow_redirects,
            timeout=build_timeout(self.settings),
            verify=self.settings.verify_ssl,
        )
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def send(self, request: HttpRequest) -> HttpResponse:
        if self._closed:
            raise ClientClosedError()

        # h11 rejects header values with trailing whitespace, e.g. "Bearer " for an empty token
        headers = {name: value.rstrip() for name, value in request.headers.items()}
        headers.setdefault("User-Agent", self.settings.user_agent)

        # httpx replaces a URL query when params= is passed; merge onto it instead
        url = httpx.URL(request.url)
        if request.params:
            url = url.copy_merge_params(request.params)

        try:
            resp = await asyncio.wait_for(
                self._client.request(
                    request.method,
                    url,
                    headers=headers,
                    content=request.body,
                ),
                timeout=self.settings.request_timeout,
            )
        except asyncio.TimeoutError as exc:
            raise TimeoutError(f"Request timed out after {self.settings.request_timeout}s") from exc

        return HttpResponse(
            status_code=resp.status_code,
            content=resp.content,
            headers=dict(resp.headers),
            url=str(resp.url),
        )

    async def aclose(self) -> None:
        self._closed = True
        await self._client.aclose()
