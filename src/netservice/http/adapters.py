# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Programmable HttpTransport for tests and offline use."""

from __future__ import annotations

from ..errors import ClientClosedError
from .client import HttpTransport
from .models import HttpRequest, HttpResponse


class StubTransport(HttpTransport):
    """
    Deterministic transport keyed by ``(method, url)``.

    A stubbed value may be an HttpResponse or an exception instance, which is raised
    from ``send`` to simulate transport failures. Every request is recorded.
    """

    def __init__(self, responses: dict[tuple[str, str], HttpResponse | BaseException] | None = None):
        self._responses = dict(responses or {})
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, method: str, url: str, response: HttpResponse | BaseException) -> None:
        self._responses[(method.upper(), url)] = response

    async def send(self, request: HttpRequest) -> HttpResponse:
        if self.closed:
            raise ClientClosedError()
        self.requests.append(request)
        stubbed = self._responses.get((request.method.upper(), request.url))
        if stubbed is None:
            raise ConnectionError(f"No stubbed response configured for {request.method} {request.url}")
        if isinstance(stubbed, BaseException):
            raise stubbed
        return stubbed

    async def aclose(self) -> None:
        self.closed = True
