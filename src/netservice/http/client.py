# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP transport abstraction and factory."""

from typing import Protocol

from ..config import ClientSettings, load_client_settings
from .models import HttpRequest, HttpResponse


class HttpTransport(Protocol):
    """Minimal protocol for sending one HTTP request.

    Implementations raise on transport-level failures; the dispatcher converts
    those into Failure outcomes. A transport must tolerate concurrent sends.
    """

    async def send(self, request: HttpRequest) -> HttpResponse: ...

    async def aclose(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_transport(settings: ClientSettings | None = None) -> HttpTransport:
    """Factory for the default httpx-backed transport."""
    from .httpx_transport import HttpxTransport

    return HttpxTransport(settings or load_client_settings())
