# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP transport exports."""

from .adapters import StubTransport
from .client import HttpTransport, create_default_transport
from .httpx_transport import HttpxTransport, build_timeout
from .models import Headers, HttpRequest, HttpResponse, QueryParams
from .shared import (
    SharedTransport,
    close_shared_transport,
    get_shared_transport,
    reset_shared_transport,
)

__all__ = [
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "HttpTransport",
    "HttpxTransport",
    "QueryParams",
    "SharedTransport",
    "StubTransport",
    "build_timeout",
    "close_shared_transport",
    "create_default_transport",
    "get_shared_transport",
    "reset_shared_transport",
]
