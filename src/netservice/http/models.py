# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response records exchanged with HttpTransport implementations."""

from __future__ import annotations

from dataclasses import dataclass, field

Headers = dict[str, str]
QueryParams = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpTransport implementations."""

    url: str
    method: str = "GET"
    headers: Headers = field(default_factory=dict)
    params: QueryParams = field(default_factory=dict)
    body: bytes | None = None


@dataclass
class HttpResponse:
    """Raw response: status plus undecoded body bytes."""

    status_code: int
    content: bytes = b""
    headers: Headers = field(default_factory=dict)
    url: str | None = None
