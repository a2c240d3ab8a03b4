# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Authenticated JSON service client."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .auth import AuthContext
from .classifier import classify_response
from .codec import Decoder, encode_json, unit
from .config import ClientSettings, load_client_settings
from .errors import ClientClosedError, categorize_exception, exception_message
from .http.client import HttpTransport
from .http.models import HttpRequest
from .http.shared import close_shared_transport, get_shared_transport
from .models import Failure, Outcome

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def authorization_header(method: str, token: str | None) -> str | None:
    """
    Bearer header value for ``method``, or None when the header is omitted.

    GET and DELETE always carry the header, POST only for a non-empty token and
    PUT whenever a token value exists (an empty string included).
    """
    if method in {"GET", "DELETE"}:
        return f"Bearer {token or ''}"
    if method == "POST":
        return f"Bearer {token}" if token else None
    if method == "PUT":
        return f"Bearer {token}" if token is not None else None
    return None


def build_headers(method: str, token: str | None) -> dict[str, str]:
    headers = {"Content-Type": JSON_CONTENT_TYPE, "Accept": JSON_CONTENT_TYPE}
    authorization = authorization_header(method, token)
    if authorization is not None:
        headers["Authorization"] = authorization
    return headers


class ServiceClient:
    """
    Issue JSON requests against a remote service and normalize every outcome.

    The verb methods never raise: transport problems come back as a Failure with
    code 500, undecodable bodies as a Failure with code 600 and non-2xx answers as
    the Failure the service sent. Without an injected transport the process-wide
    shared transport is used; ``settings`` then only take effect if this client is
    the first to build it, later clients share the transport as first configured.
    ``close()`` is terminal for the client.
    """

    def __init__(
        self,
        auth: AuthContext | None = None,
        *,
        transport: HttpTransport | None = None,
        settings: ClientSettings | None = None,
    ):
        self.auth = auth
        self.settings = settings or load_client_settings()
        self._transport = transport
        self._uses_shared_transport = transport is None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def get(
        self,
        url: str,
        query: Mapping[str, str] | None = None,
        *,
        decode: Decoder[Any] | None = None,
    ) -> Outcome[Any]:
        return await self._request("GET", url, query=query, decode=decode)

    async def post(
        self,
        url: str,
        body: Any = None,
        query: Mapping[str, str] | None = None,
        *,
        decode: Decoder[Any] | None = None,
    ) -> Outcome[Any]:
        return await self._request("POST", url, body=body, query=query, decode=decode)

    async def put(
        self,
        url: str,
        body: Any = None,
        query: Mapping[str, str] | None = None,
        *,
        decode: Decoder[Any] | None = None,
    ) -> Outcome[Any]:
        return await self._request("PUT", url, body=body, query=query, decode=decode)

    async def delete(self, url: str, query: Mapping[str, str] | None = None) -> Outcome[None]:
        return await self._request("DELETE", url, query=query, decode=unit)

    async def _resolve_token(self) -> str | None:
        if self.auth is None:
            return ""
        return await self.auth.resolve_token()

    def _get_transport(self) -> HttpTransport:
        if self._transport is None:
            self._transport = get_shared_transport(self.settings)
        return self._transport

    async def _request(
        self,
        method: str,
        url: str,
        *,
        body: Any = None,
        query: Mapping[str, str] | None = None,
        decode: Decoder[Any] | None = None,
    ) -> Outcome[Any]:
        try:
            if self._closed:
                raise ClientClosedError()
            token = await self._resolve_token()
            request = HttpRequest(
                url=url,
                method=method,
                headers=build_headers(method, token),
                params=dict(query or {}),
                body=encode_json(body) if body is not None else None,
            )
            response = await self._get_transport().send(request)
        except Exception as exc:  # noqa: BLE001
            category = categorize_exception(exc)
            logger.warning("%s %s failed before a response was received [%s]: %s", method, url, category.value, exc)
            return Failure.transport(exception_message(exc))

        logger.debug("%s %s -> HTTP %s", method, url, response.status_code)
        return classify_response(response.status_code, response.content, auth=self.auth, decode=decode)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._uses_shared_transport:
            await close_shared_transport()
        elif self._transport is not None:
            await self._transport.aclose()

    async def __aenter__(self) -> ServiceClient:
        return self

    async def __aexit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        await self.close()
