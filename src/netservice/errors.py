# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error codes, exceptions and the transport failure taxonomy."""

import asyncio
import socket
import ssl
from enum import Enum

import httpx

TRANSPORT_ERROR_CODE = 500
DECODE_ERROR_CODE = 600
UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"
CLIENT_CLOSED_MESSAGE = "Client is closed"


class ClientClosedError(RuntimeError):
    """Raised when a request is attempted through a closed client or transport."""

    def __init__(self, message: str = CLIENT_CLOSED_MESSAGE):
        super().__init__(message)


class EncodeError(ValueError):
    """Request body could not be serialized as JSON."""


class DecodeError(ValueError):
    """Response body could not be decoded into the expected shape."""


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    SSL_ERROR = "SSL_ERROR"
    DNS_ERROR = "DNS_ERROR"
    CLIENT_CLOSED = "CLIENT_CLOSED"
    ENCODE_ERROR = "ENCODE_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map httpx/stdlib exceptions raised before a response arrives to an ErrorCategory.
    """
    if isinstance(exc, ClientClosedError):
        return ErrorCategory.CLIENT_CLOSED

    if isinstance(exc, EncodeError):
        return ErrorCategory.ENCODE_ERROR

    if isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError, TimeoutError)):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (ssl.SSLError, ssl.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, ConnectionError):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def exception_message(exc: BaseException) -> str:
    """User-facing message for a swallowed exception."""
    return str(exc) or UNKNOWN_ERROR_MESSAGE


__all__ = [
    "CLIENT_CLOSED_MESSAGE",
    "ClientClosedError",
    "DECODE_ERROR_CODE",
    "DecodeError",
    "EncodeError",
    "ErrorCategory",
    "TRANSPORT_ERROR_CODE",
    "UNKNOWN_ERROR_MESSAGE",
    "categorize_exception",
    "exception_message",
]
