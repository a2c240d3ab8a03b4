# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
netservice package entrypoint.

An authenticated JSON client: each call resolves a bearer token from an injected
provider, sends one request through a shared httpx transport and returns either
``Success(value)`` or ``Failure(UserMessage)``. Transport behavior is abstracted
behind an injectable protocol, and service payloads are modeled with typed
dataclasses.

Typical embedding::

    setup_logging("INFO")
    auth = AuthContext.from_callbacks(fetch_token, on_auth_or_gateway_failure=force_login)
    async with ServiceClient(auth, settings=ClientSettings(base_url="https://api.example")) as client:
        outcome = await client.get("/users/7", decode=dataclass_decoder(User))
"""

from .auth import AuthContext, CallbackFailureSink, FailureSink
from .classifier import classify_response
from .codec import dataclass_decoder, list_of, unit
from .config import ClientSettings, load_client_settings
from .errors import (
    DECODE_ERROR_CODE,
    TRANSPORT_ERROR_CODE,
    ClientClosedError,
    DecodeError,
    EncodeError,
    ErrorCategory,
)
from .http import (
    HttpRequest,
    HttpResponse,
    HttpTransport,
    HttpxTransport,
    SharedTransport,
    StubTransport,
    close_shared_transport,
    create_default_transport,
    get_shared_transport,
)
from .log import setup_logging
from .models import (
    ErrorDetail,
    Failure,
    InfoMessage,
    MessageDetails,
    Outcome,
    Success,
    UserMessage,
    is_success,
    unwrap_or,
)
from .service import ServiceClient
from .version import __version__

__all__ = [
    "AuthContext",
    "CallbackFailureSink",
    "ClientClosedError",
    "ClientSettings",
    "DECODE_ERROR_CODE",
    "DecodeError",
    "EncodeError",
    "ErrorCategory",
    "ErrorDetail",
    "Failure",
    "FailureSink",
    "HttpRequest",
    "HttpResponse",
    "HttpTransport",
    "HttpxTransport",
    "InfoMessage",
    "MessageDetails",
    "Outcome",
    "ServiceClient",
    "SharedTransport",
    "StubTransport",
    "Success",
    "TRANSPORT_ERROR_CODE",
    "UserMessage",
    "classify_response",
    "close_shared_transport",
    "create_default_transport",
    "dataclass_decoder",
    "get_shared_transport",
    "is_success",
    "list_of",
    "load_client_settings",
    "setup_logging",
    "unit",
    "unwrap_or",
    "__version__",
]
