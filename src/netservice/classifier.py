# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Map a raw HTTP status and body onto an Outcome."""

from __future__ import annotations

import logging
from typing import Any

from .auth import AuthContext
from .codec import Decoder, decode_body
from .errors import DECODE_ERROR_CODE, DecodeError
from .models import Failure, Outcome, Success, UserMessage

logger = logging.getLogger(__name__)

AUTH_OR_GATEWAY_STATUSES = frozenset({401, 502})


def _notify_failure_sink(auth: AuthContext | None, status_code: int) -> None:
    if auth is None or auth.failure_sink is None:
        return
    try:
        auth.failure_sink.notify()
    except Exception:  # noqa: BLE001
        logger.exception("Failure sink raised while handling HTTP %s", status_code)


def _decode_failure(status_code: int, exc: DecodeError) -> Failure:
    logger.warning("Could not decode HTTP %s response body: %s", status_code, exc)
    return Failure(UserMessage.from_error(DECODE_ERROR_CODE, f"HTTP {status_code}: {exc}"))


def _user_message_failure(status_code: int, content: bytes) -> Failure:
    try:
        return Failure(decode_body(content, UserMessage.from_mapping))
    except DecodeError as exc:
        return _decode_failure(status_code, exc)


def classify_response(
    status_code: int,
    content: bytes,
    *,
    auth: AuthContext | None = None,
    decode: Decoder[Any] | None = None,
) -> Outcome[Any]:
    """
    Interpret one response; the status code alone selects the path.

    - 2xx: decode the body with ``decode`` (raw JSON when omitted) into Success.
    - 401/502: notify the auth failure sink, then decode the body as UserMessage.
    - anything else: decode the body as UserMessage.

    Exactly one decode attempt is made. A body that does not decode yields a Failure
    carrying DECODE_ERROR_CODE rather than a second interpretation.
    """
    if 200 <= status_code <= 299:
        try:
            return Success(decode_body(content, decode))
        except DecodeError as exc:
            return _decode_failure(status_code, exc)

    if status_code in AUTH_OR_GATEWAY_STATUSES:
        _notify_failure_sink(auth, status_code)

    return _user_message_failure(status_code, content)


__all__ = ["AUTH_OR_GATEWAY_STATUSES", "classify_response"]
