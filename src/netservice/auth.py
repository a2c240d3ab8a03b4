# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Authentication context injected by the embedding application."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Protocol

TokenProvider = Callable[[], Awaitable[str | None]]


class FailureSink(Protocol):
    """Receives a notification when the service answers 401 or 502."""

    def notify(self) -> None: ...


class CallbackFailureSink:
    """Adapts a zero-argument callable to the FailureSink protocol."""

    def __init__(self, callback: Callable[[], object]):
        self._callback = callback

    def notify(self) -> None:
        self._callback()


@dataclass(frozen=True)
class AuthContext:
    """
    Token provider plus optional failure sink.

    The client reads this for its whole lifetime and never mutates it. The sink is
    notified synchronously and the client does not wait on or track anything the
    sink starts.
    """

    get_token: TokenProvider | None = None
    failure_sink: FailureSink | None = None

    @classmethod
    def from_callbacks(
        cls,
        get_token: TokenProvider | None = None,
        on_auth_or_gateway_failure: Callable[[], object] | None = None,
    ) -> AuthContext:
        sink = CallbackFailureSink(on_auth_or_gateway_failure) if on_auth_or_gateway_failure is not None else None
        return cls(get_token=get_token, failure_sink=sink)

    async def resolve_token(self) -> str | None:
        if self.get_token is None:
            return ""
        return await self.get_token()


__all__ = ["AuthContext", "CallbackFailureSink", "FailureSink", "TokenProvider"]
