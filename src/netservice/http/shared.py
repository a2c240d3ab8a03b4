# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Process-wide shared transport.

``SharedTransport`` builds its transport lazily, exactly once, even when several
threads race on first use. Closing it is terminal: later ``get()`` calls raise
ClientClosedError instead of silently building a fresh transport. ``reset()``
re-arms the holder explicitly.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from ..config import ClientSettings
from ..errors import ClientClosedError
from .client import HttpTransport, create_default_transport

logger = logging.getLogger(__name__)

TransportFactory = Callable[[ClientSettings | None], HttpTransport]


class SharedTransport:
    """
    Initialize-once holder for the transport every default ServiceClient uses.

    The httpx transport pools connections on the event loop that opened them, so
    the shared transport assumes one event loop per process. Code that calls
    ``asyncio.run`` repeatedly should inject its own transport per loop, or close
    and ``reset()`` the holder between loops.
    """

    def __init__(self, factory: TransportFactory = create_default_transport):
        self._factory = factory
        self._lock = threading.Lock()
        self._instance: HttpTransport | None = None
        self._settings: ClientSettings | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def get(self, settings: ClientSettings | None = None) -> HttpTransport:
        """Return the shared transport, building it on first use.

        ``settings`` only applies to the call that builds the transport.
        """
        with self._lock:
            if self._closed:
                raise ClientClosedError("Shared transport is closed")
            if self._instance is None:
                self._instance = self._factory(settings)
                self._settings = settings
                logger.debug("Created shared transport %s", type(self._instance).__name__)
            elif settings is not None and settings != self._settings:
                logger.debug("Shared transport already built; ignoring settings %r", settings)
            return self._instance

    async def close(self) -> None:
        with self._lock:
            instance, self._instance = self._instance, None
            self._closed = True
        if instance is not None:
            await instance.aclose()

    def reset(self) -> None:
        """Forget any previous instance and allow a new one to be built."""
        with self._lock:
            self._instance = None
            self._settings = None
            self._closed = False


_shared = SharedTransport()


def get_shared_transport(settings: ClientSettings | None = None) -> HttpTransport:
    return _shared.get(settings)


async def close_shared_transport() -> None:
    await _shared.close()


def reset_shared_transport() -> None:
    _shared.reset()


__all__ = [
    "SharedTransport",
    "TransportFactory",
    "close_shared_transport",
    "get_shared_transport",
    "reset_shared_transport",
]
