# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for netservice."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"netservice/{__version__}"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        parsed = float(value) if value is not None else default
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ClientSettings:
    """Transport defaults shared by every request issued through a client."""

    base_url: str = ""
    request_timeout: float = 30.0
    connect_timeout: float = 10.0
    socket_timeout: float = 15.0
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True
    follow_redirects: bool = False

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            base_url=os.getenv("NETSERVICE_BASE_URL", cls.base_url),
            request_timeout=_float_env("NETSERVICE_REQUEST_TIMEOUT", cls.request_timeout),
            connect_timeout=_float_env("NETSERVICE_CONNECT_TIMEOUT", cls.connect_timeout),
            socket_timeout=_float_env("NETSERVICE_SOCKET_TIMEOUT", cls.socket_timeout),
            user_agent=os.getenv("NETSERVICE_USER_AGENT", cls.user_agent),
            verify_ssl=_bool_env("NETSERVICE_VERIFY_SSL", cls.verify_ssl),
            follow_redirects=_bool_env("NETSERVICE_FOLLOW_REDIRECTS", cls.follow_redirects),
        )


def load_client_settings() -> ClientSettings:
    """Load client settings from environment with sensible defaults."""
    return ClientSettings.from_env()
