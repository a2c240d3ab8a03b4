# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for netservice."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "NETSERVICE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for embedding applications.

    ``level`` wins over ``NETSERVICE_LOG_LEVEL``, which is read at call time.
    Unknown level names fall back to WARNING.
    """
    effective_level = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


__all__ = ["setup_logging"]
