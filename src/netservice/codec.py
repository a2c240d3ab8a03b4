# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
JSON codec used by the dispatcher and the response classifier.

Response shapes are described by explicit decoders: any callable taking the parsed
JSON value and returning the typed result. Decoders signal bad input by raising;
every failure is surfaced as ``DecodeError`` so callers catch a single type.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from .errors import DecodeError, EncodeError

R = TypeVar("R")

Decoder = Callable[[Any], R]


def unit(_value: Any) -> None:
    """Decoder for responses whose body carries no payload."""
    return None


def dataclass_decoder(cls: type[R]) -> Decoder[R]:
    """Build a decoder for a flat dataclass, ignoring keys the dataclass does not declare."""
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"{cls!r} is not a dataclass")
    names = {f.name for f in dataclasses.fields(cls) if f.init}

    def decode(value: Any) -> R:
        if not isinstance(value, Mapping):
            raise DecodeError(f"{cls.__name__} must be a JSON object, got {type(value).__name__}")
        return cls(**{key: item for key, item in value.items() if key in names})

    return decode


def list_of(item_decoder: Decoder[R]) -> Decoder[list[R]]:
    def decode(value: Any) -> list[R]:
        if not isinstance(value, list):
            raise DecodeError(f"expected a JSON array, got {type(value).__name__}")
        return [item_decoder(item) for item in value]

    return decode


def _to_jsonable(value: Any) -> Any:
    if hasattr(value, "to_dict") and callable(value.to_dict):
        return value.to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value


def encode_json(value: Any) -> bytes:
    """Serialize a request body; raises EncodeError for values JSON cannot represent."""
    try:
        return json.dumps(_to_jsonable(value), ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"Request body is not JSON serializable: {exc}") from exc


def parse_json(content: bytes) -> Any:
    try:
        return json.loads(content.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(f"Response body is not valid JSON: {exc}") from exc
    except RecursionError as exc:
        raise DecodeError("Response body is nested too deeply to decode") from exc


def decode_body(content: bytes, decoder: Decoder[R] | None = None) -> R:
    """Parse ``content`` once and hand the JSON value to ``decoder``."""
    if decoder is unit:
        return None  # type: ignore[return-value]
    value = parse_json(content)
    if decoder is None:
        return value
    try:
        return decoder(value)
    except DecodeError:
        raise
    except Exception as exc:  # noqa: BLE001
        raise DecodeError(f"Response body does not match the expected shape: {exc}") from exc


__all__ = [
    "Decoder",
    "dataclass_decoder",
    "decode_body",
    "encode_json",
    "list_of",
    "parse_json",
    "unit",
]
