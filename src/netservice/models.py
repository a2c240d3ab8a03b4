# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Result and service message models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

from .errors import DecodeError, TRANSPORT_ERROR_CODE, UNKNOWN_ERROR_MESSAGE

T = TypeVar("T")
D = TypeVar("D")


def _require_mapping(data: Any, shape: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise DecodeError(f"{shape} must be a JSON object, got {type(data).__name__}")
    return data


def _optional_list(data: Mapping[str, Any], key: str, shape: str) -> list[Any]:
    raw = data.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise DecodeError(f"{shape}.{key} must be a JSON array, got {type(raw).__name__}")
    return raw


def _int_field(value: Any, name: str) -> int:
    # bool is an int subclass but never a valid code
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"{name} must be an integer, got {value!r}")
    return value


@dataclass(frozen=True)
class ErrorDetail:
    code: int
    message: str

    @classmethod
    def from_mapping(cls, data: Any) -> ErrorDetail:
        mapping = _require_mapping(data, "ErrorDetail")
        if "code" not in mapping or "message" not in mapping:
            raise DecodeError("ErrorDetail requires both 'code' and 'message'")
        message = mapping["message"]
        if not isinstance(message, str):
            raise DecodeError(f"ErrorDetail.message must be a string, got {message!r}")
        return cls(code=_int_field(mapping["code"], "ErrorDetail.code"), message=message)

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


@dataclass(frozen=True)
class MessageDetails:
    code: int | None = None

    @classmethod
    def from_mapping(cls, data: Any) -> MessageDetails:
        if data is None:
            return cls()
        mapping = _require_mapping(data, "MessageDetails")
        code = mapping.get("code")
        return cls(code=None if code is None else _int_field(code, "MessageDetails.code"))

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code}


@dataclass(frozen=True)
class InfoMessage:
    """Human-facing notice attached to a service response."""

    severity: str = ""
    text: str = ""
    details: MessageDetails = field(default_factory=MessageDetails)

    @classmethod
    def from_mapping(cls, data: Any) -> InfoMessage:
        mapping = _require_mapping(data, "InfoMessage")
        severity = mapping.get("severity", "")
        text = mapping.get("text", "")
        if not isinstance(severity, str) or not isinstance(text, str):
            raise DecodeError("InfoMessage.severity and InfoMessage.text must be strings")
        return cls(
            severity=severity,
            text=text,
            details=MessageDetails.from_mapping(mapping.get("details")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"severity": self.severity, "text": self.text, "details": self.details.to_dict()}


@dataclass(frozen=True)
class UserMessage:
    """
    Structured diagnostics returned by the remote service or synthesized locally.

    On the wire the informational messages live under ``user_messages``. Missing or
    ``null`` lists decode as empty and unknown keys are ignored.
    """

    errors: tuple[ErrorDetail, ...] = ()
    messages: tuple[InfoMessage, ...] = ()

    @classmethod
    def from_mapping(cls, data: Any) -> UserMessage:
        mapping = _require_mapping(data, "UserMessage")
        return cls(
            errors=tuple(ErrorDetail.from_mapping(item) for item in _optional_list(mapping, "errors", "UserMessage")),
            messages=tuple(
                InfoMessage.from_mapping(item) for item in _optional_list(mapping, "user_messages", "UserMessage")
            ),
        )

    @classmethod
    def from_error(cls, code: int, message: str | None) -> UserMessage:
        """Build a message carrying a single locally synthesized error."""
        return cls(errors=(ErrorDetail(code=code, message=message or UNKNOWN_ERROR_MESSAGE),))

    def to_dict(self) -> dict[str, Any]:
        return {
            "errors": [error.to_dict() for error in self.errors],
            "user_messages": [message.to_dict() for message in self.messages],
        }


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    error: UserMessage

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def transport(cls, message: str | None) -> Failure:
        return cls(UserMessage.from_error(TRANSPORT_ERROR_CODE, message))


Outcome = Union[Success[T], Failure]


def is_success(outcome: Outcome[Any]) -> bool:
    return isinstance(outcome, Success)


def unwrap_or(outcome: Outcome[T], default: D) -> T | D:
    """Return the success value, or ``default`` for a Failure."""
    if isinstance(outcome, Success):
        return outcome.value
    return default


__all__ = [
    "ErrorDetail",
    "Failure",
    "InfoMessage",
    "MessageDetails",
    "Outcome",
    "Success",
    "UserMessage",
    "is_success",
    "unwrap_or",
]
