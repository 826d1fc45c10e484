"""Typed outcomes returned by every handler.

A handler returns either ``Ok(value)`` or a ``Message``. Callers branch on
the type; nothing in the handler layer raises for a domain outcome.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class MessageKind(str, Enum):
    SUCCESS = "Success"
    ERROR = "Error"
    NOT_FOUND = "NotFound"
    INVALID_PAYLOAD = "InvalidPayload"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Message:
    kind: MessageKind
    text: str

    @property
    def is_error(self) -> bool:
        return self.kind is not MessageKind.SUCCESS


def success(text: str) -> Message:
    return Message(MessageKind.SUCCESS, text)


def error(text: str) -> Message:
    return Message(MessageKind.ERROR, text)


def not_found(text: str) -> Message:
    return Message(MessageKind.NOT_FOUND, text)


def invalid_payload(text: str) -> Message:
    return Message(MessageKind.INVALID_PAYLOAD, text)


Result = Union[Ok[T], Message]
