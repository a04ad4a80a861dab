"""
Explicit outcomes returned by the portal services.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    STORE_UNAVAILABLE = "store_unavailable"
    INVALID_CREDENTIALS = "invalid_credentials"
    MODEL_CALL_FAILED = "model_call_failed"
    CHAT_FAILED = "chat_failed"
    INVALID_STORED_RECORD = "invalid_stored_record"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    detail: str


Result = Union[Ok[Any], Err]
