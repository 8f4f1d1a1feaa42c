"""Explicit result type for value-object factories.

Value objects raise ``InvalidArgumentError`` from their constructors. Their
``parse``/``of`` factories wrap that into ``Ok``/``Err`` so callers that want
to branch on validity do so explicitly instead of relying on propagation.
"""
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from app.domain.exceptions import InvalidArgumentError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful construction."""
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Rejected construction carrying the validation error."""
    error: InvalidArgumentError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error


Result = Union[Ok[T], Err]


def attempt(factory: Callable[[], T]) -> "Result[T]":
    """Run a raising constructor and capture its validation failure."""
    try:
        return Ok(factory())
    except InvalidArgumentError as e:
        return Err(e)
