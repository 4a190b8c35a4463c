"""
Result Type Module

A minimal success/failure container used in place of raised exceptions.
Callers branch on ``is_ok`` before reading ``value`` or ``error``:

    result = await client.fetch_post(1)
    if result.is_ok:
        print(result.value.title)
    else:
        print(result.error)

There is deliberately no ``unwrap``; a failure only becomes an exception
when a caller raises ``result.error`` itself.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union


T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value."""
    value: T
    is_ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome carrying an error."""
    error: E
    is_ok: bool = field(default=False, init=False)


Result = Union[Success[T], Failure[E]]

__all__ = ["Success", "Failure", "Result"]
