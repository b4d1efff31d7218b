"""Result types for railway-oriented programming.

Operations that can fail for expected reasons (unknown token, duplicate
username, wrong password) return a Result instead of raising. Callers
pattern-match on the outcome.

Usage:
    result = await lifecycle.set_password(token, new_password)
    match result:
        case Success(value=established):
            print(established.message)
        case Failure(error=error):
            print(error.code)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
