"""
Tagged result type for the facade boundary.

``as_result`` runs a facade call and wraps the outcome so callers can
pattern-match instead of catching exceptions::

    match await as_result(client.rooms.get_all_rooms()):
        case Ok(rooms):
            ...
        case Err(error):
            ...
"""

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from hotel_client.utils.exceptions import NormalizedError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    payload: T

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: NormalizedError

    @property
    def success(self) -> bool:
        return False


Result = Ok[Any] | Err


async def as_result(call: Awaitable[T]) -> Ok[T] | Err:
    """Await a facade call, capturing NormalizedError as Err."""
    try:
        return Ok(await call)
    except NormalizedError as e:
        return Err(e)
