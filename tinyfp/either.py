from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

from ._awaitable import call
from .errors import MatchError, UnwrapError
from .option import NONE, Option, Some

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
T = TypeVar("T")


class Either(Generic[E, A]):
    """Either an alternative outcome (``Left``) or a success value (``Right``).

    Chained steps run only on ``Right``; a ``Left`` flows through ``map``,
    ``bind`` and ``tee`` untouched. Read the payload with ``match``.
    """

    @staticmethod
    def left(error: E) -> "Either[E, Any]": return Left(error)

    @staticmethod
    def right(value: A) -> "Either[Any, A]": return Right(value)

    def is_left(self) -> bool: raise NotImplementedError
    def is_right(self) -> bool: return not self.is_left()

    def map(self, f: Callable[[A], B]) -> "Either[E, B]":
        if self.is_right():
            return Right(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def map_left(self, f: Callable[[E], B]) -> "Either[B, A]":
        if self.is_left():
            return Left(f(self.error))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def bimap(self, on_left: Callable[[E], Any], on_right: Callable[[A], B]) -> "Either[Any, B]":
        return self.map_left(on_left).map(on_right)

    def bind(self, f: Callable[[A], "Either[E, B]"]) -> "Either[E, B]":
        if self.is_right():
            return _checked(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    flat_map = bind

    def match(self, on_left: Callable[[E], T], on_right: Callable[[A], T]) -> T:
        if self.is_right():
            return on_right(self.value)  # type: ignore[attr-defined]
        return on_left(self.error)  # type: ignore[attr-defined]

    def tee(self, action: Callable[[A], Any]) -> "Either[E, A]":
        if self.is_right():
            action(self.value)  # type: ignore[attr-defined]
        return self

    def tee_left(self, action: Callable[[E], Any]) -> "Either[E, A]":
        if self.is_left():
            action(self.error)  # type: ignore[attr-defined]
        return self

    def get_or_else(self, default: A) -> A:
        return self.value if self.is_right() else default  # type: ignore[attr-defined]

    def to_option(self) -> Option[A]:
        return Some(self.value) if self.is_right() else NONE  # type: ignore[attr-defined]

    def swap(self) -> "Either[A, E]":
        if self.is_right():
            return Left(self.value)  # type: ignore[attr-defined]
        return Right(self.error)  # type: ignore[attr-defined]

    def unwrap(self) -> A:
        if self.is_right():
            return self.value  # type: ignore[attr-defined]
        raise UnwrapError(self, "unwrap called on a Left")

    def unwrap_left(self) -> E:
        if self.is_left():
            return self.error  # type: ignore[attr-defined]
        raise UnwrapError(self, "unwrap_left called on a Right")

    async def map_async(self, f: Callable[[A], Union[B, Awaitable[B]]]) -> "Either[E, B]":
        if self.is_right():
            return Right(await call(f, self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    async def bind_async(self, f: Callable[[A], Union["Either[E, B]", Awaitable["Either[E, B]"]]]) -> "Either[E, B]":
        if self.is_right():
            return _checked(await call(f, self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    async def tee_async(self, action: Callable[[A], Any]) -> "Either[E, A]":
        if self.is_right():
            await call(action, self.value)  # type: ignore[attr-defined]
        return self

    async def match_async(self, on_left: Callable[[E], Any], on_right: Callable[[A], Any]) -> Any:
        if self.is_right():
            return await call(on_right, self.value)  # type: ignore[attr-defined]
        return await call(on_left, self.error)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Left(Either[E, A]):
    error: E
    def is_left(self) -> bool: return True


@dataclass(frozen=True)
class Right(Either[E, A]):
    value: A
    def is_left(self) -> bool: return False


def _checked(r: Any) -> Either[Any, Any]:
    if not isinstance(r, Either):
        raise MatchError("Either", r)
    return r


def attempt(thunk: Callable[[], A], on_error: Callable[[Exception], E]) -> Either[E, A]:
    try:
        return Right(thunk())
    except Exception as ex:
        return Left(on_error(ex))
