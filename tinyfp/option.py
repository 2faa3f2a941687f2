from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Generic, Iterator, Optional, TypeVar, Union

from ._awaitable import call
from .errors import MatchError, UnwrapError

if TYPE_CHECKING:
    from .either import Either

T = TypeVar("T")
U = TypeVar("U")
L = TypeVar("L")


class Option(Generic[T]):
    """Presence or absence of a value: exactly one of ``Some(value)`` or ``NONE``.

    The payload is read through ``match``/``get_or_else``; ``unwrap`` exists for
    call sites that have already checked ``is_some`` and raises ``UnwrapError``
    on ``NONE``.
    """

    @staticmethod
    def some(value: T) -> "Option[T]": return Some(value)

    @staticmethod
    def none() -> "Option[Any]": return NONE

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self.is_some():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return NONE

    def bind(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_some():
            return _checked(f(self.value))  # type: ignore[attr-defined]
        return NONE

    flat_map = bind

    def filter(self, p: Callable[[T], bool]) -> "Option[T]":
        if self.is_some() and p(self.value):  # type: ignore[attr-defined]
            return self
        return NONE

    def match(self, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:
        if self.is_some():
            return on_some(self.value)  # type: ignore[attr-defined]
        return on_none()

    def get_or_else(self, default: U) -> T | U:
        return self.value if self.is_some() else default  # type: ignore[attr-defined]

    def or_else(self, alternative: Callable[[], "Option[T]"]) -> "Option[T]":
        return self if self.is_some() else alternative()

    def tee(self, action: Callable[[T], Any]) -> "Option[T]":
        if self.is_some():
            action(self.value)  # type: ignore[attr-defined]
        return self

    def to_either(self, left: L) -> "Either[L, T]":
        from .either import Left, Right
        if self.is_some():
            return Right(self.value)  # type: ignore[attr-defined]
        return Left(left)

    def unwrap(self) -> T:
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        raise UnwrapError(self, "unwrap called on an empty Option")

    def __iter__(self) -> Iterator[T]:
        if self.is_some():
            yield self.value  # type: ignore[attr-defined]

    async def map_async(self, f: Callable[[T], Union[U, Awaitable[U]]]) -> "Option[U]":
        if self.is_some():
            return Some(await call(f, self.value))  # type: ignore[attr-defined]
        return NONE

    async def bind_async(self, f: Callable[[T], Union["Option[U]", Awaitable["Option[U]"]]]) -> "Option[U]":
        if self.is_some():
            return _checked(await call(f, self.value))  # type: ignore[attr-defined]
        return NONE

    async def tee_async(self, action: Callable[[T], Any]) -> "Option[T]":
        if self.is_some():
            await call(action, self.value)  # type: ignore[attr-defined]
        return self

    async def match_async(self, on_some: Callable[[T], Any], on_none: Callable[[], Any]) -> Any:
        if self.is_some():
            return await call(on_some, self.value)  # type: ignore[attr-defined]
        return await call(on_none)


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def is_some(self) -> bool: return True


class _None(Option[Any]):
    __slots__ = ()
    def __repr__(self) -> str: return "NONE"
    def __eq__(self, other: object) -> bool: return isinstance(other, _None)
    def __hash__(self) -> int: return hash(_None)
    def is_some(self) -> bool: return False


NONE: Option[Any] = _None()


def some(value: T) -> Option[T]:
    return Some(value)


def none() -> Option[Any]:
    return NONE


def _checked(r: Any) -> Option[Any]:
    if not isinstance(r, Option):
        raise MatchError("Option", r)
    return r


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE
