from __future__ import annotations
from typing import Any, Awaitable, Callable, Generator, Generic, Optional, TypeVar, Union

from ._awaitable import resolve
from .either import Either
from .errors import MatchError
from .option import Option

C = TypeVar("C", Option[Any], Either[Any, Any])
T = TypeVar("T")

Source = Union[C, Awaitable[C]]


async def _container(source: Any) -> Any:
    c = await resolve(source)
    if not isinstance(c, (Option, Either)):
        raise MatchError("Option or Either", c)
    return c


async def map_async(source: Source, f: Callable[[Any], Any]) -> Any:
    return await (await _container(source)).map_async(f)


async def bind_async(source: Source, f: Callable[[Any], Any]) -> Any:
    return await (await _container(source)).bind_async(f)


async def tee_async(source: Source, action: Callable[[Any], Any]) -> Any:
    return await (await _container(source)).tee_async(action)


async def match_async(source: Source, first: Callable[..., T], second: Callable[..., T]) -> T:
    # handlers in the container's own order: (on_some, on_none) or (on_left, on_right)
    return await (await _container(source)).match_async(first, second)


async def from_result(value: T) -> T:
    return value


class Pending(Generic[C]):
    """An in-flight Option/Either that can be chained before it resolves.

    Steps are recorded, not started: nothing runs until a ``Pending`` (or the
    result of ``match``) is awaited. The resolved container is cached, so
    several chains may branch from one ``Pending`` and be awaited one after
    another; the shared source runs once. Awaiting branches of an unresolved
    ``Pending`` concurrently raises ``RuntimeError``.
    """

    __slots__ = ("_make", "_state", "_result")

    def __init__(self, source: Source):
        self._make: Optional[Callable[[], Any]] = lambda: source
        self._state = "new"
        self._result: Any = None

    @classmethod
    def _defer(cls, make: Callable[[], Awaitable[Any]]) -> "Pending[Any]":
        p = cls.__new__(cls)
        p._make = make; p._state = "new"; p._result = None
        return p

    def map(self, f: Callable[[Any], Any]) -> "Pending[Any]": return Pending._defer(lambda: map_async(self, f))
    def bind(self, f: Callable[[Any], Any]) -> "Pending[Any]": return Pending._defer(lambda: bind_async(self, f))
    def tee(self, action: Callable[[Any], Any]) -> "Pending[C]": return Pending._defer(lambda: tee_async(self, action))

    def match(self, first: Callable[..., T], second: Callable[..., T]) -> Awaitable[T]:
        return match_async(self, first, second)

    async def _resolve(self) -> C:
        if self._state == "done":
            return self._result
        if self._state == "running":
            raise RuntimeError("Pending is already being awaited; await shared branches one after another")
        if self._state == "failed":
            raise RuntimeError("Pending source already failed")
        assert self._make is not None
        self._state = "running"
        try:
            self._result = await _container(self._make())
        except BaseException:
            self._state = "failed"
            raise
        self._state = "done"; self._make = None
        return self._result

    def __await__(self) -> Generator[Any, None, C]:
        return self._resolve().__await__()
