from __future__ import annotations
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from .option import NONE, Option, Some
from .unit import UNIT, Unit

T = TypeVar("T")
U = TypeVar("U")
S = TypeVar("S")


class _Deferred(Generic[T]):
    __slots__ = ("_make",)
    def __init__(self, make: Callable[[], Iterator[T]]): self._make = make
    def __iter__(self) -> Iterator[T]: return self._make()


class Seq(Generic[T]):
    """Lazy, restartable view over an iterable.

    ``map``/``filter``/``flat_map`` only describe the pipeline; iterating the
    ``Seq`` runs it against the source again, so a list-backed ``Seq`` yields
    the same elements every time. ``for_each``/``fold``/``reduce`` consume it.
    """

    __slots__ = ("_source",)

    def __init__(self, source: Iterable[T]): self._source = source

    @staticmethod
    def of(*items: T) -> "Seq[T]":
        return Seq(items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    def __repr__(self) -> str:
        return f"Seq({self._source!r})"

    def map(self, f: Callable[[T], U]) -> "Seq[U]":
        src = self._source
        return Seq(_Deferred(lambda: (f(x) for x in src)))

    def filter(self, p: Callable[[T], bool]) -> "Seq[T]":
        src = self._source
        return Seq(_Deferred(lambda: (x for x in src if p(x))))

    def flat_map(self, f: Callable[[T], Iterable[U]]) -> "Seq[U]":
        src = self._source
        return Seq(_Deferred(lambda: (y for x in src for y in f(x))))

    def for_each(self, action: Callable[[T], Any]) -> Unit:
        for x in self._source:
            action(x)
        return UNIT

    def fold(self, seed: S, f: Callable[[S, T], S]) -> S:
        acc = seed
        for x in self._source:
            acc = f(acc, x)
        return acc

    def reduce(self, f: Callable[[T, T], T], default: Optional[T] = None) -> Optional[T]:
        it = iter(self._source)
        for acc in it:
            for x in it:
                acc = f(acc, x)
            return acc
        return default

    def first(self) -> Option[T]:
        for x in self._source:
            return Some(x)
        return NONE

    def to_list(self) -> List[T]:
        return list(self._source)


def map_seq(items: Iterable[T], f: Callable[[T], U]) -> Seq[U]:
    return Seq(items).map(f)


def filter_seq(items: Iterable[T], p: Callable[[T], bool]) -> Seq[T]:
    return Seq(items).filter(p)


def for_each(items: Iterable[T], action: Callable[[T], Any]) -> Unit:
    return Seq(items).for_each(action)


def fold(items: Iterable[T], seed: S, f: Callable[[S, T], S]) -> S:
    return Seq(items).fold(seed, f)


def reduce(items: Iterable[T], f: Callable[[T, T], T], default: Optional[T] = None) -> Optional[T]:
    """Fold seeded with the first element; an empty input gives ``default``.

    ``default`` stands in for the element type's zero value and is ``None``
    unless supplied, e.g. ``reduce([], operator.add, 0) == 0``.
    """
    return Seq(items).reduce(f, default)
