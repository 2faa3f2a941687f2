from __future__ import annotations
from typing import Any, Callable, TypeVar

T = TypeVar("T")


def tee(value: T, action: Callable[[T], Any]) -> T:
    action(value)
    return value


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    for f in fns:
        value = f(value)
    return value
