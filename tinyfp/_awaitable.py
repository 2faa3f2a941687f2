from __future__ import annotations
import inspect
from typing import Any, Awaitable, TypeVar, Union

T = TypeVar("T")


async def resolve(v: Union[T, Awaitable[T]]) -> T:
    if inspect.isawaitable(v):
        return await v
    return v  # type: ignore[return-value]


async def call(f: Any, *args: Any) -> Any:
    return await resolve(f(*args))
