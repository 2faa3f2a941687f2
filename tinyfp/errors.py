from __future__ import annotations
from typing import Any


class UnwrapError(Exception):
    def __init__(self, container: Any, msg: str):
        super().__init__(f"{msg}: {container!r}"); self.container = container


class MatchError(TypeError):
    def __init__(self, expected: str, got: Any):
        super().__init__(f"expected {expected}, got {type(got).__name__}"); self.got = got
