from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Unit:
    def __repr__(self) -> str: return "Unit"


UNIT = Unit()
