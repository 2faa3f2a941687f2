from __future__ import annotations
import sys, datetime as _dt, json
from typing import Any, Callable, Dict, Optional


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


def _level_no(level: str) -> int:
    try:
        return _LEVELS[level.upper()]
    except KeyError:
        raise ValueError(f"unknown log level {level!r}, expected one of {sorted(_LEVELS)}") from None


class ConsoleLogger:
    def __init__(self, name: str = "tinyfp", level: str = "INFO", json_output: bool = False, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.level = _LEVELS.get(level.upper(), 20)
        self.json_output = json_output
        self.context = dict(context or {})

    def set_level(self, level: str) -> None:
        self.level = _LEVELS.get(level.upper(), self.level)

    def bind(self, **fields: Any) -> "ConsoleLogger":
        ctx = dict(self.context); ctx.update(fields)
        return ConsoleLogger(self.name, level=self.level_name, json_output=self.json_output, context=ctx)

    @property
    def level_name(self) -> str:
        for k, v in _LEVELS.items():
            if v == self.level: return k
        return "INFO"

    def enabled(self, level: str) -> bool:
        return _level_no(level) >= self.level

    def emit(self, level: str, msg: str, **fields: Any) -> None:
        level = level.upper()
        if not self.enabled(level):
            return
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        all_fields: Dict[str, Any] = {}
        all_fields.update(self.context)
        all_fields.update(fields)
        if self.json_output:
            data: Dict[str, Any] = {"ts": ts, "name": self.name, "level": level, "msg": msg}
            if all_fields:
                data["fields"] = all_fields
            print(json.dumps(data, separators=(",", ":"), default=repr), file=sys.stderr)
        else:
            extras = "".join([f" {k}={v}" for k, v in sorted(all_fields.items())]) if all_fields else ""
            print(f"[{ts}] {self.name} {level}: {msg}{extras}", file=sys.stderr)

    async def debug(self, msg: str, **fields: Any) -> None: self.emit("DEBUG", msg, **fields)
    async def info(self, msg: str, **fields: Any) -> None: self.emit("INFO", msg, **fields)
    async def warn(self, msg: str, **fields: Any) -> None: self.emit("WARN", msg, **fields)
    async def error(self, msg: str, **fields: Any) -> None: self.emit("ERROR", msg, **fields)


def log_value(logger: ConsoleLogger, msg: str, level: str = "DEBUG") -> Callable[[Any], None]:
    """Action for ``tee``/``for_each`` that logs the value it is handed."""
    _level_no(level)
    def action(value: Any) -> None:
        logger.emit(level, msg, value=value)
    return action


def log_left(logger: ConsoleLogger, msg: str, level: str = "WARN") -> Callable[[Any], None]:
    _level_no(level)
    def action(error: Any) -> None:
        logger.emit(level, msg, error=error)
    return action
