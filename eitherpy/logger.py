from __future__ import annotations
import sys, datetime as _dt, json
from typing import Optional, Dict, Any


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class ConsoleLogger:
    """Writes fault-capture records to stderr, one line each.

    Records below ``level`` are dropped; unknown level names fall back to WARN.
    """
    name = "eitherpy"

    def __init__(self, level: str = "WARN", json_output: bool = False, context: Optional[Dict[str, Any]] = None):
        self.threshold = _LEVELS.get(level.upper(), _LEVELS["WARN"])
        self.json_output = json_output
        self.context = dict(context or {})

    def debug(self, msg: str, **fields: Any) -> None:
        if _LEVELS["DEBUG"] < self.threshold:
            return
        record = {**self.context, **fields}
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        if self.json_output:
            line = json.dumps({"ts": ts, "name": self.name, "level": "DEBUG", "msg": msg, "fields": record}, separators=(",", ":"), default=repr)
        else:
            line = f"[{ts}] {self.name} DEBUG: {msg}" + "".join(f" {k}={v}" for k, v in sorted(record.items()))
        print(line, file=sys.stderr)


_logger = ConsoleLogger()


def get_logger() -> ConsoleLogger:
    return _logger


def set_logger(logger: ConsoleLogger) -> None:
    global _logger
    _logger = logger


def configure_logging(level: str = "WARN", json_output: bool = False, **context: Any) -> ConsoleLogger:
    """Replace the module logger used by the fault-capture adapters.

    The library only ever logs at DEBUG (one record per captured fault), so the
    default WARN level keeps it silent.
    """
    logger = ConsoleLogger(level=level, json_output=json_output, context=context)
    set_logger(logger)
    return logger
