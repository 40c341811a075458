"""
PassForge Structured Logger
============================

:class:`ForgeLogger` sends PassForge diagnostics to a Rich handler on
stderr and, when a log file is configured, to a size-rotated file as plain
lines or JSON lines.

Records describe passwords by metadata only (length, pool size, score,
label). A structured field whose name marks it as secret is replaced by
``"[redacted]"`` before the record is emitted.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_STDERR_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
    }
)

_PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Structured field names that are never written out
SECRET_FIELDS = frozenset({"password", "secret", "passphrase"})
REDACTED = "[redacted]"


def redact(fields: dict[str, Any]) -> dict[str, Any]:
    """Return *fields* with secret-named entries replaced by :data:`REDACTED`."""
    return {
        key: REDACTED if key.lower() in SECRET_FIELDS else value
        for key, value in fields.items()
    }


class _JSONLineFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ``timestamp``, ``level``, ``logger``, ``message``, ``component``,
    plus ``operation`` and ``fields`` when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        line: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "component": getattr(record, "component", None),
        }
        operation = getattr(record, "operation", None)
        if operation:
            line["operation"] = operation
        fields = getattr(record, "fields", None)
        if fields:
            line["fields"] = fields
        return json.dumps(line, ensure_ascii=False, default=str)


def _stderr_handler(level: int) -> RichHandler:
    return RichHandler(
        level=level,
        console=Console(theme=_STDERR_THEME, stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )


def _file_handler(
    path: Path, level: int, json_lines: bool, max_bytes: int, backup_count: int
) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(path),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    if json_lines:
        handler.setFormatter(_JSONLineFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(_PLAIN_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
        )
    return handler


class ForgeLogger:
    """Logger bound to one PassForge component (``cli``, ``engine``...).

    Keyword arguments passed to :meth:`info` or :meth:`debug` become
    structured fields of the record::

        log = ForgeLogger("engine", log_file="passforge.log", json_logs=True)
        with log.operation("generate"):
            log.info("Generated password", length=16)

    Args:
        component:       Component name; the stdlib logger is
                         ``passforge.<component>``.
        log_level:       Minimum level name (DEBUG .. CRITICAL).
        log_file:        Rotating log file path; falsy disables file output.
        json_logs:       Write JSON lines instead of plain text to the file.
        max_bytes:       Rotation size of the log file.
        backup_count:    Rotated files kept.
        console_output:  Attach the Rich stderr handler.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "WARNING",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        self._component = component
        self._operation: str | None = None
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

        self._logger = logging.getLogger(f"passforge.{component}")
        self._logger.setLevel(level)
        self._logger.propagate = False
        self._logger.handlers.clear()

        if console_output:
            self._logger.addHandler(_stderr_handler(level))
        if log_file:
            self._logger.addHandler(
                _file_handler(Path(log_file), level, json_logs, max_bytes, backup_count)
            )

    @contextmanager
    def operation(self, name: str) -> Iterator[ForgeLogger]:
        """Tag every record logged inside the block with *name*."""
        previous, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = previous

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Log *label* at DEBUG with its duration once the block finishes."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.debug(
                "Finished %s", label,
                elapsed_ms=round((time.perf_counter() - start) * 1000, 3),
            )

    def debug(self, msg: str, *args: Any, **fields: Any) -> None:
        self._log(logging.DEBUG, msg, args, fields)

    def info(self, msg: str, *args: Any, **fields: Any) -> None:
        self._log(logging.INFO, msg, args, fields)

    def _log(
        self, level: int, msg: str, args: tuple[Any, ...], fields: dict[str, Any]
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return
        extra = {
            "component": self._component,
            "operation": self._operation,
            "fields": redact(fields),
        }
        self._logger.log(level, msg, *args, extra=extra, stacklevel=3)
