"""Append-only diagnostics collected during a conversion run."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .models import LogEntry, Severity

LOGGER_NAME = "resx_to_json"

LOGGING_LEVELS = {
    Severity.TRACE: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class ConverterLogger:
    """Ordered record of conversion messages, returned as the run result.

    Every entry is also forwarded to the standard ``logging`` module.
    """

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []
        self._log = logging.getLogger(LOGGER_NAME)

    def add(self, severity: Severity, message: str) -> LogEntry:
        entry = LogEntry(severity=severity, message=message)
        self._entries.append(entry)
        self._log.log(LOGGING_LEVELS[severity], message)
        return entry

    def trace(self, message: str) -> LogEntry:
        return self.add(Severity.TRACE, message)

    def info(self, message: str) -> LogEntry:
        return self.add(Severity.INFO, message)

    def warning(self, message: str) -> LogEntry:
        return self.add(Severity.WARNING, message)

    def error(self, message: str) -> LogEntry:
        return self.add(Severity.ERROR, message)

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        return tuple(self._entries)

    @property
    def has_errors(self) -> bool:
        return any(entry.severity is Severity.ERROR for entry in self._entries)

    def messages(self, severity: Severity) -> list[str]:
        return [entry.message for entry in self._entries if entry.severity is severity]

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
