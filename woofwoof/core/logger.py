"""
woofwoof/core/logger.py — JSONL structured logger for woofwoof.

WoofLogger writes one JSON object per line to {log_dir}/woofwoof_{date}.jsonl,
rotating automatically each day. ERROR entries are also mirrored to Python
stdlib logging (stderr) unless the caller opts out. Thread-safe via
threading.Lock.
With no log directory the JSONL file is skipped and only the mirror runs.

Usage::

    from woofwoof.core.logger import get_logger
    log = get_logger()
    log.info("cli", "args_parsed", {"mode": "encode"})
    log.perf("codec", "encode_done", latency_ms=0.4, data={"tokens": 7})
"""

from __future__ import annotations

import json
import logging
import platform
import sys
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

# ── stdlib mirror logger (stderr) ──────────────────
_stdlib = logging.getLogger("woofwoof")
if not _stdlib.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s — %(message)s"))
    _stdlib.addHandler(_handler)
_stdlib.setLevel(logging.WARNING)
_stdlib.propagate = False

# ── Singleton storage ─────────────────────────────────────────
_instance: Optional["WoofLogger"] = None
_instance_lock = threading.Lock()


class WoofLogger:
    """
    JSONL structured logger for woofwoof.

    Each call to a log method appends a single JSON line to
    ``{log_dir}/woofwoof_{YYYY-MM-DD}.jsonl``. A new file is opened
    automatically when the calendar date changes.

    Fields written per entry:

    .. code-block:: json

        {
          "timestamp_iso": "2026-10-18T09:12:03.123456+00:00",
          "level": "PERF",
          "phase": "codec",
          "event": "encode_done",
          "data": {"tokens": 7},
          "latency_ms": 0.412
        }

    ``latency_ms`` is omitted when ``None``.

    Use :func:`get_logger` for the process-wide instance.

    Args:
        log_dir: Directory for JSONL files, or ``None`` to disable file output.
    """

    def __init__(self, log_dir: Path | str | None = None) -> None:
        self._lock = threading.Lock()
        self._file: Optional[Any] = None
        self._current_date: str = ""
        self._log_dir = Path(log_dir) if log_dir is not None else None
        self._open_file()
        self._write_startup()

    @property
    def log_dir(self) -> Path | None:
        """Directory receiving JSONL files (``None`` when file output is off)."""
        return self._log_dir

    # ──────────────────────────────────────────
    # Public logging methods
    # ──────────────────────────────────────────

    def info(self, phase: str, event: str, data: Optional[dict] = None) -> None:
        """
        Write an INFO-level structured log entry.

        Args:
            phase: Subsystem (e.g. ``'cli'``, ``'codec'``).
            event: Short event identifier (e.g. ``'args_parsed'``).
            data: Optional dict of additional key-value context.
        """
        self._write("INFO", phase, event, data)

    def error(
        self,
        phase: str,
        event: str,
        data: Optional[dict] = None,
        *,
        mirror: bool = True,
    ) -> None:
        """
        Write an ERROR-level entry and, unless *mirror* is off, echo it to stderr.

        Pass ``mirror=False`` when the caller already reports the failure to
        the user itself.
        """
        self._write("ERROR", phase, event, data)
        if mirror:
            _stdlib.error("[%s] %s | %s", phase, event, data or {})

    def perf(
        self,
        phase: str,
        event: str,
        latency_ms: float,
        data: Optional[dict] = None,
    ) -> None:
        """
        Write a PERF-level entry for latency tracking.

        Args:
            phase: Subsystem the measurement belongs to (e.g. ``'codec'``).
            event: What was measured (e.g. ``'decode_done'``).
            latency_ms: Measured latency in milliseconds.
            data: Optional additional context dict.
        """
        self._write("PERF", phase, event, data, latency_ms=latency_ms)

    def flush(self) -> None:
        """Flush the underlying file buffer immediately."""
        with self._lock:
            if self._file and not self._file.closed:
                self._file.flush()

    def close(self) -> None:
        """Close the current JSONL file, if any."""
        with self._lock:
            if self._file and not self._file.closed:
                self._file.close()

    # ──────────────────────────────────────────
    # Internal helpers
    # ──────────────────────────────────────────

    def _write(
        self,
        level: str,
        phase: str,
        event: str,
        data: Optional[dict],
        latency_ms: Optional[float] = None,
    ) -> None:
        """Serialise and append one JSON line to the log file."""
        if self._log_dir is None:
            return

        now = datetime.now(tz=timezone.utc)
        record: dict[str, Any] = {
            "timestamp_iso": now.isoformat(),
            "level": level,
            "phase": phase,
            "event": event,
            "data": data or {},
        }
        if latency_ms is not None:
            record["latency_ms"] = round(latency_ms, 3)

        line = json.dumps(record, ensure_ascii=False, separators=(",", ":"))

        with self._lock:
            self._rotate_if_needed(now)
            if self._file and not self._file.closed:
                self._file.write(line + "\n")
                self._file.flush()

    def _rotate_if_needed(self, now: datetime) -> None:
        """
        Open a new log file if the calendar date has changed.

        Must be called with ``self._lock`` held.
        """
        today = now.strftime("%Y-%m-%d")
        if today != self._current_date:
            if self._file and not self._file.closed:
                self._file.close()
            self._current_date = today
            assert self._log_dir is not None
            self._log_dir.mkdir(parents=True, exist_ok=True)
            log_path = self._log_dir / f"woofwoof_{today}.jsonl"
            self._file = open(
                log_path, "a", encoding="utf-8", errors="backslashreplace", buffering=1,
            )  # noqa: WPS515

    def _open_file(self) -> None:
        """Open the log file for today's date (called once on init)."""
        if self._log_dir is None:
            return
        now = datetime.now(tz=timezone.utc)
        with self._lock:
            self._rotate_if_needed(now)

    def _write_startup(self) -> None:
        """Write a startup entry with Python version and platform."""
        self.info(
            phase="system",
            event="startup",
            data={
                "python_version": sys.version,
                "platform": platform.platform(),
                "timestamp_local": datetime.now().isoformat(),
            },
        )


# ──────────────────────────────────────────────────────────────
# Singleton accessor
# ──────────────────────────────────────────────────────────────

def get_logger(log_dir: Path | str | None = None) -> WoofLogger:
    """
    Return the process-wide :class:`WoofLogger` instance.

    The first call creates the instance with *log_dir*; later calls return
    the same object and ignore *log_dir*. Use :func:`reset_logger` to
    reconfigure.

    Returns:
        The application-wide :class:`WoofLogger`.
    """
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = WoofLogger(log_dir)
    return _instance


def reset_logger() -> None:
    """Close and discard the process-wide logger so the next call rebuilds it."""
    global _instance
    with _instance_lock:
        if _instance is not None:
            _instance.close()
        _instance = None


def set_stderr_level(level: str) -> None:
    """Set the threshold of the stderr mirror (``DEBUG``/``INFO``/``WARN``/``ERROR``)."""
    levels = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
    }
    _stdlib.setLevel(levels.get(level, logging.WARNING))


def configure_logger(log_dir: Path | str | None = None) -> WoofLogger:
    """Replace the process-wide logger with one writing to *log_dir*."""
    reset_logger()
    return get_logger(log_dir)
