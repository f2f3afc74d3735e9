"""
Sweet Shop logging

ShopLogger: human-readable console line plus a JSON line per entry in a
daily log file.
ActivityLog: NDJSON session record of inventory mutations.
"""

from __future__ import annotations

import fcntl
import json
from datetime import datetime
from pathlib import Path
from typing import Any


class ShopLogger:
    """
    Console: text (HH:MM:SS [LEVEL] message)
    File: JSON lines, one file per day
    """

    def __init__(
        self,
        name: str = "sweetshop",
        log_dir: Path | None = None,
        console: bool = True,
    ) -> None:
        """
        Args:
            name: Logger name, used as the log file prefix
            log_dir: Log directory (default: .sweetshop/logs)
            console: Also print a text line per entry
        """
        self.name = name
        self.console = console
        self.log_dir = log_dir if log_dir else Path(".sweetshop/logs")
        self.log_dir.mkdir(parents=True, exist_ok=True)

    def _get_log_file(self) -> Path:
        """Path of today's log file."""
        today = datetime.now().strftime("%Y%m%d")
        return self.log_dir / f"{self.name}-{today}.log"

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        """
        Write a structured log entry

        Args:
            level: DEBUG, INFO, WARNING or ERROR
            message: Log message
            **kwargs: Extra structured fields
        """
        now = datetime.now()

        if self.console:
            time_str = now.strftime("%H:%M:%S")
            print(f"{time_str} [{level}] {message}")

        log_entry = {
            "timestamp": now.isoformat(),
            "level": level,
            "logger": self.name,
            "message": message,
            **kwargs,
        }
        with open(self._get_log_file(), "a") as f:
            f.write(json.dumps(log_entry, ensure_ascii=False) + "\n")

    def debug(self, message: str, **kwargs: Any) -> None:
        self.log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self.log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.log("ERROR", message, **kwargs)


class ActivityLog:
    """
    NDJSON session log of inventory activity

    Appends events to <log_dir>/session-<timestamp>.ndjson, one JSON object
    per line.
    """

    SESSION_START = "session_start"
    SESSION_END = "session_end"
    SWEET_ADDED = "sweet_added"
    SWEET_DELETED = "sweet_deleted"
    SWEET_UPDATED = "sweet_updated"
    PURCHASE = "purchase"
    RESTOCK = "restock"
    OPERATION_FAILED = "operation_failed"

    def __init__(
        self, log_dir: Path | None = None, session_id: str | None = None
    ) -> None:
        """
        Args:
            log_dir: Log directory (default: .sweetshop/logs)
            session_id: Session id (default: generated from the current time)
        """
        self.log_dir = log_dir if log_dir else Path(".sweetshop/logs")
        self.log_dir.mkdir(parents=True, exist_ok=True)

        if session_id:
            self.session_id = session_id
        else:
            timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
            self.session_id = f"session-{timestamp}"

        self.log_file = self.log_dir / f"{self.session_id}.ndjson"
        self._session_start_time = datetime.now()

        self.log_event(self.SESSION_START, {"session_id": self.session_id})

    def log_event(self, event_type: str, data: dict | None = None) -> None:
        """
        Append one event under an exclusive flock

        Output format:
        {"timestamp": "2026-...", "session_id": "...", "type": "purchase", "data": {...}}
        """
        event = {
            "timestamp": datetime.now().isoformat(),
            "session_id": self.session_id,
            "type": event_type,
            "data": data or {},
        }

        with open(self.log_file, "a") as f:
            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
            try:
                f.write(json.dumps(event, ensure_ascii=False) + "\n")
                f.flush()
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)

    def log_sweet_added(self, sweet: dict[str, Any]) -> None:
        self.log_event(self.SWEET_ADDED, sweet)

    def log_sweet_deleted(self, sweet_id: int) -> None:
        self.log_event(self.SWEET_DELETED, {"sweet_id": sweet_id})

    def log_sweet_updated(self, sweet_id: int, changes: dict[str, Any]) -> None:
        self.log_event(self.SWEET_UPDATED, {"sweet_id": sweet_id, "changes": changes})

    def log_stock_change(
        self, event_type: str, sweet_id: int, amount: int, quantity: int
    ) -> None:
        """Purchase or restock event; quantity is the stock after the change."""
        self.log_event(
            event_type,
            {"sweet_id": sweet_id, "amount": amount, "quantity": quantity},
        )

    def log_failure(self, operation: str, sweet_id: int | None, error: str) -> None:
        self.log_event(
            self.OPERATION_FAILED,
            {"operation": operation, "sweet_id": sweet_id, "error": error},
        )

    def end_session(self) -> None:
        self.log_event(self.SESSION_END, self.get_session_summary())

    def get_log_path(self) -> Path:
        return self.log_file

    def read_events(self, event_type: str | None = None) -> list[dict]:
        """
        Read events back from the log file

        Args:
            event_type: Only return events of this type (None for all)
        """
        if not self.log_file.exists():
            return []

        events = []
        with open(self.log_file) as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    event = json.loads(line)
                except json.JSONDecodeError:
                    continue
                if event_type is None or event.get("type") == event_type:
                    events.append(event)

        return events

    def get_session_summary(self) -> dict:
        """
        Summarize the session so far

        Returns:
            {
                "session_id": "...",
                "total_events": 12,
                "added_count": 2,
                "deleted_count": 1,
                "units_sold": 25,
                "units_restocked": 40,
                "failed_count": 1,
                "duration_seconds": 300.0
            }
        """
        events = self.read_events()

        added_count = 0
        deleted_count = 0
        units_sold = 0
        units_restocked = 0
        failed_count = 0

        for event in events:
            event_type = event.get("type")
            data = event.get("data", {})

            if event_type == self.SWEET_ADDED:
                added_count += 1
            elif event_type == self.SWEET_DELETED:
                deleted_count += 1
            elif event_type == self.PURCHASE:
                units_sold += data.get("amount", 0)
            elif event_type == self.RESTOCK:
                units_restocked += data.get("amount", 0)
            elif event_type == self.OPERATION_FAILED:
                failed_count += 1

        duration_seconds = (
            datetime.now() - self._session_start_time
        ).total_seconds()

        return {
            "session_id": self.session_id,
            "total_events": len(events),
            "added_count": added_count,
            "deleted_count": deleted_count,
            "units_sold": units_sold,
            "units_restocked": units_restocked,
            "failed_count": failed_count,
            "duration_seconds": duration_seconds,
        }
