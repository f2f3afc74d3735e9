"""Tests for ShopLogger and ActivityLog."""

import json
from pathlib import Path

import pytest

from sweetshop.logger import ActivityLog, ShopLogger


class TestShopLogger:
    """ShopLogger tests."""

    def test_init_creates_log_directory(self, tmp_path: Path) -> None:
        log_dir = tmp_path / "logs" / "nested"
        ShopLogger(log_dir=log_dir)
        assert log_dir.exists()

    def test_log_writes_json_to_file(self, tmp_path: Path) -> None:
        logger = ShopLogger(log_dir=tmp_path, console=False)

        logger.log("INFO", "Purchase recorded", sweet_id=1001)

        log_files = list(tmp_path.glob("sweetshop-*.log"))
        assert len(log_files) == 1

        entry = json.loads(log_files[0].read_text().splitlines()[0])
        assert entry["level"] == "INFO"
        assert entry["message"] == "Purchase recorded"
        assert entry["sweet_id"] == 1001
        assert entry["logger"] == "sweetshop"
        assert "timestamp" in entry

    def test_console_output(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        logger = ShopLogger(log_dir=tmp_path)
        logger.warning("Low stock")

        captured = capsys.readouterr()
        assert "[WARNING]" in captured.out
        assert "Low stock" in captured.out

    def test_console_disabled(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        logger = ShopLogger(log_dir=tmp_path, console=False)
        logger.info("Quiet")
        assert capsys.readouterr().out == ""

    def test_level_helpers(self, tmp_path: Path) -> None:
        logger = ShopLogger(log_dir=tmp_path, console=False)
        logger.debug("d")
        logger.info("i")
        logger.warning("w")
        logger.error("e")

        log_file = next(tmp_path.glob("sweetshop-*.log"))
        levels = [json.loads(line)["level"] for line in log_file.read_text().splitlines()]
        assert levels == ["DEBUG", "INFO", "WARNING", "ERROR"]

    def test_custom_name_prefix(self, tmp_path: Path) -> None:
        ShopLogger(name="till", log_dir=tmp_path, console=False).info("x")
        assert len(list(tmp_path.glob("till-*.log"))) == 1


class TestActivityLog:
    """ActivityLog tests."""

    @pytest.fixture
    def activity(self, tmp_path: Path) -> ActivityLog:
        return ActivityLog(log_dir=tmp_path, session_id="session-test")

    def test_session_start_written(self, activity: ActivityLog, tmp_path: Path) -> None:
        assert activity.get_log_path() == tmp_path / "session-test.ndjson"
        events = activity.read_events()
        assert len(events) == 1
        assert events[0]["type"] == ActivityLog.SESSION_START
        assert events[0]["session_id"] == "session-test"

    def test_generated_session_id(self, tmp_path: Path) -> None:
        log = ActivityLog(log_dir=tmp_path)
        assert log.session_id.startswith("session-")
        assert log.log_file.exists()

    def test_each_line_is_json(self, activity: ActivityLog) -> None:
        activity.log_sweet_added({"id": 1, "name": "Peda"})
        activity.log_sweet_deleted(1)

        lines = activity.get_log_path().read_text().splitlines()
        assert len(lines) == 3
        for line in lines:
            event = json.loads(line)
            assert {"timestamp", "session_id", "type", "data"} <= set(event)

    def test_read_events_filter(self, activity: ActivityLog) -> None:
        activity.log_stock_change(ActivityLog.PURCHASE, 1001, 5, 15)
        activity.log_stock_change(ActivityLog.RESTOCK, 1001, 10, 25)

        purchases = activity.read_events(ActivityLog.PURCHASE)
        assert len(purchases) == 1
        assert purchases[0]["data"] == {"sweet_id": 1001, "amount": 5, "quantity": 15}

    def test_read_events_skips_bad_lines(self, activity: ActivityLog) -> None:
        with open(activity.get_log_path(), "a") as f:
            f.write("not json\n\n")
        activity.log_sweet_deleted(3)
        assert len(activity.read_events()) == 2

    def test_session_summary(self, activity: ActivityLog) -> None:
        activity.log_sweet_added({"id": 1})
        activity.log_sweet_added({"id": 2})
        activity.log_sweet_deleted(2)
        activity.log_stock_change(ActivityLog.PURCHASE, 1, 4, 6)
        activity.log_stock_change(ActivityLog.PURCHASE, 1, 1, 5)
        activity.log_stock_change(ActivityLog.RESTOCK, 1, 20, 25)
        activity.log_failure("purchase", 1, "Insufficient stock")
        activity.log_sweet_updated(1, {"price": 9.0})

        summary = activity.get_session_summary()

        assert summary["session_id"] == "session-test"
        assert summary["total_events"] == 9
        assert summary["added_count"] == 2
        assert summary["deleted_count"] == 1
        assert summary["units_sold"] == 5
        assert summary["units_restocked"] == 20
        assert summary["failed_count"] == 1
        assert summary["duration_seconds"] >= 0

    def test_end_session(self, activity: ActivityLog) -> None:
        activity.log_stock_change(ActivityLog.PURCHASE, 1, 2, 8)
        activity.end_session()

        end = activity.read_events(ActivityLog.SESSION_END)
        assert len(end) == 1
        assert end[0]["data"]["units_sold"] == 2
