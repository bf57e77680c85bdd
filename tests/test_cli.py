# tests/test_cli.py

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

import pytest

from weekrunner.availability.day_schedule import TimeStatus
from weekrunner.cli import main as cli_main
from weekrunner.config import Settings
from weekrunner.logging_setup import LOG_FILE_NAME, setup_logging


@pytest.fixture()
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    """
    Settings pointed at tmp_path, with logging setup stubbed out.

    We keep the root logger alone here so pytest's own capture handlers survive.
    """
    s = dataclasses.replace(
        Settings.from_env(),
        data_dir=tmp_path / "data",
        log_dir=tmp_path / "logs",
        shell="bash",
        poll_interval=0.02,
    )
    monkeypatch.setattr(cli_main, "get_settings", lambda: s)
    monkeypatch.setattr(cli_main, "setup_logging", lambda **_: None)
    return s


def test_run_finished_script(settings: Settings, make_script, capsys) -> None:
    script = make_script("count.sh", "echo 1\necho 2\n")

    rc = cli_main.main(["run", str(script), "--timeout", "10"])

    assert rc == cli_main.EXIT_OK
    out_file = settings.data_dir / "runs" / "count.out"
    assert out_file.read_text("utf-8") == "1\n2\n"
    assert "finished" in capsys.readouterr().out


def test_run_failing_script(settings: Settings, make_script, tmp_path: Path) -> None:
    script = make_script("bad.sh", "weekrunner_no_such_command_xyz\n")
    err_file = tmp_path / "bad.err"

    rc = cli_main.main(["run", str(script), "--stderr", str(err_file), "--timeout", "10"])

    assert rc == cli_main.EXIT_FAILED
    assert "command not found" in err_file.read_text("utf-8")


def test_run_rejects_non_executable(settings: Settings, make_script, capsys) -> None:
    script = make_script("plain.sh", "echo hi\n", executable=False)

    rc = cli_main.main(["run", str(script)])

    assert rc == cli_main.EXIT_INVALID
    assert "not executable" in capsys.readouterr().err


def test_run_timeout_kills_script(settings: Settings, make_script, capsys) -> None:
    script = make_script("sleepy.sh", "exec sleep 30\n")

    rc = cli_main.main(["run", str(script), "--timeout", "0.2"])

    assert rc == cli_main.EXIT_FAILED
    assert "timeout" in capsys.readouterr().err


def test_run_spawn_failure(settings: Settings, make_script) -> None:
    script = make_script("ok.sh", "true\n")
    rc = cli_main.main(["run", str(script), "--shell", "/nonexistent/shell/bin/bash"])
    assert rc == cli_main.EXIT_FAILED


def test_calendar_follows_settings(settings: Settings, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    busy_hourly = dataclasses.replace(settings, interval_minutes=60, default_status=TimeStatus.BUSY)
    monkeypatch.setattr(cli_main, "get_settings", lambda: busy_hourly)

    rc = cli_main.main(["calendar"])

    lines = capsys.readouterr().out.splitlines()
    assert rc == cli_main.EXIT_OK
    assert lines[0] == "interval: 60 min, default: busy"
    assert len(lines) == 8
    assert lines[1].split() == ["monday", "busy", "00:00-23:59:59"]
    assert lines[-1].split() == ["sunday", "busy", "00:00-23:59:59"]


def test_calendar_filters_day_and_status(settings: Settings, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    free = dataclasses.replace(settings, interval_minutes=15, default_status=TimeStatus.FREE)
    monkeypatch.setattr(cli_main, "get_settings", lambda: free)

    assert cli_main.main(["calendar", "--day", "tue", "--status", "busy"]) == cli_main.EXIT_OK
    # Default calendar is all free, so no busy spans are listed.
    assert capsys.readouterr().out.splitlines()[1:] == []

    assert cli_main.main(["calendar", "--day", "1", "--status", "free"]) == cli_main.EXIT_OK
    assert capsys.readouterr().out.splitlines()[1:] == ["tuesday   free 00:00-23:59:59"]


def test_calendar_rejects_bad_interval(settings: Settings, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    bad = dataclasses.replace(settings, interval_minutes=90)
    monkeypatch.setattr(cli_main, "get_settings", lambda: bad)

    assert cli_main.main(["calendar"]) == cli_main.EXIT_INVALID
    assert "Interval size" in capsys.readouterr().err


def test_calendar_rejects_unknown_day(settings: Settings, capsys) -> None:
    assert cli_main.main(["calendar", "--day", "someday"]) == cli_main.EXIT_INVALID
    assert "Unknown weekday" in capsys.readouterr().err


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in handlers:
            h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logger) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)

    assert log_file == tmp_path / "logs" / LOG_FILE_NAME
    assert len(restore_root_logger.handlers) == 2

    logging.getLogger("weekrunner.tests").debug("hello from test")
    for h in restore_root_logger.handlers:
        h.flush()
    assert "hello from test" in log_file.read_text("utf-8")


def test_console_filter_lets_own_logs_through() -> None:
    from weekrunner.logging_setup import _ConsoleNoiseFilter

    f = _ConsoleNoiseFilter()

    def rec(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    assert f.filter(rec("weekrunner.tasks.bash_task", logging.DEBUG))
    assert not f.filter(rec("asyncio", logging.WARNING))
    assert f.filter(rec("asyncio", logging.ERROR))
    assert f.filter(rec("py.warnings", logging.WARNING))
    assert not f.filter(rec("py.warnings", logging.INFO))
