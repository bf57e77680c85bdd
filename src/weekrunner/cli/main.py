# src/weekrunner/cli/main.py

"""
CLI entrypoint.

Initializes logging from settings, then either runs one script as a monitored task
or prints the availability calendar built from settings:

    weekrunner run path/to/script.sh [--stdout FILE] [--stderr FILE] [--timeout SECONDS]
    weekrunner calendar [--day tue] [--status free|busy]

Exit codes: 0 ok, 1 failed/killed/timed out, 2 rejected input (script or settings).
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from ..availability.day_schedule import TimeStatus
from ..availability.week_schedule import Weekday, WeekSchedule
from ..config import Settings, get_settings
from ..core.errors import ScriptValidationError
from ..logging_setup import setup_logging
from ..tasks.bash_task import BashScriptTask
from ..tasks.task_api import open_output_sinks, wait_for_exit
from ..tasks.task_models import RunState

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="weekrunner", description="Run shell scripts as monitored tasks; inspect the availability calendar.")
    sub = ap.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Run a script and wait for it to exit.")
    run.add_argument("script", type=Path, help="Executable script to run.")
    run.add_argument("--stdout", type=Path, default=None, help="File for the script's stdout.")
    run.add_argument("--stderr", type=Path, default=None, help="File for the script's stderr.")
    run.add_argument("--shell", default=None, help="Shell interpreter (default: settings.shell).")
    run.add_argument("--timeout", type=float, default=None, help="Kill the script after N seconds.")

    cal = sub.add_parser("calendar", help="Print the weekly free/busy spans built from settings.")
    cal.add_argument("--day", default=None, help="Only this weekday (mon, tuesday, 0-6).")
    cal.add_argument(
        "--status", choices=[s.value for s in TimeStatus], default=None, help="Only spans with this status."
    )
    return ap


def _cmd_run(args: argparse.Namespace, settings: Settings) -> int:
    try:
        task = BashScriptTask(args.script, shell=args.shell or settings.shell)
    except ScriptValidationError as e:
        logger.error("Rejected script: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID

    runs_dir = settings.data_dir / "runs"
    out_path = args.stdout or runs_dir / f"{task.script.stem}.out"
    err_path = args.stderr or runs_dir / f"{task.script.stem}.err"

    # The child keeps its own copies of the descriptors once spawned.
    with open_output_sinks(out_path, err_path) as (out_f, err_f):
        status = task.start(out_f, err_f)

    if status.is_error:
        print(f"error: {status.message}", file=sys.stderr)
        return EXIT_FAILED

    try:
        status = asyncio.run(
            wait_for_exit(task, poll_interval=settings.poll_interval, timeout=args.timeout)
        )
    except TimeoutError:
        status = task.kill()
        print(f"timeout after {args.timeout}s: {status}", file=sys.stderr)
        return EXIT_FAILED
    except KeyboardInterrupt:
        status = task.kill()
        print(f"interrupted: {status}", file=sys.stderr)
        return EXIT_FAILED

    print(f"{task.script}: {status}")
    print(f"stdout: {out_path}")
    print(f"stderr: {err_path}")
    return EXIT_OK if status.state == RunState.FINISHED else EXIT_FAILED


def _cmd_calendar(args: argparse.Namespace, settings: Settings) -> int:
    try:
        week = WeekSchedule.from_settings(settings)
        days = list(Weekday) if args.day is None else [Weekday.coerce(args.day)]
    except ValueError as e:
        # ConfigurationError is a ValueError too.
        logger.error("Cannot build calendar: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID

    statuses = list(TimeStatus) if args.status is None else [TimeStatus(args.status)]
    print(f"interval: {week.interval_size} min, default: {settings.default_status.value}")
    for day in days:
        schedule = week.day(day)
        for status in statuses:
            for start, end in schedule.ranges(status):
                print(f"{day.name.lower():<9} {status.value:<4} {start:%H:%M}-{end:%H:%M:%S}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.debug("Starting %s command=%s", settings.app_name, args.command)

    if args.command == "run":
        return _cmd_run(args, settings)
    if args.command == "calendar":
        return _cmd_calendar(args, settings)
    return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
