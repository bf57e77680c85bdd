# src/weekrunner/tasks/task_api.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from collections.abc import Iterator
from pathlib import Path
from typing import IO

from ..core.ports import Runnable
from .task_models import RunnableStatus, RunState

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def open_output_sinks(
    stdout_path: str | Path,
    stderr_path: str | Path,
) -> Iterator[tuple[IO[bytes], IO[bytes]]]:
    """
    Open (truncate) two files to receive a task's stdout and stderr.

    The child process gets its own copies of the descriptors, so closing the
    sinks here does not cut off a script that is still running.
    """
    out_p = Path(stdout_path)
    err_p = Path(stderr_path)
    out_p.parent.mkdir(parents=True, exist_ok=True)
    err_p.parent.mkdir(parents=True, exist_ok=True)

    with open(out_p, "wb") as out_f, open(err_p, "wb") as err_f:
        yield out_f, err_f


async def wait_for_exit(
    task: Runnable,
    *,
    poll_interval: float = 0.05,
    timeout: float | None = None,
) -> RunnableStatus:
    """
    Poll task.status() until it is no longer RUNNING.

    Raises TimeoutError if `timeout` seconds pass first; the task is left as is
    (killing it is the caller's decision).

    status() is called directly on the event loop, so it must stay
    non-blocking: BashScriptTask only holds its lock around Popen.poll().
    A Runnable whose status() can block must be wrapped in asyncio.to_thread
    by the caller.
    """
    sleep_s = max(0.01, float(poll_interval))
    deadline = None if timeout is None else time.monotonic() + float(timeout)

    while True:
        status = task.status()
        if status.state != RunState.RUNNING:
            return status

        if deadline is not None and time.monotonic() >= deadline:
            logger.warning("Task %r still running after %.1fs", task, timeout)
            raise TimeoutError(f"Task still running after {timeout}s")

        await asyncio.sleep(sleep_s)
