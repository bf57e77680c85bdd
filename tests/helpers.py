# tests/helpers.py

from __future__ import annotations

import time

import pytest

from weekrunner.core.ports import Runnable
from weekrunner.tasks.task_models import RunnableStatus, RunState


def poll_until_done(task: Runnable, timeout: float = 10.0) -> RunnableStatus:
    """Poll status() until the task leaves RUNNING (or fail the test)."""
    deadline = time.monotonic() + timeout
    status = task.status()
    while status.state == RunState.RUNNING:
        if time.monotonic() >= deadline:
            pytest.fail(f"task still running after {timeout}s")
        time.sleep(0.02)
        status = task.status()
    return status


class FakeRunnable:
    """
    Scripted Runnable for helper tests.

    status() walks through `states`, repeating the last one forever.
    """

    def __init__(self, states: list[RunnableStatus]) -> None:
        self.states = list(states)
        self.calls = 0

    def start(self, stdout, stderr) -> RunnableStatus:
        return RunnableStatus.running()

    def status(self) -> RunnableStatus:
        idx = min(self.calls, len(self.states) - 1)
        self.calls += 1
        return self.states[idx]

    def kill(self) -> RunnableStatus:
        return RunnableStatus.killed()
