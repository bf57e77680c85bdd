# src/weekrunner/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class RunState(StrEnum):
    """
    Runnable lifecycle state.

    Notes:
    - WAITING is both "never started" and "start attempt failed to spawn".
    - FINISHED, KILLED and ERROR are terminal for one run.
    """

    WAITING = "waiting"
    RUNNING = "running"
    FINISHED = "finished"
    KILLED = "killed"
    ERROR = "error"


@dataclass(slots=True, frozen=True)
class RunnableStatus:
    """Observable state of a task; only ERROR carries a message."""

    state: RunState
    message: str | None = None

    @classmethod
    def waiting(cls) -> RunnableStatus:
        return cls(RunState.WAITING)

    @classmethod
    def running(cls) -> RunnableStatus:
        return cls(RunState.RUNNING)

    @classmethod
    def finished(cls) -> RunnableStatus:
        return cls(RunState.FINISHED)

    @classmethod
    def killed(cls) -> RunnableStatus:
        return cls(RunState.KILLED)

    @classmethod
    def error(cls, message: str) -> RunnableStatus:
        return cls(RunState.ERROR, message)

    @property
    def is_error(self) -> bool:
        return self.state == RunState.ERROR

    @property
    def is_done(self) -> bool:
        return self.state in (RunState.FINISHED, RunState.KILLED, RunState.ERROR)

    def __str__(self) -> str:
        if self.message:
            return f"{self.state.value}: {self.message}"
        return self.state.value
