# src/weekrunner/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Consumers depend on the Runnable Protocol rather than on BashScriptTask, so
other kinds of work can be plugged in later and tests can use fakes.
"""

from typing import IO, Any, Protocol

from ..tasks.task_models import RunnableStatus

OutputSink = IO[Any]
# Any open, writable file object backed by a real descriptor (fileno()).


class Runnable(Protocol):
    """A unit of work that can be started, polled and killed."""

    def start(self, stdout: OutputSink, stderr: OutputSink) -> RunnableStatus: ...
    def status(self) -> RunnableStatus: ...
    def kill(self) -> RunnableStatus: ...
