# src/weekrunner/tasks/bash_task.py

from __future__ import annotations

"""
Shell-script task.

BashScriptTask runs one script through a shell as a child process:
- the script path is validated up front (exists, regular file, executable),
- start() spawns `<shell> <script>` with stdout/stderr sent to caller-owned sinks,
- status() polls without blocking,
- kill() sends SIGKILL and does not wait for the process to go away.

Spawn, exit and kill failures never raise; they come back as RunnableStatus.error(...).
"""

import logging
import os
import stat
import subprocess
import threading
from pathlib import Path

from ..core.errors import ScriptNotAFileError, ScriptNotExecutableError, ScriptNotFoundError
from ..core.ports import OutputSink
from .task_models import RunnableStatus, RunState

logger = logging.getLogger(__name__)

DEFAULT_SHELL = "bash"


def _is_executable(path: Path, mode: int) -> bool:
    if os.name == "posix":
        return bool(mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))
    return os.access(path, os.X_OK)


def validate_script(script: str | Path) -> Path:
    """Return the script path, or raise a ScriptValidationError subclass."""
    path = Path(script).expanduser()

    if not path.exists():
        raise ScriptNotFoundError(path, f"Script {path} does not exist")
    if not path.is_file():
        raise ScriptNotAFileError(path, f"Script {path} is not a file")

    mode = path.stat().st_mode
    if not _is_executable(path, mode):
        raise ScriptNotExecutableError(
            path, f"Script {path} is not executable, has permissions {stat.filemode(mode)}"
        )
    return path


class BashScriptTask:
    """
    Runnable backed by a shell script.

    Thread-safety:
    - each task owns one lock; start/status/kill hold it
    - tasks share nothing with each other
    """

    def __init__(self, script: str | Path, *, shell: str = DEFAULT_SHELL) -> None:
        self._script = validate_script(script)
        self._shell = shell
        self._proc: subprocess.Popen[bytes] | None = None
        self._killed = False
        self._last_state = RunState.WAITING
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"BashScriptTask(script={str(self._script)!r}, state={self._last_state.value})"

    @property
    def script(self) -> Path:
        return self._script

    @property
    def pid(self) -> int | None:
        proc = self._proc
        return None if proc is None else proc.pid

    # ---- Runnable ----

    def start(self, stdout: OutputSink, stderr: OutputSink) -> RunnableStatus:
        with self._lock:
            if self._proc is not None and self._proc.poll() is None:
                logger.warning("Script %s already running pid=%s; not starting again", self._script, self._proc.pid)
                return RunnableStatus.running()

            try:
                proc = subprocess.Popen(
                    [self._shell, str(self._script)],
                    stdin=subprocess.DEVNULL,
                    stdout=stdout,
                    stderr=stderr,
                )
            except (OSError, ValueError) as e:
                # No handle was acquired: status() keeps reporting WAITING (or the previous run).
                logger.exception("Failed to start script %s", self._script)
                return RunnableStatus.error(f"Failed to start script: {e}")

            self._proc = proc
            self._killed = False
            self._last_state = RunState.RUNNING
            logger.info("Started script %s pid=%s shell=%s", self._script, proc.pid, self._shell)
            return RunnableStatus.running()

    def status(self) -> RunnableStatus:
        with self._lock:
            return self._observe()

    def kill(self) -> RunnableStatus:
        with self._lock:
            proc = self._proc
            if proc is None:
                return RunnableStatus.waiting()
            if self._killed:
                return RunnableStatus.killed()
            if proc.poll() is not None:
                # Already exited on its own; nothing to signal.
                return self._observe()

            try:
                proc.kill()
            except OSError:
                logger.exception("Failed to kill script %s pid=%s", self._script, proc.pid)
                return RunnableStatus.error("Failed to kill script")

            self._killed = True
            self._last_state = RunState.KILLED
            logger.info("Killed script %s pid=%s", self._script, proc.pid)
            return RunnableStatus.killed()

    # ---- internals ----

    def _observe(self) -> RunnableStatus:
        """Poll and record the state; callers hold the lock."""
        result = self._poll_status()
        if result.state != self._last_state:
            logger.info("Script %s -> %s", self._script, result)
            self._last_state = result.state
        return result

    def _poll_status(self) -> RunnableStatus:
        proc = self._proc
        if proc is None:
            return RunnableStatus.waiting()
        if self._killed:
            # Reap the exit status but keep reporting KILLED.
            proc.poll()
            return RunnableStatus.killed()

        code = proc.poll()
        if code is None:
            return RunnableStatus.running()
        if code == 0:
            return RunnableStatus.finished()
        if code < 0:
            return RunnableStatus.error(f"Script terminated by signal {-code}")
        return RunnableStatus.error(f"Script failed with status {code}")
