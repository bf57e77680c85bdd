# src/weekrunner/core/errors.py

from __future__ import annotations

"""
Error taxonomy.

Only configuration and validation problems are raised. Spawn, runtime and kill
failures of a running script are reported through RunnableStatus instead.
"""

from pathlib import Path


class WeekrunnerError(Exception):
    pass


class ConfigurationError(WeekrunnerError, ValueError):
    """Interval size out of bounds, or a grid index outside the day."""


class ScriptValidationError(WeekrunnerError):
    """A script path was rejected before anything was spawned."""

    def __init__(self, script: Path, message: str) -> None:
        super().__init__(message)
        self.script = script


class ScriptNotFoundError(ScriptValidationError, FileNotFoundError):
    pass


class ScriptNotAFileError(ScriptValidationError, ValueError):
    pass


class ScriptNotExecutableError(ScriptValidationError, PermissionError):
    pass
