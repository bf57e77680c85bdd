# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

ScriptFactory = Callable[..., Path]


@pytest.fixture()
def make_script(tmp_path: Path) -> ScriptFactory:
    """
    Write a throwaway bash script into tmp_path.

    Scripts are executable unless executable=False.
    """

    def _make(name: str, body: str, *, executable: bool = True) -> Path:
        path = tmp_path / name
        path.write_text("#!/usr/bin/env bash\n" + body, "utf-8")
        path.chmod(0o755 if executable else 0o644)
        return path

    return _make


@pytest.fixture()
def sinks(tmp_path: Path):
    """Open stdout/stderr sink files; yields (out_file, err_file, out_path, err_path)."""
    out_path = tmp_path / "task.out"
    err_path = tmp_path / "task.err"
    with open(out_path, "wb") as out_f, open(err_path, "wb") as err_f:
        yield out_f, err_f, out_path, err_path
