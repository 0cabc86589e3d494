from __future__ import annotations

import sys
import textwrap
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def script(tmp_path: Path) -> Callable[..., str]:
    """Write a Python child script and return a command line that runs it."""

    def _write(source: str, name: str = "child.py") -> str:
        path = tmp_path / name
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        cmd = f"{sys.executable} {path}"
        if len(cmd.split()) != 2:
            pytest.skip("interpreter or tmp path contains whitespace")
        return cmd

    return _write
