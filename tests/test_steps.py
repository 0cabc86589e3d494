from __future__ import annotations

from pathlib import Path

import pytest

from build_command.core.steps import load_steps


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "steps.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_mapping_with_steps(tmp_path):
    path = _write(tmp_path, "steps:\n  - make -C vendor\n  - protoc --version\n")
    assert load_steps(path) == ["make -C vendor", "protoc --version"]


def test_bare_list(tmp_path):
    path = _write(tmp_path, "- echo one\n- echo two\n")
    assert load_steps(path) == ["echo one", "echo two"]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_steps(tmp_path / "nope.yml")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "steps: []\n",
        "other: [echo]\n",
        "steps:\n  - echo ok\n  - 42\n",
        "steps:\n  - '   '\n",
        "steps: [unterminated\n",
    ],
)
def test_invalid_step_files(tmp_path, text):
    with pytest.raises(ValueError):
        load_steps(_write(tmp_path, text))
