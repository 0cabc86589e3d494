"""Load step files: YAML lists of command lines run in order."""

from __future__ import annotations

from pathlib import Path

import yaml


def load_steps(path: Path) -> list[str]:
    """Load the command lines of a step file.

    The document is either a list of strings or a mapping with a ``steps`` key
    holding that list.

    Args:
        path: Path to the YAML step file.

    Returns:
        The command lines, in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid YAML, has no steps, or contains an
            entry that is not a non-blank string.
    """
    if not path.exists():
        raise FileNotFoundError(f"Step file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc

    if isinstance(data, dict):
        data = data.get("steps")
    if not isinstance(data, list) or not data:
        raise ValueError(f"{path} must contain a non-empty list of steps")

    for index, step in enumerate(data, start=1):
        if not isinstance(step, str) or not step.strip():
            raise ValueError(f"Step {index} in {path} is not a command line: {step!r}")
    return data
