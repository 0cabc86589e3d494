"""Plain-text formatter, readable in raw build logs."""

from __future__ import annotations

from build_command.core.errors import CommandError


def render(error: CommandError) -> str:
    """Render a failure as a header line followed by the captured output."""
    header = f"{error.kind}: {error.message}"
    if not error.output:
        return header
    return f"{header}\n{error.output}"
