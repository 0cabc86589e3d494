"""Rich formatter for interactive CLI output."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from build_command.core.errors import CommandError


def render(error: CommandError, out: Console) -> None:
    """
    Print a failure as a Rich panel followed by the captured output.

    The panel shows the failure message and, when present, the exit code,
    signal, failing streams and OS error. The output is printed verbatim after
    the panel, with markup and highlighting disabled so build logs containing
    brackets come through unchanged.

    Args:
        error: The failure to render.
        out: Console to print to, normally a stderr console.

    Returns:
        None
    """
    data = error.to_dict()

    body = Text(error.message, style="bold")
    for key in ("exit_code", "signal", "streams", "os_error"):
        if key in data and data[key] not in (None, []):
            value = data[key]
            if isinstance(value, list):
                value = ", ".join(value)
            body.append(f"\n{key}={value}", style="default")

    out.print(Panel.fit(body, title=error.kind, border_style="red"))

    if error.output:
        out.print(error.output, markup=False, highlight=False, emoji=False, soft_wrap=True)
