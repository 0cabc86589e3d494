"""Markdown formatter suitable for CI job summaries."""

from __future__ import annotations

from build_command.core.errors import CommandError


def _md_table(rows: list[list[str]]) -> str:
    header = "| " + " | ".join(rows[0]) + " |"
    sep = "|" + "|".join(["---"] * len(rows[0])) + "|"
    body = "\n".join(["| " + " | ".join(r) + " |" for r in rows[1:]])
    return "\n".join([header, sep, body])


def _fence(text: str) -> str:
    fence = "```"
    while fence in text:
        fence += "`"
    return fence


def render(error: CommandError) -> str:
    """
    Render a failure as Markdown.

    Args:
        error: The failure to render.

    Returns:
        str: A heading with the failure kind, a table of the ``to_dict()``
             fields other than the output, and the captured output in a fenced
             block when there is any.
    """
    data = error.to_dict()
    output = data.pop("output", "")
    data.pop("kind", None)

    lines: list[str] = []
    lines.append(f"## build-command: `{error.kind}`")
    lines.append("")

    rows = [["Field", "Value"]]
    for key, value in data.items():
        if isinstance(value, list):
            value = ", ".join(str(v) for v in value)
        shown = "-" if value is None else str(value).replace("|", "\\|")
        rows.append([key, f"`{shown}`" if key == "command" else shown])
    lines.append(_md_table(rows))
    lines.append("")

    if output:
        fence = _fence(output)
        lines.append("### Output")
        lines.append(fence)
        lines.append(output.rstrip("\n"))
        lines.append(fence)
        lines.append("")

    return "\n".join(lines).strip()
