from __future__ import annotations

from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from build_command.core.errors import CommandError
from build_command.core.runner import ABORT_EXIT_CODE, run_command
from build_command.core.steps import load_steps
from build_command.formatters import json_fmt, markdown_fmt, plain_fmt, rich_fmt

app = typer.Typer(add_completion=False)
console = Console()
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    plain = "plain"
    rich = "rich"
    json = "json"
    markdown = "markdown"


def report(error: CommandError, fmt: OutputFormat) -> None:
    """Write the diagnostic for a failed run to stderr in the requested format."""
    if fmt is OutputFormat.rich:
        rich_fmt.render(error, out=err_console)
    elif fmt is OutputFormat.json:
        typer.echo(json_fmt.render(error), err=True)
    elif fmt is OutputFormat.markdown:
        typer.echo(markdown_fmt.render(error), err=True)
    else:
        typer.echo(plain_fmt.render(error), err=True)


# ----------------------------
# commands
# ----------------------------

@app.command("run")
def run_cmd(
    command: list[str] = typer.Argument(
        ..., help="Command line to run; quote it or put it after --"),
    fmt: OutputFormat = typer.Option(
        OutputFormat.plain, "--format", envvar="BUILD_COMMAND_FORMAT",
        help="Diagnostic format on failure: plain, rich, json or markdown"),
):
    """Run one command; print its combined output only if it fails."""
    command_line = " ".join(command)
    try:
        run_command(command_line)
    except CommandError as err:
        report(err, fmt)
        raise typer.Exit(code=ABORT_EXIT_CODE)


@app.command("steps")
def steps_cmd(
    step_file: Path = typer.Argument(..., help="YAML file listing command lines"),
    fmt: OutputFormat = typer.Option(
        OutputFormat.plain, "--format", envvar="BUILD_COMMAND_FORMAT",
        help="Diagnostic format on failure: plain, rich, json or markdown"),
    quiet: bool = typer.Option(False, "--quiet", help="Do not print step progress"),
):
    """Run each command line of a step file in order, stopping at the first failure."""
    try:
        steps = load_steps(step_file)
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="STEP_FILE")

    total = len(steps)
    for index, command_line in enumerate(steps, start=1):
        if not quiet:
            console.print(f"[cyan]{escape(f'[{index}/{total}] {command_line}')}[/cyan]")
        try:
            run_command(command_line)
        except CommandError as err:
            report(err, fmt)
            raise typer.Exit(code=ABORT_EXIT_CODE)


if __name__ == "__main__":
    app()
