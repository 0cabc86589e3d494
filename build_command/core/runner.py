"""Command runner for build-time scripts.

Build scripts usually run without a console, so the output of a failing
subprocess is lost unless it is captured and re-emitted. `run` does exactly
that: it runs the command silently and, if anything goes wrong, prints the
combined stdout/stderr and aborts the process.

`run_command` is the same operation without the abort, for callers that want
to decide what to do with a `CommandError` themselves.

No timeout is applied anywhere: a hung child hangs the caller.
"""

from __future__ import annotations

import subprocess

import typer

from build_command.core.command_line import split_command_line
from build_command.core.drain import decode_output, drain_pipes
from build_command.core.errors import (
    CommandError,
    CommandFailed,
    SpawnFailure,
    StreamReadFailure,
    WaitFailure,
)
from build_command.core.types import ExitStatus
from build_command.formatters import plain_fmt

ABORT_EXIT_CODE = 1


def run_command(command_line: str) -> ExitStatus:
    """Run a whitespace-separated command line and raise on any failure.

    The program (first token) is looked up on PATH and started without a shell,
    with stdout and stderr piped back to this process. Both pipes are drained
    together, then the child is waited for.

    Args:
        command_line: Program name and arguments separated by whitespace.

    Returns:
        The successful exit status. Captured output is discarded on success.

    Raises:
        EmptyCommand: If the command line has no tokens.
        SpawnFailure: If the program cannot be started.
        StreamReadFailure: If reading the child's output fails.
        WaitFailure: If the exit status cannot be retrieved.
        CommandFailed: If the child exits non-zero or is killed by a signal.
    """
    argv = split_command_line(command_line)

    try:
        child = subprocess.Popen(argv, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
    except OSError as exc:
        raise SpawnFailure(command_line, exc) from exc

    try:
        try:
            output = drain_pipes(command_line, child.stdout, child.stderr)
        except StreamReadFailure:
            child.kill()
            child.wait()
            raise

        try:
            returncode = child.wait()
        except OSError as exc:
            raise WaitFailure(command_line, exc) from exc
    finally:
        child.stdout.close()
        child.stderr.close()

    status = ExitStatus(returncode)
    if not status.success:
        raise CommandFailed(command_line, status, decode_output(output))
    return status


def run(command_line: str) -> None:
    """Run a command line, aborting the process with a diagnostic on failure.

    Prints nothing when the command succeeds. On any failure the diagnostic
    (failure kind, command line, exit code and the combined output) goes to
    stderr and `SystemExit` is raised.
    """
    try:
        run_command(command_line)
    except CommandError as err:
        typer.echo(plain_fmt.render(err), err=True)
        raise SystemExit(ABORT_EXIT_CODE) from err
