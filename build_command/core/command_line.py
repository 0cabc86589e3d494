"""Command line tokenizer."""

from __future__ import annotations

from build_command.core.errors import EmptyCommand


def split_command_line(command_line: str) -> list[str]:
    """
    Split a command line into program name and arguments.

    Tokens are separated by runs of whitespace. There is no quoting, escaping or
    globbing: every token is passed to the program verbatim.

    Args:
        command_line: The command line, e.g. ``"cargo build --release"``.

    Returns:
        list[str]: The program name followed by its arguments.

    Raises:
        EmptyCommand: If the command line contains no tokens.

    Example:
        >>> split_command_line("  make  -C vendor ")
        ['make', '-C', 'vendor']
    """
    words = command_line.split()
    if not words:
        raise EmptyCommand(command_line)
    return words
