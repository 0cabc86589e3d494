"""Drain a child's stdout and stderr pipes into one buffer without deadlocking.

A child that fills one pipe while the parent blocks reading the other stalls
forever. The loop below never blocks on a single stream: each pass waits for
*either* pipe to become readable and reads only from the ready ones, so both
kernel buffers keep emptying.

Draining ends once a read on both streams has yielded zero bytes. That is used
as a stand-in for "the child is done writing", which it is not always: a child
that closes or hands off its standard streams and keeps running ends the drain
early, and whatever it writes afterwards through other descriptors is not
captured. The caller still waits for the real exit afterwards.
"""

from __future__ import annotations

import os
import selectors
from typing import IO

from build_command.core.errors import StreamReadFailure

CHUNK_SIZE = 64 * 1024


def decode_output(data: bytes) -> str:
    """Decode captured output as UTF-8, replacing invalid sequences."""
    return data.decode("utf-8", errors="replace")


def drain_pipes(command_line: str, stdout: IO[bytes], stderr: IO[bytes]) -> bytes:
    """
    Read both pipes until each reports end-of-stream.

    Bytes are appended to a single buffer in the order the loop observes them.
    Order within one stream is preserved; order across the two streams is only
    as good as the polling.

    Args:
        command_line: Original command line, used for error reporting.
        stdout: Readable pipe connected to the child's standard output.
        stderr: Readable pipe connected to the child's standard error.

    Returns:
        bytes: The combined output of both streams.

    Raises:
        StreamReadFailure: If polling or reading either pipe fails. The error
            names the failing stream(s) and carries the output read so far.
    """
    output = bytearray()
    names = {stdout.fileno(): "stdout", stderr.fileno(): "stderr"}

    with selectors.DefaultSelector() as selector:
        for fd, name in names.items():
            selector.register(fd, selectors.EVENT_READ, name)

        while selector.get_map():
            try:
                ready = selector.select()
            except OSError as exc:
                raise StreamReadFailure(
                    command_line, tuple(names.values()), exc, decode_output(bytes(output))
                ) from exc

            for key, _ in ready:
                try:
                    chunk = os.read(key.fd, CHUNK_SIZE)
                except OSError as exc:
                    raise StreamReadFailure(
                        command_line, (key.data,), exc, decode_output(bytes(output))
                    ) from exc
                if chunk:
                    output += chunk
                else:
                    # end-of-stream; stays at zero bytes from here on
                    selector.unregister(key.fd)

    return bytes(output)
