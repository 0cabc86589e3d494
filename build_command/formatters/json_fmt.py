"""JSON formatter."""

from __future__ import annotations

import json

from build_command.core.errors import CommandError


def render(error: CommandError) -> str:
    """
    Render a failure as pretty JSON.

    Args:
        error: The failure to render. Its ``to_dict()`` payload always holds
            ``kind``, ``message``, ``command`` and ``output``; some kinds add
            ``exit_code``, ``signal``, ``streams`` or ``os_error``.

    Returns:
        A JSON document with 2-space indentation and sorted keys.
    """
    return json.dumps(error.to_dict(), indent=2, sort_keys=True, default=str)
