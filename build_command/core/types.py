"""Core types shared by the runner and formatters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ExitStatus:
    """Exit status of a finished child process, as reported by `Popen.wait`."""

    returncode: int

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def code(self) -> Optional[int]:
        """Numeric exit code, or None when the child was killed by a signal."""
        return self.returncode if self.returncode >= 0 else None

    @property
    def signal(self) -> Optional[int]:
        return -self.returncode if self.returncode < 0 else None
