"""Models for test run results."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, kw_only=True)
class RunResult:
    """Outcome of one page test run.

    ``output`` and ``status_text`` hold what was read from the page, when the
    run got far enough to read them.
    """

    status: Literal["success", "failure", "timeout", "error"]
    duration: float
    message: str | None = None
    output: str | None = None
    status_text: str | None = None

    @property
    def exit_code(self) -> int:
        """Process exit code for this result."""
        return 0 if self.status == "success" else 1
