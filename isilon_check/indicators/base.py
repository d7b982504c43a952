"""
Check result model.

Every evaluator and the runner produce a CheckResult; the CLI renders it.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from isilon_check.core.enums import CheckStatus

CHECK_NAME = "ISILON_SPACE"


class CheckResult(BaseModel):
    """Verdict of one check run."""

    model_config = ConfigDict(frozen=True)

    status: CheckStatus
    message: str
    perfdata: str | None = None

    @property
    def exit_code(self) -> int:
        return self.status.exit_code

    def render(self) -> str:
        """Single stdout line in plugin output format."""
        if self.perfdata:
            return f"{self.message} | {self.perfdata}"
        return self.message

    @classmethod
    def unknown(cls, reason: str) -> CheckResult:
        """UNKNOWN result for failures before or during the fetch."""
        return cls(
            status=CheckStatus.UNKNOWN,
            message=f"{CHECK_NAME} {CheckStatus.UNKNOWN.value} - {reason}",
        )
