"""Data models for the build orchestrator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class BuildPhase(str, Enum):
    """Build lifecycle phases reported to the project webhooks."""
    PULL = "pull"
    SSG_BUILD = "ssgbuild"
    PUBLISH = "publish"


class StepStatus(str, Enum):
    """Status of a build step."""
    PENDING = "pending"
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class StepResult:
    """Outcome of a single build step."""
    name: str
    status: StepStatus = StepStatus.PENDING
    return_code: int = 0
    error: str = ""
    duration_seconds: float = 0.0

    @property
    def failed(self) -> bool:
        return self.status == StepStatus.FAILED

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "status": self.status.value,
            "return_code": self.return_code,
            "error": self.error,
            "duration_seconds": round(self.duration_seconds, 3),
        }


@dataclass
class BuildReport:
    """Result of a full orchestrator run."""
    steps: list[StepResult] = field(default_factory=list)
    started_at: str = ""
    completed_at: str = ""

    @property
    def failed_step(self) -> StepResult | None:
        return next((s for s in self.steps if s.failed), None)

    @property
    def success(self) -> bool:
        return self.failed_step is None and all(
            s.status in (StepStatus.SUCCESS, StepStatus.SKIPPED) for s in self.steps
        )

    @property
    def exit_code(self) -> int:
        """0 on success, otherwise the failing step's return code (never 0)."""
        failed = self.failed_step
        if failed is not None:
            return failed.return_code or 1
        return 0 if self.success else 1

    def get_step(self, name: str) -> StepResult | None:
        return next((s for s in self.steps if s.name == name), None)

    def to_dict(self) -> dict:
        return {
            "started_at": self.started_at,
            "completed_at": self.completed_at,
            "success": self.success,
            "exit_code": self.exit_code,
            "steps": [s.to_dict() for s in self.steps],
        }
