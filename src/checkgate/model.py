# model.py
from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Step:
    """A single check: one external command run from the project root."""
    name: str
    program: str
    args: Tuple[str, ...] = ()
    cwd: str | None = None

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    @property
    def display(self) -> str:
        """Shell-quoted command line, as shown in the trace."""
        return shlex.join(self.argv)


# StepResult.kind values
OK = "ok"
FAILED = "failed"
LAUNCH_FAILED = "launch_failed"


@dataclass(frozen=True)
class StepResult:
    """Outcome of running one step. Only `ok` drives the pipeline."""
    step: Step
    exit_code: int
    kind: str = OK
    duration: float = 0.0

    @property
    def ok(self) -> bool:
        return self.kind == OK


@dataclass
class PipelineResult:
    """
    Aggregate outcome of a run.

    `results` holds one entry per attempted step, in order. When the run
    failed, the last entry is the failure and `failed_at` is its index;
    nothing after it was started.
    """
    results: List[StepResult] = field(default_factory=list)
    failed_at: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.failed_at is None

    @property
    def failure(self) -> Optional[StepResult]:
        if self.failed_at is None:
            return None
        return self.results[self.failed_at]

    @property
    def exit_code(self) -> int:
        failure = self.failure
        if failure is None:
            return 0
        # a failure always exits non-zero, whatever the child reported
        return failure.exit_code or 1
