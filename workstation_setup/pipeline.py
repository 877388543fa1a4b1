from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Protocol, Sequence

from .errors import SetupError

if TYPE_CHECKING:
    from .context import SetupContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    step_id: str
    ok: bool
    message: str = ""
    changed: bool = False
    exit_code: int = 0

    @classmethod
    def succeeded(cls, step_id: str, message: str = "", *, changed: bool = False) -> "StepResult":
        return cls(step_id=step_id, ok=True, message=message, changed=changed)

    @classmethod
    def failed(cls, step_id: str, message: str, *, exit_code: int = 1) -> "StepResult":
        return cls(step_id=step_id, ok=False, message=message, exit_code=exit_code)


class Step(Protocol):
    """A single idempotent step."""

    step_id: str
    title: str

    def run(self, ctx: "SetupContext") -> StepResult:
        ...


@dataclass(frozen=True)
class PipelineResult:
    results: List[StepResult]
    failed: Optional[StepResult]

    @property
    def ok(self) -> bool:
        return self.failed is None

    @property
    def ran_steps(self) -> List[str]:
        return [r.step_id for r in self.results]

    @property
    def exit_code(self) -> int:
        return 0 if self.failed is None else self.failed.exit_code


def run_pipeline(
    *,
    ctx: "SetupContext",
    steps: Sequence[Step],
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
) -> PipelineResult:
    """Run steps in order; the first failed step ends the run.

    Nothing that already ran is undone.
    """

    known = {s.step_id for s in steps}
    for name, value in (("start_at", start_at), ("stop_after", stop_after)):
        if value is not None and value not in known:
            raise SetupError(f"Unknown step for {name}: {value}")

    results: List[StepResult] = []
    started = start_at is None

    for step in steps:
        if not started:
            if step.step_id == start_at:
                started = True
            else:
                continue

        logger.info("Running step %s (%s)", step.step_id, step.title)
        try:
            result = step.run(ctx)
        except SetupError as e:
            result = StepResult.failed(step.step_id, str(e), exit_code=e.exit_code)
        results.append(result)

        if not result.ok:
            logger.error("Step %s failed: %s", step.step_id, result.message)
            return PipelineResult(results=results, failed=result)

        if result.message:
            logger.info("%s", result.message)

        if stop_after is not None and step.step_id == stop_after:
            logger.info("Stopping after %s", stop_after)
            break

    return PipelineResult(results=results, failed=None)
