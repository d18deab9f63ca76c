"""Outcome records for provisioning steps.

Drivers never raise for an individual item. Instead each item gets an
ItemResult, grouped per step into a StepReport, and a run collects its steps
into a ProvisionReport that decides the final summary and exit code.
"""

from dataclasses import dataclass, field
from enum import Enum


class ItemStatus(Enum):
    INSTALLED = "installed"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class ItemResult:
    """Outcome of one catalog item, setting or repository."""

    name: str
    status: ItemStatus
    detail: str = ""


@dataclass
class StepReport:
    """Outcomes of one driver invocation.

    skipped_reason is set when the whole step was a no-op (tool absent,
    list file missing).
    """

    step: str
    results: list[ItemResult] = field(default_factory=list)
    skipped_reason: str | None = None

    def record(self, name: str, status: ItemStatus, detail: str = "") -> ItemResult:
        result = ItemResult(name=name, status=status, detail=detail)
        self.results.append(result)
        return result

    def count(self, status: ItemStatus) -> int:
        return sum(1 for r in self.results if r.status == status)

    @property
    def failures(self) -> list[ItemResult]:
        return [r for r in self.results if r.status == ItemStatus.FAILED]


@dataclass
class ProvisionReport:
    """All step reports of a run, in execution order."""

    steps: list[StepReport] = field(default_factory=list)

    def add(self, step: StepReport) -> StepReport:
        self.steps.append(step)
        return step

    @property
    def failures(self) -> list[tuple[str, ItemResult]]:
        return [(s.step, r) for s in self.steps for r in s.failures]

    @property
    def has_failures(self) -> bool:
        return any(s.failures for s in self.steps)
