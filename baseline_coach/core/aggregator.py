"""Report aggregation and failure policy evaluation."""

from enum import Enum
from typing import Iterable, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict  # type: ignore

from ..models.detection import Finding
from ..models.report import Report


EXIT_OK = 0
EXIT_ERROR = 1
EXIT_LIMITED = 2
EXIT_NEWLY = 3


class FailPolicy(str, Enum):
    """Which findings make a scan fail."""
    NONE = "none"
    LIMITED = "limited"
    NEWLY = "newly"


class PolicyOutcome(BaseModel):
    """Result of evaluating a failure policy against a report."""

    model_config = ConfigDict(frozen=True)

    mode: FailPolicy
    has_limited: bool
    has_newly: bool

    @property
    def failed(self) -> bool:
        if self.mode is FailPolicy.LIMITED:
            return self.has_limited
        if self.mode is FailPolicy.NEWLY:
            return self.has_limited or self.has_newly
        return False

    @property
    def exit_code(self) -> int:
        """Process exit code for this outcome."""
        if not self.failed:
            return EXIT_OK
        return EXIT_LIMITED if self.mode is FailPolicy.LIMITED else EXIT_NEWLY


def aggregate(per_file_findings: Iterable[Sequence[Finding]],
              files_scanned: Optional[int] = None) -> Report:
    """
    Concatenate per-file findings into a report.

    Args:
        per_file_findings: One sequence of findings per file, in scan order
        files_scanned: Number of files scanned; defaults to the number of groups

    Returns:
        Report with findings in file order, then detection order
    """
    findings: List[Finding] = []
    groups = 0
    for file_findings in per_file_findings:
        groups += 1
        findings.extend(file_findings)

    return Report(
        files_scanned=groups if files_scanned is None else files_scanned,
        findings=findings,
    )


def evaluate_policy(report: Report, mode: Union[FailPolicy, str]) -> PolicyOutcome:
    """Evaluate ``mode`` (``none``, ``limited`` or ``newly``) against ``report``."""
    return PolicyOutcome(
        mode=FailPolicy(mode),
        has_limited=report.has_limited,
        has_newly=report.has_newly,
    )
