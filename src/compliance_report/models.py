"""Pydantic models for compliance results and report statistics."""

from __future__ import annotations

from typing import Iterable, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

RuleStatus = Literal["passed", "warning", "failed"]
OverallStatus = Literal["compliant", "warning", "non-compliant"]


class InvariantViolation(ValueError):
    """A result's overall status disagrees with the statuses of its rules."""


class ComplianceRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    category: str
    rule: str
    status: RuleStatus
    message: str
    details: str | None = None


class ComplianceResult(BaseModel):
    # Accepts the UI's camelCase keys as well as snake_case names.
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file_name: str = Field(alias="fileName")
    overall_status: OverallStatus = Field(alias="overallStatus")
    rules: list[ComplianceRule] = Field(default_factory=list)
    processing_time: float = Field(default=0.0, alias="processingTime")

    @property
    def derived_status(self) -> OverallStatus:
        return derive_status(self.rules)

    @property
    def is_consistent(self) -> bool:
        """True when overall_status matches what the rule statuses imply."""
        return self.overall_status == self.derived_status


def derive_status(rules: Iterable[ComplianceRule]) -> OverallStatus:
    """Aggregate rule statuses: any failure wins, then any warning."""
    statuses = {r.status for r in rules}
    if "failed" in statuses:
        return "non-compliant"
    if "warning" in statuses:
        return "warning"
    return "compliant"


def check_consistency(results: Iterable[ComplianceResult]) -> None:
    """Raise InvariantViolation for the first result whose status is wrong."""
    for r in results:
        if not r.is_consistent:
            raise InvariantViolation(
                f"{r.file_name}: overall status '{r.overall_status}' "
                f"but rules imply '{r.derived_status}'"
            )


class ReportStats(BaseModel):
    """Aggregate counts over a result collection."""

    total_files: int = 0
    compliant_files: int = 0
    warning_files: int = 0
    non_compliant_files: int = 0

    @classmethod
    def from_results(cls, results: Iterable[ComplianceResult]) -> ReportStats:
        counts = {"compliant": 0, "warning": 0, "non-compliant": 0}
        for r in results:
            counts[r.overall_status] += 1
        return cls(
            total_files=sum(counts.values()),
            compliant_files=counts["compliant"],
            warning_files=counts["warning"],
            non_compliant_files=counts["non-compliant"],
        )

    @computed_field
    @property
    def compliance_rate(self) -> int:
        """Percentage of fully compliant files, rounded half-up, in [0, 100]."""
        if self.total_files <= 0:
            return 0
        # Integer half-up rounding: 1 of 8 files is 12.5% -> 13.
        rate = (self.compliant_files * 200 + self.total_files) // (2 * self.total_files)
        return max(0, min(100, rate))
