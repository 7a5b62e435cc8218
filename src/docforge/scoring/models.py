"""Data models for the proposal scoring engine."""

from dataclasses import asdict, dataclass, field
from typing import Any

DIMENSION_MAX_SCORE = 25
TOTAL_MAX_SCORE = 100
NO_CONTENT_ISSUE = "No content to validate"


@dataclass
class DimensionResult:
    """Score for one rubric dimension.

    Attributes:
        score: Points earned, always within [0, max_score].
        max_score: Points available for the dimension (25).
        issues: Human-readable gaps, in the order they were checked.
        strengths: Human-readable signals that earned points.
    """

    score: int = 0
    max_score: int = DIMENSION_MAX_SCORE
    issues: list[str] = field(default_factory=list)
    strengths: list[str] = field(default_factory=list)

    @classmethod
    def no_content(cls) -> "DimensionResult":
        return cls(score=0, issues=[NO_CONTENT_ISSUE], strengths=[])


@dataclass
class SlopResult:
    """Generic-filler findings and the deduction they cost.

    Only the number of distinct flagged phrases drives ``deduction``; the
    remaining fields describe the text for display.
    """

    deduction: int = 0
    flagged_phrases: list[str] = field(default_factory=list)
    categories: dict[str, list[str]] = field(default_factory=dict)
    issues: list[str] = field(default_factory=list)
    slop_score: int = 0
    severity: str = "clean"
    em_dash_count: int = 0
    structural_patterns: list[str] = field(default_factory=list)
    stylometric_issues: list[str] = field(default_factory=list)


@dataclass
class SectionReport:
    """Canonical sections found and missing, in rubric order."""

    found: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)


@dataclass
class ValidationReport:
    """Full scoring report for one document."""

    total_score: int = 0
    problem_statement: DimensionResult = field(default_factory=DimensionResult.no_content)
    proposed_solution: DimensionResult = field(default_factory=DimensionResult.no_content)
    business_impact: DimensionResult = field(default_factory=DimensionResult.no_content)
    implementation_plan: DimensionResult = field(default_factory=DimensionResult.no_content)
    slop_detection: SlopResult = field(default_factory=SlopResult)
    sections: SectionReport = field(default_factory=SectionReport)

    @property
    def dimensions(self) -> dict[str, DimensionResult]:
        """Dimension results keyed by attribute name, in rubric order."""
        return {
            "problem_statement": self.problem_statement,
            "proposed_solution": self.proposed_solution,
            "business_impact": self.business_impact,
            "implementation_plan": self.implementation_plan,
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict for JSON output."""
        return asdict(self)
