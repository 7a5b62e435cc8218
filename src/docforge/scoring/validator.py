"""
Validation Orchestrator -- scores a whole proposal.

Runs the four dimension scorers and the slop detector over the same text,
then assembles the report:

    total = clamp(sum(dimension scores) - slop deduction, 0, 100)

None, non-string and blank input get the fixed no-content report. No input
string raises; detectors degrade to "not found" instead.

Keep this file under 100 lines.
"""

import logging

from ..config import DEFAULT_MAX_DOCUMENT_CHARS
from ..security.validators import sanitize_text
from .dimensions import (
    score_business_impact,
    score_implementation_plan,
    score_problem_statement,
    score_proposed_solution,
)
from .models import TOTAL_MAX_SCORE, DimensionResult, SlopResult, ValidationReport
from .rubric import DEFAULT_RUBRIC, Rubric
from .sections import detect_sections
from .slop import detect_slop

logger = logging.getLogger(__name__)


def empty_report() -> ValidationReport:
    """Report for a document with nothing to score."""
    return ValidationReport(
        total_score=0,
        problem_statement=DimensionResult.no_content(),
        proposed_solution=DimensionResult.no_content(),
        business_impact=DimensionResult.no_content(),
        implementation_plan=DimensionResult.no_content(),
        slop_detection=SlopResult(),
    )


def validate_document(
    text: str | None,
    rubric: Rubric = DEFAULT_RUBRIC,
    max_chars: int = DEFAULT_MAX_DOCUMENT_CHARS,
) -> ValidationReport:
    """Score a proposal document against the four-dimension rubric."""
    if not isinstance(text, str) or not text.strip():
        return empty_report()

    text = sanitize_text(text, max_length=max_chars)
    if not text.strip():
        return empty_report()

    report = ValidationReport(
        problem_statement=score_problem_statement(text, rubric),
        proposed_solution=score_proposed_solution(text, rubric),
        business_impact=score_business_impact(text, rubric),
        implementation_plan=score_implementation_plan(text, rubric),
        slop_detection=detect_slop(text, rubric),
        sections=detect_sections(text, rubric),
    )

    subtotal = sum(d.score for d in report.dimensions.values())
    report.total_score = max(
        0, min(TOTAL_MAX_SCORE, subtotal - report.slop_detection.deduction)
    )

    logger.debug(
        f"[Validator] total={report.total_score} subtotal={subtotal} "
        f"slop=-{report.slop_detection.deduction} "
        f"sections={len(report.sections.found)}/{len(rubric.sections)}"
    )
    return report
