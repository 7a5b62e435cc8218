"""
Dimension Scorers -- the four 25-point rubric dimensions.

Every scorer has the same shape: run the section check and the dimension's
pattern detectors, add points per signal, record an issue for each missing
signal and a strength for each present one, then cap at max_score.

Keep this file under 250 lines.
"""

import logging

from .models import DimensionResult
from .patterns import (
    detect_business_impact,
    detect_implementation,
    detect_problem_statement,
    detect_solution,
    detect_urgency,
)
from .rubric import DEFAULT_RUBRIC, Rubric

logger = logging.getLogger(__name__)


class _Tally:
    """Accumulates points, issues and strengths for one dimension."""

    def __init__(self, max_score: int):
        self.max_score = max_score
        self.score = 0
        self.issues: list[str] = []
        self.strengths: list[str] = []

    def award(self, points: int, strength: str) -> None:
        self.score += points
        self.strengths.append(strength)

    def partial(self, points: int, issue: str) -> None:
        self.score += points
        self.issues.append(issue)

    def miss(self, issue: str) -> None:
        self.issues.append(issue)

    def result(self) -> DimensionResult:
        return DimensionResult(
            score=max(0, min(int(self.score), self.max_score)),
            max_score=self.max_score,
            issues=self.issues,
            strengths=self.strengths,
        )


def _blank(text: str | None) -> bool:
    return not isinstance(text, str) or not text.strip()


def score_problem_statement(text: str, rubric: Rubric = DEFAULT_RUBRIC) -> DimensionResult:
    """Problem Statement: definition, urgency and strategic alignment."""
    if _blank(text):
        return DimensionResult.no_content()
    w = rubric.weights
    tally = _Tally(w.max_score)

    problem = detect_problem_statement(text, rubric)
    if problem.has_problem_section:
        tally.award(w.problem_section, "Clear problem statement with dedicated section")
    elif problem.has_problem_language:
        tally.partial(w.problem_language_only, "Problem mentioned but lacks dedicated section")
    else:
        tally.miss("Problem statement missing - define the specific challenge or opportunity")

    urgency = detect_urgency(text, rubric)
    if urgency.has_urgency_language and urgency.is_quantified:
        tally.award(w.urgency_quantified, "Urgency quantified with specific metrics")
    elif urgency.has_urgency_language:
        tally.partial(w.urgency, "Urgency mentioned but not quantified - add timeframes or costs")
    else:
        tally.miss("Missing urgency - explain why this needs action now")

    if problem.has_strategic_alignment:
        tally.award(w.strategic_alignment, "Problem tied to strategic objectives")
    else:
        tally.miss("Add strategic alignment - connect to organizational goals")

    return tally.result()


def score_proposed_solution(text: str, rubric: Rubric = DEFAULT_RUBRIC) -> DimensionResult:
    """Proposed Solution: clear approach, action verbs and rationale."""
    if _blank(text):
        return DimensionResult.no_content()
    w = rubric.weights
    tally = _Tally(w.max_score)

    solution = detect_solution(text, rubric)
    if solution.has_solution_section:
        tally.award(w.solution_section, "Clear solution with dedicated section")
    elif solution.has_solution_language:
        tally.partial(w.solution_language_only, "Solution mentioned but lacks dedicated section")
    else:
        tally.miss("Solution section missing or unclear")

    if solution.has_actionable:
        tally.award(w.actionable, "Solution is actionable with clear next steps")
    else:
        tally.miss("Add action verbs - specify what will be done")

    if solution.has_justification:
        tally.award(w.justification, "Solution includes rationale/justification")
    else:
        tally.miss("Add rationale - explain why this approach")

    return tally.result()


def score_business_impact(text: str, rubric: Rubric = DEFAULT_RUBRIC) -> DimensionResult:
    """Business Impact: outcomes, quantification and business value."""
    if _blank(text):
        return DimensionResult.no_content()
    w = rubric.weights
    tally = _Tally(w.max_score)

    impact = detect_business_impact(text, rubric)
    if impact.has_impact_section:
        tally.award(w.impact_section, "Clear impact section with defined outcomes")
    elif impact.has_impact_language:
        tally.partial(w.impact_language_only, "Impact mentioned but lacks dedicated section")
    else:
        tally.miss("Impact section missing - define expected outcomes")

    if impact.quantified_count >= 2:
        tally.award(w.quantified_multiple, "Impact quantified with multiple metrics")
    elif impact.is_quantified:
        tally.partial(w.quantified_single, "Add more quantified metrics for impact")
    else:
        tally.miss("Quantify impact - add specific numbers, percentages, or dollar amounts")

    if impact.has_financial_terms or impact.has_competitive_terms:
        tally.award(w.business_value, "Business value articulated (financial/competitive)")
    else:
        tally.miss("Add business value - revenue, cost, efficiency, or competitive impact")

    return tally.result()


def score_implementation_plan(text: str, rubric: Rubric = DEFAULT_RUBRIC) -> DimensionResult:
    """Implementation Plan: phases, timeline, ownership and resources."""
    if _blank(text):
        return DimensionResult.no_content()
    w = rubric.weights
    tally = _Tally(w.max_score)

    plan = detect_implementation(text, rubric)
    if plan.has_implementation_section and plan.has_phases:
        tally.award(w.implementation_phased, "Clear implementation plan with phases")
    elif plan.has_implementation_section:
        tally.partial(
            w.implementation_partial, "Implementation section exists but lacks clear phases"
        )
    elif plan.has_phases:
        tally.partial(
            w.implementation_partial, "Phases outlined but no dedicated implementation section"
        )
    else:
        tally.miss("Add implementation plan - define phases and milestones")

    if plan.date_count >= 2:
        tally.award(w.timeline_multiple, "Timeline includes specific dates/periods")
    elif plan.has_timeline:
        tally.partial(w.timeline_single, "Add more timeline specificity")
    else:
        tally.miss("Add timeline - specify when activities will occur")

    if plan.has_ownership and plan.has_resources:
        tally.award(w.ownership_and_resources, "Ownership and resources clearly defined")
    elif plan.has_ownership or plan.has_resources:
        tally.partial(w.ownership_or_resources, "Define both ownership and required resources")
    else:
        tally.miss("Add ownership and resources - who and what is needed")

    return tally.result()


DIMENSION_SCORERS = {
    "problem_statement": score_problem_statement,
    "proposed_solution": score_proposed_solution,
    "business_impact": score_business_impact,
    "implementation_plan": score_implementation_plan,
}
