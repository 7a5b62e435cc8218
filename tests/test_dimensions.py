"""Tests for the four dimension scorers."""

from dataclasses import replace

import pytest

from docforge.scoring.dimensions import (
    DIMENSION_SCORERS,
    score_business_impact,
    score_implementation_plan,
    score_problem_statement,
    score_proposed_solution,
)
from docforge.scoring.models import NO_CONTENT_ISSUE
from docforge.scoring.rubric import DEFAULT_RUBRIC, DimensionWeights


class TestProblemStatement:
    def test_section_without_urgency_or_alignment(self):
        result = score_problem_statement("# Problem Statement\nOur onboarding process is slow.")
        assert result.score == 10
        assert "Clear problem statement with dedicated section" in result.strengths
        assert "Missing urgency - explain why this needs action now" in result.issues

    def test_language_without_section_gets_partial_credit(self):
        result = score_problem_statement("Our onboarding process has a problem.")
        assert result.score == 5
        assert "Problem mentioned but lacks dedicated section" in result.issues

    def test_quantified_urgency(self):
        result = score_problem_statement(
            "# Problem\nWithout immediate action, we risk losing 40% of revenue."
        )
        assert result.score == 18

    def test_full_marks(self):
        result = score_problem_statement(
            "# Problem\nA critical delay costs 30% of renewals and blocks our strategic goal."
        )
        assert result.score == 25
        assert result.issues == []


class TestProposedSolution:
    def test_full_marks(self):
        result = score_proposed_solution(
            "# Proposed Solution\nWe will implement an automated intake workflow "
            "because manual triage causes the delay."
        )
        assert result.score == 25

    def test_section_only(self):
        result = score_proposed_solution("# Proposed Solution\nWe will fix it.")
        assert result.score == 10
        assert "Add action verbs - specify what will be done" in result.issues

    def test_language_and_action_without_section(self):
        result = score_proposed_solution("We propose to build a new portal.")
        assert result.score == 13


class TestBusinessImpact:
    def test_unquantified(self):
        result = score_business_impact("# Business Impact\nThis will improve things.")
        assert result.score == 10

    def test_quantified(self):
        result = score_business_impact(
            "# Business Impact\nThis will save $2 million annually and reduce costs by 40%."
        )
        assert result.score == 25

    def test_single_quantity_gets_partial_credit(self):
        result = score_business_impact("# Business Impact\nRevenue grows 5%.")
        assert result.score == 20
        assert "Add more quantified metrics for impact" in result.issues

    def test_adding_quantities_never_lowers_score(self):
        before = score_business_impact("# Business Impact\nThis will improve things.")
        after = score_business_impact(
            "# Business Impact\nThis will improve things by 40% and save $2 million."
        )
        assert after.score >= before.score


class TestImplementationPlan:
    def test_full_marks(self):
        result = score_implementation_plan(
            "# Implementation Plan\nPhase 1: discovery in Q1 led by the platform team.\n"
            "Phase 2: rollout over 6 weeks with a budget of $50k."
        )
        assert result.score == 25
        assert "Clear implementation plan with phases" in result.strengths

    def test_phases_without_section(self):
        result = score_implementation_plan("Phase 1 starts soon. Phase 2 follows.")
        assert result.score == 5
        assert "Phases outlined but no dedicated implementation section" in result.issues

    def test_section_without_phases(self):
        result = score_implementation_plan("# Rollout\nWe ship it.")
        assert result.score == 5
        assert "Implementation section exists but lacks clear phases" in result.issues

    def test_nothing_to_score(self):
        result = score_implementation_plan("We will do it.")
        assert result.score == 0
        assert len(result.issues) == 3


class TestCommonBehaviour:
    @pytest.mark.parametrize("name", sorted(DIMENSION_SCORERS))
    @pytest.mark.parametrize("text", ["", "   \n\t", None])
    def test_no_content(self, name, text):
        result = DIMENSION_SCORERS[name](text)
        assert result.score == 0
        assert result.issues == [NO_CONTENT_ISSUE]
        assert result.strengths == []

    def test_score_capped_at_max(self):
        rubric = replace(DEFAULT_RUBRIC, weights=DimensionWeights(problem_section=40))
        result = score_problem_statement("# Problem\nSlow onboarding.", rubric)
        assert result.score == 25
        assert result.max_score == 25

    @pytest.mark.parametrize("name", sorted(DIMENSION_SCORERS))
    def test_scores_within_bounds(self, name, complete_proposal, sloppy_proposal):
        for text in (complete_proposal, sloppy_proposal, "x", "# Problem"):
            result = DIMENSION_SCORERS[name](text)
            assert 0 <= result.score <= result.max_score == 25
