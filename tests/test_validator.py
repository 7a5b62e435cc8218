"""Tests for validate_document() -- the whole-proposal report."""

import random
import time

import pytest

from docforge.config import DEFAULT_MAX_DOCUMENT_CHARS
from docforge.scoring import validate_document
from docforge.scoring.models import NO_CONTENT_ISSUE
from docforge.scoring.rubric import RESOURCES_BUDGET
from docforge.scoring.validator import empty_report


def _expected_total(report):
    subtotal = sum(d.score for d in report.dimensions.values())
    return max(0, min(100, subtotal - report.slop_detection.deduction))


class TestEmptyInput:
    @pytest.mark.parametrize("text", ["", None, "   \n\t  ", 42, ["# Problem"]])
    def test_no_content_report(self, text):
        report = validate_document(text)
        assert report.total_score == 0
        for result in report.dimensions.values():
            assert NO_CONTENT_ISSUE in result.issues
        assert report.slop_detection.deduction == 0

    def test_null_bytes_only(self):
        assert validate_document("\x00\x00").total_score == 0

    def test_matches_empty_report(self):
        assert validate_document("") == empty_report()


class TestReportProperties:
    def test_deterministic(self, complete_proposal, sloppy_proposal):
        for text in (complete_proposal, sloppy_proposal):
            assert validate_document(text).to_dict() == validate_document(text).to_dict()

    def test_bounds(self, complete_proposal, sloppy_proposal, minimal_proposal):
        for text in (complete_proposal, sloppy_proposal, minimal_proposal, "robust " * 50):
            report = validate_document(text)
            assert 0 <= report.total_score <= 100
            for result in report.dimensions.values():
                assert 0 <= result.score <= 25

    def test_total_is_sum_minus_deduction(self, complete_proposal, sloppy_proposal, minimal_proposal):
        for text in (complete_proposal, sloppy_proposal, minimal_proposal):
            report = validate_document(text)
            assert report.total_score == _expected_total(report)

    def test_total_never_negative(self):
        report = validate_document("robust seamless elegant powerful intuitive synergy")
        assert report.slop_detection.deduction > 0
        assert report.total_score == 0


class TestProposalScores:
    def test_complete_proposal_scores_high(self, complete_proposal):
        report = validate_document(complete_proposal)
        assert report.total_score >= 90
        assert report.sections.missing == [RESOURCES_BUDGET]

    def test_minimal_proposal_scores_low(self, minimal_proposal):
        assert validate_document(minimal_proposal).total_score <= 20

    def test_slop_lowers_total(self, complete_proposal, sloppy_proposal):
        clean = validate_document(complete_proposal)
        sloppy = validate_document(sloppy_proposal)
        assert sloppy.slop_detection.deduction > 0
        assert sloppy.total_score < clean.total_score

    def test_crlf_input_scores_like_lf(self, complete_proposal):
        crlf = complete_proposal.replace("\n", "\r\n")
        assert validate_document(crlf).to_dict() == validate_document(complete_proposal).to_dict()

    def test_input_truncated_at_max_chars(self, complete_proposal):
        report = validate_document(complete_proposal, max_chars=40)
        assert report.implementation_plan.score < validate_document(complete_proposal).implementation_plan.score

    def test_to_dict_shape(self, complete_proposal):
        data = validate_document(complete_proposal).to_dict()
        assert set(data) == {
            "total_score",
            "problem_statement",
            "proposed_solution",
            "business_impact",
            "implementation_plan",
            "slop_detection",
            "sections",
        }
        assert set(data["problem_statement"]) == {"score", "max_score", "issues", "strengths"}


def _random_text(seed: int, size: int, encoding: str) -> str:
    rng = random.Random(seed)
    return bytes(rng.randrange(256) for _ in range(size)).decode(encoding, errors="replace")


class TestHostileInput:
    """Long, repetitive or binary-looking text still yields a bounded report quickly."""

    TIME_LIMIT = 10.0

    def _score(self, text):
        start = time.perf_counter()
        report = validate_document(text)
        assert time.perf_counter() - start < self.TIME_LIMIT
        assert 0 <= report.total_score <= 100
        assert report.total_score == _expected_total(report)
        return report

    def test_max_length_proposal(self, complete_proposal):
        text = complete_proposal * (DEFAULT_MAX_DOCUMENT_CHARS // len(complete_proposal) + 2)
        report = self._score(text)
        assert report.sections.missing == [RESOURCES_BUDGET]

    def test_long_whitespace_heading(self):
        report = self._score("# Problem" + " " * 5000 + "x\n\nCustomers churn.")
        assert "Problem Statement" in report.sections.found

    def test_long_single_line(self):
        self._score("word " * 40_000)

    @pytest.mark.parametrize(
        "text",
        ["1," * 100_000, "1,234" * 40_000, "9" * 200_000, "1." * 100_000, "$1," * 60_000],
    )
    def test_long_digit_and_comma_runs(self, text):
        self._score(text)

    def test_repeated_structure_markers(self):
        self._score("overview key points " * 10_000)

    @pytest.mark.parametrize("encoding", ["utf-8", "latin-1"])
    def test_random_bytes_decoded(self, encoding):
        self._score(_random_text(7, 50_000, encoding))
