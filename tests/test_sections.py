"""Tests for the heading predicate and section detection."""

import time

import pytest

from docforge.scoring.rubric import (
    BUSINESS_IMPACT,
    IMPLEMENTATION_PLAN,
    PROBLEM_STATEMENT,
    PROPOSED_SOLUTION,
    RESOURCES_BUDGET,
)
from docforge.scoring.sections import (
    detect_sections,
    has_section,
    heading_title,
    heading_titles,
    is_heading_line,
)


class TestIsHeadingLine:
    @pytest.mark.parametrize(
        "line",
        [
            "# Problem Statement",
            "## Business Impact ##",
            "###Implementation Plan",
            "Business Impact:",
            "**Proposed Solution**",
            "Risks and Assumptions",
        ],
    )
    def test_accepts_headings(self, line):
        assert is_heading_line(line)

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "   ",
            "This is a short sentence.",
            "Is this really a heading?",
            "- Problem Statement",
            "> Problem Statement",
            "| Problem | Statement |",
            "```python",
            "2026",
            "This line has far too many words to ever be a section heading title",
        ],
    )
    def test_rejects_non_headings(self, line):
        assert not is_heading_line(line)

    def test_long_title_rejected_by_characters(self):
        assert not is_heading_line("Supercalifragilistic" * 5)


class TestHeadingTitle:
    def test_strips_markup_numbering_and_article(self):
        assert heading_title("## 1. The Problem Statement:") == "problem statement"

    def test_normalizes_emphasis_and_separators(self):
        assert heading_title("**Business-Impact**") == "business impact"
        assert heading_title("Resources/Budget") == "resources budget"

    def test_roman_numeral_prefix(self):
        assert heading_title("II. Implementation Plan") == "implementation plan"

    def test_closing_hashes_stripped(self):
        assert heading_title("## Risks and Assumptions ##") == "risks and assumptions"
        assert heading_title("# Problem   #") == "problem"

    def test_long_whitespace_run_in_heading(self):
        start = time.perf_counter()
        assert is_heading_line("# a" + " " * 5000 + "b")
        assert heading_title("# Problem" + " " * 5000 + "x") == "problem x"
        assert time.perf_counter() - start < 1.0


class TestHeadingTitles:
    def test_plain_title_needs_blank_line_before(self):
        assert heading_titles("Intro paragraph.\nProblem\nMore text.") == []
        assert heading_titles("Intro paragraph.\n\nProblem\nMore text.") == ["problem"]

    def test_first_line_counts_as_standalone(self):
        assert heading_titles("Problem\nWe lose customers.") == ["problem"]

    def test_atx_heading_needs_no_blank_line(self):
        assert heading_titles("Intro.\n## Solution\nText.") == ["solution"]

    def test_empty_text(self):
        assert heading_titles("") == []


class TestDetectSections:
    def test_found_and_missing_in_rubric_order(self):
        text = "# Problem\n\nText.\n\n# Our Approach\n\nText.\n\n# ROI\n\nText."
        report = detect_sections(text)
        assert report.found == [PROBLEM_STATEMENT, PROPOSED_SOLUTION, BUSINESS_IMPACT]
        assert IMPLEMENTATION_PLAN in report.missing
        assert len(report.found) + len(report.missing) == 7

    def test_synonym_plural_matches(self):
        assert has_section("# Pain Points\nSlow setup.", PROBLEM_STATEMENT)
        assert has_section("## Next Steps\nShip it.", IMPLEMENTATION_PLAN)

    def test_body_text_is_not_a_section(self):
        text = "We have a problem with our budget and need a plan."
        report = detect_sections(text)
        assert report.found == []

    def test_resources_section(self):
        assert has_section("Budget:\n$40k for contractors.", RESOURCES_BUDGET)

    def test_unknown_section_name_raises(self):
        with pytest.raises(KeyError):
            has_section("# Problem", "Executive Summary")
