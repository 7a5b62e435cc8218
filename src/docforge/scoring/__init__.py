"""
Proposal Scoring Engine -- deterministic quality rubric for strategic proposals.

Four 25-point dimensions plus a slop penalty:
  - Problem Statement: definition, urgency, strategic alignment
  - Proposed Solution: approach, action verbs, rationale
  - Business Impact: outcomes, quantification, business value
  - Implementation Plan: phases, timeline, ownership and resources
  - Slop: distinct generic filler phrases deduct points from the total

Components:
  - rubric.py: immutable section synonyms, keyword lists, weights
  - sections.py: heading predicate and section detection
  - patterns.py: per-dimension pattern detectors
  - slop.py: filler-language detection and deduction
  - dimensions.py: the four dimension scorers
  - validator.py: validate_document() orchestrator
"""

from .dimensions import (
    score_business_impact,
    score_implementation_plan,
    score_problem_statement,
    score_proposed_solution,
)
from .models import DimensionResult, SectionReport, SlopResult, ValidationReport
from .rubric import DEFAULT_RUBRIC, DimensionWeights, Rubric, SectionSpec, SlopWeights
from .sections import detect_sections, is_heading_line
from .slop import detect_slop
from .validator import validate_document

__all__ = [
    "DEFAULT_RUBRIC",
    "DimensionResult",
    "DimensionWeights",
    "Rubric",
    "SectionReport",
    "SectionSpec",
    "SlopResult",
    "SlopWeights",
    "ValidationReport",
    "detect_sections",
    "detect_slop",
    "is_heading_line",
    "score_business_impact",
    "score_implementation_plan",
    "score_problem_statement",
    "score_proposed_solution",
    "validate_document",
]
