"""
Pattern Detectors -- per-dimension linguistic signals.

Each detector is a pure function of (text, rubric) returning a frozen
signals object. Three sub-detectors are shared across dimensions:

  find_quantities()   numbers attached to a unit ("40%", "$2 million", "6 weeks")
  find_phase_markers() distinct ordinal plan markers ("Phase 1", "Stage two")
  count_keywords()    occurrences of a dimension's keyword list

Empty or whitespace-only text yields default (all False / zero) signals.

Keep this file under 450 lines.
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache

from .rubric import (
    BUSINESS_IMPACT,
    DEFAULT_RUBRIC,
    IMPLEMENTATION_PLAN,
    ORDINAL_WORDS,
    PROBLEM_STATEMENT,
    PROPOSED_SOLUTION,
    RISKS_ASSUMPTIONS,
    SUCCESS_METRICS,
    Rubric,
)
from .sections import heading_titles, titles_match

logger = logging.getLogger(__name__)

ROMAN_VALUES = {"i": 1, "v": 5, "x": 10}
ORDINAL_PREFIXES = ("first", "second", "third", "fourth", "fifth", "sixth", "final")


def _blank(text: str | None) -> bool:
    return not text or not text.strip()


# =============================================================================
# SHARED SUB-DETECTORS
# =============================================================================


@lru_cache(maxsize=128)
def _keyword_pattern(fragments: tuple[str, ...]) -> re.Pattern:
    alternatives = "|".join(fragments)
    return re.compile(rf"\b(?:{alternatives})(?:s|es|ed|d|ing)?\b", re.IGNORECASE)


def find_keywords(text: str, fragments: tuple[str, ...]) -> list[str]:
    """All keyword occurrences in text, in order."""
    if _blank(text) or not fragments:
        return []
    return _keyword_pattern(tuple(fragments)).findall(text)


def count_keywords(text: str, fragments: tuple[str, ...]) -> int:
    return len(find_keywords(text, fragments))


@lru_cache(maxsize=16)
def _quantity_pattern(units: tuple[str, ...]) -> re.Pattern:
    unit_group = "|".join(units)
    # thousands groups are exactly three digits; a number never starts
    # mid-number, so a long "1,1,1,..." run is scanned once
    number = r"(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?"
    return re.compile(
        rf"\$[ \t]?{number}(?:[ \t]?(?:million|billion|thousand|mm|[kmb])\b)?"
        rf"|\b(?<![,.]){number}[ \t]*(?:{unit_group})(?![A-Za-z])",
        re.IGNORECASE,
    )


def find_quantities(text: str, rubric: Rubric = DEFAULT_RUBRIC) -> list[str]:
    """Numbers adjacent to a unit indicator ("$2 million", "40%", "6 weeks")."""
    if _blank(text):
        return []
    return _quantity_pattern(tuple(rubric.quantity_units)).findall(text)


def _ordinal_value(token: str) -> str:
    token = token.lower()
    if token.isdigit():
        return str(int(token))
    if token in ORDINAL_WORDS:
        return str(ORDINAL_WORDS.index(token) + 1)
    if set(token) <= set(ROMAN_VALUES):
        total = 0
        for i, ch in enumerate(token):
            value = ROMAN_VALUES[ch]
            following = ROMAN_VALUES[token[i + 1]] if i + 1 < len(token) else 0
            total += -value if value < following else value
        return str(total)
    return token


@lru_cache(maxsize=16)
def _phase_patterns(words: tuple[str, ...]) -> tuple[re.Pattern, re.Pattern]:
    word_group = "|".join(re.escape(w) for w in words)
    ordinals = "|".join(ORDINAL_WORDS)
    numbered = re.compile(
        rf"\b({word_group})[ \t]*#?[ \t]*(\d+|{ordinals}|[ivx]+)\b", re.IGNORECASE
    )
    prefixed = re.compile(
        rf"\b({'|'.join(ORDINAL_PREFIXES)})[ \t]+({word_group})\b", re.IGNORECASE
    )
    return numbered, prefixed


def find_phase_markers(text: str, rubric: Rubric = DEFAULT_RUBRIC) -> list[str]:
    """Distinct normalized plan markers, in first-seen order.

    "Phase 1", "phase one" and "Phase I" normalize to the same marker.
    """
    if _blank(text):
        return []
    numbered, prefixed = _phase_patterns(tuple(rubric.phase_marker_words))
    markers: list[str] = []
    for word, ordinal in numbered.findall(text):
        marker = f"{word.lower()} {_ordinal_value(ordinal)}"
        if marker not in markers:
            markers.append(marker)
    for ordinal, word in prefixed.findall(text):
        position = ordinal.lower()
        if position in ORDINAL_PREFIXES[:-1]:
            position = str(ORDINAL_PREFIXES.index(position) + 1)
        marker = f"{word.lower()} {position}"
        if marker not in markers:
            markers.append(marker)
    return markers


def has_phase_structure(text: str, rubric: Rubric = DEFAULT_RUBRIC) -> bool:
    """True when two or more distinct plan markers appear."""
    return len(find_phase_markers(text, rubric)) >= 2


# =============================================================================
# SIGNALS
# =============================================================================


@dataclass(frozen=True)
class ProblemSignals:
    has_problem_section: bool = False
    has_problem_language: bool = False
    has_urgency: bool = False
    is_quantified: bool = False
    quantified_count: int = 0
    has_strategic_alignment: bool = False
    indicators: tuple[str, ...] = ()


@dataclass(frozen=True)
class UrgencySignals:
    has_urgency_language: bool = False
    urgency_count: int = 0
    is_quantified: bool = False
    quantified_count: int = 0
    has_urgency_section: bool = False
    indicators: tuple[str, ...] = ()


@dataclass(frozen=True)
class SolutionSignals:
    has_solution_section: bool = False
    has_solution_language: bool = False
    has_actionable: bool = False
    has_alternatives: bool = False
    has_justification: bool = False
    indicators: tuple[str, ...] = ()


@dataclass(frozen=True)
class ImpactSignals:
    has_impact_section: bool = False
    has_impact_language: bool = False
    is_quantified: bool = False
    quantified_count: int = 0
    has_financial_terms: bool = False
    has_competitive_terms: bool = False
    indicators: tuple[str, ...] = ()


@dataclass(frozen=True)
class ImplementationSignals:
    has_implementation_section: bool = False
    has_phases: bool = False
    phase_count: int = 0
    has_timeline: bool = False
    date_count: int = 0
    has_ownership: bool = False
    has_resources: bool = False
    indicators: tuple[str, ...] = ()


@dataclass(frozen=True)
class RiskSignals:
    has_risk_section: bool = False
    has_risks: bool = False
    risk_count: int = 0
    has_mitigation: bool = False
    mitigation_count: int = 0
    indicators: tuple[str, ...] = ()


@dataclass(frozen=True)
class MetricsSignals:
    has_metrics_section: bool = False
    has_metrics: bool = False
    metrics_count: int = 0
    is_quantified: bool = False
    quantified_count: int = 0
    has_timebound: bool = False
    indicators: tuple[str, ...] = ()


def _indicators(*pairs: tuple[bool, str]) -> tuple[str, ...]:
    return tuple(label for present, label in pairs if present)


# =============================================================================
# DETECTORS
# =============================================================================


def detect_problem_statement(text: str, rubric: Rubric = DEFAULT_RUBRIC) -> ProblemSignals:
    if _blank(text):
        return ProblemSignals()
    kw = rubric.keywords
    section = titles_match(heading_titles(text), rubric.section(PROBLEM_STATEMENT).synonyms)
    problem = count_keywords(text, kw["problem"])
    urgency = count_keywords(text, kw["urgency"])
    quantified = len(find_quantities(text, rubric))
    strategic = count_keywords(text, kw["strategic"])
    return ProblemSignals(
        has_problem_section=section,
        has_problem_language=problem > 0,
        has_urgency=urgency > 0,
        is_quantified=quantified > 0,
        quantified_count=quantified,
        has_strategic_alignment=strategic > 0,
        indicators=_indicators(
            (section, "Dedicated problem section"),
            (problem > 0, "Problem framing language"),
            (urgency > 0, "Urgency/priority established"),
            (quantified > 0, f"{quantified} quantified metrics"),
            (strategic > 0, "Strategic alignment shown"),
        ),
    )


def detect_urgency(text: str, rubric: Rubric = DEFAULT_RUBRIC) -> UrgencySignals:
    if _blank(text):
        return UrgencySignals()
    urgency = count_keywords(text, rubric.keywords["urgency"])
    quantified = len(find_quantities(text, rubric))
    section = titles_match(heading_titles(text), rubric.keywords["urgency_headings"])
    return UrgencySignals(
        has_urgency_language=urgency > 0,
        urgency_count=urgency,
        is_quantified=quantified > 0,
        quantified_count=quantified,
        has_urgency_section=section,
        indicators=_indicators(
            (urgency > 0, f"{urgency} urgency/priority references"),
            (quantified > 0, f"{quantified} quantified values"),
            (section, "Dedicated urgency/timing section"),
        ),
    )


def detect_solution(text: str, rubric: Rubric = DEFAULT_RUBRIC) -> SolutionSignals:
    if _blank(text):
        return SolutionSignals()
    kw = rubric.keywords
    section = titles_match(heading_titles(text), rubric.section(PROPOSED_SOLUTION).synonyms)
    language = count_keywords(text, kw["solution"]) > 0
    actionable = count_keywords(text, kw["actionable"]) > 0
    alternatives = count_keywords(text, kw["alternatives"]) > 0
    justification = count_keywords(text, kw["justification"]) > 0
    return SolutionSignals(
        has_solution_section=section,
        has_solution_language=language,
        has_actionable=actionable,
        has_alternatives=alternatives,
        has_justification=justification,
        indicators=_indicators(
            (section, "Dedicated solution section"),
            (language, "Solution language present"),
            (actionable, "Actionable verbs used"),
            (alternatives, "Alternatives considered"),
            (justification, "Rationale provided"),
        ),
    )


def detect_business_impact(text: str, rubric: Rubric = DEFAULT_RUBRIC) -> ImpactSignals:
    if _blank(text):
        return ImpactSignals()
    kw = rubric.keywords
    section = titles_match(heading_titles(text), rubric.section(BUSINESS_IMPACT).synonyms)
    language = count_keywords(text, kw["impact"]) > 0
    quantified = len(find_quantities(text, rubric))
    financial = count_keywords(text, kw["financial"]) > 0
    competitive = count_keywords(text, kw["competitive"]) > 0
    return ImpactSignals(
        has_impact_section=section,
        has_impact_language=language,
        is_quantified=quantified > 0,
        quantified_count=quantified,
        has_financial_terms=financial,
        has_competitive_terms=competitive,
        indicators=_indicators(
            (section, "Dedicated impact/value section"),
            (language, "Impact language present"),
            (quantified > 0, f"{quantified} quantified metrics"),
            (financial, "Financial terms used"),
            (competitive, "Competitive advantage mentioned"),
        ),
    )


def detect_implementation(
    text: str, rubric: Rubric = DEFAULT_RUBRIC
) -> ImplementationSignals:
    if _blank(text):
        return ImplementationSignals()
    kw = rubric.keywords
    section = titles_match(heading_titles(text), rubric.section(IMPLEMENTATION_PLAN).synonyms)
    phases = len(find_phase_markers(text, rubric))
    dates = count_keywords(text, kw["timeline"])
    ownership = count_keywords(text, kw["ownership"]) > 0
    resources = count_keywords(text, kw["resources"]) > 0
    return ImplementationSignals(
        has_implementation_section=section,
        has_phases=phases >= 2,
        phase_count=phases,
        has_timeline=dates > 0,
        date_count=dates,
        has_ownership=ownership,
        has_resources=resources,
        indicators=_indicators(
            (section, "Dedicated implementation section"),
            (phases > 0, f"{phases} phases/milestones"),
            (dates > 0, f"{dates} timeline references"),
            (ownership, "Ownership defined"),
            (resources, "Resources identified"),
        ),
    )


def detect_risks(text: str, rubric: Rubric = DEFAULT_RUBRIC) -> RiskSignals:
    if _blank(text):
        return RiskSignals()
    kw = rubric.keywords
    section = titles_match(heading_titles(text), rubric.section(RISKS_ASSUMPTIONS).synonyms)
    risks = count_keywords(text, kw["risk"])
    mitigation = count_keywords(text, kw["mitigation"])
    return RiskSignals(
        has_risk_section=section,
        has_risks=risks > 0,
        risk_count=risks,
        has_mitigation=mitigation > 0,
        mitigation_count=mitigation,
        indicators=_indicators(
            (section, "Dedicated risk section"),
            (risks > 0, f"{risks} risks identified"),
            (mitigation > 0, "Mitigation strategies included"),
        ),
    )


def detect_success_metrics(text: str, rubric: Rubric = DEFAULT_RUBRIC) -> MetricsSignals:
    if _blank(text):
        return MetricsSignals()
    kw = rubric.keywords
    section = titles_match(heading_titles(text), rubric.section(SUCCESS_METRICS).synonyms)
    metrics = count_keywords(text, kw["metrics"])
    quantified = len(find_quantities(text, rubric))
    timebound = count_keywords(text, kw["timebound"]) > 0
    return MetricsSignals(
        has_metrics_section=section,
        has_metrics=metrics > 0,
        metrics_count=metrics,
        is_quantified=quantified > 0,
        quantified_count=quantified,
        has_timebound=timebound,
        indicators=_indicators(
            (section, "Dedicated metrics section"),
            (metrics > 0, f"{metrics} metric references"),
            (quantified > 0, f"{quantified} quantified metrics"),
            (timebound, "Time-bound targets specified"),
        ),
    )
