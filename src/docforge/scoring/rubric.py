"""
Rubric configuration -- immutable data shared by every detector and scorer.

Everything here is plain data built once at import time: canonical sections
and their heading synonyms, keyword patterns per signal, slop phrase lists
and the point weights. Detectors take a ``Rubric`` argument (defaulting to
``DEFAULT_RUBRIC``) instead of reading module globals, so a test or a host
application can swap in its own rubric.

Point weights are tuning parameters. Adjust with ``dataclasses.replace``:

    rubric = replace(DEFAULT_RUBRIC, slop=SlopWeights(points_per_phrase=2))

Keep this file under 350 lines.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ..security.validators import validate_range
from .models import DIMENSION_MAX_SCORE, TOTAL_MAX_SCORE

# =============================================================================
# SECTIONS
# =============================================================================


@dataclass(frozen=True)
class SectionSpec:
    """A canonical section and the heading titles accepted for it.

    synonyms: lowercase title prefixes. "pain point" matches the headings
              "Pain Points" and "Pain point analysis".
    """

    name: str
    synonyms: tuple[str, ...]


PROBLEM_STATEMENT = "Problem Statement"
PROPOSED_SOLUTION = "Proposed Solution"
BUSINESS_IMPACT = "Business Impact"
IMPLEMENTATION_PLAN = "Implementation Plan"
SUCCESS_METRICS = "Success Metrics"
RESOURCES_BUDGET = "Resources/Budget"
RISKS_ASSUMPTIONS = "Risks/Assumptions"

SECTIONS: tuple[SectionSpec, ...] = (
    SectionSpec(
        PROBLEM_STATEMENT,
        ("problem", "challenge", "issue", "opportunity", "context", "pain point",
         "current pain", "current state", "background"),
    ),
    SectionSpec(
        PROPOSED_SOLUTION,
        ("proposed solution", "solution", "proposal", "approach", "recommendation",
         "strategy", "proposed approach"),
    ),
    SectionSpec(
        BUSINESS_IMPACT,
        ("business impact", "impact", "benefit", "outcome", "value", "roi",
         "return", "business case", "financial impact", "gross profit", "revenue",
         "expected results"),
    ),
    SectionSpec(
        IMPLEMENTATION_PLAN,
        ("implementation", "plan", "timeline", "roadmap", "execution", "delivery",
         "next step", "rollout", "phases"),
    ),
    SectionSpec(
        SUCCESS_METRICS,
        ("success", "metric", "kpi", "measure", "measurement", "objective"),
    ),
    SectionSpec(
        RESOURCES_BUDGET,
        ("resource", "budget", "cost", "investment", "team", "pricing", "price",
         "subscription", "commercials"),
    ),
    SectionSpec(
        RISKS_ASSUMPTIONS,
        ("risk", "assumption", "dependency", "dependencies", "constraint"),
    ),
)

# =============================================================================
# KEYWORD PATTERNS (regex fragments, matched case-insensitively on word starts)
# =============================================================================

KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "problem": (
        r"problem", r"challenge", r"issue", r"opportunity", r"gap", r"limitation",
        r"constraint", r"blocker", r"barrier", r"pain.?point", r"risk",
    ),
    "urgency": (
        r"urgent", r"critical", r"immediate", r"priority", r"time.sensitive",
        r"deadline", r"window", r"opportunity.cost", r"asap",
    ),
    # plain heading titles, matched like section synonyms
    "urgency_headings": (
        "urgency", "priority", "why now", "timing", "window",
    ),
    "strategic": (
        r"strategic", r"mission", r"vision", r"objective", r"goal", r"priority",
        r"initiative", r"pillar",
    ),
    "solution": (
        r"solution", r"approach", r"propos(?:e|ed|al)", r"strategy", r"plan",
        r"initiative", r"program", r"project", r"implement",
    ),
    "actionable": (
        r"implement", r"execute", r"deliver", r"launch", r"build", r"create",
        r"develop", r"establish", r"deploy", r"roll.?out", r"automate", r"integrate",
    ),
    "alternatives": (
        r"alternative", r"option", r"consider", r"evaluate", r"compare", r"trade.?off",
    ),
    "justification": (
        r"because", r"reason", r"rationale", r"why", r"justif(?:y|ied|ication)",
        r"basis", r"evidence", r"data.shows", r"research",
    ),
    "impact": (
        r"impact", r"benefit", r"value", r"roi", r"return", r"outcome", r"result",
        r"improvement", r"gain", r"savings",
    ),
    "financial": (
        r"revenue", r"cost", r"savings", r"profit", r"margin", r"efficiency",
        r"productivity", r"reduction", r"increase", r"reduce",
    ),
    "competitive": (
        r"competitive", r"market", r"position", r"advantage", r"differentiat\w*",
        r"leader", r"first.mover",
    ),
    # month names only count next to a day or year ("May 2026") or after
    # "in"/"by" ("in May"), so the modal "may" is not a date; a year is
    # 19xx/20xx not followed by a count unit ("2000 users")
    "timeline": (
        r"weeks?", r"months?", r"quarters?", r"q[1-4]", r"years?", r"fy\d+",
        r"(?:19|20)\d{2}(?![ \t]*(?:%|(?:percent|users?|customers?|people|employees|"
        r"transactions?|units?|items?|dollars?)\b))",
        r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?[ \t]+\d{1,4}(?:st|nd|rd|th)?",
        r"(?:in|by)[ \t]+(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*",
    ),
    "ownership": (
        r"owner", r"lead", r"responsible", r"accountable", r"team", r"department",
        r"function", r"sponsor",
    ),
    "resources": (
        r"resource", r"budget", r"cost", r"investment", r"headcount", r"fte",
        r"capacity", r"staffing",
    ),
    "risk": (
        r"risk", r"assumption", r"dependency", r"constraint", r"blocker",
        r"obstacle", r"challenge", r"unknown",
    ),
    "mitigation": (
        r"mitigat\w*", r"contingency", r"fallback", r"plan.b", r"alternative",
        r"backup", r"workaround",
    ),
    "metrics": (
        r"metric", r"kpi", r"measure", r"indicator", r"target", r"benchmark",
        r"baseline", r"track",
    ),
    "timebound": (
        r"by", r"within", r"after", r"before", r"during", r"end.of", r"q[1-4]",
        r"fy\d+", r"month", r"quarter", r"year",
    ),
})

# Units that make a number a quantified claim. "$" is matched as a prefix.
QUANTITY_UNITS: tuple[str, ...] = (
    r"%", r"percent", r"million", r"billion", r"thousand", r"k\b", r"hours?",
    r"days?", r"weeks?", r"months?", r"quarters?", r"years?", r"dollars?",
    r"users?", r"customers?", r"transactions?", r"x\b",
)

# "Phase 1", "Stage two", "Milestone III"
PHASE_MARKER_WORDS: tuple[str, ...] = (
    "phase", "stage", "milestone", "sprint", "wave", "release", "step",
)
ORDINAL_WORDS: tuple[str, ...] = (
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten",
)

# =============================================================================
# SLOP PHRASES
# =============================================================================

SLOP_PHRASES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "generic_booster": (
        "incredibly", "extremely", "highly", "very", "truly", "absolutely",
        "definitely", "really", "remarkably", "exceptionally", "tremendously",
        "immensely", "profoundly", "delve", "tapestry", "multifaceted", "myriad",
        "plethora",
    ),
    "buzzword": (
        "robust", "seamless", "comprehensive", "elegant", "powerful", "intuitive",
        "user-friendly", "streamlined", "innovative", "sophisticated",
        "state-of-the-art", "best-in-class", "world-class", "enterprise-ready",
        "industry-leading", "game-changing", "revolutionary", "transformative",
        "disruptive", "cutting-edge", "next-generation", "bleeding-edge",
        "groundbreaking", "paradigm-shifting", "synergy", "synergies", "holistic",
        "leverage", "utilize", "empower", "unlock", "spearhead", "actionable",
    ),
    "filler_phrase": (
        "it's important to note that", "it's worth mentioning that",
        "it should be noted that", "it goes without saying that",
        "needless to say", "as you may know", "as we all know",
        "in today's world", "in today's digital age",
        "in today's fast-paced environment", "in the modern era",
        "at the end of the day", "when all is said and done",
        "that being said", "with that being said", "let's dive in",
        "let's explore", "here's the thing", "the fact of the matter is",
        "at this point in time", "due to the fact that", "first and foremost",
        "last but not least", "each and every",
    ),
    "hedge": (
        "in many ways", "to some extent", "generally speaking",
        "for the most part", "more or less", "kind of", "sort of", "arguably",
        "may or may not", "could potentially",
    ),
    "sycophantic": (
        "great question", "excellent question", "that's a great point",
        "happy to help", "i'd be happy to help", "i'm glad you asked",
        "thanks for asking", "my pleasure", "i appreciate you sharing",
    ),
    "transitional_filler": (
        "furthermore", "moreover", "additionally", "nevertheless", "nonetheless",
        "as mentioned earlier", "as previously stated", "as noted above",
        "moving forward", "going forward",
    ),
    "marketing_filler": (
        "leverage synergies", "best-in-class solution", "move the needle",
        "low-hanging fruit", "paradigm shift", "think outside the box",
        "value-add", "circle back", "win-win", "mission-critical",
        "next-level", "world-class solution",
    ),
})

OVER_SIGNPOSTING: tuple[str, ...] = (
    "in this section, we will",
    "let's now turn to",
    "before we proceed",
    "as discussed above",
    "we will now explore",
)

# =============================================================================
# WEIGHTS
# =============================================================================


@dataclass(frozen=True)
class DimensionWeights:
    """Points per signal. Each dimension is capped at max_score regardless."""

    max_score: int = DIMENSION_MAX_SCORE

    problem_section: int = 10
    problem_language_only: int = 5
    urgency_quantified: int = 8
    urgency: int = 4
    strategic_alignment: int = 7

    solution_section: int = 10
    solution_language_only: int = 5
    actionable: int = 8
    justification: int = 7

    impact_section: int = 10
    impact_language_only: int = 5
    quantified_multiple: int = 10
    quantified_single: int = 5
    business_value: int = 5

    implementation_phased: int = 10
    implementation_partial: int = 5
    timeline_multiple: int = 8
    timeline_single: int = 4
    ownership_and_resources: int = 7
    ownership_or_resources: int = 3


@dataclass(frozen=True)
class SlopWeights:
    """Slop deduction: points_per_phrase per distinct phrase, capped."""

    points_per_phrase: int = 1
    max_deduction: int = 15
    max_issue_examples: int = 3

    def __post_init__(self):
        validate_range(self.points_per_phrase, "points_per_phrase", 0, TOTAL_MAX_SCORE)
        validate_range(self.max_deduction, "max_deduction", 0, TOTAL_MAX_SCORE)


@dataclass(frozen=True)
class Rubric:
    """Everything a detector needs to know, bundled and immutable."""

    sections: tuple[SectionSpec, ...] = SECTIONS
    keywords: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: KEYWORDS)
    quantity_units: tuple[str, ...] = QUANTITY_UNITS
    phase_marker_words: tuple[str, ...] = PHASE_MARKER_WORDS
    slop_phrases: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: SLOP_PHRASES)
    over_signposting: tuple[str, ...] = OVER_SIGNPOSTING
    weights: DimensionWeights = field(default_factory=DimensionWeights)
    slop: SlopWeights = field(default_factory=SlopWeights)

    def section(self, name: str) -> SectionSpec:
        """Look up a section spec by canonical name."""
        for spec in self.sections:
            if spec.name == name:
                return spec
        raise KeyError(name)


DEFAULT_RUBRIC = Rubric()
