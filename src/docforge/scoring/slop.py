"""
Slop Detector -- flags generic, low-information filler language.

Lexical categories (see rubric.SLOP_PHRASES):
  - generic_booster: intensifiers that add no meaning ("extremely", "truly")
  - buzzword: marketing adjectives and verbs ("seamless", "leverage")
  - filler_phrase: deletable padding ("it goes without saying that")
  - hedge, sycophantic, transitional_filler, marketing_filler

Deduction depends only on how many DISTINCT phrases were flagged:
    min(max_deduction, distinct * points_per_phrase)

Structural patterns, em-dashes and stylometric flags are reported as an
informational slop_score/severity and never change the deduction.

Keep this file under 250 lines.
"""

import logging
import math
import re
from functools import lru_cache

from .models import SlopResult
from .rubric import DEFAULT_RUBRIC, Rubric

logger = logging.getLogger(__name__)

FORMULAIC_INTRO = re.compile(
    r"^(in today's|in this (document|section|proposal)|this (document|proposal) (will|aims|seeks))",
    re.IGNORECASE | re.MULTILINE,
)
# "overview ... key points ... conclusion", each gap at most PROGRESSION_GAP chars
PROGRESSION_GAP = 500
PROGRESSION_END = re.compile(r"best practices|conclusion")
SYMMETRIC_COVERAGE = re.compile(
    r"(on one hand|on the other hand|pros and cons|advantages and disadvantages)",
    re.IGNORECASE,
)

MIN_SENTENCES = 3
MIN_SENTENCE_STD_DEV = 8.0
MIN_WORDS_FOR_TTR = 50
TTR_WINDOW = 100
MIN_TTR = 0.45

SEVERITY_BANDS = ((10, "clean"), (25, "light"), (45, "moderate"), (65, "heavy"))


def _normalize_quotes(text: str) -> str:
    return text.replace("’", "'").replace("‘", "'")


@lru_cache(maxsize=512)
def _word_pattern(word: str) -> re.Pattern:
    return re.compile(rf"(?<![\w-]){re.escape(word)}(?![\w-])", re.IGNORECASE)


def detect_phrases(text: str, phrases: tuple[str, ...]) -> list[str]:
    """Phrases from the list that occur in text, in list order.

    Multi-word phrases match as case-insensitive substrings; single words
    match on word boundaries so "very" does not fire inside "every".
    """
    if not text:
        return []
    lower = _normalize_quotes(text).lower()
    found = []
    for phrase in phrases:
        if " " in phrase:
            if phrase.lower() in lower:
                found.append(phrase)
        elif _word_pattern(phrase).search(lower):
            found.append(phrase)
    return found


def _has_template_progression(lower: str) -> bool:
    """Anchor on each "key points" and look a bounded window either side."""
    start = lower.find("key points")
    while start != -1:
        end = start + len("key points")
        opening = lower.rfind("overview", max(0, start - PROGRESSION_GAP - len("overview")), start)
        if opening != -1:
            closing = PROGRESSION_END.search(lower, end, end + PROGRESSION_GAP + len("best practices"))
            if closing and closing.start() <= end + PROGRESSION_GAP:
                return True
        start = lower.find("key points", end)
    return False


def detect_structural_patterns(text: str, rubric: Rubric = DEFAULT_RUBRIC) -> list[str]:
    """Formulaic document-structure tells."""
    found = []
    if FORMULAIC_INTRO.search(_normalize_quotes(text)):
        found.append("formulaic-introduction")
    lower = text.lower()
    for phrase in rubric.over_signposting:
        if phrase in lower:
            found.append(f'over-signposting: "{phrase}"')
            break
    if _has_template_progression(lower):
        found.append("template-section-progression")
    if SYMMETRIC_COVERAGE.search(text):
        found.append("symmetric-coverage")
    return found


def analyze_sentence_variance(text: str) -> str | None:
    """Flag uniform sentence lengths. Returns an issue string or None."""
    sentences = [s for s in re.split(r"[.!?]+", text) if s.strip()]
    if len(sentences) < MIN_SENTENCES:
        return None
    lengths = [len(s.split()) for s in sentences]
    mean = sum(lengths) / len(lengths)
    std_dev = math.sqrt(sum((n - mean) ** 2 for n in lengths) / len(lengths))
    if std_dev < MIN_SENTENCE_STD_DEV:
        return f"Low sentence variance (stdev={std_dev:.1f}, target >{MIN_SENTENCE_STD_DEV:.0f})"
    return None


def analyze_type_token_ratio(text: str) -> str | None:
    """Flag limited vocabulary diversity. Returns an issue string or None."""
    words = re.sub(r"[^\w\s]", "", text.lower()).split()
    if len(words) < MIN_WORDS_FOR_TTR:
        return None
    windows = [
        words[i:i + TTR_WINDOW]
        for i in range(0, len(words) - TTR_WINDOW + 1, TTR_WINDOW)
    ]
    if windows:
        ttr = sum(len(set(w)) / TTR_WINDOW for w in windows) / len(windows)
    else:
        ttr = len(set(words)) / len(words)
    if ttr < MIN_TTR:
        return f"Low vocabulary diversity (TTR={ttr:.2f}, target >{MIN_TTR})"
    return None


def _severity(score: int) -> str:
    for ceiling, label in SEVERITY_BANDS:
        if score <= ceiling:
            return label
    return "severe"


def detect_slop(text: str, rubric: Rubric = DEFAULT_RUBRIC) -> SlopResult:
    """Scan text for filler language and compute the score deduction."""
    if not isinstance(text, str) or not text.strip():
        return SlopResult()

    categories: dict[str, list[str]] = {}
    for category, phrases in rubric.slop_phrases.items():
        hits = detect_phrases(text, tuple(phrases))
        if hits:
            categories[category] = hits

    flagged = sorted({p.lower() for hits in categories.values() for p in hits})
    weights = rubric.slop
    deduction = min(weights.max_deduction, len(flagged) * weights.points_per_phrase)

    em_dashes = text.count("—")
    structural = detect_structural_patterns(text, rubric)
    stylometric = [
        issue
        for issue in (analyze_sentence_variance(text), analyze_type_token_ratio(text))
        if issue
    ]

    lexical_score = min(40, len(flagged) * 2 + em_dashes)
    structural_score = min(25, len(structural) * 5)
    stylometric_score = min(15, len(stylometric) * 5)
    slop_score = lexical_score + structural_score + stylometric_score

    issues = []
    if flagged:
        issues.append(
            f"{len(flagged)} generic filler phrase(s) flagged: -{deduction} points"
        )
        examples = ", ".join(f'"{p}"' for p in flagged[: weights.max_issue_examples])
        issues.append(f"Examples: {examples}")

    if flagged or structural:
        logger.debug(
            f"[Slop] {len(flagged)} phrases, {len(structural)} structural, "
            f"deduction={deduction} severity={_severity(slop_score)}"
        )

    return SlopResult(
        deduction=deduction,
        flagged_phrases=flagged,
        categories=categories,
        issues=issues,
        slop_score=slop_score,
        severity=_severity(slop_score),
        em_dash_count=em_dashes,
        structural_patterns=structural,
        stylometric_issues=stylometric,
    )
