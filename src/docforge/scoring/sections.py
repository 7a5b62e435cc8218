"""
Section Detector -- finds canonical proposal sections by their headings.

A heading is either a markdown ATX heading ("## Business Impact") or a short
standalone title line ("Business Impact:" on its own, after a blank line).
The heading predicate is exposed on its own so its edge cases can be tested
without running a whole document through the rubric.

Keep this file under 150 lines.
"""

import logging
import re
from functools import lru_cache

from .models import SectionReport
from .rubric import DEFAULT_RUBRIC, Rubric

logger = logging.getLogger(__name__)

MAX_TITLE_WORDS = 8
MAX_TITLE_CHARS = 80

ATX_HEADING = re.compile(r"^#{1,6}\s*([^#\s].*)$")
LIST_OR_BLOCK = re.compile(r"^(?:[-*+]\s|>|\||```|~~~)")
SENTENCE_END = (".", "!", "?", ",", ";")
LEADING_NUMBER = re.compile(r"^(?:\d+(?:\.\d+)*[.)]?|[ivxlc]+[.)])\s+", re.IGNORECASE)
LEADING_ARTICLE = re.compile(r"^(?:the|our|a|an)\s+")
EMPHASIS = re.compile(r"^[*_]{1,3}(.*?)[*_]{1,3}$")


def _strip_emphasis(text: str) -> str:
    match = EMPHASIS.match(text)
    return match.group(1).strip() if match else text


def is_heading_line(line: str) -> bool:
    """Return True if a single line reads as a section heading.

    ATX headings always qualify. Other lines qualify when they are short
    titles: at most MAX_TITLE_WORDS words and MAX_TITLE_CHARS characters,
    containing a letter, not a list item, quote, table row or code fence,
    and not ending in sentence punctuation. A trailing colon is allowed.
    """
    if not line or not line.strip():
        return False
    stripped = line.strip()

    if ATX_HEADING.match(stripped):
        return True
    if stripped.startswith("#") or LIST_OR_BLOCK.match(stripped):
        return False

    title = _strip_emphasis(stripped.rstrip(":").strip())
    title = title.rstrip(":").strip()
    if not title or not re.search(r"[A-Za-z]", title):
        return False
    if title.endswith(SENTENCE_END):
        return False
    if len(title) > MAX_TITLE_CHARS or len(title.split()) > MAX_TITLE_WORDS:
        return False
    return True


def heading_title(line: str) -> str:
    """Normalize a heading line to a lowercase, comparable title."""
    title = line.strip()
    match = ATX_HEADING.match(title)
    if match:
        # closing hashes ("## Risks ##") are stripped here, not in the regex
        title = match.group(1).rstrip().rstrip("#")
    title = _strip_emphasis(title.strip())
    title = title.rstrip(":").strip()
    title = _strip_emphasis(title)
    title = LEADING_NUMBER.sub("", title)
    title = re.sub(r"[-_/]+", " ", title.lower())
    title = re.sub(r"\s+", " ", title).strip()
    return LEADING_ARTICLE.sub("", title)


def heading_titles(text: str) -> list[str]:
    """All normalized heading titles in document order.

    Non-ATX title lines only count when they stand alone: first line of the
    document or preceded by a blank line.
    """
    if not text:
        return []
    titles = []
    previous_blank = True
    for line in text.splitlines():
        stripped = line.strip()
        if is_heading_line(stripped):
            if ATX_HEADING.match(stripped) or previous_blank:
                title = heading_title(stripped)
                if title:
                    titles.append(title)
        previous_blank = not stripped
    return titles


@lru_cache(maxsize=64)
def _synonym_pattern(synonyms: tuple[str, ...]) -> re.Pattern:
    alternatives = "|".join(
        re.escape(re.sub(r"[-_/]+", " ", s.lower())) for s in synonyms
    )
    return re.compile(rf"^(?:{alternatives})s?\b")


def titles_match(titles: list[str], synonyms: tuple[str, ...]) -> bool:
    """True if any title starts with one of the synonyms."""
    if not synonyms:
        return False
    pattern = _synonym_pattern(tuple(synonyms))
    return any(pattern.match(title) for title in titles)


def has_section(text: str, name: str, rubric: Rubric = DEFAULT_RUBRIC) -> bool:
    """True if the canonical section ``name`` has a heading in text."""
    return titles_match(heading_titles(text), rubric.section(name).synonyms)


def detect_sections(text: str, rubric: Rubric = DEFAULT_RUBRIC) -> SectionReport:
    """Report which canonical sections are present and which are missing."""
    titles = heading_titles(text)
    report = SectionReport()
    for spec in rubric.sections:
        if titles_match(titles, spec.synonyms):
            report.found.append(spec.name)
        else:
            report.missing.append(spec.name)
    logger.debug(
        f"[Sections] {len(report.found)} found, {len(report.missing)} missing "
        f"({len(titles)} headings)"
    )
    return report
