from __future__ import annotations

import re
from functools import lru_cache

# List items and sub-headings inside an extracted section.
BULLET_RE = re.compile(r"^(?:[-•*]|\d+\.)\s+")
NUMBER_MARKER_RE = re.compile(r"^\d+\.\s+")
LABEL_LIKE_RE = re.compile(r"^[A-Z][^:]*:")
MARKUP_ONLY_RE = re.compile(r"^[-*_#=~`]+$")

# Scores.
TOTAL_SCORE_RE = re.compile(r"Total Score:\s*(\d+)/100", re.IGNORECASE)
SCORE_RE = re.compile(r"Score:\s*(\d+)/100", re.IGNORECASE)
BARE_SCORE_RE = re.compile(r"(\d+)/100")
OVERALL_SCORE_PATTERNS = (TOTAL_SCORE_RE, SCORE_RE, BARE_SCORE_RE)

# Markup allowed between the start of a line and a heading phrase.
HEADING_PREFIX_RE = re.compile(r"[ \t#*•\-\d.]*")

# Narrative formatting.
MARKDOWN_HEADING_RE = re.compile(r"^#{1,6}[ \t]+(.+?)[ \t]*$")
BOLD_LABEL_LINE_RE = re.compile(r"^\*\*([^*\n]+?:)\*\*[ \t]*(.*)$")
BOLD_RE = re.compile(r"\*\*([^*\n]+?)\*\*")
NUMBERED_ITEM_RE = re.compile(r"^\d+\.\s+$")
DASH_ITEM_RE = re.compile(r"^[-•*][ \t]+")

# Resume formatting.
IMPROVED_RESUME_LABEL_RE = re.compile(
    r"^[ \t#*]*(?:Create an\s+)?Improved Resume:?[ \t*]*\n?",
    re.IGNORECASE,
)
SECTION_LABEL_RE = re.compile(r"^\*\*([^*\n]+?):\*\*[ \t]*")
BOLD_ONLY_LINE_RE = re.compile(r"^\*\*([^*\n]+?)\*\*$")
COMPANY_ROW_RE = re.compile(r"^-[ \t]+\*\*([^*\n]+?)\*\*[ \t]*(.*)$")
NESTED_BULLET_RE = re.compile(r"^[ \t]+[-•*][ \t]+(.*)$")
TOP_BULLET_RE = re.compile(r"^[-•*][ \t]+(.*)$")
BLANK_LINE_SPLIT_RE = re.compile(r"\n[ \t]*\n")


@lru_cache(maxsize=256)
def phrase_pattern(*phrases: str) -> re.Pattern[str]:
    """Case-insensitive alternation of literal phrases, first alternative preferred on ties."""
    return re.compile("|".join(re.escape(phrase) for phrase in phrases), re.IGNORECASE)


@lru_cache(maxsize=16)
def category_score_pattern(maximum: int) -> re.Pattern[str]:
    return re.compile(rf"(\d+)/{maximum}(?!\d)")


def as_phrases(value: str | tuple[str, ...] | list[str] | None) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value else ()
    return tuple(phrase for phrase in value if phrase)


def is_bullet_line(line: str) -> bool:
    return bool(BULLET_RE.match(line))


def strip_bullet(line: str) -> str:
    return NUMBER_MARKER_RE.sub("", DASH_ITEM_RE.sub("", line, count=1), count=1).strip()


def looks_like_label(line: str) -> bool:
    return bool(LABEL_LIKE_RE.match(line))


def is_heading_position(text: str, index: int) -> bool:
    line_start = text.rfind("\n", 0, index) + 1
    return bool(HEADING_PREFIX_RE.fullmatch(text, line_start, index))


def is_markup_only(line: str) -> bool:
    return bool(MARKUP_ONLY_RE.match(line))


def heading_line_start(text: str, index: int) -> int:
    """Start of the line holding ``index`` when only heading markup precedes it, else ``index``."""
    line_start = text.rfind("\n", 0, index) + 1
    return line_start if HEADING_PREFIX_RE.fullmatch(text, line_start, index) else index
