from __future__ import annotations

from app.analysis.grammar import OVERALL_SCORE_PATTERNS, category_score_pattern

SKILLS_MAX = 40
EXPERIENCE_MAX = 30
EDUCATION_MAX = 20
OVERALL_MAX = 100


def derive_category_score(overall_score: int, maximum: int) -> int:
    # Half-up rounding of overall * max / 100 in integer arithmetic.
    return (overall_score * maximum + OVERALL_MAX // 2) // OVERALL_MAX


def extract_overall_score(text: str) -> int:
    """First of ``Total Score: N/100``, ``Score: N/100``, bare ``N/100``; 0 when none match."""
    for pattern in OVERALL_SCORE_PATTERNS:
        match = pattern.search(text or "")
        if match:
            return min(int(match.group(1)), OVERALL_MAX)
    return 0


def find_category_score(section_text: str, maximum: int) -> int | None:
    match = category_score_pattern(maximum).search(section_text or "")
    return int(match.group(1)) if match else None


def extract_category_score(section_text: str, maximum: int, overall_score: int = 0) -> int:
    explicit = find_category_score(section_text, maximum)
    if explicit is not None:
        return explicit
    return derive_category_score(overall_score, maximum)
