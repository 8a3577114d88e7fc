from __future__ import annotations

from app.analysis.grammar import is_heading_position, phrase_pattern

IMPROVED_RESUME_HEADINGS = ("Create an Improved Resume", "Improved Resume:")
_HEADING_TAIL = " \t:*#"


def _after_heading(text: str, end: int) -> str:
    line_end = text.find("\n", end)
    tail = text[end:] if line_end == -1 else text[end:line_end]
    if tail.strip(_HEADING_TAIL):
        return text[end:].lstrip(" \t:")
    return "" if line_end == -1 else text[line_end + 1 :]


def split_response(raw_text: str) -> tuple[str, str]:
    """Split one completion into ``(analysis_text, improved_resume_text)``.

    The improved resume starts at the first "Create an Improved Resume" or
    "Improved Resume:" heading that begins a line. Without such a heading the
    whole completion is analysis and the improved resume is empty.
    """
    text = raw_text or ""
    for heading in IMPROVED_RESUME_HEADINGS:
        for match in phrase_pattern(heading).finditer(text):
            if not is_heading_position(text, match.start()):
                continue
            line_start = text.rfind("\n", 0, match.start()) + 1
            return text[:line_start].strip(), _after_heading(text, match.end()).strip()
    return text.strip(), ""
