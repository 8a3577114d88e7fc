from __future__ import annotations

from collections.abc import Sequence

from app.analysis.grammar import heading_line_start, is_heading_position, phrase_pattern


def _find_heading(text: str, section_name: str) -> tuple[int, int] | None:
    first: tuple[int, int] | None = None
    for match in phrase_pattern(section_name).finditer(text):
        if is_heading_position(text, match.start()):
            return match.start(), match.end()
        if first is None:
            first = (match.start(), match.end())
    return first


def find_terminator(text: str, start: int, next_section_names: Sequence[str]) -> int:
    """Earliest terminator position at or after ``start``, else ``len(text)``.

    When the terminator opens a heading line, the span ends at the start of that
    line so heading markup such as ``**`` or ``###`` is not left behind.
    """
    names = tuple(name for name in next_section_names if name)
    if not names:
        return len(text)
    match = phrase_pattern(*names).search(text, start)
    if match is None:
        return len(text)
    return max(start, heading_line_start(text, match.start()))


def extract_section(text: str, section_name: str, next_section_names: Sequence[str] = ()) -> str:
    """Return the span after ``section_name`` up to the first terminator phrase.

    A heading that sits at the start of a line (optionally behind ``###``,
    ``**``, a bullet or a list number) is preferred over an earlier mention
    inside running text. A missing heading yields an empty string.
    """
    if not text or not section_name:
        return ""
    bounds = _find_heading(text, section_name)
    if bounds is None:
        return ""
    _, body_start = bounds
    body_end = find_terminator(text, body_start, next_section_names)
    return text[body_start:body_end]
