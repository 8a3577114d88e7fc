from __future__ import annotations

from app.analysis.grammar import (
    as_phrases,
    heading_line_start,
    is_bullet_line,
    is_markup_only,
    looks_like_label,
    phrase_pattern,
    strip_bullet,
)

Labels = str | tuple[str, ...] | list[str]


def _label_body(section_text: str, item_start_label: Labels, next_label: Labels | None) -> str | None:
    start_phrases = as_phrases(item_start_label)
    if not section_text or not start_phrases:
        return None
    start = phrase_pattern(*start_phrases).search(section_text)
    if start is None:
        return None

    body = section_text[start.end():]
    end_phrases = as_phrases(next_label)
    if end_phrases:
        end = phrase_pattern(*end_phrases).search(body)
        if end is not None:
            body = body[: heading_line_start(body, end.start())]
    return body


def collect_items(lines: list[str]) -> list[str]:
    """Turn raw lines into list items, merging wrapped continuation lines into the previous item."""
    items: list[str] = []
    for raw_line in lines:
        line = raw_line.strip()
        if is_markup_only(line):
            continue
        if is_bullet_line(line):
            items.append(strip_bullet(line))
        elif line and not looks_like_label(line) and items:
            items[-1] = f"{items[-1]} {line}"
    return [item for item in items if item]


def extract_items(section_text: str, item_start_label: Labels, next_label: Labels | None = None) -> list[str]:
    """Extract the bulleted items that follow ``item_start_label`` inside ``section_text``.

    ``item_start_label`` and ``next_label`` may be a single phrase or a tuple of
    alternative phrases; matching is case-insensitive. An absent start label
    yields an empty list. Items keep discovery order and duplicates are kept.
    """
    body = _label_body(section_text, item_start_label, next_label)
    if body is None:
        return []
    return collect_items(body.split("\n"))
