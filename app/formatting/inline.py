from __future__ import annotations

import html
from dataclasses import dataclass

from app.analysis.grammar import BOLD_RE


@dataclass(frozen=True)
class Segment:
    text: str
    strong: bool = False


def split_bold(text: str) -> tuple[Segment, ...]:
    segments: list[Segment] = []
    cursor = 0
    for match in BOLD_RE.finditer(text):
        if match.start() > cursor:
            segments.append(Segment(text[cursor:match.start()]))
        segments.append(Segment(match.group(1), strong=True))
        cursor = match.end()
    if cursor < len(text):
        segments.append(Segment(text[cursor:]))
    return tuple(segments)


def render_segments(segments: tuple[Segment, ...]) -> str:
    parts: list[str] = []
    for segment in segments:
        escaped = html.escape(segment.text)
        parts.append(f"<strong>{escaped}</strong>" if segment.strong else escaped)
    return "".join(parts).strip()


def render_inline(text: str) -> str:
    return render_segments(split_bold(text))
