"""Narrative formatter: markdown-ish LLM analysis text to HTML.

The text is first tagged line by line, then rewritten by an ordered pipeline
of stages. Each stage takes and returns a list of ``Block`` values, so any
prefix of the pipeline can be run and inspected on its own:

1. ``mark_headings``        ``### Heading:`` lines become level-2 headings
2. ``mark_bold_labels``     ``**Label:**`` lines become level-3 headings
3. ``mark_bold_runs``       remaining ``**bold**`` runs become emphasis segments
4. ``mark_numbered_items``  ``1. **Label** text`` lines become ordered items
5. ``mark_dash_items``      ``- item`` lines become unordered items
6. ``group_list_items``     adjacent items are merged into one list
7. ``wrap_paragraphs``      remaining text runs become paragraphs

Stages 4 and 5 read the segments produced by stage 3, and stage 7 only wraps
lines that no earlier stage claimed.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace

from app.analysis.grammar import (
    BOLD_LABEL_LINE_RE,
    DASH_ITEM_RE,
    MARKDOWN_HEADING_RE,
    NUMBERED_ITEM_RE,
)
from app.formatting.inline import Segment, render_segments, split_bold

LINE = "line"
BLANK = "blank"
HEADING = "heading"
SUBHEADING = "subheading"
ITEM = "item"
LIST = "list"
PARAGRAPH = "paragraph"


@dataclass(frozen=True)
class Block:
    kind: str
    raw: str = ""
    segments: tuple[Segment, ...] = ()
    ordered: bool = False
    children: tuple["Block", ...] = ()


Stage = Callable[[list[Block]], list[Block]]


def _clean_title(text: str) -> str:
    return text.strip().strip("*").strip().rstrip(":").strip()


def tag_lines(text: str) -> list[Block]:
    blocks: list[Block] = []
    for line in (text or "").replace("\r\n", "\n").split("\n"):
        stripped = line.strip()
        blocks.append(Block(LINE, raw=stripped) if stripped else Block(BLANK))
    return blocks


def mark_headings(blocks: list[Block]) -> list[Block]:
    result: list[Block] = []
    for block in blocks:
        match = MARKDOWN_HEADING_RE.match(block.raw) if block.kind == LINE else None
        result.append(Block(HEADING, raw=_clean_title(match.group(1))) if match else block)
    return result


def mark_bold_labels(blocks: list[Block]) -> list[Block]:
    result: list[Block] = []
    for block in blocks:
        match = BOLD_LABEL_LINE_RE.match(block.raw) if block.kind == LINE else None
        if match is None:
            result.append(block)
            continue
        result.append(Block(SUBHEADING, raw=_clean_title(match.group(1))))
        remainder = match.group(2).strip()
        if remainder:
            result.append(Block(LINE, raw=remainder))
    return result


def mark_bold_runs(blocks: list[Block]) -> list[Block]:
    return [
        replace(block, segments=split_bold(block.raw)) if block.kind in {LINE, HEADING, SUBHEADING} else block
        for block in blocks
    ]


def mark_numbered_items(blocks: list[Block]) -> list[Block]:
    result: list[Block] = []
    for block in blocks:
        segments = block.segments
        if (
            block.kind == LINE
            and len(segments) > 1
            and not segments[0].strong
            and NUMBERED_ITEM_RE.match(segments[0].text)
            and segments[1].strong
        ):
            result.append(Block(ITEM, raw=block.raw, segments=segments[1:], ordered=True))
        else:
            result.append(block)
    return result


def mark_dash_items(blocks: list[Block]) -> list[Block]:
    result: list[Block] = []
    for block in blocks:
        segments = block.segments
        if block.kind == LINE and segments and not segments[0].strong and DASH_ITEM_RE.match(segments[0].text):
            lead = DASH_ITEM_RE.sub("", segments[0].text, count=1)
            rest = ((Segment(lead),) if lead else ()) + segments[1:]
            result.append(Block(ITEM, raw=block.raw, segments=rest))
        else:
            result.append(block)
    return result


def group_list_items(blocks: list[Block]) -> list[Block]:
    result: list[Block] = []
    current: list[Block] = []
    pending_blanks: list[Block] = []

    def close() -> None:
        if current:
            result.append(Block(LIST, ordered=current[0].ordered, children=tuple(current)))
            current.clear()

    for block in blocks:
        if block.kind == ITEM:
            if current and current[0].ordered != block.ordered:
                close()
                result.extend(pending_blanks)
            pending_blanks.clear()
            current.append(block)
        elif block.kind == BLANK and current:
            pending_blanks.append(block)
        else:
            close()
            result.extend(pending_blanks)
            pending_blanks.clear()
            result.append(block)
    close()
    result.extend(pending_blanks)
    return result


def wrap_paragraphs(blocks: list[Block]) -> list[Block]:
    result: list[Block] = []
    lines: list[Block] = []

    def flush() -> None:
        if lines:
            result.append(Block(PARAGRAPH, children=tuple(lines)))
            lines.clear()

    for block in blocks:
        if block.kind == LINE:
            lines.append(block)
            continue
        flush()
        if block.kind != BLANK:
            result.append(block)
    flush()
    return result


NARRATIVE_STAGES: tuple[Stage, ...] = (
    mark_headings,
    mark_bold_labels,
    mark_bold_runs,
    mark_numbered_items,
    mark_dash_items,
    group_list_items,
    wrap_paragraphs,
)


def run_stages(text: str, stages: Sequence[Stage] = NARRATIVE_STAGES) -> list[Block]:
    blocks = tag_lines(text)
    for stage in stages:
        blocks = stage(blocks)
    return blocks


def render_block(block: Block) -> str:
    if block.kind == HEADING:
        return f"<h2>{render_segments(block.segments)}</h2>"
    if block.kind == SUBHEADING:
        return f"<h3>{render_segments(block.segments)}</h3>"
    if block.kind == LIST:
        tag = "ol" if block.ordered else "ul"
        items = "".join(f"<li>{render_segments(child.segments)}</li>" for child in block.children)
        return f"<{tag}>{items}</{tag}>"
    if block.kind == ITEM:
        return f"<li>{render_segments(block.segments)}</li>"
    if block.kind == PARAGRAPH:
        return "<p>" + "<br>".join(render_segments(child.segments) for child in block.children) + "</p>"
    if block.kind == LINE:
        return render_segments(block.segments or split_bold(block.raw))
    return ""


def format_narrative(text: str) -> str:
    """Render free-text analysis as HTML; never raises and always renders every line."""
    return "\n".join(filter(None, (render_block(block) for block in run_stages(text))))
