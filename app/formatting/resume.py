from __future__ import annotations

import html
from dataclasses import dataclass, field

from app.analysis.grammar import (
    BLANK_LINE_SPLIT_RE,
    BOLD_ONLY_LINE_RE,
    BOLD_RE,
    COMPANY_ROW_RE,
    IMPROVED_RESUME_LABEL_RE,
    NESTED_BULLET_RE,
    SECTION_LABEL_RE,
    TOP_BULLET_RE,
)
from app.formatting.inline import render_inline

_META_ROW_STYLE = "display:flex;justify-content:space-between"


@dataclass
class ResumeList:
    items: list[str] = field(default_factory=list)
    nested: bool = False


@dataclass
class ResumeParagraph:
    lines: list[str] = field(default_factory=list)


@dataclass
class ResumeEntry:
    title: str = ""
    company: str = ""
    dates: str = ""
    body: list[ResumeList | ResumeParagraph] = field(default_factory=list)

    @property
    def bullets(self) -> list[str]:
        return [item for part in self.body if isinstance(part, ResumeList) and not part.nested for item in part.items]

    @property
    def nested_bullets(self) -> list[str]:
        return [item for part in self.body if isinstance(part, ResumeList) and part.nested for item in part.items]

    def is_empty(self) -> bool:
        return not (self.title or self.company or self.dates or self.body)


ResumeNode = ResumeEntry | ResumeList | ResumeParagraph


@dataclass
class ResumeSection:
    title: str | None = None
    children: list[ResumeNode] = field(default_factory=list)

    @property
    def entries(self) -> list[ResumeEntry]:
        return [child for child in self.children if isinstance(child, ResumeEntry)]


def _looks_like_entry(text: str) -> bool:
    return bool(BOLD_RE.search(text)) and ("(" in text or "Technologies" in text)


def _append_bullet(body: list, item: str, *, nested: bool) -> None:
    last = body[-1] if body else None
    if isinstance(last, ResumeList) and last.nested == nested:
        last.items.append(item)
    else:
        body.append(ResumeList(items=[item], nested=nested))


def _extend_body(body: list[ResumeList | ResumeParagraph], lines: list[str]) -> list[ResumeList | ResumeParagraph]:
    """Bullets collect into the open list; any other line closes it and becomes a paragraph."""
    for line in lines:
        if not line.strip():
            continue
        nested = NESTED_BULLET_RE.match(line)
        top = TOP_BULLET_RE.match(line.strip())
        if nested:
            _append_bullet(body, nested.group(1).strip(), nested=True)
        elif top:
            _append_bullet(body, top.group(1).strip(), nested=False)
        else:
            body.append(ResumeParagraph(lines=[line.strip()]))
    return body


def _entries(lines: list[str]) -> list[ResumeEntry]:
    entries: list[ResumeEntry] = []
    current = ResumeEntry()

    def start_new() -> None:
        nonlocal current
        if not current.is_empty():
            entries.append(current)
        current = ResumeEntry()

    for line in lines:
        if not line.strip():
            continue
        stripped = line.strip()
        title = BOLD_ONLY_LINE_RE.match(stripped)
        company = COMPANY_ROW_RE.match(line)
        if title:
            if current.title or current.company or current.body:
                start_new()
            current.title = title.group(1).strip()
        elif company:
            if current.company or current.body:
                start_new()
            current.company = company.group(1).strip()
            current.dates = company.group(2).strip()
        else:
            _extend_body(current.body, [line])
    if not current.is_empty():
        entries.append(current)
    return entries


def _section_content(text: str) -> list[ResumeNode]:
    lines = text.split("\n")
    if _looks_like_entry(text):
        return _entries(lines)
    if "- " in text:
        return _extend_body([], lines)
    return [ResumeParagraph(lines=[line.strip()]) for line in lines if line.strip()]


def strip_resume_label(text: str) -> str:
    return IMPROVED_RESUME_LABEL_RE.sub("", (text or "").strip(), count=1).strip()


def parse_resume(resume_text: str) -> list[ResumeSection]:
    """Split improved-resume text into titled sections, entries, lists and paragraphs.

    Blocks are separated by blank lines. A ``**Section:**`` block opens a
    titled section that collects the following blocks until the next section
    label. Blocks before the first label land in an untitled section.
    """
    sections: list[ResumeSection] = []
    current = ResumeSection()
    for raw_block in BLANK_LINE_SPLIT_RE.split(strip_resume_label(resume_text)):
        block = raw_block.rstrip()
        if not block.strip():
            continue
        label = SECTION_LABEL_RE.match(block.lstrip())
        if label:
            if current.title is not None or current.children:
                sections.append(current)
            current = ResumeSection(title=label.group(1).strip())
            current.children.extend(_section_content(block.lstrip()[label.end():]))
        elif current.title is not None:
            current.children.extend(_section_content(block))
        elif _looks_like_entry(block):
            current.children.extend(_entries(block.split("\n")))
        else:
            current.children.append(ResumeParagraph(lines=[line.strip() for line in block.split("\n") if line.strip()]))
    if current.title is not None or current.children:
        sections.append(current)
    return sections


def _render_list(part: ResumeList) -> str:
    css = "resume-bullets nested" if part.nested else "resume-bullets"
    items = "".join(f"<li>{render_inline(item)}</li>" for item in part.items)
    return f'<ul class="{css}">{items}</ul>'


def _render_paragraph(part: ResumeParagraph) -> str:
    return "<p>" + "<br>".join(render_inline(line) for line in part.lines) + "</p>"


def _render_entry(entry: ResumeEntry) -> str:
    parts = ['<div class="resume-entry">']
    if entry.title:
        parts.append(f'<h4 class="resume-entry-title">{render_inline(entry.title)}</h4>')
    if entry.company or entry.dates:
        parts.append(
            f'<div class="resume-entry-meta" style="{_META_ROW_STYLE}">'
            f'<span class="resume-company">{html.escape(entry.company)}</span>'
            f'<span class="resume-dates">{render_inline(entry.dates)}</span>'
            "</div>"
        )
    parts.extend(_render_node(part) for part in entry.body)
    parts.append("</div>")
    return "".join(parts)


def _render_node(node: ResumeNode) -> str:
    if isinstance(node, ResumeEntry):
        return _render_entry(node)
    if isinstance(node, ResumeList):
        return _render_list(node)
    return _render_paragraph(node)


def render_resume(sections: list[ResumeSection]) -> str:
    rendered: list[str] = []
    for section in sections:
        body = "".join(_render_node(child) for child in section.children)
        if section.title is None:
            rendered.append(body)
            continue
        rendered.append(
            '<section class="resume-section">'
            f'<h3 class="resume-section-title">{html.escape(section.title)}</h3>'
            f"{body}</section>"
        )
    return "\n".join(part for part in rendered if part)


def format_resume(resume_text: str) -> str:
    return render_resume(parse_resume(resume_text))
