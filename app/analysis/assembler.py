from __future__ import annotations

import logging
from dataclasses import dataclass

from app.analysis.grammar import phrase_pattern
from app.analysis.lists import extract_items
from app.analysis.scores import (
    EDUCATION_MAX,
    EXPERIENCE_MAX,
    SKILLS_MAX,
    extract_category_score,
    extract_overall_score,
)
from app.analysis.sections import extract_section, find_terminator
from app.schemas.analysis import (
    CategoryScore,
    EducationMatching,
    ExperienceMatching,
    ParsedAnalysis,
    Recommendations,
    SkillsMatching,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectionRule:
    heading: str
    terminators: tuple[str, ...]


SKILLS_SECTION = SectionRule("Skills Matching", ("Experience Matching", "Education Matching", "Scoring"))
EXPERIENCE_SECTION = SectionRule("Experience Matching", ("Education Matching", "Scoring", "Recommendations"))
EDUCATION_SECTION = SectionRule("Education Matching", ("Scoring", "Recommendations", "Summary"))
RECOMMENDATIONS_SECTION = SectionRule("Recommendations:", ("Summary", "Create an"))
SUMMARY_SECTION = SectionRule("Summary:", ("Create an",))

MATCHING_SKILLS = ("Matching Skills:", "Matching Skill:")
MISSING_SKILLS = ("Missing Skills:", "Missing Skill:")
RELEVANT_EXPERIENCE = ("Relevant Experience:",)
MISSING_EXPERIENCE = ("Missing Experience:",)
MATCHING_EDUCATION = ("Matching Education:",)
MISSING_EDUCATION = ("Missing Education:",)

SKILLS_TO_ADD = ("Skills to Add:",)
EXPERIENCE_TO_HIGHLIGHT = ("Experience to Highlight:",)
EDUCATION_TO_INCLUDE = ("Education to Include:",)
FORMATTING = ("Formatting and Presentation:",)

STRENGTHS = ("Strengths:",)
WEAKNESSES = ("Weaknesses:",)
OVERALL_FIT = ("Overall Fit:",)
OVERALL_FIT_TERMINATORS = ("Create an", "\n\n")

_EDGE_MARKUP = " \t\r\n*"


def _section(text: str, rule: SectionRule) -> str:
    return extract_section(text, rule.heading, rule.terminators)


def _extract_overall_fit(summary_text: str) -> str:
    match = phrase_pattern(*OVERALL_FIT).search(summary_text)
    if match is None:
        return ""
    body = summary_text[match.end():].lstrip(_EDGE_MARKUP)
    end = find_terminator(body, 0, OVERALL_FIT_TERMINATORS)
    return body[:end].strip(_EDGE_MARKUP)


def _skills(text: str, overall_score: int) -> SkillsMatching:
    section = _section(text, SKILLS_SECTION)
    return SkillsMatching(
        matching=extract_items(section, MATCHING_SKILLS, MISSING_SKILLS),
        missing=extract_items(section, MISSING_SKILLS, SKILLS_SECTION.terminators),
        score=CategoryScore(value=extract_category_score(section, SKILLS_MAX, overall_score), max=SKILLS_MAX),
    )


def _experience(text: str, overall_score: int) -> ExperienceMatching:
    section = _section(text, EXPERIENCE_SECTION)
    return ExperienceMatching(
        relevant=extract_items(section, RELEVANT_EXPERIENCE, MISSING_EXPERIENCE),
        missing=extract_items(section, MISSING_EXPERIENCE, EXPERIENCE_SECTION.terminators),
        score=CategoryScore(
            value=extract_category_score(section, EXPERIENCE_MAX, overall_score),
            max=EXPERIENCE_MAX,
        ),
    )


def _education(text: str, overall_score: int) -> EducationMatching:
    section = _section(text, EDUCATION_SECTION)
    return EducationMatching(
        matching=extract_items(section, MATCHING_EDUCATION, MISSING_EDUCATION),
        missing=extract_items(section, MISSING_EDUCATION, EDUCATION_SECTION.terminators),
        score=CategoryScore(
            value=extract_category_score(section, EDUCATION_MAX, overall_score),
            max=EDUCATION_MAX,
        ),
    )


def _recommendations(text: str) -> Recommendations:
    section = _section(text, RECOMMENDATIONS_SECTION)
    return Recommendations(
        skills_to_add=extract_items(
            section,
            SKILLS_TO_ADD,
            EXPERIENCE_TO_HIGHLIGHT + EDUCATION_TO_INCLUDE + ("Formatting", "Summary"),
        ),
        experience_to_highlight=extract_items(
            section,
            EXPERIENCE_TO_HIGHLIGHT,
            EDUCATION_TO_INCLUDE + ("Formatting", "Summary"),
        ),
        education_to_include=extract_items(section, EDUCATION_TO_INCLUDE, ("Formatting", "Summary")),
        formatting=extract_items(section, FORMATTING, ("Summary",)),
    )


def assemble(raw_text: str) -> ParsedAnalysis:
    """Parse a free-text ATS analysis into a fully defaulted ``ParsedAnalysis``."""
    text = raw_text or ""
    overall_score = extract_overall_score(text)
    summary = _section(text, SUMMARY_SECTION)

    analysis = ParsedAnalysis(
        overall_score=overall_score,
        skills_matching=_skills(text, overall_score),
        experience_matching=_experience(text, overall_score),
        education_matching=_education(text, overall_score),
        recommendations=_recommendations(text),
        strengths=extract_items(summary, STRENGTHS, WEAKNESSES + OVERALL_FIT),
        weaknesses=extract_items(summary, WEAKNESSES, OVERALL_FIT),
        overall_fit=_extract_overall_fit(summary),
    )
    logger.debug(
        "analysis_assembled score=%s matching_skills=%s missing_skills=%s",
        analysis.overall_score,
        len(analysis.skills_matching.matching),
        len(analysis.skills_matching.missing),
    )
    return analysis
