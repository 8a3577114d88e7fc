from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class CategoryScore(_FrozenModel):
    value: int = Field(default=0, ge=0)
    max: int = Field(gt=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def exceeds_max(self) -> bool:
        return self.value > self.max


class SkillsMatching(_FrozenModel):
    matching: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    score: CategoryScore = Field(default_factory=lambda: CategoryScore(max=40))


class ExperienceMatching(_FrozenModel):
    relevant: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    score: CategoryScore = Field(default_factory=lambda: CategoryScore(max=30))


class EducationMatching(_FrozenModel):
    matching: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    score: CategoryScore = Field(default_factory=lambda: CategoryScore(max=20))


class Recommendations(_FrozenModel):
    skills_to_add: list[str] = Field(default_factory=list)
    experience_to_highlight: list[str] = Field(default_factory=list)
    education_to_include: list[str] = Field(default_factory=list)
    formatting: list[str] = Field(default_factory=list)


class ParsedAnalysis(_FrozenModel):
    overall_score: int = Field(default=0, ge=0, le=100)
    skills_matching: SkillsMatching = Field(default_factory=SkillsMatching)
    experience_matching: ExperienceMatching = Field(default_factory=ExperienceMatching)
    education_matching: EducationMatching = Field(default_factory=EducationMatching)
    recommendations: Recommendations = Field(default_factory=Recommendations)
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    overall_fit: str = ""
