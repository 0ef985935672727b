"""Portfolio schemas - the typed form of a portfolio configuration.

A Portfolio describes one person: contact details, a short biography,
two skill lookup tables (name -> display URL) and an ordered list of
projects. Projects reference skills by name; the references are resolved
against the lookup tables when the view tree is built.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Extensions appended to a project's video stem, in source order
VIDEO_FORMATS: tuple[tuple[str, str], ...] = (
    ("webm", "video/webm"),
    ("mp4", "video/mp4"),
)


class SkillKind(str, Enum):
    """Which lookup table a skill reference is resolved against."""
    LANGUAGE = "language"
    TECHNOLOGY = "technology"


class Project(BaseModel):
    """One showcased work item."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    name: str = Field(..., description="Project title, rendered as a link")
    role: str = Field(..., description="The person's role on the project")
    languages: list[str] = Field(
        ...,
        description="Ordered language references (keys of Portfolio.languages)",
    )
    technologies: list[str] = Field(
        ...,
        description="Ordered technology references (keys of Portfolio.technologies)",
    )
    description: str = Field(..., description="Free text, rendered verbatim")
    video: Optional[str] = Field(
        default=None,
        description="Path stem of a demo video; format extensions are appended",
    )
    url: str = Field(..., description="Link target for the project name")

    def skills(self, kind: SkillKind) -> list[str]:
        """Get the ordered references of one kind."""
        if kind == SkillKind.LANGUAGE:
            return self.languages
        return self.technologies

    def video_sources(self) -> list[tuple[str, str]]:
        """Derive (url, mime type) pairs from the video stem.

        Returns an empty list when the project has no video.
        """
        if self.video is None:
            return []
        return [(f"{self.video}.{ext}", mime) for ext, mime in VIDEO_FORMATS]


class Portfolio(BaseModel):
    """Root configuration entity: a person and their projects."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    name: str
    email: str
    about: str
    languages: dict[str, str] = Field(
        ...,
        description="Language name -> display URL",
    )
    technologies: dict[str, str] = Field(
        ...,
        description="Technology name -> display URL",
    )
    projects: list[Project] = Field(
        ...,
        description="Projects in display order",
    )

    @field_validator("name", "email", "about")
    @classmethod
    def _require_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    def skill_table(self, kind: SkillKind) -> dict[str, str]:
        """Get the lookup table for one kind of skill."""
        if kind == SkillKind.LANGUAGE:
            return self.languages
        return self.technologies
