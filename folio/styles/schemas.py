"""
Pydantic schemas for style declarations and style sheets.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Opaque identifier attached to element nodes
ClassId = str


def _check_css_text(value: str) -> str:
    # CSS is embedded raw in a <style> block
    if "<" in value:
        raise ValueError(f"CSS text must not contain '<': {value!r}")
    return value


def declaration_body(properties: dict[str, str]) -> str:
    """Render properties as the body of a CSS declaration block."""
    return " ".join(f"{prop}: {value};" for prop, value in properties.items())


def _check_css_properties(properties: dict[str, str]) -> dict[str, str]:
    for prop, value in properties.items():
        _check_css_text(prop)
        _check_css_text(value)
    return properties


class StyleDeclaration(BaseModel):
    """A block of CSS properties scoped to one class."""
    model_config = ConfigDict(frozen=True)

    properties: dict[str, str] = Field(default_factory=dict, description="CSS property -> value, in order")

    @field_validator("properties")
    @classmethod
    def _check_properties(cls, value: dict[str, str]) -> dict[str, str]:
        return _check_css_properties(value)

    def css_body(self) -> str:
        """Render the properties as a CSS declaration block body."""
        return declaration_body(self.properties)


class StyleRule(BaseModel):
    """A page-wide rule for an arbitrary selector (e.g. 'body', 'video')."""
    model_config = ConfigDict(frozen=True)

    selector: str = Field(..., description="CSS selector")
    properties: dict[str, str] = Field(default_factory=dict, description="CSS property -> value")

    @field_validator("selector")
    @classmethod
    def _check_selector(cls, value: str) -> str:
        return _check_css_text(value)

    @field_validator("properties")
    @classmethod
    def _check_properties(cls, value: dict[str, str]) -> dict[str, str]:
        return _check_css_properties(value)

    def css(self) -> str:
        return f"{self.selector} {{ {declaration_body(self.properties)} }}"


class StyleSheetDefinition(BaseModel):
    """A named set of class declarations and page rules."""
    sheet_key: str = Field(..., description="Unique identifier (e.g. 'default')")
    name: str = Field(..., description="Human-readable name")
    description: str = Field(default="", description="What this sheet looks like")
    classes: dict[str, StyleDeclaration] = Field(
        default_factory=dict,
        description="Structural role (content, center, project, ...) -> declaration",
    )
    rules: list[StyleRule] = Field(default_factory=list, description="Page-wide rules")


class PortfolioStyles(BaseModel):
    """Class ids for each structural role of the portfolio page.

    An empty id means the role is left unstyled.
    """
    model_config = ConfigDict(frozen=True)

    content: ClassId = Field("", description="Outer page container")
    center: ClassId = Field("", description="Centered heading and email line")
    project: ClassId = Field("", description="Project block body")
    project_banner: ClassId = Field("", description="Row holding project name and role")
    project_name: ClassId = Field("", description="Prominent project name link")


class StyleSheetSummary(BaseModel):
    """Lightweight summary for listing endpoints."""
    sheet_key: str
    name: str
    description: str = ""
    class_roles: list[str] = Field(default_factory=list)
    rule_count: int = 0
    source_file: Optional[str] = None
