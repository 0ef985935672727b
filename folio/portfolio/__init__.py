"""Portfolio configuration model.

Typed Portfolio/Project definitions plus the loader that turns a YAML or
JSON document into a validated, read-only Portfolio.
"""

from .schemas import (
    Portfolio,
    Project,
    SkillKind,
    VIDEO_FORMATS,
)

__all__ = [
    "Portfolio",
    "Project",
    "SkillKind",
    "VIDEO_FORMATS",
]
