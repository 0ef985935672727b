"""Error types raised while loading a portfolio or building its view tree."""

from enum import Enum
from typing import Optional

from folio.portfolio.schemas import SkillKind


class FolioError(Exception):
    """Base class for all Folio errors."""


class ConfigErrorKind(str, Enum):
    """Why a configuration document was rejected."""
    MALFORMED = "malformed"
    MISSING_FIELD = "missing_field"


class ConfigError(FolioError):
    """The configuration document could not be turned into a Portfolio."""

    def __init__(self, kind: ConfigErrorKind, message: str, field: Optional[str] = None):
        self.kind = kind
        self.field = field
        super().__init__(message)


class BuildError(FolioError):
    """The view tree could not be built from a valid Portfolio."""


class UnresolvedReference(BuildError):
    """A project names a skill that is missing from the portfolio lookup table."""

    def __init__(self, kind: SkillKind, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Unresolved {kind.value} reference: '{name}'")
