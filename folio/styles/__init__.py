"""
Styles module for portfolio style declarations.

This module provides:
- StyleDeclaration / StyleRule / StyleSheetDefinition schemas
- PortfolioStyles, the class id for each structural role of the page
- StyleRegistry, which hands out stable class ids and emits the stylesheet
"""

from .schemas import (
    ClassId,
    PortfolioStyles,
    StyleDeclaration,
    StyleRule,
    StyleSheetDefinition,
)

from .registry import StyleRegistry, get_style_registry, init_style_registry

__all__ = [
    "ClassId",
    "PortfolioStyles",
    "StyleDeclaration",
    "StyleRule",
    "StyleSheetDefinition",
    "StyleRegistry",
    "get_style_registry",
    "init_style_registry",
]
