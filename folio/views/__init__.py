"""Views - build the portfolio node tree and assemble full pages.

build() is a pure Portfolio -> node tree transformation. Page assembly
(styles, host document, file output) lives in views.page.
"""

from .builder import build, build_media, build_project_block, build_skill_list

__all__ = [
    "build",
    "build_media",
    "build_project_block",
    "build_skill_list",
]
