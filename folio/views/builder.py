"""View builder - turns a Portfolio into a styled node tree.

One deterministic forward pass:
- header: name, mailto link, about paragraph
- one block per project, in configuration order
- skill chips resolved against the portfolio lookup tables
- a video element only for projects that have one

The builder is pure. It allocates a fresh tree on every call, performs no
I/O and treats style class ids as inert tokens. An unresolved skill
reference aborts the whole build; no partial tree is returned.
"""

import logging
from typing import Optional

from folio.errors import UnresolvedReference
from folio.nodes import ElementNode, element
from folio.portfolio.schemas import Portfolio, Project, SkillKind
from folio.styles.schemas import PortfolioStyles

logger = logging.getLogger(__name__)

SEPARATOR = " ♢ "
ROLE_LABEL = "Role: "
LANGUAGES_LABEL = "Languages: "
TECHNOLOGIES_LABEL = "Technologies: "
VIDEO_FALLBACK = "Your browser does not support HTML5 videos"
VIDEO_ATTRIBUTES = {"muted": "true", "loop": "true", "controls": "true"}


def build_skill_list(
    references: list[str],
    table: dict[str, str],
    kind: SkillKind,
) -> list[ElementNode]:
    """Build one chip per reference, separated by interior separators.

    Each chip is a span holding an emphasised link; every chip except the
    last also holds a separator text leaf, so n references yield n - 1
    separators.

    Raises:
        UnresolvedReference: If a reference is not a key of `table`
    """
    chips = []
    for index, name in enumerate(references):
        if name not in table:
            raise UnresolvedReference(kind, name)
        link = element("em", element("a", name, attrs={"href": table[name]}))
        if index + 1 < len(references):
            chips.append(element("span", link, SEPARATOR))
        else:
            chips.append(element("span", link))
    return chips


def build_media(project: Project) -> Optional[ElementNode]:
    """Build the video element for a project, or None when it has no video."""
    sources = project.video_sources()
    if not sources:
        return None
    return element(
        "video",
        *[element("source", attrs={"src": src, "type": mime}) for src, mime in sources],
        VIDEO_FALLBACK,
        attrs=VIDEO_ATTRIBUTES,
    )


def build_project_block(
    project: Project,
    portfolio: Portfolio,
    styles: PortfolioStyles,
) -> ElementNode:
    """Build the block for one project."""
    languages, technologies = (
        build_skill_list(project.skills(kind), portfolio.skill_table(kind), kind)
        for kind in (SkillKind.LANGUAGE, SkillKind.TECHNOLOGY)
    )

    banner = element(
        "div",
        element(
            "a",
            project.name,
            attrs={"href": project.url},
            classes=(styles.project_name,),
        ),
        element("span", element("b", ROLE_LABEL), project.role),
        classes=(styles.project_banner,),
    )

    body: list[ElementNode] = [banner, element("p", project.description)]
    media = build_media(project)
    if media is not None:
        body.append(media)
    body.append(
        element(
            "div",
            element("b", LANGUAGES_LABEL),
            *languages,
            element("br"),
            element("b", TECHNOLOGIES_LABEL),
            *technologies,
        )
    )

    return element(
        "div",
        element("hr"),
        element("div", *body, classes=(styles.project,)),
    )


def build(portfolio: Portfolio, styles: Optional[PortfolioStyles] = None) -> ElementNode:
    """Build the full page tree for a portfolio.

    Args:
        portfolio: Validated portfolio
        styles: Class ids per page role (default: unstyled)

    Returns:
        Root element of a freshly allocated tree

    Raises:
        UnresolvedReference: If any project names an unknown skill
    """
    styles = styles or PortfolioStyles()

    projects = [
        build_project_block(project, portfolio, styles)
        for project in portfolio.projects
    ]

    root = element(
        "div",
        element("h1", portfolio.name, classes=(styles.center,)),
        element(
            "div",
            element("em", element("a", portfolio.email, attrs={"href": f"mailto:{portfolio.email}"})),
            classes=(styles.center,),
        ),
        element("p", portfolio.about),
        *projects,
        classes=(styles.content,),
    )
    logger.debug(f"Built view tree for {portfolio.name}: {len(projects)} project blocks")
    return root
