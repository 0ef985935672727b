"""Page assembly - builds a portfolio and mounts it on an HTML document."""

import logging
from pathlib import Path
from typing import Optional, Union

from folio.portfolio.loader import load_portfolio_file
from folio.portfolio.schemas import Portfolio
from folio.renderers import HtmlBackend, HtmlDocument, mount
from folio.styles.registry import StyleRegistry, get_style_registry
from .builder import build

logger = logging.getLogger(__name__)


def render_page(
    portfolio: Portfolio,
    registry: Optional[StyleRegistry] = None,
    sheet_key: str = "default",
) -> str:
    """Render a complete HTML page for a portfolio.

    Styles are applied to the registry before the tree is built, so the
    stylesheet embedded in the page covers every class id in the tree and
    nothing from other sheets applied to the same registry.
    """
    registry = registry or get_style_registry()
    styles = registry.portfolio_styles(sheet_key)
    tree = build(portfolio, styles)

    document = HtmlDocument(title=portfolio.name, stylesheet=registry.stylesheet(sheet_key))
    mount(tree, HtmlBackend(), document)
    return document.render()


def write_page(
    config_path: Union[str, Path],
    output_path: Union[str, Path],
    sheet_key: str = "default",
    registry: Optional[StyleRegistry] = None,
) -> Path:
    """Load a configuration file and write the rendered page to disk."""
    portfolio = load_portfolio_file(config_path)
    html = render_page(portfolio, registry=registry, sheet_key=sheet_key)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    logger.info(f"Wrote portfolio page to {output_path} ({len(html)} chars)")
    return output_path
