"""API routes for the loaded portfolio and its view tree."""

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse, PlainTextResponse

from folio.errors import BuildError
from folio.portfolio.schemas import Portfolio
from folio.renderers import get_backend, mount
from folio.styles.registry import get_style_registry
from folio.views.builder import build
from folio.views.page import render_page

router = APIRouter(prefix="/portfolio", tags=["portfolio"])

_portfolio: Portfolio | None = None
_sheet_key: str = "default"


def init_portfolio(portfolio: Portfolio, sheet_key: str = "default") -> None:
    global _portfolio, _sheet_key
    _portfolio = portfolio
    _sheet_key = sheet_key


def get_portfolio() -> Portfolio:
    if _portfolio is None:
        raise HTTPException(status_code=503, detail="Portfolio not loaded")
    return _portfolio


def get_sheet_key() -> str:
    return _sheet_key


def render_portfolio_page() -> str:
    """Render the full HTML page, mapping build failures to HTTP 500."""
    try:
        return render_page(get_portfolio(), sheet_key=_sheet_key)
    except BuildError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("", response_model=Portfolio)
async def read_portfolio():
    """Get the loaded portfolio configuration."""
    return get_portfolio()


@router.get("/tree")
async def read_tree(
    backend: str = Query("json", description="Rendering backend: 'json' or 'html'"),
):
    """Build the view tree and render it with the requested backend."""
    portfolio = get_portfolio()
    try:
        renderer = get_backend(backend)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    styles = get_style_registry().portfolio_styles(_sheet_key)
    try:
        tree = build(portfolio, styles)
    except BuildError as e:
        raise HTTPException(status_code=500, detail=str(e))

    rendered = mount(tree, renderer)
    if backend == "html":
        return HTMLResponse(str(rendered))
    return rendered


@router.get("/page", response_class=HTMLResponse)
async def read_page():
    """Render the complete HTML page."""
    return HTMLResponse(render_portfolio_page())


@router.get("/stylesheet", response_class=PlainTextResponse)
async def read_stylesheet():
    """Get the CSS for the classes and rules of the served style sheet."""
    return PlainTextResponse(get_style_registry().stylesheet(_sheet_key), media_type="text/css")
