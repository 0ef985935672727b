"""
Style API routes for inspecting style sheets and registered classes.
"""

from fastapi import APIRouter, HTTPException

from ...styles.schemas import PortfolioStyles, StyleSheetDefinition, StyleSheetSummary
from ...styles.registry import get_style_registry

router = APIRouter(prefix="/styles", tags=["styles"])


@router.get("", response_model=list[StyleSheetSummary])
async def list_sheets():
    """List all available style sheets with summaries."""
    registry = get_style_registry()
    return registry.list_sheets()


@router.get("/stats")
async def get_style_stats():
    """Get style registry statistics."""
    registry = get_style_registry()
    return registry.get_stats()


@router.get("/sheets/{key}", response_model=StyleSheetDefinition)
async def get_sheet(key: str):
    """Get a specific style sheet by key."""
    registry = get_style_registry()
    sheet = registry.get_sheet(key)
    if not sheet:
        raise HTTPException(status_code=404, detail=f"Style sheet '{key}' not found")
    return sheet


@router.get("/sheets/{key}/classes", response_model=PortfolioStyles)
async def get_sheet_classes(key: str):
    """Apply a style sheet and get the class id for each page role."""
    registry = get_style_registry()
    try:
        return registry.portfolio_styles(key)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
