"""Folio API - serves a rendered portfolio page.

The portfolio configuration is loaded once at startup (an invalid file
aborts startup) and the style registry is populated before any request
builds a tree:
- Rendered HTML page
- Portfolio configuration as JSON
- View tree through any rendering backend
- Stylesheet and style sheet definitions
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from folio import __version__
from folio.api.routes import portfolio, styles
from folio.portfolio.loader import load_portfolio_file
from folio.renderers import list_backends
from folio.styles.registry import get_style_registry, init_style_registry

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"
DEFAULT_STYLE_SHEET = "default"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    config_path = os.environ.get("FOLIO_CONFIG_PATH", DEFAULT_CONFIG_PATH)
    sheet_key = os.environ.get("FOLIO_STYLE_SHEET", DEFAULT_STYLE_SHEET)

    logger.info(f"Loading portfolio configuration from {config_path}...")
    loaded = load_portfolio_file(config_path)
    logger.info(f"Loaded {len(loaded.projects)} projects for {loaded.name}")

    logger.info(f"Initializing style sheet '{sheet_key}'...")
    init_style_registry(sheet_key)
    style_stats = get_style_registry().get_stats()
    logger.info(f"Registered {style_stats['classes_registered']} classes, {style_stats['rules_registered']} rules")

    portfolio.init_portfolio(loaded, sheet_key)
    logger.info("Folio API ready")
    yield
    # Shutdown
    logger.info("Shutting down Folio API")


# Create FastAPI app
app = FastAPI(
    title="Folio API",
    description="""
## Portfolio Page Service

Renders a personal portfolio page from a YAML configuration.

### Key Endpoints

- `GET /` - Rendered portfolio page
- `GET /v1/portfolio` - Loaded configuration
- `GET /v1/portfolio/tree` - View tree (`?backend=json|html`)
- `GET /v1/portfolio/stylesheet` - CSS for the page
- `GET /v1/styles` - Available style sheets
""",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with /v1 prefix
app.include_router(portfolio.router, prefix="/v1")
app.include_router(styles.router, prefix="/v1")


@app.get("/", response_class=HTMLResponse)
async def root():
    """Rendered portfolio page."""
    return HTMLResponse(portfolio.render_portfolio_page())


@app.get("/health")
async def health():
    """Health check endpoint."""
    loaded = portfolio.get_portfolio()
    style_stats = get_style_registry().get_stats()

    return {
        "status": "healthy",
        "projects_loaded": len(loaded.projects),
        "style_sheet": portfolio.get_sheet_key(),
        "classes_registered": style_stats["classes_registered"],
        "backends": list_backends(),
    }


@app.get("/v1")
async def api_v1_root():
    """API v1 root with available endpoints."""
    return {
        "version": "v1",
        "service": "Folio API",
        "endpoints": [
            "GET /v1/portfolio",
            "GET /v1/portfolio/tree",
            "GET /v1/portfolio/page",
            "GET /v1/portfolio/stylesheet",
            "GET /v1/styles",
            "GET /v1/styles/stats",
            "GET /v1/styles/sheets/{key}",
            "GET /v1/styles/sheets/{key}/classes",
        ],
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "folio.api.main:app",
        host="0.0.0.0",
        port=8001,
        reload=True,
    )
