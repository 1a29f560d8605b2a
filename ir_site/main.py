"""
IR Site Renderer - Web App
Run with: python -m ir_site.main
"""

import logging
from functools import lru_cache
from typing import Optional, Dict, Any

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from . import __version__
from .backend.component_data import ComponentDataPreparer, DataPreparer, merge_template_data
from .backend.page_builder import PageBuilder, available_layouts
from .backend.theme_params import resolve_theme
from .config import Settings
from .errors import CMSFetchError, UnknownLayoutError
from .models import Company, Theme

logger = logging.getLogger(__name__)

app = FastAPI(
    title="IR Site Renderer",
    description="Themed investor-relations page layouts backed by a headless CMS",
    version=__version__,
)


# ============================================
# REQUEST MODELS
# ============================================

class RenderRequest(BaseModel):
    company: Company
    template: Optional[Dict[str, Any]] = None
    theme: Optional[Theme] = None


class ThemeRequest(BaseModel):
    company: Company
    theme: Optional[Theme] = None


# ============================================
# DEPENDENCIES
# ============================================

@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


def get_preparer(settings: Settings = Depends(get_settings)) -> DataPreparer:
    return ComponentDataPreparer.from_settings(settings)


# ============================================
# ERROR HANDLERS
# ============================================

@app.exception_handler(CMSFetchError)
async def cms_fetch_error_handler(request: Request, exc: CMSFetchError):
    logger.error(f"CMS fetch failed for {request.url.path}: {exc}")
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(UnknownLayoutError)
async def unknown_layout_handler(request: Request, exc: UnknownLayoutError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


# ============================================
# ENDPOINTS
# ============================================

@app.get("/", response_class=HTMLResponse)
async def home():
    """Short index of the API"""
    return HTMLResponse(content="""
    <html>
    <head><title>IR Site Renderer</title></head>
    <body style="font-family:sans-serif;padding:40px;">
        <h1>IR Site Renderer</h1>
        <p>API endpoints available:</p>
        <ul>
            <li>GET /api/layouts - List available layouts</li>
            <li>POST /api/render/{layout} - Render a full IR page</li>
            <li>POST /api/component-data - Preview merged component data</li>
            <li>POST /api/theme/resolve - Resolve theme colors and fonts</li>
        </ul>
    </body>
    </html>
    """)


@app.get("/health")
async def health():
    return {"status": "ok", "version": __version__}


@app.get("/api/layouts")
async def list_layouts():
    return {"layouts": available_layouts()}


@app.post("/api/render/{layout}", response_class=HTMLResponse)
async def render_page(layout: str, request: RenderRequest, preparer: DataPreparer = Depends(get_preparer)):
    """Render a layout for the company in the request body"""
    builder = PageBuilder(preparer=preparer)
    page = await builder.build(layout, request.company, request.template, request.theme)
    return HTMLResponse(content=page)


@app.post("/api/component-data")
async def component_data(request: RenderRequest, preparer: DataPreparer = Depends(get_preparer)):
    """Merged component data exactly as the Institutional Pillar layout sees it"""
    base_data = await preparer.prepare(request.company, True)
    return merge_template_data(base_data).model_dump(by_alias=True, exclude_none=True)


@app.post("/api/theme/resolve")
async def theme_resolve(request: ThemeRequest):
    resolved = resolve_theme(request.company, request.theme)
    return {
        "theme": resolved.to_dict(),
        "cssVariables": resolved.css_variables(),
    }


# ============================================
# MAIN
# ============================================

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info(f"Starting IR Site Renderer with settings: {settings.to_dict()}")

    uvicorn.run(app, host=settings.host, port=settings.port)
