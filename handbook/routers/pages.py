import logging
from typing import Any, Dict

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from handbook.models.page import ContentPage
from handbook.services.anchors import anchors_for
from handbook.services.site import Site

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.get("/", response_class=HTMLResponse, summary="Home page")
@limiter.limit("120/minute")
async def home(request: Request) -> Response:
    """Render the page loaded from the index content file."""
    site: Site = request.app.state.site
    if site.home is None:
        logger.error("Home page requested but no index content file was loaded")
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    return render_page(request, "index.html", _page_context(request, site.home))


@router.get("/{slug:path}", response_class=HTMLResponse, summary="Content page")
@limiter.limit("120/minute")
async def page(request: Request, slug: str) -> Response:
    """Render the content page registered under *slug*."""
    site: Site = request.app.state.site
    content_page = site.page_for(slug)
    if content_page is None:
        return render_not_found(request)

    context = _page_context(request, content_page)
    context["description"] = content_page.summary
    return render_page(request, "layout.html", context)


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------

def render_page(
    request: Request, template: str, context: Dict[str, Any], status_code: int = 200
) -> Response:
    templates = request.app.state.templates
    return templates.TemplateResponse(request, template, context, status_code=status_code)


def render_not_found(request: Request) -> Response:
    context = {
        "title": "Page Not Found",
        "sidebar_data": request.app.state.site.navigation,
        "base_url": request.app.state.settings.base_url,
    }
    return render_page(request, "404.html", context, status_code=404)


def _page_context(request: Request, content_page: ContentPage) -> Dict[str, Any]:
    site: Site = request.app.state.site
    return {
        "title": content_page.title,
        "content": content_page.rendered_body,
        "sidebar_data": site.navigation,
        "headers": content_page.headings,
        "sidebar_links": anchors_for(content_page.headings),
        "current_slug": content_page.slug,
        "meta_description": content_page.meta_description,
        "meta_property_title": content_page.meta_property_title,
        "meta_property_description": content_page.meta_property_description,
        "meta_og_url": content_page.meta_og_url,
        "base_url": request.app.state.settings.base_url,
    }
