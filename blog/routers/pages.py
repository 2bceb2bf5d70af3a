import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from fastapi.templating import Jinja2Templates

from blog import dependencies as deps
from blog.services.diagrams import hydrate
from blog.services.markdown_renderer import MarkdownRenderer
from blog.services.posts_service import PostsService, summarize
from blog.settings import Settings
from blog.utils import format_display_date

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


def _not_found(request: Request, current_settings: Settings):
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"site_title": current_settings.SITE_TITLE, "page_title": "Post Not Found"},
        status_code=404,
    )


def _listing(
    request: Request, service: PostsService, current_settings: Settings, page: int
):
    listing = service.get_page(page)
    if page > 1 and not listing.posts:
        return _not_found(request, current_settings)

    title = current_settings.SITE_TITLE
    if page > 1:
        title = f"Page {page} - {current_settings.SITE_TITLE}"
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "site_title": current_settings.SITE_TITLE,
            "page_title": title,
            "description": current_settings.SITE_DESCRIPTION,
            "posts": [summarize(post) for post in listing.posts],
            "listing": listing,
            "newer_url": "/" if page == 2 else f"/page/{page - 1}",
            "older_url": f"/page/{page + 1}",
        },
    )


@router.get("/")
def index(
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    return _listing(request, service, current_settings, 1)


@router.get("/page/{page_number}")
def listing_page(
    page_number: str,
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    try:
        page = int(page_number)
    except ValueError:
        return _not_found(request, current_settings)
    if page < 1:
        return _not_found(request, current_settings)
    return _listing(request, service, current_settings, page)


@router.get("/about")
def about(
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    renderer: MarkdownRenderer = Depends(deps.get_renderer),
    current_settings: Settings = Depends(deps.get_settings),
):
    about_page = service.get_about()
    html = renderer.render(about_page.content) if about_page else None
    return templates.TemplateResponse(
        request,
        "about.html",
        {
            "site_title": current_settings.SITE_TITLE,
            "page_title": f"About me - {current_settings.SITE_TITLE}",
            "html": html,
        },
    )


@router.get("/assets/highlight.css")
def highlight_css(renderer: MarkdownRenderer = Depends(deps.get_renderer)):
    return Response(content=renderer.highlight_css(), media_type="text/css")


@router.get("/{slug}")
def post_page(
    slug: str,
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    renderer: MarkdownRenderer = Depends(deps.get_renderer),
    current_settings: Settings = Depends(deps.get_settings),
):
    post = service.get_by_slug(slug)
    if not post:
        return _not_found(request, current_settings)

    segments = hydrate(renderer.render(post.content))
    title = post.title or post.slug
    return templates.TemplateResponse(
        request,
        "post.html",
        {
            "site_title": current_settings.SITE_TITLE,
            "page_title": f"{title} - {current_settings.SITE_TITLE}",
            "description": post.excerpt or f"Blog post: {title}",
            "title": title,
            "post": post,
            "display_date": format_display_date(post.date),
            "segments": segments,
            "has_diagrams": any(s.kind == "diagram" for s in segments),
        },
    )
