import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from blog import dependencies as deps
from blog.schemas.blog import AboutDetail, PostDetail, PostSummaryPage
from blog.services.markdown_renderer import MarkdownRenderer
from blog.services.posts_service import PostsService, summarize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/posts", response_model=PostSummaryPage)
def list_posts(
    page: int = Query(1, ge=1),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get one page of post summaries, newest first."""
    try:
        listing = service.get_page(page)
        return PostSummaryPage(
            **listing.model_dump(exclude={"posts"}),
            posts=[summarize(post) for post in listing.posts],
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostDetail)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
    renderer: MarkdownRenderer = Depends(deps.get_renderer),
):
    """Get a single post by slug, with its rendered HTML."""
    try:
        post = service.get_by_slug(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return PostDetail(
            **summarize(post).model_dump(),
            content=post.content,
            html=renderer.render(post.content),
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/about", response_model=AboutDetail)
def get_about(
    service: PostsService = Depends(deps.get_posts_service),
    renderer: MarkdownRenderer = Depends(deps.get_renderer),
):
    try:
        about = service.get_about()
        if not about:
            raise HTTPException(status_code=404, detail="About page not found")
        return AboutDetail(
            **about.model_dump(), html=renderer.render(about.content)
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving about page: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve about page")
