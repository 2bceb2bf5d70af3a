import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from blog.routers import pages, posts
from blog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

app = FastAPI(title=settings.SITE_TITLE, description=settings.SITE_DESCRIPTION)


@app.get("/health")
async def health():
    return {"message": f"{settings.SITE_TITLE} is running"}


app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
app.include_router(posts.router)
# Page routes go last: the post route matches any single path segment.
app.include_router(pages.router)

logger.info(f"Serving posts from {settings.POSTS_DIR}")
