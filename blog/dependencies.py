from fastapi import Depends

from blog.repos.content_source import DirectoryContentSource
from blog.services.markdown_renderer import MarkdownRenderer, renderer
from blog.services.posts_service import PostsService
from blog.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_content_source(current_settings: Settings = Depends(get_settings)):
    return DirectoryContentSource(
        current_settings.posts_path, current_settings.about_path
    )


def get_posts_service(
    source=Depends(get_content_source),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(source=source, posts_per_page=current_settings.POSTS_PER_PAGE)


def get_renderer() -> MarkdownRenderer:
    return renderer
