import logging
import math
from typing import List, Optional

from blog.repos.content_source import POST_SUFFIX, ContentSource
from blog.schemas.blog import AboutPage, Post, PostPage, PostSummary
from blog.services.excerpt import calculate_reading_time, generate_excerpt
from blog.services.frontmatter_parser import parse_front_matter
from blog.utils import format_display_date, truncate_excerpt

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, source: ContentSource, posts_per_page: int = 5):
        if posts_per_page < 1:
            raise ValueError("posts_per_page must be positive")
        self.source = source
        self.posts_per_page = posts_per_page

    def list_all(self) -> List[Post]:
        """All posts, newest first; posts sharing a date are ordered by slug."""
        posts = []
        for name in self.source.list_posts():
            if not name.endswith(POST_SUFFIX):
                continue
            slug = name.removesuffix(POST_SUFFIX)
            try:
                raw = self.source.read_post(name)
            except (OSError, ValueError) as e:
                # ValueError covers files that are not valid UTF-8.
                logger.warning(f"Skipping unreadable post {name}: {e}")
                continue
            posts.append(parse_post(raw, slug))

        posts.sort(key=lambda p: p.slug)
        posts.sort(key=lambda p: p.date or "", reverse=True)
        return posts

    def get_page(
        self, page_number: int = 1, page_size: Optional[int] = None
    ) -> PostPage:
        page_size = self.posts_per_page if page_size is None else page_size
        if page_number < 1:
            raise ValueError("page_number must be 1 or greater")
        if page_size < 1:
            raise ValueError("page_size must be positive")

        all_posts = self.list_all()
        start = (page_number - 1) * page_size
        end = start + page_size

        return PostPage(
            posts=all_posts[start:end],
            totalPosts=len(all_posts),
            totalPages=math.ceil(len(all_posts) / page_size),
            currentPage=page_number,
            hasNextPage=end < len(all_posts),
            hasPrevPage=page_number > 1,
        )

    def get_by_slug(self, slug: str) -> Optional[Post]:
        if not _is_plain_slug(slug):
            logger.warning(f"Rejected post slug {slug!r}")
            return None
        try:
            raw = self.source.read_post(f"{slug}{POST_SUFFIX}")
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read post {slug}: {e}")
            return None
        return parse_post(raw, slug)

    def get_about(self) -> Optional[AboutPage]:
        try:
            raw = self.source.read_about()
        except OSError:
            return None
        except ValueError as e:
            logger.warning(f"Could not read about page: {e}")
            return None
        metadata, content = parse_front_matter(raw)
        return AboutPage(title=metadata.title, content=content)


def parse_post(raw: str, slug: str) -> Post:
    metadata, content = parse_front_matter(raw)
    return Post(
        slug=slug,
        title=metadata.title,
        date=metadata.date,
        excerpt=metadata.excerpt or generate_excerpt(content),
        content=content,
        readingTime=calculate_reading_time(content),
    )


def _is_plain_slug(slug: str) -> bool:
    if not slug or slug in (".", ".."):
        return False
    return not any(char in slug for char in ("/", "\\", "\x00"))


def summarize(post: Post) -> PostSummary:
    return PostSummary(
        slug=post.slug,
        title=post.title,
        date=post.date,
        displayDate=format_display_date(post.date),
        excerpt=truncate_excerpt(post.excerpt),
        readingTime=post.readingTime,
    )
