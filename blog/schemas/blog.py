import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostMetadata(BaseModel):
    """Front-matter fields a content file may declare; everything is optional."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: Optional[str] = None
    date: Optional[str] = None
    slug: Optional[str] = None
    excerpt: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _convert_date(cls, value):
        if isinstance(value, (datetime.date, datetime.datetime)):
            return value.isoformat()
        if value is None or value == "":
            return None
        return str(value)

    @field_validator("title", "slug", "excerpt", mode="before")
    @classmethod
    def _stringify(cls, value):
        if value is None:
            return None
        return str(value)


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: Optional[str] = None
    date: Optional[str] = None
    excerpt: Optional[str] = None
    content: str  # Markdown body without front matter
    readingTime: int


class PostSummary(BaseModel):
    slug: str
    title: Optional[str] = None
    date: Optional[str] = None
    displayDate: str = ""
    excerpt: str = ""
    readingTime: int


class PostDetail(PostSummary):
    content: str
    html: str


class PostPage(BaseModel):
    posts: List[Post] = Field(default_factory=list)
    totalPosts: int
    totalPages: int
    currentPage: int
    hasNextPage: bool
    hasPrevPage: bool


class PostSummaryPage(BaseModel):
    posts: List[PostSummary] = Field(default_factory=list)
    totalPosts: int
    totalPages: int
    currentPage: int
    hasNextPage: bool
    hasPrevPage: bool


class AboutPage(BaseModel):
    title: Optional[str] = None
    content: str


class AboutDetail(AboutPage):
    html: str
