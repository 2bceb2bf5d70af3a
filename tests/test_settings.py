from pathlib import Path

import pytest
from pydantic import ValidationError

from blog.settings import Settings, choose_env_file


def test_defaults():
    s = Settings()
    assert s.POSTS_PER_PAGE == 5
    assert s.posts_path == Path("content/posts")
    assert s.about_path == Path("content/about.md")


def test_paths_use_environment(monkeypatch):
    monkeypatch.setenv("POSTS_DIR", "/srv/blog/posts")
    monkeypatch.setenv("POSTS_PER_PAGE", "10")

    s = Settings()

    assert s.posts_path == Path("/srv/blog/posts")
    assert s.POSTS_PER_PAGE == 10


def test_posts_per_page_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(POSTS_PER_PAGE=0)


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
