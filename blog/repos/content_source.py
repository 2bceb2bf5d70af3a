from pathlib import Path
from typing import List, Protocol

POST_SUFFIX = ".md"


class ContentSource(Protocol):
    """Read-only access to the raw content files of the blog."""

    def list_posts(self) -> List[str]: ...

    def read_post(self, name: str) -> str: ...

    def read_about(self) -> str: ...


class DirectoryContentSource:
    def __init__(self, posts_dir: Path, about_path: Path):
        self.posts_dir = Path(posts_dir)
        self.about_path = Path(about_path)

    def list_posts(self) -> List[str]:
        if not self.posts_dir.is_dir():
            return []
        return sorted(
            path.name
            for path in self.posts_dir.iterdir()
            if path.is_file() and path.name.endswith(POST_SUFFIX)
        )

    def read_post(self, name: str) -> str:
        return (self.posts_dir / name).read_text(encoding="utf-8")

    def read_about(self) -> str:
        return self.about_path.read_text(encoding="utf-8")
