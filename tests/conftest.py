import textwrap
from typing import Dict, Optional


class FakeContentSource:
    """
    Minimal in-memory stand-in for DirectoryContentSource.
    Post bodies are dedented so tests can inline them as indented blocks.
    Set track_calls=True to record every read.
    """

    def __init__(
        self,
        posts: Dict[str, str],
        about: Optional[str] = None,
        track_calls: bool = False,
    ):
        self.posts = posts
        self.about = about
        self.track_calls = track_calls
        self.calls = []

    def list_posts(self):
        if self.track_calls:
            self.calls.append("list_posts")
        return list(self.posts)

    def read_post(self, name: str) -> str:
        if self.track_calls:
            self.calls.append(name)
        if name not in self.posts:
            raise FileNotFoundError(name)
        return textwrap.dedent(self.posts[name]).lstrip()

    def read_about(self) -> str:
        if self.about is None:
            raise FileNotFoundError("about.md")
        return textwrap.dedent(self.about).lstrip()


def make_post_file(title: str, date: str, body: str = "Body text.") -> str:
    return f"---\ntitle: {title}\ndate: {date}\n---\n{body}\n"


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, page_return=None, post_return=None, about_return=None):
        self._page_return = page_return
        self._post_return = post_return
        self._about_return = about_return
        self.requested_pages = []

    def get_page(self, page_number=1, page_size=None):
        self.requested_pages.append(page_number)
        return self._page_return

    def get_by_slug(self, slug: str):
        return self._post_return

    def get_about(self):
        return self._about_return


class FakeRenderer:
    def __init__(self, html: str = "<p>rendered</p>"):
        self.html = html
        self.rendered = []

    def render(self, text: str) -> str:
        self.rendered.append(text)
        return self.html

    def highlight_css(self) -> str:
        return ".highlight { color: red }"
