import logging

import markdown
from pygments.formatters import HtmlFormatter

from blog.services.diagrams import extract_diagrams

logger = logging.getLogger(__name__)

HIGHLIGHT_CSS_CLASS = "highlight"


class MarkdownRenderer:
    """
    Converts post Markdown into an HTML fragment.

    Diagram blocks are swapped for placeholders before parsing, code blocks are
    highlighted with Pygments CSS classes, and raw HTML in posts passes through.
    """

    def __init__(self, pygments_style: str = "default"):
        self.pygments_style = pygments_style
        self.extensions = ["fenced_code", "tables", "codehilite"]
        self.extension_configs = {
            "codehilite": {
                "css_class": HIGHLIGHT_CSS_CLASS,
                "guess_lang": False,
                "use_pygments": True,
            }
        }

    def render(self, text: str) -> str:
        prepared = extract_diagrams(text)
        # A fresh converter per call keeps rendering free of state between posts.
        converter = markdown.Markdown(
            extensions=self.extensions,
            extension_configs=self.extension_configs,
            output_format="html",
        )
        html = converter.convert(prepared)
        logger.debug(f"Rendered {len(text)} chars of markdown to {len(html)} chars")
        return html

    def highlight_css(self) -> str:
        formatter = HtmlFormatter(style=self.pygments_style)
        return formatter.get_style_defs(f".{HIGHLIGHT_CSS_CLASS}")


renderer = MarkdownRenderer()
