import re

from blog.utils import calculate_reading_time

__all__ = ["calculate_reading_time", "generate_excerpt"]

FRONTMATTER_PATTERN = re.compile(r"^---[\s\S]*?---")
PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")

# Applied in order to the first paragraph.
INLINE_MARKUP = (
    (re.compile(r"#{1,6}\s+"), ""),  # headings
    (re.compile(r"\*\*(.*?)\*\*"), r"\1"),  # bold
    (re.compile(r"\*(.*?)\*"), r"\1"),  # italic
    (re.compile(r"\[(.*?)\]\(.*?\)"), r"\1"),  # links, keep text
    (re.compile(r"`(.*?)`"), r"\1"),  # inline code
    (re.compile(r"\n+"), " "),
)


def generate_excerpt(content: str) -> str:
    """Derive a plain-text excerpt from the first paragraph of a post body."""
    body = FRONTMATTER_PATTERN.sub("", content, count=1).strip()

    paragraphs = [p for p in PARAGRAPH_SPLIT.split(body) if p.strip()]
    if not paragraphs:
        return ""

    excerpt = paragraphs[0]
    for pattern, replacement in INLINE_MARKUP:
        excerpt = pattern.sub(replacement, excerpt)
    return excerpt.strip()
