"""Diagram placeholders embedded in rendered post HTML.

Rendering happens in two phases. While converting Markdown, every fenced
``mermaid`` block is replaced with an inert placeholder element carrying the
base64-encoded diagram source. Before a page is served, :func:`hydrate` splits
the HTML into plain segments and diagram segments, each diagram with its own
mount id, which ``static/diagrams.js`` renders to SVG in the browser.

The placeholder format is versioned through ``data-diagram-version`` so the
two phases can change independently.
"""

import base64
import binascii
import logging
import re
import uuid
from dataclasses import dataclass
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

DIAGRAM_LANGUAGE = "mermaid"
PLACEHOLDER_VERSION = "1"
SUPPORTED_VERSIONS = {PLACEHOLDER_VERSION}

FENCED_DIAGRAM_PATTERN = re.compile(
    r"```" + DIAGRAM_LANGUAGE + r"\r?\n([\s\S]*?)\r?\n```"
)
PLACEHOLDER_PATTERN = re.compile(
    r'<div\s+data-mermaid-chart="([^"]*)"'
    r'(?:\s+data-diagram-version="([^"]*)")?\s*>\s*</div>'
)


@dataclass(frozen=True)
class HtmlSegment:
    html: str

    kind = "html"


@dataclass(frozen=True)
class DiagramSegment:
    diagram_id: str
    source: str = ""
    error: Optional[str] = None

    kind = "diagram"


Segment = Union[HtmlSegment, DiagramSegment]


def encode_placeholder(source: str) -> str:
    payload = base64.b64encode(source.encode("utf-8")).decode("ascii")
    return (
        f'<div data-mermaid-chart="{payload}" '
        f'data-diagram-version="{PLACEHOLDER_VERSION}"></div>'
    )


def decode_placeholder(payload: str) -> str:
    """Return the diagram source carried by a placeholder payload.

    Raises ``ValueError`` when the payload is not valid base64 UTF-8 text.
    """
    try:
        return base64.b64decode(payload, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid diagram payload: {e}") from e


def extract_diagrams(markdown: str) -> str:
    """Replace fenced diagram blocks with placeholder elements.

    Placeholders are surrounded by blank lines so Markdown treats them as raw
    HTML blocks and leaves them untouched.
    """

    def _replace(match: re.Match) -> str:
        return f"\n\n{encode_placeholder(match.group(1).strip())}\n\n"

    return FENCED_DIAGRAM_PATTERN.sub(_replace, markdown)


def new_diagram_id() -> str:
    return f"{DIAGRAM_LANGUAGE}-{uuid.uuid4().hex[:12]}"


def hydrate(html: str) -> List[Segment]:
    """Split rendered HTML into plain segments and diagram mount points."""
    segments: List[Segment] = []
    position = 0
    for match in PLACEHOLDER_PATTERN.finditer(html):
        if match.start() > position:
            segments.append(HtmlSegment(html[position : match.start()]))
        segments.append(_diagram_segment(match.group(1), match.group(2)))
        position = match.end()

    if position < len(html):
        segments.append(HtmlSegment(html[position:]))
    return segments


def _diagram_segment(payload: str, version: Optional[str]) -> DiagramSegment:
    diagram_id = new_diagram_id()
    # Unversioned markers predate the version attribute and share version 1.
    version = version or PLACEHOLDER_VERSION
    if version not in SUPPORTED_VERSIONS:
        logger.warning(f"Unsupported diagram placeholder version {version}")
        return DiagramSegment(
            diagram_id, error=f"Unsupported diagram format version {version}"
        )

    try:
        source = decode_placeholder(payload)
    except ValueError as e:
        logger.warning(f"Skipping diagram {diagram_id}: {e}")
        return DiagramSegment(diagram_id, error=str(e))
    return DiagramSegment(diagram_id, source=source)
