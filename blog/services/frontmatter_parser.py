import logging
from typing import Tuple

import frontmatter

from blog.schemas.blog import PostMetadata

logger = logging.getLogger(__name__)

YAML_HANDLER = frontmatter.YAMLHandler()


def parse_front_matter(text: str) -> Tuple[PostMetadata, str]:
    """Split a content file into its front-matter metadata and Markdown body.

    Files without a front-matter block yield empty metadata and the stripped
    text as body. A block that cannot be parsed, or that is not a mapping, is
    logged and yields empty metadata with the whole text as body.
    """
    stripped = text.strip()
    if not YAML_HANDLER.detect(stripped):
        return PostMetadata(), stripped

    try:
        block, body = YAML_HANDLER.split(stripped)
        metadata = YAML_HANDLER.load(block)
    except Exception as e:
        logger.warning(f"Ignoring unparseable front matter: {e}")
        return PostMetadata(), text

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        logger.warning(
            f"Ignoring front matter that is not a mapping: {type(metadata).__name__}"
        )
        return PostMetadata(), text

    known = {key: metadata[key] for key in PostMetadata.model_fields if key in metadata}
    return PostMetadata(**known), body.strip()
