"""
Markdown Mirror

Copies Markdown sources into a website build tree, renaming files from
their frontmatter ``slug`` so they sit next to the pages built from them.
"""

from markdown_mirror.copier import MarkdownMirrorCopier
from markdown_mirror.errors import (
    DestinationCollisionError,
    InvalidSlugError,
    MarkdownMirrorError,
    SourceRootError,
)
from markdown_mirror.frontmatter import Frontmatter, parse_frontmatter
from markdown_mirror.naming import slug_segment, target_filename

__all__ = [
    "MarkdownMirrorCopier",
    "MarkdownMirrorError",
    "SourceRootError",
    "InvalidSlugError",
    "DestinationCollisionError",
    "Frontmatter",
    "parse_frontmatter",
    "slug_segment",
    "target_filename",
]
