"""Destination filename rules."""

from markdown_mirror.config import MARKDOWN_SUFFIX
from markdown_mirror.errors import InvalidSlugError
from markdown_mirror.frontmatter import Frontmatter


def slug_segment(slug: str) -> str:
    """Return the last non-blank path segment of a slug, or '' if there is none."""
    if slug.startswith("/"):
        slug = slug[1:]
    segments = [segment for segment in slug.split("/") if segment.strip()]
    return segments[-1] if segments else ""


def target_filename(filename: str, frontmatter: Frontmatter, source_file=None) -> str:
    """
    Compute the name a Markdown file gets in the build tree.

    A slug wins over the original name: ``slug: /docs/intro`` gives
    ``intro.md``. Without a slug, underscores in ``filename`` become dashes.

    Args:
        filename: Original file name (no directory part)
        frontmatter: Parsed frontmatter of the file
        source_file: Path used in error messages only

    Raises:
        InvalidSlugError: If the slug leaves no filename segment, e.g. ``/``
    """
    if frontmatter.slug is None:
        return filename.replace("_", "-")

    segment = slug_segment(frontmatter.slug)
    if not segment:
        raise InvalidSlugError(frontmatter.slug, source_file)
    return f"{segment}{MARKDOWN_SUFFIX}"

