"""
Frontmatter extraction.

Only the leading ``---`` delimited block of a Markdown file is inspected and
only the ``slug`` key is read from it. Everything else in the block is left
for the site generator.
"""

import re
from typing import NamedTuple, Optional

from markdown_mirror.config import SLUG_KEY

# Opening line, optional body, closing line, newline. The body group is
# optional so that an empty block (``---\n---\n``) is still recognised.
FRONTMATTER_RE = re.compile(r"\A---\n(?:(.*?)\n)?---\n", re.DOTALL)

SLUG_RE = re.compile(rf"^{re.escape(SLUG_KEY)}:[ \t]*(.+)$", re.MULTILINE)


class Frontmatter(NamedTuple):
    """Metadata read from the top of a Markdown file."""

    slug: Optional[str] = None


def parse_frontmatter(content: str) -> Frontmatter:
    """
    Extract the frontmatter of a Markdown document.

    Args:
        content: Full text of the file

    Returns:
        Frontmatter whose ``slug`` is the trimmed value of the first
        ``slug:`` line, or None when there is no block or no such line.
    """
    match = FRONTMATTER_RE.match(content)
    if not match:
        return Frontmatter()

    block = match.group(1) or ""
    slug_match = SLUG_RE.search(block)
    if not slug_match:
        return Frontmatter()

    return Frontmatter(slug=slug_match.group(1).strip())
