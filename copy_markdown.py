#!/usr/bin/env python3
"""
Script to copy Markdown sources into the website build directory.

This script makes every page's Markdown reachable next to its HTML:
1. Every *.md file under the source tree is copied to the mirrored directory
   of the build tree
2. The file is renamed after the `slug` of its frontmatter, or has its
   underscores replaced with dashes when it has no slug

Usage:
    python copy_markdown.py [source] [target] [--dry-run] [--no-rename]
"""

import argparse
import logging
import sys

from markdown_mirror.config import BUILD_DIR, LOG_FORMAT, SOURCES_DIR
from markdown_mirror.copier import MarkdownMirrorCopier
from markdown_mirror.errors import MarkdownMirrorError

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Copy Markdown files from the sources tree to the build tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Copy ./sources into ./build, renaming files from their slug
  python copy_markdown.py

  # See what would be copied without writing anything
  python copy_markdown.py --dry-run

  # Plain mirror copy of another tree, keeping the original names
  python copy_markdown.py docs/sources site/build --no-rename
        """
    )

    parser.add_argument("source", nargs="?", default=str(SOURCES_DIR),
                        help=f"Source directory (default: {SOURCES_DIR})")
    parser.add_argument("target", nargs="?", default=str(BUILD_DIR),
                        help=f"Target directory (default: {BUILD_DIR})")
    parser.add_argument("--dry-run", action="store_true",
                        help="Show what would be copied without actually copying")
    parser.add_argument("--no-rename", action="store_true",
                        help="Keep original filenames and ignore frontmatter slugs")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Also log directory traversal details")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stdout
    )

    copier = MarkdownMirrorCopier(
        source_root=args.source,
        target_root=args.target,
        rename=not args.no_rename,
        dry_run=args.dry_run
    )

    try:
        copier.copy_tree()
    except (MarkdownMirrorError, OSError) as e:
        logger.error(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
