"""
Markdown Mirror Copier

Walks a source tree and copies every Markdown file to the mirrored directory
of a target tree, renaming it from its frontmatter slug (or by turning
underscores into dashes) so it ends up next to the HTML page built from it.
"""

import os
import shutil
import logging
from pathlib import Path
from typing import Dict, Union

from markdown_mirror.config import MARKDOWN_SUFFIX
from markdown_mirror.errors import DestinationCollisionError, SourceRootError
from markdown_mirror.frontmatter import parse_frontmatter
from markdown_mirror.naming import target_filename


class MarkdownMirrorCopier:
    """
    Mirrors the Markdown files of a source tree into a target tree.
    """

    def __init__(self, source_root: Union[str, Path], target_root: Union[str, Path],
                 rename: bool = True,
                 dry_run: bool = False):
        """
        Initialize the copier.

        Args:
            source_root: Root directory of the Markdown sources
            target_root: Root directory of the build output
            rename: If False, copy files under their original names without
                    looking at their frontmatter
            dry_run: If True, only log what would be copied
        """
        self.source_root = Path(source_root).resolve()
        self.target_root = Path(target_root).resolve()
        self.rename = rename
        self.dry_run = dry_run
        self.logger = logging.getLogger(__name__)

        # Destination -> source, for the current run only
        self._written: Dict[Path, Path] = {}

        # Statistics
        self.stats = {
            'files_copied': 0,
            'renamed_from_slug': 0,
            'renamed_from_filename': 0,
            'dirs_created': 0,
        }

    def copy_tree(self) -> Dict[str, int]:
        """
        Copy every Markdown file below the source root.

        Returns:
            The run statistics

        Raises:
            SourceRootError: If the source root is missing or not a directory
            InvalidSlugError: If a slug leaves no usable filename
            DestinationCollisionError: If two sources map to one destination
            OSError: On any filesystem failure; files already copied stay
        """
        if not self.source_root.exists():
            raise SourceRootError(f"Source directory does not exist: {self.source_root}")
        if not self.source_root.is_dir():
            raise SourceRootError(f"Source path is not a directory: {self.source_root}")

        self._written = {}
        for key in self.stats:
            self.stats[key] = 0

        self.logger.debug(f"Source: {self.source_root}")
        self.logger.debug(f"Target: {self.target_root}")
        if self.dry_run:
            self.logger.info("DRY RUN MODE - No files will actually be copied")

        self._copy_directory(self.source_root, self.target_root)

        self.logger.info(
            f"{'[DRY RUN] ' if self.dry_run else ''}🤖 Copied {self.stats['files_copied']} "
            f"Markdown file(s) from {self.source_root} to {self.target_root} "
            f"to be accessible from the website"
        )
        return dict(self.stats)

    def _copy_directory(self, source_dir: Path, target_dir: Path):
        """Recursively copy the Markdown files of one directory."""
        self._ensure_directory(target_dir)

        with os.scandir(source_dir) as it:
            entries = sorted(it, key=lambda entry: entry.name)

        for entry in entries:
            source_path = Path(entry.path)
            if source_path == self.target_root:  # Skip the output dir itself
                continue
            if entry.is_dir():
                self._copy_directory(source_path, target_dir / entry.name)
            elif entry.name.endswith(MARKDOWN_SUFFIX):
                self._copy_markdown(source_path, target_dir)

    def _ensure_directory(self, target_dir: Path):
        if target_dir.is_dir():
            return
        self.logger.debug(f"Creating directory: {target_dir}")
        if not self.dry_run:
            target_dir.mkdir(parents=True, exist_ok=True)
        self.stats['dirs_created'] += 1

    def _destination_name(self, source_file: Path):
        """Return the destination filename and which stats counter it bumps."""
        if not self.rename:
            return source_file.name, None

        # Decoded only to look for a slug; the copy itself stays byte-for-byte
        content = source_file.read_text(encoding='utf-8', errors='replace')
        frontmatter = parse_frontmatter(content)
        filename = target_filename(source_file.name, frontmatter, source_file)

        if frontmatter.slug is not None:
            return filename, 'renamed_from_slug'
        if filename != source_file.name:
            return filename, 'renamed_from_filename'
        return filename, None

    def _copy_markdown(self, source_file: Path, target_dir: Path):
        """Copy a single Markdown file; the bytes are never rewritten."""
        filename, rename_stat = self._destination_name(source_file)
        target_file = target_dir / filename

        previous = self._written.get(target_file)
        if previous is not None:
            raise DestinationCollisionError(target_file, previous, source_file)
        self._written[target_file] = source_file

        if not self.dry_run:
            shutil.copy2(source_file, target_file)

        self.logger.info(
            f"{'[DRY RUN] ' if self.dry_run else ''}🤖 Copied: {source_file} -> {target_file}"
        )
        self.stats['files_copied'] += 1
        if rename_stat:
            self.stats[rename_stat] += 1
