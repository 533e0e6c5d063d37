"""Exceptions raised while mirroring a Markdown tree."""


class MarkdownMirrorError(Exception):
    """Base class for all copier errors."""


class SourceRootError(MarkdownMirrorError, FileNotFoundError):
    """The source root is missing or is not a directory."""


class InvalidSlugError(MarkdownMirrorError, ValueError):
    """A frontmatter slug does not leave a usable filename."""

    def __init__(self, slug: str, source_file=None):
        self.slug = slug
        self.source_file = source_file
        where = f" in {source_file}" if source_file is not None else ""
        super().__init__(f"Slug {slug!r}{where} does not contain a filename segment")


class DestinationCollisionError(MarkdownMirrorError, FileExistsError):
    """Two source files were mapped to the same destination in one run."""

    def __init__(self, target_file, first_source, second_source):
        self.target_file = target_file
        self.first_source = first_source
        self.second_source = second_source
        super().__init__(
            f"Both {first_source} and {second_source} would be copied to {target_file}"
        )
