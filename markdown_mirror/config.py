# markdown_mirror/config.py

from pathlib import Path

# Paths
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SOURCES_DIR = PROJECT_ROOT / "sources"
BUILD_DIR = PROJECT_ROOT / "build"

# Only files with this suffix are copied; everything else is ignored
MARKDOWN_SUFFIX = ".md"

# Frontmatter key that overrides the output filename
SLUG_KEY = "slug"

# Logging
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
