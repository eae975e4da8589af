"""XML Tag Locator.

Locates XML/HTML-like tags directly in raw text, without building a document
tree, and returns each tag's full text, inner content and offsets. Suited to
large, multi-line or malformed metadata files where only a few values are
needed.

Progressive API Disclosure:
- Level 1: Lookups - find_tag_by_name(), find_tags_by_name(), find_tag_by_path(),
  find_tags_by_path(), get_attribute()
- Level 2: Text utilities - count_substring(), index_of_match(),
  index_of_match_end(), remove_comments()
- Level 3: Scanning primitives - TagBoundary, TagScanner
"""

__version__ = "0.1.0"
__author__ = "XML Tag Locator Team"

from .api import (
    find_tag_by_name,
    find_tag_by_path,
    find_tags_by_name,
    find_tags_by_path,
    get_attribute,
)
from .character import (
    count_substring,
    index_of_match,
    index_of_match_end,
    remove_comments,
)
from .shared import (
    ConfigError,
    ConfigValidationError,
    InvalidArgumentError,
    SearchOptions,
    TagMatch,
)
from .tokenization import TagBoundary, TagScanner

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Lookups
    "find_tag_by_name",
    "find_tags_by_name",
    "find_tag_by_path",
    "find_tags_by_path",
    "get_attribute",

    # Level 2: Text utilities
    "count_substring",
    "index_of_match",
    "index_of_match_end",
    "remove_comments",

    # Level 3: Scanning primitives
    "TagBoundary",
    "TagScanner",

    # Records, options and errors
    "TagMatch",
    "SearchOptions",
    "ConfigError",
    "ConfigValidationError",
    "InvalidArgumentError",
]
