"""Public tag, path and attribute lookups.

This module provides the entry points for locating tags in raw markup text:
name-based lookups, nested path lookups and attribute extraction.
"""

from .attributes import get_attribute, opening_portion
from .locator import find_tag_by_name, find_tags_by_name
from .paths import find_tag_by_path, find_tags_by_path

__all__ = [
    "find_tag_by_name",
    "find_tag_by_path",
    "find_tags_by_name",
    "find_tags_by_path",
    "get_attribute",
    "opening_portion",
]
