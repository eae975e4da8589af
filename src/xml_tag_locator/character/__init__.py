"""Character-level text utilities.

Key Components:
    count_substring: Literal substring counting
    index_of_match / index_of_match_end: Regular-expression position search
    remove_comments: Comment block stripping
"""

from .comments import COMMENT_CLOSE, COMMENT_OPEN, remove_comments
from .patterns import (
    NOT_FOUND,
    compile_pattern,
    index_of_match,
    index_of_match_end,
    search_from,
)
from .substring import count_substring

__all__ = [
    "COMMENT_CLOSE",
    "COMMENT_OPEN",
    "NOT_FOUND",
    "compile_pattern",
    "count_substring",
    "index_of_match",
    "index_of_match_end",
    "remove_comments",
    "search_from",
]
