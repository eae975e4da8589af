"""Regular-expression position search over raw text.

Patterns arrive as textual fragments assembled by the caller (for example a
tag-name boundary such as ``<gmd:code[\\s>/]``). They are compiled once with
``re.DOTALL`` so ``.`` also spans the embedded newlines of multi-line tags, and
the compiled objects are cached.
"""

import re
from functools import lru_cache
from typing import Optional, Pattern, Union

# Sentinel returned when a pattern has no match
NOT_FOUND = -1

# Size of the compiled pattern cache
PATTERN_CACHE_SIZE = 512

PatternLike = Union[str, Pattern[str]]


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def compile_pattern(pattern: str) -> Pattern[str]:
    """Compile a pattern fragment with the flags used for markup scanning.

    Raises:
        re.error: If the fragment is not a valid regular expression
    """
    return re.compile(pattern, re.DOTALL)


def _as_pattern(pattern: PatternLike) -> Pattern[str]:
    if isinstance(pattern, str):
        return compile_pattern(pattern)
    return pattern


def search_from(
    text: str, pattern: PatternLike, from_index: int = 0
) -> Optional["re.Match[str]"]:
    """Find the first match of ``pattern`` starting at or after ``from_index``.

    ``^`` keeps its usual meaning (start of text or of a line); it does not
    anchor at ``from_index``.
    """
    if from_index < 0:
        from_index = 0
    if from_index > len(text):
        return None
    return _as_pattern(pattern).search(text, from_index)


def index_of_match(text: str, pattern: PatternLike, from_index: int = 0) -> int:
    """Return the index where the first match at or after ``from_index`` starts.

    Args:
        text: Text to search
        pattern: Pattern fragment or compiled pattern
        from_index: Offset where the search begins

    Returns:
        Start index of the match, or -1 when there is none

    Examples:
        >>> index_of_match('<a><b x="1"/></a>', "<b[\\\\s>/]")
        3
    """
    match = search_from(text, pattern, from_index)
    if match is None:
        return NOT_FOUND
    return match.start()


def index_of_match_end(text: str, pattern: PatternLike, from_index: int = 0) -> int:
    """Return the index one past the end of the first match at or after ``from_index``.

    Returns:
        Exclusive end index of the match, or -1 when there is none
    """
    match = search_from(text, pattern, from_index)
    if match is None:
        return NOT_FOUND
    return match.end()
