"""Literal substring counting."""

from typing import Optional


def count_substring(
    text: str, literal: str, start: int = 0, end: Optional[int] = None
) -> int:
    """Count non-overlapping occurrences of ``literal`` in ``text``.

    The literal is matched as a fixed string, never as a pattern, scanning left
    to right and skipping past each occurrence. An empty literal counts as 0.

    Args:
        text: Text to scan
        literal: Fixed string to count
        start: Optional offset where counting begins
        end: Optional offset where counting stops (exclusive)

    Returns:
        Number of occurrences

    Examples:
        >>> count_substring("<a><a></a></a>", "<a")
        2
        >>> count_substring("aaaa", "aa")
        2
    """
    if not literal:
        return 0
    if end is None:
        return text.count(literal, start)
    return text.count(literal, start, end)
