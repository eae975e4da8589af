"""Tag boundary recognition for a single tag name.

A ``TagBoundary`` bundles the three scan predicates the locator needs for one
tag name: where an opening tag starts, where that opening tag ends (and
whether it closes itself), and where a closing tag sits. Names are escaped,
so namespace prefixes and dots are matched literally.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from functools import lru_cache
from typing import Optional, Pattern

from xml_tag_locator.character import NOT_FOUND, index_of_match, search_from

# Characters that may follow a tag name inside an opening tag
NAME_TERMINATORS = r"[\s/>]"

# Opening-tag body honouring quoted attribute values; a quoted value may hold
# ">" but never "<"
QUOTED_TAG_BODY = re.compile(r"""(?:"[^"<]*"|'[^'<]*'|[^'"<>])*>""")

# Fallback for inconsistent quoting: everything up to the first ">"
PLAIN_TAG_BODY = re.compile(r"[^<>]*>")

BOUNDARY_CACHE_SIZE = 256


class BoundaryKind(Enum):
    """Kinds of boundary tokens met while scanning for a tag."""

    OPENING = auto()       # "<name" followed by whitespace, "/" or ">"
    SELF_CLOSING = auto()  # opening tag ending in "/>"
    CLOSING = auto()       # "</name>"


@dataclass(frozen=True)
class OpeningTag:
    """Extent of an opening tag.

    ``end`` is one past the closing ``>`` or ``None`` when the opening tag is
    never terminated before the next ``<``. ``content_start`` is where the
    tag's content begins: ``end`` for a terminated tag, otherwise the position
    of the interrupting ``<``.
    """

    start: int
    end: Optional[int]
    content_start: int
    self_closing: bool

    @property
    def terminated(self) -> bool:
        """Check if the opening tag has its own ``>``."""
        return self.end is not None


@dataclass(frozen=True)
class BoundaryToken:
    """One boundary token found in the text.

    ``opening`` holds the extent of the opening tag for ``OPENING`` and
    ``SELF_CLOSING`` tokens.
    """

    kind: BoundaryKind
    start: int
    end: int
    opening: Optional[OpeningTag] = None


class TagBoundary:
    """Compiled scan predicates for one tag name."""

    def __init__(self, name: str) -> None:
        self.name = name
        escaped = re.escape(name)
        self.opening_pattern: Pattern[str] = re.compile(
            "<" + escaped + "(?=" + NAME_TERMINATORS + ")"
        )
        self.token_pattern: Pattern[str] = re.compile(
            "(?P<closing></" + escaped + r"\s*>)"
            "|(?P<opening><" + escaped + "(?=" + NAME_TERMINATORS + "))"
        )
        self.opening_marker = "<" + name
        self.closing_marker = "</" + name

    def __repr__(self) -> str:
        return f"TagBoundary({self.name!r})"

    def find_opening(self, text: str, from_index: int) -> Optional[int]:
        """Find where the next opening tag for this name starts."""
        start = index_of_match(text, self.opening_pattern, from_index)
        if start == NOT_FOUND:
            return None
        return start

    def read_opening(self, text: str, start: int) -> OpeningTag:
        """Determine the extent of the opening tag beginning at ``start``."""
        body_start = start + len(self.opening_marker)
        return read_opening_tag(text, start, body_start)

    def next_token(self, text: str, from_index: int) -> Optional[BoundaryToken]:
        """Find the next opening or closing token for this name.

        Openings are reported as ``SELF_CLOSING`` when their tag ends in
        ``/>``; the token then spans the whole tag so scanning can continue
        after it. Other openings end just past the tag name.
        """
        match = search_from(text, self.token_pattern, from_index)
        if match is None:
            return None
        if match.group("closing") is not None:
            return BoundaryToken(BoundaryKind.CLOSING, match.start(), match.end())
        opening = read_opening_tag(text, match.start(), match.end())
        if opening.self_closing and opening.end is not None:
            return BoundaryToken(
                BoundaryKind.SELF_CLOSING, match.start(), opening.end, opening
            )
        return BoundaryToken(BoundaryKind.OPENING, match.start(), match.end(), opening)


def read_opening_tag(text: str, start: int, body_start: int) -> OpeningTag:
    """Find the ``>`` that ends the opening tag at ``start``.

    Quoted attribute values are skipped first; when quoting is inconsistent
    the first ``>`` before any ``<`` is used instead.

    Args:
        text: Source text
        start: Index of the tag's ``<``
        body_start: Index just past the tag name
    """
    match = QUOTED_TAG_BODY.match(text, body_start) or PLAIN_TAG_BODY.match(
        text, body_start
    )
    if match is None:
        interrupt = text.find("<", body_start)
        content_start = len(text) if interrupt == -1 else interrupt
        return OpeningTag(start, None, content_start, False)

    end = match.end()
    self_closing = text[body_start:end - 1].rstrip().endswith("/")
    return OpeningTag(start, end, end, self_closing)


@lru_cache(maxsize=BOUNDARY_CACHE_SIZE)
def boundary_for(name: str) -> TagBoundary:
    """Get the cached boundary for a tag name."""
    return TagBoundary(name)
