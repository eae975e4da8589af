"""Single-pass scan that pairs opening tags with their closing tags.

Regular expressions cannot balance nested tags, so the scanner walks the
boundary tokens of one tag name left to right with a stack of open-tag
offsets: each opening is pushed, each closing tag pops the most recent
opening, and self-closing occurrences are complete on their own. Openings
still on the stack when the text ends were never closed and produce no match.
"""

from typing import List, Optional

from xml_tag_locator.character import count_substring
from xml_tag_locator.shared import CorrelationLogger, TagMatch, get_logger, preview

from .boundary import BoundaryKind, OpeningTag, TagBoundary, boundary_for


class TagScanner:
    """Locates complete tags of a single name in a text."""

    def __init__(
        self,
        name: str,
        logger: Optional[CorrelationLogger] = None,
    ) -> None:
        """Initialize scanner.

        Args:
            name: Exact tag name, including any namespace prefix
            logger: Logger receiving the scan trace
        """
        self.name = name
        self.boundary: TagBoundary = boundary_for(name)
        self.logger = logger or get_logger(__name__, component="tag_scanner")

    def find(self, text: str, from_index: int = 0) -> Optional[TagMatch]:
        """Find the first complete tag starting at or after ``from_index``.

        Opening tags without a matching closing tag are skipped.
        """
        matches = self.find_all(text, from_index)
        return matches[0] if matches else None

    def find_all(self, text: str, from_index: int = 0) -> List[TagMatch]:
        """Find every complete tag starting at or after ``from_index``.

        Returns:
            Matches ordered by start offset, so a tag precedes the same-name
            tags nested inside it
        """
        first = self.boundary.find_opening(text, from_index)
        if first is None:
            self.logger.trace(
                "No opening tag", tag_name=self.name, from_index=from_index
            )
            return []

        matches: List[TagMatch] = []
        open_tags: List[OpeningTag] = []
        position = first
        while True:
            token = self.boundary.next_token(text, position)
            if token is None:
                break

            if token.kind is BoundaryKind.SELF_CLOSING:
                matches.append(
                    TagMatch(
                        outer=text[token.start:token.end],
                        inner=None,
                        start=token.start,
                        end=token.end,
                    )
                )
            elif token.kind is BoundaryKind.OPENING:
                if token.opening is not None:
                    open_tags.append(token.opening)
            elif open_tags:
                opening = open_tags.pop()
                matches.append(
                    self._build(
                        text, opening.start, opening.content_start, token.start, token.end
                    )
                )

            self.logger.trace(
                "Boundary token",
                tag_name=self.name,
                kind=token.kind.name,
                token_start=token.start,
                depth=len(open_tags),
            )
            position = token.end

        if open_tags:
            self.logger.trace(
                "Opening tags never closed",
                tag_name=self.name,
                unclosed_starts=[opening.start for opening in open_tags],
            )
        matches.sort(key=lambda match: match.start)
        return matches

    def _build(
        self, text: str, start: int, inner_start: int, inner_end: int, end: int
    ) -> TagMatch:
        outer = text[start:end]
        if self.logger.trace_enabled:
            self.logger.trace(
                "Matched tag",
                tag_name=self.name,
                start=start,
                end=end,
                openings=count_substring(outer, self.boundary.opening_marker),
                closings=count_substring(outer, self.boundary.closing_marker),
                outer_preview=preview(outer),
            )
        return TagMatch(
            outer=outer,
            inner=text[inner_start:inner_end],
            start=start,
            end=end,
            inner_start=inner_start,
        )


def outermost(matches: List[TagMatch]) -> List[TagMatch]:
    """Drop matches that lie inside an earlier match.

    ``matches`` must be ordered by start offset.
    """
    kept: List[TagMatch] = []
    boundary = -1
    for match in matches:
        if match.start >= boundary:
            kept.append(match)
            boundary = match.end
    return kept
