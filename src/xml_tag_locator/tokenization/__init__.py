"""Tag boundary recognition and stack-based pairing scan.

Key Components:
    TagBoundary: Opening, opening-end and closing predicates for one tag name
    TagScanner: Pairs opening tags with their closing tags in one pass
    outermost: Drops matches nested inside an earlier match
    BoundaryKind: Kinds of boundary tokens met while scanning
"""

from .boundary import (
    BoundaryKind,
    BoundaryToken,
    OpeningTag,
    TagBoundary,
    boundary_for,
    read_opening_tag,
)
from .scanner import TagScanner, outermost

__all__ = [
    "BoundaryKind",
    "BoundaryToken",
    "OpeningTag",
    "TagBoundary",
    "TagScanner",
    "boundary_for",
    "outermost",
    "read_opening_tag",
]
