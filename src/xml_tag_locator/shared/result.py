"""Match record returned by the tag and path locators."""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TagMatch:
    """A tag located in a source text.

    ``outer`` always equals ``source[start:end]``. ``inner`` is ``None`` for a
    self-closing tag and otherwise the text between the opening and closing
    tags, which may be empty.

    ``inner_start`` is bookkeeping for drilling into ``inner``; it is excluded
    from equality so two records describing the same span compare equal.
    """

    outer: str
    inner: Optional[str]
    start: int
    end: int
    inner_start: Optional[int] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate offsets."""
        if self.start < 0:
            raise ValueError("start must be >= 0")
        if self.end - self.start != len(self.outer):
            raise ValueError("end - start must equal the length of outer")
        if self.inner is None and self.inner_start is not None:
            raise ValueError("self-closing match cannot have inner_start")

    @property
    def is_self_closing(self) -> bool:
        """Check if the tag closes itself (``<tag/>``)."""
        return self.inner is None

    @property
    def inner_end(self) -> Optional[int]:
        """Offset one past the last character of ``inner``."""
        if self.inner is None or self.inner_start is None:
            return None
        return self.inner_start + len(self.inner)

    def shifted(self, offset: int) -> "TagMatch":
        """Return a copy with every offset moved by ``offset``.

        Used to translate a match found in a slice of a document back to the
        coordinates of the whole document.
        """
        if offset == 0:
            return self
        inner_start = None if self.inner_start is None else self.inner_start + offset
        return replace(
            self,
            start=self.start + offset,
            end=self.end + offset,
            inner_start=inner_start,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the match to a plain dictionary."""
        return {
            "inner": self.inner,
            "outer": self.outer,
            "start": self.start,
            "end": self.end,
        }
