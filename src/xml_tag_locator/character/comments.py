"""Comment stripping for raw markup."""

import re

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"

# Non-greedy: the first closing marker ends the nearest open comment
COMMENT_PATTERN = re.compile(
    re.escape(COMMENT_OPEN) + ".*?" + re.escape(COMMENT_CLOSE), re.DOTALL
)


def remove_comments(text: str) -> str:
    """Remove every ``<!-- ... -->`` block, contents included.

    Text around the removed blocks, including whitespace and line breaks, is
    kept verbatim. A comment that is opened but never closed is left in place.

    Examples:
        >>> remove_comments("<A><!--<B/>--><!--<C/>--></A>")
        '<A></A>'
    """
    if COMMENT_OPEN not in text:
        return text
    return COMMENT_PATTERN.sub("", text)
