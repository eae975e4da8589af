"""Attribute value extraction from an opening tag."""

import re
from functools import lru_cache
from typing import Any, Optional, Pattern, Union

from xml_tag_locator.shared import (
    SearchOptions,
    TagMatch,
    get_logger,
    preview,
    require_name,
    require_text,
    resolve_options,
)
from xml_tag_locator.tokenization import read_opening_tag

ATTRIBUTE_CACHE_SIZE = 256

TagLike = Union[str, TagMatch]


@lru_cache(maxsize=ATTRIBUTE_CACHE_SIZE)
def _attribute_pattern(name: str) -> Pattern[str]:
    # The name must start the attribute (after whitespace, a quote or "<")
    # and be followed directly by "="
    return re.compile(
        r"""(?<![^\s"'<])""" + re.escape(name) + "="
        r"""(?:"(?P<double>[^"]*)"|'(?P<single>[^']*)'|(?P<bare>(?:[^\s"'/>]|/(?!>))+))"""
    )


def opening_portion(text: str) -> str:
    """Return the first opening tag in ``text``.

    Text without any ``<`` is treated as a bare attribute list and returned
    unchanged. An opening tag that is never terminated runs up to the next
    ``<`` or the end of the text.
    """
    start = text.find("<")
    if start == -1:
        return text
    opening = read_opening_tag(text, start, start + 1)
    end = opening.end if opening.end is not None else opening.content_start
    return text[start:end]


def get_attribute(
    tag: TagLike,
    name: str,
    options: Optional[SearchOptions] = None,
    **overrides: Any,
) -> Optional[str]:
    """Get the value of attribute ``name`` from the first opening tag of ``tag``.

    Only the opening tag is searched, so attributes of nested tags are never
    returned. The name must match exactly and case-sensitively: looking up
    ``foo`` does not match ``data-foo``. Values are returned verbatim, without
    entity decoding.

    Args:
        tag: Markup text or a TagMatch (its ``outer`` text is used)
        name: Attribute name, including any namespace prefix
        options: Search options; only ``debug`` and ``correlation_id`` apply

    Returns:
        Attribute value, or None when the attribute is absent

    Examples:
        >>> get_attribute('<Size x="6638" y="7587" c="4" />', "y")
        '7587'
        >>> get_attribute('<x data-foo="1">', "foo") is None
        True
    """
    text = tag.outer if isinstance(tag, TagMatch) else require_text(tag, "tag")
    name = require_name(name)
    opts = resolve_options(options, **overrides)
    logger = get_logger(
        __name__,
        correlation_id=opts.correlation_id,
        component="get_attribute",
        trace_enabled=opts.debug,
    )

    opening = opening_portion(text)
    match = _attribute_pattern(name).search(opening)
    if match is None:
        logger.trace("Attribute not found", attribute=name, opening=preview(opening))
        return None

    for group in ("double", "single", "bare"):
        value = match.group(group)
        if value is not None:
            logger.trace("Attribute found", attribute=name, quoting=group, value=value)
            return value
    return None
