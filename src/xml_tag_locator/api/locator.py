"""Locate tags by name in raw markup text.

This module provides the name-based entry points. Absence of a tag is a normal
outcome and is reported as ``None`` or an empty list; only unusable arguments
raise ``InvalidArgumentError``.
"""

from typing import Any, List, Optional

from xml_tag_locator.shared import (
    SearchOptions,
    TagMatch,
    get_logger,
    require_name,
    require_text,
    resolve_options,
)
from xml_tag_locator.tokenization import TagScanner, outermost


def _scanner_for(name: str, options: SearchOptions, component: str) -> TagScanner:
    logger = get_logger(
        __name__,
        correlation_id=options.correlation_id,
        component=component,
        trace_enabled=options.debug,
    )
    return TagScanner(name, logger)


def find_tag_by_name(
    text: str,
    name: str,
    options: Optional[SearchOptions] = None,
    **overrides: Any,
) -> Optional[TagMatch]:
    """Find the first complete tag called ``name``.

    The name must match exactly: ``code`` does not match ``<codeSpace>``.
    Nested tags of the same name are skipped when pairing the closing tag, so
    the match always spans the outermost tag that starts first.

    Args:
        text: Markup text to search
        name: Exact tag name, including any namespace prefix
        options: Search options; keyword overrides such as ``start_index=10``
            are applied on top

    Returns:
        TagMatch, or None when no complete tag is found

    Raises:
        InvalidArgumentError: If ``text`` is not a string or ``name`` is empty

    Examples:
        >>> match = find_tag_by_name("<a><b>42</b></a>", "b")
        >>> match.inner, match.start, match.end
        ('42', 3, 12)
        >>> find_tag_by_name("<House><Kitchen/></House>", "Kitchen").inner is None
        True
    """
    text = require_text(text)
    name = require_name(name)
    opts = resolve_options(options, **overrides)

    scanner = _scanner_for(name, opts, "find_tag_by_name")
    return scanner.find(text, opts.start_index)


def find_tags_by_name(
    text: str,
    name: str,
    options: Optional[SearchOptions] = None,
    **overrides: Any,
) -> List[TagMatch]:
    """Find every complete tag called ``name``, in document order.

    With ``nested=True`` (the default) tags nested inside another match of the
    same name are reported too, right after their ancestor. With
    ``nested=False`` matches lying inside an earlier match are dropped, so only
    the outermost tags are returned.

    Examples:
        >>> xml = "<Thing><Thing>A</Thing><Thing>B</Thing></Thing>"
        >>> len(find_tags_by_name(xml, "Thing"))
        3
        >>> len(find_tags_by_name(xml, "Thing", nested=False))
        1
    """
    text = require_text(text)
    name = require_name(name)
    opts = resolve_options(options, **overrides)

    scanner = _scanner_for(name, opts, "find_tags_by_name")
    matches = scanner.find_all(text, opts.start_index)
    if not opts.nested:
        matches = outermost(matches)

    scanner.logger.trace(
        "Located tags", tag_name=name, count=len(matches), nested=opts.nested
    )
    return matches
