"""Resolve paths of nested tag names.

Each path segment is searched only inside the inner content of the match for
the previous segment. Matches found in those slices are translated back so
that every returned offset refers to the original text.
"""

from typing import Any, List, Optional, Sequence

from xml_tag_locator.shared import (
    SearchOptions,
    TagMatch,
    get_logger,
    require_path,
    require_text,
    resolve_options,
)

from .locator import find_tag_by_name, find_tags_by_name


def _resolve_ancestors(
    text: str, names: Sequence[str], options: SearchOptions
) -> Optional[TagMatch]:
    """Follow the first match of each name, returning the innermost one.

    Only the first segment honours ``start_index``; later segments always
    search their ancestor's inner content from its beginning.
    """
    logger = get_logger(
        __name__,
        correlation_id=options.correlation_id,
        component="path_locator",
        trace_enabled=options.debug,
    )
    current: Optional[TagMatch] = None
    for depth, name in enumerate(names):
        if current is None:
            found = find_tag_by_name(text, name, options)
        else:
            if current.inner is None or current.inner_start is None:
                logger.trace("Ancestor is self-closing", tag_name=name, depth=depth)
                return None
            found = find_tag_by_name(current.inner, name, options, start_index=0)
            if found is not None:
                found = found.shifted(current.inner_start)

        if found is None:
            logger.trace("Path segment not found", tag_name=name, depth=depth)
            return None
        logger.trace(
            "Resolved path segment",
            tag_name=name,
            depth=depth,
            start=found.start,
            end=found.end,
        )
        current = found
    return current


def find_tag_by_path(
    text: str,
    path: Sequence[str],
    options: Optional[SearchOptions] = None,
    **overrides: Any,
) -> Optional[TagMatch]:
    """Find the first tag reached by following ``path``.

    Args:
        text: Markup text to search
        path: Tag names from outermost to innermost
        options: Search options; keyword overrides are applied on top

    Returns:
        TagMatch with offsets into ``text``, or None when any segment is missing

    Raises:
        InvalidArgumentError: If ``path`` is empty or holds an empty name

    Examples:
        >>> match = find_tag_by_path("<a><b><c>42</c></b></a>", ["a", "b", "c"])
        >>> match.inner, match.start, match.end
        ('42', 6, 15)
    """
    text = require_text(text)
    names = require_path(path)
    opts = resolve_options(options, **overrides)
    return _resolve_ancestors(text, names, opts)


def find_tags_by_path(
    text: str,
    path: Sequence[str],
    options: Optional[SearchOptions] = None,
    **overrides: Any,
) -> List[TagMatch]:
    """Find every tag named by the last segment of ``path``.

    The ancestors are resolved like ``find_tag_by_path`` (first match at each
    level); all matches of the last name inside the innermost ancestor are
    returned. ``nested`` applies to that last segment.

    Examples:
        >>> xml = "<Thing><Thing>A</Thing><Thing>B</Thing></Thing>"
        >>> [m.inner for m in find_tags_by_path(xml, ["Thing", "Thing"])]
        ['A', 'B']
    """
    text = require_text(text)
    names = require_path(path)
    opts = resolve_options(options, **overrides)

    *ancestor_names, last_name = names
    if not ancestor_names:
        return find_tags_by_name(text, last_name, opts)

    ancestor = _resolve_ancestors(text, ancestor_names, opts)
    if ancestor is None or ancestor.inner is None or ancestor.inner_start is None:
        return []

    matches = find_tags_by_name(ancestor.inner, last_name, opts, start_index=0)
    return [match.shifted(ancestor.inner_start) for match in matches]
