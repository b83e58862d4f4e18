# widont/typography/content_filter.py
"""
Postprocessor that prevents widows inside configured elements of post content.

The content is not parsed into a tree. It is scanned left to right for
opening tags of the configured elements (written exactly as ``<name>``), and
each one is paired with the nearest following ``</name>``. The text between
the two tags goes through ``widont`` and is wrapped back in the original
tags, unless the element holds embedded or executable markup.

Known limitations:

- Nested elements of the same name are not balanced. In
  ``<li>a <li>b</li> c</li>`` the first ``</li>`` closes the match.
- Tag characters count as word characters, so a space inside an inline tag
  near the end of the element can be the one replaced:
  ``<p>Read <a href="x">this</a></p>`` becomes
  ``<p>Read <a&nbsp;href="x">this</a></p>``. Configure block elements whose
  last words are plain text, or keep inline links out of their last words.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from .safety import safe_to_filter
from .tags import split_tags
from .widont import widont

logger = logging.getLogger(__name__)

CONTEXT_TAGS_KEY = "widont_tags"


@dataclass(frozen=True)
class ElementSpan:
    """Offsets of one matched ``<name>...</name>`` element in the content."""

    name: str
    start: int
    inner_start: int
    inner_end: int
    end: int


def _opener_pattern(tags: Iterable[str]) -> Optional[re.Pattern]:
    names = [name for name in dict.fromkeys(tags) if name]
    if not names:
        return None
    return re.compile("<(" + "|".join(re.escape(name) for name in names) + ")>")


def find_elements(content: str, tags: Iterable[str]) -> Iterator[ElementSpan]:
    """
    Yield the non-overlapping configured elements found in ``content``.

    An opening tag without a matching closing tag is skipped and scanning
    continues right after it. Since no ``</name>`` exists past that point,
    the name is dropped from the scan, which keeps it linear in the length
    of the content.
    """
    names = list(dict.fromkeys(split_tags(tags)))
    opener = _opener_pattern(names)
    if opener is None or not content:
        return

    pos = 0
    while True:
        match = opener.search(content, pos)
        if match is None:
            return

        name = match.group(1)
        closer = f"</{name}>"
        inner_end = content.find(closer, match.end())
        if inner_end == -1:
            names.remove(name)
            opener = _opener_pattern(names)
            if opener is None:
                return
            pos = match.end()
            continue

        end = inner_end + len(closer)
        yield ElementSpan(name, match.start(), match.end(), inner_end, end)
        pos = end


def filter_content(content: str, tags: Iterable[str]) -> str:
    """
    Apply ``widont`` to the inner text of every safe configured element.

    Args:
        content: HTML body of a post or page
        tags: Element names to treat (e.g. ``["p", "h3"]`` or ``"p|h3"``)

    Returns:
        The content with each matched element rewritten once, in place
    """
    tags = split_tags(tags)
    if not content or not tags:
        return content

    pieces: List[str] = []
    last = 0
    matched = 0
    filtered = 0

    for span in find_elements(content, tags):
        matched += 1
        pieces.append(content[last:span.start])

        fragment = content[span.start:span.end]
        if safe_to_filter(fragment):
            inner = content[span.inner_start:span.inner_end]
            pieces.append(f"<{span.name}>{widont(inner)}</{span.name}>")
            filtered += 1
        else:
            pieces.append(fragment)

        last = span.end

    if not matched:
        return content

    pieces.append(content[last:])
    logger.debug(f"widont applied to {filtered} of {matched} element(s)")
    return "".join(pieces)


def widont_content(html: str, context: dict) -> str:
    """
    Pipeline entry point for ``filter_content``.

    The tag set is taken from ``context["widont_tags"]`` when a caller already
    loaded it for this render; otherwise it is read from the stored options
    once and kept in the context for the following processors.
    """
    tags = context.get(CONTEXT_TAGS_KEY)
    if tags is None:
        from widont.options import get_tags

        tags = get_tags()
        context[CONTEXT_TAGS_KEY] = tags

    return filter_content(html, tags)
