# widont/typography/sanitizer.py
"""
Allow-list of elements that may appear in post content.

The vocabulary is bleach's default allowed tags united with the elements the
site's post content sanitizer accepts, plus any names listed in the
``WIDONT_EXTRA_ALLOWED_TAGS`` setting. Tag names configured for widow
prevention are checked against it.
"""

import logging
from functools import lru_cache
from typing import FrozenSet

import bleach

from widont.config import get_extra_allowed_tags

logger = logging.getLogger(__name__)

POST_CONTENT_TAGS = {
    # text
    "p",
    "br",
    "div",
    "span",
    "section",
    "article",
    "cite",
    "mark",
    "ins",
    "del",
    "sup",
    "sub",
    "small",
    "q",
    # headings
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    # lists
    "ul",
    "ol",
    "li",
    "hr",
    "blockquote",
    "dl",
    "dt",
    "dd",
    # code
    "pre",
    "code",
    "kbd",
    "samp",
    "var",
    # tables
    "table",
    "thead",
    "tbody",
    "tfoot",
    "tr",
    "th",
    "td",
    "caption",
    # media
    "img",
    "figure",
    "figcaption",
    "picture",
    "source",
    "video",
    "audio",
    "track",
    # semantic
    "time",
    "address",
    "abbr",
    "acronym",
    "details",
    "summary",
}


@lru_cache(maxsize=1)
def get_allowed_tags() -> FrozenSet[str]:
    """Cache the allow-list; call ``get_allowed_tags.cache_clear()`` after changing settings."""
    allowed = set(bleach.sanitizer.ALLOWED_TAGS).union(POST_CONTENT_TAGS)
    extra = {name.lower() for name in get_extra_allowed_tags()}
    if extra:
        logger.debug(f"Extra post content tags allowed: {', '.join(sorted(extra))}")
    return frozenset(allowed | extra)


def is_element_allowed_in_post_content(name: str) -> bool:
    return bool(name) and name.lower() in get_allowed_tags()
