# widont/typography/tags.py
"""
Conversion between the operator's tag input and the stored tag string.

Operators type element names the way they think of them (``h3 h4``,
``p, li, span`` or even ``<h5>``). They are stored lowercased, deduplicated
and pipe-delimited (``h3|h4|h5``), keeping only elements that are allowed
in post content.
"""

import logging
import re
from typing import Callable, Iterable, List, Optional, Union

from .sanitizer import is_element_allowed_in_post_content

logger = logging.getLogger(__name__)

TAG_DELIMITER = "|"

# Anything extra that may cause problems between names.
_SEPARATORS = re.compile(r"[,;<>|/\s]+")


def normalize_tags(
    raw: Optional[str],
    is_allowed: Optional[Callable[[str], bool]] = None,
) -> str:
    """
    Turn raw operator input into the stored, pipe-delimited tag string.

    >>> normalize_tags("h3, h4; <h5> h3")
    'h3|h4|h5'

    Args:
        raw: Tag names separated by spaces, commas, semicolons or brackets
        is_allowed: Policy deciding which elements may be kept. Defaults to
            the post content allow-list.

    Returns:
        The surviving names joined with ``|``; empty string for empty input
    """
    if not raw:
        return ""

    if is_allowed is None:
        is_allowed = is_element_allowed_in_post_content

    names: List[str] = []
    for candidate in _SEPARATORS.split(raw.strip()):
        name = candidate.strip("<>").lower()
        if not name or name in names:
            continue
        if not is_allowed(name):
            logger.warning(f"Dropping tag '{name}': not allowed in post content")
            continue
        names.append(name)

    return TAG_DELIMITER.join(names)


def denormalize_tags(stored: Optional[str]) -> str:
    """Stored ``h3|h4`` becomes ``h3 h4`` for the settings text field."""
    if not stored:
        return ""
    return stored.replace(TAG_DELIMITER, " ")


def split_tags(stored: Union[str, Iterable[str], None]) -> List[str]:
    """
    Return the stored tag string as an ordered list of element names.

    Lists and other iterables of names are accepted too and returned as a
    list with empty entries removed.
    """
    if not stored:
        return []
    if isinstance(stored, str):
        stored = stored.split(TAG_DELIMITER)
    return [name for name in stored if name]
