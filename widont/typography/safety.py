# widont/typography/safety.py

import re

# Elements whose inner content is embedded, executable or media markup.
UNSAFE_TAGS = ("iframe", "script", "style", "embed", "object", "video", "audio")

_UNSAFE_FINDER = re.compile("<(?:" + "|".join(UNSAFE_TAGS) + ")")


def safe_to_filter(fragment: str) -> bool:
    """
    Check whether it is safe to add a non-breaking space inside ``fragment``.

    An oEmbed (or any iframe, really) generates markup we must not look
    inside, so the joiner could land within a tag instead of the text. Any
    opening tag from ``UNSAFE_TAGS``, nested or not, disqualifies the whole
    fragment.
    """
    if not fragment:
        return True
    return _UNSAFE_FINDER.search(fragment) is None
