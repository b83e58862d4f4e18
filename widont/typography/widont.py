# widont/typography/widont.py
"""
Replace the space between the last two words of a string with ``&nbsp;``.

Only the end of the string is looked at: the last run of non-whitespace
characters and the run immediately before it. Everything in front of those
two tokens is returned as-is.
"""

import re

NBSP = "&nbsp;"

# Last two tokens at the end of the string, trailing whitespace ignored.
_WIDOW_FINDER = re.compile(r"([^\s])\s+([^\s]+)\s*$")


def _join(match):
    # A last token that already holds the joiner has been treated before.
    if NBSP in match.group(2):
        return match.group(0)
    return match.group(1) + NBSP + match.group(2)


def widont(text: str = "") -> str:
    """
    Join the last two words of ``text`` with a non-breaking space.

    >>> widont('A very simple test')
    'A very simple&nbsp;test'
    >>> widont('Test')
    'Test'
    >>> widont(' Test')
    ' Test'

    Applying it twice gives the same result as applying it once.
    """
    if not text:
        return text or ""
    return _WIDOW_FINDER.sub(_join, text, count=1)
