# widont/templatetags/widont_tags.py
"""
Template filters for widow prevention.

Usage::

    {% load widont_tags %}
    <h1>{{ post.title|widont }}</h1>
    {{ post.content_html|widont_content }}
    {{ post.content_html|widont_content:widont_tags }}

The optional argument of ``widont_content`` is the configured tag set (a
list or a pipe-delimited string), e.g. the ``widont_tags`` variable added by
``widont.context_processors.widont``. Without it the tags are read from the
stored configuration.
"""

from django import template
from django.utils.html import conditional_escape
from django.utils.safestring import mark_safe

from widont.typography import apply_postprocessors, widont
from widont.typography.content_filter import CONTEXT_TAGS_KEY

register = template.Library()


@register.filter(name="widont", needs_autoescape=True)
def widont_filter(value, autoescape=True):
    """Title filter: join the last two words with ``&nbsp;``."""
    if not value:
        return value if value is not None else ""
    text = conditional_escape(value) if autoescape else str(value)
    return mark_safe(widont(text))


@register.filter(name="widont_content")
def widont_content_filter(value, tags=None):
    """
    Body filter: prevent widows inside the configured elements.

    The result is marked safe without escaping, like the ``markdown`` filter
    output it is meant to follow. Only pass HTML that has already been
    sanitized; plain user text must be escaped before it reaches this filter.
    """
    if not value:
        return value if value is not None else ""
    context = {}
    if tags is not None:
        context[CONTEXT_TAGS_KEY] = tags
    return mark_safe(apply_postprocessors(str(value), context))
