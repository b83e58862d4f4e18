# widont/typography/__init__.py

from .content_filter import filter_content, find_elements, widont_content
from .safety import UNSAFE_TAGS, safe_to_filter
from .sanitizer import is_element_allowed_in_post_content
from .tags import denormalize_tags, normalize_tags, split_tags
from .widont import NBSP, widont

POSTPROCESSORS = [
    widont_content,  # Join the last two words inside configured elements
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html


__all__ = [
    "NBSP",
    "POSTPROCESSORS",
    "UNSAFE_TAGS",
    "apply_postprocessors",
    "denormalize_tags",
    "filter_content",
    "find_elements",
    "is_element_allowed_in_post_content",
    "normalize_tags",
    "safe_to_filter",
    "split_tags",
    "widont",
    "widont_content",
]
