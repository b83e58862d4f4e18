from django.conf import settings

DEFAULT_OPTION_NAME = "widont_deux"
DEFAULT_TAGS = "p"


def get_option_name():
    """Name of the stored option record holding ``tags`` and ``version``."""
    return getattr(settings, "WIDONT_OPTION_NAME", DEFAULT_OPTION_NAME)


def get_default_tags():
    """Tags seeded when no tag set has been stored yet (space separated)."""
    return getattr(settings, "WIDONT_DEFAULT_TAGS", DEFAULT_TAGS)


def get_extra_allowed_tags():
    """
    Element names allowed in post content on top of the built-in allow-list.

    Accepts a list/tuple or a space-separated string.
    """
    extra = getattr(settings, "WIDONT_EXTRA_ALLOWED_TAGS", ())
    if isinstance(extra, str):
        extra = extra.split()
    return [name for name in extra if name]
