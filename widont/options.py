"""
Read and write the widont configuration record.

The record is one ``Option`` holding ``{"tags": "<pipe string>", "version":
"<x.y.z>"}``. Content filtering only ever reads it; it changes through
``update_tags`` (the settings page), ``version_check`` and
``add_starting_tags``.
"""

import logging

from widont import __version__
from widont.config import get_default_tags, get_option_name
from widont.models import Option, WidontSettings
from widont.typography.tags import normalize_tags, split_tags

logger = logging.getLogger(__name__)


def get_options() -> dict:
    """Return the stored configuration, or an empty dict if there is none."""
    value = Option.get_value(get_option_name(), default={})
    return dict(value) if isinstance(value, dict) else {}


def update_options(options: dict) -> bool:
    """Store the full configuration. Returns False if the write failed."""
    return Option.set_value(get_option_name(), options)


def get_tags() -> list:
    """Configured element names, in the order the operator entered them."""
    return split_tags(get_options().get("tags"))


def update_tags(raw) -> dict:
    """
    Normalize operator input and store it as the configured tag set.

    Invalid names are dropped, never rejected, so this always returns the
    normalized configuration. Calling it again with the same input stores
    the same value.
    """
    options = get_options()
    options["tags"] = normalize_tags(raw)

    if update_options(options):
        logger.info(f"Widont tags updated: '{options['tags']}'")
    else:
        logger.warning("Widont tags could not be saved")

    return options


def version_check() -> bool:
    """Store the installed version in the configuration record."""
    # Nothing to migrate between versions yet; just record who wrote last.
    options = get_options()
    if options.get("version") == __version__:
        return True

    logger.info(f"Widont version {options.get('version')} -> {__version__}")
    options["version"] = __version__
    return update_options(options)


def add_starting_tags(tags=None) -> bool:
    """
    Seed the tag set when none has been stored yet.

    Args:
        tags: Raw tag input; defaults to the ``WIDONT_DEFAULT_TAGS`` setting

    Returns:
        True if tags were seeded and stored, False otherwise
    """
    options = get_options()
    if options.get("tags") is not None:
        return False

    options["tags"] = normalize_tags(get_default_tags() if tags is None else tags)
    stored = update_options(options)
    if stored:
        logger.info(f"Seeded widont tags: '{options['tags']}'")
    return stored


def get_settings_record() -> WidontSettings:
    """Return the configuration row, creating it with defaults if missing."""
    record, created = WidontSettings.objects.get_or_create(
        name=get_option_name(),
        defaults={"value": {"version": __version__}},
    )
    if created:
        logger.info(f"Created widont settings record '{record.name}'")
    return record
