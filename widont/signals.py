"""
Signal handlers for the widont app.

Keeps the stored configuration current after migrations run.
"""

import logging

from django.db.models.signals import post_migrate
from django.dispatch import receiver

from widont.options import add_starting_tags, version_check

logger = logging.getLogger(__name__)


@receiver(post_migrate)
def seed_widont_options(sender, **kwargs):
    """
    Record the installed version and seed the default tag set.

    Runs once per ``migrate`` for this app only. Tags already stored
    (including an empty tag set the operator chose) are left alone.

    Args:
        sender: The AppConfig that was just migrated
        **kwargs: Additional keyword arguments
    """
    if getattr(sender, "name", None) != "widont":
        return

    if not version_check():
        logger.warning("Could not record the widont version")

    if add_starting_tags():
        logger.debug("Default widont tags stored")
