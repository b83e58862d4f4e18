"""
Key-value option storage.

Each ``Option`` row holds one named JSON value. The widont configuration is
a single row (see ``widont.config.get_option_name``) whose value looks like::

    {"tags": "p|h3", "version": "1.0.0"}
"""

import logging

from django.db import DatabaseError, models
from django.utils.translation import gettext_lazy as _

from widont.config import get_option_name

from .base import TimeStampedModel

logger = logging.getLogger(__name__)


class Option(TimeStampedModel):
    """A named configuration value stored as JSON."""

    name = models.CharField(
        max_length=191,
        unique=True,
        help_text="Unique option name (e.g., 'widont_deux')",
    )
    value = models.JSONField(
        default=dict,
        blank=True,
        help_text="Option value, stored as JSON",
    )

    class Meta:
        ordering = ["name"]
        verbose_name = "Option"
        verbose_name_plural = "Options"

    def __str__(self):
        return self.name

    @classmethod
    def get_value(cls, name, default=None):
        """
        Get the stored value for an option.

        Returns the default if the option doesn't exist.
        """
        try:
            return cls.objects.get(name=name).value
        except cls.DoesNotExist:
            return default

    @classmethod
    def set_value(cls, name, value) -> bool:
        """
        Create or update an option.

        Returns False when the database write fails. The failure is logged
        and not retried; the caller decides what to tell the operator.
        """
        try:
            cls.objects.update_or_create(name=name, defaults={"value": value})
        except DatabaseError as e:
            logger.error(f"Failed to store option '{name}': {e}", exc_info=True)
            return False
        return True


class WidontSettingsManager(models.Manager):
    """Only the widont configuration row."""

    def get_queryset(self):
        return super().get_queryset().filter(name=get_option_name())


class WidontSettings(Option):
    """Proxy used by the admin settings page."""

    objects = WidontSettingsManager()

    class Meta:
        proxy = True
        verbose_name = _("Widon't settings")
        verbose_name_plural = _("Widon't settings")

    def __str__(self):
        return str(_("Widon't settings"))
