"""
Django admin configuration for the widont app.

- settings: the single-record Widon't settings page

Admin classes are registered via @admin.register() in their modules.
"""

from django.conf import settings
from django.contrib import admin

# Customize admin site
admin.site.site_header = getattr(settings, 'ADMIN_SITE_HEADER', 'Django Administration')
admin.site.site_title = getattr(settings, 'ADMIN_SITE_TITLE', 'Django site admin')
admin.site.index_title = getattr(settings, 'ADMIN_INDEX_TITLE', 'Site administration')

from .settings import WidontSettingsAdmin

__all__ = [
    "WidontSettingsAdmin",
]
