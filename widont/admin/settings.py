"""Admin settings page for the widont configuration."""

from django.contrib import admin, messages
from django.http import HttpResponseRedirect
from django.urls import reverse
from django.utils.translation import gettext_lazy as _

from widont.forms import WidontSettingsForm
from widont.models import WidontSettings
from widont.options import get_settings_record, update_options


@admin.register(WidontSettings)
class WidontSettingsAdmin(admin.ModelAdmin):
    """
    Single-record settings page.

    The changelist redirects straight to the configuration record; adding
    and deleting records is disabled.
    """

    form = WidontSettingsForm
    readonly_fields = ["stored_tags", "version", "updated_at"]

    fieldsets = [
        (
            _("Post/Page Content Tags"),
            {
                "fields": ["tags"],
                "description": _(
                    "With Widon't your post titles are spared unwanted widows. "
                    "Extend that courtesy to other tags in your posts by "
                    "entering tag names below."
                ),
            },
        ),
        (
            _("Stored configuration"),
            {
                "fields": ["stored_tags", "version", "updated_at"],
                "classes": ["collapse"],
            },
        ),
    ]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def changelist_view(self, request, extra_context=None):
        record = get_settings_record()
        opts = self.model._meta
        return HttpResponseRedirect(
            reverse(
                f"admin:{opts.app_label}_{opts.model_name}_change",
                args=[record.pk],
            )
        )

    def save_model(self, request, obj, form, change):
        if not update_options(obj.value):
            self.message_user(
                request,
                _("The widont settings could not be saved. Please try again."),
                level=messages.ERROR,
            )

    def stored_tags(self, obj):
        return (obj.value or {}).get("tags") or "-"
    stored_tags.short_description = _("Stored tags")

    def version(self, obj):
        return (obj.value or {}).get("version") or "-"
    version.short_description = _("Version")
