from django import forms
from django.utils.translation import gettext_lazy as _

from widont import __version__
from widont.models import WidontSettings
from widont.typography.tags import denormalize_tags, normalize_tags


class WidontSettingsForm(forms.ModelForm):
    """Settings form with a single free-text ``tags`` field."""

    tags = forms.CharField(
        label=_("Tags to filter in the post content"),
        required=False,
        widget=forms.TextInput(attrs={"class": "vTextField", "id": "extended_tags"}),
        help_text=_(
            "No need to include angle brackets. Separate multiple tag names with "
            "a space or comma (e.g. h3 h4 h5 or p, li, span). Elements not "
            "allowed in posts will be automatically stripped."
        ),
    )

    class Meta:
        model = WidontSettings
        fields = []

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        value = self.instance.value if isinstance(self.instance.value, dict) else {}
        self.initial["tags"] = denormalize_tags(value.get("tags"))

    def clean_tags(self):
        return normalize_tags(self.cleaned_data.get("tags"))

    def save(self, commit=True):
        instance = super().save(commit=False)
        value = dict(instance.value) if isinstance(instance.value, dict) else {}
        value["tags"] = self.cleaned_data["tags"]
        value.setdefault("version", __version__)
        instance.value = value
        if commit:
            instance.save()
        return instance
