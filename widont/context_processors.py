from django.utils.functional import SimpleLazyObject


def widont(request):
    """
    Expose the configured tag set as ``widont_tags``.

    The configuration is read at most once per rendered template, and only
    if a template uses it.
    """
    from widont.options import get_tags

    return {"widont_tags": SimpleLazyObject(get_tags)}
