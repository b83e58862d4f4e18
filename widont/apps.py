from django.apps import AppConfig


class WidontConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'widont'
    verbose_name = "Widon't"

    def ready(self):
        """Import signal handlers when app is ready."""
        import widont.signals  # noqa: F401 - Register post_migrate seeding
