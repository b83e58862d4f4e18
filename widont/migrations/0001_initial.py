from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Option",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                (
                    "name",
                    models.CharField(
                        help_text="Unique option name (e.g., 'widont_deux')",
                        max_length=191,
                        unique=True,
                    ),
                ),
                (
                    "value",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        help_text="Option value, stored as JSON",
                    ),
                ),
            ],
            options={
                "verbose_name": "Option",
                "verbose_name_plural": "Options",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="WidontSettings",
            fields=[],
            options={
                "verbose_name": "Widon't settings",
                "verbose_name_plural": "Widon't settings",
                "proxy": True,
                "indexes": [],
                "constraints": [],
            },
            bases=("widont.option",),
        ),
    ]
