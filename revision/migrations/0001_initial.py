import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="AyahRevision",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("surah_id", models.PositiveSmallIntegerField()),
                ("ayah_number", models.PositiveSmallIntegerField()),
                ("interval_days", models.PositiveIntegerField(default=1)),
                ("ease_factor", models.FloatField(default=2.5)),
                ("last_reviewed", models.DateField(blank=True, null=True)),
                ("next_review", models.DateField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="ayah_revisions",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(
                        fields=["user", "surah_id", "ayah_number"],
                        name="ayah_rev_user_surah_idx",
                    )
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("user", "surah_id", "ayah_number"), name="uniq_ayah_revision"
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="SurahRevision",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("surah_id", models.PositiveSmallIntegerField()),
                ("interval_days", models.PositiveIntegerField(default=1)),
                ("ease_factor", models.FloatField(default=2.5)),
                ("last_reviewed", models.DateField(blank=True, null=True)),
                ("next_review", models.DateField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="surah_revisions",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(fields=["user", "next_review"], name="surah_rev_user_next_idx")
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("user", "surah_id"), name="uniq_surah_revision")
                ],
            },
        ),
    ]
