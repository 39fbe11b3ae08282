from django.apps import AppConfig
from django.conf import settings


class RevisionConfig(AppConfig):
    name = "revision"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self):
        from hifz.logging import configure_logging

        configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
