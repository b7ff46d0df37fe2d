from django.apps import AppConfig


class EntriesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "duocore.apps.entries"
    verbose_name = "Inscrições (Duplas)"
