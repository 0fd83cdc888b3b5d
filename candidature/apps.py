from django.apps import AppConfig


class CandidatureConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "candidature"
    verbose_name = "Candidatures"
