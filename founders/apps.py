from django.apps import AppConfig


class FoundersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "founders"
    verbose_name = "Founder Applications"
