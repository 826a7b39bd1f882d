from django.apps import AppConfig


class InvestmentConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "investment"
    verbose_name = "Campaigns & Investments"

    def ready(self):
        import investment.signals  # noqa: F401
