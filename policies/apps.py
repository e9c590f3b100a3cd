from django.apps import AppConfig


class PoliciesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "policies"
    verbose_name = "Feature Policies"

    def ready(self):
        from auditlog.registry import auditlog

        from .models import PolicyOption

        auditlog.register(PolicyOption)
