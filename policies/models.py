from django.db import models


class PolicyOption(models.Model):
    """Stored settings snapshot: feature name -> [origin token]."""

    name = models.CharField(max_length=100, unique=True)
    value = models.JSONField(default=dict, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "feature policy option"

    def __str__(self):
        return self.name
