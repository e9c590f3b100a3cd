import logging

from django.utils.translation import gettext_lazy as _

from .models import PolicyOption

logger = logging.getLogger(__name__)

OPTION_NAME = "feature_policies"


def sanitize_option(value):
    """Coerce anything that is not a mapping to an empty mapping."""
    if not isinstance(value, dict):
        return {}
    return value


class PoliciesOption:
    """
    Reads and writes the administrator's feature policy overrides.

    The stored value is a mapping of feature name to a one-element list
    holding the chosen origin token, e.g. ``{"camera": ["none"]}``.
    """

    type = "object"
    description = _("Enabled feature policies and their origins.")

    def __init__(self, name=OPTION_NAME):
        self.name = name

    @property
    def default(self):
        return {}

    def sanitize(self, value):
        return sanitize_option(value)

    def get_option(self):
        record = PolicyOption.objects.filter(name=self.name).first()
        if record is None:
            return self.default
        value = self.sanitize(record.value)
        if value is not record.value:
            logger.warning("Stored option '%s' is not a mapping; using defaults", self.name)
        return value

    def update_option(self, value):
        value = self.sanitize(value)
        PolicyOption.objects.update_or_create(name=self.name, defaults={"value": value})
        logger.info("Option '%s' updated (%d overrides)", self.name, len(value))
        return value

    def delete_option(self):
        deleted, _rows = PolicyOption.objects.filter(name=self.name).delete()
        if deleted:
            logger.info("Option '%s' deleted", self.name)
        return bool(deleted)

    def describe(self):
        return {
            "name": self.name,
            "type": self.type,
            "description": str(self.description),
            "default": self.default,
        }
