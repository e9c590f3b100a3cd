from dataclasses import dataclass

from django.db import models
from django.utils.translation import gettext_lazy as _


class NotFound(LookupError):
    """Raised when a feature name is not part of the catalog."""

    def __init__(self, name):
        super().__init__(f"Unknown feature policy: {name}")
        self.name = name


class Origin(models.TextChoices):
    ANY = "*", _("Any")
    SELF = "self", _("Self")
    NONE = "none", _("None")

    @property
    def header_token(self):
        # Keywords are quoted in the header grammar, the wildcard is not.
        if self is Origin.ANY:
            return self.value
        return f"'{self.value}'"

    @classmethod
    def from_token(cls, token):
        """
        Parse a stored token ("self") or a header token ("'self'").

        Raises ValueError for anything else.
        """
        if not isinstance(token, str):
            raise ValueError(f"Origin token must be a string, got {type(token).__name__}")
        for origin in cls:
            if token == origin.value or token == origin.header_token:
                return origin
        raise ValueError(f"Unknown origin token: {token!r}")


@dataclass(frozen=True)
class Feature:
    name: str
    title: str
    default_origin: Origin


class PolicyCatalog:
    """
    Fixed, ordered set of feature policies.

    The order is the serialization order of the header and the layout order of
    the admin screen, so it never changes for the lifetime of the instance.
    """

    def __init__(self, features):
        self._features = tuple(features)
        self._by_name = {feature.name: feature for feature in self._features}
        if len(self._by_name) != len(self._features):
            raise ValueError("Feature policy names must be unique.")

    def get_all(self):
        return self._features

    def get(self, name):
        try:
            return self._by_name[name]
        except KeyError:
            raise NotFound(name) from None

    def __contains__(self, name):
        return name in self._by_name

    def __iter__(self):
        return iter(self._features)

    def __len__(self):
        return len(self._features)


DEFAULT_FEATURES = (
    Feature("accelerometer", _("Accelerometer"), Origin.SELF),
    Feature("ambient-light-sensor", _("Ambient Light Sensor"), Origin.SELF),
    Feature("autoplay", _("Autoplay"), Origin.SELF),
    Feature("camera", _("Camera"), Origin.SELF),
    Feature("document-domain", _("Document Domain"), Origin.ANY),
    Feature("document-write", _("Document Write"), Origin.ANY),
    Feature("encrypted-media", _("Encrypted Media"), Origin.SELF),
    Feature("fullscreen", _("Fullscreen"), Origin.SELF),
    Feature("geolocation", _("Geolocation"), Origin.SELF),
    Feature("gyroscope", _("Gyroscope"), Origin.SELF),
    Feature("layout-animations", _("Layout Animations"), Origin.ANY),
    Feature("legacy-image-formats", _("Legacy Image Formats"), Origin.ANY),
    Feature("magnetometer", _("Magnetometer"), Origin.SELF),
    Feature("microphone", _("Microphone"), Origin.SELF),
    Feature("midi", _("MIDI"), Origin.SELF),
    Feature("oversized-images", _("Oversized Images"), Origin.ANY),
    Feature("payment", _("Payment"), Origin.SELF),
    Feature("picture-in-picture", _("Picture-in-Picture"), Origin.SELF),
    Feature("speaker", _("Speaker"), Origin.SELF),
    Feature("sync-script", _("Synchronous Scripts"), Origin.ANY),
    Feature("sync-xhr", _("Synchronous XHR"), Origin.ANY),
    Feature("unoptimized-images", _("Unoptimized Images"), Origin.ANY),
    Feature("unsized-media", _("Unsized Media"), Origin.ANY),
    Feature("usb", _("USB"), Origin.SELF),
    Feature("vertical-scroll", _("Vertical Scroll"), Origin.ANY),
    Feature("vr", _("VR"), Origin.SELF),
    Feature("wake-lock", _("Wake Lock"), Origin.SELF),
)

_default_catalog = None


def default_catalog():
    """Return the process-wide catalog of built-in feature policies."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = PolicyCatalog(DEFAULT_FEATURES)
    return _default_catalog
