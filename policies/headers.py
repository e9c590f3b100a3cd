import logging

from .catalog import Origin

logger = logging.getLogger(__name__)

HEADER_NAME = "Feature-Policy"
CLAUSE_SEPARATOR = "; "


class MalformedOverride(ValueError):
    """A stored override with the wrong shape or an unknown origin token."""

    def __init__(self, name, value):
        super().__init__(f"Malformed override for feature policy '{name}': {value!r}")
        self.name = name
        self.value = value


def parse_override(name, value):
    """
    Return the Origin stored in a one-element override list.

    Only the first element is read; any further entries are ignored.
    """
    if not isinstance(value, (list, tuple)) or not value:
        raise MalformedOverride(name, value)
    try:
        return Origin.from_token(value[0])
    except ValueError:
        raise MalformedOverride(name, value) from None


def resolve_origin(feature, settings):
    """
    Effective origin for a feature: the stored override when it is usable,
    otherwise the feature's default.
    """
    if not settings or feature.name not in settings:
        return feature.default_origin
    try:
        return parse_override(feature.name, settings[feature.name])
    except MalformedOverride as e:
        logger.debug("%s; falling back to '%s'", e, feature.default_origin.value)
        return feature.default_origin


def format_clause(feature, origin):
    return f"{feature.name} {origin.header_token}"


def build_directive(catalog, settings):
    """
    Serialize the catalog, overridden by the settings snapshot, into a
    Feature-Policy header value.

    Clauses follow catalog order. An empty catalog yields an empty string,
    in which case the header must not be sent.
    """
    clauses = [
        format_clause(feature, resolve_origin(feature, settings))
        for feature in catalog.get_all()
    ]
    return CLAUSE_SEPARATOR.join(clauses)
