import logging

from django.conf import settings
from django.db import DatabaseError

from policies.catalog import default_catalog
from policies.headers import HEADER_NAME, build_directive
from policies.option import PoliciesOption


class FeaturePolicyMiddleware:
    """
    Adds the Feature-Policy header built from the stored feature policy
    overrides to every outgoing response.
    """

    def __init__(self, get_response):
        self.get_response = get_response
        self.catalog = default_catalog()
        self.option = PoliciesOption()
        self.logger = logging.getLogger("security.feature_policy")

    def __call__(self, request):
        response = self.get_response(request)

        if self._should_skip(request) or HEADER_NAME in response:
            return response

        directive = build_directive(self.catalog, self._load_option())
        if directive:
            response[HEADER_NAME] = directive
            if self._config().get("LOG_HEADERS", False):
                self.logger.debug(f"{HEADER_NAME} for {request.path}: {directive}")

        return response

    def _config(self):
        return getattr(settings, "FEATURE_POLICY", {})

    def _should_skip(self, request):
        config = self._config()
        if not config.get("ENABLED", True):
            return True

        for path in config.get("EXEMPT_PATHS", []):
            if path and request.path.startswith(path):
                return True

        return False

    def _load_option(self):
        try:
            return self.option.get_option()
        except DatabaseError:
            # Every feature falls back to its default; the header is still sent.
            self.logger.exception("Could not load feature policy overrides")
            return {}
