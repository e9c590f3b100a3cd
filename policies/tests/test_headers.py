"""
Tests for the Feature-Policy header builder

Covers:
- Clause ordering and formatting
- Overrides from the settings snapshot
- Fallback to defaults for malformed overrides
"""

import pytest

from policies.catalog import Feature, Origin, PolicyCatalog, default_catalog
from policies.headers import (
    HEADER_NAME,
    MalformedOverride,
    build_directive,
    parse_override,
    resolve_origin,
)

CAMERA = Feature("camera", "Camera", Origin.SELF)
GEOLOCATION = Feature("geolocation", "Geolocation", Origin.SELF)
SYNC_XHR = Feature("sync-xhr", "Synchronous XHR", Origin.ANY)


@pytest.fixture
def catalog():
    return PolicyCatalog([CAMERA, GEOLOCATION])


class TestBuildDirective:
    """Test serialization of the whole header value"""

    def test_header_name(self):
        assert HEADER_NAME == "Feature-Policy"

    def test_override_any(self, catalog):
        assert build_directive(catalog, {"camera": ["*"]}) == "camera *; geolocation 'self'"

    def test_no_overrides(self, catalog):
        assert build_directive(catalog, {}) == "camera 'self'; geolocation 'self'"

    def test_none_settings(self, catalog):
        assert build_directive(catalog, None) == "camera 'self'; geolocation 'self'"

    def test_override_none(self, catalog):
        directive = build_directive(catalog, {"geolocation": ["none"]})
        assert directive == "camera 'self'; geolocation 'none'"

    def test_bogus_token_matches_absent(self, catalog):
        assert build_directive(catalog, {"camera": ["bogus"]}) == build_directive(catalog, {})

    def test_empty_catalog(self):
        assert build_directive(PolicyCatalog([]), {"camera": ["*"]}) == ""

    def test_unknown_keys_ignored(self, catalog):
        assert build_directive(catalog, {"teleport": ["*"]}) == build_directive(catalog, {})

    def test_one_clause_per_feature_in_order(self):
        catalog = default_catalog()
        clauses = build_directive(catalog, {"camera": ["none"]}).split("; ")
        assert len(clauses) == len(catalog)
        assert [clause.split(" ")[0] for clause in clauses] == [
            feature.name for feature in catalog.get_all()
        ]
        assert "camera 'none'" in clauses

    def test_settings_not_mutated(self, catalog):
        settings = {"camera": ["*", "self"], "geolocation": "none"}
        build_directive(catalog, settings)
        assert settings == {"camera": ["*", "self"], "geolocation": "none"}


class TestResolveOrigin:
    """Test per-feature origin resolution"""

    @pytest.mark.parametrize("origin", list(Origin))
    def test_valid_override_wins_over_default(self, origin):
        assert resolve_origin(SYNC_XHR, {"sync-xhr": [origin.value]}) is origin

    def test_absent_uses_default(self):
        assert resolve_origin(SYNC_XHR, {"camera": ["none"]}) is Origin.ANY

    @pytest.mark.parametrize(
        "value",
        [
            "none",
            [],
            (),
            ["bogus"],
            [None],
            [["self"]],
            {"0": "self"},
            None,
            42,
            ["'self"],
            ["self'"],
            ["  none  "],
            ["''self''"],
        ],
    )
    def test_malformed_override_falls_back(self, value):
        assert resolve_origin(CAMERA, {"camera": value}) is Origin.SELF

    @pytest.mark.parametrize("token", ["'self", "self'", "  none  ", "''self''"])
    def test_loosely_quoted_token_matches_absent(self, token):
        catalog = PolicyCatalog([SYNC_XHR])
        assert build_directive(catalog, {"sync-xhr": [token]}) == "sync-xhr *"
        assert build_directive(catalog, {"sync-xhr": [token]}) == build_directive(catalog, {})

    def test_only_first_element_read(self):
        assert resolve_origin(CAMERA, {"camera": ["none", "*"]}) is Origin.NONE

    def test_quoted_token_accepted(self):
        assert resolve_origin(CAMERA, {"camera": ["'none'"]}) is Origin.NONE


class TestParseOverride:
    """Test strict parsing used by the resolver"""

    def test_valid(self):
        assert parse_override("camera", ["self"]) is Origin.SELF

    def test_malformed_raises(self):
        with pytest.raises(MalformedOverride) as excinfo:
            parse_override("camera", ["bogus"])
        assert excinfo.value.name == "camera"
        assert excinfo.value.value == ["bogus"]

    def test_wrong_shape_raises(self):
        with pytest.raises(MalformedOverride):
            parse_override("camera", "self")
