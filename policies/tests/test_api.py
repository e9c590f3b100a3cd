"""
Tests for the feature policies REST API
"""

import pytest
from rest_framework.test import APIClient

from policies.catalog import PolicyCatalog, default_catalog
from policies.option import PoliciesOption
from policies.serializers import PoliciesOptionSerializer
from policies.views import FeaturePoliciesView

LIST_URL = "/api/feature-policies/"


@pytest.fixture
def api_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.mark.django_db
class TestFeaturePoliciesView:
    """Test listing, replacing and resetting overrides"""

    def test_requires_permission(self, django_user_model):
        user = django_user_model.objects.create_user(username="plain", password="x-pass-123")
        client = APIClient()
        client.force_authenticate(user=user)
        assert client.get(LIST_URL).status_code == 403

    def test_anonymous_rejected(self):
        assert APIClient().get(LIST_URL).status_code in (401, 403)

    def test_list(self, api_client):
        PoliciesOption().update_option({"camera": ["none"]})
        response = api_client.get(LIST_URL)
        assert response.status_code == 200

        body = response.json()
        assert body["header"] == "Feature-Policy"
        assert "camera 'none'" in body["directive"]
        assert [policy["name"] for policy in body["policies"]] == [
            feature.name for feature in default_catalog()
        ]
        camera = next(p for p in body["policies"] if p["name"] == "camera")
        assert camera == {
            "name": "camera",
            "title": "Camera",
            "default_origin": "self",
            "origin": "none",
        }

    def test_put_replaces_option(self, api_client):
        PoliciesOption().update_option({"geolocation": ["none"]})
        response = api_client.put(LIST_URL, {"camera": ["*"]}, format="json")
        assert response.status_code == 200
        assert PoliciesOption().get_option() == {"camera": ["*"]}
        assert "camera *" in response.json()["directive"]
        assert "geolocation 'self'" in response.json()["directive"]

    def test_put_empty_resets_overrides(self, api_client):
        PoliciesOption().update_option({"camera": ["none"]})
        response = api_client.put(LIST_URL, {}, format="json")
        assert response.status_code == 200
        assert PoliciesOption().get_option() == {}

    @pytest.mark.parametrize(
        "payload",
        [
            {"camera": ["bogus"]},
            {"camera": "self"},
            {"camera": []},
            {"camera": ["self", "none"]},
            {"teleport": ["*"]},
            ["camera"],
        ],
    )
    def test_put_invalid(self, api_client, payload):
        PoliciesOption().update_option({"camera": ["none"]})
        response = api_client.put(LIST_URL, payload, format="json")
        assert response.status_code == 400
        assert PoliciesOption().get_option() == {"camera": ["none"]}

    def test_delete(self, api_client):
        PoliciesOption().update_option({"camera": ["none"]})
        response = api_client.delete(LIST_URL)
        assert response.status_code == 204
        assert PoliciesOption().get_option() == {}


@pytest.mark.django_db
class TestFeaturePolicyDetailView:
    """Test single feature lookups"""

    def test_retrieve(self, api_client):
        PoliciesOption().update_option({"fullscreen": ["*"]})
        response = api_client.get(f"{LIST_URL}fullscreen/")
        assert response.status_code == 200
        assert response.json()["origin"] == "*"
        assert response.json()["default_origin"] == "self"

    def test_unknown_feature(self, api_client):
        response = api_client.get(f"{LIST_URL}teleport/")
        assert response.status_code == 404
        assert response.json() == {"error": "Unknown feature policy: teleport"}

    def test_put_not_allowed(self, api_client):
        response = api_client.put(f"{LIST_URL}camera/", {"camera": ["*"]}, format="json")
        assert response.status_code == 405


@pytest.mark.django_db
def test_schema_lists_feature_policies(admin_client):
    response = admin_client.get("/schema/")
    assert response.status_code == 200
    assert b"/api/feature-policies/" in response.content


class EmptyCatalogPoliciesView(FeaturePoliciesView):
    catalog = PolicyCatalog([])


class TestEmptyCatalog:
    """Test that an empty catalog is used as given"""

    def test_view_keeps_empty_catalog(self):
        catalog = EmptyCatalogPoliciesView().get_catalog()
        assert catalog is EmptyCatalogPoliciesView.catalog
        assert len(catalog) == 0

    def test_view_without_catalog_uses_default(self):
        assert FeaturePoliciesView().get_catalog() is default_catalog()

    def test_serializer_rejects_keys_outside_empty_catalog(self):
        serializer = PoliciesOptionSerializer(data={"camera": ["*"]}, catalog=PolicyCatalog([]))
        assert not serializer.is_valid()
        assert "policies" in serializer.errors

    def test_serializer_accepts_empty_option_for_empty_catalog(self):
        serializer = PoliciesOptionSerializer(data={}, catalog=PolicyCatalog([]))
        assert serializer.is_valid()
        assert serializer.validated_data["policies"] == {}
