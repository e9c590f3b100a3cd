from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from policies.views import FeaturePoliciesScreenView

api_urlpatterns = [
    path("api/", include("policies.urls")),
]

urlpatterns = [
    # API Schema and Documentation
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "schema/swagger-ui/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path(
        "schema/redoc/",
        SpectacularRedocView.as_view(url_name="schema"),
        name="redoc",
    ),
    # Must come before the admin catch-all
    path(
        "admin/feature-policies/",
        FeaturePoliciesScreenView.as_view(),
        name="feature-policies-screen",
    ),
    path("admin/", admin.site.urls),
]

urlpatterns += api_urlpatterns


if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
