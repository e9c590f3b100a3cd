from django.urls import path

from policies.views import FeaturePoliciesView, FeaturePolicyDetailView

urlpatterns = [
    path("feature-policies/", FeaturePoliciesView.as_view(), name="feature-policies"),
    path(
        "feature-policies/<str:name>/",
        FeaturePolicyDetailView.as_view(),
        name="feature-policy-detail",
    ),
]
