import logging

from drf_spectacular.utils import OpenApiExample, OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from helper.permission import ManagePoliciesPermission

from ..catalog import default_catalog
from ..headers import HEADER_NAME, build_directive
from ..option import PoliciesOption
from ..serializers import FeaturePolicySerializer, PoliciesOptionSerializer

logger = logging.getLogger(__name__)

POLICIES_RESPONSE = {
    "type": "object",
    "properties": {
        "header": {"type": "string"},
        "directive": {"type": "string"},
        "policies": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "title": {"type": "string"},
                    "default_origin": {"type": "string", "enum": ["*", "self", "none"]},
                    "origin": {"type": "string", "enum": ["*", "self", "none"]},
                },
            },
        },
    },
}


class FeaturePoliciesView(APIView):
    """
    API view for reading and replacing the stored feature policy overrides.
    """

    permission_classes = [ManagePoliciesPermission]
    catalog = None
    option_class = PoliciesOption

    def get_catalog(self):
        return self.catalog if self.catalog is not None else default_catalog()

    def get_option(self):
        return self.option_class()

    def build_payload(self, option):
        catalog = self.get_catalog()
        serializer = FeaturePolicySerializer(
            catalog.get_all(), many=True, context={"option": option}
        )
        return {
            "header": HEADER_NAME,
            "directive": build_directive(catalog, option),
            "policies": serializer.data,
        }

    @extend_schema(
        summary="List feature policies",
        description="Return every catalog feature with its default and effective origin, "
        "plus the Feature-Policy header value currently sent with responses.",
        tags=["Feature Policies"],
        responses={200: POLICIES_RESPONSE},
    )
    def get(self, request):
        return Response(self.build_payload(self.get_option().get_option()))

    @extend_schema(
        summary="Replace feature policy overrides",
        description="""Replace the stored overrides wholesale.

        **Body:** a mapping of feature name to a one-element list holding
        one of `*`, `self` or `none`. Features left out use their default.
        """,
        tags=["Feature Policies"],
        request={
            "type": "object",
            "additionalProperties": {
                "type": "array",
                "items": {"type": "string", "enum": ["*", "self", "none"]},
                "minItems": 1,
                "maxItems": 1,
            },
        },
        responses={200: POLICIES_RESPONSE, 400: {"description": "Invalid overrides"}},
        examples=[
            OpenApiExample(
                "Disable camera, allow fullscreen everywhere",
                value={"camera": ["none"], "fullscreen": ["*"]},
                request_only=True,
            ),
        ],
    )
    def put(self, request):
        serializer = PoliciesOptionSerializer(data=request.data, catalog=self.get_catalog())
        serializer.is_valid(raise_exception=True)
        option = self.get_option().update_option(serializer.validated_data["policies"])
        logger.info(f"Feature policies updated by {request.user}")
        return Response(self.build_payload(option))

    @extend_schema(
        summary="Reset feature policy overrides",
        description="Delete the stored overrides so every feature uses its default origin.",
        tags=["Feature Policies"],
        responses={204: None},
    )
    def delete(self, request):
        self.get_option().delete_option()
        logger.info(f"Feature policies reset by {request.user}")
        return Response(status=status.HTTP_204_NO_CONTENT)


class FeaturePolicyDetailView(FeaturePoliciesView):
    """Read-only view of a single feature policy."""

    http_method_names = ["get", "head", "options"]

    @extend_schema(
        summary="Retrieve a feature policy",
        tags=["Feature Policies"],
        parameters=[
            OpenApiParameter(
                name="name",
                type=str,
                location=OpenApiParameter.PATH,
                description="Feature identifier, e.g. camera",
            ),
        ],
        responses={200: FeaturePolicySerializer, 404: {"description": "Unknown feature"}},
    )
    def get(self, request, name):
        feature = self.get_catalog().get(name)
        serializer = FeaturePolicySerializer(
            feature, context={"option": self.get_option().get_option()}
        )
        return Response(serializer.data)
