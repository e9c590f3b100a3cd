from rest_framework import serializers

from .catalog import Origin, default_catalog
from .headers import resolve_origin


class FeaturePolicySerializer(serializers.Serializer):
    """Read-only view of one catalog feature and its effective origin."""

    name = serializers.CharField(read_only=True)
    title = serializers.CharField(read_only=True)
    default_origin = serializers.ChoiceField(choices=Origin.choices, read_only=True)
    origin = serializers.SerializerMethodField()

    def get_origin(self, feature):
        return resolve_origin(feature, self.context.get("option", {})).value


class PoliciesOptionSerializer(serializers.Serializer):
    """
    Validates a full settings snapshot submitted through the API.

    Every key must be a catalog feature and every value a one-element list
    holding an origin token.
    """

    policies = serializers.DictField(
        child=serializers.ListField(
            child=serializers.ChoiceField(choices=Origin.choices),
            min_length=1,
            max_length=1,
        ),
        allow_empty=True,
    )

    def __init__(self, *args, catalog=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.catalog = catalog if catalog is not None else default_catalog()

    def to_internal_value(self, data):
        # The body is the snapshot itself, not wrapped in a "policies" key
        return super().to_internal_value({"policies": data})

    def validate_policies(self, value):
        unknown = sorted(name for name in value if name not in self.catalog)
        if unknown:
            raise serializers.ValidationError(
                f"Unknown feature policies: {', '.join(unknown)}"
            )
        return value
