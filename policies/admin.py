from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html

from policies.models import PolicyOption


@admin.register(PolicyOption)
class PolicyOptionAdmin(admin.ModelAdmin):
    """Read-only listing; overrides are edited on the feature policies screen."""

    list_display = ["name", "updated_at", "edit_link"]
    readonly_fields = ["name", "value", "updated_at"]

    def edit_link(self, obj):
        return format_html('<a href="{}">Edit policies</a>', reverse("feature-policies-screen"))

    edit_link.short_description = "Screen"

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
