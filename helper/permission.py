from rest_framework import permissions

MANAGE_POLICIES_PERMISSION = "policies.change_policyoption"


def can_manage_policies(user):
    if not user or not user.is_authenticated:
        return False
    return user.has_perm(MANAGE_POLICIES_PERMISSION)


class ManagePoliciesPermission(permissions.BasePermission):
    message = "You do not have permission to manage feature policies."

    def has_permission(self, request, view):
        # Reads and writes require the same permission
        return can_manage_policies(request.user)
