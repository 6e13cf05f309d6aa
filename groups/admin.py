"""
Django admin configuration for groups app.
"""
from django.contrib import admin
from django.contrib.admin.utils import unquote

from groups.domain.membership import GroupMembership as GroupMembershipEntity
from groups.infrastructure.models import Group, GroupMembership, GroupType
from licenses.application.services.owner_form_guard import OwnerFormGuard
from licenses.plugins.group_membership import MEMBERSHIP_DELETE_FORM_ID


@admin.register(GroupType)
class GroupTypeAdmin(admin.ModelAdmin):
    """Admin interface for GroupType model."""

    list_display = ["label", "group_count", "created_at"]
    search_fields = ["label"]
    readonly_fields = ["id", "created_at"]

    def group_count(self, obj):
        """Display number of groups of this type."""
        return obj.groups.count()

    group_count.short_description = "Groups"


@admin.register(Group)
class GroupAdmin(admin.ModelAdmin):
    """Admin interface for Group model."""

    list_display = ["label", "group_type", "member_count", "created_at"]
    list_filter = ["group_type"]
    search_fields = ["label", "group_type__label"]
    readonly_fields = ["id", "created_at", "updated_at"]

    def member_count(self, obj):
        """Display number of members."""
        return obj.memberships.count()

    member_count.short_description = "Members"

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("group_type")


@admin.register(GroupMembership)
class GroupMembershipAdmin(admin.ModelAdmin):
    """Admin interface for GroupMembership model."""

    list_display = ["user", "group", "created_at"]
    list_filter = ["group__group_type", "group"]
    search_fields = ["user__username", "group__label"]
    readonly_fields = ["id", "created_at"]

    def delete_view(self, request, object_id, extra_context=None):
        """Warn before deleting a membership granted by a license."""
        if request.method == "GET":
            obj = self.get_object(request, unquote(object_id))
            if obj is not None:
                OwnerFormGuard.from_django().alter_form(
                    request,
                    MEMBERSHIP_DELETE_FORM_ID,
                    GroupMembershipEntity(group_id=str(obj.group_id), user_id=obj.user_id),
                )
        return super().delete_view(request, object_id, extra_context)

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("user", "group")
