"""
GroupType, Group and GroupMembership models.
"""
import uuid

from django.conf import settings
from django.db import models


class GroupType(models.Model):
    """
    A kind of group (e.g. "Club", "Course").
    Used to organise groups in configuration forms.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    label = models.CharField(max_length=255, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "group_types"
        ordering = ["label"]

    def __str__(self):
        return self.label


class Group(models.Model):
    """
    A bounded collection of users.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group_type = models.ForeignKey(
        GroupType, on_delete=models.PROTECT, related_name="groups"
    )
    label = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "groups"
        ordering = ["group_type__label", "label"]

    def __str__(self):
        return self.label


class GroupMembership(models.Model):
    """
    Membership of a user in a group.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group = models.ForeignKey(
        Group, on_delete=models.CASCADE, related_name="memberships"
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="group_memberships",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "group_memberships"
        unique_together = [["group", "user"]]
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "group"], name="group_memb_user_group_idx"),
        ]

    def __str__(self):
        return f"{self.user} @ {self.group.label}"
