"""
LicenseType and License models.
"""
import uuid

from django.conf import settings
from django.db import models


class LicenseType(models.Model):
    """
    A purchasable license variant.
    The plugin named by plugin_id interprets the configuration.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    label = models.CharField(max_length=255)
    plugin_id = models.CharField(max_length=100, db_index=True)
    configuration = models.JSONField(
        default=dict, blank=True, help_text="Plugin configuration"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "license_types"
        ordering = ["label"]

    def __str__(self):
        return self.label


class License(models.Model):
    """
    An entitlement owned by a user.
    Target group ids are copied from the license type on creation.
    """

    STATE_CHOICES = [
        ("pending", "Pending"),
        ("active", "Active"),
        ("suspended", "Suspended"),
        ("expired", "Expired"),
        ("canceled", "Canceled"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    license_type = models.ForeignKey(
        LicenseType, on_delete=models.PROTECT, related_name="licenses"
    )
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="licenses"
    )
    state = models.CharField(max_length=20, choices=STATE_CHOICES, default="pending")
    target_group_ids = models.JSONField(
        default=list, blank=True, help_text="Ordered group ids granted by the license"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "licenses"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["owner", "state"], name="licenses_owner_state_idx"),
        ]

    def __str__(self):
        return f"{self.license_type.label} - {self.owner}"
