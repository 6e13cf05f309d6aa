"""
License type definition.

The host stores one record per purchasable license variant; the
plugin named by plugin_id interprets its configuration.
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LicenseType:
    """License type definition record."""

    id: uuid.UUID
    label: str
    plugin_id: str
    configuration: Dict[str, Any] = field(default_factory=dict)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate license type."""
        if not self.label:
            raise ValueError("License type label is required")
        if not self.plugin_id:
            raise ValueError("Plugin ID is required")

    @classmethod
    def create(
        cls,
        label: str,
        plugin_id: str,
        configuration: Optional[Dict[str, Any]] = None,
        license_type_id: Optional[uuid.UUID] = None,
    ) -> "LicenseType":
        """
        Create a new LicenseType.

        Args:
            label: Human-readable label
            plugin_id: ID of the plugin implementing the type
            configuration: Plugin configuration
            license_type_id: Optional UUID (generated if not provided)

        Returns:
            LicenseType instance
        """
        now = datetime.now(timezone.utc)
        return cls(
            id=license_type_id or uuid.uuid4(),
            label=label,
            plugin_id=plugin_id,
            configuration=dict(configuration or {}),
            created_at=now,
            updated_at=now,
        )

    def with_configuration(self, configuration: Dict[str, Any]) -> "LicenseType":
        """Return a copy carrying a new plugin configuration."""
        return LicenseType(
            id=self.id,
            label=self.label,
            plugin_id=self.plugin_id,
            configuration=dict(configuration),
            created_at=self.created_at,
            updated_at=datetime.now(timezone.utc),
        )
