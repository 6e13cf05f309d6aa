"""
Django implementation of LicenseTypeRepository port.
"""
import uuid
from typing import Optional

from licenses.domain.license_type import LicenseType
from licenses.infrastructure.models import LicenseType as LicenseTypeModel
from licenses.ports.license_type_repository import LicenseTypeRepository


class DjangoLicenseTypeRepository(LicenseTypeRepository):
    """Django ORM implementation of LicenseTypeRepository."""

    def _to_domain(self, model: LicenseTypeModel) -> LicenseType:
        return LicenseType(
            id=model.id,
            label=model.label,
            plugin_id=model.plugin_id,
            configuration=dict(model.configuration or {}),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def save(self, license_type: LicenseType) -> LicenseType:
        """
        Save a license type.

        Args:
            license_type: LicenseType to save

        Returns:
            Saved license type
        """
        model, _ = LicenseTypeModel.objects.update_or_create(
            id=license_type.id,
            defaults={
                "label": license_type.label,
                "plugin_id": license_type.plugin_id,
                "configuration": license_type.configuration,
            },
        )
        return self._to_domain(model)

    def find_by_id(self, license_type_id: uuid.UUID) -> Optional[LicenseType]:
        """
        Find a license type by ID.

        Args:
            license_type_id: License type UUID

        Returns:
            LicenseType or None if not found
        """
        try:
            return self._to_domain(LicenseTypeModel.objects.get(id=license_type_id))
        except LicenseTypeModel.DoesNotExist:
            return None
