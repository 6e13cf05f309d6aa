"""
Django implementation of LicenseRepository port.

This adapter converts between domain entities and Django ORM models.
"""
import uuid
from typing import List, Optional

from core.domain.value_objects import LicenseState, UserRef
from licenses.domain.license import License
from licenses.infrastructure.models import License as LicenseModel
from licenses.ports.license_repository import LicenseRepository


class DjangoLicenseRepository(LicenseRepository):
    """
    Django ORM implementation of LicenseRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: LicenseModel) -> License:
        """
        Convert Django model to domain entity.

        Args:
            model: Django License model

        Returns:
            License domain entity
        """
        return License(
            id=model.id,
            license_type_id=model.license_type_id,
            owner=UserRef(
                id=model.owner_id, display_name=model.owner.get_username()
            ),
            state=LicenseState(model.state),
            target_groups=tuple(str(group_id) for group_id in model.target_group_ids),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, license: License) -> LicenseModel:
        """
        Convert domain entity to Django model.

        Target groups are only written on creation.

        Args:
            license: License domain entity

        Returns:
            Django License model
        """
        model, created = LicenseModel.objects.get_or_create(
            id=license.id,
            defaults={
                "license_type_id": license.license_type_id,
                "owner_id": license.owner.id,
                "state": license.state.value,
                "target_group_ids": list(license.target_groups),
            },
        )
        if not created:
            model.state = license.state.value
        return model

    def save(self, license: License) -> License:
        """
        Save a license entity.

        Args:
            license: License entity to save

        Returns:
            Saved license entity
        """
        model = self._to_model(license)
        model.save()
        return self._to_domain(model)

    def find_by_id(self, license_id: uuid.UUID) -> Optional[License]:
        """
        Find a license by ID.

        Args:
            license_id: License UUID

        Returns:
            License entity or None if not found
        """
        try:
            model = LicenseModel.objects.select_related("owner").get(id=license_id)
            return self._to_domain(model)
        except LicenseModel.DoesNotExist:
            return None

    def find_by_owner(
        self, user_id: int, state: Optional[LicenseState] = None
    ) -> List[License]:
        """
        Find all licenses owned by a user.

        Args:
            user_id: Owner's user ID
            state: Only return licenses in this state

        Returns:
            List of License entities
        """
        models = LicenseModel.objects.select_related("owner").filter(owner_id=user_id)
        if state is not None:
            models = models.filter(state=state.value)
        return [self._to_domain(model) for model in models]
