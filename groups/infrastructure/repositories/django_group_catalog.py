"""
Django implementation of GroupCatalog port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import List, Optional

from django.core.exceptions import ValidationError

from groups.domain.group import GroupReference
from groups.infrastructure.models import Group as GroupModel
from groups.ports.group_catalog import GroupCatalog


class DjangoGroupCatalog(GroupCatalog):
    """Django ORM implementation of GroupCatalog."""

    def _to_domain(self, model: GroupModel) -> GroupReference:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Group model

        Returns:
            GroupReference domain entity
        """
        return GroupReference(
            id=str(model.id),
            label=model.label,
            type_label=model.group_type.label,
        )

    def resolve(self, group_id: str) -> Optional[GroupReference]:
        """
        Resolve a group identifier.

        Identifiers that are not valid UUIDs resolve to nothing.

        Args:
            group_id: Group identifier

        Returns:
            GroupReference or None if the group does not exist
        """
        try:
            model = GroupModel.objects.select_related("group_type").get(
                id=group_id
            )
        except (GroupModel.DoesNotExist, ValidationError, ValueError):
            return None
        return self._to_domain(model)

    def list(self) -> List[GroupReference]:
        """
        List all groups.

        Returns:
            GroupReference list ordered by type label, then label
        """
        models = GroupModel.objects.select_related("group_type").order_by(
            "group_type__label", "label"
        )
        return [self._to_domain(model) for model in models]
