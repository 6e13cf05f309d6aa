"""
Owner form guard.

Lets license type plugins alter forms for entities they granted to a
license owner, e.g. warn before a granted membership is deleted.
"""
from django.http import HttpRequest

from core.domain.value_objects import LicenseState
from groups.domain.membership import GroupMembership
from licenses.application.services.license_type_plugins import (
    LicenseTypePluginFactory,
)
from licenses.plugins.base import GrantedEntityLocking
from licenses.ports.license_repository import LicenseRepository


class OwnerFormGuard:
    """Dispatches owner forms to the plugins of the owner's active licenses."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        plugin_factory: LicenseTypePluginFactory,
    ):
        self.license_repository = license_repository
        self.plugin_factory = plugin_factory

    @classmethod
    def from_django(cls) -> "OwnerFormGuard":
        from licenses.infrastructure.repositories.django_license_repository import (
            DjangoLicenseRepository,
        )

        return cls(
            license_repository=DjangoLicenseRepository(),
            plugin_factory=LicenseTypePluginFactory.from_django(),
        )

    def alter_form(
        self, request: HttpRequest, form_id: str, form_entity: GroupMembership
    ) -> None:
        """
        Alter a form rendered for a membership.

        Each plugin alters the form at most once, however many of the
        owner's active licenses it handles.

        Args:
            request: Request rendering the form
            form_id: ID of the form
            form_entity: Membership the form is about
        """
        licenses = self.license_repository.find_by_owner(
            form_entity.user_id, state=LicenseState.ACTIVE
        )
        altered_by = set()
        for license in licenses:
            plugin = self.plugin_factory.load(license.license_type_id)
            if plugin.plugin_id in altered_by:
                continue
            if isinstance(plugin, GrantedEntityLocking) and plugin.alter_entity_owner_form(
                request, form_id, license, form_entity
            ):
                altered_by.add(plugin.plugin_id)
