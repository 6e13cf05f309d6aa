"""
License type plugin factory.

Builds plugin instances from stored license types, wiring in the
group catalog and membership store explicitly.
"""
from typing import Dict, Type

from core.domain.exceptions import (
    LicenseTypeNotFoundError,
    UnknownLicenseTypePluginError,
)
from groups.ports.group_catalog import GroupCatalog
from groups.ports.group_membership_store import GroupMembershipStore
from licenses.domain.license_type import LicenseType
from licenses.plugins.base import LicenseTypeBase
from licenses.plugins.group_membership import GroupMembershipLicenseType
from licenses.ports.license_type_repository import LicenseTypeRepository

LICENSE_TYPE_PLUGINS: Dict[str, Type[LicenseTypeBase]] = {
    GroupMembershipLicenseType.plugin_id: GroupMembershipLicenseType,
}


class LicenseTypePluginFactory:
    """Creates configured license type plugins."""

    def __init__(
        self,
        license_type_repository: LicenseTypeRepository,
        group_catalog: GroupCatalog,
        membership_store: GroupMembershipStore,
    ):
        """Initialize factory with its collaborators."""
        self.license_type_repository = license_type_repository
        self.group_catalog = group_catalog
        self.membership_store = membership_store

    @classmethod
    def from_django(cls) -> "LicenseTypePluginFactory":
        """Create a factory backed by the Django ORM adapters."""
        from groups.infrastructure.repositories.django_group_catalog import (
            DjangoGroupCatalog,
        )
        from groups.infrastructure.repositories.django_group_membership_store import (
            DjangoGroupMembershipStore,
        )
        from licenses.infrastructure.repositories.django_license_type_repository import (
            DjangoLicenseTypeRepository,
        )

        return cls(
            license_type_repository=DjangoLicenseTypeRepository(),
            group_catalog=DjangoGroupCatalog(),
            membership_store=DjangoGroupMembershipStore(),
        )

    def create(self, license_type: LicenseType) -> LicenseTypeBase:
        """
        Create the plugin for a license type.

        Args:
            license_type: Stored license type

        Returns:
            Configured plugin instance

        Raises:
            UnknownLicenseTypePluginError: If no plugin has the type's plugin_id
        """
        plugin_class = LICENSE_TYPE_PLUGINS.get(license_type.plugin_id)
        if plugin_class is None:
            raise UnknownLicenseTypePluginError(license_type.plugin_id)
        return plugin_class(
            group_catalog=self.group_catalog,
            membership_store=self.membership_store,
            configuration=license_type.configuration,
        )

    def load(self, license_type_id) -> LicenseTypeBase:
        """
        Load a license type and create its plugin.

        Raises:
            LicenseTypeNotFoundError: If the license type does not exist
        """
        license_type = self.license_type_repository.find_by_id(license_type_id)
        if license_type is None:
            raise LicenseTypeNotFoundError(f"License type {license_type_id} not found")
        return self.create(license_type)
