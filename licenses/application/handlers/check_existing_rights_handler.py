"""
CheckExistingRightsHandler.

Handles the pre-purchase existing rights query.
"""
import logging

from licenses.application.queries.check_existing_rights import (
    CheckExistingRightsQuery,
)
from licenses.application.services.license_type_plugins import (
    LicenseTypePluginFactory,
)
from licenses.domain.existing_rights import ExistingRightsResult, RightsDoNotExist
from licenses.plugins.base import ExistingRightsFromConfigurationChecking

logger = logging.getLogger(__name__)


class CheckExistingRightsHandler:
    """Handler for CheckExistingRightsQuery."""

    def __init__(self, plugin_factory: LicenseTypePluginFactory):
        """Initialize handler with plugin factory."""
        self.plugin_factory = plugin_factory

    def handle(self, query: CheckExistingRightsQuery) -> ExistingRightsResult:
        """
        Handle check existing rights query.

        License types that cannot check configuration-based rights never
        report existing rights.

        Args:
            query: CheckExistingRightsQuery

        Returns:
            ExistingRightsResult

        Raises:
            LicenseTypeNotFoundError: If license type not found
        """
        plugin = self.plugin_factory.load(query.license_type_id)
        if not isinstance(plugin, ExistingRightsFromConfigurationChecking):
            return RightsDoNotExist()

        result = plugin.check_user_has_existing_rights(query.user)
        logger.debug(
            "Existing rights for user %s on license type %s: %s",
            query.user.id,
            query.license_type_id,
            result.has_existing_rights,
        )
        return result
