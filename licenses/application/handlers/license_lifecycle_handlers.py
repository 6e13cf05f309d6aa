"""
License lifecycle handlers.

Handlers for create, activate and cancel license commands. Activation
grants what the license type gives; cancellation revokes it.
"""
import logging

from core.domain.exceptions import LicenseNotFoundError
from licenses.application.commands.activate_license import ActivateLicenseCommand
from licenses.application.commands.cancel_license import CancelLicenseCommand
from licenses.application.commands.create_license import CreateLicenseCommand
from licenses.application.services.license_type_plugins import (
    LicenseTypePluginFactory,
)
from licenses.domain.license import License
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class CreateLicenseHandler:
    """Handler for CreateLicenseCommand."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        plugin_factory: LicenseTypePluginFactory,
    ):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.plugin_factory = plugin_factory

    def handle(self, command: CreateLicenseCommand) -> License:
        """
        Handle create license command.

        The new license copies the target groups configured on its type.

        Args:
            command: CreateLicenseCommand

        Returns:
            Pending License entity

        Raises:
            LicenseTypeNotFoundError: If license type not found
        """
        plugin = self.plugin_factory.load(command.license_type_id)
        target_groups = getattr(plugin.configuration, "target_group_ids", ())

        license = License.create(
            license_type_id=command.license_type_id,
            owner=command.owner,
            target_groups=target_groups,
        )
        saved = self.license_repository.save(license)
        logger.info(
            "Created license %s of type %s for user %s",
            saved.id,
            command.license_type_id,
            command.owner.id,
        )
        return saved


class ActivateLicenseHandler:
    """Handler for ActivateLicenseCommand."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        plugin_factory: LicenseTypePluginFactory,
    ):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.plugin_factory = plugin_factory

    def handle(self, command: ActivateLicenseCommand) -> License:
        """
        Handle activate license command.

        Args:
            command: ActivateLicenseCommand

        Returns:
            Activated License entity

        Raises:
            LicenseNotFoundError: If license not found
        """
        license = self.license_repository.find_by_id(command.license_id)
        if not license:
            raise LicenseNotFoundError(f"License {command.license_id} not found")

        activated = license.activate()
        plugin = self.plugin_factory.load(activated.license_type_id)
        plugin.grant_license(activated)

        saved = self.license_repository.save(activated)
        logger.info("Activated license %s", saved.id)
        return saved


class CancelLicenseHandler:
    """Handler for CancelLicenseCommand."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        plugin_factory: LicenseTypePluginFactory,
    ):
        """Initialize handler with repositories."""
        self.license_repository = license_repository
        self.plugin_factory = plugin_factory

    def handle(self, command: CancelLicenseCommand) -> License:
        """
        Handle cancel license command.

        Only a license that was active had anything granted, so only
        then is the plugin asked to revoke.

        Args:
            command: CancelLicenseCommand

        Returns:
            Canceled License entity

        Raises:
            LicenseNotFoundError: If license not found
        """
        license = self.license_repository.find_by_id(command.license_id)
        if not license:
            raise LicenseNotFoundError(f"License {command.license_id} not found")

        was_active = license.is_active
        canceled = license.cancel()
        if was_active:
            plugin = self.plugin_factory.load(canceled.license_type_id)
            plugin.revoke_license(canceled)

        saved = self.license_repository.save(canceled)
        logger.info(
            "Canceled license %s (reason: %s)", saved.id, command.reason or "none"
        )
        return saved
