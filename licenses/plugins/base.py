"""
License type plugin base classes.

A license type plugin decides what a license grants. The lifecycle
host calls grant_license when a license becomes active and
revoke_license when it stops being active.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from django import forms
from django.http import HttpRequest

from core.domain.value_objects import UserRef
from licenses.domain.existing_rights import ExistingRightsResult
from licenses.domain.field_definition import FieldDefinition
from licenses.domain.license import License


class LicenseTypeBase(ABC):
    """Base class for license type plugins."""

    plugin_id: str = ""
    label: str = ""

    def __init__(self, configuration: Any = None):
        self.configuration = (
            self.default_configuration() if configuration is None else configuration
        )

    @abstractmethod
    def default_configuration(self) -> Any:
        """Return the configuration of a freshly created license type."""

    @abstractmethod
    def build_label(self, license: License) -> str:
        """Build a human-readable label for a license."""

    @abstractmethod
    def grant_license(self, license: License) -> None:
        """Give the license owner what the license grants."""

    @abstractmethod
    def revoke_license(self, license: License) -> None:
        """Take back what grant_license gave."""

    def build_configuration_form(self, data: Optional[Dict[str, Any]] = None) -> forms.Form:
        return forms.Form(data=data)

    def validate_configuration_form(self, form: forms.Form) -> None:
        pass

    def submit_configuration_form(self, form: forms.Form) -> Any:
        return self.configuration

    def build_field_definitions(self) -> Dict[str, FieldDefinition]:
        """Declare the fields licenses of this type need."""
        return {}


class ExistingRightsFromConfigurationChecking(ABC):
    """
    Plugins that can tell, from their configuration alone, whether a
    user already has what a license of this type would grant.
    """

    @abstractmethod
    def check_user_has_existing_rights(self, user: UserRef) -> ExistingRightsResult:
        """Check a user for existing rights before purchase."""


class GrantedEntityLocking(ABC):
    """
    Plugins whose granted entities should not be edited by hand.
    """

    @abstractmethod
    def alter_entity_owner_form(
        self,
        request: HttpRequest,
        form_id: str,
        license: License,
        form_entity: Any,
    ) -> bool:
        """
        Alter a form for an entity the license granted to its owner.

        Returns True if the form was altered.
        """
