"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""
from typing import Dict, List, Optional


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class GroupException(DomainException):
    """Base exception for group-related errors."""

    pass


class GroupResolutionFailure(GroupException):
    """Raised when a group identifier no longer resolves to a group."""

    def __init__(self, group_id: str, license_id=None):
        message = f"Couldn't get group {group_id}"
        if license_id is not None:
            message += f" for license {license_id}"
        super().__init__(message, code="GROUP_RESOLUTION_FAILURE")
        self.group_id = group_id
        self.license_id = license_id


class ConfigurationValidationFailure(DomainException):
    """Raised when a license type configuration is rejected."""

    def __init__(
        self,
        message: str = "Invalid license type configuration",
        errors: Optional[Dict[str, List[str]]] = None,
    ):
        super().__init__(message, code="CONFIGURATION_INVALID")
        self.errors = errors or {}


class LicenseException(DomainException):
    """Base exception for license-related errors."""

    pass


class LicenseNotFoundError(LicenseException):
    """Raised when a license is not found."""

    def __init__(self, message: str = "License not found"):
        super().__init__(message, code="LICENSE_NOT_FOUND")


class LicenseTypeNotFoundError(LicenseException):
    """Raised when a license type is not found."""

    def __init__(self, message: str = "License type not found"):
        super().__init__(message, code="LICENSE_TYPE_NOT_FOUND")


class UnknownLicenseTypePluginError(LicenseException):
    """Raised when a license type names a plugin that is not registered."""

    def __init__(self, plugin_id: str):
        super().__init__(
            f"Unknown license type plugin: {plugin_id}",
            code="UNKNOWN_LICENSE_TYPE_PLUGIN",
        )
        self.plugin_id = plugin_id
