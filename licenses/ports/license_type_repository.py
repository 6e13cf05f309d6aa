"""
License type repository port (interface).
"""
from abc import ABC, abstractmethod
from typing import Optional
import uuid

from licenses.domain.license_type import LicenseType


class LicenseTypeRepository(ABC):
    """Abstract repository for LicenseType definitions."""

    @abstractmethod
    def save(self, license_type: LicenseType) -> LicenseType:
        """
        Save a license type.

        Args:
            license_type: LicenseType to save

        Returns:
            Saved license type
        """
        pass

    @abstractmethod
    def find_by_id(self, license_type_id: uuid.UUID) -> Optional[LicenseType]:
        """
        Find a license type by ID.

        Args:
            license_type_id: License type UUID

        Returns:
            LicenseType or None if not found
        """
        pass
