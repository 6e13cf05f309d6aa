"""
CreateLicenseCommand.

Command to create a license of a given type for a user.
"""

import uuid
from dataclasses import dataclass

from core.domain.value_objects import UserRef


@dataclass
class CreateLicenseCommand:
    """Command to create a license."""

    license_type_id: uuid.UUID
    owner: UserRef
