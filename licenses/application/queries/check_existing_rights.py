"""
CheckExistingRightsQuery.

Query asked before purchase: does the user already have what a
license of this type would grant?
"""

import uuid
from dataclasses import dataclass

from core.domain.value_objects import UserRef


@dataclass
class CheckExistingRightsQuery:
    """Query for existing rights."""

    license_type_id: uuid.UUID
    user: UserRef
