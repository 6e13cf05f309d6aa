"""
ActivateLicenseCommand.

Command to activate a license.
"""

import uuid
from dataclasses import dataclass


@dataclass
class ActivateLicenseCommand:
    """Command to activate a license."""

    license_id: uuid.UUID
