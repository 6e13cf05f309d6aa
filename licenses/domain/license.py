"""
License domain entity.

This is the core domain entity representing a license.
It contains business logic and is independent of infrastructure.
"""
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Iterable, Optional, Tuple

from core.domain.value_objects import LicenseState, UserRef


@dataclass(frozen=True)
class License:
    """
    License domain entity.

    Represents an entitlement owned by a user. The target groups are
    copied from the license type configuration when the license is
    created and never change afterwards.
    """

    id: uuid.UUID
    license_type_id: uuid.UUID
    owner: UserRef
    state: LicenseState
    target_groups: Tuple[str, ...]
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate license entity."""
        if not self.license_type_id:
            raise ValueError("License type ID is required")
        if self.owner is None:
            raise ValueError("License owner is required")
        object.__setattr__(self, "target_groups", tuple(self.target_groups))

    @classmethod
    def create(
        cls,
        license_type_id: uuid.UUID,
        owner: UserRef,
        target_groups: Iterable[str],
        license_id: Optional[uuid.UUID] = None,
    ) -> "License":
        """
        Create a new License entity.

        Args:
            license_type_id: License type UUID
            owner: User that owns the license
            target_groups: Group ids from the license type configuration
            license_id: Optional UUID (generated if not provided)

        Returns:
            License entity instance in the pending state
        """
        now = datetime.now(timezone.utc)
        return cls(
            id=license_id or uuid.uuid4(),
            license_type_id=license_type_id,
            owner=owner,
            state=LicenseState.PENDING,
            target_groups=tuple(target_groups),
            created_at=now,
            updated_at=now,
        )

    @property
    def is_active(self) -> bool:
        return self.state == LicenseState.ACTIVE

    def _transition(self, state: LicenseState) -> "License":
        return replace(self, state=state, updated_at=datetime.now(timezone.utc))

    def activate(self) -> "License":
        """
        Create a new License instance with active state.

        Returns:
            New License instance with active state
        """
        if self.state not in (LicenseState.PENDING, LicenseState.SUSPENDED):
            raise ValueError(f"Cannot activate a license that is {self.state}")
        return self._transition(LicenseState.ACTIVE)

    def suspend(self) -> "License":
        """
        Create a new License instance with suspended state.

        Returns:
            New License instance with suspended state
        """
        if self.state != LicenseState.ACTIVE:
            raise ValueError("Can only suspend an active license")
        return self._transition(LicenseState.SUSPENDED)

    def expire(self) -> "License":
        """
        Create a new License instance with expired state.

        Returns:
            New License instance with expired state
        """
        if self.state != LicenseState.ACTIVE:
            raise ValueError("Can only expire an active license")
        return self._transition(LicenseState.EXPIRED)

    def cancel(self) -> "License":
        """
        Create a new License instance with canceled state.

        Returns:
            New License instance with canceled state
        """
        if self.state == LicenseState.CANCELED:
            raise ValueError("License is already canceled")
        return self._transition(LicenseState.CANCELED)
