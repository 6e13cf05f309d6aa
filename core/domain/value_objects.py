"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class UserRef(ValueObject):
    """Reference to a user account owned by the host."""

    id: int
    display_name: str = ""

    def __post_init__(self):
        """Validate user reference."""
        if self.id is None:
            raise ValueError("User ID is required")

    def __str__(self) -> str:
        """Return display name, falling back to the ID."""
        return self.display_name or str(self.id)


class Cardinality(Enum):
    """How many groups a license type may target."""

    SINGLE = "single"
    MULTI = "multi"

    @property
    def max_selections(self) -> Optional[int]:
        """Maximum number of target groups, None when unbounded."""
        if self is Cardinality.SINGLE:
            return 1
        return None

    def __str__(self) -> str:
        """Return cardinality as string."""
        return self.value


class LicenseState(Enum):
    """License lifecycle state."""

    PENDING = "pending"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    EXPIRED = "expired"
    CANCELED = "canceled"

    def __str__(self) -> str:
        """Return state as string."""
        return self.value
