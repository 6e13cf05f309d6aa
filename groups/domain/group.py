"""
Group domain entity.

Licenses only hold references to groups; the catalog resolves them
to this read-only view.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class GroupReference:
    """A resolved group with its label and type."""

    id: str
    label: str
    type_label: str

    def __post_init__(self):
        """Validate group reference."""
        if not self.id:
            raise ValueError("Group ID is required")

    def __str__(self) -> str:
        return self.label
