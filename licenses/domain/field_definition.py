"""
Field definitions declared by license type plugins.

The host uses these to create per-license storage for plugin data.
"""
from dataclasses import dataclass, field
from typing import Any, Dict

CARDINALITY_UNLIMITED = -1


@dataclass(frozen=True)
class FieldDefinition:
    """Storage shape of a license field."""

    name: str
    field_type: str
    label: str
    description: str = ""
    cardinality: int = 1
    required: bool = False
    settings: Dict[str, Any] = field(default_factory=dict)
    form_display: Dict[str, Any] = field(default_factory=dict)
    view_display: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate field definition."""
        if not self.name:
            raise ValueError("Field name is required")
        if self.cardinality != CARDINALITY_UNLIMITED and self.cardinality < 1:
            raise ValueError("Cardinality must be positive or unlimited")

    @property
    def is_multiple(self) -> bool:
        return self.cardinality == CARDINALITY_UNLIMITED or self.cardinality > 1

    @property
    def target_type(self):
        return self.settings.get("target_type")
