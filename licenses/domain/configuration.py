"""
Group membership license type configuration.

The configuration decides which groups a license type targets and
how many may be selected.
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from core.domain.exceptions import ConfigurationValidationFailure
from core.domain.value_objects import Cardinality

TARGET_GROUPS_KEY = "license_group"
CARDINALITY_KEY = "cardinality"


def _normalize_selection(
    selection: Union[None, str, Iterable[Any]]
) -> Tuple[str, ...]:
    if selection is None or selection == "":
        return ()
    if isinstance(selection, str):
        return (selection,)
    # Keep the first occurrence of each id, in selection order.
    return tuple(dict.fromkeys(str(group_id) for group_id in selection if group_id))


@dataclass(frozen=True)
class Configuration:
    """
    Per license type settings.

    target_group_ids is empty only before the configuration form has
    been submitted; from_selection never produces an empty selection.
    """

    target_group_ids: Tuple[str, ...] = ()
    cardinality: Cardinality = Cardinality.MULTI

    def __post_init__(self):
        object.__setattr__(self, "target_group_ids", tuple(self.target_group_ids))

    @classmethod
    def from_selection(
        cls,
        selection: Union[None, str, Iterable[Any]],
        cardinality: Cardinality,
    ) -> "Configuration":
        """
        Build a validated configuration from a form selection.

        Args:
            selection: Selected group id(s)
            cardinality: Cardinality of the license type

        Returns:
            Configuration with at least one target group

        Raises:
            ConfigurationValidationFailure: If nothing is selected or the
                selection exceeds the cardinality
        """
        group_ids = _normalize_selection(selection)
        if not group_ids:
            raise ConfigurationValidationFailure(
                "At least one group must be selected",
                errors={TARGET_GROUPS_KEY: ["This field is required."]},
            )
        max_selections = cardinality.max_selections
        if max_selections is not None and len(group_ids) > max_selections:
            raise ConfigurationValidationFailure(
                f"At most {max_selections} group(s) may be selected",
                errors={
                    TARGET_GROUPS_KEY: [
                        f"Select no more than {max_selections} group(s)."
                    ]
                },
            )
        return cls(target_group_ids=group_ids, cardinality=cardinality)

    @classmethod
    def from_dict(
        cls,
        data: Optional[Mapping[str, Any]],
        default_cardinality: Cardinality = Cardinality.MULTI,
    ) -> "Configuration":
        """
        Load a stored configuration.

        Stored data is trusted; no selection validation happens here.
        """
        data = data or {}
        cardinality = data.get(CARDINALITY_KEY)
        return cls(
            target_group_ids=_normalize_selection(data.get(TARGET_GROUPS_KEY)),
            cardinality=Cardinality(cardinality) if cardinality else default_cardinality,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a JSON-serialisable dictionary."""
        return {
            TARGET_GROUPS_KEY: list(self.target_group_ids),
            CARDINALITY_KEY: self.cardinality.value,
        }

    @property
    def is_single(self) -> bool:
        return self.cardinality is Cardinality.SINGLE
