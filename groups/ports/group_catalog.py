"""
Group catalog port (interface).

This defines the contract for looking up groups.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from groups.domain.group import GroupReference


class GroupCatalog(ABC):
    """
    Abstract catalog of Group records.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    def resolve(self, group_id: str) -> Optional[GroupReference]:
        """
        Resolve a group identifier.

        Args:
            group_id: Group identifier

        Returns:
            GroupReference or None if the group does not exist
        """
        pass

    @abstractmethod
    def list(self) -> List[GroupReference]:
        """
        List all groups.

        Returns:
            GroupReference list ordered by type label, then label
        """
        pass
