"""
Group membership store port (interface).

This defines the contract for membership mutations and queries.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod

from core.domain.value_objects import UserRef
from groups.domain.group import GroupReference


class GroupMembershipStore(ABC):
    """
    Abstract store of group memberships.

    Mutations are idempotent: adding an existing member or removing
    a non-member is not an error.
    """

    @abstractmethod
    def add_member(self, group: GroupReference, user: UserRef) -> bool:
        """
        Add a user to a group.

        Args:
            group: Resolved group
            user: User to add

        Returns:
            True if a membership was created, False if it already existed

        Raises:
            GroupResolutionFailure: If the group no longer exists
        """
        pass

    @abstractmethod
    def remove_member(self, group: GroupReference, user: UserRef) -> bool:
        """
        Remove a user from a group.

        Args:
            group: Resolved group
            user: User to remove

        Returns:
            True if a membership was removed, False if there was none

        Raises:
            GroupResolutionFailure: If the group no longer exists
        """
        pass

    @abstractmethod
    def is_member(self, group: GroupReference, user: UserRef) -> bool:
        """
        Check whether a user belongs to a group.

        Args:
            group: Resolved group
            user: User to check

        Returns:
            True if the user is a member
        """
        pass
