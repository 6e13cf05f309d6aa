"""
Django implementation of GroupMembershipStore port.
"""
import logging

from core.domain.exceptions import GroupResolutionFailure
from core.domain.value_objects import UserRef
from groups.domain.group import GroupReference
from groups.infrastructure.models import Group as GroupModel
from groups.infrastructure.models import GroupMembership as GroupMembershipModel
from groups.ports.group_membership_store import GroupMembershipStore

logger = logging.getLogger(__name__)


class DjangoGroupMembershipStore(GroupMembershipStore):
    """
    Django ORM implementation of GroupMembershipStore.

    The (group, user) unique constraint makes repeated adds harmless;
    get_or_create returns the existing row instead of inserting.
    """

    def _ensure_group_exists(self, group: GroupReference) -> None:
        if not GroupModel.objects.filter(id=group.id).exists():
            raise GroupResolutionFailure(group.id)

    def add_member(self, group: GroupReference, user: UserRef) -> bool:
        """
        Add a user to a group.

        Args:
            group: Resolved group
            user: User to add

        Returns:
            True if a membership was created
        """
        self._ensure_group_exists(group)
        _, created = GroupMembershipModel.objects.get_or_create(
            group_id=group.id, user_id=user.id
        )
        logger.debug(
            "add_member group=%s user=%s created=%s", group.id, user.id, created
        )
        return created

    def remove_member(self, group: GroupReference, user: UserRef) -> bool:
        """
        Remove a user from a group.

        Args:
            group: Resolved group
            user: User to remove

        Returns:
            True if a membership was removed
        """
        self._ensure_group_exists(group)
        deleted, _ = GroupMembershipModel.objects.filter(
            group_id=group.id, user_id=user.id
        ).delete()
        logger.debug(
            "remove_member group=%s user=%s deleted=%s", group.id, user.id, deleted
        )
        return deleted > 0

    def is_member(self, group: GroupReference, user: UserRef) -> bool:
        """
        Check whether a user belongs to a group.

        Args:
            group: Resolved group
            user: User to check

        Returns:
            True if the user is a member
        """
        return GroupMembershipModel.objects.filter(
            group_id=group.id, user_id=user.id
        ).exists()
