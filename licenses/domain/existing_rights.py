"""
Existing rights check results.

A result is produced fresh for every check and never persisted.
"""
from dataclasses import dataclass


class ExistingRightsResult:
    """Outcome of checking whether a user already holds what a license grants."""

    has_existing_rights = False

    @staticmethod
    def rights_exist(user_message: str, admin_message: str) -> "RightsExist":
        return RightsExist(user_message=user_message, admin_message=admin_message)

    @staticmethod
    def rights_do_not_exist() -> "RightsDoNotExist":
        return RightsDoNotExist()


@dataclass(frozen=True)
class RightsExist(ExistingRightsResult):
    """
    The user already has the rights.

    Attributes:
        user_message: Message shown to the user themselves
        admin_message: Message shown to an administrator acting for the user
    """

    user_message: str
    admin_message: str

    has_existing_rights = True


@dataclass(frozen=True)
class RightsDoNotExist(ExistingRightsResult):
    """The user does not have the rights yet."""

    has_existing_rights = False
