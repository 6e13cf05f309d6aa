"""
Group membership domain entity.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class GroupMembership:
    """Relation between a user and a group."""

    group_id: str
    user_id: int
