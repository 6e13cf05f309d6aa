from groups.infrastructure.models import Group, GroupMembership, GroupType  # noqa: F401
