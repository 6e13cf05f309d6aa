"""
Prometheus metrics for the group license service.

Custom metrics for entitlement business logic.
"""

from prometheus_client import Counter

# Membership metrics
group_memberships_granted_total = Counter(
    "group_memberships_granted_total",
    "Total group memberships granted by licenses",
    ["license_type"],
)

group_memberships_revoked_total = Counter(
    "group_memberships_revoked_total",
    "Total group memberships revoked by licenses",
    ["license_type"],
)

group_resolution_failures_total = Counter(
    "group_resolution_failures_total",
    "Total target groups that could not be resolved",
    ["operation"],
)

# Existing rights metrics
existing_rights_checks_total = Counter(
    "existing_rights_checks_total",
    "Total existing rights checks",
    ["result"],
)
