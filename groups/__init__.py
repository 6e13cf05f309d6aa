"""
Groups module - Group catalog and group membership.

This module handles:
- Group and GroupType records
- Resolving group identifiers for license types
- Adding, removing and querying memberships
"""
