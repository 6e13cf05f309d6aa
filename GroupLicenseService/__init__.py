"""
Group License Service - license types that grant group membership.
"""
