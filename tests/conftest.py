"""
Pytest configuration and shared fixtures.
"""

import uuid

import pytest

from core.domain.exceptions import GroupResolutionFailure
from core.domain.value_objects import Cardinality, UserRef
from groups.domain.group import GroupReference
from groups.infrastructure.models import Group as GroupModel
from groups.infrastructure.models import GroupType as GroupTypeModel
from groups.infrastructure.repositories.django_group_catalog import DjangoGroupCatalog
from groups.infrastructure.repositories.django_group_membership_store import (
    DjangoGroupMembershipStore,
)
from groups.ports.group_catalog import GroupCatalog
from groups.ports.group_membership_store import GroupMembershipStore
from licenses.application.services.license_type_plugins import (
    LicenseTypePluginFactory,
)
from licenses.domain.configuration import Configuration
from licenses.domain.license import License
from licenses.infrastructure.repositories.django_license_repository import (
    DjangoLicenseRepository,
)
from licenses.infrastructure.repositories.django_license_type_repository import (
    DjangoLicenseTypeRepository,
)
from licenses.plugins.group_membership import GroupMembershipLicenseType


class InMemoryGroupCatalog(GroupCatalog):
    """GroupCatalog backed by a dictionary."""

    def __init__(self, groups=()):
        self.groups = {group.id: group for group in groups}

    def delete(self, group_id):
        self.groups.pop(group_id, None)

    def resolve(self, group_id):
        return self.groups.get(group_id)

    def list(self):
        return sorted(self.groups.values(), key=lambda g: (g.type_label, g.label))


class InMemoryGroupMembershipStore(GroupMembershipStore):
    """GroupMembershipStore backed by a set of (group_id, user_id) pairs."""

    def __init__(self, catalog):
        self.catalog = catalog
        self.memberships = set()

    def _check(self, group):
        if self.catalog.resolve(group.id) is None:
            raise GroupResolutionFailure(group.id)

    def add_member(self, group, user):
        self._check(group)
        key = (group.id, user.id)
        if key in self.memberships:
            return False
        self.memberships.add(key)
        return True

    def remove_member(self, group, user):
        self._check(group)
        key = (group.id, user.id)
        if key not in self.memberships:
            return False
        self.memberships.remove(key)
        return True

    def is_member(self, group, user):
        return (group.id, user.id) in self.memberships


@pytest.fixture
def chess_club():
    return GroupReference(id="g1", label="Chess Club", type_label="Club")


@pytest.fixture
def python_course():
    return GroupReference(id="g2", label="Python 101", type_label="Course")


@pytest.fixture
def go_club():
    return GroupReference(id="g3", label="Go Club", type_label="Club")


@pytest.fixture
def group_catalog(chess_club, python_course, go_club):
    """Fixture for an in-memory GroupCatalog."""
    return InMemoryGroupCatalog([chess_club, python_course, go_club])


@pytest.fixture
def membership_store(group_catalog):
    """Fixture for an in-memory GroupMembershipStore."""
    return InMemoryGroupMembershipStore(group_catalog)


@pytest.fixture
def user():
    """Fixture for a prospective license owner."""
    return UserRef(id=1, display_name="alice")


@pytest.fixture
def make_plugin(group_catalog, membership_store):
    """Factory fixture for GroupMembershipLicenseType plugins."""

    def _make(target_group_ids=(), cardinality=Cardinality.MULTI):
        return GroupMembershipLicenseType(
            group_catalog=group_catalog,
            membership_store=membership_store,
            configuration=Configuration(
                target_group_ids=tuple(target_group_ids), cardinality=cardinality
            ),
        )

    return _make


@pytest.fixture
def make_license(user):
    """Factory fixture for License entities."""

    def _make(target_groups, owner=None):
        return License.create(
            license_type_id=uuid.uuid4(),
            owner=owner or user,
            target_groups=target_groups,
        )

    return _make


@pytest.fixture
def django_group_catalog():
    """Fixture for DjangoGroupCatalog."""
    return DjangoGroupCatalog()


@pytest.fixture
def django_membership_store():
    """Fixture for DjangoGroupMembershipStore."""
    return DjangoGroupMembershipStore()


@pytest.fixture
def license_repository():
    """Fixture for LicenseRepository."""
    return DjangoLicenseRepository()


@pytest.fixture
def license_type_repository():
    """Fixture for LicenseTypeRepository."""
    return DjangoLicenseTypeRepository()


@pytest.fixture
def plugin_factory(license_type_repository, django_group_catalog, django_membership_store):
    """Fixture for a Django-backed LicenseTypePluginFactory."""
    return LicenseTypePluginFactory(
        license_type_repository=license_type_repository,
        group_catalog=django_group_catalog,
        membership_store=django_membership_store,
    )


@pytest.fixture
def db_groups(db):
    """Fixture for Group rows saved in database, keyed by label."""
    club = GroupTypeModel.objects.create(label="Club")
    course = GroupTypeModel.objects.create(label="Course")
    return {
        "Chess Club": GroupModel.objects.create(group_type=club, label="Chess Club"),
        "Go Club": GroupModel.objects.create(group_type=club, label="Go Club"),
        "Python 101": GroupModel.objects.create(group_type=course, label="Python 101"),
    }


@pytest.fixture
def db_user(db, django_user_model):
    """Fixture for a user saved in database."""
    model = django_user_model.objects.create_user(username="alice", password="secret")
    return UserRef(id=model.id, display_name=model.get_username())
