"""
Unit tests for the group membership license type plugin.
"""
import logging

import pytest
from django.contrib.messages import get_messages
from django.contrib.messages.storage.cookie import CookieStorage
from django.test import RequestFactory
from prometheus_client import REGISTRY

from core.domain.exceptions import GroupResolutionFailure
from core.domain.value_objects import Cardinality, UserRef
from groups.domain.membership import GroupMembership
from licenses.domain.existing_rights import RightsDoNotExist, RightsExist
from licenses.domain.field_definition import CARDINALITY_UNLIMITED
from licenses.plugins.base import (
    ExistingRightsFromConfigurationChecking,
    GrantedEntityLocking,
)
from licenses.plugins.group_membership import (
    MEMBERSHIP_DELETE_FORM_ID,
    GroupMembershipLicenseType,
)

PLUGIN_LOGGER = "licenses.plugins.group_membership"


def _failures(operation):
    value = REGISTRY.get_sample_value(
        "group_resolution_failures_total", {"operation": operation}
    )
    return value or 0.0


class TestDefaults:
    """Tests for plugin defaults and configuration loading."""

    def test_default_configuration_is_empty(self, group_catalog, membership_store):
        plugin = GroupMembershipLicenseType(group_catalog, membership_store)

        assert plugin.configuration.target_group_ids == ()
        assert plugin.cardinality is Cardinality.MULTI

    def test_default_cardinality_from_settings(
        self, settings, group_catalog, membership_store
    ):
        settings.LICENSE_GROUP_DEFAULT_CARDINALITY = "single"

        plugin = GroupMembershipLicenseType(group_catalog, membership_store)

        assert plugin.cardinality is Cardinality.SINGLE

    def test_stored_configuration_dictionary(self, group_catalog, membership_store):
        plugin = GroupMembershipLicenseType(
            group_catalog,
            membership_store,
            configuration={"license_group": ["g1"], "cardinality": "single"},
        )

        assert plugin.configuration.target_group_ids == ("g1",)
        assert plugin.cardinality is Cardinality.SINGLE

    def test_capabilities(self, make_plugin):
        plugin = make_plugin(["g1"])

        assert isinstance(plugin, ExistingRightsFromConfigurationChecking)
        assert isinstance(plugin, GrantedEntityLocking)
        assert plugin.plugin_id == "group_membership"


class TestGrantRevoke:
    """Tests for grant_license and revoke_license."""

    def test_grant_then_revoke_two_groups(
        self, make_plugin, make_license, membership_store, chess_club, python_course, user
    ):
        plugin = make_plugin(["g1", "g2"])
        license = make_license(["g1", "g2"])

        plugin.grant_license(license)

        assert membership_store.is_member(chess_club, user)
        assert membership_store.is_member(python_course, user)

        plugin.revoke_license(license)

        assert not membership_store.is_member(chess_club, user)
        assert not membership_store.is_member(python_course, user)

    def test_grant_is_idempotent(self, make_plugin, make_license, membership_store):
        plugin = make_plugin(["g1", "g2"])
        license = make_license(["g1", "g2"])

        plugin.grant_license(license)
        after_first = set(membership_store.memberships)
        plugin.grant_license(license)

        assert membership_store.memberships == after_first

    def test_grant_to_existing_member(
        self, make_plugin, make_license, membership_store, chess_club, user
    ):
        membership_store.add_member(chess_club, user)

        make_plugin(["g1"]).grant_license(make_license(["g1"]))

        assert membership_store.memberships == {("g1", user.id)}

    def test_revoke_without_membership_is_noop(
        self, make_plugin, make_license, membership_store
    ):
        plugin = make_plugin(["g1"])

        plugin.revoke_license(make_license(["g1"]))
        plugin.revoke_license(make_license(["g1"]))

        assert membership_store.memberships == set()

    def test_revoke_leaves_other_users(
        self, make_plugin, make_license, membership_store, chess_club, user
    ):
        other = UserRef(id=2, display_name="bob")
        membership_store.add_member(chess_club, other)
        plugin = make_plugin(["g1"])
        license = make_license(["g1"])

        plugin.grant_license(license)
        plugin.revoke_license(license)

        assert membership_store.is_member(chess_club, other)
        assert not membership_store.is_member(chess_club, user)

    def test_unresolvable_group_is_logged_and_skipped(
        self, make_plugin, make_license, membership_store, caplog
    ):
        license = make_license(["g-deleted"])
        before = _failures("grant")

        with caplog.at_level(logging.ERROR, logger=PLUGIN_LOGGER):
            make_plugin(["g-deleted"]).grant_license(license)

        assert membership_store.memberships == set()
        assert _failures("grant") == before + 1
        [record] = [r for r in caplog.records if r.name == PLUGIN_LOGGER]
        assert record.levelno == logging.ERROR
        assert "g-deleted" in record.getMessage()
        assert str(license.id) in record.getMessage()
        assert record.code == "GROUP_RESOLUTION_FAILURE"

    def test_partial_failure_processes_remaining_groups(
        self, make_plugin, make_license, membership_store, python_course, user, caplog
    ):
        plugin = make_plugin(["g-deleted", "g2"])

        with caplog.at_level(logging.ERROR, logger=PLUGIN_LOGGER):
            plugin.grant_license(make_license(["g-deleted", "g2"]))

        assert membership_store.is_member(python_course, user)
        assert any("g-deleted" in r.getMessage() for r in caplog.records)

    def test_revoke_with_deleted_group(
        self, make_plugin, make_license, group_catalog, membership_store, python_course, user
    ):
        plugin = make_plugin(["g1", "g2"])
        license = make_license(["g1", "g2"])
        plugin.grant_license(license)

        group_catalog.delete("g1")
        plugin.revoke_license(license)

        assert not membership_store.is_member(python_course, user)

    def test_group_vanishing_during_grant(
        self, make_plugin, make_license, membership_store, python_course, user, caplog
    ):
        class VanishingStore(type(membership_store)):
            def add_member(self, group, user):
                if group.id == "g1":
                    raise GroupResolutionFailure(group.id)
                return super().add_member(group, user)

        store = VanishingStore(membership_store.catalog)
        plugin = make_plugin(["g1", "g2"])
        plugin.membership_store = store

        with caplog.at_level(logging.ERROR, logger=PLUGIN_LOGGER):
            plugin.grant_license(make_license(["g1", "g2"]))

        assert store.is_member(python_course, user)
        assert store.memberships == {("g2", user.id)}
        assert any("g1" in r.getMessage() for r in caplog.records)

    def test_grant_uses_license_groups_not_configuration(
        self, make_plugin, make_license, membership_store, go_club, user
    ):
        plugin = make_plugin(["g1"])

        plugin.grant_license(make_license(["g3"]))

        assert membership_store.memberships == {("g3", user.id)}


class TestExistingRights:
    """Tests for check_user_has_existing_rights."""

    def test_member_of_configured_group(
        self, make_plugin, membership_store, chess_club, user
    ):
        membership_store.add_member(chess_club, user)

        result = make_plugin(["g1"]).check_user_has_existing_rights(user)

        assert isinstance(result, RightsExist)
        assert result.has_existing_rights
        assert result.user_message == "You are already a member of the Chess Club group."
        assert (
            result.admin_message
            == "User alice is already a member of the Chess Club group."
        )

    def test_member_of_none(self, make_plugin, user):
        result = make_plugin(["g1", "g2"]).check_user_has_existing_rights(user)

        assert result == RightsDoNotExist()
        assert not result.has_existing_rights

    def test_member_of_all_reports_first(
        self, make_plugin, membership_store, chess_club, python_course, user
    ):
        membership_store.add_member(chess_club, user)
        membership_store.add_member(python_course, user)

        result = make_plugin(["g2", "g1"]).check_user_has_existing_rights(user)

        assert isinstance(result, RightsExist)
        assert "Python 101" in result.user_message

    def test_member_of_later_group_only(
        self, make_plugin, membership_store, python_course, user
    ):
        membership_store.add_member(python_course, user)

        result = make_plugin(["g1", "g2"]).check_user_has_existing_rights(user)

        assert isinstance(result, RightsExist)
        assert "Python 101" in result.user_message

    def test_no_resolvable_groups(self, make_plugin, user):
        result = make_plugin(["g-deleted"]).check_user_has_existing_rights(user)

        assert isinstance(result, RightsDoNotExist)

    def test_unconfigured_plugin(self, make_plugin, user):
        assert not make_plugin().check_user_has_existing_rights(user).has_existing_rights

    def test_other_users_membership_ignored(
        self, make_plugin, membership_store, chess_club, user
    ):
        membership_store.add_member(chess_club, UserRef(id=2, display_name="bob"))

        result = make_plugin(["g1"]).check_user_has_existing_rights(user)

        assert isinstance(result, RightsDoNotExist)


class TestBuildLabel:
    """Tests for build_label."""

    def test_multi_label(self, make_plugin, make_license):
        plugin = make_plugin(["g1", "g2"])

        label = plugin.build_label(make_license(["g1", "g2"]))

        assert label == "Group/s membership licensed: Chess Club, Python 101"

    def test_single_label(self, make_plugin, make_license):
        plugin = make_plugin(["g1"], cardinality=Cardinality.SINGLE)

        assert plugin.build_label(make_license(["g1"])) == (
            "Chess Club group membership license"
        )

    def test_label_skips_deleted_groups(self, make_plugin, make_license, caplog):
        plugin = make_plugin(["g1", "g-deleted"])

        with caplog.at_level(logging.ERROR, logger=PLUGIN_LOGGER):
            label = plugin.build_label(make_license(["g-deleted", "g1"]))

        assert label == "Group/s membership licensed: Chess Club"
        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]

    def test_single_label_with_deleted_group(self, make_plugin, make_license):
        plugin = make_plugin(["g-deleted"], cardinality=Cardinality.SINGLE)

        assert plugin.build_label(make_license(["g-deleted"])) == (
            "g-deleted group membership license"
        )

    def test_multi_label_with_only_deleted_groups(self, make_plugin, make_license):
        plugin = make_plugin(["g-deleted"])

        assert plugin.build_label(make_license(["g-deleted", "g-gone"])) == (
            "Group/s membership licensed: g-deleted, g-gone"
        )


class TestFieldDefinitions:
    """Tests for build_field_definitions."""

    def test_multi_field(self, make_plugin):
        fields = make_plugin(["g1"]).build_field_definitions()

        field = fields["license_group"]
        assert field.field_type == "entity_reference"
        assert field.target_type == "group"
        assert field.cardinality == CARDINALITY_UNLIMITED
        assert field.is_multiple
        assert field.required
        assert field.form_display == {"type": "options_select"}

    def test_single_field(self, make_plugin):
        fields = make_plugin(["g1"], cardinality=Cardinality.SINGLE).build_field_definitions()

        field = fields["license_group"]
        assert field.cardinality == 1
        assert not field.is_multiple
        assert field.required


class TestAlterEntityOwnerForm:
    """Tests for alter_entity_owner_form."""

    @pytest.fixture
    def request_with_messages(self):
        request = RequestFactory().get("/admin/groups/groupmembership/1/delete/")
        request._messages = CookieStorage(request)
        return request

    def test_warns_for_granted_membership(
        self, make_plugin, make_license, user, request_with_messages
    ):
        license = make_license(["g1", "g2"])

        altered = make_plugin(["g1", "g2"]).alter_entity_owner_form(
            request_with_messages,
            MEMBERSHIP_DELETE_FORM_ID,
            license,
            GroupMembership(group_id="g2", user_id=user.id),
        )

        assert altered is True
        warnings = [str(m) for m in get_messages(request_with_messages)]
        assert warnings == [
            "This group membership is granted by a license. "
            "It should not be removed manually."
        ]

    def test_other_group_not_warned(
        self, make_plugin, make_license, user, request_with_messages
    ):
        altered = make_plugin(["g1"]).alter_entity_owner_form(
            request_with_messages,
            MEMBERSHIP_DELETE_FORM_ID,
            make_license(["g1"]),
            GroupMembership(group_id="g3", user_id=user.id),
        )

        assert altered is False
        assert list(get_messages(request_with_messages)) == []

    def test_other_forms_untouched(
        self, make_plugin, make_license, user, request_with_messages
    ):
        altered = make_plugin(["g1"]).alter_entity_owner_form(
            request_with_messages,
            "groups_groupmembership_change_form",
            make_license(["g1"]),
            GroupMembership(group_id="g1", user_id=user.id),
        )

        assert altered is False
        assert list(get_messages(request_with_messages)) == []
