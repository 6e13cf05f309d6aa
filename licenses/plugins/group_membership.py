"""
Group membership license type.

Grants the license owner membership of one or more groups while the
license is active, and removes it again when the license is revoked.
"""
import logging
import re
from typing import Any, Dict, Iterator, Mapping, Optional, Union

from django import forms
from django.conf import settings
from django.contrib import messages
from django.http import HttpRequest
from django.utils.translation import gettext as _

from core.domain.exceptions import (
    ConfigurationValidationFailure,
    GroupResolutionFailure,
)
from core.domain.value_objects import Cardinality, UserRef
from core.metrics import (
    existing_rights_checks_total,
    group_memberships_granted_total,
    group_memberships_revoked_total,
    group_resolution_failures_total,
)
from groups.domain.group import GroupReference
from groups.domain.membership import GroupMembership
from groups.ports.group_catalog import GroupCatalog
from groups.ports.group_membership_store import GroupMembershipStore
from licenses.domain.configuration import TARGET_GROUPS_KEY, Configuration
from licenses.domain.existing_rights import (
    ExistingRightsResult,
    RightsDoNotExist,
    RightsExist,
)
from licenses.domain.field_definition import CARDINALITY_UNLIMITED, FieldDefinition
from licenses.domain.license import License
from licenses.forms import GroupMembershipConfigurationForm
from licenses.plugins.base import (
    ExistingRightsFromConfigurationChecking,
    GrantedEntityLocking,
    LicenseTypeBase,
)

logger = logging.getLogger(__name__)

MEMBERSHIP_DELETE_FORM_ID = "groups_groupmembership_delete_form"
_MEMBERSHIP_DELETE_FORM = re.compile(r"^groups_groupmembership_(.+_)?delete_form$")


class GroupMembershipLicenseType(
    LicenseTypeBase, ExistingRightsFromConfigurationChecking, GrantedEntityLocking
):
    """
    License type which grants membership of a group.

    One class serves both variants: Cardinality.SINGLE targets exactly
    one group, Cardinality.MULTI any number. Only the configuration form
    control and the label template depend on the cardinality.
    """

    plugin_id = "group_membership"
    label = "Group membership"

    def __init__(
        self,
        group_catalog: GroupCatalog,
        membership_store: GroupMembershipStore,
        configuration: Union[Configuration, Mapping[str, Any], None] = None,
    ):
        """
        Initialize plugin with its collaborators.

        Args:
            group_catalog: Resolves group ids
            membership_store: Mutates and queries memberships
            configuration: Configuration or its stored dictionary form
        """
        self.group_catalog = group_catalog
        self.membership_store = membership_store
        if configuration is not None and not isinstance(configuration, Configuration):
            configuration = Configuration.from_dict(
                configuration, default_cardinality=self.default_cardinality()
            )
        super().__init__(configuration)

    @staticmethod
    def default_cardinality() -> Cardinality:
        return Cardinality(
            getattr(settings, "LICENSE_GROUP_DEFAULT_CARDINALITY", "multi")
        )

    def default_configuration(self) -> Configuration:
        return Configuration(
            target_group_ids=(), cardinality=self.default_cardinality()
        )

    @property
    def cardinality(self) -> Cardinality:
        return self.configuration.cardinality

    def _resolve(
        self, group_ids, operation: str, license: Optional[License] = None
    ) -> Iterator[GroupReference]:
        """
        Resolve group ids, skipping the ones that no longer exist.

        Failures are logged when an operation on a license is running and
        counted either way; they never stop the remaining groups.
        """
        for group_id in group_ids:
            group = self.group_catalog.resolve(group_id)
            if group is None:
                group_resolution_failures_total.labels(operation=operation).inc()
                if license is not None:
                    self._log_resolution_failure(
                        GroupResolutionFailure(group_id, license.id), operation
                    )
                else:
                    logger.debug("Skipping unknown group %s during %s", group_id, operation)
                continue
            yield group

    def _log_resolution_failure(self, exc: GroupResolutionFailure, operation: str) -> None:
        logger.error(
            exc.message,
            extra={
                "code": exc.code,
                "operation": operation,
                "group_id": exc.group_id,
                "license_id": str(exc.license_id),
            },
        )

    def build_label(self, license: License) -> str:
        """
        Build the license label from the currently resolvable groups.

        When none of the groups resolves anymore the stored group ids
        are used instead.

        Args:
            license: License to label

        Returns:
            Translated label
        """
        group_labels = ", ".join(
            group.label
            for group in self._resolve(license.target_groups, operation="label")
        ) or ", ".join(license.target_groups)
        if self.cardinality is Cardinality.SINGLE:
            return _("%(group_label)s group membership license") % {
                "group_label": group_labels,
            }
        return _("Group/s membership licensed: %(group_labels)s") % {
            "group_labels": group_labels,
        }

    def grant_license(self, license: License) -> None:
        """
        Make the license owner a member of every target group.

        Groups that cannot be resolved are logged and skipped.

        Args:
            license: License being activated
        """
        owner = license.owner
        for group in self._resolve(license.target_groups, "grant", license):
            try:
                created = self.membership_store.add_member(group, owner)
            except GroupResolutionFailure as exc:
                group_resolution_failures_total.labels(operation="grant").inc()
                self._log_resolution_failure(
                    GroupResolutionFailure(exc.group_id, license.id), "grant"
                )
                continue
            if created:
                group_memberships_granted_total.labels(license_type=self.plugin_id).inc()
                logger.info(
                    "Granted membership of group %s to user %s for license %s",
                    group.id,
                    owner.id,
                    license.id,
                )
            else:
                logger.debug(
                    "User %s already a member of group %s", owner.id, group.id
                )

    def revoke_license(self, license: License) -> None:
        """
        Remove the license owner from every target group.

        Removing a non-member is a no-op.

        Args:
            license: License being revoked
        """
        owner = license.owner
        for group in self._resolve(license.target_groups, "revoke", license):
            try:
                removed = self.membership_store.remove_member(group, owner)
            except GroupResolutionFailure as exc:
                group_resolution_failures_total.labels(operation="revoke").inc()
                self._log_resolution_failure(
                    GroupResolutionFailure(exc.group_id, license.id), "revoke"
                )
                continue
            if removed:
                group_memberships_revoked_total.labels(license_type=self.plugin_id).inc()
                logger.info(
                    "Revoked membership of group %s from user %s for license %s",
                    group.id,
                    owner.id,
                    license.id,
                )

    def check_user_has_existing_rights(self, user: UserRef) -> ExistingRightsResult:
        """
        Check whether the user already belongs to a configured group.

        Every configured group is checked in order; the first one the
        user belongs to is named in the messages.

        Args:
            user: Prospective purchaser

        Returns:
            RightsExist or RightsDoNotExist
        """
        groups = list(
            self._resolve(self.configuration.target_group_ids, "existing_rights")
        )
        if not groups:
            existing_rights_checks_total.labels(result="no_groups").inc()
            return RightsDoNotExist()

        for group in groups:
            if self.membership_store.is_member(group, user):
                existing_rights_checks_total.labels(result="exist").inc()
                return RightsExist(
                    user_message=_(
                        "You are already a member of the %(group_label)s group."
                    )
                    % {"group_label": group.label},
                    admin_message=_(
                        "User %(user)s is already a member of the %(group_label)s group."
                    )
                    % {"user": user, "group_label": group.label},
                )

        existing_rights_checks_total.labels(result="do_not_exist").inc()
        return RightsDoNotExist()

    def alter_entity_owner_form(
        self,
        request: HttpRequest,
        form_id: str,
        license: License,
        form_entity: GroupMembership,
    ) -> bool:
        """
        Warn when a license-granted membership is about to be removed.

        The warning is advisory; the form can still be submitted.

        Args:
            request: Request rendering the form
            form_id: ID of the form being rendered
            license: Active license of the membership's user
            form_entity: Membership the form is about

        Returns:
            True if the warning was added
        """
        if not _MEMBERSHIP_DELETE_FORM.match(form_id):
            return False
        if str(form_entity.group_id) not in license.target_groups:
            return False
        messages.warning(
            request,
            _(
                "This group membership is granted by a license. "
                "It should not be removed manually."
            ),
        )
        return True

    def build_configuration_form(
        self, data: Optional[Dict[str, Any]] = None
    ) -> GroupMembershipConfigurationForm:
        """
        Build the form selecting the target group(s).

        Args:
            data: Submitted values, None for an unbound form

        Returns:
            Configuration form
        """
        return GroupMembershipConfigurationForm(
            data=data,
            groups=self.group_catalog.list(),
            configuration=self.configuration,
            select_size=getattr(settings, "LICENSE_GROUP_SELECT_SIZE", 15),
        )

    def submit_configuration_form(self, form: forms.Form) -> Configuration:
        """
        Store the selection of a submitted configuration form.

        Args:
            form: Bound configuration form

        Returns:
            New configuration

        Raises:
            ConfigurationValidationFailure: If the selection is missing or
                exceeds the cardinality
        """
        if not form.is_valid():
            raise ConfigurationValidationFailure(
                "Invalid group selection",
                errors={
                    name: [str(error) for error in errors]
                    for name, errors in form.errors.items()
                },
            )
        self.validate_configuration_form(form)
        self.configuration = Configuration.from_selection(
            form.cleaned_data[TARGET_GROUPS_KEY], self.cardinality
        )
        return self.configuration

    def build_field_definitions(self) -> Dict[str, FieldDefinition]:
        fields = super().build_field_definitions()
        single = self.cardinality is Cardinality.SINGLE

        fields[TARGET_GROUPS_KEY] = FieldDefinition(
            name=TARGET_GROUPS_KEY,
            field_type="entity_reference",
            label=_("Group") if single else _("Group/s"),
            description=(
                _("The group this product grants membership of.")
                if single
                else _("The group/s this product grants membership of.")
            ),
            cardinality=1 if single else CARDINALITY_UNLIMITED,
            required=True,
            settings={"target_type": "group"},
            form_display={"type": "options_buttons" if single else "options_select"},
            view_display={
                "label": "inline",
                "type": "entity_reference_label",
                "weight": 1,
                "settings": {"link": True},
            },
        )
        return fields

