"""
Configuration forms for license type plugins.
"""
from itertools import groupby
from typing import List, Sequence, Tuple

from django import forms
from django.utils.translation import gettext_lazy as _

from core.domain.value_objects import Cardinality
from groups.domain.group import GroupReference
from licenses.domain.configuration import TARGET_GROUPS_KEY, Configuration


def grouped_group_choices(
    groups: Sequence[GroupReference],
) -> List[Tuple[str, List[Tuple[str, str]]]]:
    """
    Build select options grouped by group type label.

    Args:
        groups: Groups ordered by type label

    Returns:
        Django grouped choices
    """
    return [
        (type_label, [(group.id, group.label) for group in members])
        for type_label, members in groupby(groups, key=lambda g: g.type_label)
    ]


class GroupMembershipConfigurationForm(forms.Form):
    """
    Selects the group(s) a group membership license type grants.

    Single cardinality renders an exclusive choice, multi cardinality a
    multi-select grouped by group type.
    """

    def __init__(
        self,
        *args,
        groups: Sequence[GroupReference] = (),
        configuration: Configuration,
        select_size: int = 15,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.cardinality = configuration.cardinality
        selected = list(configuration.target_group_ids)

        if self.cardinality is Cardinality.SINGLE:
            field = forms.ChoiceField(
                label=_("Select the group membership that will be purchased"),
                choices=[(group.id, group.label) for group in groups],
                widget=forms.RadioSelect,
                initial=selected[0] if selected else None,
                required=True,
            )
        else:
            field = forms.MultipleChoiceField(
                label=_("Select the group/s membership that will be purchased"),
                choices=grouped_group_choices(groups),
                widget=forms.SelectMultiple(attrs={"size": select_size}),
                initial=selected,
                required=True,
            )
        self.fields[TARGET_GROUPS_KEY] = field

    def clean_license_group(self):
        """Reject more than one submitted group in single cardinality."""
        value = self.cleaned_data[TARGET_GROUPS_KEY]
        if self.cardinality is Cardinality.SINGLE and hasattr(self.data, "getlist"):
            # RadioSelect only reads the last value of a multi-value POST.
            submitted = set(self.data.getlist(self.add_prefix(TARGET_GROUPS_KEY)))
            if len(submitted) > 1:
                raise forms.ValidationError(
                    _("Select only one group."), code="max_selections"
                )
        return value
