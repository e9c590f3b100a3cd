from django import forms
from django.utils.translation import gettext as _

from .catalog import Origin
from .headers import resolve_origin


class FeaturePoliciesForm(forms.Form):
    """One origin selector per catalog feature, in catalog order."""

    def __init__(self, catalog, option, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.catalog = catalog
        for feature in catalog.get_all():
            self.fields[feature.name] = forms.ChoiceField(
                label=feature.title,
                choices=self.origin_choices(feature),
                initial=resolve_origin(feature, option).value,
            )

    @staticmethod
    def origin_choices(feature):
        choices = []
        for origin in Origin:
            label = str(origin.label)
            if origin == feature.default_origin:
                label = f"{label} {_('(default)')}"
            choices.append((origin.value, label))
        return choices

    def to_option(self):
        """Settings snapshot for the submitted selections."""
        return {
            feature.name: [self.cleaned_data[feature.name]]
            for feature in self.catalog.get_all()
        }
