import logging

from django.contrib import admin, messages
from django.contrib.admin.views.decorators import staff_member_required
from django.contrib.auth.decorators import permission_required
from django.urls import reverse
from django.utils.decorators import method_decorator
from django.utils.translation import gettext_lazy as _
from django.views.decorators.cache import never_cache
from django.views.generic.edit import FormView

from helper.permission import MANAGE_POLICIES_PERMISSION

from ..catalog import default_catalog
from ..forms import FeaturePoliciesForm
from ..option import PoliciesOption

logger = logging.getLogger(__name__)

LEARN_MORE_URL = "https://developers.google.com/web/updates/2018/06/feature-policy"


@method_decorator(never_cache, name="dispatch")
@method_decorator(staff_member_required, name="dispatch")
@method_decorator(
    permission_required(MANAGE_POLICIES_PERMISSION, raise_exception=True),
    name="dispatch",
)
class FeaturePoliciesScreenView(FormView):
    """
    Admin screen listing every feature policy with an origin selector.

    Submitting the form replaces the stored overrides with one entry per
    feature.
    """

    template_name = "policies/screen.html"
    form_class = FeaturePoliciesForm
    title = _("Feature Policies")

    def get_catalog(self):
        return default_catalog()

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["catalog"] = self.get_catalog()
        kwargs["option"] = PoliciesOption().get_option()
        return kwargs

    def form_valid(self, form):
        PoliciesOption().update_option(form.to_option())
        logger.info(f"Feature policies saved from admin screen by {self.request.user}")
        messages.success(self.request, _("Settings saved."))
        return super().form_valid(form)

    def get_success_url(self):
        return reverse("feature-policies-screen")

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update(admin.site.each_context(self.request))
        context.update({
            "title": self.title,
            "learn_more_url": LEARN_MORE_URL,
        })
        return context
