import logging

from django.contrib import messages
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from coach.data.industries import INDUSTRIES
from coach.forms.onboarding_form import OnboardingForm
from coach.services.errors import ProfileUpdateError
from coach.services.profile_service import get_onboarding_status, update_profile
from coach.services.session import caller_from_request
from ._helpers import sign_in_redirect

logger = logging.getLogger("coach")


@require_http_methods(["GET", "POST"])
def onboarding(request):
    """
    GET  -> onboarding form (already-onboarded callers go to the dashboard)
    POST -> update_profile, then dashboard
    """
    caller = caller_from_request(request)
    if not caller.is_authenticated:
        return sign_in_redirect(request)

    if request.method == "GET":
        if get_onboarding_status(caller)["is_onboarded"]:
            return redirect("coach:dashboard")
        form = OnboardingForm()
    else:
        form = OnboardingForm(request.POST)
        if form.is_valid():
            try:
                update_profile(caller, form.profile_fields())
                messages.success(request, "Profile completed successfully!")
                return redirect("coach:dashboard")
            except ProfileUpdateError as e:
                form.add_error(None, str(e))

    return render(request, "coach/onboarding.html", {"form": form, "industries": INDUSTRIES})
