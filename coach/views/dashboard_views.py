import logging

from django.shortcuts import redirect, render

from coach.services.dashboard_service import get_industry_insights
from coach.services.errors import CoachError
from coach.services.profile_service import get_onboarding_status
from coach.services.session import caller_from_request
from ._helpers import sign_in_redirect

logger = logging.getLogger("coach")


def dashboard(request):
    caller = caller_from_request(request)
    if not caller.is_authenticated:
        return sign_in_redirect(request)

    if not get_onboarding_status(caller)["is_onboarded"]:
        return redirect("coach:onboarding")

    try:
        insight = get_industry_insights(caller)
    except CoachError as e:
        logger.error("Dashboard insights unavailable for %s: %s", caller.external_id, e)
        return render(request, "coach/dashboard.html", {"insight": None, "error": "Insights are unavailable right now."})

    return render(request, "coach/dashboard.html", {"insight": insight, "error": None})
