from django.conf import settings
from django.shortcuts import render

from coach.services.profile_service import get_onboarding_status
from coach.services.session import caller_from_request
from coach.services.view_cache import cache_rendered_view


@cache_rendered_view()
def home(request):
    """Landing page; cached per caller until a profile update invalidates "/"."""
    caller = caller_from_request(request)
    status = get_onboarding_status(caller)
    return render(request, "coach/home.html", {
        "signed_in": caller.is_authenticated,
        "is_onboarded": status["is_onboarded"],
        "sign_in_url": settings.CLERK_SIGN_IN_URL,
    })
