import logging

from django.contrib import messages
from django.http import JsonResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods, require_POST

from coach.forms.resume_form import ImproveSectionForm, ResumeForm
from coach.services.errors import AIServiceError, NotFoundError, UnauthorizedError
from coach.services.resume_service import get_resume, improve_with_ai, save_resume
from coach.services.session import caller_from_request
from ._helpers import json_error, sign_in_redirect

logger = logging.getLogger("coach")


@require_http_methods(["GET", "POST"])
def resume(request):
    caller = caller_from_request(request)
    try:
        if request.method == "POST":
            form = ResumeForm(request.POST)
            if form.is_valid():
                save_resume(caller, form.cleaned_data["content"])
                messages.success(request, "Resume saved successfully!")
                return redirect("coach:resume")
        else:
            current = get_resume(caller)
            form = ResumeForm(initial={"content": current.content if current else ""})
    except UnauthorizedError:
        return sign_in_redirect(request)
    except NotFoundError:
        return redirect("coach:onboarding")

    return render(request, "coach/resume.html", {"form": form})


@require_POST
def improve_section(request):
    caller = caller_from_request(request)
    form = ImproveSectionForm(request.POST)
    if not form.is_valid():
        return json_error("Invalid section content.")
    try:
        improved = improve_with_ai(caller, form.cleaned_data["current"], form.cleaned_data["section_type"])
    except UnauthorizedError:
        return json_error("Unauthorized", status=401)
    except NotFoundError as e:
        return json_error(str(e), status=404)
    except AIServiceError:
        return json_error("Failed to improve content", status=502)
    return JsonResponse({"ok": True, "improved": improved})
