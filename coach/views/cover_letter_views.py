import logging

from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods, require_POST

from coach.forms.cover_letter_form import CoverLetterForm
from coach.services import cover_letter_service
from coach.services.errors import AIServiceError, NotFoundError, UnauthorizedError
from coach.services.session import caller_from_request
from ._helpers import sign_in_redirect

logger = logging.getLogger("coach")


def cover_letter_list(request):
    caller = caller_from_request(request)
    try:
        letters = cover_letter_service.list_cover_letters(caller)
    except UnauthorizedError:
        return sign_in_redirect(request)
    except NotFoundError:
        return redirect("coach:onboarding")
    return render(request, "coach/cover_letter_list.html", {"letters": letters})


@require_http_methods(["GET", "POST"])
def cover_letter_new(request):
    caller = caller_from_request(request)
    if not caller.is_authenticated:
        return sign_in_redirect(request)

    form = CoverLetterForm(request.POST or None)
    if request.method == "POST" and form.is_valid():
        try:
            letter = cover_letter_service.generate_cover_letter(caller, **form.cleaned_data)
            messages.success(request, "Cover letter generated successfully!")
            return redirect("coach:cover_letter_detail", pk=letter.pk)
        except NotFoundError:
            return redirect("coach:onboarding")
        except AIServiceError as e:
            logger.error("Cover letter generation failed for %s: %s", caller.external_id, e)
            form.add_error(None, "Failed to generate cover letter")

    return render(request, "coach/cover_letter_new.html", {"form": form})


def cover_letter_detail(request, pk):
    caller = caller_from_request(request)
    try:
        letter = cover_letter_service.get_cover_letter(caller, pk)
    except UnauthorizedError:
        return sign_in_redirect(request)
    except NotFoundError:
        raise Http404("Cover letter not found")
    if letter is None:
        raise Http404("Cover letter not found")
    return render(request, "coach/cover_letter_detail.html", {"letter": letter})


@require_POST
def cover_letter_delete(request, pk):
    caller = caller_from_request(request)
    try:
        deleted = cover_letter_service.delete_cover_letter(caller, pk)
    except UnauthorizedError:
        return sign_in_redirect(request)
    except NotFoundError:
        raise Http404("Cover letter not found")
    if not deleted:
        raise Http404("Cover letter not found")
    messages.success(request, "Cover letter deleted successfully!")
    return redirect("coach:cover_letters")
