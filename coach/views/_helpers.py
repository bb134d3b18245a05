from urllib.parse import urlencode

from django.conf import settings
from django.http import JsonResponse
from django.shortcuts import redirect


def sign_in_redirect(request):
    query = urlencode({"redirect_url": request.get_full_path()})
    return redirect(f"{settings.CLERK_SIGN_IN_URL}?{query}")


def json_error(msg: str, *, status: int = 400) -> JsonResponse:
    return JsonResponse({"ok": False, "error": msg}, status=status)
