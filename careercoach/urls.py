# /careercoach/careercoach/urls.py
"""
CHANGE LOG
----------
2026-10-12
- ADD: /api/onboarding-status/ JSON probe for the header widget.
2026-09-28
- Map the coach app at the root so "/" is the cached home view.
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include


def health_view(request):
    """Liveness probe."""
    return JsonResponse({"ok": True})


urlpatterns = [
    path("health/", health_view, name="health"),

    # Admin
    path("admin/", admin.site.urls),

    # Career Coach (home, onboarding, dashboard, resume, cover letters, api)
    path("", include("coach.urls", namespace="coach")),
]
