from django.urls import path

from coach.views.api_views import IndustryInsightView, OnboardingStatusView
from coach.views.cover_letter_views import (
    cover_letter_delete,
    cover_letter_detail,
    cover_letter_list,
    cover_letter_new,
)
from coach.views.dashboard_views import dashboard
from coach.views.home_views import home
from coach.views.onboarding_views import onboarding
from coach.views.resume_views import improve_section, resume

app_name = "coach"

urlpatterns = [
    path("", home, name="home"),
    path("onboarding/", onboarding, name="onboarding"),
    path("dashboard/", dashboard, name="dashboard"),

    path("resume/", resume, name="resume"),
    path("resume/improve/", improve_section, name="resume_improve"),

    path("ai-cover-letter/", cover_letter_list, name="cover_letters"),
    path("ai-cover-letter/new/", cover_letter_new, name="cover_letter_new"),
    path("ai-cover-letter/<int:pk>/", cover_letter_detail, name="cover_letter_detail"),
    path("ai-cover-letter/<int:pk>/delete/", cover_letter_delete, name="cover_letter_delete"),

    # JSON API
    path("api/onboarding-status/", OnboardingStatusView.as_view(), name="api_onboarding_status"),
    path("api/insights/", IndustryInsightView.as_view(), name="api_insights"),
]
