from django.contrib import admin
from django.utils.html import format_html

from .models import CoverLetter, IndustryInsight, Resume, UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ("email", "name", "industry", "experience", "onboarding_status", "created_at")
    readonly_fields = ("external_id", "created_at", "updated_at")
    search_fields = ("email", "name", "external_id", "industry")
    list_filter = ("industry",)
    ordering = ("-created_at",)

    def onboarding_status(self, obj):
        if obj.is_onboarded:
            return format_html('<span style="color: #16a34a;">Onboarded</span>')
        return format_html('<span style="color: #f59e0b;">Pending</span>')
    onboarding_status.short_description = "Status"


@admin.register(IndustryInsight)
class IndustryInsightAdmin(admin.ModelAdmin):
    list_display = ("industry", "demand_level", "market_outlook", "growth_rate", "last_updated", "next_update", "stale")
    list_filter = ("demand_level", "market_outlook")
    search_fields = ("industry",)
    readonly_fields = ("last_updated",)

    def stale(self, obj):
        return obj.is_stale
    stale.boolean = True
    stale.short_description = "Refresh due"


@admin.register(Resume)
class ResumeAdmin(admin.ModelAdmin):
    list_display = ("user", "ats_score", "updated_at")
    list_select_related = ("user",)
    search_fields = ("user__email", "user__name")


@admin.register(CoverLetter)
class CoverLetterAdmin(admin.ModelAdmin):
    list_display = ("job_title", "company_name", "user", "status", "created_at")
    list_filter = ("status",)
    list_select_related = ("user",)
    search_fields = ("job_title", "company_name", "user__email")
