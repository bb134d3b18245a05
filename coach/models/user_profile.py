from django.db import models

from .base import TimeStampedModel


class UserProfile(TimeStampedModel):
    """
    Local copy of an identity-provider user plus the onboarding answers.
    `external_id` is the provider's user id; it never changes once stored.
    """

    external_id = models.CharField(max_length=255, unique=True)
    email = models.EmailField(max_length=255)
    name = models.CharField(max_length=255, blank=True, default="")
    image_url = models.URLField(max_length=1024, blank=True, default="")

    # Onboarding fields (the only ones the update workflow touches)
    industry = models.CharField(max_length=255, null=True, blank=True, db_index=True)
    experience = models.PositiveIntegerField(null=True, blank=True)
    bio = models.TextField(null=True, blank=True)
    skills = models.JSONField(default=list, blank=True, help_text="List of skill labels")

    ONBOARDING_FIELDS = ("industry", "experience", "bio", "skills")

    class Meta:
        ordering = ["-created_at"]

    @property
    def is_onboarded(self) -> bool:
        return bool(self.industry)

    def __str__(self):
        return f"{self.name or 'Unnamed User'} ({self.email})"
