from django.db import models

from .base import TimeStampedModel


class Resume(TimeStampedModel):
    """One markdown resume per profile."""

    user = models.OneToOneField(
        "coach.UserProfile",
        on_delete=models.CASCADE,
        related_name="resume",
    )
    content = models.TextField(blank=True, default="")
    ats_score = models.FloatField(null=True, blank=True)
    feedback = models.TextField(null=True, blank=True)

    def __str__(self):
        return f"Resume for {self.user}"
