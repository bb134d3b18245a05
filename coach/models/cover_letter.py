from django.db import models

from .base import TimeStampedModel


class CoverLetter(TimeStampedModel):
    STATUS_CHOICES = [
        ("draft", "Draft"),
        ("completed", "Completed"),
    ]

    user = models.ForeignKey(
        "coach.UserProfile",
        on_delete=models.CASCADE,
        related_name="cover_letters",
    )
    content = models.TextField()
    job_description = models.TextField(blank=True, default="")
    company_name = models.CharField(max_length=255)
    job_title = models.CharField(max_length=255)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="draft", db_index=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "created_at"], name="coach_cover_user_created_idx"),
        ]

    def __str__(self):
        return f"{self.job_title} at {self.company_name}"
