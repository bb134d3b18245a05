"""
coach.models.industry_insight

Shared, industry-keyed cache of AI market analytics. One row per label;
rows are never owned by a single user.
"""
from datetime import timedelta

from django.db import models
from django.utils import timezone

NEXT_UPDATE_INTERVAL = timedelta(days=7)


class DemandLevel(models.TextChoices):
    HIGH = "HIGH", "High"
    MEDIUM = "MEDIUM", "Medium"
    LOW = "LOW", "Low"


class MarketOutlook(models.TextChoices):
    POSITIVE = "POSITIVE", "Positive"
    NEUTRAL = "NEUTRAL", "Neutral"
    NEGATIVE = "NEGATIVE", "Negative"


class IndustryInsight(models.Model):
    industry = models.CharField(max_length=255, unique=True)

    salary_ranges = models.JSONField(
        default=list,
        blank=True,
        help_text="List of {role, min, max, median, location}",
    )
    growth_rate = models.FloatField(default=0.0)
    demand_level = models.CharField(max_length=10, choices=DemandLevel.choices)
    top_skills = models.JSONField(default=list, blank=True)
    market_outlook = models.CharField(
        max_length=10, choices=MarketOutlook.choices, default=MarketOutlook.NEUTRAL
    )
    key_trends = models.JSONField(default=list, blank=True)
    recommended_skills = models.JSONField(default=list, blank=True)

    last_updated = models.DateTimeField(auto_now=True)
    next_update = models.DateTimeField(db_index=True)

    class Meta:
        ordering = ("industry",)

    @staticmethod
    def next_update_from(now=None):
        return (now or timezone.now()) + NEXT_UPDATE_INTERVAL

    @property
    def is_stale(self) -> bool:
        return timezone.now() >= self.next_update

    def __str__(self) -> str:
        return f"{self.industry} ({self.demand_level})"
