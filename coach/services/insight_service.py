"""
coach.services.insight_service

Industry insights are a shared cache keyed by industry label. A missing label
is generated once through the AI collaborator and stamped with next_update =
now + 7 days.

The read path returns whatever is stored, fresh or not. Regeneration of stale
rows is the job of `manage.py refresh_industry_insights`.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from django.db import IntegrityError, transaction
from django.utils import timezone

from coach.models import IndustryInsight
from coach.serializers.insight import InsightPayloadSerializer
from . import openai_client
from .errors import ConflictError, InsightGenerationError

logger = logging.getLogger("coach")

InsightGenerator = Callable[[str], Dict[str, Any]]


def _generate(industry: str, generator: Optional[InsightGenerator]) -> Dict[str, Any]:
    """Call the generator and validate its payload; nothing is written here."""
    generate = generator or openai_client.generate_industry_insights
    try:
        payload = generate(industry)
    except Exception as e:
        raise InsightGenerationError(f"Insight generation failed for {industry!r}: {e}") from e

    if not isinstance(payload, dict):
        raise InsightGenerationError(f"Insight generator returned {type(payload).__name__}, expected dict")

    serializer = InsightPayloadSerializer(data=payload)
    if not serializer.is_valid():
        raise InsightGenerationError(f"Invalid insight payload for {industry!r}: {serializer.errors}")
    return dict(serializer.validated_data)


def get_or_create_insight(industry: str, generator: Optional[InsightGenerator] = None) -> IndustryInsight:
    if not industry:
        raise InsightGenerationError("Industry label is required")

    insight = IndustryInsight.objects.filter(industry=industry).first()
    if insight:
        return insight

    logger.info("Generating AI insights for %s...", industry)
    fields = _generate(industry, generator)

    try:
        with transaction.atomic():
            insight = IndustryInsight.objects.create(
                industry=industry,
                next_update=IndustryInsight.next_update_from(),
                **fields,
            )
    except IntegrityError as e:
        raise ConflictError(f"Insight for {industry!r} already exists") from e

    logger.info("New industry insight created id=%s industry=%s demand=%s",
                insight.pk, insight.industry, insight.demand_level)
    return insight


def refresh_insight(insight: IndustryInsight, generator: Optional[InsightGenerator] = None) -> IndustryInsight:
    """Regenerate an existing row in place and re-stamp next_update."""
    fields = _generate(insight.industry, generator)
    for name, value in fields.items():
        setattr(insight, name, value)
    insight.next_update = IndustryInsight.next_update_from()
    insight.save()
    logger.info("Industry insight refreshed industry=%s next_update=%s", insight.industry, insight.next_update)
    return insight


def stale_insights(now=None):
    return IndustryInsight.objects.filter(next_update__lte=now or timezone.now())
