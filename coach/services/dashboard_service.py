"""
coach.services.dashboard_service
"""
import logging
from typing import Optional

from coach.models import IndustryInsight
from .conflicts import reuse_on_conflict
from .errors import NotFoundError
from .insight_service import InsightGenerator, get_or_create_insight
from .profile_service import require_profile
from .session import CallerSession

logger = logging.getLogger("coach")


def get_industry_insights(caller: CallerSession, generator: Optional[InsightGenerator] = None) -> IndustryInsight:
    """Insight for the caller's industry; generated on first view if the cache row is missing."""
    profile = require_profile(caller)
    if not profile.industry:
        raise NotFoundError("User has not completed onboarding")

    return reuse_on_conflict(
        lambda: get_or_create_insight(profile.industry, generator=generator),
        lambda: IndustryInsight.objects.filter(industry=profile.industry).first(),
    )
