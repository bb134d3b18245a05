"""
Django imports this package as `coach.models`.
"""
from .base import TimeStampedModel  # abstract
from .user_profile import UserProfile
from .industry_insight import IndustryInsight, DemandLevel, MarketOutlook, NEXT_UPDATE_INTERVAL
from .resume import Resume
from .cover_letter import CoverLetter

__all__ = [
    # Abstracts
    "TimeStampedModel",
    # Concrete
    "UserProfile",
    "IndustryInsight",
    "Resume",
    "CoverLetter",
    # Enums / constants
    "DemandLevel",
    "MarketOutlook",
    "NEXT_UPDATE_INTERVAL",
]
