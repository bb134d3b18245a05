"""
coach.services.resume_service

One markdown resume per profile, plus AI rewriting of a single section.
"""
from __future__ import annotations

import logging
from typing import Optional

from coach.models import Resume
from .openai_client import complete_text
from .profile_service import require_profile
from .session import CallerSession

logger = logging.getLogger("coach")

IMPROVE_PROMPT = """
As an expert resume writer, improve the following {section_type} description for a {industry} professional.
Make it more impactful, quantifiable, and aligned with industry standards.
Current content: "{current}"

Requirements:
1. Use action verbs
2. Include metrics and results where possible
3. Highlight relevant technical skills
4. Keep it concise but detailed
5. Focus on achievements over responsibilities
6. Use industry-specific keywords

Format the response as a single paragraph without any additional text or explanations.
""".strip()


def get_resume(caller: CallerSession) -> Optional[Resume]:
    profile = require_profile(caller)
    return Resume.objects.filter(user=profile).first()


def save_resume(caller: CallerSession, content: str) -> Resume:
    profile = require_profile(caller)
    resume, created = Resume.objects.update_or_create(
        user=profile,
        defaults={"content": content or ""},
    )
    logger.info("Resume %s for profile %s", "created" if created else "updated", profile.pk)
    return resume


def improve_with_ai(caller: CallerSession, current: str, section_type: str) -> str:
    """Rewrite one resume section for the caller's industry. Raises AIServiceError on failure."""
    profile = require_profile(caller)
    prompt = IMPROVE_PROMPT.format(
        section_type=section_type or "experience",
        industry=profile.industry or "general",
        current=(current or "").strip(),
    )
    return complete_text(prompt, system="You are an expert resume writer.")
