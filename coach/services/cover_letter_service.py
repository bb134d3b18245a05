"""
coach.services.cover_letter_service
"""
from __future__ import annotations

import logging
from typing import List, Optional

from coach.models import CoverLetter
from .openai_client import complete_text
from .profile_service import require_profile
from .session import CallerSession

logger = logging.getLogger("coach")

COVER_LETTER_PROMPT = """
Write a professional cover letter for a {job_title} position at {company_name}.

About the candidate:
- Industry: {industry}
- Years of Experience: {experience}
- Skills: {skills}
- Professional Background: {bio}

Job Description:
{job_description}

Requirements:
1. Use a professional, enthusiastic tone
2. Highlight relevant skills and experience
3. Show understanding of the company's needs
4. Keep it concise (max 400 words)
5. Use proper business letter formatting in markdown
6. Include specific examples of achievements
7. Relate candidate's background to job requirements

Format the letter in markdown.
""".strip()


def generate_cover_letter(
    caller: CallerSession,
    job_title: str,
    company_name: str,
    job_description: str = "",
) -> CoverLetter:
    """Generate and persist a completed cover letter. AIServiceError propagates; nothing is stored then."""
    profile = require_profile(caller)
    prompt = COVER_LETTER_PROMPT.format(
        job_title=job_title,
        company_name=company_name,
        industry=profile.industry or "not specified",
        experience=profile.experience if profile.experience is not None else "not specified",
        skills=", ".join(profile.skills or []) or "not specified",
        bio=profile.bio or "not specified",
        job_description=job_description or "not provided",
    )
    content = complete_text(prompt, system="You are an expert career coach.")

    letter = CoverLetter.objects.create(
        user=profile,
        content=content,
        job_description=job_description or "",
        company_name=company_name,
        job_title=job_title,
        status="completed",
    )
    logger.info("Cover letter %s generated for profile %s (%s at %s)",
                letter.pk, profile.pk, job_title, company_name)
    return letter


def list_cover_letters(caller: CallerSession) -> List[CoverLetter]:
    profile = require_profile(caller)
    return list(CoverLetter.objects.filter(user=profile))


def get_cover_letter(caller: CallerSession, pk) -> Optional[CoverLetter]:
    """None when the letter does not exist or belongs to someone else."""
    profile = require_profile(caller)
    return CoverLetter.objects.filter(user=profile, pk=pk).first()


def delete_cover_letter(caller: CallerSession, pk) -> bool:
    profile = require_profile(caller)
    deleted, _ = CoverLetter.objects.filter(user=profile, pk=pk).delete()
    return deleted > 0
