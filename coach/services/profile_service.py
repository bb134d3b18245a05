# CHANGE LOG
# Oct 19, 2026 — Hook import errors fall back to logging_hook; hook exceptions are logged, never fatal.
# Oct 05, 2026 — Single update workflow:
# - Replaces the verbose and quiet copies of the update action.
# - Step events go to a hook (COACH_PROFILE_UPDATE_HOOK) instead of inline prints.
# - Caller identity is an explicit CallerSession argument.

"""
coach.services.profile_service

Profile update workflow and onboarding-status query.

update_profile runs four sequential steps that are NOT wrapped in a single
transaction:

    1. resolve/create the profile      (identity_service)
    2. resolve/create the insight      (insight_service)
    3. write industry/experience/bio/skills
    4. invalidate the cached home view

Steps 1 and 2 are idempotent lookups-or-creates, so a failure in step 3 leaves
nothing that a retry would duplicate.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from django.conf import settings
from django.utils.module_loading import import_string

from coach.models import IndustryInsight, UserProfile
from .conflicts import reuse_on_conflict
from .errors import NotFoundError, ProfileUpdateError, UnauthorizedError
from .identity_service import ensure_profile_exists
from .insight_service import InsightGenerator, get_or_create_insight
from .session import CallerSession
from .view_cache import invalidate_path

logger = logging.getLogger("coach")

UpdateHook = Callable[..., None]

HOME_PATH = "/"


def logging_hook(event: str, **details: Any) -> None:
    """Default hook: one INFO line per step; full details when verbose logging is on."""
    if getattr(settings, "COACH_VERBOSE_UPDATE_LOGGING", False):
        logger.info("[profile_update] %s %s", event, details)
    else:
        logger.info("[profile_update] %s external_id=%s", event, details.get("external_id"))


def get_update_hook() -> UpdateHook:
    """Configured hook, or logging_hook when unset or not importable."""
    dotted = getattr(settings, "COACH_PROFILE_UPDATE_HOOK", "")
    if not dotted:
        return logging_hook
    try:
        return import_string(dotted)
    except ImportError as e:
        logger.error("COACH_PROFILE_UPDATE_HOOK=%r could not be imported (%s); using logging_hook", dotted, e)
        return logging_hook


def _guarded(hook: UpdateHook) -> UpdateHook:
    """Hook failures are logged and never change the workflow outcome."""
    def emit(event: str, **details: Any) -> None:
        try:
            hook(event, **details)
        except Exception:
            logger.exception("[profile_update] hook failed on %s external_id=%s", event, details.get("external_id"))
    return emit



def _clean_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
    industry = (fields.get("industry") or "").strip()
    if not industry:
        raise ValueError("industry is required")

    experience = fields.get("experience")
    if experience is not None:
        experience = int(experience)
        if experience < 0:
            raise ValueError("experience must be >= 0")

    skills = fields.get("skills") or []
    if isinstance(skills, str):
        skills = [s.strip() for s in skills.split(",")]
    skills = [str(s).strip() for s in skills if str(s).strip()]

    return {
        "industry": industry,
        "experience": experience,
        "bio": fields.get("bio"),
        "skills": skills,
    }


def update_profile(
    caller: CallerSession,
    fields: Mapping[str, Any],
    hook: Optional[UpdateHook] = None,
    generator: Optional[InsightGenerator] = None,
) -> UserProfile:
    """
    Apply onboarding fields to the caller's profile.

    Raises UnauthorizedError (no writes) for an anonymous caller; every other
    failure is logged and re-raised as ProfileUpdateError.
    """
    if caller is None or not caller.is_authenticated:
        raise UnauthorizedError("Unauthorized")

    emit = _guarded(hook or get_update_hook())
    external_id = caller.external_id

    try:
        data = _clean_fields(fields)

        profile = reuse_on_conflict(
            lambda: ensure_profile_exists(external_id),
            lambda: UserProfile.objects.filter(external_id=external_id).first(),
        )
        emit("profile_resolved", external_id=external_id, profile_id=profile.pk)

        insight = reuse_on_conflict(
            lambda: get_or_create_insight(data["industry"], generator=generator),
            lambda: IndustryInsight.objects.filter(industry=data["industry"]).first(),
        )
        emit("insight_resolved", external_id=external_id, industry=insight.industry, insight_id=insight.pk)

        for name, value in data.items():
            setattr(profile, name, value)
        profile.save(update_fields=[*UserProfile.ONBOARDING_FIELDS, "updated_at"])
        emit("profile_updated", external_id=external_id, profile_id=profile.pk, **data)

        invalidate_path(HOME_PATH)
        emit("view_invalidated", external_id=external_id, path=HOME_PATH)

        return profile
    except Exception as e:
        logger.exception("Error updating profile for external id %s: %s", external_id, e)
        raise ProfileUpdateError("Failed to update profile") from e


def get_onboarding_status(caller: Optional[CallerSession]) -> Dict[str, bool]:
    """Never raises: any failure degrades to not onboarded."""
    if caller is None or not caller.is_authenticated:
        return {"is_onboarded": False}

    try:
        industry = (
            UserProfile.objects
            .filter(external_id=caller.external_id)
            .values_list("industry", flat=True)
            .first()
        )
        return {"is_onboarded": bool(industry)}
    except Exception as e:
        logger.error("Error checking onboarding status for %s: %s", caller.external_id, e)
        return {"is_onboarded": False}


def require_profile(caller: Optional[CallerSession]) -> UserProfile:
    """Stored profile for an authenticated caller, or UnauthorizedError / NotFoundError."""
    if caller is None or not caller.is_authenticated:
        raise UnauthorizedError("Unauthorized")
    profile = UserProfile.objects.filter(external_id=caller.external_id).first()
    if profile is None:
        raise NotFoundError("User not found")
    return profile
