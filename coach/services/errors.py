"""
coach.services.errors
Domain exceptions raised by the service layer. Views translate them.
"""


class CoachError(Exception):
    """Base class for every Career Coach service error."""


class UnauthorizedError(CoachError):
    """No authenticated caller session."""


class IdentityLookupError(CoachError):
    """Identity provider unreachable or returned unusable data."""


class InsightGenerationError(CoachError):
    """Insight generator failed or returned an invalid payload."""


class ConflictError(CoachError):
    """A create lost a uniqueness race. Re-read and use the existing row."""


class ProfileUpdateError(CoachError):
    """Catch-all for the profile update workflow."""


class NotFoundError(CoachError):
    """An owned record (profile, cover letter) does not exist."""


class AIServiceError(CoachError):
    """OpenAI unavailable, misconfigured, or returned garbage."""
