"""
coach.services.session

The caller identity is passed explicitly to every service entry point.
IdentitySessionMiddleware builds one per request as `request.caller`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CallerSession:
    external_id: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.external_id)

    @classmethod
    def anonymous(cls) -> "CallerSession":
        return cls(external_id=None)


def caller_from_request(request) -> CallerSession:
    caller = getattr(request, "caller", None)
    return caller if isinstance(caller, CallerSession) else CallerSession.anonymous()
