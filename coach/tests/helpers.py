"""Shared fakes for the coach test-suite (no network, no OpenAI)."""
from __future__ import annotations

from typing import Any, Dict, Optional


class FakeHTTPResponse:
    """Just enough of requests.Response for identity_service."""

    def __init__(self, status_code: int = 200, payload: Any = None, reason: str = "OK", json_error: bool = False):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload
        self._json_error = json_error

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._json_error:
            raise ValueError("No JSON object could be decoded")
        return self._payload


def identity_payload(
    email: Optional[str] = "ada@example.com",
    first_name: Optional[str] = "Ada",
    image: Optional[str] = "https://img.clerk.test/ada.png",
) -> Dict[str, Any]:
    return {
        "id": "user_ada",
        "email_addresses": [{"email_address": email}] if email else [],
        "first_name": first_name,
        "profile_image_url": image,
    }


def insight_payload(demand: str = "high", outlook: str = "positive") -> Dict[str, Any]:
    return {
        "salaryRanges": [
            {"role": "Analyst", "min": 60000, "max": 95000, "median": 78000, "location": "US"},
            {"role": "Controller", "min": 90000, "max": 150000, "median": 120000, "location": "US"},
        ],
        "growthRate": 4.5,
        "demandLevel": demand,
        "topSkills": ["Excel", "Financial Modeling"],
        "marketOutlook": outlook,
        "keyTrends": ["Automation", "Open banking"],
        "recommendedSkills": ["Python", "SQL"],
    }


MODULE_HOOK_EVENTS = []


class RecordingHook:
    """Collects (event, details) pairs emitted by update_profile."""

    def __init__(self):
        self.calls = []

    def __call__(self, event, **details):
        self.calls.append((event, details))

    @property
    def names(self):
        return [event for event, _ in self.calls]


def module_hook(event, **details):
    """Dotted-path hook target for COACH_PROFILE_UPDATE_HOOK tests."""
    MODULE_HOOK_EVENTS.append(event)
