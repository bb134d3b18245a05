from unittest import mock

from django.db import DatabaseError
from django.test import TestCase

from coach.models import UserProfile
from coach.services.profile_service import get_onboarding_status
from coach.services.session import CallerSession


class OnboardingStatusTests(TestCase):

    def test_no_session(self):
        self.assertEqual(get_onboarding_status(CallerSession.anonymous()), {"is_onboarded": False})
        self.assertEqual(get_onboarding_status(None), {"is_onboarded": False})

    def test_session_without_profile(self):
        self.assertEqual(get_onboarding_status(CallerSession("user_ghost")), {"is_onboarded": False})

    def test_profile_with_null_or_empty_industry(self):
        UserProfile.objects.create(external_id="user_null", email="n@example.com", industry=None)
        UserProfile.objects.create(external_id="user_empty", email="e@example.com", industry="")
        self.assertEqual(get_onboarding_status(CallerSession("user_null")), {"is_onboarded": False})
        self.assertEqual(get_onboarding_status(CallerSession("user_empty")), {"is_onboarded": False})

    def test_profile_with_industry(self):
        UserProfile.objects.create(external_id="user_tech", email="t@example.com", industry="Tech")
        self.assertEqual(get_onboarding_status(CallerSession("user_tech")), {"is_onboarded": True})

    def test_lookup_failure_degrades_to_not_onboarded(self):
        with mock.patch.object(UserProfile.objects, "filter", side_effect=DatabaseError("db down")):
            self.assertEqual(get_onboarding_status(CallerSession("user_tech")), {"is_onboarded": False})
