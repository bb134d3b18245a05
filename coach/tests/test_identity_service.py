from unittest import mock

import requests
from django.test import TestCase, override_settings

from coach.models import UserProfile
from coach.services.errors import ConflictError, IdentityLookupError
from coach.services.identity_service import (
    DEFAULT_EMAIL,
    DEFAULT_NAME,
    ensure_profile_exists,
)
from coach.tests.helpers import FakeHTTPResponse, identity_payload

REQUESTS_GET = "coach.services.identity_service.requests.get"


@override_settings(CLERK_API_URL="https://api.clerk.test", CLERK_SECRET_KEY="sk_test_unit", CLERK_TIMEOUT=7)
class EnsureProfileExistsTests(TestCase):

    def test_existing_profile_returned_without_remote_call(self):
        existing = UserProfile.objects.create(external_id="user_1", email="a@example.com", name="A")
        with mock.patch(REQUESTS_GET) as get:
            profile = ensure_profile_exists("user_1")
        get.assert_not_called()
        self.assertEqual(profile.pk, existing.pk)

    def test_unseen_id_fetches_and_creates_exactly_one_profile(self):
        with mock.patch(REQUESTS_GET, return_value=FakeHTTPResponse(payload=identity_payload())) as get:
            profile = ensure_profile_exists("user_ada")

        get.assert_called_once_with(
            "https://api.clerk.test/v1/users/user_ada",
            headers={"Authorization": "Bearer sk_test_unit"},
            timeout=7,
        )
        self.assertEqual(UserProfile.objects.filter(external_id="user_ada").count(), 1)
        self.assertEqual(profile.email, "ada@example.com")
        self.assertEqual(profile.name, "Ada")
        self.assertEqual(profile.image_url, "https://img.clerk.test/ada.png")
        self.assertIsNone(profile.industry)

    def test_missing_values_fall_back_to_placeholders(self):
        payload = identity_payload(email=None, first_name=None, image=None)
        with mock.patch(REQUESTS_GET, return_value=FakeHTTPResponse(payload=payload)):
            profile = ensure_profile_exists("user_blank")
        self.assertEqual(profile.email, DEFAULT_EMAIL)
        self.assertEqual(profile.name, DEFAULT_NAME)
        self.assertEqual(profile.image_url, "")

    def test_newer_image_url_key_is_accepted(self):
        payload = identity_payload()
        payload.pop("profile_image_url")
        payload["image_url"] = "https://img.clerk.test/new.png"
        with mock.patch(REQUESTS_GET, return_value=FakeHTTPResponse(payload=payload)):
            profile = ensure_profile_exists("user_new")
        self.assertEqual(profile.image_url, "https://img.clerk.test/new.png")

    def test_non_2xx_raises_and_writes_nothing(self):
        resp = FakeHTTPResponse(status_code=404, reason="Not Found", payload={"errors": [{"code": "not_found"}]})
        with mock.patch(REQUESTS_GET, return_value=resp):
            with self.assertRaises(IdentityLookupError):
                ensure_profile_exists("user_missing")
        self.assertFalse(UserProfile.objects.exists())

    def test_error_payload_raises(self):
        with mock.patch(REQUESTS_GET, return_value=FakeHTTPResponse(payload={"error": "bad key"})):
            with self.assertRaises(IdentityLookupError):
                ensure_profile_exists("user_x")
        self.assertFalse(UserProfile.objects.exists())

    def test_payload_missing_expected_fields_raises(self):
        with mock.patch(REQUESTS_GET, return_value=FakeHTTPResponse(payload={"id": "user_x"})):
            with self.assertRaises(IdentityLookupError):
                ensure_profile_exists("user_x")

    def test_non_json_body_raises(self):
        with mock.patch(REQUESTS_GET, return_value=FakeHTTPResponse(json_error=True)):
            with self.assertRaises(IdentityLookupError):
                ensure_profile_exists("user_x")

    def test_network_error_raises_identity_lookup_error(self):
        with mock.patch(REQUESTS_GET, side_effect=requests.ConnectionError("boom")):
            with self.assertRaises(IdentityLookupError):
                ensure_profile_exists("user_x")

    def test_empty_external_id_rejected(self):
        with self.assertRaises(IdentityLookupError):
            ensure_profile_exists("")

    def test_lost_creation_race_raises_conflict_and_keeps_one_row(self):
        """A concurrent request stores the profile while we are talking to the provider."""
        def _winner_then_payload(*args, **kwargs):
            UserProfile.objects.create(external_id="user_race", email="winner@example.com")
            return FakeHTTPResponse(payload=identity_payload())

        with mock.patch(REQUESTS_GET, side_effect=_winner_then_payload):
            with self.assertRaises(ConflictError):
                ensure_profile_exists("user_race")

        self.assertEqual(UserProfile.objects.filter(external_id="user_race").count(), 1)
        self.assertEqual(UserProfile.objects.get(external_id="user_race").email, "winner@example.com")
