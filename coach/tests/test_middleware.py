import time
from types import SimpleNamespace
from unittest import mock

import jwt
from cryptography.hazmat.primitives.asymmetric import rsa
from django.http import HttpResponse
from django.test import RequestFactory, SimpleTestCase, override_settings

from coach.middleware import IdentitySessionMiddleware, verify_session_token

PRIVATE_KEY = rsa.generate_private_key(public_exponent=65537, key_size=2048)
OTHER_KEY = rsa.generate_private_key(public_exponent=65537, key_size=2048)


def _token(key=PRIVATE_KEY, **claims):
    now = int(time.time())
    payload = {"sub": "user_ada", "iat": now, "exp": now + 60, "azp": "https://app.test"}
    payload.update(claims)
    return jwt.encode(payload, key, algorithm="RS256")


@override_settings(CLERK_JWKS_URL="https://clerk.test/jwks", CLERK_AUTHORIZED_PARTIES=["https://app.test"])
class VerifySessionTokenTests(SimpleTestCase):

    def setUp(self):
        patcher = mock.patch("coach.middleware._jwks_client")
        jwks = patcher.start()
        self.addCleanup(patcher.stop)
        jwks.return_value.get_signing_key_from_jwt.return_value = SimpleNamespace(key=PRIVATE_KEY.public_key())

    def test_valid_token_returns_subject(self):
        self.assertEqual(verify_session_token(_token()), "user_ada")

    def test_expired_token_rejected(self):
        self.assertIsNone(verify_session_token(_token(exp=int(time.time()) - 3600)))

    def test_wrong_signature_rejected(self):
        self.assertIsNone(verify_session_token(_token(key=OTHER_KEY)))

    def test_unauthorized_party_rejected(self):
        self.assertIsNone(verify_session_token(_token(azp="https://evil.test")))

    @override_settings(CLERK_AUTHORIZED_PARTIES=[])
    def test_any_party_accepted_when_unrestricted(self):
        self.assertEqual(verify_session_token(_token(azp="https://elsewhere.test")), "user_ada")

    def test_garbage_and_empty_tokens(self):
        self.assertIsNone(verify_session_token("not-a-jwt"))
        self.assertIsNone(verify_session_token(""))


class IdentitySessionMiddlewareTests(SimpleTestCase):

    def setUp(self):
        self.factory = RequestFactory()
        self.middleware = IdentitySessionMiddleware(lambda request: HttpResponse("ok"))

    @mock.patch("coach.middleware.verify_session_token", return_value="user_ada")
    def test_bearer_header(self, verify):
        request = self.factory.get("/", HTTP_AUTHORIZATION="Bearer abc.def.ghi")
        self.middleware(request)
        verify.assert_called_once_with("abc.def.ghi")
        self.assertEqual(request.caller.external_id, "user_ada")
        self.assertTrue(request.caller.is_authenticated)

    @mock.patch("coach.middleware.verify_session_token", return_value="user_ada")
    def test_session_cookie(self, verify):
        request = self.factory.get("/")
        request.COOKIES["__session"] = "cookie.jwt.value"
        self.middleware(request)
        verify.assert_called_once_with("cookie.jwt.value")

    def test_no_token_is_anonymous(self):
        request = self.factory.get("/")
        response = self.middleware(request)
        self.assertEqual(response.status_code, 200)
        self.assertFalse(request.caller.is_authenticated)
