import logging
from functools import lru_cache
from typing import Optional

import jwt
from django.conf import settings

from coach.services.session import CallerSession

logger = logging.getLogger("coach")

SESSION_COOKIE = "__session"


@lru_cache(maxsize=4)
def _jwks_client(jwks_url: str) -> jwt.PyJWKClient:
    return jwt.PyJWKClient(jwks_url, cache_keys=True)


def verify_session_token(token: str) -> Optional[str]:
    """
    Verify a Clerk session JWT (RS256, signed by the instance JWKS) and return
    its `sub` claim. Returns None for any invalid or unverifiable token.
    """
    if not token or not settings.CLERK_JWKS_URL:
        return None
    try:
        signing_key = _jwks_client(settings.CLERK_JWKS_URL).get_signing_key_from_jwt(token)
        claims = jwt.decode(
            token,
            signing_key.key,
            algorithms=["RS256"],
            options={"verify_aud": False, "require": ["exp", "sub"]},
            leeway=5,
        )
    except jwt.PyJWTError as e:
        logger.info("Rejected session token: %s", e)
        return None

    parties = settings.CLERK_AUTHORIZED_PARTIES
    if parties and claims.get("azp") not in parties:
        logger.warning("Rejected session token from unauthorized party azp=%s", claims.get("azp"))
        return None
    return claims.get("sub") or None


def _token_from_request(request) -> str:
    auth = request.headers.get("Authorization", "")
    if auth.lower().startswith("bearer "):
        return auth[7:].strip()
    return request.COOKIES.get(SESSION_COOKIE, "")


class IdentitySessionMiddleware:
    """
    Attaches `request.caller` (a CallerSession) to every request. Never blocks:
    views decide what an anonymous caller may do.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        external_id = verify_session_token(_token_from_request(request))
        request.caller = CallerSession(external_id=external_id)
        return self.get_response(request)
