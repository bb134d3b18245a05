"""
coach.services.view_cache

Per-path rendered page cache with version-based invalidation.

`invalidate_path("/")` bumps the version counter for "/", so every cached
variant of that page (one per caller) is ignored on the next request and
re-rendered. Old entries simply age out of the cache.
"""
import logging
from functools import wraps

from django.conf import settings
from django.core.cache import cache
from django.http import HttpResponse

from .session import caller_from_request

logger = logging.getLogger("coach")

_VERSION_KEY = "coach:viewcache:version:{path}"
_PAGE_KEY = "coach:viewcache:page:{path}:{version}:{caller}"


def _path_version(path: str) -> int:
    key = _VERSION_KEY.format(path=path)
    version = cache.get(key)
    if version is None:
        cache.add(key, 1, timeout=None)
        version = cache.get(key, 1)
    return version


def invalidate_path(path: str) -> int:
    """Mark every cached render of `path` stale. Returns the new version."""
    key = _VERSION_KEY.format(path=path)
    try:
        version = cache.incr(key)
    except ValueError:
        # No counter yet: nothing cached under version 1 can survive version 2
        version = 2
        cache.set(key, version, timeout=None)
    logger.info("View cache invalidated for %s (version=%s)", path, version)
    return version


def cache_rendered_view(timeout=None):
    """Cache successful GET renders per path, per caller and per path version."""
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            if request.method != "GET":
                return view_func(request, *args, **kwargs)

            caller = caller_from_request(request)
            path = request.path
            page_key = _PAGE_KEY.format(
                path=path,
                version=_path_version(path),
                caller=caller.external_id or "anonymous",
            )

            cached = cache.get(page_key)
            if cached is not None:
                content, content_type = cached
                return HttpResponse(content, content_type=content_type)

            response = view_func(request, *args, **kwargs)
            if response.status_code == 200 and not getattr(response, "streaming", False):
                ttl = timeout if timeout is not None else settings.COACH_VIEW_CACHE_TIMEOUT
                cache.set(page_key, (response.content, response["Content-Type"]), timeout=ttl)
            return response
        return wrapper
    return decorator
