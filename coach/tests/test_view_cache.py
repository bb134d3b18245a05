import shutil
import tempfile

from django.core.cache import cache, caches
from django.http import HttpResponse
from django.test import RequestFactory, TestCase

from coach.services.session import CallerSession
from coach.services.view_cache import cache_rendered_view, invalidate_path


class CacheRenderedViewTests(TestCase):

    def setUp(self):
        cache.clear()
        self.factory = RequestFactory()
        self.addCleanup(cache.clear)
        self.renders = 0

        @cache_rendered_view(timeout=60)
        def view(request):
            self.renders += 1
            return HttpResponse(f"render {self.renders}")

        self.view = view

    def _get(self, external_id=None, path="/"):
        request = self.factory.get(path)
        request.caller = CallerSession(external_id=external_id)
        return self.view(request)

    def test_second_get_is_served_from_cache(self):
        self.assertEqual(self._get().content, b"render 1")
        self.assertEqual(self._get().content, b"render 1")
        self.assertEqual(self.renders, 1)

    def test_cache_is_per_caller(self):
        self._get("user_a")
        self._get("user_b")
        self._get("user_a")
        self.assertEqual(self.renders, 2)

    def test_invalidate_forces_rerender(self):
        self._get("user_a")
        invalidate_path("/")
        self.assertEqual(self._get("user_a").content, b"render 2")

    def test_invalidate_before_anything_cached(self):
        self.assertEqual(invalidate_path("/"), 2)
        self.assertEqual(invalidate_path("/"), 3)
        self._get()
        self._get()
        self.assertEqual(self.renders, 1)

    def test_invalidation_is_scoped_to_path(self):
        self._get(path="/other/")
        invalidate_path("/")
        self._get(path="/other/")
        self.assertEqual(self.renders, 1)

    def test_non_get_requests_bypass_cache(self):
        for _ in range(2):
            request = self.factory.post("/")
            request.caller = CallerSession.anonymous()
            self.view(request)
        self.assertEqual(self.renders, 2)

    def test_error_responses_are_not_cached(self):
        @cache_rendered_view(timeout=60)
        def failing(request):
            self.renders += 1
            return HttpResponse("nope", status=500)

        for _ in range(2):
            request = self.factory.get("/broken/")
            failing(request)
        self.assertEqual(self.renders, 2)


class SharedCacheInvalidationTests(TestCase):
    """Another worker sees the bumped version when the backend is shared."""

    def setUp(self):
        location = tempfile.mkdtemp(prefix="coach-cache-")
        self.addCleanup(shutil.rmtree, location, ignore_errors=True)
        shared = {"default": {
            "BACKEND": "django.core.cache.backends.filebased.FileBasedCache",
            "LOCATION": location,
        }}
        overrides = self.settings(CACHES=shared)
        overrides.enable()
        self.addCleanup(overrides.disable)

    def test_invalidation_visible_to_other_worker(self):
        other_worker = caches.create_connection("default")
        invalidate_path("/")
        self.assertEqual(other_worker.get("coach:viewcache:version:/"), 2)
