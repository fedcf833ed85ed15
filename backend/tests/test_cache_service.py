"""Tests for cache service."""

from unittest.mock import patch

import redis

from devconnector.integrations.cache import NullCacheService, create_cache_service


class TestNullCacheService:
    def test_get_returns_none(self):
        cache = NullCacheService()
        assert cache.get("any_key") is None

    def test_get_json_returns_none(self):
        cache = NullCacheService()
        cache.set_json("key", [{"name": "repo"}], 60)
        assert cache.get_json("key") is None


class TestCreateCacheService:
    def test_falls_back_when_redis_unreachable(self):
        with patch(
            "devconnector.integrations.cache.RedisCacheService",
            side_effect=redis.ConnectionError("refused"),
        ):
            cache = create_cache_service()
        assert isinstance(cache, NullCacheService)

    def test_falls_back_without_url(self):
        with patch("devconnector.integrations.cache.settings") as mock_settings:
            mock_settings.redis_url = ""
            assert isinstance(create_cache_service(), NullCacheService)
