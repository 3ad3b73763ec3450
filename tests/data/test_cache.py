"""Tests for the Redis cache decorator (Redis itself is mocked)."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from parkwatch.config import Settings
from parkwatch.data.cache import _cache_key, cached
from parkwatch.errors import UpstreamQueryError


class Source:
    def __init__(self, fail: bool = False):
        self.calls = 0
        self.fail = fail

    @cached("test:query", ttl_seconds=60)
    async def query(self, params: dict) -> list[dict]:
        self.calls += 1
        if self.fail:
            raise UpstreamQueryError("FEMA query failed: 500", status_code=500)
        return [{"type": "Feature", "properties": {"n": self.calls}}]


@pytest.fixture
def enabled_settings():
    with patch("parkwatch.data.cache.settings") as mock_settings:
        mock_settings.redis_cache_enabled = True
        yield mock_settings


class TestCacheKey:
    def test_dict_argument_order_does_not_matter(self):
        a = _cache_key("nfhl:query", {"geometry": "1,2", "f": "geojson"})
        b = _cache_key("nfhl:query", {"f": "geojson", "geometry": "1,2"})
        assert a == b
        assert a.startswith("parkwatch:nfhl:query:")

    def test_different_arguments_differ(self):
        assert _cache_key("p", {"geometry": "1,2"}) != _cache_key("p", {"geometry": "1,3"})


class TestCachedDecorator:
    async def test_disabled_by_setting(self):
        with (
            patch("parkwatch.data.cache.settings") as mock_settings,
            patch("parkwatch.data.cache.get_redis", new_callable=AsyncMock) as mock_get_redis,
        ):
            mock_settings.redis_cache_enabled = False
            source = Source()
            await source.query({"geometry": "1,2"})

        mock_get_redis.assert_not_called()
        assert source.calls == 1

    async def test_cache_hit_skips_call(self, enabled_settings):
        fake_redis = MagicMock()
        fake_redis.get = AsyncMock(return_value=json.dumps([{"cached": True}]))
        fake_redis.setex = AsyncMock()

        with patch("parkwatch.data.cache.get_redis", new_callable=AsyncMock, return_value=fake_redis):
            source = Source()
            result = await source.query({"geometry": "1,2"})

        assert result == [{"cached": True}]
        assert source.calls == 0
        fake_redis.setex.assert_not_called()

    async def test_cache_miss_stores_result(self, enabled_settings):
        fake_redis = MagicMock()
        fake_redis.get = AsyncMock(return_value=None)
        fake_redis.setex = AsyncMock()

        with patch("parkwatch.data.cache.get_redis", new_callable=AsyncMock, return_value=fake_redis):
            result = await Source().query({"geometry": "1,2"})

        key, ttl, payload = fake_redis.setex.call_args.args
        assert key.startswith("parkwatch:test:query:")
        assert ttl == 60
        assert json.loads(payload) == result

    async def test_errors_are_not_cached(self, enabled_settings):
        fake_redis = MagicMock()
        fake_redis.get = AsyncMock(return_value=None)
        fake_redis.setex = AsyncMock()

        with patch("parkwatch.data.cache.get_redis", new_callable=AsyncMock, return_value=fake_redis):
            with pytest.raises(UpstreamQueryError):
                await Source(fail=True).query({"geometry": "1,2"})

        fake_redis.setex.assert_not_called()

    async def test_redis_outage_falls_through(self, enabled_settings):
        fake_redis = MagicMock()
        fake_redis.get = AsyncMock(side_effect=RedisConnectionError("down"))
        fake_redis.setex = AsyncMock(side_effect=RedisConnectionError("down"))

        with patch("parkwatch.data.cache.get_redis", new_callable=AsyncMock, return_value=fake_redis):
            source = Source()
            result = await source.query({"geometry": "1,2"})

        assert source.calls == 1
        assert result[0]["properties"]["n"] == 1


class TestCacheSetting:
    def test_cache_off_by_default(self, monkeypatch):
        monkeypatch.delenv("REDIS_CACHE_ENABLED", raising=False)
        assert Settings(_env_file=None).redis_cache_enabled is False

    def test_enabled_from_environment(self, monkeypatch):
        monkeypatch.setenv("REDIS_CACHE_ENABLED", "true")
        assert Settings(_env_file=None).redis_cache_enabled is True
