from __future__ import annotations

import asyncio
import json

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import ResponseError
from redis.exceptions import TimeoutError as RedisTimeoutError

from govee_web.domain.entities.device import DeviceDirectory
from govee_web.domain.entities.errors import (
    CacheConnectionError,
    CacheHealthCheckError,
    CacheReadError,
    DirectorySerializationError,
    UpstreamError,
)
from govee_web.infrastructure.repositories.redis_device_repository import (
    DEVICES_KEY,
    HEALTH_KEY,
    HEALTH_SENTINEL,
    RedisDeviceRepository,
)
from govee_web.infrastructure.serialization import DirectoryCodec


@pytest.fixture()
def repository(fake_redis, stub_gateway) -> RedisDeviceRepository:
    return RedisDeviceRepository(
        redis_client=fake_redis, govee_gateway=stub_gateway, ttl_seconds=300
    )


def test_rejects_non_positive_ttl(fake_redis, stub_gateway) -> None:
    with pytest.raises(ValueError):
        RedisDeviceRepository(fake_redis, stub_gateway, ttl_seconds=0)


@pytest.mark.asyncio
async def test_hit_returns_cached_directory_without_upstream_call(
    repository, fake_redis, stub_gateway, sample_directory
) -> None:
    fake_redis.store[DEVICES_KEY] = DirectoryCodec().dumps(sample_directory)

    result = await repository.list()

    assert result == sample_directory
    assert stub_gateway.fetch_calls == 0
    assert fake_redis.setex_calls == []


@pytest.mark.asyncio
async def test_miss_fetches_once_and_writes_once_with_ttl(
    repository, fake_redis, stub_gateway, sample_directory
) -> None:
    result = await repository.list()

    assert result == sample_directory
    assert stub_gateway.fetch_calls == 1
    assert len(fake_redis.setex_calls) == 1
    key, ttl, payload = fake_redis.setex_calls[0]
    assert key == DEVICES_KEY
    assert ttl == 300
    assert DirectoryCodec().loads(payload) == sample_directory


@pytest.mark.asyncio
async def test_second_list_within_ttl_is_served_from_cache(
    repository, stub_gateway
) -> None:
    first = await repository.list()
    second = await repository.list()

    assert first == second
    assert stub_gateway.fetch_calls == 1


@pytest.mark.asyncio
async def test_expired_entry_is_refetched(repository, fake_redis, stub_gateway) -> None:
    await repository.list()
    fake_redis.expire_all()

    await repository.list()

    assert stub_gateway.fetch_calls == 2
    assert len(fake_redis.setex_calls) == 2


@pytest.mark.asyncio
async def test_write_failure_on_miss_still_returns_fresh_directory(
    repository, fake_redis, stub_gateway, sample_directory
) -> None:
    fake_redis.set_error = RedisConnectionError("connection reset")

    result = await repository.list()

    assert result == sample_directory
    assert stub_gateway.fetch_calls == 1
    assert len(fake_redis.setex_calls) == 1
    assert DEVICES_KEY not in fake_redis.store


@pytest.mark.asyncio
async def test_write_rejected_by_server_is_ignored(
    repository, fake_redis, sample_directory
) -> None:
    fake_redis.set_error = ResponseError("OOM command not allowed")

    assert await repository.list() == sample_directory


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [RedisConnectionError("Connection refused"), RedisTimeoutError("Timeout reading")],
)
async def test_unreachable_backend_is_fatal_and_skips_upstream(
    repository, fake_redis, stub_gateway, error
) -> None:
    fake_redis.get_error = error

    with pytest.raises(CacheConnectionError) as exc_info:
        await repository.list()

    assert exc_info.value.cause is error
    assert exc_info.value.__cause__ is error
    assert stub_gateway.fetch_calls == 0


@pytest.mark.asyncio
async def test_read_error_is_fatal_and_skips_upstream(
    repository, fake_redis, stub_gateway
) -> None:
    fake_redis.get_error = ResponseError("WRONGTYPE")

    with pytest.raises(CacheReadError):
        await repository.list()

    assert stub_gateway.fetch_calls == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        "not json at all",
        json.dumps([1, 2, 3]),
        json.dumps({"devices": "nope"}),
        json.dumps({"devices": [{"model": "H6159"}]}),
        json.dumps({"devices": [{"device": "bulb1", "properties": [1]}]}),
        json.dumps({"devices": [{"device": "bulb1", "properties": "abc"}]}),
        json.dumps({"devices": [{"device": "bulb1", "properties": {"colorTem": [1]}}]}),
        json.dumps(
            {"devices": [{"device": "bulb1", "properties": {"colorTem": {"range": 5}}}]}
        ),
        json.dumps({"devices": [{"device": "bulb1", "supportCmds": "turn"}]}),
    ],
)
async def test_corrupt_payload_is_fatal_and_not_treated_as_miss(
    repository, fake_redis, stub_gateway, payload
) -> None:
    fake_redis.store[DEVICES_KEY] = payload

    with pytest.raises(DirectorySerializationError):
        await repository.list()

    assert stub_gateway.fetch_calls == 0
    assert fake_redis.setex_calls == []


@pytest.mark.asyncio
async def test_upstream_failure_propagates_and_nothing_is_cached(
    repository, fake_redis, stub_gateway, upstream_failure
) -> None:
    stub_gateway.fetch_error = upstream_failure

    with pytest.raises(UpstreamError) as exc_info:
        await repository.list()

    assert exc_info.value is upstream_failure
    assert fake_redis.setex_calls == []


@pytest.mark.asyncio
async def test_concurrent_misses_each_fetch_and_write(
    repository, fake_redis, stub_gateway, sample_directory
) -> None:
    results = await asyncio.gather(repository.list(), repository.list())

    assert all(result == sample_directory for result in results)
    assert stub_gateway.fetch_calls == 2
    assert len(fake_redis.setex_calls) == 2


@pytest.mark.asyncio
async def test_empty_directory_is_cached(fake_redis, stub_gateway) -> None:
    stub_gateway.directory = DeviceDirectory()
    repository = RedisDeviceRepository(fake_redis, stub_gateway, ttl_seconds=60)

    assert len(await repository.list()) == 0
    assert len(await repository.list()) == 0
    assert stub_gateway.fetch_calls == 1


@pytest.mark.asyncio
async def test_health_check_writes_sentinel(repository, fake_redis) -> None:
    await repository.health_check()

    assert fake_redis.set_calls == [(HEALTH_KEY, HEALTH_SENTINEL)]


@pytest.mark.asyncio
async def test_health_check_reports_outage(repository, fake_redis) -> None:
    fake_redis.set_error = RedisConnectionError("Connection refused")

    with pytest.raises(CacheConnectionError):
        await repository.health_check()


@pytest.mark.asyncio
async def test_health_check_reports_write_failure(repository, fake_redis) -> None:
    fake_redis.set_error = ResponseError("READONLY")

    with pytest.raises(CacheHealthCheckError):
        await repository.health_check()
