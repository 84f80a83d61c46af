"""
Redis Device Repository - Infrastructure Layer

This module implements the device directory cache on top of Redis using
the cache-aside pattern: read the directory key, and on a miss fetch the
directory from the Govee API and store it with a TTL.
"""

from typing import Optional

import redis.asyncio as aioredis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from govee_web.domain.entities.device import DeviceDirectory
from govee_web.domain.entities.errors import (
    CacheConnectionError,
    CacheHealthCheckError,
    CacheReadError,
    CacheWriteError,
)
from govee_web.domain.gateways.govee_gateway import IGoveeGateway
from govee_web.domain.repositories.device_repository import IDeviceRepository
from govee_web.infrastructure.serialization import DirectoryCodec
from govee_web.shared import get_logger

logger = get_logger(__name__)

DEVICES_KEY = "govee_devices"
HEALTH_KEY = "govee_health_check"
HEALTH_SENTINEL = "hello"

_CONNECTION_ERRORS = (RedisConnectionError, RedisTimeoutError)


def create_redis_client(
    redis_uri: str, socket_timeout: Optional[float] = 5.0
) -> aioredis.Redis:
    """
    Build the process-wide Redis client.

    No connection is opened here; the pool connects lazily on first use.
    """
    return aioredis.from_url(
        redis_uri,
        socket_connect_timeout=socket_timeout,
        socket_timeout=socket_timeout,
        decode_responses=True,
    )


class RedisDeviceRepository(IDeviceRepository):
    """Redis-backed cache of the Govee device directory."""

    def __init__(
        self,
        redis_client: aioredis.Redis,
        govee_gateway: IGoveeGateway,
        ttl_seconds: int,
        codec: Optional[DirectoryCodec] = None,
    ):
        """
        Initialize the repository.

        Args:
            redis_client: Shared asyncio Redis client
            govee_gateway: Upstream client used on cache misses
            ttl_seconds: Expiry applied to the stored directory
            codec: Directory codec, mainly overridable in tests
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.redis = redis_client
        self.govee_gateway = govee_gateway
        self.ttl_seconds = ttl_seconds
        self.codec = codec or DirectoryCodec()

    async def list(self) -> DeviceDirectory:
        payload = await self._load()

        if payload is not None:
            logger.debug("device_repository.cache.hit", key=DEVICES_KEY)
            return self.codec.loads(payload)

        logger.debug("device_repository.cache.miss", key=DEVICES_KEY)
        directory = await self.govee_gateway.fetch_devices()

        try:
            await self._store(self.codec.dumps(directory))
        except CacheWriteError as exc:
            # Serve the fetched directory uncached
            logger.warning(
                "device_repository.cache.write_failed",
                key=DEVICES_KEY,
                error=str(exc.cause or exc),
            )

        return directory

    async def health_check(self) -> None:
        try:
            await self.redis.set(HEALTH_KEY, HEALTH_SENTINEL)
        except _CONNECTION_ERRORS as exc:
            raise CacheConnectionError(
                "Failed to get a redis connection", cause=exc
            ) from exc
        except RedisError as exc:
            raise CacheHealthCheckError(
                "Device repo health check failed", cause=exc
            ) from exc

    async def _load(self) -> Optional[str]:
        try:
            return await self.redis.get(DEVICES_KEY)
        except _CONNECTION_ERRORS as exc:
            raise CacheConnectionError(
                "Failed to get a redis connection", cause=exc
            ) from exc
        except RedisError as exc:
            raise CacheReadError(
                f"Failed attempting to get '{DEVICES_KEY}' from redis", cause=exc
            ) from exc

    async def _store(self, payload: str) -> None:
        try:
            await self.redis.setex(DEVICES_KEY, self.ttl_seconds, payload)
        except RedisError as exc:
            raise CacheWriteError(
                f"Failed attempting to set '{DEVICES_KEY}' in redis", cause=exc
            ) from exc
        logger.debug(
            "device_repository.cache.stored",
            key=DEVICES_KEY,
            ttl_seconds=self.ttl_seconds,
        )
