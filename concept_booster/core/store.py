from __future__ import annotations

import json
import logging
from typing import Protocol

from redis.asyncio import Redis

from concept_booster.core.config import settings

logger = logging.getLogger(__name__)


class ProgressStore(Protocol):
    async def get(self, key: str) -> dict | None: ...

    async def set(self, key: str, value: dict) -> None: ...


class MemoryStore:
    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    async def connect(self) -> None:
        return None

    async def close(self) -> None:
        return None

    async def get(self, key: str) -> dict | None:
        value = self._store.get(key)
        return json.loads(value) if value else None

    async def set(self, key: str, value: dict) -> None:
        self._store[key] = json.dumps(value)


class RedisStore:
    def __init__(self, url: str) -> None:
        self.url = url
        self._redis: Redis | None = None

    async def connect(self) -> None:
        client = Redis.from_url(self.url, decode_responses=True)
        await client.ping()
        self._redis = client

    async def close(self) -> None:
        if self._redis:
            await self._redis.aclose()
            self._redis = None

    def _client(self) -> Redis:
        if self._redis is None:
            raise RuntimeError("Redis store used before connect()")
        return self._redis

    async def get(self, key: str) -> dict | None:
        value = await self._client().get(key)
        return json.loads(value) if value else None

    async def set(self, key: str, value: dict) -> None:
        await self._client().set(name=key, value=json.dumps(value))


def build_store(redis_url: str | None = None) -> MemoryStore | RedisStore:
    url = settings.redis_url if redis_url is None else redis_url
    if url:
        logger.info("Progress store backed by redis at %s", url)
        return RedisStore(url)
    return MemoryStore()


store = build_store()
