# redis_resolver/store/redis.py

from typing import Any

import redis

from .base import MISSING, BaseStore
from redis_resolver.serializer import serialize, deserialize


class RedisStore(BaseStore):
    """
    Redis store implementation.
    Uses redis-py for synchronous Redis operations; keys never expire.
    """

    def __init__(self, client: redis.Redis) -> None:
        self.client = client

    def get(self, key: str) -> Any:
        raw = self.client.get(key)

        if raw is None:
            return MISSING

        return deserialize(raw)

    def set(self, key: str, value: Any) -> None:
        data = serialize(value)

        self.client.set(name=key, value=data)
