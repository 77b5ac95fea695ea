from redis_resolver.store.base import MISSING, BaseStore
from redis_resolver.store.redis import RedisStore

__all__ = ["MISSING", "BaseStore", "RedisStore"]
