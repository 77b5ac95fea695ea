# redis_resolver/config.py

import logging
import os
from typing import Optional

import redis

from redis_resolver.exceptions import InvalidConfiguration, ResolverNotInitializedError
from redis_resolver.store.base import BaseStore
from redis_resolver.store.redis import RedisStore

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "redis-resolver"
DEFAULT_REDIS_URL = "redis://localhost:6379/0"


class ResolverConfig:
    """
    Global resolver configuration holder.

    This class manages the store and namespace used by
    CachedResolver.from_config() and the cached_resolver decorator.
    """

    _store: Optional[BaseStore] = None
    _namespace: str = DEFAULT_NAMESPACE
    _owned_client: Optional[redis.Redis] = None
    _initialized: bool = False

    @classmethod
    def init(
        cls,
        store: BaseStore,
        *,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        """
        Initialize the resolver configuration.

        This MUST be called once at application startup.

        Args:
            store: Store implementation (e.g. RedisStore)
            namespace: Prefix that separates this application's keys
                from other applications sharing the same Redis

        Raises:
            InvalidConfiguration: If store or namespace is invalid or
                config already initialized
        """
        if cls._initialized:
            raise InvalidConfiguration("ResolverConfig is already initialized.")

        if not isinstance(store, BaseStore):
            raise InvalidConfiguration(
                "Provided store does not implement BaseStore."
            )

        if not isinstance(namespace, str) or not namespace:
            raise InvalidConfiguration("Namespace must be a non-empty string.")

        cls._store = store
        cls._namespace = namespace
        cls._initialized = True
        logger.info("ResolverConfig initialized with namespace %s", namespace)

    @classmethod
    def from_url(
        cls,
        url: Optional[str] = None,
        *,
        namespace: Optional[str] = None,
    ) -> None:
        """
        Initialize the configuration with a Redis client built from a URL.

        Args:
            url: Redis URL; defaults to $REDIS_URL, then a local Redis
            namespace: Key namespace; defaults to $REDIS_RESOLVER_NAMESPACE

        Raises:
            InvalidConfiguration: As for init()
        """
        if url is None:
            url = os.getenv("REDIS_URL", DEFAULT_REDIS_URL)
        if namespace is None:
            namespace = os.getenv("REDIS_RESOLVER_NAMESPACE", DEFAULT_NAMESPACE)

        client = redis.Redis.from_url(url)
        try:
            cls.init(RedisStore(client), namespace=namespace)
        except InvalidConfiguration:
            client.close()
            raise
        cls._owned_client = client

    @classmethod
    def is_initialized(cls) -> bool:
        """Check whether the resolver configuration is initialized."""
        return cls._initialized

    @classmethod
    def get_store(cls) -> BaseStore:
        """
        Get the configured store.

        Raises:
            ResolverNotInitializedError: If config is not initialized

        Returns:
            Configured store
        """
        if not cls._initialized or cls._store is None:
            raise ResolverNotInitializedError(
                "ResolverConfig is not initialized. Call ResolverConfig.init() first."
            )
        return cls._store

    @classmethod
    def get_namespace(cls) -> str:
        """Get the configured key namespace."""
        if not cls._initialized:
            raise ResolverNotInitializedError(
                "ResolverConfig is not initialized. Call ResolverConfig.init() first."
            )
        return cls._namespace

    @classmethod
    def reset(cls) -> None:
        """
        Reset resolver configuration.

        Intended for testing ONLY.
        """
        if cls._owned_client is not None:
            cls._owned_client.close()
        cls._store = None
        cls._namespace = DEFAULT_NAMESPACE
        cls._owned_client = None
        cls._initialized = False
