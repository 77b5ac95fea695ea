from redis_resolver.config import ResolverConfig
from redis_resolver.decorators import cached_resolver
from redis_resolver.exceptions import (
	InvalidConfiguration,
	ResolverError,
	ResolverNotInitializedError,
)
from redis_resolver.finder import CachedPathFinder
from redis_resolver.key_builder import DefaultKeyBuilder, KeyBuilder
from redis_resolver.path_resolver import DirectoryResolver
from redis_resolver.resolver import CachedResolver
from redis_resolver.store import MISSING, BaseStore, RedisStore

__all__ = [
	"ResolverConfig",
	"cached_resolver",
	"CachedResolver",
	"CachedPathFinder",
	"DirectoryResolver",
	"DefaultKeyBuilder",
	"KeyBuilder",
	"BaseStore",
	"RedisStore",
	"MISSING",
	"ResolverError",
	"InvalidConfiguration",
	"ResolverNotInitializedError",
]
