from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Optional, TypeVar, Union

from redis_resolver.config import ResolverConfig
from redis_resolver.exceptions import InvalidConfiguration, ResolverNotInitializedError
from redis_resolver.key_builder import DefaultKeyBuilder, KeyBuilder
from redis_resolver.resolver import resolve_through_cache
from redis_resolver.store.base import BaseStore

R = TypeVar("R")
Location = Optional[str]


def _ensure_initialized() -> None:
	if not ResolverConfig.is_initialized():
		raise ResolverNotInitializedError(
			"ResolverConfig is not initialized. Call ResolverConfig.init(...) at startup."
		)


def _ensure_sync(func: Callable[..., Any]) -> None:
	if inspect.iscoroutinefunction(func):
		raise TypeError(
			f"cached_resolver requires a synchronous function; got {func.__qualname__}."
		)


def cached_resolver(
	*,
	namespace: str,
	store: Optional[BaseStore] = None,
	key_builder: Optional[KeyBuilder] = None,
) -> Callable[[Callable[[str], Union[R, None]]], Callable[[str], Location]]:
	"""Cache decorator for a plain resolver function.

	Reads from the store first; on a miss calls the function and stores the
	result, including None. Without an explicit store, the one configured
	through ResolverConfig is used.
	"""
	if store is not None and not isinstance(store, BaseStore):
		raise InvalidConfiguration("Provided store does not implement BaseStore.")

	if key_builder is None:
		try:
			key_builder = DefaultKeyBuilder(namespace)
		except ValueError as e:
			raise InvalidConfiguration(str(e)) from e

	def decorator(func: Callable[[str], Union[R, None]]) -> Callable[[str], Location]:
		_ensure_sync(func)

		@functools.wraps(func)
		def wrapper(name: str) -> Location:
			if store is None:
				_ensure_initialized()
			target = store if store is not None else ResolverConfig.get_store()

			cache_key = key_builder.build(name)
			return resolve_through_cache(target, cache_key, name, func)

		return wrapper

	return decorator
