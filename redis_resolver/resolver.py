from __future__ import annotations

import logging
import os
import sys
from typing import Any, Callable, Optional

from redis_resolver.config import ResolverConfig
from redis_resolver.exceptions import InvalidConfiguration
from redis_resolver.finder import CachedPathFinder
from redis_resolver.key_builder import DefaultKeyBuilder, KeyBuilder
from redis_resolver.store.base import MISSING, BaseStore

logger = logging.getLogger(__name__)


def _ensure_store(store: Any) -> None:
	if not isinstance(store, BaseStore):
		raise InvalidConfiguration(
			f"Store must implement BaseStore; got {type(store).__name__}."
		)


def _ensure_resolver(delegate: Any) -> None:
	if not callable(getattr(delegate, "resolve", None)):
		raise InvalidConfiguration(
			'The delegate resolver must implement a "resolve" method.'
		)


def resolve_through_cache(
	store: BaseStore,
	key: str,
	name: str,
	lookup: Callable[[str], Any],
) -> Optional[str]:
	"""Return the stored location for key, or look it up and store it.

	A stored None is a hit: negative results are cached too. Exceptions
	from the store or from lookup propagate and nothing is written.
	"""
	cached = store.get(key)
	if cached is not MISSING:
		logger.debug("resolve(%s): hit %s -> %r", name, key, cached)
		return cached

	location = lookup(name)
	if location is not None:
		location = os.fspath(location)

	store.set(key, location)
	logger.debug("resolve(%s): miss, stored %s -> %r", name, key, location)
	return location


class CachedResolver:
	"""Caches the lookups of a wrapped resolver in a key-value store.

	The wrapped object only needs a ``resolve(name)`` method returning a
	path or None. Any other attribute is read straight from it, so the
	cached resolver can stand in wherever the delegate was used::

		finder = DirectoryResolver()
		finder.add("myapp", "/srv/myapp/src")

		cached = CachedResolver(RedisStore(redis.Redis()), "myapp", finder)
		cached.register(prepend=True)
	"""

	def __init__(
		self,
		store: BaseStore,
		prefix: str,
		delegate: Any,
		*,
		key_builder: Optional[KeyBuilder] = None,
	) -> None:
		_ensure_resolver(delegate)
		_ensure_store(store)

		if key_builder is None:
			try:
				key_builder = DefaultKeyBuilder(prefix)
			except ValueError as e:
				raise InvalidConfiguration(str(e)) from e

		self._delegate = delegate
		self._store = store
		self._prefix = prefix
		self._key_builder = key_builder
		self._finder: Optional[CachedPathFinder] = None

	@classmethod
	def from_config(
		cls,
		delegate: Any,
		*,
		key_builder: Optional[KeyBuilder] = None,
	) -> CachedResolver:
		"""Build a resolver on the store and namespace held by ResolverConfig."""
		_ensure_resolver(delegate)
		return cls(
			ResolverConfig.get_store(),
			ResolverConfig.get_namespace(),
			delegate,
			key_builder=key_builder,
		)

	@property
	def delegate(self) -> Any:
		return self._delegate

	@property
	def prefix(self) -> str:
		return self._prefix

	def resolve(self, name: str) -> Optional[str]:
		"""Resolve name to a file path, consulting the store first."""
		key = self._key_builder.build(name)
		return resolve_through_cache(self._store, key, name, self._delegate.resolve)

	@property
	def is_registered(self) -> bool:
		return self._finder is not None and self._finder in sys.meta_path

	def register(self, prepend: bool = False) -> None:
		"""Install this resolver on sys.meta_path.

		With prepend=True it is consulted before the interpreter's own
		finders; otherwise only names they cannot find reach it.
		"""
		if self.is_registered:
			return

		self._finder = CachedPathFinder(self)
		if prepend:
			sys.meta_path.insert(0, self._finder)
		else:
			sys.meta_path.append(self._finder)
		logger.info("Registered cached resolver %s (prepend=%s)", self._prefix, prepend)

	def unregister(self) -> None:
		"""Remove this resolver from sys.meta_path."""
		if self._finder is None:
			return

		try:
			sys.meta_path.remove(self._finder)
		except ValueError:
			pass
		else:
			logger.info("Unregistered cached resolver %s", self._prefix)
		self._finder = None

	def __getattr__(self, name: str) -> Any:
		# Only called for attributes not found on the instance itself.
		try:
			delegate = self.__dict__["_delegate"]
		except KeyError:
			raise AttributeError(name) from None
		return getattr(delegate, name)

	def __repr__(self) -> str:
		return f"{type(self).__name__}(prefix={self._prefix!r}, delegate={self._delegate!r})"
