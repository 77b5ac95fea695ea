# redis_resolver/finder.py

"""
Import-system adapter: exposes a cached resolver as a sys.meta_path finder.
"""

from __future__ import annotations

import importlib.abc
import importlib.util
import os
import threading
from importlib.machinery import ModuleSpec
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from redis_resolver.resolver import CachedResolver


class CachedPathFinder(importlib.abc.MetaPathFinder):
    """
    Meta path finder that locates modules through a CachedResolver.

    Returns None for names the resolver cannot place, so the next
    finder on sys.meta_path gets its turn.

    Imports triggered on the same thread while a lookup is in progress,
    such as lazy imports inside the Redis client, are left to the other
    finders instead of re-entering the resolver.
    """

    def __init__(self, resolver: CachedResolver) -> None:
        self.resolver = resolver
        self._state = threading.local()

    def find_spec(
        self,
        fullname: str,
        path: Optional[Sequence[str]] = None,
        target: object = None,
    ) -> Optional[ModuleSpec]:
        if getattr(self._state, "resolving", False):
            return None

        self._state.resolving = True
        try:
            location = self.resolver.resolve(fullname)
        finally:
            self._state.resolving = False

        if location is None:
            return None

        if os.path.basename(location) == "__init__.py":
            return importlib.util.spec_from_file_location(
                fullname,
                location,
                submodule_search_locations=[os.path.dirname(location)],
            )
        return importlib.util.spec_from_file_location(fullname, location)

    def invalidate_caches(self) -> None:
        # Cached locations are never invalidated.
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.resolver!r})"
