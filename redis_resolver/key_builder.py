# redis_resolver/key_builder.py

from __future__ import annotations

from typing import Protocol


class KeyBuilder(Protocol):
    """
    Interface for cache key builders.
    """

    def build(self, name: str) -> str:
        """
        Build the store key for a symbolic name.

        :param name: The name being resolved, e.g. "package.module".
        :return: A string representing the cache key.
        """
        ...


class DefaultKeyBuilder:
    """
    Default implementation of KeyBuilder.
    Joins an application prefix and the name verbatim, so the same
    (prefix, name) pair always maps to the same key.
    """

    def __init__(self, prefix: str, separator: str = ".") -> None:
        if not isinstance(prefix, str) or not prefix:
            raise ValueError("Cache key prefix must be a non-empty string.")
        self.prefix = prefix
        self.separator = separator

    def build(self, name: str) -> str:
        """
        Build the store key for a symbolic name.
        :param name: The name being resolved.

        :return: "<prefix><separator><name>"
        :raises ValueError: If name is not a non-empty string
        """
        if not isinstance(name, str) or not name:
            raise ValueError(f"Name to resolve must be a non-empty string; got {name!r}.")

        return f"{self.prefix}{self.separator}{name}"
