# redis_resolver/store/base.py

"""
Abstract base class for location stores.
Defines the get/set contract the cached resolver relies on.
"""

from abc import ABC, abstractmethod
from typing import Any


class _Missing:
    """Marker type for "no entry under this key"."""

    _instance = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class BaseStore(ABC):
    """
    Abstract base class for location stores.
    All stores must implement this interface.
    """

    @abstractmethod
    def get(self, key: str) -> Any:
        """
        Retrieve a value from the store by its key.

        :param key: The key to look up in the store.
        :return: The stored value (None when a "not found" result was
            stored), or MISSING if there is no entry for the key.
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """
        Store a value under a key, without expiry.
        :param key: The key under which to store the value.
        :param value: A location string, or None for "not found".
        """
        raise NotImplementedError
