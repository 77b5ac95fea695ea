"""Shared fixtures: a dict-backed Redis mock and isolation of global state."""

import sys
from unittest.mock import MagicMock

import pytest
import redis

from redis_resolver import ResolverConfig
from redis_resolver.store import RedisStore

FIXTURE_PACKAGE = "rr_fixture"


class RecordingResolver:
    """Delegate returning canned locations and counting calls."""

    def __init__(self, locations=None):
        self.locations = dict(locations or {})
        self.calls = []

    def resolve(self, name):
        self.calls.append(name)
        return self.locations.get(name)

    def get_prefixes(self):
        return {"Foo": ["/fixtures"]}


@pytest.fixture
def redis_data():
    """Backing dict of the mocked Redis client."""
    return {}


@pytest.fixture
def redis_client(redis_data):
    """Redis client mock that keeps values in redis_data."""
    client = MagicMock(spec=redis.Redis)

    def _get(name):
        return redis_data.get(name)

    def _set(name, value, **kwargs):
        redis_data[name] = value
        return True

    client.get.side_effect = _get
    client.set.side_effect = _set
    return client


@pytest.fixture
def store(redis_client):
    return RedisStore(redis_client)


@pytest.fixture
def make_delegate():
    """Factory for RecordingResolver delegates."""
    return RecordingResolver


@pytest.fixture
def delegate():
    return RecordingResolver({"Foo\\Bar": "/fixtures/Bar.php"})


@pytest.fixture(autouse=True)
def _reset_config():
    ResolverConfig.reset()
    yield
    ResolverConfig.reset()


@pytest.fixture(autouse=True)
def _restore_import_state():
    meta_path = list(sys.meta_path)
    modules = set(sys.modules)
    yield
    sys.meta_path[:] = meta_path
    for name in set(sys.modules) - modules:
        if name.startswith(FIXTURE_PACKAGE):
            del sys.modules[name]
