from unittest.mock import MagicMock

import pytest
import redis

from redis_resolver import (
    InvalidConfiguration,
    RedisStore,
    ResolverConfig,
    ResolverNotInitializedError,
)


@pytest.fixture
def from_url(monkeypatch, redis_client):
    factory = MagicMock(return_value=redis_client)
    monkeypatch.setattr(redis.Redis, "from_url", factory)
    return factory


def test_not_initialized():
    assert not ResolverConfig.is_initialized()
    with pytest.raises(ResolverNotInitializedError):
        ResolverConfig.get_store()
    with pytest.raises(ResolverNotInitializedError):
        ResolverConfig.get_namespace()


def test_init(store):
    ResolverConfig.init(store, namespace="myapp")

    assert ResolverConfig.is_initialized()
    assert ResolverConfig.get_store() is store
    assert ResolverConfig.get_namespace() == "myapp"


def test_double_init(store):
    ResolverConfig.init(store)

    with pytest.raises(InvalidConfiguration, match="already initialized"):
        ResolverConfig.init(store)


def test_init_rejects_non_store(redis_client):
    with pytest.raises(InvalidConfiguration):
        ResolverConfig.init(redis_client)
    assert not ResolverConfig.is_initialized()


def test_init_rejects_empty_namespace(store):
    with pytest.raises(InvalidConfiguration):
        ResolverConfig.init(store, namespace="")


def test_from_url_defaults(monkeypatch, from_url, redis_client):
    monkeypatch.delenv("REDIS_URL", raising=False)
    monkeypatch.delenv("REDIS_RESOLVER_NAMESPACE", raising=False)

    ResolverConfig.from_url()

    from_url.assert_called_once_with("redis://localhost:6379/0")
    assert isinstance(ResolverConfig.get_store(), RedisStore)
    assert ResolverConfig.get_store().client is redis_client
    assert ResolverConfig.get_namespace() == "redis-resolver"


def test_from_url_reads_environment(monkeypatch, from_url):
    monkeypatch.setenv("REDIS_URL", "redis://cache:6380/2")
    monkeypatch.setenv("REDIS_RESOLVER_NAMESPACE", "from-env")

    ResolverConfig.from_url()

    from_url.assert_called_once_with("redis://cache:6380/2")
    assert ResolverConfig.get_namespace() == "from-env"


def test_from_url_arguments_win(monkeypatch, from_url):
    monkeypatch.setenv("REDIS_URL", "redis://cache:6380/2")

    ResolverConfig.from_url("redis://other:6379/0", namespace="explicit")

    from_url.assert_called_once_with("redis://other:6379/0")
    assert ResolverConfig.get_namespace() == "explicit"


def test_reset_closes_owned_client(from_url, redis_client):
    ResolverConfig.from_url()
    ResolverConfig.reset()

    redis_client.close.assert_called_once()
    assert not ResolverConfig.is_initialized()


def test_reset_leaves_caller_client_open(store, redis_client):
    ResolverConfig.init(store)
    ResolverConfig.reset()

    redis_client.close.assert_not_called()


def test_from_url_closes_client_on_failure(store, from_url, redis_client):
    ResolverConfig.init(store)

    with pytest.raises(InvalidConfiguration):
        ResolverConfig.from_url()
    redis_client.close.assert_called_once()


def test_from_url_rejects_empty_namespace(monkeypatch, from_url, redis_client):
    monkeypatch.setenv("REDIS_RESOLVER_NAMESPACE", "from-env")

    with pytest.raises(InvalidConfiguration):
        ResolverConfig.from_url(namespace="")
    assert not ResolverConfig.is_initialized()
    redis_client.close.assert_called_once()


def test_from_url_passes_empty_url_through(monkeypatch, from_url):
    monkeypatch.setenv("REDIS_URL", "redis://cache:6380/2")

    ResolverConfig.from_url("")

    from_url.assert_called_once_with("")
