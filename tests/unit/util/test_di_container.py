"""Unit tests for container wiring."""

import pytest
from dishka import make_async_container

from peerrate.adapter.cache import Cache, InMemoryCache
from peerrate.config import AuthSettings, ListingSettings
from peerrate.domain.repository import UserRepository
from peerrate.persistence.repository.inmemory import InMemoryUserRepository
from peerrate.util.di import ProdConfigProvider
from peerrate.util.error import ConfigurationError
from tests.di import build_test_container
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def test_unknown_component_is_rejected():
    with pytest.raises(ValueError, match="Unknown components"):
        build_test_container(unmock={"bluesky"})


@pytest.mark.asyncio
async def test_mock_container_uses_in_memory_components(unit_env):
    assert isinstance(await unit_env.get(UserRepository), InMemoryUserRepository)
    assert isinstance(await unit_env.get(Cache), InMemoryCache)
    assert (await unit_env.get(ListingSettings)).page_size > 0


@pytest.mark.asyncio
async def test_default_secret_is_refused_in_production(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.delenv("AUTH__JWT_SECRET", raising=False)
    container = make_async_container(ProdConfigProvider())

    with pytest.raises(ConfigurationError, match="AUTH__JWT_SECRET"):
        await container.get(AuthSettings)

    await container.close()


@pytest.mark.asyncio
async def test_configured_secret_is_accepted_in_production(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("AUTH__JWT_SECRET", "a-real-secret")
    container = make_async_container(ProdConfigProvider())

    settings = await container.get(AuthSettings)

    assert settings.jwt_secret == "a-real-secret"
    await container.close()
